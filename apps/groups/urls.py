from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'groups'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.GroupViewSet, basename='group')

urlpatterns = [
    # Group ViewSet routes
    # GET    /api/groups/              - List user's groups
    # POST   /api/groups/              - Create group
    # GET    /api/groups/{id}/         - Get group details
    # DELETE /api/groups/{id}/         - Delete group (204) or open a vote (202)

    # Custom group actions
    # POST   /api/groups/join/                          - Join with invite code
    # GET    /api/groups/{id}/members/                  - List members
    # DELETE /api/groups/{id}/members/{membership_id}/  - Remove member (204) or open a vote (202)
    # GET    /api/groups/{id}/needs_voting/             - Whether destructive actions need a vote
    path('', include(router.urls)),
]
