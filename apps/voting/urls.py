from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'voting'

router = DefaultRouter()
router.register(r'', views.VoteViewSet, basename='vote')

urlpatterns = [
    # GET  /api/votes/?group=<id>&type=   - Pending votes of a group
    # GET  /api/votes/{id}/               - Vote details
    # POST /api/votes/{id}/approve/       - Add your vote
    # POST /api/votes/{id}/unvote/        - Withdraw your vote
    # POST /api/votes/{id}/cancel/        - Cancel (creator only)
    # POST /api/votes/{id}/reject/        - Discard a pending vote
    path('', include(router.urls)),
]
