from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'household'

router = DefaultRouter()
router.register(r'tasks', views.TaskViewSet, basename='task')
router.register(r'routines', views.RoutineViewSet, basename='routine')
router.register(r'expenses', views.ExpenseViewSet, basename='expense')
router.register(r'notes', views.NoteViewSet, basename='note')

urlpatterns = [
    # GET|POST          /api/household/tasks/?group=<id>
    # GET|PATCH|DELETE  /api/household/tasks/{id}/
    # POST              /api/household/tasks/{id}/toggle/
    # same shape for routines/ and expenses/
    # DELETE answers 204 when deleted, 202 with the vote when one was opened
    # GET|POST          /api/household/notes/?group=<id>
    # GET|DELETE        /api/household/notes/{id}/   (author only, no vote)
    path('', include(router.urls)),
]
