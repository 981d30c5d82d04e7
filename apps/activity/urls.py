from django.urls import path
from . import views

app_name = 'activity'

urlpatterns = [
    # GET /api/activity/?group=<uuid>  - Group activity feed
    path('', views.group_feed, name='feed'),
]
