# apps/youtube/urls.py

from django.urls import path
from . import views

app_name = 'youtube'

urlpatterns = [
    path('projects/<int:project_id>/youtube-videos', views.project_videos_view, name='project_videos'),
    path('youtube-videos', views.videos_view, name='videos'),
    path('youtube-videos/<int:video_id>', views.video_detail_view, name='video_detail'),
]
