# apps/youtube/models.py

from django.conf import settings
from django.db import models

from apps.core.models import Project


class YoutubeVideo(models.Model):
    """Metadados de um vídeo do projeto (título, tags, agendamento)"""

    VISIBILITY_CHOICES = [
        ('private', 'Privado'),
        ('unlisted', 'Não listado'),
        ('public', 'Público'),
    ]

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='youtube_videos'
    )
    title = models.CharField(max_length=100)
    description = models.TextField(null=True, blank=True)
    tags = models.JSONField(default=list, blank=True)
    thumbnail_url = models.TextField(null=True, blank=True)
    video_url = models.TextField(null=True, blank=True)
    visibility = models.CharField(max_length=20, choices=VISIBILITY_CHOICES, default='private')
    category = models.CharField(max_length=100, null=True, blank=True)
    playlist = models.CharField(max_length=200, null=True, blank=True)
    scheduled_publish_time = models.DateTimeField(null=True, blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='youtube_videos'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'youtube_videos'
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title
