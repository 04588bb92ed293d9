# apps/youtube/apps.py

from django.apps import AppConfig


class YoutubeConfig(AppConfig):
    """Configuração da app YouTube"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.youtube'
    verbose_name = 'YouTube - Publicações'
