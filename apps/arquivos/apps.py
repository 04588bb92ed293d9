# apps/arquivos/apps.py

from django.apps import AppConfig


class ArquivosConfig(AppConfig):
    """Configuração da app Arquivos"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.arquivos'
    verbose_name = 'Arquivos - Pastas do Projeto'
