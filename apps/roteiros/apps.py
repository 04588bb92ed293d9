# apps/roteiros/apps.py

from django.apps import AppConfig


class RoteirosConfig(AppConfig):
    """Configuração da app Roteiros"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.roteiros'
    verbose_name = 'Roteiros - Script e Decupagem'
