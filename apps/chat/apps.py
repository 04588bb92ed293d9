# apps/chat/apps.py

from django.apps import AppConfig


class ChatConfig(AppConfig):
    """Configuração da app Chat"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.chat'
    verbose_name = 'Chat - Tempo Real'

    def ready(self):
        """
        Inicialização da app
        """
        # Log de inicialização
        import logging
        logger = logging.getLogger(__name__)
        logger.info("🔌 Chat App inicializada - WebSockets habilitados")
