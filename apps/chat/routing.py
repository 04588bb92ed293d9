# apps/chat/routing.py

from django.urls import re_path

from . import consumers
from .registry import ConnectionRegistry

# Um registry por processo, compartilhado por todos os sockets
registry = ConnectionRegistry()

# Rotas WebSocket do chat
websocket_urlpatterns = [
    re_path(r'^ws/$', consumers.ChatConsumer.as_asgi(registry=registry)),
    re_path(r'^ws/chat/$', consumers.ChatConsumer.as_asgi(registry=registry)),
]
