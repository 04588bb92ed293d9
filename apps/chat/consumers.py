# apps/chat/consumers.py

import json
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncWebsocketConsumer
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.core.serializers import serializar_perfil
from apps.core.storage import storage
from .serializers import serializar_mensagem
from .storage import chat_storage

logger = logging.getLogger(__name__)


class ChatConsumer(AsyncWebsocketConsumer):
    """
    Relay WebSocket do chat

    Estados do socket: não autenticado -> autenticado -> em um canal.

    Frames recebidos: auth, join_channel, chat_message, typing, ping.
    Frames enviados: auth_success, channel_joined, message_history,
    chat_message, user_typing, pong, error.

    Erros viram frames ``error``; a conexão nunca é fechada por erro.
    A entrega entre sockets usa o channel layer endereçado pelo
    channel name que o ConnectionRegistry guarda para cada usuário.
    """

    registry = None

    def __init__(self, *args, registry=None, **kwargs):
        super().__init__(*args, **kwargs)
        if registry is not None:
            self.registry = registry
        if self.registry is None:
            raise ImproperlyConfigured("ChatConsumer precisa de um ConnectionRegistry")

        self.user_id = None
        self.perfil = None
        self.channel_id = None

    async def connect(self):
        """
        Aceita o socket; com CLAQUETE_CHAT_REQUIRE_SESSION recusa anônimos
        """
        if settings.CLAQUETE_CHAT_REQUIRE_SESSION and self._usuario_da_sessao() is None:
            logger.warning("❌ Conexão WebSocket rejeitada - sessão não autenticada")
            await self.close(code=4401)
            return

        await self.accept()
        logger.info(f"✅ WebSocket conectado - {self.channel_name}")

    async def disconnect(self, close_code):
        """
        Remove o socket do registry (se ainda for o socket do usuário)
        """
        if self.user_id is not None:
            self.registry.unregister(self.user_id, self.channel_name)
            logger.info(f"🔌 WebSocket desconectado - usuário {self.user_id}")

    async def receive(self, text_data=None, bytes_data=None):
        """
        Recebe frames do cliente e despacha pelo ``type``
        """
        try:
            data = json.loads(text_data or '')
        except json.JSONDecodeError:
            await self.send_error("Invalid message format")
            return

        if not isinstance(data, dict):
            await self.send_error("Invalid message format")
            return

        handlers = {
            'auth': self.handle_auth,
            'join_channel': self.handle_join_channel,
            'chat_message': self.handle_chat_message,
            'typing': self.handle_typing,
            'ping': self.handle_ping,
        }

        handler = handlers.get(data.get('type'))
        if handler is None:
            await self.send_error(f"Unknown message type: {data.get('type')}")
            return

        try:
            await handler(data)
        except Exception:
            logger.exception(f"❌ Erro no WebSocket receive ({data.get('type')})")
            await self.send_error("Server error")

    # === Handlers dos frames ===

    async def handle_auth(self, data):
        """
        Associa o socket a um usuário

        Sem usuário na sessão, o id informado pelo cliente é aceito como
        está; com sessão, o id precisa ser o da sessão.
        """
        user_id = self._como_id(data.get('userId'))
        if user_id is None:
            await self.send_error("userId is required")
            return

        usuario_sessao = self._usuario_da_sessao()
        if usuario_sessao is not None and usuario_sessao.id != user_id:
            await self.send_error("userId does not match the session user")
            return
        if usuario_sessao is None and settings.CLAQUETE_CHAT_REQUIRE_SESSION:
            await self.send_error("Authentication required")
            return

        perfil = await self.get_perfil(user_id)
        if perfil is None:
            await self.send_error("User not found")
            return

        # Socket reautenticado como outro usuário libera a entrada antiga
        if self.user_id is not None and self.user_id != user_id:
            self.registry.unregister(self.user_id, self.channel_name)
            self.channel_id = None

        self.user_id = user_id
        self.perfil = perfil
        self.registry.register(user_id, self.channel_name)

        await self.send_frame('auth_success', userId=user_id, user=perfil)
        logger.info(f"🔐 Socket autenticado - usuário {user_id}")

    async def handle_join_channel(self, data):
        if not await self.exigir_autenticacao():
            return

        channel_id = self._como_id(data.get('channelId'))
        if channel_id is None:
            await self.send_error("channelId is required")
            return

        if not await self.channel_exists(channel_id):
            await self.send_error("Channel not found")
            return

        if not await self.is_member(channel_id):
            await self.send_error("You are not a member of this channel")
            return

        self.channel_id = channel_id
        await self.send_frame('channel_joined', channelId=channel_id)

        historico = await self.get_history(channel_id)
        await self.send_frame('message_history', channelId=channel_id, messages=historico)

    async def handle_chat_message(self, data):
        if not await self.exigir_autenticacao():
            return

        channel_id = self._canal_do_frame(data)
        if channel_id is None:
            await self.send_error("No channel selected")
            return

        content = data.get('content')
        if not isinstance(content, str) or not content.strip():
            await self.send_error("Message content is required")
            return

        # Membership é verificada de novo a cada mensagem
        if not await self.is_member(channel_id):
            await self.send_error("You are not a member of this channel")
            return

        frame, member_ids = await self.save_message(channel_id, content)
        await self.deliver(member_ids, dict(frame, type='chat_message'))

    async def handle_typing(self, data):
        if not await self.exigir_autenticacao():
            return

        channel_id = self._canal_do_frame(data)
        if channel_id is None:
            await self.send_error("No channel selected")
            return

        if not await self.is_member(channel_id):
            await self.send_error("You are not a member of this channel")
            return

        member_ids = await self.get_member_ids(channel_id)
        frame = {
            'type': 'user_typing',
            'channelId': channel_id,
            'user': self.perfil,
            'isTyping': bool(data.get('isTyping', True)),
        }
        # Não enviar para o próprio usuário
        await self.deliver([m for m in member_ids if m != self.user_id], frame)

    async def handle_ping(self, data):
        await self.send_frame('pong')

    # === Entrega ===

    async def deliver(self, member_ids, frame):
        """
        Envia o frame para os membros com socket vivo
        Membros offline são ignorados (sem fila, sem retry)
        """
        conectados = self.registry.live_channels(member_ids)
        for channel_name in conectados.values():
            await self.channel_layer.send(channel_name, {
                'type': 'chat.frame',
                'frame': frame,
            })

    async def chat_frame(self, event):
        """
        Frame vindo de outro socket via channel layer
        """
        await self.send(text_data=json.dumps(event['frame']))

    # === Métodos auxiliares ===

    async def send_frame(self, frame_type, **payload):
        await self.send(text_data=json.dumps({'type': frame_type, **payload}))

    async def send_error(self, message):
        await self.send_frame('error', message=message)

    async def exigir_autenticacao(self):
        if self.user_id is None:
            await self.send_error("Not authenticated")
            return False
        return True

    def _usuario_da_sessao(self):
        user = self.scope.get('user')
        if user is not None and user.is_authenticated:
            return user
        return None

    def _canal_do_frame(self, data):
        if data.get('channelId') is not None:
            return self._como_id(data.get('channelId'))
        return self.channel_id

    @staticmethod
    def _como_id(valor):
        if isinstance(valor, bool):
            return None
        try:
            return int(valor)
        except (TypeError, ValueError):
            return None

    @database_sync_to_async
    def get_perfil(self, user_id):
        usuario = storage.get_user(user_id)
        return serializar_perfil(usuario) if usuario else None

    @database_sync_to_async
    def channel_exists(self, channel_id):
        return chat_storage.get_channel(channel_id) is not None

    @database_sync_to_async
    def is_member(self, channel_id):
        return chat_storage.is_channel_member(channel_id, self.user_id)

    @database_sync_to_async
    def get_member_ids(self, channel_id):
        return chat_storage.get_channel_member_ids(channel_id)

    @database_sync_to_async
    def get_history(self, channel_id):
        return [serializar_mensagem(m) for m in chat_storage.get_channel_messages(channel_id)]

    @database_sync_to_async
    def save_message(self, channel_id, content):
        """Persiste a mensagem e devolve (frame, ids dos membros)"""
        message = chat_storage.create_message(channel_id, self.user_id, content)
        return serializar_mensagem(message), chat_storage.get_channel_member_ids(channel_id)
