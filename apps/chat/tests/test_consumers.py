# apps/chat/tests/test_consumers.py

from datetime import timedelta

from channels.db import database_sync_to_async
from channels.testing import WebsocketCommunicator
from django.test import TransactionTestCase
from django.utils import timezone

from apps.chat.consumers import ChatConsumer
from apps.chat.models import ChatMessage
from apps.chat.registry import ConnectionRegistry
from apps.chat.storage import chat_storage
from apps.core.tests.fabricas import criar_usuario


class ChatConsumerTest(TransactionTestCase):
    """
    Relay completo sobre o channel layer em memória

    TransactionTestCase: os handlers acessam o banco via
    database_sync_to_async, fora do atomic do TestCase.
    """

    def setUp(self):
        self.registry = ConnectionRegistry()
        self.ana = criar_usuario('ana')
        self.bia = criar_usuario('bia')
        self.caio = criar_usuario('caio')
        self.canal = chat_storage.create_channel({'name': 'general'}, self.ana, member_ids=[self.bia.id])

    async def conectar(self, usuario=None):
        communicator = WebsocketCommunicator(ChatConsumer.as_asgi(registry=self.registry), '/ws/')
        conectado, _ = await communicator.connect()
        self.assertTrue(conectado)

        if usuario is not None:
            await communicator.send_json_to({'type': 'auth', 'userId': usuario.id})
            resposta = await communicator.receive_json_from()
            self.assertEqual(resposta['type'], 'auth_success')
        return communicator

    async def entrar(self, communicator, channel_id):
        await communicator.send_json_to({'type': 'join_channel', 'channelId': channel_id})
        joined = await communicator.receive_json_from()
        historico = await communicator.receive_json_from()
        return joined, historico

    async def test_auth_devolve_perfil(self):
        communicator = await self.conectar()

        await communicator.send_json_to({'type': 'auth', 'userId': self.ana.id})
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta['type'], 'auth_success')
        self.assertEqual(resposta['userId'], self.ana.id)
        self.assertEqual(resposta['user']['username'], 'ana')
        self.assertIsNotNone(self.registry.get(self.ana.id))
        await communicator.disconnect()

    async def test_auth_usuario_desconhecido(self):
        communicator = await self.conectar()

        await communicator.send_json_to({'type': 'auth', 'userId': 9999})
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta, {'type': 'error', 'message': 'User not found'})
        self.assertEqual(len(self.registry), 0)
        await communicator.disconnect()

    async def test_mensagem_antes_do_auth(self):
        communicator = await self.conectar()

        await communicator.send_json_to({'type': 'chat_message', 'channelId': self.canal.id, 'content': 'oi'})
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta, {'type': 'error', 'message': 'Not authenticated'})

        # O socket continua aberto depois do erro
        await communicator.send_json_to({'type': 'ping'})
        self.assertEqual(await communicator.receive_json_from(), {'type': 'pong'})
        await communicator.disconnect()

    async def test_frame_invalido(self):
        communicator = await self.conectar()

        await communicator.send_to(text_data='isso nao e json')
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta, {'type': 'error', 'message': 'Invalid message format'})
        await communicator.disconnect()

    async def test_join_devolve_historico_em_ordem(self):
        agora = timezone.now()
        await self.criar_mensagens([
            (agora + timedelta(seconds=2), 'terceira'),
            (agora, 'primeira'),
            (agora + timedelta(seconds=1), 'segunda'),
        ])
        communicator = await self.conectar(self.ana)

        joined, historico = await self.entrar(communicator, self.canal.id)

        self.assertEqual(joined, {'type': 'channel_joined', 'channelId': self.canal.id})
        self.assertEqual(historico['type'], 'message_history')
        self.assertEqual([m['content'] for m in historico['messages']], ['primeira', 'segunda', 'terceira'])
        await communicator.disconnect()

    async def test_join_sem_ser_membro(self):
        communicator = await self.conectar(self.caio)

        await communicator.send_json_to({'type': 'join_channel', 'channelId': self.canal.id})
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta['type'], 'error')
        await communicator.disconnect()

    async def test_join_canal_inexistente(self):
        communicator = await self.conectar(self.ana)

        await communicator.send_json_to({'type': 'join_channel', 'channelId': 9999})
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta, {'type': 'error', 'message': 'Channel not found'})
        await communicator.disconnect()

    async def test_mensagem_entregue_so_aos_membros(self):
        ana = await self.conectar(self.ana)
        bia = await self.conectar(self.bia)
        caio = await self.conectar(self.caio)
        await self.entrar(ana, self.canal.id)

        await ana.send_json_to({'type': 'chat_message', 'content': 'Gravação amanhã às 8h'})

        para_ana = await ana.receive_json_from()
        para_bia = await bia.receive_json_from()

        self.assertEqual(para_ana['type'], 'chat_message')
        self.assertEqual(para_ana['content'], 'Gravação amanhã às 8h')
        self.assertEqual(para_ana['sender']['id'], self.ana.id)
        self.assertEqual(para_bia, para_ana)
        self.assertTrue(await caio.receive_nothing())

        self.assertEqual(await self.total_mensagens(), 1)

        for communicator in (ana, bia, caio):
            await communicator.disconnect()

    async def test_mensagem_sem_canal(self):
        communicator = await self.conectar(self.ana)

        await communicator.send_json_to({'type': 'chat_message', 'content': 'oi'})
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta, {'type': 'error', 'message': 'No channel selected'})
        await communicator.disconnect()

    async def test_mensagem_vazia(self):
        communicator = await self.conectar(self.ana)

        await communicator.send_json_to({'type': 'chat_message', 'channelId': self.canal.id, 'content': '   '})
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta, {'type': 'error', 'message': 'Message content is required'})
        self.assertEqual(await self.total_mensagens(), 0)
        await communicator.disconnect()

    async def test_typing_nao_volta_para_quem_digita(self):
        ana = await self.conectar(self.ana)
        bia = await self.conectar(self.bia)

        await ana.send_json_to({'type': 'typing', 'channelId': self.canal.id, 'isTyping': True})

        resposta = await bia.receive_json_from()
        self.assertEqual(resposta['type'], 'user_typing')
        self.assertEqual(resposta['user']['id'], self.ana.id)
        self.assertTrue(resposta['isTyping'])
        self.assertTrue(await ana.receive_nothing())

        await ana.disconnect()
        await bia.disconnect()

    async def test_disconnect_libera_registry(self):
        communicator = await self.conectar(self.ana)
        self.assertIn(self.ana.id, self.registry)

        await communicator.disconnect()
        self.assertNotIn(self.ana.id, self.registry)

    async def test_tipo_desconhecido(self):
        communicator = await self.conectar()

        await communicator.send_json_to({'type': 'dance'})
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta['type'], 'error')
        await communicator.disconnect()

    async def test_auth_diferente_do_usuario_da_sessao(self):
        communicator = WebsocketCommunicator(ChatConsumer.as_asgi(registry=self.registry), '/ws/')
        communicator.scope['user'] = self.ana
        conectado, _ = await communicator.connect()
        self.assertTrue(conectado)

        await communicator.send_json_to({'type': 'auth', 'userId': self.bia.id})
        resposta = await communicator.receive_json_from()

        self.assertEqual(resposta, {'type': 'error', 'message': 'userId does not match the session user'})
        self.assertIsNone(self.registry.get(self.bia.id))

        await communicator.send_json_to({'type': 'auth', 'userId': self.ana.id})
        resposta = await communicator.receive_json_from()
        self.assertEqual(resposta['type'], 'auth_success')
        await communicator.disconnect()

    async def test_sessao_obrigatoria_recusa_anonimo(self):
        communicator = WebsocketCommunicator(ChatConsumer.as_asgi(registry=self.registry), '/ws/')

        with self.settings(CLAQUETE_CHAT_REQUIRE_SESSION=True):
            conectado, codigo = await communicator.connect()

        self.assertFalse(conectado)
        self.assertEqual(codigo, 4401)

    async def test_sessao_obrigatoria_aceita_usuario_da_sessao(self):
        communicator = WebsocketCommunicator(ChatConsumer.as_asgi(registry=self.registry), '/ws/')
        communicator.scope['user'] = self.ana

        with self.settings(CLAQUETE_CHAT_REQUIRE_SESSION=True):
            conectado, _ = await communicator.connect()
            self.assertTrue(conectado)

            await communicator.send_json_to({'type': 'auth', 'userId': self.ana.id})
            resposta = await communicator.receive_json_from()

        self.assertEqual(resposta['type'], 'auth_success')
        await communicator.disconnect()

    async def test_sessao_obrigatoria_recusa_auth_anonimo(self):
        communicator = await self.conectar()

        with self.settings(CLAQUETE_CHAT_REQUIRE_SESSION=True):
            await communicator.send_json_to({'type': 'auth', 'userId': self.ana.id})
            resposta = await communicator.receive_json_from()

        self.assertEqual(resposta, {'type': 'error', 'message': 'Authentication required'})
        self.assertEqual(len(self.registry), 0)
        await communicator.disconnect()

    # === Auxiliares de banco ===

    async def criar_mensagens(self, mensagens):
        @database_sync_to_async
        def criar():
            for sent_at, texto in mensagens:
                ChatMessage.objects.create(channel=self.canal, sender=self.ana, content=texto, sent_at=sent_at)

        await criar()

    async def total_mensagens(self):
        return await database_sync_to_async(ChatMessage.objects.count)()
