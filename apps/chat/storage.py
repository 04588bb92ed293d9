# apps/chat/storage.py

"""
Access layer do chat: canais, membros e mensagens
"""

import logging
from typing import Dict, Iterable, List, Optional

from django.conf import settings
from django.db import transaction
from django.db.models import Prefetch

from apps.core.models import User
from .models import ChatChannel, ChatChannelMember, ChatMessage

logger = logging.getLogger(__name__)


class ChatStorage:
    """Operações de CRUD do chat"""

    # === CANAIS ===

    def _com_membros(self, queryset):
        return queryset.prefetch_related(
            Prefetch(
                'memberships',
                queryset=ChatChannelMember.objects.select_related('user').order_by('joined_at', 'id'),
            )
        )

    def get_channel(self, channel_id) -> Optional[ChatChannel]:
        return self._com_membros(ChatChannel.objects.filter(id=channel_id)).first()

    def get_channels_for_user(self, user_id) -> List[ChatChannel]:
        """Canais em que o usuário participa, com os membros carregados"""
        return list(
            self._com_membros(
                ChatChannel.objects.filter(memberships__user_id=user_id).distinct()
            )
        )

    @transaction.atomic
    def create_channel(self, dados: Dict, created_by: User,
                       member_ids: Iterable[int] = ()) -> ChatChannel:
        """Cria o canal; o criador entra como admin do canal"""
        channel = ChatChannel.objects.create(created_by=created_by, **dados)
        ChatChannelMember.objects.create(channel=channel, user=created_by, is_admin=True)

        for member_id in member_ids:
            if member_id != created_by.id:
                self.add_channel_member(channel.id, member_id)

        logger.info(f"💬 Canal criado: {channel} por {created_by.username}")
        return self.get_channel(channel.id)

    @transaction.atomic
    def get_or_create_direct_channel(self, user: User, other: User) -> ChatChannel:
        """
        Conversa direta entre dois usuários

        Reaproveita a conversa existente do par, em qualquer ordem.
        """
        par = {user.id, other.id}
        candidatos = self._com_membros(
            ChatChannel.objects.filter(is_direct_message=True, memberships__user_id=user.id)
        )
        for canal in candidatos:
            if {m.user_id for m in canal.memberships.all()} == par:
                return canal

        return self.create_channel(
            {
                'name': f"{user.display_name}, {other.display_name}",
                'is_private': True,
                'is_direct_message': True,
            },
            created_by=user,
            member_ids=[other.id],
        )

    # === MEMBROS ===

    def add_channel_member(self, channel_id, user_id, is_admin=False) -> ChatChannelMember:
        """Idempotente"""
        member, _ = ChatChannelMember.objects.get_or_create(
            channel_id=channel_id,
            user_id=user_id,
            defaults={'is_admin': is_admin},
        )
        return member

    def remove_channel_member(self, channel_id, user_id) -> bool:
        apagados, _ = ChatChannelMember.objects.filter(channel_id=channel_id, user_id=user_id).delete()
        return apagados > 0

    def is_channel_member(self, channel_id, user_id) -> bool:
        return ChatChannelMember.objects.filter(channel_id=channel_id, user_id=user_id).exists()

    def is_channel_admin(self, channel_id, user_id) -> bool:
        return ChatChannelMember.objects.filter(
            channel_id=channel_id, user_id=user_id, is_admin=True
        ).exists()

    def get_channel_member_ids(self, channel_id) -> List[int]:
        return list(
            ChatChannelMember.objects
            .filter(channel_id=channel_id)
            .order_by('joined_at', 'id')
            .values_list('user_id', flat=True)
        )

    # === MENSAGENS ===

    def get_channel_messages(self, channel_id, limit=None) -> List[ChatMessage]:
        """
        Histórico cronológico (sent_at, depois id)

        Com ``limit`` devolve só as últimas N, ainda em ordem cronológica.
        Sem argumento usa CLAQUETE_CHAT_HISTORY_LIMIT (None = tudo).
        """
        if limit is None:
            limit = settings.CLAQUETE_CHAT_HISTORY_LIMIT

        queryset = ChatMessage.objects.filter(channel_id=channel_id).select_related('sender')
        if limit:
            ultimas = list(queryset.order_by('-sent_at', '-id')[:limit])
            return list(reversed(ultimas))
        return list(queryset.order_by('sent_at', 'id'))

    def create_message(self, channel_id, sender_id, content: str) -> ChatMessage:
        message = ChatMessage.objects.create(
            channel_id=channel_id,
            sender_id=sender_id,
            content=content,
        )
        return ChatMessage.objects.select_related('sender').get(id=message.id)


# Instância global do access layer do chat
chat_storage = ChatStorage()
