# apps/chat/models.py

from django.conf import settings
from django.db import models
from django.utils import timezone


class ChatChannel(models.Model):
    """Canal de chat (sala da equipe ou conversa direta entre dois usuários)"""

    name = models.CharField(max_length=100)
    description = models.TextField(null=True, blank=True)
    is_private = models.BooleanField(default=False)
    is_direct_message = models.BooleanField(default=False)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='created_chat_channels'
    )
    members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        through='ChatChannelMember',
        related_name='chat_channels'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'chat_channels'
        ordering = ['name', 'id']

    def __str__(self):
        prefixo = '@' if self.is_direct_message else '#'
        return f"{prefixo}{self.name}"


class ChatChannelMember(models.Model):
    """Participação em canal; ``is_admin`` gerencia os membros"""

    channel = models.ForeignKey(
        ChatChannel,
        on_delete=models.CASCADE,
        related_name='memberships'
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='chat_memberships'
    )
    is_admin = models.BooleanField(default=False)
    joined_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'chat_channel_members'
        unique_together = ['channel', 'user']

    def __str__(self):
        return f"{self.user.username} em {self.channel}"


class ChatMessage(models.Model):
    """Mensagem persistida; o histórico é lido em ordem cronológica"""

    channel = models.ForeignKey(
        ChatChannel,
        on_delete=models.CASCADE,
        related_name='messages'
    )
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='chat_messages'
    )
    content = models.TextField()
    sent_at = models.DateTimeField(default=timezone.now, db_index=True)

    class Meta:
        db_table = 'chat_messages'
        ordering = ['sent_at', 'id']

    def __str__(self):
        return f"{self.sender.username}: {self.content[:40]}"
