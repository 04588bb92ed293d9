# apps/chat/serializers.py

from apps.core.serializers import serializar_perfil
from apps.core.utils import formatar_data


def serializar_mensagem(message):
    """Formato do frame ``chat_message`` e dos itens do histórico"""
    return {
        'id': message.id,
        'channelId': message.channel_id,
        'content': message.content,
        'sender': serializar_perfil(message.sender),
        'sentAt': formatar_data(message.sent_at),
    }


def serializar_canal(channel):
    """Canal com os membros (memberships pré-carregadas pelo storage)"""
    membros = []
    for membership in channel.memberships.all():
        membro = serializar_perfil(membership.user)
        membro['role'] = membership.user.role
        membro['isAdmin'] = membership.is_admin
        membros.append(membro)

    return {
        'id': channel.id,
        'name': channel.name,
        'description': channel.description,
        'isPrivate': channel.is_private,
        'isDirectMessage': channel.is_direct_message,
        'createdBy': channel.created_by_id,
        'createdAt': formatar_data(channel.created_at),
        'members': membros,
    }
