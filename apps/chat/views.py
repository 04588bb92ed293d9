# apps/chat/views.py

import logging

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.exceptions import Forbidden, NotFound, ValidationFailed
from apps.core.permissions import ClaquetePermissions, api_login_required
from apps.core.storage import storage
from apps.core.utils import carregar_json

from .forms import ChannelForm, DirectChannelForm, ChannelMemberForm
from .serializers import serializar_canal, serializar_mensagem
from .storage import chat_storage

logger = logging.getLogger(__name__)


def _canal_de_membro(principal, channel_id):
    """Canal que o principal pode ler (membro); 404/403 caso contrário"""
    channel = chat_storage.get_channel(channel_id)
    if channel is None:
        raise NotFound("Channel not found")
    if not chat_storage.is_channel_member(channel.id, principal.id):
        raise Forbidden()
    return channel


def _exigir_admin_canal(principal, channel_id):
    channel = chat_storage.get_channel(channel_id)
    if channel is None:
        raise NotFound("Channel not found")

    if not (ClaquetePermissions.is_admin(principal)
            or chat_storage.is_channel_admin(channel.id, principal.id)):
        raise Forbidden()
    return channel


@require_http_methods(['GET', 'POST'])
@api_login_required
def channels_view(request):
    """
    GET: canais do usuário com os membros
    POST: cria canal; o criador entra como admin
    """
    principal = request.principal

    if request.method == 'POST':
        form = ChannelForm(carregar_json(request))
        dados = form.dados_model(excluir=('memberIds',))
        channel = chat_storage.create_channel(
            dados,
            created_by=storage.get_user(principal.id),
            member_ids=form.cleaned_data['memberIds'],
        )
        return JsonResponse(serializar_canal(channel), status=201)

    canais = chat_storage.get_channels_for_user(principal.id)
    return JsonResponse([serializar_canal(c) for c in canais], safe=False)


@require_http_methods(['POST'])
@api_login_required
def direct_channel_view(request):
    """Abre (ou reaproveita) a conversa direta com outro usuário"""
    dados = DirectChannelForm(carregar_json(request)).validar()

    if dados['otherUserId'] == request.principal.id:
        raise ValidationFailed("otherUserId: Cannot open a direct message with yourself")

    outro = storage.get_user(dados['otherUserId'])
    if outro is None:
        raise NotFound("User not found")

    channel = chat_storage.get_or_create_direct_channel(storage.get_user(request.principal.id), outro)
    return JsonResponse(serializar_canal(channel))


@require_http_methods(['GET'])
@api_login_required
def channel_detail_view(request, channel_id):
    channel = _canal_de_membro(request.principal, channel_id)
    return JsonResponse(serializar_canal(channel))


@require_http_methods(['GET'])
@api_login_required
def channel_messages_view(request, channel_id):
    """Histórico do canal em ordem cronológica (?limit=N para as últimas N)"""
    channel = _canal_de_membro(request.principal, channel_id)

    limit = request.GET.get('limit')
    if limit is not None:
        if not limit.isdigit() or int(limit) < 1:
            raise ValidationFailed("limit: Must be a positive integer")
        limit = int(limit)

    mensagens = chat_storage.get_channel_messages(channel.id, limit=limit)
    return JsonResponse([serializar_mensagem(m) for m in mensagens], safe=False)


@require_http_methods(['POST'])
@api_login_required
def channel_members_view(request, channel_id):
    channel = _exigir_admin_canal(request.principal, channel_id)
    dados = ChannelMemberForm(carregar_json(request)).validar()

    usuario = storage.get_user(dados['userId'])
    if usuario is None:
        raise NotFound("User not found")

    chat_storage.add_channel_member(channel.id, usuario.id, is_admin=dados['isAdmin'])
    logger.info(f"👥 {usuario.username} adicionado a {channel} por {request.principal.username}")
    return JsonResponse(serializar_canal(chat_storage.get_channel(channel.id)), status=201)


@require_http_methods(['DELETE'])
@api_login_required
def channel_member_detail_view(request, channel_id, user_id):
    """Admin do canal remove membros; qualquer membro pode sair"""
    if user_id == request.principal.id:
        channel = _canal_de_membro(request.principal, channel_id)
    else:
        channel = _exigir_admin_canal(request.principal, channel_id)

    if not chat_storage.remove_channel_member(channel.id, user_id):
        raise NotFound("Member not found")

    return JsonResponse({'message': 'Member removed successfully'})
