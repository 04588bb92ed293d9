# apps/board/views.py

import logging

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.exceptions import NotFound, ValidationFailed
from apps.core.permissions import api_login_required, carregar_projeto, exigir_edicao_conteudo
from apps.core.serializers import (
    serializar_coluna, serializar_conteudo, serializar_conteudo_com_responsavel,
    serializar_anexo
)
from apps.core.utils import carregar_json

from .forms import ColumnForm, ContentForm, ContentUpdateForm, MoveContentForm, AttachmentForm
from .storage import board_storage

logger = logging.getLogger(__name__)


def serializar_coluna_com_cartoes(column):
    dados = serializar_coluna(column)
    dados['contents'] = [serializar_conteudo_com_responsavel(c) for c in column.cards]
    return dados


def _coluna_ou_404(column_id):
    column = board_storage.get_column(column_id)
    if column is None:
        raise NotFound("Column not found")
    return column


def _conteudo_ou_404(content_id):
    content = board_storage.get_content(content_id)
    if content is None:
        raise NotFound("Content not found")
    return content


# === COLUNAS ===

@require_http_methods(['GET'])
@api_login_required
def project_columns_view(request, project_id):
    """
    Colunas do projeto com os cartões de cada uma
    Formato consumido pelo quadro Kanban
    """
    carregar_projeto(request.principal, project_id)
    colunas = board_storage.get_columns_with_contents(project_id)
    return JsonResponse([serializar_coluna_com_cartoes(c) for c in colunas], safe=False)


@require_http_methods(['POST'])
@api_login_required
def columns_view(request):
    form = ColumnForm(carregar_json(request))
    dados = form.dados_model()

    projeto = carregar_projeto(request.principal, dados.pop('project_id'), nivel='edicao')
    column = board_storage.create_column(projeto.id, dados)
    return JsonResponse(serializar_coluna(column), status=201)


@require_http_methods(['PUT', 'DELETE'])
@api_login_required
def column_detail_view(request, column_id):
    column = _coluna_ou_404(column_id)
    exigir_edicao_conteudo(request.principal, column.project)

    if request.method == 'DELETE':
        board_storage.delete_column(column.id)
        return JsonResponse({'message': 'Column deleted successfully'})

    form = ColumnForm(carregar_json(request), partial=True)
    column = board_storage.update_column(column.id, form.dados_model(excluir=('projectId',)))
    return JsonResponse(serializar_coluna(column))


# === CARTÕES ===

@require_http_methods(['POST'])
@api_login_required
def contents_view(request):
    """Cria cartão no fim da coluna"""
    form = ContentForm(carregar_json(request))
    dados = form.dados_model()

    projeto = carregar_projeto(request.principal, dados['project_id'], nivel='edicao')

    column = board_storage.get_column(dados['column_id'])
    if column is None or column.project_id != projeto.id:
        raise NotFound("Column not found")

    dados['created_by_id'] = request.principal.id
    content = board_storage.create_content(dados)
    return JsonResponse(serializar_conteudo(content), status=201)


@require_http_methods(['GET', 'PUT', 'DELETE'])
@api_login_required
def content_detail_view(request, content_id):
    content = _conteudo_ou_404(content_id)

    if request.method == 'GET':
        carregar_projeto(request.principal, content.project_id)
        content = board_storage.get_content_with_assignee(content.id)
        return JsonResponse(serializar_conteudo_com_responsavel(content))

    exigir_edicao_conteudo(request.principal, content.project)

    if request.method == 'DELETE':
        board_storage.delete_content(content.id)
        return JsonResponse({'message': 'Content deleted successfully'})

    form = ContentUpdateForm(carregar_json(request))
    content = board_storage.update_content(content.id, form.dados_model())
    return JsonResponse(serializar_conteudo(content))


@require_http_methods(['POST'])
@api_login_required
def move_content_view(request, content_id):
    """
    Move cartão entre colunas (drag-and-drop)
    Body: {columnId, order}
    """
    content = _conteudo_ou_404(content_id)
    exigir_edicao_conteudo(request.principal, content.project)

    dados = MoveContentForm(carregar_json(request)).validar()

    destino = board_storage.get_column(dados['columnId'])
    if destino is None:
        raise NotFound("Column not found")
    if destino.project_id != content.project_id:
        raise ValidationFailed("columnId: Column belongs to another project")

    content = board_storage.move_content(content.id, destino.id, dados['order'])
    return JsonResponse(serializar_conteudo(content))


# === ANEXOS ===

@require_http_methods(['GET'])
@api_login_required
def content_attachments_view(request, content_id):
    content = _conteudo_ou_404(content_id)
    carregar_projeto(request.principal, content.project_id)

    anexos = board_storage.get_attachments(content.id)
    return JsonResponse([serializar_anexo(a) for a in anexos], safe=False)


@require_http_methods(['POST'])
@api_login_required
def attachments_view(request):
    form = AttachmentForm(carregar_json(request))
    dados = form.dados_model()

    content = _conteudo_ou_404(dados['content_id'])
    exigir_edicao_conteudo(request.principal, content.project)

    dados['created_by_id'] = request.principal.id
    anexo = board_storage.create_attachment(dados)
    return JsonResponse(serializar_anexo(anexo), status=201)


@require_http_methods(['DELETE'])
@api_login_required
def attachment_detail_view(request, attachment_id):
    anexo = board_storage.get_attachment(attachment_id)
    if anexo is None:
        raise NotFound("Attachment not found")

    exigir_edicao_conteudo(request.principal, anexo.content.project)
    board_storage.delete_attachment(anexo.id)
    return JsonResponse({'message': 'Attachment deleted successfully'})
