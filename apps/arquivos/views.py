# apps/arquivos/views.py

import logging

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.exceptions import NotFound, ValidationFailed
from apps.core.permissions import api_login_required, carregar_projeto, exigir_edicao_conteudo
from apps.core.utils import carregar_json

from .forms import FolderForm, FolderRenameForm, FileForm, FileUpdateForm
from .serializers import serializar_pasta, serializar_arquivo, serializar_conteudo_pasta
from .storage import arquivos_storage

logger = logging.getLogger(__name__)


def _pasta_ou_404(folder_id):
    folder = arquivos_storage.get_folder(folder_id)
    if folder is None:
        raise NotFound("Folder not found")
    return folder


def _arquivo_ou_404(file_id):
    arquivo = arquivos_storage.get_file(file_id)
    if arquivo is None:
        raise NotFound("File not found")
    return arquivo


def _validar_pasta_do_projeto(folder_id, project_id, campo):
    """A pasta de destino precisa existir e ser do mesmo projeto"""
    if folder_id is None:
        return
    folder = _pasta_ou_404(folder_id)
    if folder.project_id != project_id:
        raise ValidationFailed(f"{campo}: Folder belongs to another project")


# === NAVEGAÇÃO ===

@require_http_methods(['GET'])
@api_login_required
def folder_root_view(request, project_id):
    carregar_projeto(request.principal, project_id)
    conteudo = arquivos_storage.get_folder_contents(project_id)
    return JsonResponse(serializar_conteudo_pasta(conteudo))


@require_http_methods(['GET'])
@api_login_required
def project_folder_view(request, project_id, folder_id):
    carregar_projeto(request.principal, project_id)

    conteudo = arquivos_storage.get_folder_contents(project_id, folder_id)
    if conteudo is None:
        raise NotFound("Folder not found")
    return JsonResponse(serializar_conteudo_pasta(conteudo))


@require_http_methods(['GET'])
@api_login_required
def project_files_view(request, project_id):
    """Todos os arquivos do projeto, em qualquer pasta"""
    carregar_projeto(request.principal, project_id)
    arquivos = arquivos_storage.get_files(project_id)
    return JsonResponse([serializar_arquivo(a) for a in arquivos], safe=False)


# === PASTAS ===

@require_http_methods(['POST'])
@api_login_required
def folders_view(request):
    dados = FolderForm(carregar_json(request)).dados_model()

    projeto = carregar_projeto(request.principal, dados['project_id'], nivel='edicao')
    _validar_pasta_do_projeto(dados.get('parent_id'), projeto.id, 'parentId')

    dados['created_by_id'] = request.principal.id
    folder = arquivos_storage.create_folder(dados)
    return JsonResponse(serializar_pasta(folder), status=201)


@require_http_methods(['PUT', 'DELETE'])
@api_login_required
def folder_detail_view(request, folder_id):
    folder = _pasta_ou_404(folder_id)
    exigir_edicao_conteudo(request.principal, folder.project)

    if request.method == 'DELETE':
        contagens = arquivos_storage.delete_folder(folder.id)
        return JsonResponse({'message': 'Folder deleted successfully', 'deleted': contagens})

    dados = FolderRenameForm(carregar_json(request)).validar()
    folder = arquivos_storage.rename_folder(folder.id, dados['name'])
    return JsonResponse(serializar_pasta(folder))


# === ARQUIVOS ===

@require_http_methods(['POST'])
@api_login_required
def files_view(request):
    dados = FileForm(carregar_json(request)).dados_model()

    projeto = carregar_projeto(request.principal, dados['project_id'], nivel='edicao')
    _validar_pasta_do_projeto(dados.get('folder_id'), projeto.id, 'folderId')

    dados['created_by_id'] = request.principal.id
    arquivo = arquivos_storage.create_file(dados)
    return JsonResponse(serializar_arquivo(arquivo), status=201)


@require_http_methods(['GET', 'PUT', 'DELETE'])
@api_login_required
def file_detail_view(request, file_id):
    arquivo = _arquivo_ou_404(file_id)

    if request.method == 'GET':
        carregar_projeto(request.principal, arquivo.project_id)
        return JsonResponse(serializar_arquivo(arquivo))

    exigir_edicao_conteudo(request.principal, arquivo.project)

    if request.method == 'DELETE':
        arquivos_storage.delete_file(arquivo.id)
        return JsonResponse({'message': 'File deleted successfully'})

    dados = FileUpdateForm(carregar_json(request)).dados_model()
    _validar_pasta_do_projeto(dados.get('folder_id'), arquivo.project_id, 'folderId')

    arquivo = arquivos_storage.update_file(arquivo.id, dados)
    return JsonResponse(serializar_arquivo(arquivo))
