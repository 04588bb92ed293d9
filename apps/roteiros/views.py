# apps/roteiros/views.py

import logging

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.exceptions import NotFound, ValidationFailed
from apps.core.permissions import api_login_required, carregar_projeto
from apps.core.utils import carregar_json

from .forms import ScriptDataForm, CorrelationForm, PublishedFinalForm
from .serializers import serializar_roteiro, serializar_versao
from .storage import roteiros_storage

logger = logging.getLogger(__name__)


@require_http_methods(['GET', 'POST', 'PUT'])
@api_login_required
def script_data_view(request, project_id):
    """
    GET: roteiro do projeto (404 se ainda não existe)
    POST: cria o roteiro do projeto
    PUT: atualização parcial (autosave do editor)
    """
    principal = request.principal

    if request.method == 'GET':
        carregar_projeto(principal, project_id)
        script = roteiros_storage.get_script_data(project_id)
        if script is None:
            raise NotFound("Script data not found")
        return JsonResponse(serializar_roteiro(script))

    projeto = carregar_projeto(principal, project_id, nivel='edicao')

    if request.method == 'POST':
        if roteiros_storage.get_script_data(projeto.id) is not None:
            raise ValidationFailed("Script data already exists for this project")

        dados = ScriptDataForm(carregar_json(request)).dados_model()
        script = roteiros_storage.create_script_data(projeto.id, dados, principal.id)
        return JsonResponse(serializar_roteiro(script), status=201)

    script = roteiros_storage.get_script_data(projeto.id)
    if script is None:
        raise NotFound("Script data not found")

    dados = ScriptDataForm(carregar_json(request), partial=True).dados_model()
    script = roteiros_storage.update_script_data(projeto.id, dados)
    return JsonResponse(serializar_roteiro(script))


@require_http_methods(['POST'])
@api_login_required
def correlations_view(request, project_id):
    """Body: {text, shotNumber}"""
    projeto = carregar_projeto(request.principal, project_id, nivel='edicao')

    script = roteiros_storage.get_script_data(projeto.id)
    if script is None:
        raise NotFound("Script data not found")

    dados = CorrelationForm(carregar_json(request)).validar()
    script = roteiros_storage.correlate_text(script.id, dados['text'], dados['shotNumber'])
    return JsonResponse(serializar_roteiro(script), status=201)


@require_http_methods(['GET', 'POST'])
@api_login_required
def published_finals_view(request, project_id):
    principal = request.principal

    if request.method == 'GET':
        carregar_projeto(principal, project_id)
        versoes = roteiros_storage.get_published_finals(project_id)
        return JsonResponse([serializar_versao(v, incluir_conteudo=False) for v in versoes], safe=False)

    projeto = carregar_projeto(principal, project_id, nivel='edicao')
    dados = PublishedFinalForm(carregar_json(request)).dados_model()

    final = roteiros_storage.publish_final(projeto.id, dados, principal.id)
    return JsonResponse(serializar_versao(final), status=201)


@require_http_methods(['GET'])
@api_login_required
def published_final_detail_view(request, final_id):
    final = roteiros_storage.get_published_final(final_id)
    if final is None:
        raise NotFound("Published final not found")

    carregar_projeto(request.principal, final.project_id)
    return JsonResponse(serializar_versao(final))
