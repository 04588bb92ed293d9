# apps/core/views.py

import logging

from django.core.cache import cache
from django.db import connection, DatabaseError
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_http_methods

from .auth_service import auth_service  # Importando nosso serviço encapsulado
from .exceptions import ValidationFailed, NotAuthenticated, NotFound, Forbidden
from .forms import (
    RegisterForm, LoginForm, UserCreateForm, UserUpdateForm,
    ProjectForm, ProjectMemberForm
)
from .permissions import (
    ClaquetePermissions, api_login_required, requer_admin,
    carregar_projeto
)
from .serializers import serializar_usuario, serializar_projeto
from .storage import storage
from .utils import carregar_json

logger = logging.getLogger(__name__)


# === AUTENTICAÇÃO ===

@require_http_methods(['POST'])
def register_view(request):
    """
    Auto-cadastro usando o serviço encapsulado

    Já deixa a sessão aberta para o usuário criado.
    """
    form = RegisterForm(carregar_json(request))
    dados = form.dados_model()

    sucesso, mensagem, usuario = auth_service.registrar_usuario(request, dados)
    if not sucesso:
        raise ValidationFailed(mensagem)

    return JsonResponse(serializar_usuario(usuario), status=201)


@require_http_methods(['POST'])
def login_view(request):
    """Login por username ou email"""
    form = LoginForm(carregar_json(request))
    dados = form.validar()

    sucesso, mensagem, usuario = auth_service.fazer_login(
        request, dados['username'], dados['password']
    )
    if not sucesso:
        raise NotAuthenticated(mensagem)

    return JsonResponse(serializar_usuario(usuario))


@require_http_methods(['POST'])
def logout_view(request):
    auth_service.fazer_logout(request)
    return JsonResponse({'message': 'Logged out successfully'})


@ensure_csrf_cookie
@require_http_methods(['GET'])
@api_login_required
def me_view(request):
    """Usuário da sessão (também entrega o cookie de CSRF ao cliente)"""
    return JsonResponse(serializar_usuario(storage.get_user(request.principal.id)))


# === USUÁRIOS ===

@require_http_methods(['GET', 'POST'])
@api_login_required
def users_view(request):
    if request.method == 'POST':
        return _criar_usuario(request)

    usuarios = storage.get_users()
    return JsonResponse([serializar_usuario(u) for u in usuarios], safe=False)


@requer_admin
def _criar_usuario(request):
    """Admin cria usuário já com o papel escolhido"""
    form = UserCreateForm(carregar_json(request))
    dados = form.dados_model()
    dados['role'] = dados.get('role') or 'employed'

    usuario = storage.create_user(dados)
    return JsonResponse(serializar_usuario(usuario), status=201)


@require_http_methods(['GET', 'PATCH'])
@api_login_required
def user_detail_view(request, user_id):
    usuario = storage.get_user(user_id)
    if usuario is None:
        raise NotFound("User not found")

    if request.method == 'PATCH':
        return _atualizar_usuario(request, usuario)

    return JsonResponse(serializar_usuario(usuario))


@requer_admin
def _atualizar_usuario(request, usuario):
    form = UserUpdateForm(carregar_json(request), instance=usuario)
    usuario = storage.update_user(usuario.id, form.dados_model())
    logger.info(f"✏️ Usuário atualizado: {usuario.username} por {request.principal.username}")
    return JsonResponse(serializar_usuario(usuario))


# === PROJETOS ===

@require_http_methods(['GET', 'POST'])
@api_login_required
def projects_view(request):
    """
    GET: projetos do usuário (admin vê todos)
    POST: cria projeto com colunas padrão
    """
    principal = request.principal

    if request.method == 'POST':
        if not ClaquetePermissions.pode_criar_projeto(principal):
            raise Forbidden()

        form = ProjectForm(carregar_json(request))
        dados = form.dados_model(excluir=('memberIds',))
        projeto = storage.create_project(
            dados,
            created_by=storage.get_user(principal.id),
            member_ids=form.cleaned_data['memberIds'],
        )
        return JsonResponse(serializar_projeto(projeto), status=201)

    if ClaquetePermissions.is_admin(principal):
        projetos = storage.get_all_projects()
    else:
        projetos = storage.get_projects_by_user_id(principal.id)

    return JsonResponse([serializar_projeto(p) for p in projetos], safe=False)


@require_http_methods(['GET', 'PUT', 'DELETE'])
@api_login_required
def project_detail_view(request, project_id):
    principal = request.principal

    if request.method == 'GET':
        carregar_projeto(principal, project_id)
        projeto = storage.get_project_with_members(project_id)
        return JsonResponse(serializar_projeto(projeto))

    projeto = carregar_projeto(principal, project_id, nivel='gerencia')

    if request.method == 'PUT':
        form = ProjectForm(carregar_json(request), partial=True)
        projeto = storage.update_project(projeto.id, form.dados_model(excluir=('memberIds',)))
        return JsonResponse(serializar_projeto(projeto))

    contagens = storage.delete_project(projeto.id)
    return JsonResponse({'message': 'Project deleted successfully', 'deleted': contagens})


@require_http_methods(['GET', 'POST'])
@api_login_required
def project_members_view(request, project_id):
    principal = request.principal

    if request.method == 'GET':
        carregar_projeto(principal, project_id)
        membros = storage.get_project_members(project_id)
        return JsonResponse([serializar_usuario(u) for u in membros], safe=False)

    projeto = carregar_projeto(principal, project_id, nivel='gerencia')
    dados = ProjectMemberForm(carregar_json(request)).validar()

    usuario = storage.get_user(dados['userId'])
    if usuario is None:
        raise NotFound("User not found")

    storage.add_project_member(projeto.id, usuario.id)
    return JsonResponse(serializar_usuario(usuario), status=201)


@require_http_methods(['DELETE'])
@api_login_required
def project_member_detail_view(request, project_id, user_id):
    projeto = carregar_projeto(request.principal, project_id, nivel='gerencia')

    if projeto.created_by_id == user_id:
        raise ValidationFailed("Cannot remove project creator")

    if not storage.remove_project_member(projeto.id, user_id):
        raise NotFound("Member not found")

    return JsonResponse({'message': 'Member removed successfully'})


# === MONITORAMENTO ===

@ensure_csrf_cookie
@require_http_methods(['GET'])
def health_check(request):
    """
    Health check para monitoramento (sem autenticação)
    """
    status = {
        'status': 'healthy',
        'database': 'ok',
        'cache': 'ok',
        'timestamp': timezone.now().isoformat(),
    }

    try:
        # Verificar conexão com banco
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError as e:
        logger.error(f"❌ Health check: banco indisponível: {e}")
        status['status'] = 'unhealthy'
        status['database'] = 'error'

    try:
        # Verificar cache (Redis em produção)
        cache.set('health_check', 'ok', 60)
        if cache.get('health_check') != 'ok':
            raise ConnectionError('cache não devolveu o valor gravado')
    except Exception as e:
        logger.error(f"❌ Health check: cache indisponível: {e}")
        status['status'] = 'unhealthy'
        status['cache'] = 'error'

    return JsonResponse(status, status=200 if status['status'] == 'healthy' else 503)


def csrf_failure(request, reason=''):
    """Falha de CSRF no formato JSON da API"""
    logger.warning(f"🛡️ CSRF rejeitado em {request.path}: {reason}")
    return JsonResponse({'message': 'CSRF verification failed'}, status=403)
