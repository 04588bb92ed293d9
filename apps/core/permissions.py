# apps/core/permissions.py

from functools import wraps

from .exceptions import NotAuthenticated, Forbidden, NotFound


class ClaquetePermissions:
    """
    Sistema de permissões do Claquete
    Baseado nos papéis: admin, producer, actor, employed

    Todas as checagens recebem o ``Principal`` do request.
    """

    @staticmethod
    def is_admin(principal):
        """Verifica se é administrador"""
        return principal is not None and principal.is_admin

    @staticmethod
    def pode_criar_projeto(principal):
        """Admin e produtores criam projetos"""
        return principal is not None and (principal.is_admin or principal.is_producer)

    @staticmethod
    def is_membro(principal, projeto):
        """Verifica se o principal é membro do projeto"""
        if principal is None:
            return False
        return projeto.members.filter(id=principal.id).exists()

    @staticmethod
    def tem_acesso_projeto(principal, projeto):
        """Leitura do projeto e dos sub-recursos: membro ou admin"""
        if principal is None:
            return False

        # Admin tem acesso a todos os projetos
        if principal.is_admin:
            return True

        # Outros usuários precisam ser membros
        return ClaquetePermissions.is_membro(principal, projeto)

    @staticmethod
    def pode_gerenciar_projeto(principal, projeto):
        """Editar/excluir projeto e membros: criador ou admin"""
        if principal is None:
            return False

        if principal.is_admin:
            return True

        return projeto.created_by_id == principal.id

    @staticmethod
    def pode_editar_conteudo(principal, projeto):
        """
        Escrita em quadro, arquivos, roteiro, agenda e YouTube

        Membro que não seja ``employed`` (somente leitura) ou admin.
        """
        if principal is None:
            return False

        if principal.is_admin:
            return True

        if principal.is_read_only:
            return False

        return ClaquetePermissions.is_membro(principal, projeto)


# Helpers para as views da API

def exigir_acesso_projeto(principal, projeto):
    """Levanta Forbidden se não puder ler o projeto"""
    if not ClaquetePermissions.tem_acesso_projeto(principal, projeto):
        raise Forbidden()


def exigir_gerencia_projeto(principal, projeto):
    """Levanta Forbidden se não puder gerenciar o projeto"""
    if not ClaquetePermissions.pode_gerenciar_projeto(principal, projeto):
        raise Forbidden()


def exigir_edicao_conteudo(principal, projeto):
    """Levanta Forbidden se não puder escrever no projeto"""
    if not ClaquetePermissions.pode_editar_conteudo(principal, projeto):
        raise Forbidden()


def carregar_projeto(principal, project_id, nivel='leitura'):
    """
    Busca o projeto e aplica a checagem do nível pedido

    nivel: 'leitura', 'edicao' ou 'gerencia'.
    Levanta NotFound (404) ou Forbidden (403).
    """
    from .storage import storage

    projeto = storage.get_project(project_id)
    if projeto is None:
        raise NotFound("Project not found")

    if nivel == 'gerencia':
        exigir_gerencia_projeto(principal, projeto)
    elif nivel == 'edicao':
        exigir_edicao_conteudo(principal, projeto)
    else:
        exigir_acesso_projeto(principal, projeto)

    return projeto


# Decoradores para views

def api_login_required(view_func):
    """
    Decorador que exige principal autenticado
    Retorna 401 JSON ao invés de redirecionar para o login
    """

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        if getattr(request, 'principal', None) is None:
            raise NotAuthenticated()
        return view_func(request, *args, **kwargs)

    return wrapped_view


def requer_admin(view_func):
    """Decorador que requer principal admin"""

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        if getattr(request, 'principal', None) is None:
            raise NotAuthenticated()
        if not ClaquetePermissions.is_admin(request.principal):
            raise Forbidden()
        return view_func(request, *args, **kwargs)

    return wrapped_view
