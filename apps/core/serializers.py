# apps/core/serializers.py

"""
Conversão de models para os dicionários JSON da API (camelCase)

Payloads de usuário nunca carregam a senha.
"""

from .utils import formatar_data


def serializar_usuario(user):
    if user is None:
        return None
    return {
        'id': user.id,
        'username': user.username,
        'displayName': user.display_name,
        'email': user.email,
        'avatarInitials': user.avatar_initials,
        'avatarColor': user.avatar_color,
        'role': user.role,
    }


def serializar_perfil(user):
    """Versão enxuta usada no chat (sender, typing)"""
    return {
        'id': user.id,
        'username': user.username,
        'displayName': user.display_name,
        'avatarInitials': user.avatar_initials,
        'avatarColor': user.avatar_color,
    }


def serializar_projeto(project, incluir_membros=True):
    dados = {
        'id': project.id,
        'name': project.name,
        'description': project.description,
        'type': project.type,
        'createdBy': project.created_by_id,
        'createdAt': formatar_data(project.created_at),
    }
    if incluir_membros:
        dados['members'] = [serializar_usuario(u) for u in project.members.all()]
    return dados


def serializar_coluna(column):
    return {
        'id': column.id,
        'projectId': column.project_id,
        'name': column.name,
        'color': column.color,
        'order': column.order,
    }


def serializar_conteudo(content):
    return {
        'id': content.id,
        'title': content.title,
        'description': content.description,
        'type': content.type,
        'columnId': content.column_id,
        'projectId': content.project_id,
        'assignedTo': content.assigned_to_id,
        'dueDate': formatar_data(content.due_date),
        'priority': content.priority,
        'progress': content.progress,
        'order': content.order,
        'createdBy': content.created_by_id,
        'createdAt': formatar_data(content.created_at),
    }


def serializar_conteudo_com_responsavel(content):
    """Cartão com ``assignee`` e ``attachmentCount`` (anotado pelo storage)"""
    dados = serializar_conteudo(content)
    dados['assignee'] = serializar_usuario(content.assigned_to) if content.assigned_to_id else None
    dados['attachmentCount'] = getattr(content, 'attachment_count', None)
    if dados['attachmentCount'] is None:
        dados['attachmentCount'] = content.attachments.count()
    return dados


def serializar_anexo(attachment):
    return {
        'id': attachment.id,
        'contentId': attachment.content_id,
        'name': attachment.name,
        'url': attachment.url,
        'createdBy': attachment.created_by_id,
        'createdAt': formatar_data(attachment.created_at),
    }
