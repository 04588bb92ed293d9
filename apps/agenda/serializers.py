# apps/agenda/serializers.py

from apps.core.utils import formatar_data


def serializar_evento(evento):
    return {
        'id': evento.id,
        'projectId': evento.project_id,
        'title': evento.title,
        'type': evento.type,
        'date': formatar_data(evento.date),
        'notes': evento.notes,
        'color': evento.color,
        'createdBy': evento.created_by_id,
        'createdAt': formatar_data(evento.created_at),
    }
