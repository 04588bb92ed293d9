# apps/agenda/views.py

from datetime import MAXYEAR, MINYEAR

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.exceptions import NotFound, ValidationFailed
from apps.core.permissions import api_login_required, carregar_projeto
from apps.core.utils import carregar_json

from .forms import ScheduleEventForm
from .serializers import serializar_evento
from .storage import agenda_storage


@require_http_methods(['GET', 'POST'])
@api_login_required
def schedule_view(request, project_id):
    principal = request.principal

    if request.method == 'GET':
        carregar_projeto(principal, project_id)
        eventos = agenda_storage.get_events(project_id)
        return JsonResponse([serializar_evento(e) for e in eventos], safe=False)

    projeto = carregar_projeto(principal, project_id, nivel='edicao')
    dados = ScheduleEventForm(carregar_json(request)).dados_model()
    dados['project_id'] = projeto.id
    dados['created_by_id'] = principal.id

    evento = agenda_storage.create_event(dados)
    return JsonResponse(serializar_evento(evento), status=201)


@require_http_methods(['GET'])
@api_login_required
def schedule_month_view(request, project_id, year, month):
    """Eventos do mês; ``month`` vai de 1 a 12"""
    carregar_projeto(request.principal, project_id)

    if not 1 <= month <= 12:
        raise ValidationFailed("month: Must be between 1 and 12")

    if not MINYEAR <= year <= MAXYEAR:
        raise ValidationFailed(f"year: Must be between {MINYEAR} and {MAXYEAR}")

    eventos = agenda_storage.get_events_by_month(project_id, year, month)
    return JsonResponse([serializar_evento(e) for e in eventos], safe=False)


@require_http_methods(['PUT', 'DELETE'])
@api_login_required
def schedule_event_view(request, project_id, event_id):
    projeto = carregar_projeto(request.principal, project_id, nivel='edicao')

    evento = agenda_storage.get_event(event_id)
    if evento is None or evento.project_id != projeto.id:
        raise NotFound("Event not found")

    if request.method == 'DELETE':
        agenda_storage.delete_event(evento.id)
        return JsonResponse({'message': 'Event deleted successfully'})

    dados = ScheduleEventForm(carregar_json(request), partial=True).dados_model()
    evento = agenda_storage.update_event(evento.id, dados)
    return JsonResponse(serializar_evento(evento))
