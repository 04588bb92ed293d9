# apps/agenda/storage.py

import calendar
import logging
from datetime import date
from typing import Dict, List, Optional

from .models import ScheduleEvent

logger = logging.getLogger(__name__)


class AgendaStorage:
    """Operações de CRUD do calendário"""

    def get_events(self, project_id) -> List[ScheduleEvent]:
        return list(ScheduleEvent.objects.filter(project_id=project_id).order_by('date', 'id'))

    def get_events_by_month(self, project_id, year: int, month: int) -> List[ScheduleEvent]:
        """Eventos do mês (1-12), do primeiro ao último dia"""
        ultimo_dia = calendar.monthrange(year, month)[1]
        return list(
            ScheduleEvent.objects
            .filter(
                project_id=project_id,
                date__gte=date(year, month, 1),
                date__lte=date(year, month, ultimo_dia),
            )
            .order_by('date', 'id')
        )

    def get_event(self, event_id) -> Optional[ScheduleEvent]:
        return ScheduleEvent.objects.filter(id=event_id).first()

    def create_event(self, dados: Dict) -> ScheduleEvent:
        evento = ScheduleEvent.objects.create(**dados)
        logger.info(f"📅 Evento criado: {evento} (projeto {evento.project_id})")
        return evento

    def update_event(self, event_id, dados: Dict) -> Optional[ScheduleEvent]:
        evento = self.get_event(event_id)
        if evento is None:
            return None

        for campo, valor in dados.items():
            setattr(evento, campo, valor)
        evento.save()
        return evento

    def delete_event(self, event_id) -> bool:
        apagados, _ = ScheduleEvent.objects.filter(id=event_id).delete()
        return apagados > 0


# Instância global do access layer da agenda
agenda_storage = AgendaStorage()
