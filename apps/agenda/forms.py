# apps/agenda/forms.py

from django import forms
from django.core.exceptions import ValidationError
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from apps.core.forms import ApiForm, CorField
from .models import ScheduleEvent


class DiaField(forms.DateField):
    """
    Data do evento

    Aceita ``YYYY-MM-DD`` ou um datetime ISO (o calendário envia o Date
    do navegador serializado), guardando só o dia.
    """

    def to_python(self, value):
        if value in self.empty_values:
            return None
        if isinstance(value, str):
            try:
                dia = parse_date(value)
                momento = None if dia else parse_datetime(value)
            except ValueError:
                raise ValidationError(self.error_messages['invalid'], code='invalid')
            if dia is not None:
                return dia
            if momento is not None:
                if timezone.is_aware(momento):
                    momento = timezone.localtime(momento)
                return momento.date()
            raise ValidationError(self.error_messages['invalid'], code='invalid')
        return super().to_python(value)


class ScheduleEventForm(ApiForm):
    """POST/PUT /api/projects/:id/schedule"""

    title = forms.CharField(max_length=200)
    type = forms.ChoiceField(choices=ScheduleEvent.TYPE_CHOICES)
    date = DiaField()
    notes = forms.CharField(required=False, empty_value=None)
    color = CorField(required=False)
