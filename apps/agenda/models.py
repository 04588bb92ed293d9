# apps/agenda/models.py

from django.conf import settings
from django.db import models

from apps.core.models import Project


class ScheduleEvent(models.Model):
    """Evento do calendário do projeto (um dia inteiro)"""

    TYPE_CHOICES = [
        ('filming_day', 'Dia de gravação'),
        ('upload_day', 'Dia de publicação'),
        ('secondary_filming_day', 'Gravação secundária'),
    ]

    # Cor padrão de cada tipo no calendário
    CORES_PADRAO = {
        'filming_day': '#EF4444',
        'upload_day': '#10B981',
        'secondary_filming_day': '#F59E0B',
    }

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='schedule_events'
    )
    title = models.CharField(max_length=200)
    type = models.CharField(max_length=30, choices=TYPE_CHOICES)
    date = models.DateField(db_index=True)
    notes = models.TextField(null=True, blank=True)
    color = models.CharField(max_length=7)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='schedule_events'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'schedule_events'
        ordering = ['date', 'id']

    def save(self, *args, **kwargs):
        if not self.color:
            self.color = self.CORES_PADRAO.get(self.type, '#6B7280')
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.date} - {self.title}"
