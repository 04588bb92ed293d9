# apps/agenda/admin.py

from django.contrib import admin
from django.utils.html import format_html

from .models import ScheduleEvent


@admin.register(ScheduleEvent)
class ScheduleEventAdmin(admin.ModelAdmin):
    list_display = ['title', 'project', 'tipo_badge', 'date', 'created_by']
    list_filter = ['type', 'project']
    search_fields = ['title', 'notes']
    date_hierarchy = 'date'

    def tipo_badge(self, obj):
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            obj.color, obj.get_type_display()
        )

    tipo_badge.short_description = 'Tipo'
