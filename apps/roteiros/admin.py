# apps/roteiros/admin.py

from django.contrib import admin

from .models import ScriptData, PublishedFinal


@admin.register(ScriptData)
class ScriptDataAdmin(admin.ModelAdmin):
    list_display = ['project', 'total_correlacoes', 'created_by', 'updated_at']
    search_fields = ['project__name']

    def total_correlacoes(self, obj):
        return len(obj.correlations or [])

    total_correlacoes.short_description = 'Correlações'


@admin.register(PublishedFinal)
class PublishedFinalAdmin(admin.ModelAdmin):
    list_display = ['title', 'project', 'version', 'created_by', 'created_at']
    list_filter = ['project']
    readonly_fields = ['version']
