# apps/arquivos/admin.py

from django.contrib import admin

from .models import ProjectFolder, ProjectFile


@admin.register(ProjectFolder)
class ProjectFolderAdmin(admin.ModelAdmin):
    list_display = ['name', 'project', 'parent', 'created_by', 'created_at']
    list_filter = ['project']
    search_fields = ['name']


@admin.register(ProjectFile)
class ProjectFileAdmin(admin.ModelAdmin):
    list_display = ['filename', 'project', 'folder', 'mimetype', 'tamanho', 'is_public', 'updated_at']
    list_filter = ['is_public', 'project']
    search_fields = ['filename', 'original_filename']

    def tamanho(self, obj):
        """Tamanho legível (KB/MB)"""
        if obj.size >= 1024 * 1024:
            return f"{obj.size / (1024 * 1024):.1f} MB"
        return f"{obj.size / 1024:.1f} KB"

    tamanho.short_description = 'Tamanho'
