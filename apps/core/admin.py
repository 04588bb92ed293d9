# apps/core/admin.py

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html

from .models import User, Project, ProjectMember, Column, Content, Attachment


@admin.register(User)
class ClaqueteUserAdmin(BaseUserAdmin):
    """Admin customizado para o modelo User"""

    list_display = [
        'username', 'email', 'display_name', 'avatar', 'role_badge',
        'is_active', 'date_joined'
    ]
    list_filter = ['role', 'is_staff', 'is_active', 'date_joined']
    search_fields = ['username', 'display_name', 'email']
    ordering = ['-date_joined']

    # Adicionar campos customizados ao formulário
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Claquete', {
            'fields': ('display_name', 'role', 'avatar_initials', 'avatar_color')
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Claquete', {
            'fields': ('email', 'display_name', 'role')
        }),
    )

    def avatar(self, obj):
        """Mostra o avatar com as iniciais na cor do usuário"""
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 6px; '
            'border-radius: 50%; font-size: 11px;">{}</span>',
            obj.avatar_color or '#6B7280', obj.avatar_initials
        )

    avatar.short_description = 'Avatar'

    def role_badge(self, obj):
        """Exibe o papel do usuário com badge colorido"""
        cores = {
            'admin': '#EF4444',  # vermelho
            'producer': '#F59E0B',  # amarelo
            'actor': '#8B5CF6',  # roxo
            'employed': '#3B82F6'  # azul
        }
        cor = cores.get(obj.role, '#6B7280')
        return format_html(
            '<span style="background-color: {}; color: white; '
            'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
            cor, obj.get_role_display()
        )

    role_badge.short_description = 'Papel'


class ProjectMemberInline(admin.TabularInline):
    model = ProjectMember
    extra = 1
    autocomplete_fields = ['user']


class ColumnInline(admin.TabularInline):
    model = Column
    extra = 0
    fields = ['name', 'color', 'order']


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    """Admin para gerenciamento de projetos"""

    list_display = ['name', 'type', 'created_by', 'members_count', 'columns_count', 'created_at']
    list_filter = ['type', 'created_at']
    search_fields = ['name', 'description']
    readonly_fields = ['created_at']
    inlines = [ProjectMemberInline, ColumnInline]

    def members_count(self, obj):
        """Conta quantidade de membros"""
        return obj.members.count()

    members_count.short_description = 'Membros'

    def columns_count(self, obj):
        return obj.columns.count()

    columns_count.short_description = 'Colunas'


@admin.register(Content)
class ContentAdmin(admin.ModelAdmin):
    """Admin para os cartões do quadro"""

    list_display = ['title', 'type', 'project', 'column', 'order', 'priority', 'progress_bar', 'assigned_to']
    list_filter = ['type', 'priority', 'project']
    search_fields = ['title', 'description']
    readonly_fields = ['created_at']

    def progress_bar(self, obj):
        """Barra de progresso 0-100"""
        return format_html(
            '<div style="width: 100px; background: #E5E7EB; border-radius: 4px;">'
            '<div style="width: {}%; background: #10B981; height: 8px; border-radius: 4px;"></div></div>',
            obj.progress
        )

    progress_bar.short_description = 'Progresso'


@admin.register(Attachment)
class AttachmentAdmin(admin.ModelAdmin):
    list_display = ['name', 'content', 'url', 'created_by', 'created_at']
    search_fields = ['name', 'url']
