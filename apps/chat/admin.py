# apps/chat/admin.py

from django.contrib import admin

from .models import ChatChannel, ChatChannelMember, ChatMessage


class ChatChannelMemberInline(admin.TabularInline):
    model = ChatChannelMember
    extra = 0
    autocomplete_fields = ['user']


@admin.register(ChatChannel)
class ChatChannelAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'is_private', 'is_direct_message', 'created_by', 'total_membros', 'created_at']
    list_filter = ['is_private', 'is_direct_message']
    search_fields = ['name', 'description']
    inlines = [ChatChannelMemberInline]

    def total_membros(self, obj):
        return obj.memberships.count()

    total_membros.short_description = 'Membros'


@admin.register(ChatMessage)
class ChatMessageAdmin(admin.ModelAdmin):
    list_display = ['channel', 'sender', 'resumo', 'sent_at']
    list_filter = ['channel']
    search_fields = ['content', 'sender__username']
    date_hierarchy = 'sent_at'

    def resumo(self, obj):
        return obj.content[:60]

    resumo.short_description = 'Mensagem'
