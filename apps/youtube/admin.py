# apps/youtube/admin.py

from django.contrib import admin

from .models import YoutubeVideo


@admin.register(YoutubeVideo)
class YoutubeVideoAdmin(admin.ModelAdmin):
    list_display = ['title', 'project', 'visibility', 'scheduled_publish_time', 'updated_at']
    list_filter = ['visibility', 'project']
    search_fields = ['title', 'description', 'playlist']
