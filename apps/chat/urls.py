# apps/chat/urls.py

from django.urls import path
from . import views

app_name = 'chat'

urlpatterns = [
    path('channels', views.channels_view, name='channels'),
    path('channels/dm', views.direct_channel_view, name='direct_channel'),
    path('channels/<int:channel_id>', views.channel_detail_view, name='channel_detail'),
    path('channels/<int:channel_id>/messages', views.channel_messages_view, name='channel_messages'),
    path('channels/<int:channel_id>/members', views.channel_members_view, name='channel_members'),
    path(
        'channels/<int:channel_id>/members/<int:user_id>',
        views.channel_member_detail_view,
        name='channel_member_detail'
    ),
]
