# apps/board/urls.py

from django.urls import path
from . import views

app_name = 'board'

urlpatterns = [
    # Colunas
    path('projects/<int:project_id>/columns', views.project_columns_view, name='project_columns'),
    path('columns', views.columns_view, name='columns'),
    path('columns/<int:column_id>', views.column_detail_view, name='column_detail'),

    # Cartões
    path('contents', views.contents_view, name='contents'),
    path('contents/<int:content_id>', views.content_detail_view, name='content_detail'),

    # Drag-and-drop
    path('contents/<int:content_id>/move', views.move_content_view, name='move_content'),

    # Anexos
    path('contents/<int:content_id>/attachments', views.content_attachments_view, name='content_attachments'),
    path('attachments', views.attachments_view, name='attachments'),
    path('attachments/<int:attachment_id>', views.attachment_detail_view, name='attachment_detail'),
]
