# apps/arquivos/urls.py

from django.urls import path
from . import views

app_name = 'arquivos'

urlpatterns = [
    # Navegação por pastas
    path('projects/<int:project_id>/folders/root', views.folder_root_view, name='folder_root'),
    path('projects/<int:project_id>/folders/<int:folder_id>', views.project_folder_view, name='project_folder'),
    path('projects/<int:project_id>/files', views.project_files_view, name='project_files'),

    # Pastas
    path('folders', views.folders_view, name='folders'),
    path('folders/<int:folder_id>', views.folder_detail_view, name='folder_detail'),

    # Arquivos
    path('files', views.files_view, name='files'),
    path('files/<int:file_id>', views.file_detail_view, name='file_detail'),
]
