# apps/core/urls.py

from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # === AUTENTICAÇÃO ===
    path('auth/register', views.register_view, name='register'),
    path('auth/login', views.login_view, name='login'),
    path('auth/logout', views.logout_view, name='logout'),
    path('auth/me', views.me_view, name='me'),

    # === USUÁRIOS ===
    path('users', views.users_view, name='users'),
    path('users/<int:user_id>', views.user_detail_view, name='user_detail'),

    # === PROJETOS ===
    path('projects', views.projects_view, name='projects'),
    path('projects/<int:project_id>', views.project_detail_view, name='project_detail'),
    path('projects/<int:project_id>/members', views.project_members_view, name='project_members'),
    path(
        'projects/<int:project_id>/members/<int:user_id>',
        views.project_member_detail_view,
        name='project_member_detail'
    ),

    # === MONITORAMENTO ===
    path('health', views.health_check, name='health'),
]
