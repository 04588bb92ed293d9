# apps/roteiros/urls.py

from django.urls import path
from . import views

app_name = 'roteiros'

urlpatterns = [
    path('projects/<int:project_id>/script-data', views.script_data_view, name='script_data'),
    path(
        'projects/<int:project_id>/script-data/correlations',
        views.correlations_view,
        name='script_correlations'
    ),
    path('projects/<int:project_id>/published-finals', views.published_finals_view, name='published_finals'),
    path('published-finals/<int:final_id>', views.published_final_detail_view, name='published_final_detail'),
]
