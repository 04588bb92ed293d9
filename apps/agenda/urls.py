# apps/agenda/urls.py

from django.urls import path
from . import views

app_name = 'agenda'

urlpatterns = [
    path('projects/<int:project_id>/schedule', views.schedule_view, name='schedule'),
    path(
        'projects/<int:project_id>/schedule/month/<int:year>/<int:month>',
        views.schedule_month_view,
        name='schedule_month'
    ),
    path('projects/<int:project_id>/schedule/<int:event_id>', views.schedule_event_view, name='schedule_event'),
]
