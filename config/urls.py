# config/urls.py

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # API JSON
    path('api/', include('apps.core.urls')),
    path('api/', include('apps.board.urls')),
    path('api/', include('apps.arquivos.urls')),
    path('api/', include('apps.roteiros.urls')),
    path('api/', include('apps.agenda.urls')),
    path('api/', include('apps.youtube.urls')),
    path('api/chat/', include('apps.chat.urls')),
]

# Servir arquivos de mídia em desenvolvimento
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)

    # Debug Toolbar se disponível
    if 'debug_toolbar' in settings.INSTALLED_APPS:
        import debug_toolbar

        urlpatterns = [
            path('__debug__/', include(debug_toolbar.urls)),
        ] + urlpatterns

# Customizar títulos do admin
admin.site.site_header = 'Claquete Admin'
admin.site.site_title = 'Claquete'
admin.site.index_title = 'Administração do Sistema'
