"""
URL Configuration para Helpdesk Manager.

Estrutura:
- /admin/ - Django Admin
- /api/clients/, /api/technicians/ - API de Pessoas
- /api/tickets/ - API de Chamados
- /health/ - Health check
"""

from django.contrib import admin
from django.http import JsonResponse
from django.urls import path, include


def health(request):
    return JsonResponse({'status': 'ok'})


urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # API JSON
    path('api/', include('src.adapters.django_app.pessoas.urls')),
    path('api/', include('src.adapters.django_app.chamados.urls')),

    # Health check
    path('health/', health, name='health'),
]
