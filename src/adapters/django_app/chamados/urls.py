"""
URL patterns para o domínio de Chamados.

Endpoints API JSON (incluídos sob /api/):
- GET|POST  tickets/
- GET|PUT   tickets/<id>/
- PATCH     tickets/<id>/status/
- PATCH     tickets/<id>/assign/
- PATCH     tickets/<id>/close/
- PUT       tickets/<id>/notes/
"""

from django.urls import path

from . import api_views

app_name = 'chamados'

urlpatterns = [
    # Listagem e abertura
    path('tickets/', api_views.ChamadoAPIListView.as_view(), name='list'),

    # Detalhes e atualização
    path('tickets/<str:pk>/', api_views.ChamadoAPIDetailView.as_view(), name='detail'),

    # Ações
    path('tickets/<str:pk>/status/', api_views.ChamadoAPIStatusView.as_view(), name='status'),
    path('tickets/<str:pk>/assign/', api_views.ChamadoAPIAtribuirView.as_view(), name='assign'),
    path('tickets/<str:pk>/close/', api_views.ChamadoAPIEncerrarView.as_view(), name='close'),
    path('tickets/<str:pk>/notes/', api_views.ChamadoAPIObservacoesView.as_view(), name='notes'),
]
