"""
URL patterns para clientes e técnicos.

Os dois recursos compartilham as views; `recurso` escolhe os services.
Incluídos em src/config/urls.py sob /api/.
"""

from django.urls import path

from . import api_views

app_name = 'pessoas'


def _rotas(prefixo: str, recurso: str):
    return [
        path(f'{prefixo}/', api_views.PessoaAPIListView.as_view(recurso=recurso),
             name=f'{recurso}_list'),
        # cpf/ e email/ antes do <pk> para não conflitar
        path(f'{prefixo}/cpf/<str:cpf>/', api_views.PessoaAPIPorCpfView.as_view(recurso=recurso),
             name=f'{recurso}_por_cpf'),
        path(f'{prefixo}/email/<str:email>/', api_views.PessoaAPIPorEmailView.as_view(recurso=recurso),
             name=f'{recurso}_por_email'),
        path(f'{prefixo}/<str:pk>/', api_views.PessoaAPIDetailView.as_view(recurso=recurso),
             name=f'{recurso}_detail'),
    ]


urlpatterns = _rotas('clients', 'cliente') + _rotas('technicians', 'tecnico')
