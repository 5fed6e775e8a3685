"""
Configuração do Django App para Pessoas (clientes e técnicos).
"""

from django.apps import AppConfig


class PessoasConfig(AppConfig):
    """Configuração do app Pessoas."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.pessoas'
    label = 'pessoas'
    verbose_name = 'Clientes e Técnicos'
