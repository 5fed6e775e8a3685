"""
Django Admin para clientes e técnicos.

Apenas consulta: cadastros e alterações passam pelos use cases
(unicidade e hash de senha), então o admin não edita registros.
"""

from django.contrib import admin

from .models import PessoaModel


@admin.register(PessoaModel)
class PessoaAdmin(admin.ModelAdmin):
    """Admin para PessoaModel."""

    list_display = [
        'id_curto',
        'nome',
        'tipo',
        'cpf',
        'email',
        'criado_em',
    ]

    list_filter = [
        'tipo',
        'criado_em',
    ]

    search_fields = [
        'id',
        'nome',
        'cpf',
        'email',
    ]

    exclude = ['senha_hash']

    ordering = ['nome']

    def id_curto(self, obj):
        """Exibe ID curto (primeiros 8 caracteres)."""
        return obj.id[:8] + '...'
    id_curto.short_description = 'ID'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
