"""
Django Admin para o domínio de Chamados.

Consulta de chamados via interface web. Alterações passam pela API
para que as regras de transição sejam aplicadas.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import ChamadoModel


@admin.register(ChamadoModel)
class ChamadoAdmin(admin.ModelAdmin):
    """Admin para ChamadoModel."""

    list_display = [
        'id_curto',
        'titulo',
        'status_badge',
        'prioridade_badge',
        'cliente',
        'tecnico',
        'aberto_em',
        'encerrado_em',
    ]

    list_filter = [
        'status',
        'prioridade',
        'aberto_em',
    ]

    search_fields = [
        'id',
        'titulo',
        'observacoes',
        'cliente__nome',
        'tecnico__nome',
    ]

    list_select_related = ['cliente', 'tecnico']

    ordering = ['-aberto_em']

    date_hierarchy = 'aberto_em'

    def id_curto(self, obj):
        """Exibe ID curto (primeiros 8 caracteres)."""
        return obj.id[:8] + '...'
    id_curto.short_description = 'ID'

    def status_badge(self, obj):
        """Exibe status com badge colorido."""
        colors = {
            'ABERTO': '#17a2b8',
            'EM_ANDAMENTO': '#ffc107',
            'PAUSADO': '#6c757d',
            'ENCERRADO': '#343a40',
            'CANCELADO': '#dc3545',
        }
        color = colors.get(obj.status, '#6c757d')
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            color,
            obj.get_status_display()
        )
    status_badge.short_description = 'Status'

    def prioridade_badge(self, obj):
        """Exibe prioridade com badge colorido."""
        colors = {
            'BAIXA': '#28a745',
            'MEDIA': '#ffc107',
            'ALTA': '#dc3545',
        }
        color = colors.get(obj.prioridade, '#6c757d')
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            color,
            obj.get_prioridade_display()
        )
    prioridade_badge.short_description = 'Prioridade'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
