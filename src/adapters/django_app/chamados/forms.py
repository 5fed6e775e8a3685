"""
Django Forms para validação de entrada de chamados.

Forms são DRIVING ADAPTERS que validam dados antes de
passar para os Use Cases.

Princípios:
- Forms NÃO contêm lógica de negócio
- Regras de transição e de encerramento ficam no Core
- Forms são apenas para validação de entrada
"""

from django import forms

from src.core.chamados.entities import ChamadoPrioridade, ChamadoStatus


def _enum_name(enum_cls, valor: str) -> str:
    """Normaliza o nome do enum ou levanta erro de form."""
    try:
        return enum_cls.from_string(valor).name
    except ValueError as e:
        raise forms.ValidationError(str(e))


class ChamadoForm(forms.Form):
    """
    Form para abertura e atualização completa de chamado.

    Valida dados básicos antes de passar para AbrirChamadoService
    ou AtualizarChamadoService.
    """

    titulo = forms.CharField(
        min_length=5,
        max_length=100,
        error_messages={
            'required': 'Título é obrigatório',
            'min_length': 'Título deve ter entre 5 e 100 caracteres',
            'max_length': 'Título deve ter entre 5 e 100 caracteres',
        },
    )

    observacoes = forms.CharField(
        required=False,
        max_length=500,
        error_messages={
            'max_length': 'Observações devem ter no máximo 500 caracteres',
        },
    )

    prioridade = forms.CharField(
        error_messages={
            'required': 'Prioridade é obrigatória',
        },
    )

    cliente_id = forms.CharField(
        max_length=36,
        error_messages={
            'required': 'Cliente é obrigatório',
        },
    )

    tecnico_id = forms.CharField(
        required=False,
        max_length=36,
    )

    def clean_prioridade(self):
        return _enum_name(ChamadoPrioridade, self.cleaned_data['prioridade'])

    def clean_tecnico_id(self):
        return self.cleaned_data.get('tecnico_id') or None


class ChamadoStatusForm(forms.Form):
    """Form para alteração de status."""

    status = forms.CharField(
        error_messages={
            'required': 'Status é obrigatório',
        },
    )

    def clean_status(self):
        return _enum_name(ChamadoStatus, self.cleaned_data['status'])


class ChamadoAtribuirForm(forms.Form):
    """
    Form para atribuição de técnico.

    Valida ID do técnico antes de passar para AtribuirTecnicoService.
    """

    tecnico_id = forms.CharField(
        max_length=36,
        error_messages={
            'required': 'Técnico é obrigatório',
        },
    )


class ChamadoObservacoesForm(forms.Form):
    """Form para substituição das observações."""

    observacoes = forms.CharField(
        required=False,
        max_length=500,
        error_messages={
            'max_length': 'Observações devem ter no máximo 500 caracteres',
        },
    )
