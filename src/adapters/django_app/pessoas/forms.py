"""
Django Forms para validação de entrada de clientes e técnicos.

Forms são DRIVING ADAPTERS que validam a forma dos dados antes de
passar para os Use Cases. Regras de domínio (unicidade, normalização
de CPF, hash de senha) ficam no Core.
"""

from django import forms

from src.core.pessoas.entities import Perfil


class PessoaCreateForm(forms.Form):
    """
    Form para cadastro de cliente/técnico.

    Valida dados básicos antes de passar para CriarPessoaService.
    """

    nome = forms.CharField(
        min_length=3,
        max_length=100,
        error_messages={
            'required': 'Nome é obrigatório',
            'min_length': 'Nome deve ter entre 3 e 100 caracteres',
            'max_length': 'Nome deve ter entre 3 e 100 caracteres',
        },
    )

    cpf = forms.CharField(
        max_length=14,
        error_messages={
            'required': 'CPF é obrigatório',
            'max_length': 'CPF deve conter 11 dígitos',
        },
    )

    email = forms.EmailField(
        max_length=254,
        error_messages={
            'required': 'Email é obrigatório',
            'invalid': 'Email inválido',
            'max_length': 'Email deve ter no máximo 254 caracteres',
        },
    )

    senha = forms.CharField(
        min_length=6,
        strip=False,
        error_messages={
            'required': 'Senha é obrigatória',
            'min_length': 'Senha deve ter no mínimo 6 caracteres',
        },
    )

    perfis = forms.JSONField(required=False)

    def clean_nome(self):
        return self.cleaned_data['nome'].strip()

    def clean_perfis(self):
        """Aceita lista de nomes ("TECNICO", "ROLE_ADMIN") ou códigos (0, 1, 2)."""
        perfis = self.cleaned_data.get('perfis')
        if not perfis:
            return ()

        if not isinstance(perfis, list):
            raise forms.ValidationError('Perfis deve ser uma lista')

        for perfil in perfis:
            try:
                Perfil.from_string(perfil)
            except ValueError as e:
                raise forms.ValidationError(str(e))

        return tuple(perfis)


class PessoaUpdateForm(PessoaCreateForm):
    """
    Form para atualização de cliente/técnico.

    Senha é opcional: ausente ou vazia mantém a senha atual.
    """

    senha = forms.CharField(
        required=False,
        strip=False,
    )

    def clean_senha(self):
        senha = self.cleaned_data.get('senha') or ''
        if senha.strip() and len(senha) < 6:
            raise forms.ValidationError('Senha deve ter no mínimo 6 caracteres')
        return senha or None
