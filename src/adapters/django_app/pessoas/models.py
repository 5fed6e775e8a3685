"""
Django Models para o domínio de Pessoas.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/pessoas/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Clientes e técnicos ficam na MESMA tabela, diferenciados por `tipo`
- CPF e e-mail são únicos na tabela inteira (constraint do banco)
"""

from django.db import models
from django.utils import timezone


class TipoPessoaChoices(models.TextChoices):
    """Choices para tipo de pessoa (espelha TipoPessoa do Core)."""
    CLIENTE = 'CLIENTE', 'Cliente'
    TECNICO = 'TECNICO', 'Técnico'


class PessoaModel(models.Model):
    """
    Model Django para persistência de clientes e técnicos.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        tipo: Discriminador CLIENTE/TECNICO
        nome: Nome completo
        cpf: CPF com 11 dígitos (único)
        email: E-mail normalizado (único)
        senha_hash: Hash da senha (nunca texto puro)
        perfis: Lista de nomes de perfil (JSONField)
        criado_em: Timestamp de criação
    """

    # Primary Key - UUID gerado pela Entity
    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único da pessoa"
    )

    tipo = models.CharField(
        max_length=10,
        choices=TipoPessoaChoices.choices,
        db_index=True,
        help_text="Cliente ou técnico"
    )

    nome = models.CharField(
        max_length=100,
        help_text="Nome completo"
    )

    cpf = models.CharField(
        max_length=11,
        unique=True,
        help_text="CPF (apenas dígitos)"
    )

    email = models.EmailField(
        max_length=254,
        unique=True,
        help_text="E-mail (minúsculas)"
    )

    senha_hash = models.CharField(
        max_length=128,
        help_text="Hash da senha"
    )

    perfis = models.JSONField(
        default=list,
        blank=True,
        help_text="Perfis (ADMIN, CLIENTE, TECNICO)"
    )

    criado_em = models.DateTimeField(
        default=timezone.now,
        help_text="Data/hora de criação"
    )

    class Meta:
        db_table = 'pessoas'
        verbose_name = 'Pessoa'
        verbose_name_plural = 'Pessoas'
        ordering = ['nome']
        indexes = [
            models.Index(fields=['tipo', 'nome'], name='pessoas_tipo_nome_idx'),
        ]

    def __str__(self):
        return f"{self.nome} ({self.get_tipo_display()})"

    def __repr__(self):
        return f"<PessoaModel id={self.id[:8]} tipo={self.tipo}>"
