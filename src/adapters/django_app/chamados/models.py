"""
Django Models para o domínio de Chamados.

Estes models são ADAPTERS - implementam a persistência para as
entidades de domínio definidas em src/core/chamados/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Lógica de negócio fica nas Entities do Core
- Models são mapeados para/de Entities via Mappers

Relacionamentos:
- cliente e tecnico apontam para PessoaModel com PROTECT: o banco
  recusa remover uma pessoa que ainda aparece em algum chamado
"""

from django.db import models
from django.utils import timezone

from src.adapters.django_app.pessoas.models import PessoaModel


class ChamadoStatusChoices(models.TextChoices):
    """Choices para status de chamado (espelha ChamadoStatus do Core)."""
    ABERTO = 'ABERTO', 'Aberto'
    EM_ANDAMENTO = 'EM_ANDAMENTO', 'Em andamento'
    PAUSADO = 'PAUSADO', 'Pausado'
    ENCERRADO = 'ENCERRADO', 'Encerrado'
    CANCELADO = 'CANCELADO', 'Cancelado'


class ChamadoPrioridadeChoices(models.TextChoices):
    """Choices para prioridade (espelha ChamadoPrioridade do Core)."""
    BAIXA = 'BAIXA', 'Baixa'
    MEDIA = 'MEDIA', 'Média'
    ALTA = 'ALTA', 'Alta'


class ChamadoModel(models.Model):
    """
    Model Django para persistência de Chamados.

    Fields:
        id: UUID como primary key (gerado pela Entity)
        titulo: Título do chamado
        observacoes: Texto livre
        status: Estado atual (choices)
        prioridade: Nível de prioridade (choices)
        cliente: Cliente dono do chamado
        tecnico: Técnico responsável (opcional)
        aberto_em: Timestamp de abertura
        encerrado_em: Timestamp de encerramento
    """

    # Primary Key - UUID gerado pela Entity
    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="UUID único do chamado"
    )

    # Dados principais
    titulo = models.CharField(
        max_length=100,
        help_text="Título do chamado"
    )

    observacoes = models.TextField(
        max_length=500,
        blank=True,
        default='',
        help_text="Observações"
    )

    # Estado
    status = models.CharField(
        max_length=20,
        choices=ChamadoStatusChoices.choices,
        default=ChamadoStatusChoices.ABERTO,
        db_index=True,
        help_text="Estado atual do chamado"
    )

    prioridade = models.CharField(
        max_length=10,
        choices=ChamadoPrioridadeChoices.choices,
        default=ChamadoPrioridadeChoices.MEDIA,
        db_index=True,
        help_text="Nível de prioridade"
    )

    # Relacionamentos
    cliente = models.ForeignKey(
        PessoaModel,
        on_delete=models.PROTECT,
        related_name='chamados_como_cliente',
        help_text="Cliente que abriu o chamado"
    )

    tecnico = models.ForeignKey(
        PessoaModel,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name='chamados_como_tecnico',
        help_text="Técnico responsável"
    )

    # Timestamps
    aberto_em = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="Data/hora de abertura"
    )

    encerrado_em = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Data/hora de encerramento"
    )

    class Meta:
        db_table = 'chamados'
        verbose_name = 'Chamado'
        verbose_name_plural = 'Chamados'
        ordering = ['-aberto_em']
        indexes = [
            # Índice composto para o filtro status + prioridade
            models.Index(fields=['status', 'prioridade'], name='chamados_status_prio_idx'),
        ]

    def __str__(self):
        return f"[{self.id[:8]}] {self.titulo}"

    def __repr__(self):
        return f"<ChamadoModel id={self.id[:8]} status={self.status}>"
