"""
Repositório Django para persistência de Chamados.

Implementa o port ChamadoRepository definido no Core.
É um DRIVEN ADAPTER - acionado pelo Core em resposta a operações.

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Trata apenas persistência
"""

from typing import List, Optional
import logging

from django.db.models import Q

from src.core.chamados.entities import ChamadoEntity, ChamadoPrioridade, ChamadoStatus

from ..shared.repository import BaseRepository
from .models import ChamadoModel
from .mappers import ChamadoMapper

logger = logging.getLogger(__name__)


class DjangoChamadoRepository(BaseRepository[ChamadoEntity, ChamadoModel]):
    """
    Implementação Django do ChamadoRepository.

    Example:
        repo = DjangoChamadoRepository()
        repo.save(chamado)
        abertos = repo.list_filtered(status=ChamadoStatus.ABERTO)
    """

    model_class = ChamadoModel
    default_order_field = "-aberto_em"

    def to_entity(self, model: ChamadoModel) -> ChamadoEntity:
        return ChamadoMapper.to_entity(model)

    def to_model(self, entity: ChamadoEntity) -> ChamadoModel:
        return ChamadoMapper.to_model(entity)

    def list_filtered(
        self,
        status: Optional[ChamadoStatus] = None,
        prioridade: Optional[ChamadoPrioridade] = None,
    ) -> List[ChamadoEntity]:
        """Filtra por status e/ou prioridade; mais recentes primeiro."""
        qs = self._get_base_queryset()

        if status is not None:
            qs = qs.filter(status=status.value)
        if prioridade is not None:
            qs = qs.filter(prioridade=prioridade.value)

        qs = qs.order_by(self.default_order_field)
        logger.debug(
            f"Listando chamados (status={status and status.value}, "
            f"prioridade={prioridade and prioridade.value})"
        )
        return ChamadoMapper.to_entity_list(list(qs))

    def exists_by_pessoa(self, pessoa_id: str) -> bool:
        return ChamadoModel.objects.filter(
            Q(cliente_id=pessoa_id) | Q(tecnico_id=pessoa_id)
        ).exists()
