"""
Mappers para conversão entre ChamadoEntity (Core) e ChamadoModel (Django).

Responsabilidades:
- Converter ChamadoEntity → ChamadoModel (para persistência)
- Converter ChamadoModel → ChamadoEntity (para uso no Core)

As FKs são mapeadas pelos ids (`cliente_id`/`tecnico_id`), sem
carregar os registros de pessoa.
"""

from typing import List

from src.core.chamados.entities import (
    ChamadoEntity,
    ChamadoPrioridade,
    ChamadoStatus,
)

from .models import ChamadoModel


class ChamadoMapper:
    """
    Mapper para conversão entre ChamadoEntity e ChamadoModel.

    Responsável por:
    - to_model(): Entity → Model
    - to_entity(): Model → Entity
    - to_entity_list(): List[Model] → List[Entity]
    """

    @staticmethod
    def to_model(entity: ChamadoEntity) -> ChamadoModel:
        """
        Converte ChamadoEntity para ChamadoModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return ChamadoModel(
            id=entity.id,
            titulo=entity.titulo,
            observacoes=entity.observacoes,
            status=entity.status.value,
            prioridade=entity.prioridade.value,
            cliente_id=entity.cliente_id,
            tecnico_id=entity.tecnico_id,
            aberto_em=entity.aberto_em,
            encerrado_em=entity.encerrado_em,
        )

    @staticmethod
    def to_entity(model: ChamadoModel) -> ChamadoEntity:
        """
        Converte ChamadoModel para ChamadoEntity.

        Note:
            Bypassa as validações de ChamadoEntity.abrir()
            pois os dados já foram validados na criação original
        """
        return ChamadoEntity(
            id=model.id,
            titulo=model.titulo,
            observacoes=model.observacoes or "",
            status=ChamadoStatus(model.status),
            prioridade=ChamadoPrioridade(model.prioridade),
            cliente_id=model.cliente_id,
            tecnico_id=model.tecnico_id,
            aberto_em=model.aberto_em,
            encerrado_em=model.encerrado_em,
        )

    @staticmethod
    def to_entity_list(models: List[ChamadoModel]) -> List[ChamadoEntity]:
        return [ChamadoMapper.to_entity(model) for model in models]
