"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece as operações comuns aos repositórios de pessoas e chamados:
- save (create ou update do registro completo)
- get_by_id / exists / delete
- list_all com ordenação padrão

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar
import logging

from django.db import models
from django.db.models import QuerySet

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


class BaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoChamadoRepository(BaseRepository[ChamadoEntity, ChamadoModel]):
            model_class = ChamadoModel

            def to_entity(self, model):
                return ChamadoMapper.to_entity(model)

            def to_model(self, entity):
                return ChamadoMapper.to_model(entity)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Campos para select_related (otimização N+1)
    select_related_fields: List[str] = []

    # Campo padrão de ordenação
    default_order_field: str = "id"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """Converte Model Django para Entity de domínio."""
        raise NotImplementedError

    @abstractmethod
    def to_model(self, entity: T) -> M:
        """Converte Entity de domínio para Model Django (não salvo)."""
        raise NotImplementedError

    def _get_base_queryset(self) -> QuerySet:
        """Retorna queryset base com select_related aplicado."""
        qs = self.model_class.objects.all()

        if self.select_related_fields:
            qs = qs.select_related(*self.select_related_fields)

        return qs

    def save(self, entity: T) -> None:
        """
        Persiste entidade completa (create ou update).

        Usa update_or_create: todos os campos são regravados.
        """
        model = self.to_model(entity)

        defaults = {}
        for field in model._meta.concrete_fields:
            if not field.primary_key:
                defaults[field.attname] = getattr(model, field.attname)

        self.model_class.objects.update_or_create(
            pk=model.pk,
            defaults=defaults,
        )

        logger.debug(f"{self.model_class.__name__} saved: {model.pk}")

    def get_by_id(self, entity_id: str) -> Optional[T]:
        """Busca entidade por ID; None se não existir."""
        try:
            model = self._get_base_queryset().get(pk=entity_id)
        except self.model_class.DoesNotExist:
            return None
        return self.to_entity(model)

    def delete(self, entity_id: str) -> bool:
        """
        Remove entidade.

        Returns:
            True se removido, False se não existia
        """
        deleted_count, _ = self.model_class.objects.filter(pk=entity_id).delete()
        logger.debug(f"{self.model_class.__name__} deleted: {entity_id} ({deleted_count})")
        return deleted_count > 0

    def exists(self, entity_id: str) -> bool:
        return self.model_class.objects.filter(pk=entity_id).exists()

    def count(self) -> int:
        return self.model_class.objects.count()

    def list_all(self) -> List[T]:
        """Lista todas as entidades na ordenação padrão."""
        qs = self._get_base_queryset().order_by(self.default_order_field)
        return [self.to_entity(m) for m in qs]
