"""
Repositório Django para persistência de clientes e técnicos.

Implementa o port PessoaRepository definido no Core.
É um DRIVEN ADAPTER - acionado pelo Core em resposta a operações.

Princípios:
- Repository não contém lógica de negócio
- Usa Mapper para conversões
- Trata apenas persistência
"""

from typing import List, Optional
import logging

from django.db import IntegrityError, transaction

from src.core.pessoas.entities import (
    PessoaEntity,
    TipoPessoa,
    normalizar_cpf,
    normalizar_email,
)
from src.core.pessoas.use_cases import CPF_DUPLICADO, EMAIL_DUPLICADO
from src.core.shared.exceptions import DuplicateEntityError

from ..shared.repository import BaseRepository
from .models import PessoaModel
from .mappers import PessoaMapper

logger = logging.getLogger(__name__)


class DjangoPessoaRepository(BaseRepository[PessoaEntity, PessoaModel]):
    """
    Implementação Django do PessoaRepository.

    save/get_by_id/delete/exists vêm de BaseRepository; aqui ficam
    as consultas por tipo, CPF e e-mail.

    Example:
        repo = DjangoPessoaRepository()
        repo.save(novo_cliente(...))
        repo.exists_by_cpf("12345678901")  # True
    """

    model_class = PessoaModel
    default_order_field = "nome"

    def to_entity(self, model: PessoaModel) -> PessoaEntity:
        return PessoaMapper.to_entity(model)

    def to_model(self, entity: PessoaEntity) -> PessoaModel:
        return PessoaMapper.to_model(entity)

    def save(self, entity: PessoaEntity) -> None:
        """
        Persiste a pessoa; a restrição unique do banco vira DuplicateEntityError.

        O savepoint mantém a transação do Unit of Work utilizável
        depois da falha (necessário no PostgreSQL).

        Raises:
            DuplicateEntityError: Se CPF ou e-mail já pertencem a outro registro
        """
        try:
            with transaction.atomic():
                super().save(entity)
        except IntegrityError as e:
            logger.debug(f"Unicidade violada ao salvar pessoa {entity.id}: {e}")
            if self._em_uso("cpf", entity.cpf, entity.id):
                raise DuplicateEntityError(CPF_DUPLICADO, field="cpf", value=entity.cpf) from e
            if self._em_uso("email", entity.email, entity.id):
                raise DuplicateEntityError(
                    EMAIL_DUPLICADO, field="email", value=entity.email
                ) from e
            raise

    def get_by_cpf(self, cpf: str) -> Optional[PessoaEntity]:
        model = PessoaModel.objects.filter(cpf=normalizar_cpf(cpf)).first()
        return self.to_entity(model) if model else None

    def get_by_email(self, email: str) -> Optional[PessoaEntity]:
        model = PessoaModel.objects.filter(email=normalizar_email(email)).first()
        return self.to_entity(model) if model else None

    def list_by_tipo(self, tipo: TipoPessoa) -> List[PessoaEntity]:
        """Lista clientes ou técnicos ordenados por nome."""
        qs = PessoaModel.objects.filter(tipo=tipo.value).order_by(self.default_order_field)
        return PessoaMapper.to_entity_list(list(qs))

    def exists_by_cpf(self, cpf: str, excluir_id: Optional[str] = None) -> bool:
        return self._em_uso("cpf", normalizar_cpf(cpf), excluir_id)

    def exists_by_email(self, email: str, excluir_id: Optional[str] = None) -> bool:
        return self._em_uso("email", normalizar_email(email), excluir_id)

    def _em_uso(self, campo: str, valor: str, excluir_id: Optional[str]) -> bool:
        qs = PessoaModel.objects.filter(**{campo: valor})
        if excluir_id:
            qs = qs.exclude(pk=excluir_id)
        return qs.exists()
