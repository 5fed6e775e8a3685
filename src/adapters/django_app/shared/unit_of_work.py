"""
Unit of Work - Implementação Django.

Cada operação de serviço roda dentro de exatamente uma transação:
ou todas as escritas são persistidas, ou nenhuma é.

A transação é um bloco `transaction.atomic()` aberto ao entrar no
`with uow:` e fechado ao sair. Dentro de outra transação (por exemplo,
nos testes com pytest-django) o bloco vira um savepoint, e o rollback
desfaz apenas o que a operação escreveu.
"""

from typing import Optional
import logging

from django.db import DEFAULT_DB_ALIAS, transaction

from src.core.shared.interfaces import UnitOfWork

logger = logging.getLogger(__name__)


class DjangoUnitOfWork(UnitOfWork):
    """
    Implementação Django do Unit of Work.

    Example:
        with DjangoUnitOfWork() as uow:
            repo.save(entity1)
            repo.save(entity2)
        # Commit automático

    Example com rollback:
        with DjangoUnitOfWork() as uow:
            repo.save(entity)
            raise BusinessRuleViolationError("...")
        # Rollback automático, exceção propagada
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        """
        Args:
            using: Alias do banco configurado em settings.DATABASES
        """
        self._using = using
        self._atomic: Optional[transaction.Atomic] = None
        self._committed = False
        self._rolled_back = False

    def _begin_transaction(self) -> None:
        self._atomic = transaction.atomic(using=self._using)
        self._atomic.__enter__()
        self._committed = False
        self._rolled_back = False
        logger.debug("Transaction started")

    def commit(self) -> None:
        """
        Fecha o bloco atômico confirmando as escritas.

        Raises:
            DatabaseError: Se o commit falhar no banco
        """
        if self._atomic is None:
            return

        atomic, self._atomic = self._atomic, None
        atomic.__exit__(None, None, None)
        self._committed = True
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        """Marca o bloco para rollback e o fecha."""
        if self._atomic is None:
            return

        atomic, self._atomic = self._atomic, None
        transaction.set_rollback(True, using=self._using)
        atomic.__exit__(None, None, None)
        self._rolled_back = True
        logger.debug("Transaction rolled back")

    @property
    def is_committed(self) -> bool:
        """Verifica se transação foi comitada."""
        return self._committed

    @property
    def is_rolled_back(self) -> bool:
        """Verifica se transação foi revertida."""
        return self._rolled_back


class InMemoryUnitOfWork(UnitOfWork):
    """
    Unit of Work em memória para testes.

    Não persiste nada - apenas registra se a operação terminou
    em commit ou rollback.

    Example:
        uow = InMemoryUnitOfWork()
        with uow:
            repo.save(entity)

        assert uow.committed
    """

    def __init__(self):
        self._committed = False
        self._rolled_back = False
        self.commits = 0
        self.rollbacks = 0

    def _begin_transaction(self) -> None:
        self._committed = False
        self._rolled_back = False

    def commit(self) -> None:
        self._committed = True
        self.commits += 1

    def rollback(self) -> None:
        self._rolled_back = True
        self.rollbacks += 1

    @property
    def committed(self) -> bool:
        """Verifica se a última operação foi comitada."""
        return self._committed

    @property
    def rolled_back(self) -> bool:
        """Verifica se a última operação foi revertida."""
        return self._rolled_back

    def reset(self) -> None:
        """Reset para próximo teste."""
        self._committed = False
        self._rolled_back = False
        self.commits = 0
        self.rollbacks = 0
