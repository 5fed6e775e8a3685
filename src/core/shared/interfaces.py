"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports (lado direito): Repository, UnitOfWork, PasswordHasher
- Driving Ports (lado esquerdo): Definidos nos Use Cases

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TypeVar, Generic, Protocol


# Type variable para entidades genéricas
T = TypeVar("T")


class UnitOfWork(ABC):
    """
    Unit of Work - Coordena transações atômicas.

    Cada operação de serviço roda dentro de exatamente uma unidade
    de trabalho: ou todas as escritas são persistidas ou nenhuma é.

    Pattern: Context Manager
        with uow:
            repo.save(entity1)
            repo.save(entity2)
        # Commit automático ao sair sem erro
        # Rollback automático se exceção

    Example:
        class DjangoUnitOfWork(UnitOfWork):
            def commit(self):
                ...
    """

    def __enter__(self) -> "UnitOfWork":
        """
        Inicia contexto de transação.

        Returns:
            Self para permitir uso como context manager
        """
        self._begin_transaction()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        """
        Finaliza contexto de transação.

        Args:
            exc_type: Tipo da exceção (None se sucesso)
            exc_val: Valor da exceção
            exc_tb: Traceback da exceção

        Returns:
            False para propagar exceções
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
        return False  # Não suprime exceções

    @abstractmethod
    def _begin_transaction(self) -> None:
        """
        Inicia uma nova transação.

        Deve ser implementado pelo adapter específico
        (Django: transaction.atomic()).
        """
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """Persiste todas as mudanças da transação."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Desfaz todas as mudanças.

        Chamado automaticamente se exceção ocorrer dentro
        do bloco `with`.
        """
        raise NotImplementedError


class Repository(Protocol, Generic[T]):
    """
    Interface genérica para repositórios.

    Define operações básicas de persistência que todos
    os repositórios devem implementar.

    Type Parameters:
        T: Tipo da entidade gerenciada pelo repositório

    Note:
        Usando Protocol para permitir duck typing.
        Adapters não precisam herdar explicitamente.
    """

    def save(self, entity: T) -> None:
        """Persiste entidade completa (create ou update)."""
        ...

    def get_by_id(self, entity_id: str) -> Optional[T]:
        """Busca entidade por ID; None se não existir."""
        ...

    def delete(self, entity_id: str) -> None:
        """Remove entidade."""
        ...

    def list_all(self) -> List[T]:
        """Lista todas as entidades."""
        ...


class PasswordHasher(Protocol):
    """
    Fronteira de hashing de senhas.

    O Core nunca armazena senha em texto puro: recebe a senha
    informada e guarda apenas o resultado de `hash()`.
    """

    def hash(self, senha: str) -> str:
        """Gera hash irreversível para a senha."""
        ...

    def verify(self, senha: str, senha_hash: str) -> bool:
        """Confere senha contra hash armazenado."""
        ...
