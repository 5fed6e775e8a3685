"""
Fixtures dos testes de Core.

Usa repositórios InMemory e um Unit of Work fake: nenhum teste
deste pacote toca o banco de dados.
"""

import pytest

from src.core.chamados.ports import InMemoryChamadoRepository
from src.core.pessoas.ports import InMemoryPessoaRepository
from src.core.shared.interfaces import UnitOfWork


class FakeUnitOfWork(UnitOfWork):
    """
    Fake Unit of Work para testes.

    Registra commits e rollbacks para verificar o comportamento
    transacional dos use cases.
    """

    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    def _begin_transaction(self):
        pass

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


@pytest.fixture
def uow():
    return FakeUnitOfWork()


@pytest.fixture
def pessoa_repo():
    return InMemoryPessoaRepository()


@pytest.fixture
def chamado_repo():
    return InMemoryChamadoRepository()
