"""
Testes para os Unit of Work (Django e InMemory).

Verifica que escritas dentro do contexto são comitadas em caso de
sucesso e revertidas quando uma exceção escapa do bloco.
"""

import pytest

from src.adapters.django_app.pessoas.models import PessoaModel
from src.adapters.django_app.shared.unit_of_work import DjangoUnitOfWork, InMemoryUnitOfWork
from src.core.pessoas.entities import novo_cliente
from src.core.shared.exceptions import BusinessRuleViolationError


def _cliente(hasher):
    return novo_cliente("João Silva", "12345678901", "joao@email.com", "123456", hasher)


@pytest.mark.django_db(transaction=True)
class TestDjangoUnitOfWork:

    def test_commit(self, pessoa_repository, django_hasher):
        uow = DjangoUnitOfWork()

        with uow:
            pessoa_repository.save(_cliente(django_hasher))

        assert uow.is_committed
        assert not uow.is_rolled_back
        assert PessoaModel.objects.count() == 1

    def test_rollback_em_excecao(self, pessoa_repository, django_hasher):
        uow = DjangoUnitOfWork()

        with pytest.raises(BusinessRuleViolationError):
            with uow:
                pessoa_repository.save(_cliente(django_hasher))
                raise BusinessRuleViolationError("falha proposital")

        assert uow.is_rolled_back
        assert not uow.is_committed
        assert PessoaModel.objects.count() == 0

    def test_reutilizavel(self, pessoa_repository, django_hasher):
        uow = DjangoUnitOfWork()

        with pytest.raises(ValueError):
            with uow:
                raise ValueError("primeira")

        with uow:
            pessoa_repository.save(_cliente(django_hasher))

        assert uow.is_committed
        assert PessoaModel.objects.count() == 1


class TestInMemoryUnitOfWork:

    def test_commit(self):
        uow = InMemoryUnitOfWork()

        with uow:
            pass

        assert uow.committed
        assert uow.commits == 1

    def test_rollback(self):
        uow = InMemoryUnitOfWork()

        with pytest.raises(RuntimeError):
            with uow:
                raise RuntimeError("erro")

        assert uow.rolled_back
        assert not uow.committed
        assert uow.rollbacks == 1

    def test_reset(self):
        uow = InMemoryUnitOfWork()
        with uow:
            pass

        uow.reset()

        assert not uow.committed
        assert not uow.rolled_back
