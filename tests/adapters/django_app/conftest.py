"""
Fixtures dos testes de Adapters Django.

O Django já está configurado pelo conftest raiz (SQLite em memória);
aqui ficam os repositórios reais e helpers para a API JSON.
"""

import json

import pytest
from django.test import Client

from src.adapters.django_app.chamados.repositories import DjangoChamadoRepository
from src.adapters.django_app.pessoas.hashers import DjangoPasswordHasher
from src.adapters.django_app.pessoas.repositories import DjangoPessoaRepository
from src.core.pessoas.entities import novo_cliente, novo_tecnico


@pytest.fixture
def django_hasher():
    return DjangoPasswordHasher()


@pytest.fixture
def pessoa_repository():
    return DjangoPessoaRepository()


@pytest.fixture
def chamado_repository():
    return DjangoChamadoRepository()


@pytest.fixture
def cliente_salvo(db, pessoa_repository, django_hasher):
    pessoa = novo_cliente("João Silva", "12345678901", "joao@email.com", "123456", django_hasher)
    pessoa_repository.save(pessoa)
    return pessoa


@pytest.fixture
def tecnico_salvo(db, pessoa_repository, django_hasher):
    pessoa = novo_tecnico("Carlos Técnico", "11122233344", "carlos@aethernet.com", "123456", django_hasher)
    pessoa_repository.save(pessoa)
    return pessoa


class ApiClient:
    """Cliente de teste que envia e recebe JSON."""

    def __init__(self):
        self.client = Client()

    def _send(self, method, url, data=None, raw=None):
        body = raw if raw is not None else json.dumps(data or {})
        return getattr(self.client, method)(url, data=body, content_type='application/json')

    def get(self, url, params=None):
        return self.client.get(url, params or {})

    def post(self, url, data=None, raw=None):
        return self._send('post', url, data, raw)

    def put(self, url, data=None, raw=None):
        return self._send('put', url, data, raw)

    def patch(self, url, data=None, raw=None):
        return self._send('patch', url, data, raw)

    def delete(self, url):
        return self.client.delete(url)


@pytest.fixture
def api():
    return ApiClient()


@pytest.fixture
def cliente_api(db, api):
    """Cliente criado pela API (retorna o JSON de resposta)."""
    response = api.post('/api/clients/', {
        'nome': 'João Silva',
        'cpf': '123.456.789-01',
        'email': 'joao@email.com',
        'senha': '123456',
    })
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def tecnico_api(db, api):
    response = api.post('/api/technicians/', {
        'nome': 'Carlos Técnico',
        'cpf': '11122233344',
        'email': 'carlos@aethernet.com',
        'senha': '123456',
    })
    assert response.status_code == 201
    return response.json()
