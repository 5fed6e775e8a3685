"""
Configurações globais do Pytest para Helpdesk Manager.

Configura o Django (SQLite em memória) antes da coleta e fornece
fixtures compartilhadas pelos testes de Core e de Adapters.
"""

import pytest


def pytest_configure(config):
    """Configura Django antes dos testes."""
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'src.adapters.django_app.pessoas',
                'src.adapters.django_app.chamados',
            ],
            MIDDLEWARE=[
                'django.middleware.common.CommonMiddleware',
            ],
            TEMPLATES=[{
                'BACKEND': 'django.template.backends.django.DjangoTemplates',
                'DIRS': [],
                'APP_DIRS': True,
                'OPTIONS': {'context_processors': []},
            }],
            ROOT_URLCONF='src.config.urls',
            PASSWORD_HASHERS=['django.contrib.auth.hashers.MD5PasswordHasher'],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
        )

    config.addinivalue_line(
        "markers", "integration: fluxos completos através da API"
    )


@pytest.fixture(autouse=True)
def reset_container():
    """
    Reset do container DI entre testes.

    Garante que cada teste inicia com providers sem overrides.
    """
    from src.config import container as container_module

    container_module.reset_container()
    yield
    container_module.reset_container()


class FakePasswordHasher:
    """Hasher reversível e determinístico para testes do Core."""

    def hash(self, senha: str) -> str:
        return f"hashed::{senha}"

    def verify(self, senha: str, senha_hash: str) -> bool:
        return senha_hash == self.hash(senha)


@pytest.fixture
def hasher():
    return FakePasswordHasher()
