#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cria clientes e técnicos de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_CLIENTES = [
    {'nome': 'João Silva', 'cpf': '12345678901', 'email': 'joao@email.com', 'senha': '123456'},
    {'nome': 'Maria Santos', 'cpf': '98765432100', 'email': 'maria@email.com', 'senha': '123456'},
]

SAMPLE_TECNICOS = [
    {'nome': 'Carlos Técnico', 'cpf': '11122233344', 'email': 'carlos@aethernet.com', 'senha': '123456'},
    {'nome': 'Ana Suporte', 'cpf': '55566677788', 'email': 'ana@aethernet.com', 'senha': '123456'},
]


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # Forçar SQLite para desenvolvimento rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_sample_data():
    """Cria pessoas de exemplo pelos use cases (regras de unicidade valem)."""
    from src.config.container import get_container
    from src.core.pessoas.dtos import CriarPessoaInputDTO
    from src.core.shared.exceptions import DuplicateEntityError

    container = get_container()

    for recurso, pessoas in (('cliente', SAMPLE_CLIENTES), ('tecnico', SAMPLE_TECNICOS)):
        service = getattr(container, f'criar_{recurso}_service')
        print(f"📝 Criando {recurso}s de exemplo...")

        for dados in pessoas:
            try:
                output = service.execute(CriarPessoaInputDTO(**dados))
            except DuplicateEntityError as e:
                print(f"   - {dados['nome']}: {e.message}")
                continue
            print(f"   ✓ {output.nome} ({output.id})")

    print("✅ Dados de exemplo criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from django.db import connection
    from django.db.utils import OperationalError

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except OperationalError as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. python manage.py runserver")
    print("   2. Acesse: http://localhost:8000/admin/")
    print("   3. Acesse: http://localhost:8000/api/tickets/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar clientes e técnicos de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Helpdesk Manager - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Para usar SQLite, defina: DATABASE_URL=sqlite:///db.sqlite3")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
