"""
Testes Unitários para Entidades do Domínio de Pessoas.

Testa a lógica de negócio pura, sem dependências de framework.

Coverage:
- Perfil: conversões e rótulos
- novo_cliente / novo_tecnico: validações e perfis padrão
- PessoaEntity: atualização de dados e troca de senha
"""

import pytest

from src.core.pessoas.entities import (
    Perfil,
    PessoaEntity,
    TipoPessoa,
    normalizar_cpf,
    novo_cliente,
    novo_tecnico,
)
from src.core.shared.exceptions import ValidationError


def _cliente(hasher, **kwargs):
    dados = {
        'nome': 'João Silva',
        'cpf': '12345678901',
        'email': 'joao@email.com',
        'senha': '123456',
        'hasher': hasher,
    }
    dados.update(kwargs)
    return novo_cliente(**dados)


class TestPerfil:
    """Testes para enum Perfil."""

    def test_codigos(self):
        assert Perfil.ADMIN.codigo == 0
        assert Perfil.CLIENTE.codigo == 1
        assert Perfil.TECNICO.codigo == 2

    def test_role(self):
        assert Perfil.TECNICO.role == "ROLE_TECNICO"

    @pytest.mark.parametrize("valor", ["TECNICO", "tecnico", "ROLE_TECNICO", 2])
    def test_from_string(self, valor):
        assert Perfil.from_string(valor) is Perfil.TECNICO

    def test_from_string_invalido(self):
        with pytest.raises(ValueError, match="Perfil inválido"):
            Perfil.from_string("SUPERVISOR")

    def test_from_string_codigo_invalido(self):
        with pytest.raises(ValueError):
            Perfil.from_string(7)


class TestNormalizacao:

    def test_cpf_com_pontuacao(self):
        assert normalizar_cpf("123.456.789-01") == "12345678901"


class TestCriacao:
    """Testes para as fábricas novo_cliente e novo_tecnico."""

    def test_cliente_valido(self, hasher):
        pessoa = _cliente(hasher)

        assert pessoa.id is not None
        assert pessoa.tipo is TipoPessoa.CLIENTE
        assert pessoa.is_cliente
        assert not pessoa.is_tecnico
        assert pessoa.perfis == frozenset({Perfil.CLIENTE})
        assert pessoa.criado_em.tzinfo is not None

    def test_tecnico_recebe_perfil_tecnico(self, hasher):
        pessoa = novo_tecnico(
            nome="Carlos Técnico",
            cpf="11122233344",
            email="carlos@aethernet.com",
            senha="123456",
            hasher=hasher,
        )

        assert pessoa.tipo is TipoPessoa.TECNICO
        assert pessoa.perfis == frozenset({Perfil.TECNICO})

    def test_perfis_informados_substituem_padrao(self, hasher):
        pessoa = _cliente(hasher, perfis=[Perfil.ADMIN, Perfil.CLIENTE])

        assert pessoa.perfis == frozenset({Perfil.ADMIN, Perfil.CLIENTE})

    def test_senha_armazenada_como_hash(self, hasher):
        pessoa = _cliente(hasher)

        assert pessoa.senha_hash == "hashed::123456"
        assert "123456" != pessoa.senha_hash

    def test_normaliza_cpf_e_email(self, hasher):
        pessoa = _cliente(hasher, cpf="123.456.789-01", email="  Joao@Email.COM ")

        assert pessoa.cpf == "12345678901"
        assert pessoa.email == "joao@email.com"

    def test_nome_e_aparado(self, hasher):
        assert _cliente(hasher, nome="  Ana  ").nome == "Ana"

    @pytest.mark.parametrize("nome", ["", "   ", "Jo", "x" * 101])
    def test_nome_invalido(self, hasher, nome):
        with pytest.raises(ValidationError) as exc:
            _cliente(hasher, nome=nome)
        assert exc.value.field == "nome"

    @pytest.mark.parametrize("cpf", ["", "1234567890", "123456789012", "1234567890a"])
    def test_cpf_invalido(self, hasher, cpf):
        with pytest.raises(ValidationError) as exc:
            _cliente(hasher, cpf=cpf)
        assert exc.value.field == "cpf"

    @pytest.mark.parametrize("email", ["", "joao", "joao@", "joao@email"])
    def test_email_invalido(self, hasher, email):
        with pytest.raises(ValidationError) as exc:
            _cliente(hasher, email=email)
        assert exc.value.field == "email"

    def test_senha_curta(self, hasher):
        with pytest.raises(ValidationError) as exc:
            _cliente(hasher, senha="12345")
        assert exc.value.field == "senha"


class TestAtualizacao:
    """Testes para atualizar_dados e alterar_senha."""

    def test_atualizar_dados(self, hasher):
        pessoa = _cliente(hasher)

        pessoa.atualizar_dados("João S. Silva", "987.654.321-00", "NOVO@email.com")

        assert pessoa.nome == "João S. Silva"
        assert pessoa.cpf == "98765432100"
        assert pessoa.email == "novo@email.com"
        assert pessoa.perfis == frozenset({Perfil.CLIENTE})

    def test_atualizar_perfis(self, hasher):
        pessoa = _cliente(hasher)

        pessoa.atualizar_dados(pessoa.nome, pessoa.cpf, pessoa.email, perfis=[Perfil.ADMIN])

        assert pessoa.perfis == frozenset({Perfil.ADMIN})

    def test_atualizar_dados_invalidos_nao_altera(self, hasher):
        pessoa = _cliente(hasher)

        with pytest.raises(ValidationError):
            pessoa.atualizar_dados("João", "123", "joao@email.com")

        assert pessoa.cpf == "12345678901"

    def test_alterar_senha(self, hasher):
        pessoa = _cliente(hasher)

        assert pessoa.alterar_senha("nova-senha", hasher) is True
        assert hasher.verify("nova-senha", pessoa.senha_hash)

    @pytest.mark.parametrize("senha", [None, "", "   "])
    def test_senha_vazia_mantem_atual(self, hasher, senha):
        pessoa = _cliente(hasher)
        anterior = pessoa.senha_hash

        assert pessoa.alterar_senha(senha, hasher) is False
        assert pessoa.senha_hash == anterior

    def test_nova_senha_curta(self, hasher):
        pessoa = _cliente(hasher)

        with pytest.raises(ValidationError):
            pessoa.alterar_senha("abc", hasher)


class TestIdentidade:

    def test_igualdade_por_id(self, hasher):
        pessoa = _cliente(hasher)
        copia = PessoaEntity(id=pessoa.id, nome="Outro Nome")

        assert pessoa == copia
        assert hash(pessoa) == hash(copia)

    def test_ids_diferentes(self, hasher):
        assert _cliente(hasher) != _cliente(hasher)
