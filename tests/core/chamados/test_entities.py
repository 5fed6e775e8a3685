"""
Testes Unitários para Entidades do Domínio de Chamados.

Testa a lógica de negócio pura (sem dependências de framework).

Coverage:
- ChamadoStatus / ChamadoPrioridade: conversões
- validar_transicao: regras de transição de status
- ChamadoEntity: abertura, atribuição, encerramento, atualização
"""

import pytest

from src.core.chamados.entities import (
    ChamadoEntity,
    ChamadoPrioridade,
    ChamadoStatus,
    validar_transicao,
)
from src.core.shared.exceptions import BusinessRuleViolationError, ValidationError


def _abrir(**kwargs):
    dados = {
        'titulo': 'Falha na rede',
        'prioridade': ChamadoPrioridade.ALTA,
        'cliente_id': 'cliente-1',
    }
    dados.update(kwargs)
    return ChamadoEntity.abrir(**dados)


def _em_status(status):
    chamado = _abrir(tecnico_id='tecnico-1')
    chamado.status = status
    return chamado


class TestEnums:

    @pytest.mark.parametrize("valor, esperado", [
        ("EM_ANDAMENTO", ChamadoStatus.EM_ANDAMENTO),
        ("em andamento", ChamadoStatus.EM_ANDAMENTO),
        ("Em-Andamento", ChamadoStatus.EM_ANDAMENTO),
        ("encerrado", ChamadoStatus.ENCERRADO),
    ])
    def test_status_from_string(self, valor, esperado):
        assert ChamadoStatus.from_string(valor) is esperado

    def test_status_invalido(self):
        with pytest.raises(ValueError, match="Status inválido"):
            ChamadoStatus.from_string("RESOLVIDO")

    @pytest.mark.parametrize("valor", ["MEDIA", "média", "Media"])
    def test_prioridade_from_string(self, valor):
        assert ChamadoPrioridade.from_string(valor) is ChamadoPrioridade.MEDIA

    def test_prioridade_invalida(self):
        with pytest.raises(ValueError, match="Prioridade inválida"):
            ChamadoPrioridade.from_string("URGENTE")


class TestValidarTransicao:
    """Regras de transição, na ordem em que são avaliadas."""

    @pytest.mark.parametrize("novo", list(ChamadoStatus))
    def test_encerrado_nao_muda(self, novo):
        with pytest.raises(BusinessRuleViolationError, match="encerrado"):
            validar_transicao(ChamadoStatus.ENCERRADO, novo)

    def test_aberto_nao_encerra(self):
        with pytest.raises(BusinessRuleViolationError) as exc:
            validar_transicao(ChamadoStatus.ABERTO, ChamadoStatus.ENCERRADO)
        assert exc.value.rule == "encerramento_exige_andamento"

    @pytest.mark.parametrize("novo", [
        ChamadoStatus.ABERTO,
        ChamadoStatus.PAUSADO,
        ChamadoStatus.ENCERRADO,
        ChamadoStatus.CANCELADO,
    ])
    def test_pausado_so_volta_para_andamento(self, novo):
        with pytest.raises(BusinessRuleViolationError):
            validar_transicao(ChamadoStatus.PAUSADO, novo)

    @pytest.mark.parametrize("atual, novo", [
        (ChamadoStatus.ABERTO, ChamadoStatus.EM_ANDAMENTO),
        (ChamadoStatus.ABERTO, ChamadoStatus.ABERTO),
        (ChamadoStatus.ABERTO, ChamadoStatus.CANCELADO),
        (ChamadoStatus.EM_ANDAMENTO, ChamadoStatus.PAUSADO),
        (ChamadoStatus.EM_ANDAMENTO, ChamadoStatus.ENCERRADO),
        (ChamadoStatus.EM_ANDAMENTO, ChamadoStatus.ABERTO),
        (ChamadoStatus.PAUSADO, ChamadoStatus.EM_ANDAMENTO),
        (ChamadoStatus.CANCELADO, ChamadoStatus.ENCERRADO),
        (ChamadoStatus.CANCELADO, ChamadoStatus.ABERTO),
    ])
    def test_transicoes_permitidas(self, atual, novo):
        validar_transicao(atual, novo)


class TestAbrir:
    """Testes para ChamadoEntity.abrir."""

    def test_abrir_sem_tecnico(self):
        chamado = _abrir()

        assert chamado.status is ChamadoStatus.ABERTO
        assert chamado.prioridade is ChamadoPrioridade.ALTA
        assert chamado.tecnico_id is None
        assert not chamado.tem_tecnico
        assert chamado.encerrado_em is None
        assert chamado.aberto_em.tzinfo is not None
        assert chamado.observacoes == ""

    def test_abrir_com_tecnico_fica_em_andamento(self):
        chamado = _abrir(tecnico_id='tecnico-1')

        assert chamado.status is ChamadoStatus.EM_ANDAMENTO
        assert chamado.tecnico_id == 'tecnico-1'

    def test_titulo_aparado(self):
        assert _abrir(titulo='  Falha na rede  ').titulo == 'Falha na rede'

    @pytest.mark.parametrize("titulo", ["", "   ", "Erro", "x" * 101])
    def test_titulo_invalido(self, titulo):
        with pytest.raises(ValidationError) as exc:
            _abrir(titulo=titulo)
        assert exc.value.field == "titulo"

    def test_observacoes_longas(self):
        with pytest.raises(ValidationError) as exc:
            _abrir(observacoes="x" * 501)
        assert exc.value.field == "observacoes"

    def test_observacoes_no_limite(self):
        assert len(_abrir(observacoes="x" * 500).observacoes) == 500

    def test_cliente_obrigatorio(self):
        with pytest.raises(ValidationError) as exc:
            _abrir(cliente_id="")
        assert exc.value.field == "cliente_id"


class TestAlterarStatus:

    def test_encerrar_registra_data(self):
        chamado = _abrir(tecnico_id='tecnico-1')

        chamado.encerrar()

        assert chamado.status is ChamadoStatus.ENCERRADO
        assert chamado.esta_encerrado
        assert chamado.encerrado_em is not None
        assert chamado.encerrado_em >= chamado.aberto_em

    def test_encerrar_duas_vezes(self):
        chamado = _abrir(tecnico_id='tecnico-1')
        chamado.encerrar()

        with pytest.raises(BusinessRuleViolationError):
            chamado.encerrar()

    def test_pausar_e_retomar(self):
        chamado = _abrir(tecnico_id='tecnico-1')

        chamado.alterar_status(ChamadoStatus.PAUSADO)
        chamado.alterar_status(ChamadoStatus.EM_ANDAMENTO)

        assert chamado.status is ChamadoStatus.EM_ANDAMENTO
        assert chamado.encerrado_em is None

    def test_transicao_invalida_nao_altera(self):
        chamado = _abrir()

        with pytest.raises(BusinessRuleViolationError):
            chamado.alterar_status(ChamadoStatus.ENCERRADO)

        assert chamado.status is ChamadoStatus.ABERTO


class TestAtribuirTecnico:

    def test_aberto_vira_em_andamento(self):
        chamado = _abrir()

        chamado.atribuir_tecnico('tecnico-1')

        assert chamado.tecnico_id == 'tecnico-1'
        assert chamado.status is ChamadoStatus.EM_ANDAMENTO

    def test_em_andamento_mantem_status(self):
        chamado = _abrir(tecnico_id='tecnico-1')

        chamado.atribuir_tecnico('tecnico-2')

        assert chamado.tecnico_id == 'tecnico-2'
        assert chamado.status is ChamadoStatus.EM_ANDAMENTO

    def test_pausado_mantem_status(self):
        chamado = _em_status(ChamadoStatus.PAUSADO)

        chamado.atribuir_tecnico('tecnico-2')

        assert chamado.tecnico_id == 'tecnico-2'
        assert chamado.status is ChamadoStatus.PAUSADO

    def test_encerrado_rejeita(self):
        chamado = _em_status(ChamadoStatus.ENCERRADO)

        with pytest.raises(BusinessRuleViolationError, match="atribuir um técnico"):
            chamado.atribuir_tecnico('tecnico-2')

    def test_tecnico_obrigatorio(self):
        with pytest.raises(ValidationError):
            _abrir().atribuir_tecnico('')


class TestAtualizar:

    def test_substitui_dados(self):
        chamado = _abrir()

        chamado.atualizar(
            titulo='Rede instável no setor',
            prioridade=ChamadoPrioridade.BAIXA,
            cliente_id='cliente-2',
            observacoes='Ocorre à tarde',
            tecnico_id='tecnico-1',
        )

        assert chamado.titulo == 'Rede instável no setor'
        assert chamado.prioridade is ChamadoPrioridade.BAIXA
        assert chamado.cliente_id == 'cliente-2'
        assert chamado.observacoes == 'Ocorre à tarde'
        assert chamado.status is ChamadoStatus.EM_ANDAMENTO

    def test_sem_tecnico_desvincula_sem_rebaixar(self):
        chamado = _abrir(tecnico_id='tecnico-1')

        chamado.atualizar(
            titulo=chamado.titulo,
            prioridade=chamado.prioridade,
            cliente_id=chamado.cliente_id,
        )

        assert chamado.tecnico_id is None
        assert chamado.status is ChamadoStatus.EM_ANDAMENTO

    def test_encerrado_rejeita(self):
        chamado = _em_status(ChamadoStatus.ENCERRADO)

        with pytest.raises(BusinessRuleViolationError):
            chamado.atualizar(
                titulo='Novo título',
                prioridade=ChamadoPrioridade.BAIXA,
                cliente_id='cliente-1',
            )

    def test_observacoes(self):
        chamado = _abrir(observacoes='antes')

        chamado.atualizar_observacoes('depois')

        assert chamado.observacoes == 'depois'

    def test_observacoes_encerrado(self):
        chamado = _em_status(ChamadoStatus.ENCERRADO)

        with pytest.raises(BusinessRuleViolationError):
            chamado.atualizar_observacoes('depois')
