"""
Use Cases (Application Services) do Domínio de Chamados.

Este módulo orquestra o ciclo de vida dos chamados, coordenando a
entidade ChamadoEntity com os repositórios de chamados e de pessoas.

Use Cases implementados:
- AbrirChamadoService: Abre chamado para um cliente
- ObterChamadoService: Obtém chamado específico
- ListarChamadosService: Lista chamados com filtros
- AtualizarChamadoService: Substitui os dados do chamado
- AlterarStatusChamadoService: Muda status validando a transição
- AtribuirTecnicoService: Vincula técnico ao chamado
- EncerrarChamadoService: Encerra chamado
- AtualizarObservacoesService: Substitui apenas as observações

Princípios:
- Um Use Case = Uma operação de negócio
- Escritas dentro de `with self.uow:` (uma transação por operação)
- Exceções de domínio propagam sem tratamento até a borda
"""

import logging
from typing import Dict, List, Optional

from src.core.shared.interfaces import UnitOfWork
from src.core.shared.exceptions import EntityNotFoundError, ValidationError
from src.core.pessoas.entities import PessoaEntity, TipoPessoa
from src.core.pessoas.ports import PessoaRepository
from src.core.pessoas.use_cases import carregar_pessoa

from .ports import ChamadoRepository
from .entities import ChamadoEntity, ChamadoPrioridade, ChamadoStatus
from .dtos import (
    AbrirChamadoInputDTO,
    AtualizarChamadoInputDTO,
    AlterarStatusInputDTO,
    AtribuirTecnicoInputDTO,
    ChamadoOutputDTO,
    ListarChamadosQueryDTO,
)


logger = logging.getLogger(__name__)


def converter_prioridade(valor: Optional[str], field: str = "prioridade") -> ChamadoPrioridade:
    """
    Raises:
        ValidationError: Se prioridade ausente ou inválida
    """
    if not valor:
        raise ValidationError("Prioridade é obrigatória", field=field)
    try:
        return ChamadoPrioridade.from_string(valor)
    except ValueError as e:
        raise ValidationError(str(e), field=field)


def converter_status(valor: Optional[str], field: str = "status") -> ChamadoStatus:
    """
    Raises:
        ValidationError: Se status ausente ou inválido
    """
    if not valor:
        raise ValidationError("Status é obrigatório", field=field)
    try:
        return ChamadoStatus.from_string(valor)
    except ValueError as e:
        raise ValidationError(str(e), field=field)


class _ChamadoService:
    """
    Base dos services de chamado.

    Concentra a busca do chamado e a montagem do DTO de saída,
    que precisa dos nomes de cliente e técnico.
    """

    def __init__(self, chamado_repo: ChamadoRepository, pessoa_repo: PessoaRepository):
        self.chamado_repo = chamado_repo
        self.pessoa_repo = pessoa_repo

    def _carregar_chamado(self, chamado_id: str) -> ChamadoEntity:
        chamado = self.chamado_repo.get_by_id(chamado_id) if chamado_id else None

        if not chamado:
            raise EntityNotFoundError(
                f"Chamado não encontrado com id: {chamado_id}",
                entity_type="Chamado",
                entity_id=chamado_id
            )
        return chamado

    def _carregar_cliente(self, cliente_id: str) -> PessoaEntity:
        return carregar_pessoa(self.pessoa_repo, cliente_id, TipoPessoa.CLIENTE)

    def _carregar_tecnico(self, tecnico_id: str) -> PessoaEntity:
        return carregar_pessoa(self.pessoa_repo, tecnico_id, TipoPessoa.TECNICO)

    def _nome(self, pessoa_id: Optional[str], cache: Dict[str, Optional[str]]) -> Optional[str]:
        if not pessoa_id:
            return None
        if pessoa_id not in cache:
            pessoa = self.pessoa_repo.get_by_id(pessoa_id)
            cache[pessoa_id] = pessoa.nome if pessoa else None
        return cache[pessoa_id]

    def _para_saida(
        self,
        chamado: ChamadoEntity,
        cache: Optional[Dict[str, Optional[str]]] = None,
    ) -> ChamadoOutputDTO:
        cache = {} if cache is None else cache
        return ChamadoOutputDTO.from_entity(
            chamado,
            nome_cliente=self._nome(chamado.cliente_id, cache),
            nome_tecnico=self._nome(chamado.tecnico_id, cache),
        )


class AbrirChamadoService(_ChamadoService):
    """
    Use Case: Abrir um novo chamado.

    Fluxo:
    1. Validar prioridade
    2. Confirmar que o cliente (e o técnico, se informado) existem
    3. Criar entidade (ABERTO, ou EM_ANDAMENTO se veio com técnico)
    4. Persistir e retornar DTO de saída

    Example:
        service = AbrirChamadoService(chamado_repo, pessoa_repo, uow)
        output = service.execute(AbrirChamadoInputDTO(
            titulo="Falha na rede",
            prioridade="ALTA",
            cliente_id=cliente_id,
        ))
        print(output.status)  # "ABERTO"
    """

    def __init__(
        self,
        chamado_repo: ChamadoRepository,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
    ):
        super().__init__(chamado_repo, pessoa_repo)
        self.uow = uow

    def execute(self, input_dto: AbrirChamadoInputDTO) -> ChamadoOutputDTO:
        """
        Executa abertura de chamado em transação atômica.

        Raises:
            ValidationError: Se dados inválidos
            EntityNotFoundError: Se cliente ou técnico não existem
        """
        prioridade = converter_prioridade(input_dto.prioridade)

        with self.uow:
            cliente = self._carregar_cliente(input_dto.cliente_id)

            tecnico = None
            if input_dto.tecnico_id:
                tecnico = self._carregar_tecnico(input_dto.tecnico_id)

            chamado = ChamadoEntity.abrir(
                titulo=input_dto.titulo,
                prioridade=prioridade,
                cliente_id=cliente.id,
                observacoes=input_dto.observacoes,
                tecnico_id=tecnico.id if tecnico else None,
            )

            self.chamado_repo.save(chamado)

        logger.info(f"Chamado aberto: {chamado.id} (status={chamado.status.value})")
        return ChamadoOutputDTO.from_entity(
            chamado,
            nome_cliente=cliente.nome,
            nome_tecnico=tecnico.nome if tecnico else None,
        )


class ObterChamadoService(_ChamadoService):
    """
    Use Case: Obter detalhes de um chamado específico.
    """

    def execute(self, chamado_id: str) -> ChamadoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se chamado não existe
        """
        return self._para_saida(self._carregar_chamado(chamado_id))


class ListarChamadosService(_ChamadoService):
    """
    Use Case: Listar chamados com filtros.

    Não usa UoW pois é operação de leitura (não precisa de transação).
    """

    def execute(self, query: Optional[ListarChamadosQueryDTO] = None) -> List[ChamadoOutputDTO]:
        """
        Lista chamados filtrando por status e/ou prioridade.

        Raises:
            ValidationError: Se filtro com valor inválido
        """
        query = query or ListarChamadosQueryDTO()

        status = converter_status(query.status) if query.status else None
        prioridade = converter_prioridade(query.prioridade) if query.prioridade else None

        chamados = self.chamado_repo.list_filtered(status=status, prioridade=prioridade)

        cache: Dict[str, Optional[str]] = {}
        return [self._para_saida(c, cache) for c in chamados]


class AtualizarChamadoService(_ChamadoService):
    """
    Use Case: Atualizar dados de um chamado.

    Substituição completa; rejeitada se o chamado estiver encerrado.
    """

    def __init__(
        self,
        chamado_repo: ChamadoRepository,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
    ):
        super().__init__(chamado_repo, pessoa_repo)
        self.uow = uow

    def execute(self, input_dto: AtualizarChamadoInputDTO) -> ChamadoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se chamado, cliente ou técnico não existem
            BusinessRuleViolationError: Se chamado encerrado
            ValidationError: Se dados inválidos
        """
        prioridade = converter_prioridade(input_dto.prioridade)

        with self.uow:
            chamado = self._carregar_chamado(input_dto.chamado_id)
            chamado.validar_nao_encerrado()
            cliente = self._carregar_cliente(input_dto.cliente_id)

            tecnico = None
            if input_dto.tecnico_id:
                tecnico = self._carregar_tecnico(input_dto.tecnico_id)

            chamado.atualizar(
                titulo=input_dto.titulo,
                prioridade=prioridade,
                cliente_id=cliente.id,
                observacoes=input_dto.observacoes,
                tecnico_id=tecnico.id if tecnico else None,
            )

            self.chamado_repo.save(chamado)

        logger.info(f"Chamado atualizado: {chamado.id}")
        return ChamadoOutputDTO.from_entity(
            chamado,
            nome_cliente=cliente.nome,
            nome_tecnico=tecnico.nome if tecnico else None,
        )


class AlterarStatusChamadoService(_ChamadoService):
    """
    Use Case: Alterar status de um chamado.

    As regras de transição ficam em `validar_transicao`.
    """

    def __init__(
        self,
        chamado_repo: ChamadoRepository,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
    ):
        super().__init__(chamado_repo, pessoa_repo)
        self.uow = uow

    def execute(self, input_dto: AlterarStatusInputDTO) -> ChamadoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se chamado não existe
            ValidationError: Se status inválido
            BusinessRuleViolationError: Se transição inválida
        """
        novo_status = converter_status(input_dto.novo_status)

        with self.uow:
            chamado = self._carregar_chamado(input_dto.chamado_id)
            status_anterior = chamado.status

            chamado.alterar_status(novo_status)

            self.chamado_repo.save(chamado)

        logger.info(
            f"Chamado {chamado.id}: {status_anterior.value} → {chamado.status.value}"
        )
        return self._para_saida(chamado)


class AtribuirTecnicoService(_ChamadoService):
    """
    Use Case: Atribuir técnico a um chamado.

    Fluxo:
    1. Buscar chamado e técnico (ambos devem existir)
    2. Vincular técnico (rejeitado se encerrado; ABERTO vira EM_ANDAMENTO)
    3. Persistir alterações
    """

    def __init__(
        self,
        chamado_repo: ChamadoRepository,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
    ):
        super().__init__(chamado_repo, pessoa_repo)
        self.uow = uow

    def execute(self, input_dto: AtribuirTecnicoInputDTO) -> ChamadoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se chamado ou técnico não existem
            BusinessRuleViolationError: Se chamado encerrado
        """
        with self.uow:
            chamado = self._carregar_chamado(input_dto.chamado_id)
            tecnico = self._carregar_tecnico(input_dto.tecnico_id)

            chamado.atribuir_tecnico(tecnico.id)

            self.chamado_repo.save(chamado)

        logger.info(f"Técnico {tecnico.id} atribuído ao chamado {chamado.id}")
        return self._para_saida(chamado)


class EncerrarChamadoService(_ChamadoService):
    """
    Use Case: Encerrar um chamado.

    Equivalente a alterar o status para ENCERRADO.
    """

    def __init__(
        self,
        chamado_repo: ChamadoRepository,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
    ):
        super().__init__(chamado_repo, pessoa_repo)
        self.uow = uow

    def execute(self, chamado_id: str) -> ChamadoOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se chamado não existe
            BusinessRuleViolationError: Se chamado ABERTO, PAUSADO ou já encerrado
        """
        with self.uow:
            chamado = self._carregar_chamado(chamado_id)

            chamado.encerrar()

            self.chamado_repo.save(chamado)

        logger.info(f"Chamado encerrado: {chamado.id}")
        return self._para_saida(chamado)


class AtualizarObservacoesService(_ChamadoService):
    """
    Use Case: Atualizar somente as observações de um chamado.
    """

    def __init__(
        self,
        chamado_repo: ChamadoRepository,
        pessoa_repo: PessoaRepository,
        uow: UnitOfWork,
    ):
        super().__init__(chamado_repo, pessoa_repo)
        self.uow = uow

    def execute(self, chamado_id: str, observacoes: Optional[str]) -> ChamadoOutputDTO:
        with self.uow:
            chamado = self._carregar_chamado(chamado_id)

            chamado.atualizar_observacoes(observacoes)

            self.chamado_repo.save(chamado)

        logger.info(f"Observações atualizadas no chamado {chamado.id}")
        return self._para_saida(chamado)
