"""
Entidades do Domínio de Chamados.

Entidades:
- ChamadoEntity: Chamado de suporte aberto por um cliente
- ChamadoStatus: Estados possíveis de um chamado
- ChamadoPrioridade: Níveis de prioridade

Regras de Negócio Encapsuladas:
- Título entre 5 e 100 caracteres, observações até 500
- Chamado encerrado não aceita nenhuma alteração
- ABERTO não vai direto para ENCERRADO
- PAUSADO só volta para EM_ANDAMENTO
- Técnico vinculado a chamado ABERTO o promove para EM_ANDAMENTO
- Encerramento registra a data/hora de fechamento
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, Optional
import uuid

from src.core.shared.exceptions import (
    ValidationError,
    BusinessRuleViolationError,
)


class ChamadoStatus(Enum):
    """
    Estados possíveis de um chamado.

    Fluxo de Estados:
        ABERTO → EM_ANDAMENTO → ENCERRADO
          ↓           ↕
          └──────→ PAUSADO

    CANCELADO existe como valor, mas nenhuma regra o trata de forma
    especial: as regras gerais se aplicam a ele literalmente.
    """

    ABERTO = "ABERTO"
    EM_ANDAMENTO = "EM_ANDAMENTO"
    PAUSADO = "PAUSADO"
    ENCERRADO = "ENCERRADO"
    CANCELADO = "CANCELADO"

    @property
    def descricao(self) -> str:
        return self.value.replace("_", " ").capitalize()

    @classmethod
    def from_string(cls, value: str) -> "ChamadoStatus":
        """
        Converte string para enum.

        Aceita o nome com espaço ou hífen no lugar do sublinhado
        ("em andamento", "EM-ANDAMENTO").

        Raises:
            ValueError: Se valor inválido
        """
        if isinstance(value, ChamadoStatus):
            return value

        nome = str(value or "").strip().upper().replace(" ", "_").replace("-", "_")
        try:
            return cls[nome]
        except KeyError:
            raise ValueError(f"Status inválido: {value}")


class ChamadoPrioridade(Enum):
    """Níveis de prioridade de um chamado."""

    BAIXA = "BAIXA"
    MEDIA = "MEDIA"
    ALTA = "ALTA"

    @classmethod
    def from_string(cls, value: str) -> "ChamadoPrioridade":
        """
        Converte string para enum ("alta", "ALTA", "Média").

        Raises:
            ValueError: Se valor inválido
        """
        if isinstance(value, ChamadoPrioridade):
            return value

        nome = str(value or "").strip().upper().replace("É", "E")
        try:
            return cls[nome]
        except KeyError:
            raise ValueError(f"Prioridade inválida: {value}")


def validar_transicao(atual: ChamadoStatus, novo: ChamadoStatus) -> None:
    """
    Valida transição de status.

    Regras, avaliadas nesta ordem (a primeira violada vence):
    1. ENCERRADO não muda mais
    2. ABERTO → ENCERRADO é proibido
    3. PAUSADO só pode ir para EM_ANDAMENTO

    Qualquer outra transição é permitida.

    Raises:
        BusinessRuleViolationError: Se transição inválida
    """
    if atual is ChamadoStatus.ENCERRADO:
        raise BusinessRuleViolationError(
            "Não é possível alterar um chamado encerrado",
            rule="chamado_encerrado_imutavel"
        )

    if atual is ChamadoStatus.ABERTO and novo is ChamadoStatus.ENCERRADO:
        raise BusinessRuleViolationError(
            "Chamado ABERTO não pode ser encerrado diretamente",
            rule="encerramento_exige_andamento"
        )

    if atual is ChamadoStatus.PAUSADO and novo is not ChamadoStatus.EM_ANDAMENTO:
        raise BusinessRuleViolationError(
            "Chamado PAUSADO só pode voltar para EM_ANDAMENTO",
            rule="pausado_volta_para_andamento"
        )


@dataclass
class ChamadoEntity:
    """
    Entidade de Domínio: Chamado.

    Toda operação de escrita persiste o registro completo; não há
    atualização parcial de campos.

    Invariantes:
    - Chamado ENCERRADO não sofre nenhuma alteração
    - `encerrado_em` só é preenchido quando o status vira ENCERRADO
    - `cliente_id` sempre referencia um cliente existente
    - `tecnico_id`, quando presente, referencia um técnico existente

    Attributes:
        id: Identificador único (UUID)
        titulo: Título do chamado
        observacoes: Texto livre (opcional)
        prioridade: BAIXA, MEDIA ou ALTA
        status: Estado atual
        cliente_id: ID do cliente dono do chamado
        tecnico_id: ID do técnico responsável (opcional)
        aberto_em: Data/hora de abertura
        encerrado_em: Data/hora de encerramento

    Example:
        chamado = ChamadoEntity.abrir(
            titulo="Falha na rede",
            prioridade=ChamadoPrioridade.ALTA,
            cliente_id=cliente.id,
        )
        chamado.atribuir_tecnico(tecnico.id)   # → EM_ANDAMENTO
        chamado.encerrar()                     # → ENCERRADO
    """

    # Identificação
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # Dados principais
    titulo: str = ""
    observacoes: str = ""

    # Estado
    status: ChamadoStatus = field(default=ChamadoStatus.ABERTO)
    prioridade: ChamadoPrioridade = field(default=ChamadoPrioridade.MEDIA)

    # Relacionamentos
    cliente_id: str = ""
    tecnico_id: Optional[str] = None

    # Timestamps
    aberto_em: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    encerrado_em: Optional[datetime] = None

    # Constantes de validação
    TITULO_MIN_LENGTH: ClassVar[int] = 5
    TITULO_MAX_LENGTH: ClassVar[int] = 100
    OBSERVACOES_MAX_LENGTH: ClassVar[int] = 500

    @classmethod
    def abrir(
        cls,
        titulo: str,
        prioridade: ChamadoPrioridade,
        cliente_id: str,
        observacoes: Optional[str] = None,
        tecnico_id: Optional[str] = None,
    ) -> "ChamadoEntity":
        """
        Factory method para abrir chamado com validações.

        O chamado nasce ABERTO; se já vier com técnico, é promovido
        para EM_ANDAMENTO.

        Raises:
            ValidationError: Se dados de entrada inválidos
        """
        cls._validar_titulo(titulo)
        cls._validar_observacoes(observacoes)

        if not cliente_id:
            raise ValidationError("Cliente é obrigatório", field="cliente_id")

        chamado = cls(
            titulo=titulo.strip(),
            observacoes=(observacoes or "").strip(),
            prioridade=prioridade,
            cliente_id=cliente_id,
            status=ChamadoStatus.ABERTO,
        )
        chamado._vincular_tecnico(tecnico_id)

        return chamado

    @classmethod
    def _validar_titulo(cls, titulo: str) -> None:
        if not titulo or not titulo.strip():
            raise ValidationError("Título é obrigatório", field="titulo")

        tamanho = len(titulo.strip())
        if tamanho < cls.TITULO_MIN_LENGTH or tamanho > cls.TITULO_MAX_LENGTH:
            raise ValidationError(
                f"Título deve ter entre {cls.TITULO_MIN_LENGTH} e {cls.TITULO_MAX_LENGTH} caracteres",
                field="titulo"
            )

    @classmethod
    def _validar_observacoes(cls, observacoes: Optional[str]) -> None:
        if observacoes and len(observacoes.strip()) > cls.OBSERVACOES_MAX_LENGTH:
            raise ValidationError(
                f"Observações devem ter no máximo {cls.OBSERVACOES_MAX_LENGTH} caracteres",
                field="observacoes"
            )

    def validar_nao_encerrado(self) -> None:
        if self.esta_encerrado:
            raise BusinessRuleViolationError(
                "Não é possível alterar um chamado encerrado",
                rule="chamado_encerrado_imutavel"
            )

    def _vincular_tecnico(self, tecnico_id: Optional[str]) -> None:
        """Define o técnico e aplica a promoção ABERTO → EM_ANDAMENTO."""
        self.tecnico_id = tecnico_id or None
        if self.tecnico_id and self.status is ChamadoStatus.ABERTO:
            self.status = ChamadoStatus.EM_ANDAMENTO

    def alterar_status(self, novo_status: ChamadoStatus) -> None:
        """
        Altera status com validação de transição.

        Encerrar registra `encerrado_em`.

        Raises:
            BusinessRuleViolationError: Se transição inválida
        """
        validar_transicao(self.status, novo_status)

        self.status = novo_status
        if novo_status is ChamadoStatus.ENCERRADO:
            self.encerrado_em = datetime.now(timezone.utc)

    def encerrar(self) -> None:
        """Equivalente a `alterar_status(ENCERRADO)`."""
        self.alterar_status(ChamadoStatus.ENCERRADO)

    def atribuir_tecnico(self, tecnico_id: str) -> None:
        """
        Atribui técnico ao chamado.

        Chamado ABERTO passa a EM_ANDAMENTO; EM_ANDAMENTO e PAUSADO
        mantêm o status.

        Raises:
            ValidationError: Se tecnico_id vazio
            BusinessRuleViolationError: Se chamado encerrado
        """
        if not tecnico_id:
            raise ValidationError("Técnico é obrigatório", field="tecnico_id")

        if self.esta_encerrado:
            raise BusinessRuleViolationError(
                "Não é possível atribuir um técnico a um chamado encerrado",
                rule="chamado_encerrado_imutavel"
            )

        self._vincular_tecnico(tecnico_id)

    def atualizar(
        self,
        titulo: str,
        prioridade: ChamadoPrioridade,
        cliente_id: str,
        observacoes: Optional[str] = None,
        tecnico_id: Optional[str] = None,
    ) -> None:
        """
        Substitui título, observações, prioridade, cliente e técnico.

        Sem `tecnico_id` o técnico é desvinculado, sem rebaixar o status.

        Raises:
            BusinessRuleViolationError: Se chamado encerrado
            ValidationError: Se dados inválidos
        """
        self.validar_nao_encerrado()
        self._validar_titulo(titulo)
        self._validar_observacoes(observacoes)

        if not cliente_id:
            raise ValidationError("Cliente é obrigatório", field="cliente_id")

        self.titulo = titulo.strip()
        self.observacoes = (observacoes or "").strip()
        self.prioridade = prioridade
        self.cliente_id = cliente_id
        self._vincular_tecnico(tecnico_id)

    def atualizar_observacoes(self, observacoes: Optional[str]) -> None:
        """
        Substitui apenas as observações.

        Raises:
            BusinessRuleViolationError: Se chamado encerrado
        """
        self.validar_nao_encerrado()
        self._validar_observacoes(observacoes)
        self.observacoes = (observacoes or "").strip()

    @property
    def esta_encerrado(self) -> bool:
        return self.status is ChamadoStatus.ENCERRADO

    @property
    def tem_tecnico(self) -> bool:
        return self.tecnico_id is not None

    def __repr__(self) -> str:
        return (
            f"ChamadoEntity("
            f"id={self.id[:8]}..., "
            f"titulo='{self.titulo[:20]}...', "
            f"status={self.status.value}, "
            f"prioridade={self.prioridade.value}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, ChamadoEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
