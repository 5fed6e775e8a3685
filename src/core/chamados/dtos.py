"""
Data Transfer Objects (DTOs) do Domínio de Chamados.

Tipos de DTOs:
- Input DTOs: Recebem dados de entrada validados (de Forms/APIs)
- Output DTOs: Formatam dados para resposta (para Views/APIs)
- Query DTOs: Filtros de listagem
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .entities import ChamadoEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class AbrirChamadoInputDTO:
    """
    DTO de entrada para abrir chamado.

    Attributes:
        titulo: Título do chamado
        prioridade: Nome da prioridade (ex: "ALTA")
        cliente_id: ID do cliente
        observacoes: Texto livre opcional
        tecnico_id: ID do técnico (opcional)
    """

    titulo: str
    prioridade: str
    cliente_id: str
    observacoes: Optional[str] = None
    tecnico_id: Optional[str] = None


@dataclass(frozen=True)
class AtualizarChamadoInputDTO:
    """
    DTO de entrada para atualização completa do chamado.

    Substituição total: `tecnico_id` ausente desvincula o técnico.
    """

    chamado_id: str
    titulo: str
    prioridade: str
    cliente_id: str
    observacoes: Optional[str] = None
    tecnico_id: Optional[str] = None


@dataclass(frozen=True)
class AlterarStatusInputDTO:
    """
    Attributes:
        chamado_id: ID do chamado
        novo_status: Nome do status (ex: "EM_ANDAMENTO")
    """

    chamado_id: str
    novo_status: str


@dataclass(frozen=True)
class AtribuirTecnicoInputDTO:
    chamado_id: str
    tecnico_id: str


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class ChamadoOutputDTO:
    """
    DTO de saída completo com dados do chamado.

    Inclui os nomes de cliente e técnico para exibição,
    resolvidos pelo use case no momento da resposta.

    Attributes:
        id: Identificador único
        titulo: Título
        observacoes: Texto livre
        prioridade: Nome da prioridade
        status: Nome do status
        aberto_em: Data/hora de abertura
        encerrado_em: Data/hora de encerramento (se encerrado)
        cliente_id: ID do cliente
        nome_cliente: Nome do cliente
        tecnico_id: ID do técnico (se atribuído)
        nome_tecnico: Nome do técnico (se atribuído)
    """

    id: str
    titulo: str
    observacoes: str
    prioridade: str
    status: str
    aberto_em: datetime
    encerrado_em: Optional[datetime]
    cliente_id: str
    nome_cliente: Optional[str]
    tecnico_id: Optional[str]
    nome_tecnico: Optional[str]

    @classmethod
    def from_entity(
        cls,
        entity: ChamadoEntity,
        nome_cliente: Optional[str] = None,
        nome_tecnico: Optional[str] = None,
    ) -> "ChamadoOutputDTO":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Entidade ChamadoEntity
            nome_cliente: Nome do cliente (resolvido pelo chamador)
            nome_tecnico: Nome do técnico (resolvido pelo chamador)
        """
        return cls(
            id=entity.id,
            titulo=entity.titulo,
            observacoes=entity.observacoes,
            prioridade=entity.prioridade.value,
            status=entity.status.value,
            aberto_em=entity.aberto_em,
            encerrado_em=entity.encerrado_em,
            cliente_id=entity.cliente_id,
            nome_cliente=nome_cliente,
            tecnico_id=entity.tecnico_id,
            nome_tecnico=nome_tecnico,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "titulo": self.titulo,
            "observacoes": self.observacoes,
            "prioridade": self.prioridade,
            "status": self.status,
            "aberto_em": self.aberto_em.isoformat(),
            "encerrado_em": self.encerrado_em.isoformat() if self.encerrado_em else None,
            "cliente_id": self.cliente_id,
            "nome_cliente": self.nome_cliente,
            "tecnico_id": self.tecnico_id,
            "nome_tecnico": self.nome_tecnico,
        }


# =============================================================================
# QUERY DTOs (Filtros de Busca)
# =============================================================================

@dataclass(frozen=True)
class ListarChamadosQueryDTO:
    """
    Filtros de listagem; ambos opcionais e combináveis.

    Attributes:
        status: Nome do status
        prioridade: Nome da prioridade
    """

    status: Optional[str] = None
    prioridade: Optional[str] = None
