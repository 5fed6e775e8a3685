"""
Domínio de Chamados - Ciclo de vida dos chamados de suporte.

Este módulo contém a lógica de negócio dos chamados:
- Entidades (ChamadoEntity, ChamadoStatus, ChamadoPrioridade)
- Regras de transição de status (validar_transicao)
- DTOs (Input/Output Data Transfer Objects)
- Ports (Interfaces para repositórios)
- Use Cases (abrir, atualizar, alterar status, atribuir, encerrar)

Características do Domínio:
- Chamado encerrado é imutável
- ABERTO precisa passar por EM_ANDAMENTO antes de encerrar
- PAUSADO só retorna para EM_ANDAMENTO
- Técnico vinculado a chamado ABERTO o coloca EM_ANDAMENTO
"""

from .entities import (
    ChamadoEntity,
    ChamadoStatus,
    ChamadoPrioridade,
    validar_transicao,
)
from .dtos import (
    AbrirChamadoInputDTO,
    AtualizarChamadoInputDTO,
    AlterarStatusInputDTO,
    AtribuirTecnicoInputDTO,
    ChamadoOutputDTO,
    ListarChamadosQueryDTO,
)
from .ports import ChamadoRepository, InMemoryChamadoRepository
from .use_cases import (
    AbrirChamadoService,
    ObterChamadoService,
    ListarChamadosService,
    AtualizarChamadoService,
    AlterarStatusChamadoService,
    AtribuirTecnicoService,
    EncerrarChamadoService,
    AtualizarObservacoesService,
)

__all__ = [
    # Entities
    "ChamadoEntity",
    "ChamadoStatus",
    "ChamadoPrioridade",
    "validar_transicao",
    # DTOs
    "AbrirChamadoInputDTO",
    "AtualizarChamadoInputDTO",
    "AlterarStatusInputDTO",
    "AtribuirTecnicoInputDTO",
    "ChamadoOutputDTO",
    "ListarChamadosQueryDTO",
    # Ports
    "ChamadoRepository",
    "InMemoryChamadoRepository",
    # Use Cases
    "AbrirChamadoService",
    "ObterChamadoService",
    "ListarChamadosService",
    "AtualizarChamadoService",
    "AlterarStatusChamadoService",
    "AtribuirTecnicoService",
    "EncerrarChamadoService",
    "AtualizarObservacoesService",
]
