"""
Domínio de Pessoas - Clientes e Técnicos.

Clientes abrem chamados; técnicos os atendem. Ambos são o mesmo
registro (PessoaEntity) diferenciado por `TipoPessoa`.

Contém:
- Entidades (PessoaEntity, TipoPessoa, Perfil, novo_cliente, novo_tecnico)
- DTOs (Input/Output)
- Ports (PessoaRepository)
- Use Cases (cadastro com unicidade de CPF/e-mail, consultas, remoção)
"""

from .entities import PessoaEntity, TipoPessoa, Perfil, novo_cliente, novo_tecnico
from .dtos import CriarPessoaInputDTO, AtualizarPessoaInputDTO, PessoaOutputDTO
from .ports import PessoaRepository, InMemoryPessoaRepository
from .use_cases import (
    CriarPessoaService,
    AtualizarPessoaService,
    RemoverPessoaService,
    ObterPessoaService,
    ListarPessoasService,
    BuscarPessoaPorCpfService,
    BuscarPessoaPorEmailService,
)

__all__ = [
    # Entities
    "PessoaEntity",
    "TipoPessoa",
    "Perfil",
    "novo_cliente",
    "novo_tecnico",
    # DTOs
    "CriarPessoaInputDTO",
    "AtualizarPessoaInputDTO",
    "PessoaOutputDTO",
    # Ports
    "PessoaRepository",
    "InMemoryPessoaRepository",
    # Use Cases
    "CriarPessoaService",
    "AtualizarPessoaService",
    "RemoverPessoaService",
    "ObterPessoaService",
    "ListarPessoasService",
    "BuscarPessoaPorCpfService",
    "BuscarPessoaPorEmailService",
]
