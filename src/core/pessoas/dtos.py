"""
Data Transfer Objects (DTOs) do Domínio de Pessoas.

Os DTOs de entrada chegam já validados quanto à forma (Forms/APIs);
as regras de domínio continuam na entidade e nos use cases.

O DTO de saída nunca carrega a senha nem o hash da senha.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .entities import PessoaEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarPessoaInputDTO:
    """
    DTO de entrada para cadastrar cliente ou técnico.

    O tipo da pessoa não faz parte do DTO: é definido pelo
    service que recebe o DTO (um service por tipo).

    Attributes:
        nome: Nome completo
        cpf: CPF (com ou sem pontuação)
        email: E-mail
        senha: Senha em texto puro (será convertida em hash)
        perfis: Nomes ou códigos de perfil; vazio aplica o padrão do tipo
    """

    nome: str
    cpf: str
    email: str
    senha: str
    perfis: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class AtualizarPessoaInputDTO:
    """
    DTO de entrada para atualizar cliente ou técnico.

    Attributes:
        pessoa_id: ID do registro a atualizar
        nome: Novo nome
        cpf: Novo CPF
        email: Novo e-mail
        senha: Nova senha; None ou vazia mantém a senha atual
        perfis: Novos perfis; vazio mantém os atuais
    """

    pessoa_id: str
    nome: str
    cpf: str
    email: str
    senha: Optional[str] = None
    perfis: tuple = field(default_factory=tuple)


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class PessoaOutputDTO:
    """
    DTO de saída de cliente/técnico.

    Attributes:
        id: Identificador único
        tipo: "CLIENTE" ou "TECNICO"
        nome: Nome completo
        cpf: CPF com 11 dígitos
        email: E-mail normalizado
        perfis: Nomes dos perfis, ordenados por código
        criado_em: Data/hora de criação
    """

    id: str
    tipo: str
    nome: str
    cpf: str
    email: str
    criado_em: datetime
    perfis: List[str] = field(default_factory=list)

    @classmethod
    def from_entity(cls, entity: PessoaEntity) -> "PessoaOutputDTO":
        return cls(
            id=entity.id,
            tipo=entity.tipo.value,
            nome=entity.nome,
            cpf=entity.cpf,
            email=entity.email,
            criado_em=entity.criado_em,
            perfis=[p.name for p in sorted(entity.perfis, key=lambda p: p.codigo)],
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": self.id,
            "tipo": self.tipo,
            "nome": self.nome,
            "cpf": self.cpf,
            "email": self.email,
            "perfis": list(self.perfis),
            "criado_em": self.criado_em.isoformat(),
        }
