"""
Entidades do Domínio de Pessoas.

Clientes e Técnicos compartilham o mesmo registro (PessoaEntity),
diferenciados pelo discriminador `tipo`. Não há hierarquia de classes:
as funções `novo_cliente()` e `novo_tecnico()` montam o registro
completo, incluindo o conjunto de perfis padrão.

Entidades:
- PessoaEntity: Registro de pessoa (cliente ou técnico)
- TipoPessoa: Discriminador CLIENTE/TECNICO
- Perfil: Rótulos de perfil (ADMIN, CLIENTE, TECNICO)

Regras de Negócio Encapsuladas:
- Nome entre 3 e 100 caracteres
- CPF com exatamente 11 dígitos (pontuação é removida)
- E-mail em formato válido (normalizado em minúsculas)
- Senha mínima de 6 caracteres, armazenada apenas como hash
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, FrozenSet, Iterable, Optional, Tuple
import re
import uuid

from src.core.shared.exceptions import ValidationError
from src.core.shared.interfaces import PasswordHasher


EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class TipoPessoa(Enum):
    """Discriminador do registro de pessoa."""

    CLIENTE = "CLIENTE"
    TECNICO = "TECNICO"

    @property
    def descricao(self) -> str:
        """Nome legível usado em mensagens."""
        return "Cliente" if self is TipoPessoa.CLIENTE else "Técnico"


class Perfil(Enum):
    """
    Perfis (roles) de acesso.

    Os perfis existem apenas como rótulos: não há controle de
    acesso baseado neles.

    Códigos:
        ADMIN: 0 (ROLE_ADMIN)
        CLIENTE: 1 (ROLE_CLIENTE)
        TECNICO: 2 (ROLE_TECNICO)
    """

    ADMIN = 0
    CLIENTE = 1
    TECNICO = 2

    @property
    def codigo(self) -> int:
        return self.value

    @property
    def role(self) -> str:
        return f"ROLE_{self.name}"

    @classmethod
    def from_string(cls, value) -> "Perfil":
        """
        Converte nome, role ou código para enum.

        Args:
            value: "TECNICO", "ROLE_TECNICO" ou 2

        Returns:
            Perfil correspondente

        Raises:
            ValueError: Se valor inválido
        """
        if isinstance(value, Perfil):
            return value

        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Perfil inválido: {value}")

        nome = str(value).strip().upper()
        if nome.startswith("ROLE_"):
            nome = nome[len("ROLE_"):]

        try:
            return cls[nome]
        except KeyError:
            raise ValueError(f"Perfil inválido: {value}")


PERFIL_PADRAO = {
    TipoPessoa.CLIENTE: Perfil.CLIENTE,
    TipoPessoa.TECNICO: Perfil.TECNICO,
}


def normalizar_cpf(cpf: str) -> str:
    """Remove pontuação usual do CPF (123.456.789-01 → 12345678901)."""
    return re.sub(r"[.\-\s]", "", cpf or "")


def normalizar_email(email: str) -> str:
    return (email or "").strip().lower()


@dataclass
class PessoaEntity:
    """
    Entidade de Domínio: Pessoa.

    Registro único para clientes e técnicos. O campo `tipo`
    é definido na criação e nunca muda.

    Invariantes:
    - CPF e e-mail são únicos em toda a tabela de pessoas
      (verificado pelos use cases e garantido pelo banco)
    - `perfis` nunca é vazio
    - `senha_hash` nunca contém a senha em texto puro

    Attributes:
        id: Identificador único (UUID)
        tipo: CLIENTE ou TECNICO
        nome: Nome completo
        cpf: CPF com 11 dígitos
        email: E-mail normalizado
        senha_hash: Hash da senha
        perfis: Conjunto de perfis
        criado_em: Data/hora de criação
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    tipo: TipoPessoa = TipoPessoa.CLIENTE
    nome: str = ""
    cpf: str = ""
    email: str = ""
    senha_hash: str = ""
    perfis: FrozenSet[Perfil] = field(default_factory=frozenset)
    criado_em: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    NOME_MIN_LENGTH: ClassVar[int] = 3
    NOME_MAX_LENGTH: ClassVar[int] = 100
    CPF_LENGTH: ClassVar[int] = 11
    SENHA_MIN_LENGTH: ClassVar[int] = 6

    @classmethod
    def _criar(
        cls,
        tipo: TipoPessoa,
        nome: str,
        cpf: str,
        email: str,
        senha: str,
        hasher: PasswordHasher,
        perfis: Optional[Iterable[Perfil]] = None,
    ) -> "PessoaEntity":
        cpf, email = cls.validar_dados(nome, cpf, email, senha)

        perfis_finais = frozenset(perfis) if perfis else frozenset({PERFIL_PADRAO[tipo]})

        return cls(
            tipo=tipo,
            nome=nome.strip(),
            cpf=cpf,
            email=email,
            senha_hash=hasher.hash(senha),
            perfis=perfis_finais,
        )

    @classmethod
    def validar_dados(
        cls, nome: str, cpf: str, email: str, senha: Optional[str] = None
    ) -> Tuple[str, str]:
        """
        Valida os dados cadastrais sem alterar nenhum registro.

        A senha só é validada quando informada.

        Returns:
            (cpf, email) normalizados

        Raises:
            ValidationError: No primeiro campo inválido (nome, CPF, e-mail, senha)
        """
        cls._validar_nome(nome)
        cpf = cls._validar_cpf(cpf)
        email = cls._validar_email(email)
        if senha is not None:
            cls._validar_senha(senha)
        return cpf, email

    @classmethod
    def _validar_nome(cls, nome: str) -> None:
        """Valida nome da pessoa."""
        if not nome or not nome.strip():
            raise ValidationError("Nome é obrigatório", field="nome")

        tamanho = len(nome.strip())
        if tamanho < cls.NOME_MIN_LENGTH or tamanho > cls.NOME_MAX_LENGTH:
            raise ValidationError(
                f"Nome deve ter entre {cls.NOME_MIN_LENGTH} e {cls.NOME_MAX_LENGTH} caracteres",
                field="nome"
            )

    @classmethod
    def _validar_cpf(cls, cpf: str) -> str:
        """Valida e normaliza CPF. Retorna apenas os dígitos."""
        if not cpf or not cpf.strip():
            raise ValidationError("CPF é obrigatório", field="cpf")

        digitos = normalizar_cpf(cpf)
        if len(digitos) != cls.CPF_LENGTH or not digitos.isdigit():
            raise ValidationError(
                f"CPF deve conter {cls.CPF_LENGTH} dígitos",
                field="cpf"
            )
        return digitos

    @classmethod
    def _validar_email(cls, email: str) -> str:
        """Valida e normaliza e-mail."""
        if not email or not email.strip():
            raise ValidationError("Email é obrigatório", field="email")

        email = normalizar_email(email)
        if not EMAIL_REGEX.match(email):
            raise ValidationError("Email inválido", field="email")
        return email

    @classmethod
    def _validar_senha(cls, senha: str) -> None:
        if not senha or len(senha) < cls.SENHA_MIN_LENGTH:
            raise ValidationError(
                f"Senha deve ter no mínimo {cls.SENHA_MIN_LENGTH} caracteres",
                field="senha"
            )

    def atualizar_dados(
        self,
        nome: str,
        cpf: str,
        email: str,
        perfis: Optional[Iterable[Perfil]] = None,
    ) -> None:
        """
        Substitui nome, CPF e e-mail.

        A unicidade de CPF/e-mail é responsabilidade do use case,
        que consulta o repositório antes de chamar este método.

        Args:
            nome: Novo nome
            cpf: Novo CPF (com ou sem pontuação)
            email: Novo e-mail
            perfis: Novos perfis; mantém os atuais se vazio
        """
        cpf, email = self.validar_dados(nome, cpf, email)

        self.nome = nome.strip()
        self.cpf = cpf
        self.email = email

        if perfis:
            self.perfis = frozenset(perfis)

    def alterar_senha(self, nova_senha: Optional[str], hasher: PasswordHasher) -> bool:
        """
        Troca a senha apenas se uma nova senha não vazia for informada.

        Returns:
            True se a senha foi alterada
        """
        if nova_senha is None or not nova_senha.strip():
            return False

        self._validar_senha(nova_senha)
        self.senha_hash = hasher.hash(nova_senha)
        return True

    @property
    def is_cliente(self) -> bool:
        return self.tipo is TipoPessoa.CLIENTE

    @property
    def is_tecnico(self) -> bool:
        return self.tipo is TipoPessoa.TECNICO

    def __repr__(self) -> str:
        return (
            f"PessoaEntity("
            f"id={self.id[:8]}..., "
            f"tipo={self.tipo.value}, "
            f"nome='{self.nome}'"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, PessoaEntity):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def novo_cliente(
    nome: str,
    cpf: str,
    email: str,
    senha: str,
    hasher: PasswordHasher,
    perfis: Optional[Iterable[Perfil]] = None,
) -> PessoaEntity:
    """
    Monta um registro completo de cliente.

    Perfil padrão: {CLIENTE}, aplicado somente se nenhum perfil for informado.

    Raises:
        ValidationError: Se dados de entrada inválidos
    """
    return PessoaEntity._criar(TipoPessoa.CLIENTE, nome, cpf, email, senha, hasher, perfis)


def novo_tecnico(
    nome: str,
    cpf: str,
    email: str,
    senha: str,
    hasher: PasswordHasher,
    perfis: Optional[Iterable[Perfil]] = None,
) -> PessoaEntity:
    """
    Monta um registro completo de técnico.

    Perfil padrão: {TECNICO}, aplicado somente se nenhum perfil for informado.

    Raises:
        ValidationError: Se dados de entrada inválidos
    """
    return PessoaEntity._criar(TipoPessoa.TECNICO, nome, cpf, email, senha, hasher, perfis)


CONSTRUTORES = {
    TipoPessoa.CLIENTE: novo_cliente,
    TipoPessoa.TECNICO: novo_tecnico,
}
