"""
Use Cases (Application Services) do Domínio de Pessoas.

Clientes e técnicos têm exatamente as mesmas operações; cada service
recebe o `TipoPessoa` que atende na construção, e o container de
dependências registra uma instância por tipo.

Use Cases implementados:
- CriarPessoaService: Cadastra cliente/técnico (unicidade de CPF e e-mail)
- AtualizarPessoaService: Atualiza dados, revalidando unicidade
- RemoverPessoaService: Remove registro sem chamados vinculados
- ObterPessoaService: Busca por ID
- ListarPessoasService: Lista por tipo
- BuscarPessoaPorCpfService: Busca por CPF
- BuscarPessoaPorEmailService: Busca por e-mail

Regras de unicidade:
- CPF é verificado antes do e-mail; o primeiro conflito encontrado vence
- Em updates, só há verificação se o valor mudou, e o próprio
  registro é excluído da busca
"""

import logging
from typing import Iterable, List

from src.core.shared.interfaces import PasswordHasher, UnitOfWork
from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)

from .dtos import AtualizarPessoaInputDTO, CriarPessoaInputDTO, PessoaOutputDTO
from .entities import (
    CONSTRUTORES,
    Perfil,
    PessoaEntity,
    TipoPessoa,
    normalizar_cpf,
    normalizar_email,
)
from .ports import PessoaRepository, ReferenciasPessoa


logger = logging.getLogger(__name__)

CPF_DUPLICADO = "CPF já cadastrado no sistema"
EMAIL_DUPLICADO = "E-mail já cadastrado no sistema"


def resolver_perfis(valores: Iterable) -> List[Perfil]:
    """
    Converte nomes/códigos de perfil em enums.

    Raises:
        ValidationError: Se algum perfil for inválido
    """
    try:
        return [Perfil.from_string(v) for v in valores or ()]
    except ValueError as e:
        raise ValidationError(str(e), field="perfis")


def carregar_pessoa(
    pessoa_repo: PessoaRepository,
    pessoa_id: str,
    tipo: TipoPessoa,
) -> PessoaEntity:
    """
    Busca pessoa do tipo esperado.

    Um ID que existe mas pertence ao outro tipo é tratado como
    inexistente.

    Raises:
        EntityNotFoundError: Se não existir pessoa do tipo com o ID
    """
    pessoa = pessoa_repo.get_by_id(pessoa_id) if pessoa_id else None

    if pessoa is None or pessoa.tipo is not tipo:
        raise EntityNotFoundError(
            f"{tipo.descricao} não encontrado com id: {pessoa_id}",
            entity_type=tipo.descricao,
            entity_id=pessoa_id,
        )
    return pessoa


class _PessoaService:
    """Base dos services de pessoa: guarda repositório e tipo atendido."""

    def __init__(self, pessoa_repo: PessoaRepository, tipo: TipoPessoa):
        self.pessoa_repo = pessoa_repo
        self.tipo = tipo

    def _verificar_unicidade(self, cpf: str, email: str) -> None:
        if self.pessoa_repo.exists_by_cpf(cpf):
            raise DuplicateEntityError(CPF_DUPLICADO, field="cpf", value=cpf)

        if self.pessoa_repo.exists_by_email(email):
            raise DuplicateEntityError(EMAIL_DUPLICADO, field="email", value=email)


class CriarPessoaService(_PessoaService):
    """
    Use Case: Cadastrar cliente ou técnico.

    Fluxo:
    1. Normalizar CPF/e-mail e verificar unicidade (CPF primeiro)
    2. Montar registro completo via `novo_cliente`/`novo_tecnico`
    3. Persistir

    Example:
        service = CriarPessoaService(repo, hasher, uow, TipoPessoa.CLIENTE)
        output = service.execute(CriarPessoaInputDTO(
            nome="João Silva",
            cpf="123.456.789-01",
            email="joao@email.com",
            senha="123456",
        ))
    """

    def __init__(
        self,
        pessoa_repo: PessoaRepository,
        hasher: PasswordHasher,
        uow: UnitOfWork,
        tipo: TipoPessoa,
    ):
        super().__init__(pessoa_repo, tipo)
        self.hasher = hasher
        self.uow = uow

    def execute(self, input_dto: CriarPessoaInputDTO) -> PessoaOutputDTO:
        """
        Executa cadastro em transação atômica.

        Raises:
            ValidationError: Se dados inválidos
            DuplicateEntityError: Se CPF ou e-mail já cadastrados
        """
        perfis = resolver_perfis(input_dto.perfis)

        cpf, email = PessoaEntity.validar_dados(
            input_dto.nome, input_dto.cpf, input_dto.email, input_dto.senha or ""
        )

        with self.uow:
            self._verificar_unicidade(cpf, email)

            pessoa = CONSTRUTORES[self.tipo](
                nome=input_dto.nome,
                cpf=input_dto.cpf,
                email=input_dto.email,
                senha=input_dto.senha,
                hasher=self.hasher,
                perfis=perfis,
            )

            self.pessoa_repo.save(pessoa)

        logger.info(f"{self.tipo.descricao} cadastrado: {pessoa.id}")
        return PessoaOutputDTO.from_entity(pessoa)


class AtualizarPessoaService(_PessoaService):
    """
    Use Case: Atualizar cliente ou técnico.

    A senha só é trocada se uma nova senha não vazia for informada.
    """

    def __init__(
        self,
        pessoa_repo: PessoaRepository,
        hasher: PasswordHasher,
        uow: UnitOfWork,
        tipo: TipoPessoa,
    ):
        super().__init__(pessoa_repo, tipo)
        self.hasher = hasher
        self.uow = uow

    def execute(self, input_dto: AtualizarPessoaInputDTO) -> PessoaOutputDTO:
        """
        Executa atualização.

        Raises:
            EntityNotFoundError: Se pessoa não existe
            ValidationError: Se dados inválidos
            DuplicateEntityError: Se CPF/e-mail pertencem a outro registro
        """
        perfis = resolver_perfis(input_dto.perfis)
        nova_senha = input_dto.senha if input_dto.senha and input_dto.senha.strip() else None
        cpf, email = PessoaEntity.validar_dados(
            input_dto.nome, input_dto.cpf, input_dto.email, nova_senha
        )

        with self.uow:
            pessoa = carregar_pessoa(self.pessoa_repo, input_dto.pessoa_id, self.tipo)

            if cpf != pessoa.cpf and self.pessoa_repo.exists_by_cpf(cpf, excluir_id=pessoa.id):
                raise DuplicateEntityError(CPF_DUPLICADO, field="cpf", value=cpf)

            if email != pessoa.email and self.pessoa_repo.exists_by_email(email, excluir_id=pessoa.id):
                raise DuplicateEntityError(EMAIL_DUPLICADO, field="email", value=email)

            pessoa.atualizar_dados(
                nome=input_dto.nome,
                cpf=input_dto.cpf,
                email=input_dto.email,
                perfis=perfis,
            )
            senha_alterada = pessoa.alterar_senha(nova_senha, self.hasher)

            self.pessoa_repo.save(pessoa)

        logger.info(
            f"{self.tipo.descricao} atualizado: {pessoa.id}"
            f"{' (senha alterada)' if senha_alterada else ''}"
        )
        return PessoaOutputDTO.from_entity(pessoa)


class RemoverPessoaService(_PessoaService):
    """
    Use Case: Remover cliente ou técnico.

    A remoção é bloqueada enquanto a pessoa aparecer em algum chamado,
    como cliente ou como técnico.
    """

    def __init__(
        self,
        pessoa_repo: PessoaRepository,
        referencias: ReferenciasPessoa,
        uow: UnitOfWork,
        tipo: TipoPessoa,
    ):
        super().__init__(pessoa_repo, tipo)
        self.referencias = referencias
        self.uow = uow

    def execute(self, pessoa_id: str) -> None:
        """
        Raises:
            EntityNotFoundError: Se pessoa não existe
            BusinessRuleViolationError: Se há chamados vinculados
        """
        with self.uow:
            pessoa = carregar_pessoa(self.pessoa_repo, pessoa_id, self.tipo)

            if self.referencias.exists_by_pessoa(pessoa.id):
                raise BusinessRuleViolationError(
                    f"{self.tipo.descricao} possui chamados vinculados e não pode ser removido",
                    rule="pessoa_com_chamados",
                )

            self.pessoa_repo.delete(pessoa.id)

        logger.info(f"{self.tipo.descricao} removido: {pessoa_id}")


class ObterPessoaService(_PessoaService):
    """Use Case: Obter cliente/técnico por ID."""

    def execute(self, pessoa_id: str) -> PessoaOutputDTO:
        pessoa = carregar_pessoa(self.pessoa_repo, pessoa_id, self.tipo)
        return PessoaOutputDTO.from_entity(pessoa)


class ListarPessoasService(_PessoaService):
    """
    Use Case: Listar clientes ou técnicos.

    Não usa UoW pois é operação de leitura.
    """

    def execute(self) -> List[PessoaOutputDTO]:
        return [
            PessoaOutputDTO.from_entity(p)
            for p in self.pessoa_repo.list_by_tipo(self.tipo)
        ]


class BuscarPessoaPorCpfService(_PessoaService):
    """Use Case: Buscar cliente/técnico por CPF."""

    def execute(self, cpf: str) -> PessoaOutputDTO:
        """
        Raises:
            EntityNotFoundError: Se não existe pessoa do tipo com o CPF
        """
        pessoa = self.pessoa_repo.get_by_cpf(normalizar_cpf(cpf))

        if pessoa is None or pessoa.tipo is not self.tipo:
            raise EntityNotFoundError(
                f"{self.tipo.descricao} não encontrado com CPF: {cpf}",
                entity_type=self.tipo.descricao,
            )
        return PessoaOutputDTO.from_entity(pessoa)


class BuscarPessoaPorEmailService(_PessoaService):
    """Use Case: Buscar cliente/técnico por e-mail."""

    def execute(self, email: str) -> PessoaOutputDTO:
        pessoa = self.pessoa_repo.get_by_email(normalizar_email(email))

        if pessoa is None or pessoa.tipo is not self.tipo:
            raise EntityNotFoundError(
                f"{self.tipo.descricao} não encontrado com e-mail: {email}",
                entity_type=self.tipo.descricao,
            )
        return PessoaOutputDTO.from_entity(pessoa)
