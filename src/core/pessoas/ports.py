"""
Ports (Interfaces) do Domínio de Pessoas.

Define o contrato de persistência de clientes e técnicos. Como ambos
compartilham o mesmo registro, há um único repositório; consultas
que precisam distinguir o tipo recebem `TipoPessoa`.

As verificações de unicidade (`exists_by_cpf`, `exists_by_email`)
olham a tabela inteira, independente do tipo: um CPF de técnico
não pode ser reutilizado por um cliente.
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import PessoaEntity, TipoPessoa, normalizar_cpf, normalizar_email


@runtime_checkable
class PessoaRepository(Protocol):
    """
    Interface para persistência de Pessoas.

    Implementações:
    - DjangoPessoaRepository (ORM)
    - InMemoryPessoaRepository (para testes)
    """

    def save(self, pessoa: PessoaEntity) -> None:
        """Persiste o registro completo (create ou update)."""
        ...

    def get_by_id(self, pessoa_id: str) -> Optional[PessoaEntity]:
        """Busca por ID; None se não existir."""
        ...

    def get_by_cpf(self, cpf: str) -> Optional[PessoaEntity]:
        """Busca por CPF (já normalizado)."""
        ...

    def get_by_email(self, email: str) -> Optional[PessoaEntity]:
        """Busca por e-mail (já normalizado)."""
        ...

    def delete(self, pessoa_id: str) -> None:
        """Remove o registro."""
        ...

    def list_by_tipo(self, tipo: TipoPessoa) -> List[PessoaEntity]:
        """Lista registros de um tipo, ordenados por nome."""
        ...

    def exists(self, pessoa_id: str) -> bool:
        ...

    def exists_by_cpf(self, cpf: str, excluir_id: Optional[str] = None) -> bool:
        """
        Verifica se o CPF já está em uso.

        Args:
            cpf: CPF normalizado
            excluir_id: ID ignorado na busca (o próprio registro em updates)
        """
        ...

    def exists_by_email(self, email: str, excluir_id: Optional[str] = None) -> bool:
        """
        Verifica se o e-mail já está em uso.

        Args:
            email: E-mail normalizado
            excluir_id: ID ignorado na busca (o próprio registro em updates)
        """
        ...


class ReferenciasPessoa(Protocol):
    """
    Consulta de registros que referenciam uma pessoa.

    Implementada pelo repositório de chamados; permite bloquear a
    remoção de quem ainda aparece como cliente ou técnico de um chamado.
    """

    def exists_by_pessoa(self, pessoa_id: str) -> bool:
        ...


class InMemoryPessoaRepository:
    """
    Implementação em memória do PessoaRepository.

    Útil para testes unitários e prototipagem. Não usar em produção!

    Example:
        repo = InMemoryPessoaRepository()
        repo.save(pessoa)
        found = repo.get_by_cpf("12345678901")
    """

    def __init__(self):
        self._pessoas: Dict[str, PessoaEntity] = {}

    def save(self, pessoa: PessoaEntity) -> None:
        self._pessoas[pessoa.id] = pessoa

    def get_by_id(self, pessoa_id: str) -> Optional[PessoaEntity]:
        return self._pessoas.get(pessoa_id)

    def get_by_cpf(self, cpf: str) -> Optional[PessoaEntity]:
        cpf = normalizar_cpf(cpf)
        return next((p for p in self._pessoas.values() if p.cpf == cpf), None)

    def get_by_email(self, email: str) -> Optional[PessoaEntity]:
        email = normalizar_email(email)
        return next((p for p in self._pessoas.values() if p.email == email), None)

    def delete(self, pessoa_id: str) -> None:
        self._pessoas.pop(pessoa_id, None)

    def list_by_tipo(self, tipo: TipoPessoa) -> List[PessoaEntity]:
        pessoas = [p for p in self._pessoas.values() if p.tipo is tipo]
        return sorted(pessoas, key=lambda p: p.nome)

    def exists(self, pessoa_id: str) -> bool:
        return pessoa_id in self._pessoas

    def exists_by_cpf(self, cpf: str, excluir_id: Optional[str] = None) -> bool:
        cpf = normalizar_cpf(cpf)
        return any(
            p.cpf == cpf and p.id != excluir_id
            for p in self._pessoas.values()
        )

    def exists_by_email(self, email: str, excluir_id: Optional[str] = None) -> bool:
        email = normalizar_email(email)
        return any(
            p.email == email and p.id != excluir_id
            for p in self._pessoas.values()
        )

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._pessoas.clear()
