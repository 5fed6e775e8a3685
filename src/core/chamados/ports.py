"""
Ports (Interfaces) do Domínio de Chamados.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência e consulta de chamados.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core

Example:
    # No Adapter (Django)
    class DjangoChamadoRepository:
        def save(self, chamado: ChamadoEntity) -> None:
            model = ChamadoMapper.to_model(chamado)
            model.save()
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable

from .entities import ChamadoEntity, ChamadoPrioridade, ChamadoStatus


@runtime_checkable
class ChamadoRepository(Protocol):
    """
    Interface para persistência de Chamados.

    Implementações:
    - DjangoChamadoRepository (ORM)
    - InMemoryChamadoRepository (para testes)

    Chamados não são removidos: não há `delete` no contrato.
    """

    def save(self, chamado: ChamadoEntity) -> None:
        """
        Persiste chamado completo.

        Se chamado.id já existe, atualiza. Caso contrário, cria novo.
        """
        ...

    def get_by_id(self, chamado_id: str) -> Optional[ChamadoEntity]:
        """Busca chamado por ID; None se não existir."""
        ...

    def list_all(self) -> List[ChamadoEntity]:
        ...

    def list_filtered(
        self,
        status: Optional[ChamadoStatus] = None,
        prioridade: Optional[ChamadoPrioridade] = None,
    ) -> List[ChamadoEntity]:
        """
        Lista chamados filtrando por status, prioridade, ambos ou nenhum.

        Ordenação: mais recentes primeiro.
        """
        ...

    def exists(self, chamado_id: str) -> bool:
        ...

    def exists_by_pessoa(self, pessoa_id: str) -> bool:
        """
        Verifica se a pessoa é cliente ou técnico de algum chamado.

        Args:
            pessoa_id: ID de cliente ou técnico

        Returns:
            True se houver ao menos um chamado vinculado
        """
        ...


class InMemoryChamadoRepository:
    """
    Implementação em memória do ChamadoRepository.

    Útil para:
    - Testes unitários
    - Prototipagem

    Não usar em produção!
    """

    def __init__(self):
        self._chamados: Dict[str, ChamadoEntity] = {}

    def save(self, chamado: ChamadoEntity) -> None:
        self._chamados[chamado.id] = chamado

    def get_by_id(self, chamado_id: str) -> Optional[ChamadoEntity]:
        return self._chamados.get(chamado_id)

    def list_all(self) -> List[ChamadoEntity]:
        return self.list_filtered()

    def list_filtered(
        self,
        status: Optional[ChamadoStatus] = None,
        prioridade: Optional[ChamadoPrioridade] = None,
    ) -> List[ChamadoEntity]:
        chamados = [
            c for c in self._chamados.values()
            if (status is None or c.status is status)
            and (prioridade is None or c.prioridade is prioridade)
        ]
        return sorted(chamados, key=lambda c: c.aberto_em, reverse=True)

    def exists(self, chamado_id: str) -> bool:
        return chamado_id in self._chamados

    def exists_by_pessoa(self, pessoa_id: str) -> bool:
        return any(
            pessoa_id in (c.cliente_id, c.tecnico_id)
            for c in self._chamados.values()
        )

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._chamados.clear()
