"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories, hasher)
- Factory: Nova instância por chamada (services, UoW)

Os nomes dos providers de serviço seguem o padrão
``<operacao>_<recurso>_service`` e são resolvidos pelas API views.
"""

from typing import Optional

from dependency_injector import containers, providers
from django.utils.module_loading import import_string

from src.core.pessoas.entities import TipoPessoa


def _lazy(caminho: str):
    """Adia o import da classe até a primeira chamada do provider."""
    def criar(*args, **kwargs):
        return import_string(caminho)(*args, **kwargs)
    return criar


_PESSOAS = 'src.core.pessoas.use_cases.'
_CHAMADOS = 'src.core.chamados.use_cases.'


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Repositories: Persistência
    - Infrastructure: Hash de senha
    - Unit of Work: Transações
    - Services: Use Cases de Pessoas e Chamados

    Example:
        from src.config.container import get_container

        service = get_container().abrir_chamado_service()
        output = service.execute(input_dto)
    """

    config = providers.Configuration()

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    pessoa_repository = providers.Singleton(
        _lazy('src.adapters.django_app.pessoas.repositories.DjangoPessoaRepository')
    )

    chamado_repository = providers.Singleton(
        _lazy('src.adapters.django_app.chamados.repositories.DjangoChamadoRepository')
    )

    # =========================================================================
    # Infrastructure
    # =========================================================================

    password_hasher = providers.Singleton(
        _lazy('src.adapters.django_app.pessoas.hashers.DjangoPasswordHasher')
    )

    # =========================================================================
    # Unit of Work (Factory - nova instância por operação)
    # =========================================================================

    unit_of_work = providers.Factory(
        _lazy('src.adapters.django_app.shared.unit_of_work.DjangoUnitOfWork')
    )

    # =========================================================================
    # Services de Pessoas (um provider por tipo)
    # =========================================================================

    criar_cliente_service = providers.Factory(
        _lazy(_PESSOAS + 'CriarPessoaService'),
        pessoa_repo=pessoa_repository,
        hasher=password_hasher,
        uow=unit_of_work,
        tipo=TipoPessoa.CLIENTE,
    )

    criar_tecnico_service = providers.Factory(
        _lazy(_PESSOAS + 'CriarPessoaService'),
        pessoa_repo=pessoa_repository,
        hasher=password_hasher,
        uow=unit_of_work,
        tipo=TipoPessoa.TECNICO,
    )

    atualizar_cliente_service = providers.Factory(
        _lazy(_PESSOAS + 'AtualizarPessoaService'),
        pessoa_repo=pessoa_repository,
        hasher=password_hasher,
        uow=unit_of_work,
        tipo=TipoPessoa.CLIENTE,
    )

    atualizar_tecnico_service = providers.Factory(
        _lazy(_PESSOAS + 'AtualizarPessoaService'),
        pessoa_repo=pessoa_repository,
        hasher=password_hasher,
        uow=unit_of_work,
        tipo=TipoPessoa.TECNICO,
    )

    # Chamados referenciam pessoas: o repositório de chamados bloqueia a remoção
    remover_cliente_service = providers.Factory(
        _lazy(_PESSOAS + 'RemoverPessoaService'),
        pessoa_repo=pessoa_repository,
        referencias=chamado_repository,
        uow=unit_of_work,
        tipo=TipoPessoa.CLIENTE,
    )

    remover_tecnico_service = providers.Factory(
        _lazy(_PESSOAS + 'RemoverPessoaService'),
        pessoa_repo=pessoa_repository,
        referencias=chamado_repository,
        uow=unit_of_work,
        tipo=TipoPessoa.TECNICO,
    )

    obter_cliente_service = providers.Factory(
        _lazy(_PESSOAS + 'ObterPessoaService'),
        pessoa_repo=pessoa_repository,
        tipo=TipoPessoa.CLIENTE,
    )

    obter_tecnico_service = providers.Factory(
        _lazy(_PESSOAS + 'ObterPessoaService'),
        pessoa_repo=pessoa_repository,
        tipo=TipoPessoa.TECNICO,
    )

    listar_cliente_service = providers.Factory(
        _lazy(_PESSOAS + 'ListarPessoasService'),
        pessoa_repo=pessoa_repository,
        tipo=TipoPessoa.CLIENTE,
    )

    listar_tecnico_service = providers.Factory(
        _lazy(_PESSOAS + 'ListarPessoasService'),
        pessoa_repo=pessoa_repository,
        tipo=TipoPessoa.TECNICO,
    )

    buscar_por_cpf_cliente_service = providers.Factory(
        _lazy(_PESSOAS + 'BuscarPessoaPorCpfService'),
        pessoa_repo=pessoa_repository,
        tipo=TipoPessoa.CLIENTE,
    )

    buscar_por_cpf_tecnico_service = providers.Factory(
        _lazy(_PESSOAS + 'BuscarPessoaPorCpfService'),
        pessoa_repo=pessoa_repository,
        tipo=TipoPessoa.TECNICO,
    )

    buscar_por_email_cliente_service = providers.Factory(
        _lazy(_PESSOAS + 'BuscarPessoaPorEmailService'),
        pessoa_repo=pessoa_repository,
        tipo=TipoPessoa.CLIENTE,
    )

    buscar_por_email_tecnico_service = providers.Factory(
        _lazy(_PESSOAS + 'BuscarPessoaPorEmailService'),
        pessoa_repo=pessoa_repository,
        tipo=TipoPessoa.TECNICO,
    )

    # =========================================================================
    # Services de Chamados
    # =========================================================================

    abrir_chamado_service = providers.Factory(
        _lazy(_CHAMADOS + 'AbrirChamadoService'),
        chamado_repo=chamado_repository,
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    atualizar_chamado_service = providers.Factory(
        _lazy(_CHAMADOS + 'AtualizarChamadoService'),
        chamado_repo=chamado_repository,
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    alterar_status_service = providers.Factory(
        _lazy(_CHAMADOS + 'AlterarStatusChamadoService'),
        chamado_repo=chamado_repository,
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    atribuir_tecnico_service = providers.Factory(
        _lazy(_CHAMADOS + 'AtribuirTecnicoService'),
        chamado_repo=chamado_repository,
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    encerrar_chamado_service = providers.Factory(
        _lazy(_CHAMADOS + 'EncerrarChamadoService'),
        chamado_repo=chamado_repository,
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    atualizar_observacoes_service = providers.Factory(
        _lazy(_CHAMADOS + 'AtualizarObservacoesService'),
        chamado_repo=chamado_repository,
        pessoa_repo=pessoa_repository,
        uow=unit_of_work,
    )

    # Leitura (sem UoW)
    obter_chamado_service = providers.Factory(
        _lazy(_CHAMADOS + 'ObterChamadoService'),
        chamado_repo=chamado_repository,
        pessoa_repo=pessoa_repository,
    )

    listar_chamados_service = providers.Factory(
        _lazy(_CHAMADOS + 'ListarChamadosService'),
        chamado_repo=chamado_repository,
        pessoa_repo=pessoa_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def set_container(container: Optional[Container]) -> None:
    """Substitui o container global (testes usam TestingContainer)."""
    global _container
    _container = container


def reset_container() -> None:
    """Reset do container (para testes)."""
    set_container(None)


# =============================================================================
# Testing Container
# =============================================================================

@containers.copy(Container)
class TestingContainer(Container):
    """
    Container para testes sem banco de dados.

    Mesmos services do Container principal, ligados a repositórios
    InMemory e a um UnitOfWork que só registra commits/rollbacks.

    Example:
        container = TestingContainer()
        service = container.criar_cliente_service()
    """

    pessoa_repository = providers.Singleton(
        _lazy('src.core.pessoas.ports.InMemoryPessoaRepository')
    )

    chamado_repository = providers.Singleton(
        _lazy('src.core.chamados.ports.InMemoryChamadoRepository')
    )

    unit_of_work = providers.Factory(
        _lazy('src.adapters.django_app.shared.unit_of_work.InMemoryUnitOfWork')
    )
