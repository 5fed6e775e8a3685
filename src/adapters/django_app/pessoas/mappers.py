"""
Mappers para conversão entre PessoaEntity (Core) e PessoaModel (Django).

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from typing import List

from src.core.pessoas.entities import Perfil, PessoaEntity, TipoPessoa

from .models import PessoaModel


class PessoaMapper:
    """
    Mapper para conversão entre PessoaEntity e PessoaModel.

    Perfis são gravados como lista de nomes, ordenada por código,
    para que o mesmo conjunto produza sempre o mesmo JSON.
    """

    @staticmethod
    def to_model(entity: PessoaEntity) -> PessoaModel:
        """
        Converte PessoaEntity para PessoaModel.

        Note:
            Não chama .save() - deixa isso para o Repository
        """
        return PessoaModel(
            id=entity.id,
            tipo=entity.tipo.value,
            nome=entity.nome,
            cpf=entity.cpf,
            email=entity.email,
            senha_hash=entity.senha_hash,
            perfis=[p.name for p in sorted(entity.perfis, key=lambda p: p.codigo)],
            criado_em=entity.criado_em,
        )

    @staticmethod
    def to_entity(model: PessoaModel) -> PessoaEntity:
        """
        Converte PessoaModel para PessoaEntity.

        Note:
            Bypassa as validações de `novo_cliente`/`novo_tecnico`
            pois os dados já foram validados na criação original
        """
        return PessoaEntity(
            id=model.id,
            tipo=TipoPessoa(model.tipo),
            nome=model.nome,
            cpf=model.cpf,
            email=model.email,
            senha_hash=model.senha_hash,
            perfis=frozenset(Perfil.from_string(p) for p in model.perfis or []),
            criado_em=model.criado_em,
        )

    @staticmethod
    def to_entity_list(models: List[PessoaModel]) -> List[PessoaEntity]:
        return [PessoaMapper.to_entity(model) for model in models]
