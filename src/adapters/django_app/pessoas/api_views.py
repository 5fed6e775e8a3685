"""
API Views JSON para clientes e técnicos.

As mesmas views atendem os dois recursos; o atributo `recurso`
("cliente" ou "tecnico"), definido no `as_view()` das rotas,
escolhe os services do container.

Endpoints (por recurso, /api/clients/ e /api/technicians/):
- GET    /           - Listar
- POST   /           - Cadastrar (201 + Location)
- GET    /<id>/      - Obter
- PUT    /<id>/      - Atualizar
- DELETE /<id>/      - Remover (204)
- GET    /cpf/<cpf>/     - Buscar por CPF
- GET    /email/<email>/ - Buscar por e-mail
"""

import logging

from django.http import HttpRequest, HttpResponse, JsonResponse

from src.core.pessoas.dtos import AtualizarPessoaInputDTO, CriarPessoaInputDTO

from ..shared.api_views import BaseAPIView
from .forms import PessoaCreateForm, PessoaUpdateForm

logger = logging.getLogger(__name__)


class PessoaAPIView(BaseAPIView):
    """Base das views de pessoa: resolve services pelo recurso."""

    recurso: str = "cliente"

    def service(self, operacao: str):
        """
        Obtém o service da operação para o recurso da view.

        Example:
            self.service("criar")  # container.criar_cliente_service()
        """
        return self.get_service(f"{operacao}_{self.recurso}_service")


class PessoaAPIListView(PessoaAPIView):
    """
    GET  - Lista registros do recurso
    POST - Cadastra registro
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        pessoas = self.service("listar").execute()
        return JsonResponse([p.to_dict() for p in pessoas], safe=False)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "nome": "string (3..100)",
            "cpf": "string (11 dígitos, pontuação opcional)",
            "email": "string",
            "senha": "string (mín. 6)",
            "perfis": ["CLIENTE" | "TECNICO" | "ADMIN"] (opcional)
        }
        """
        data = self.validate(PessoaCreateForm, request)

        output = self.service("criar").execute(CriarPessoaInputDTO(
            nome=data['nome'],
            cpf=data['cpf'],
            email=data['email'],
            senha=data['senha'],
            perfis=data['perfis'],
        ))

        logger.info(f"API: {self.recurso} criado: {output.id}")
        return self.created(request, output.to_dict())


class PessoaAPIDetailView(PessoaAPIView):
    """
    GET    - Obter
    PUT    - Atualizar (senha opcional)
    DELETE - Remover
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        return JsonResponse(self.service("obter").execute(pk).to_dict())

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        data = self.validate(PessoaUpdateForm, request)

        output = self.service("atualizar").execute(AtualizarPessoaInputDTO(
            pessoa_id=pk,
            nome=data['nome'],
            cpf=data['cpf'],
            email=data['email'],
            senha=data['senha'],
            perfis=data['perfis'],
        ))

        return JsonResponse(output.to_dict())

    def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        self.service("remover").execute(pk)
        logger.info(f"API: {self.recurso} removido: {pk}")
        return HttpResponse(status=204)


class PessoaAPIPorCpfView(PessoaAPIView):
    """GET /cpf/<cpf>/"""

    def get(self, request: HttpRequest, cpf: str) -> JsonResponse:
        return JsonResponse(self.service("buscar_por_cpf").execute(cpf).to_dict())


class PessoaAPIPorEmailView(PessoaAPIView):
    """GET /email/<email>/"""

    def get(self, request: HttpRequest, email: str) -> JsonResponse:
        return JsonResponse(self.service("buscar_por_email").execute(email).to_dict())
