"""
API Views JSON para o domínio de Chamados.

Endpoints:
- GET   /api/tickets/            - Listar (?status=&prioridade=, alias ?priority=)
- POST  /api/tickets/            - Abrir chamado (201 + Location)
- GET   /api/tickets/<id>/       - Obter chamado
- PUT   /api/tickets/<id>/       - Atualizar chamado
- PATCH /api/tickets/<id>/status/ - Alterar status
- PATCH /api/tickets/<id>/assign/ - Atribuir técnico
- PATCH /api/tickets/<id>/close/  - Encerrar
- PUT   /api/tickets/<id>/notes/  - Atualizar observações

Formato:
- Entrada: JSON
- Saída: JSON do chamado (ou lista de chamados)
"""

import logging

from django.http import HttpRequest, JsonResponse

from src.core.chamados.dtos import (
    AbrirChamadoInputDTO,
    AlterarStatusInputDTO,
    AtribuirTecnicoInputDTO,
    AtualizarChamadoInputDTO,
    ListarChamadosQueryDTO,
)

from ..shared.api_views import BaseAPIView, query_param
from .forms import (
    ChamadoAtribuirForm,
    ChamadoForm,
    ChamadoObservacoesForm,
    ChamadoStatusForm,
)

logger = logging.getLogger(__name__)


class ChamadoAPIListView(BaseAPIView):
    """
    GET  /api/tickets/ - Lista chamados
    POST /api/tickets/ - Abre chamado
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """
        Query params:
        - status: Filtrar por status
        - prioridade (ou priority): Filtrar por prioridade
        """
        query = ListarChamadosQueryDTO(
            status=query_param(request, 'status'),
            prioridade=query_param(request, 'prioridade', 'priority'),
        )

        chamados = self.get_service('listar_chamados_service').execute(query)

        return JsonResponse([c.to_dict() for c in chamados], safe=False)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Body JSON:
        {
            "titulo": "string (5..100)",
            "prioridade": "BAIXA|MEDIA|ALTA",
            "cliente_id": "string",
            "observacoes": "string (opcional, até 500)",
            "tecnico_id": "string (opcional)"
        }
        """
        data = self.validate(ChamadoForm, request)

        output = self.get_service('abrir_chamado_service').execute(AbrirChamadoInputDTO(
            titulo=data['titulo'],
            prioridade=data['prioridade'],
            cliente_id=data['cliente_id'],
            observacoes=data['observacoes'],
            tecnico_id=data['tecnico_id'],
        ))

        logger.info(f"API: Chamado aberto: {output.id}")
        return self.created(request, output.to_dict())


class ChamadoAPIDetailView(BaseAPIView):
    """
    GET /api/tickets/<id>/ - Obter chamado
    PUT /api/tickets/<id>/ - Atualizar chamado (substituição completa)
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        output = self.get_service('obter_chamado_service').execute(pk)
        return JsonResponse(output.to_dict())

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        data = self.validate(ChamadoForm, request)

        output = self.get_service('atualizar_chamado_service').execute(AtualizarChamadoInputDTO(
            chamado_id=pk,
            titulo=data['titulo'],
            prioridade=data['prioridade'],
            cliente_id=data['cliente_id'],
            observacoes=data['observacoes'],
            tecnico_id=data['tecnico_id'],
        ))

        return JsonResponse(output.to_dict())


class ChamadoAPIStatusView(BaseAPIView):
    """PATCH /api/tickets/<id>/status/ - Body: {"status": "EM_ANDAMENTO"}"""

    def patch(self, request: HttpRequest, pk: str) -> JsonResponse:
        data = self.validate(ChamadoStatusForm, request)

        output = self.get_service('alterar_status_service').execute(AlterarStatusInputDTO(
            chamado_id=pk,
            novo_status=data['status'],
        ))

        return JsonResponse(output.to_dict())


class ChamadoAPIAtribuirView(BaseAPIView):
    """PATCH /api/tickets/<id>/assign/ - Body: {"tecnico_id": "..."}"""

    def patch(self, request: HttpRequest, pk: str) -> JsonResponse:
        data = self.validate(ChamadoAtribuirForm, request)

        output = self.get_service('atribuir_tecnico_service').execute(AtribuirTecnicoInputDTO(
            chamado_id=pk,
            tecnico_id=data['tecnico_id'],
        ))

        logger.info(f"API: Chamado {pk} atribuído a {data['tecnico_id']}")
        return JsonResponse(output.to_dict())


class ChamadoAPIEncerrarView(BaseAPIView):
    """PATCH /api/tickets/<id>/close/"""

    def patch(self, request: HttpRequest, pk: str) -> JsonResponse:
        output = self.get_service('encerrar_chamado_service').execute(pk)

        logger.info(f"API: Chamado {pk} encerrado")
        return JsonResponse(output.to_dict())


class ChamadoAPIObservacoesView(BaseAPIView):
    """PUT /api/tickets/<id>/notes/ - Body: {"observacoes": "..."}"""

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        data = self.validate(ChamadoObservacoesForm, request)

        output = self.get_service('atualizar_observacoes_service').execute(
            pk, data['observacoes']
        )

        return JsonResponse(output.to_dict())
