"""
Base das API Views JSON.

Concentra o que é comum a todos os endpoints:
- Parsing do body JSON
- Validação de entrada via Django Forms
- Acesso ao container DI
- Tradução de exceções de domínio para respostas HTTP

Mapeamento de exceções (único ponto do sistema onde isso acontece):
- ValidationError → 400 "Validation Failed" com {campo: mensagem}
- EntityNotFoundError → 404 "Not Found"
- DuplicateEntityError → 409 "Conflict"
- BusinessRuleViolationError → 400 "Business Rule Violation"
- Qualquer outra → 500 com mensagem genérica (detalhe só no log)
"""

import json
import logging
from typing import Any, Dict, Optional

from django import forms
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    BusinessRuleViolationError,
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from src.config.container import get_container

logger = logging.getLogger(__name__)

MENSAGEM_ERRO_INESPERADO = "Ocorreu um erro inesperado no servidor"


# =============================================================================
# Helpers
# =============================================================================

class RequestValidationError(Exception):
    """
    Falha de validação de entrada na borda HTTP.

    Carrega o mapa {campo: mensagem} produzido pelo Form
    ou pelo parsing do body.
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))


def error_response(
    request: HttpRequest,
    status: int,
    error: str,
    message: str,
) -> JsonResponse:
    """
    Cria resposta de erro padronizada.

    Formato: {timestamp, status, error, message, path}
    """
    return JsonResponse(
        {
            "timestamp": timezone.now().isoformat(),
            "status": status,
            "error": error,
            "message": message,
            "path": request.path,
        },
        status=status,
    )


def validation_response(request: HttpRequest, errors: Dict[str, str]) -> JsonResponse:
    """
    Cria resposta de falha de validação.

    Formato: {timestamp, status: 400, error: "Validation Failed", errors, path}
    """
    return JsonResponse(
        {
            "timestamp": timezone.now().isoformat(),
            "status": 400,
            "error": "Validation Failed",
            "errors": errors,
            "path": request.path,
        },
        status=400,
    )


def parse_json_body(request: HttpRequest) -> Dict[str, Any]:
    """
    Parseia body JSON do request.

    Raises:
        RequestValidationError: Se JSON inválido ou não for um objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RequestValidationError({"body": f"JSON inválido: {e}"})

    if not isinstance(data, dict):
        raise RequestValidationError({"body": "O corpo da requisição deve ser um objeto JSON"})
    return data


def form_errors(form: forms.Form) -> Dict[str, str]:
    """Achata os erros do Form em {campo: primeira mensagem}."""
    return {
        campo: str(mensagens[0])
        for campo, mensagens in form.errors.items()
    }


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Subclasses implementam os handlers (get/post/put/patch/delete)
    sem try/except: `dispatch` captura qualquer exceção e delega
    para `handle_exception`.
    """

    def dispatch(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        try:
            return super().dispatch(request, *args, **kwargs)
        except Exception as e:
            return self.handle_exception(request, e)

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container (provider chamado a cada request)."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict[str, Any]:
        return parse_json_body(request)

    def validate(self, form_class, request: HttpRequest) -> Dict[str, Any]:
        """
        Valida o body JSON com um Django Form.

        Returns:
            cleaned_data do form

        Raises:
            RequestValidationError: Se o form for inválido
        """
        form = form_class(data=self.parse_body(request))
        if not form.is_valid():
            raise RequestValidationError(form_errors(form))
        return form.cleaned_data

    def created(self, request: HttpRequest, data: Dict[str, Any]) -> JsonResponse:
        """Resposta 201 com header Location apontando para o recurso."""
        response = JsonResponse(data, status=201)
        response["Location"] = request.build_absolute_uri(f"{request.path}{data['id']}/")
        return response

    def handle_exception(self, request: HttpRequest, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.

        Args:
            request: Request em processamento
            e: Exceção capturada

        Returns:
            JsonResponse com erro
        """
        if isinstance(e, RequestValidationError):
            return validation_response(request, e.errors)

        if isinstance(e, ValidationError):
            return validation_response(request, {e.field or "non_field_errors": e.message})

        if isinstance(e, EntityNotFoundError):
            return error_response(request, 404, "Not Found", e.message)

        if isinstance(e, DuplicateEntityError):
            return error_response(request, 409, "Conflict", e.message)

        if isinstance(e, BusinessRuleViolationError):
            return error_response(request, 400, "Business Rule Violation", e.message)

        # Erro inesperado
        logger.exception(f"Erro inesperado na API ({request.method} {request.path}): {e}")
        return error_response(request, 500, "Internal Server Error", MENSAGEM_ERRO_INESPERADO)


def query_param(request: HttpRequest, *nomes: str) -> Optional[str]:
    """Primeiro parâmetro de query não vazio dentre os nomes informados."""
    for nome in nomes:
        valor = request.GET.get(nome)
        if valor:
            return valor
    return None
