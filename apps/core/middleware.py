# apps/core/middleware.py

import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404, JsonResponse

from .exceptions import ApiError
from .principal import Principal

logger = logging.getLogger(__name__)


class PrincipalMiddleware:
    """
    Anexa ``request.principal`` a partir do usuário da sessão

    Precisa vir depois do AuthenticationMiddleware.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.principal = Principal.from_user(getattr(request, 'user', None))
        return self.get_response(request)


class ApiErrorMiddleware:
    """
    Converte exceções das views de /api/ em respostas JSON

    ApiError usa o próprio status; Http404 e PermissionDenied viram
    404/403; qualquer outra coisa vira 500 com o traceback no log.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not request.path.startswith('/api/'):
            return None  # Deixar o Django tratar (admin etc)

        if isinstance(exception, ApiError):
            if exception.status_code >= 500:
                logger.error(f"❌ {request.method} {request.path}: {exception.message}")
            return JsonResponse(exception.as_dict(), status=exception.status_code)

        if isinstance(exception, Http404):
            return JsonResponse({'message': str(exception) or 'Not found'}, status=404)

        if isinstance(exception, PermissionDenied):
            return JsonResponse({'message': 'Forbidden'}, status=403)

        logger.exception(f"💥 Erro inesperado em {request.method} {request.path}")
        return JsonResponse({'message': 'Server error'}, status=500)
