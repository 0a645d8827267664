"""Success envelope for the JSON API: ``{"data": ..., "errors": []}``."""

from typing import Any

from rest_framework.response import Response
from rest_framework.views import APIView


def api_response(data: Any, status: int = 200) -> Response:
    """Wrap ``data`` in the envelope the article form scripts read."""
    return Response({"data": data, "errors": []}, status=status)


def _is_enveloped(payload: Any) -> bool:
    return isinstance(payload, dict) and "data" in payload and "errors" in payload


class BaseAPIView(APIView):
    """APIView whose successful, non-empty responses are always enveloped.

    Error responses are wrapped by ``core.exceptions.custom_exception_handler``.
    """

    def finalize_response(self, request, response, *args, **kwargs):
        if isinstance(response, Response) and response.status_code < 400 and response.status_code != 204:
            if not _is_enveloped(response.data):
                response.data = {"data": response.data, "errors": []}
        return super().finalize_response(request, response, *args, **kwargs)


__all__ = ["BaseAPIView", "api_response"]
