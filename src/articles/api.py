"""JSON endpoint exposing the article form's per-field validation."""

from drf_spectacular.utils import extend_schema
from rest_framework.permissions import IsAuthenticated

from core.response import BaseAPIView, api_response
from .components import ArticleForm
from .serializers import FieldChangeResultSerializer, FieldChangeSerializer


class ArticleFormFieldView(BaseAPIView):
    """Apply one field change to a bound form and report that field's error.

    The response carries the form values after the change, so a title edit
    also returns the derived slug.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(request=FieldChangeSerializer, responses=FieldChangeResultSerializer)
    def post(self, request):
        serializer = FieldChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        change = serializer.validated_data

        form = ArticleForm.mount(change.get("article"), user=request.user)
        form.set(change["field"], change["new_value"])

        result = FieldChangeResultSerializer(
            {
                "field": change["field"],
                "values": form.values(),
                "field_errors": form.error_codes(),
                "messages": form.error_messages(),
            }
        )
        return api_response(result.data)


__all__ = ["ArticleFormFieldView"]
