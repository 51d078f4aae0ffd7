"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Every
handler first runs the request rules for its action (``validators.py``)
and answers 400 with the full error list when any rule fails.  Domain
exceptions are caught and translated into HTTP status codes — the view
never swallows generic exceptions.
"""

from __future__ import annotations

from typing import Optional

import structlog
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import CreateProductDTO, ReplaceProductDTO, dto_errors
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    MessageSerializer,
    NotFoundSerializer,
    ProductCreateSerializer,
    ProductEnvelopeSerializer,
    ProductListEnvelopeSerializer,
    ProductReplaceSerializer,
    ProductSerializer,
    ValidationErrorsSerializer,
)
from modules.products.services import ProductService
from modules.products.validators import validate_request

logger = structlog.get_logger(__name__)

PRODUCT_NOT_FOUND = "Product Not Found"

_ID_PARAMETER = OpenApiParameter(
    "id", OpenApiTypes.INT, OpenApiParameter.PATH, description="Product ID"
)


def _not_found() -> Response:
    return Response({"error": PRODUCT_NOT_FOUND}, status=status.HTTP_404_NOT_FOUND)


def _invalid(errors) -> Response:
    return Response({"errors": errors}, status=status.HTTP_400_BAD_REQUEST)


@extend_schema_view(
    list=extend_schema(
        summary="Get a list of products",
        responses={200: ProductListEnvelopeSerializer},
    ),
    retrieve=extend_schema(
        summary="Get a product by ID",
        parameters=[_ID_PARAMETER],
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: NotFoundSerializer,
        },
    ),
    create=extend_schema(
        summary="Create a new product",
        request=ProductCreateSerializer,
        responses={201: ProductEnvelopeSerializer, 400: ValidationErrorsSerializer},
    ),
    update=extend_schema(
        summary="Replace a product",
        parameters=[_ID_PARAMETER],
        request=ProductReplaceSerializer,
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: NotFoundSerializer,
        },
    ),
    partial_update=extend_schema(
        summary="Toggle product availability",
        parameters=[_ID_PARAMETER],
        request=None,
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: NotFoundSerializer,
        },
    ),
    destroy=extend_schema(
        summary="Delete a product",
        parameters=[_ID_PARAMETER],
        responses={
            200: MessageSerializer,
            400: ValidationErrorsSerializer,
            404: NotFoundSerializer,
        },
    ),
)
@extend_schema(tags=["Products"])
class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with the repository named by
    ``repository_class``, which ``as_view()`` may override.  All ORM
    access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    repository_class = ProductDjangoRepository
    # Let malformed ids reach validation instead of failing URL resolution.
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())

    def _check_input(self, request: Request, pk: str | None = None) -> Optional[Response]:
        params = {} if pk is None else {"id": pk}
        errors = validate_request(self.action, params=params, body=request.data)
        if not errors:
            return None
        logger.info(
            "product.validation_failed",
            action=self.action,
            error_count=len(errors),
        )
        return _invalid([error.as_dict() for error in errors])

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        invalid = self._check_input(request, pk)
        if invalid is not None:
            return invalid
        try:
            product = self._service.get_product(int(pk))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Toggle / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        invalid = self._check_input(request)
        if invalid is not None:
            return invalid

        data = request.data
        try:
            dto = CreateProductDTO(name=data.get("name"), price=data.get("price"))
        except PydanticValidationError as exc:
            return _invalid(dto_errors(exc))

        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/products/{pk}"""
        invalid = self._check_input(request, pk)
        if invalid is not None:
            return invalid

        data = request.data
        try:
            dto = ReplaceProductDTO(
                name=data.get("name"),
                price=data.get("price"),
                availability=data.get("availability"),
            )
        except PydanticValidationError as exc:
            return _invalid(dto_errors(exc))

        try:
            product = self._service.replace_product(int(pk), dto)
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/products/{pk} — flips ``availability``."""
        invalid = self._check_input(request, pk)
        if invalid is not None:
            return invalid
        try:
            product = self._service.toggle_availability(int(pk))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/products/{pk}"""
        invalid = self._check_input(request, pk)
        if invalid is not None:
            return invalid
        try:
            self._service.delete_product(int(pk))
        except ProductNotFound:
            return _not_found()
        return Response({"message": "Product Deleted"})
