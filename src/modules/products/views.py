"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Each
handler runs its request rules through the validation gate first, then
performs one service call.  Domain exceptions are caught and translated
into HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import validate
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.rules import CREATE_RULES, ID_RULES, UPDATE_RULES
from modules.products.serializers import (
    MessageEnvelopeSerializer,
    NotFoundSerializer,
    ProductCreateSerializer,
    ProductEnvelopeSerializer,
    ProductListEnvelopeSerializer,
    ProductSerializer,
    ProductUpdateSerializer,
    ValidationErrorsSerializer,
)
from modules.products.services import ProductService

NOT_FOUND_MESSAGE = "Product not found"
DELETED_MESSAGE = "Product deleted"

ID_PARAMETER = OpenApiParameter(
    "id",
    int,
    OpenApiParameter.PATH,
    description="Product ID",
)
BAD_REQUEST = OpenApiResponse(ValidationErrorsSerializer, description="Invalid request")
NOT_FOUND = OpenApiResponse(NotFoundSerializer, description="Product not found")


def _not_found() -> Response:
    return Response({"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)


@extend_schema(tags=["Products"])
class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``repository_class`` (DIP).  Pass
    ``repository_class`` to ``as_view`` to substitute the persistence
    layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    lookup_url_kwarg = "id"
    # Any non-slash segment reaches the id rule, dotted ones included.
    lookup_value_regex = "[^/]+"
    repository_class = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(
        summary="List products",
        description="Returns every product.",
        responses={200: ProductListEnvelopeSerializer},
    )
    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    @extend_schema(
        summary="Get a product by ID",
        parameters=[ID_PARAMETER],
        responses={200: ProductEnvelopeSerializer, 400: BAD_REQUEST, 404: NOT_FOUND},
    )
    @validate(ID_RULES)
    def retrieve(self, request: Request, id: str | None = None) -> Response:
        """GET /api/products/{id}"""
        try:
            product = self._service.get_product(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Create a product",
        description="Stores a new, available product and returns it.",
        request=ProductCreateSerializer,
        responses={201: ProductEnvelopeSerializer, 400: BAD_REQUEST},
    )
    @validate(CREATE_RULES)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data
        dto = CreateProductDTO(name=data["name"], price=data["price"])
        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(
        summary="Update a product",
        description="Replaces name, price and availability of a product.",
        parameters=[ID_PARAMETER],
        request=ProductUpdateSerializer,
        responses={200: ProductEnvelopeSerializer, 400: BAD_REQUEST, 404: NOT_FOUND},
    )
    @validate(UPDATE_RULES)
    def update(self, request: Request, id: str | None = None) -> Response:
        """PUT /api/products/{id}"""
        data = request.data
        dto = UpdateProductDTO(
            name=data["name"],
            price=data["price"],
            availability=data["availability"],
        )
        try:
            product = self._service.update_product(int(id), dto)
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @extend_schema(
        summary="Toggle product availability",
        description=(
            "Flips the availability of an existing product. "
            "The request body is ignored."
        ),
        parameters=[ID_PARAMETER],
        request=None,
        responses={200: ProductEnvelopeSerializer, 400: BAD_REQUEST, 404: NOT_FOUND},
    )
    @validate(ID_RULES)
    def partial_update(self, request: Request, id: str | None = None) -> Response:
        """PATCH /api/products/{id}"""
        try:
            product = self._service.toggle_availability(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": ProductSerializer(product).data})

    @extend_schema(
        summary="Delete a product",
        parameters=[ID_PARAMETER],
        responses={200: MessageEnvelopeSerializer, 400: BAD_REQUEST, 404: NOT_FOUND},
    )
    @validate(ID_RULES)
    def destroy(self, request: Request, id: str | None = None) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": DELETED_MESSAGE})
