import logging

from django.conf import settings
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.reverse import reverse
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiExample

from .exceptions import ProductIdMismatch, ProductNotFound, UnknownReference
from .serializers import (
    ProductSerializer,
    ProductDetailSerializer,
    ProductUpdateSerializer,
)
from .services import ProductService

logger = logging.getLogger(__name__)

# Product columns holding references, keyed to their update payload names
REFERENCE_FIELDS = {
    'category_id': 'categoryId',
    'supplier_id': 'supplierId',
}


@extend_schema_view(
    list=extend_schema(
        tags=['Products'],
        summary='List all products',
        description='Retrieve every product with its category and supplier summary.',
        responses=ProductSerializer(many=True),
    ),
    retrieve=extend_schema(
        tags=['Products'],
        summary='Get product details',
        description='Retrieve a product including its category, supplier and order details.',
        responses={200: ProductDetailSerializer, 404: None},
    ),
    create=extend_schema(
        tags=['Products'],
        summary='Create a new product',
        description=(
            'Create a product. Unknown category or supplier ids are created as '
            'placeholder rows holding only the id. Only productName is stored '
            'from the product fields.'
        ),
        request=ProductSerializer,
        responses={201: ProductSerializer},
        examples=[
            OpenApiExample(
                'Chai',
                value={
                    'productName': 'Chai',
                    'category': {'categoryId': 1},
                    'supplier': {'supplierId': 1},
                },
                request_only=True,
            ),
        ],
    ),
    update=extend_schema(
        tags=['Products'],
        summary='Update product',
        description='Overwrite a product. The productId in the body must match the path.',
        request=ProductUpdateSerializer,
        responses={200: ProductUpdateSerializer, 400: None, 404: None},
    ),
    destroy=extend_schema(
        tags=['Products'],
        summary='Delete product',
        description='Delete a product together with every order detail referencing it.',
        responses={204: None, 404: None},
    ),
)
class ProductViewSet(viewsets.ViewSet):
    """
    ViewSet for Product CRUD operations.

    Provides:
    - list: GET /products
    - retrieve: GET /products/{id}
    - create: POST /products
    - update: PUT /products/{id}
    - destroy: DELETE /products/{id}
    """
    lookup_value_regex = r'\d+'
    service_class = ProductService

    def get_service(self):
        return self.service_class()

    def not_found(self):
        return Response(
            {'error': 'Product not found'},
            status=status.HTTP_404_NOT_FOUND
        )

    def list(self, request):
        """
        List products.

        Wrapped as {"$id": "1", "$values": [...]} when reference
        preservation is switched on in CATALOG_CONFIG.
        """
        products = self.get_service().list_products()
        data = ProductSerializer(products, many=True).data

        if settings.CATALOG_CONFIG.get('PRESERVE_REFERENCES'):
            return Response({'$id': '1', '$values': data})
        return Response(data)

    def retrieve(self, request, pk=None):
        try:
            product = self.get_service().get_product(int(pk))
        except ProductNotFound:
            return self.not_found()

        return Response(ProductDetailSerializer(product).data)

    def create(self, request):
        """
        Create a product and point the Location header at its detail URL.
        """
        serializer = ProductSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payload = serializer.validated_data

        product = self.get_service().create_product(
            product_name=payload['product_name'],
            category_id=payload['category']['id'],
            supplier_id=payload['supplier']['id'],
        )

        location = reverse('product-detail', kwargs={'pk': product.pk}, request=request)
        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
            headers={'Location': location}
        )

    def update(self, request, pk=None):
        """
        Update a product.

        Responds with the update payload as stored.
        """
        serializer = ProductUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            product = self.get_service().update_product(
                int(pk),
                serializer.validated_data['id'],
                serializer.get_changes(),
            )
        except ProductIdMismatch as exc:
            logger.warning("Rejected update of product %s: %s", pk, exc)
            return Response(
                {'error': str(exc)},
                status=status.HTTP_400_BAD_REQUEST
            )
        except ProductNotFound:
            return self.not_found()
        except UnknownReference as exc:
            return Response(
                {REFERENCE_FIELDS[exc.field]: [str(exc)]},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(ProductUpdateSerializer(product).data)

    def destroy(self, request, pk=None):
        try:
            self.get_service().delete_product(int(pk))
        except ProductNotFound:
            return self.not_found()

        return Response(status=status.HTTP_204_NO_CONTENT)
