import logging

from rest_framework import status, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.catalog.models import Product
from apps.catalog.services import (
    AttributeConfigService,
    VariationCombinationService,
    VariationLinkService,
    editable_product_fields,
)
from apps.core.exceptions import NotFoundOrUnauthorized
from apps.core.mixins import EnvelopedListMixin
from apps.core.utils import parse_uuid
from apps.stores.api.mixins import StoreScopedMixin
from .filters import ProductFilter
from .serializers import (
    ProductAttributeCreateSerializer,
    ProductAttributeSerializer,
    ProductAttributeUpdateSerializer,
    ProductColumnOptionCreateSerializer,
    ProductColumnOptionSerializer,
    ProductColumnOptionUpdateSerializer,
    ProductColumnSerializer,
    ProductColumnUpdateSerializer,
    ProductSerializer,
    ProductVariationCreateSerializer,
    ProductVariationSerializer,
)

logger = logging.getLogger(__name__)

UUID_LOOKUP_REGEX = r'[0-9a-fA-F-]{36}'


class StoreScopedViewSet(StoreScopedMixin, viewsets.GenericViewSet):
    lookup_value_regex = UUID_LOOKUP_REGEX

    def deleted(self):
        return Response({'success': True})


class ProductAttributeViewSet(StoreScopedViewSet):
    """
    API endpoint for variation attributes (Tamanho, Cor, ...) and their options.

    list: Attributes by position with product_attribute_options
    create: Attribute plus options; failed option inserts come back as warnings
    update: name, label, is_variation, is_required
    destroy: Attribute and, by cascade, its options
    """
    serializer_class = ProductAttributeSerializer

    def get_queryset(self):
        return AttributeConfigService.list_attributes(self.get_store())

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response({'attributes': serializer.data})

    def create(self, request, *args, **kwargs):
        payload = ProductAttributeCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        attribute, warnings = AttributeConfigService.create_attribute(
            self.get_store(), **payload.validated_data
        )
        data = dict(self.get_serializer(attribute).data)
        data['warnings'] = warnings
        return Response(data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        payload = ProductAttributeUpdateSerializer(data=request.data, partial=True)
        payload.is_valid(raise_exception=True)

        attribute = AttributeConfigService.update_attribute(
            self.get_store(), kwargs['pk'], payload.validated_data
        )
        return Response(self.get_serializer(attribute).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        AttributeConfigService.delete_attribute(self.get_store(), kwargs['pk'])
        return self.deleted()


class ProductColumnViewSet(StoreScopedViewSet):
    """
    API endpoint for the configurable columns of the product table.
    """
    serializer_class = ProductColumnSerializer

    def get_queryset(self):
        return AttributeConfigService.list_columns(self.get_store())

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response({'columns': serializer.data})

    def create(self, request, *args, **kwargs):
        payload = self.get_serializer(data=request.data)
        payload.is_valid(raise_exception=True)

        column = AttributeConfigService.create_column(self.get_store(), payload.validated_data)
        return Response(self.get_serializer(column).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        payload = ProductColumnUpdateSerializer(data=request.data, partial=True)
        payload.is_valid(raise_exception=True)

        column = AttributeConfigService.update_column(
            self.get_store(), kwargs['pk'], payload.validated_data
        )
        return Response(self.get_serializer(column).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        AttributeConfigService.delete_column(self.get_store(), kwargs['pk'])
        return self.deleted()


class ProductColumnOptionViewSet(StoreScopedViewSet):
    """
    API endpoint for the select options of a column.

    list: ?columnId=<uuid> for one column, otherwise every column of the store
    create: {"columnId", "value"}, appended after the last position
    """
    serializer_class = ProductColumnOptionSerializer

    def list(self, request, *args, **kwargs):
        column_id = request.query_params.get('columnId')
        if column_id:
            column_id = parse_uuid(column_id, 'columnId')

        options = AttributeConfigService.list_column_options(self.get_store(), column_id)
        return Response({'options': self.get_serializer(options, many=True).data})

    def create(self, request, *args, **kwargs):
        payload = ProductColumnOptionCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        option = AttributeConfigService.add_column_option(
            self.get_store(),
            payload.validated_data.get('columnId'),
            payload.validated_data.get('value'),
        )
        return Response(self.get_serializer(option).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        payload = ProductColumnOptionUpdateSerializer(data=request.data, partial=True)
        payload.is_valid(raise_exception=True)

        option = AttributeConfigService.update_column_option(
            self.get_store(), kwargs['pk'], payload.validated_data
        )
        return Response(self.get_serializer(option).data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        AttributeConfigService.delete_column_option(self.get_store(), kwargs['pk'])
        return self.deleted()


class ProductDataView(StoreScopedMixin, APIView):
    """Attributes (with options) and columns in one response."""

    def get(self, request, *args, **kwargs):
        data = AttributeConfigService.product_data(self.get_store())
        return Response({
            'attributes': ProductAttributeSerializer(data['attributes'], many=True).data,
            'columns': ProductColumnSerializer(data['columns'], many=True).data,
        })


class ProductViewSet(EnvelopedListMixin, StoreScopedViewSet):
    """
    API endpoint for products.

    list: Newest first, each with product_variations
    create: One product, or one per variation combination with variationGroups
    update: Always partial; relationship keys in the payload are ignored
    destroy: Product and its variation links
    """
    serializer_class = ProductSerializer
    filterset_class = ProductFilter

    def get_queryset(self):
        return Product.objects.filter(store=self.get_store()).prefetch_related(
            'product_variations__attribute_option__attribute',
            'product_variations__attribute',
        ).order_by('-created_at')

    def retrieve(self, request, *args, **kwargs):
        product = self.get_queryset().filter(pk=kwargs['pk']).first()
        if product is None:
            raise NotFoundOrUnauthorized('Product not found')
        return Response(self.get_serializer(product).data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = dict(serializer.validated_data)
        variation_groups = data.pop('variationGroups', None)
        stock = data.pop('stock', 0)

        products, warnings = VariationCombinationService.create_products(
            self.get_store(), data, stock=stock, variation_groups=variation_groups
        )
        return Response(
            {
                'products': self.get_serializer(products, many=True).data,
                'warnings': warnings,
            },
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        product = VariationLinkService.get_product(self.get_store(), kwargs['pk'])

        serializer = self.get_serializer(
            product, data=editable_product_fields(request.data), partial=True
        )
        serializer.is_valid(raise_exception=True)
        product = serializer.save()
        logger.info(f"Product updated: {product.codigo} ({product.id})")

        data = dict(self.get_serializer(product).data)
        data['product_variations'] = []
        return Response(data)

    def partial_update(self, request, *args, **kwargs):
        return self.update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        VariationLinkService.delete_product(self.get_store(), kwargs['pk'])
        return self.deleted()


class ProductVariationViewSet(StoreScopedViewSet):
    """
    API endpoint for single product -> attribute option links.

    list: ?productId=<uuid> to restrict to one product
    """
    serializer_class = ProductVariationSerializer

    def list(self, request, *args, **kwargs):
        product_id = request.query_params.get('productId')
        if product_id:
            product_id = parse_uuid(product_id, 'productId')

        variations = VariationLinkService.list_variations(self.get_store(), product_id)
        return Response({'variations': self.get_serializer(variations, many=True).data})

    def create(self, request, *args, **kwargs):
        payload = ProductVariationCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data

        variation, warnings = VariationLinkService.create_variation(
            self.get_store(),
            data.get('productId'),
            attribute_option_id=data.get('attributeOptionId'),
            attribute_id=data.get('attributeId'),
            value=data.get('value'),
        )
        variation = VariationLinkService.list_variations(self.get_store()).get(pk=variation.pk)

        response = dict(self.get_serializer(variation).data)
        response['warnings'] = warnings
        return Response(response, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):
        VariationLinkService.delete_variation(self.get_store(), kwargs['pk'])
        return self.deleted()
