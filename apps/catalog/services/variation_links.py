"""
Product update/delete and the individual product -> attribute option links.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, NamedTuple, Optional

from django.db.models import QuerySet
from rest_framework.exceptions import ValidationError

from apps.catalog.models import (
    PRODUCT_EDITABLE_FIELDS,
    Product,
    ProductAttribute,
    ProductAttributeOption,
    ProductVariation,
)
from apps.core.exceptions import NotFoundOrUnauthorized

logger = logging.getLogger(__name__)


class VariationLink(NamedTuple):
    variation: ProductVariation
    warnings: List[str]


def editable_product_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Keep only the writable product columns of an update payload.
    Relationship data such as ``product_variations`` never reaches the row.
    """
    if not isinstance(payload, Mapping):
        raise ValidationError('Dados do produto devem ser um objeto')
    allowed = {k: v for k, v in payload.items() if k in PRODUCT_EDITABLE_FIELDS}
    dropped = sorted(set(payload) - set(allowed))
    if dropped:
        logger.debug(f"Ignoring non-editable product fields: {dropped}")
    return allowed


class VariationLinkService:

    @staticmethod
    def get_product(store, product_id) -> Product:
        product = Product.objects.filter(pk=product_id, store=store).first()
        if product is None:
            raise NotFoundOrUnauthorized('Product not found')
        return product

    @staticmethod
    def delete_product(store, product_id) -> None:
        product = VariationLinkService.get_product(store, product_id)
        logger.info(f"Deleting product {product.codigo} ({product.id}) store={store.id}")
        product.delete()

    @staticmethod
    def list_variations(store, product_id=None) -> QuerySet:
        queryset = ProductVariation.objects.filter(
            product__store=store
        ).select_related('attribute_option__attribute', 'attribute')
        if product_id:
            queryset = queryset.filter(product_id=product_id)
        return queryset.order_by('created_at')

    @staticmethod
    def create_variation(
        store,
        product_id,
        attribute_option_id=None,
        attribute_id=None,
        value: Optional[str] = None,
    ) -> VariationLink:
        """
        Link a product to an attribute option.

        The ``attribute_id + value`` form is resolved to the configured option
        when one matches; otherwise the pair is stored as a legacy link and a
        warning says so.
        """
        value = (value or '').strip()
        if not product_id or not (attribute_option_id or (attribute_id and value)):
            raise ValidationError('Missing required fields: productId, attributeOptionId')

        product = VariationLinkService.get_product(store, product_id)
        warnings = []

        if attribute_option_id:
            option = ProductAttributeOption.objects.filter(
                pk=attribute_option_id,
                attribute__store=store
            ).first()
            if option is None:
                raise NotFoundOrUnauthorized('Attribute option not found')
        else:
            attribute = ProductAttribute.objects.filter(pk=attribute_id, store=store).first()
            if attribute is None:
                raise NotFoundOrUnauthorized('Attribute not found')
            option = attribute.options.filter(value=value).first()

            if option is None:
                duplicate = ProductVariation.objects.filter(
                    product=product, attribute=attribute, value=value,
                    attribute_option__isnull=True
                ).exists()
                if duplicate:
                    raise ValidationError('Variação já cadastrada para este produto')

                logger.warning(
                    f"Storing legacy variation for product {product.codigo}: "
                    f"attribute {attribute.name} value '{value}' has no configured option"
                )
                warnings.append(
                    f"Valor '{value}' não é uma opção configurada de '{attribute.label}'; "
                    f"variação salva sem vínculo com opção"
                )
                variation = ProductVariation.objects.create(
                    product=product,
                    attribute=attribute,
                    value=value,
                )
                return VariationLink(variation, warnings)

        if ProductVariation.objects.filter(product=product, attribute_option=option).exists():
            raise ValidationError('Variação já cadastrada para este produto')

        variation = ProductVariation.objects.create(product=product, attribute_option=option)
        return VariationLink(variation, warnings)

    @staticmethod
    def delete_variation(store, variation_id) -> None:
        """
        Ownership is checked in two hops: variation -> product -> store.
        Nothing is deleted when the product belongs to another store.
        """
        variation = ProductVariation.objects.filter(pk=variation_id).only(
            'id', 'product_id'
        ).first()
        if variation is None or not variation.product_id:
            raise NotFoundOrUnauthorized('Variation not found')

        if not Product.objects.filter(pk=variation.product_id, store=store).exists():
            logger.warning(
                f"Refusing to delete variation {variation_id}: product "
                f"{variation.product_id} is not in store {store.id}"
            )
            raise NotFoundOrUnauthorized('Variation not found or unauthorized')

        variation.delete()
