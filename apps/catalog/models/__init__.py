"""
Catalog models for a multi-tenant back-office with a dynamic product schema.

Model Hierarchy:
- ProductAttribute: Tenant-defined dimension (Tamanho, Cor)
- ProductAttributeOption: Allowed values for each attribute (M, G, Azul)
- ProductColumn: Presentation of a product field in the product table
- ProductColumnOption: Choices for select-type columns
- Product: Sellable item, one row per variation combination
- ProductVariation: Product -> attribute option link
"""

from .attribute import ProductAttribute, ProductAttributeOption
from .column import ProductColumn, ProductColumnOption
from .product import Product, PRODUCT_EDITABLE_FIELDS
from .variation import ProductVariation

__all__ = [
    'ProductAttribute',
    'ProductAttributeOption',
    'ProductColumn',
    'ProductColumnOption',
    'Product',
    'PRODUCT_EDITABLE_FIELDS',
    'ProductVariation',
]
