from .serializers import (
    ProductAttributeSerializer,
    ProductAttributeOptionSerializer,
    ProductColumnSerializer,
    ProductColumnOptionSerializer,
    ProductSerializer,
    ProductVariationSerializer,
)

__all__ = [
    'ProductAttributeSerializer',
    'ProductAttributeOptionSerializer',
    'ProductColumnSerializer',
    'ProductColumnOptionSerializer',
    'ProductSerializer',
    'ProductVariationSerializer',
]
