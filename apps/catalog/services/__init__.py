from .attribute_config import AttributeConfigService, AttributeCreation
from .variation_combinations import (
    Combination,
    ProductCreation,
    VariationCombinationService,
    combination_codigo,
    generate_combinations,
)
from .variation_links import VariationLink, VariationLinkService, editable_product_fields

__all__ = [
    'AttributeConfigService',
    'AttributeCreation',
    'Combination',
    'ProductCreation',
    'VariationCombinationService',
    'combination_codigo',
    'generate_combinations',
    'VariationLink',
    'VariationLinkService',
    'editable_product_fields',
]
