"""
Expands a product-creation request with variation groups into one concrete
product per combination of variation values.

Example:
    base codigo "P1", groups Tamanho=[M, G] x Cor=[Azul, Preto]
    -> P1-M-Azul, P1-M-Preto, P1-G-Azul, P1-G-Preto

Each generated product is linked back to the ProductAttributeOption rows of
its values. Values with no configured option still produce a product, just
without that link.
"""

import logging
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from django.db import DatabaseError, transaction
from django.db.models import Prefetch
from rest_framework.exceptions import ValidationError
from simple_history.utils import bulk_create_with_history

from apps.catalog.models import (
    Product,
    ProductAttributeOption,
    ProductVariation,
)

logger = logging.getLogger(__name__)

# Upper bound on products generated by a single request.
MAX_COMBINATIONS = 1000


class Combination(NamedTuple):
    """One cartesian-product tuple: (attribute_id, value) per group, plus stock."""
    selections: List[Tuple[str, str]]
    stock: int

    @property
    def values(self) -> List[str]:
        return [value for _, value in self.selections]


class ProductCreation(NamedTuple):
    """Created products plus warnings for variation links that were not stored."""
    products: List[Product]
    warnings: List[str]


def generate_combinations(variation_groups: List[Dict[str, Any]]) -> List[Combination]:
    """
    Cartesian product of the groups' values, depth first: group 0 varies
    slowest.

    The stock of a combination is the stock given for the value chosen in the
    innermost (last) group; stocks of the other groups are not aggregated.
    """
    combinations = []
    group_count = len(variation_groups)

    def walk(depth, selections, stock):
        if depth == group_count:
            combinations.append(Combination(list(selections), stock))
            return

        group = variation_groups[depth]
        attribute_id = str(group['attributeId'])
        for entry in group['values']:
            selections.append((attribute_id, entry['value']))
            walk(depth + 1, selections, entry.get('stock', 0))
            selections.pop()

    if group_count:
        walk(0, [], 0)
    return combinations


def combination_codigo(base_codigo: str, combination: Combination) -> str:
    return f"{base_codigo}-{'-'.join(combination.values)}"


class VariationCombinationService:
    """
    Creates the product rows for a base payload, optionally expanded by
    variation groups, and links them to their attribute options.
    """

    @staticmethod
    def _validate_groups(variation_groups: List[Dict[str, Any]]) -> None:
        """Each attribute may drive one group only; the expansion is capped."""
        attribute_ids = [str(group['attributeId']) for group in variation_groups]
        repeated = sorted({a for a in attribute_ids if attribute_ids.count(a) > 1})
        if repeated:
            raise ValidationError(
                f"Atributo repetido nos grupos de variação: {', '.join(repeated)}"
            )

        total = 1
        for group in variation_groups:
            total *= len(group['values'])
        if total > MAX_COMBINATIONS:
            raise ValidationError(
                f"Grupos de variação geram {total} combinações; "
                f"o máximo é {MAX_COMBINATIONS}"
            )

    @staticmethod
    def _ensure_codigos_available(store, codigos: List[str]) -> None:
        max_length = Product._meta.get_field('codigo').max_length
        too_long = [codigo for codigo in codigos if len(codigo) > max_length]
        if too_long:
            raise ValidationError(
                f"Código gerado excede {max_length} caracteres: {too_long[0]}"
            )

        seen = set()
        repeated = []
        for codigo in codigos:
            if codigo in seen:
                repeated.append(codigo)
            seen.add(codigo)
        if repeated:
            raise ValidationError(
                f"Combinações repetidas geram o mesmo código: {', '.join(sorted(set(repeated)))}"
            )

        existing = list(
            Product.objects.filter(store=store, codigo__in=codigos).values_list('codigo', flat=True)
        )
        if existing:
            raise ValidationError(
                f"Código já cadastrado nesta loja: {', '.join(sorted(existing))}"
            )

    @staticmethod
    def build_option_lookup(store) -> Dict[str, Any]:
        """Map "attributeId:value" -> option id for every option of the store."""
        options = ProductAttributeOption.objects.filter(
            attribute__store=store
        ).only('id', 'attribute_id', 'value')
        return {option.lookup_key: option.id for option in options}

    @staticmethod
    def hydrated(product_ids: List[Any]) -> List[Product]:
        """Re-read products with their variations, keeping the given order."""
        products = Product.objects.filter(pk__in=product_ids).prefetch_related(
            Prefetch(
                'product_variations',
                queryset=ProductVariation.objects.select_related(
                    'attribute_option__attribute', 'attribute'
                ).order_by('created_at')
            )
        )
        by_id = {product.pk: product for product in products}
        return [by_id[pk] for pk in product_ids if pk in by_id]

    @staticmethod
    def create_products(
        store,
        product_data: Dict[str, Any],
        stock: int = 0,
        variation_groups: Optional[List[Dict[str, Any]]] = None,
    ) -> ProductCreation:
        """
        Without variation groups a single product is created with the given
        stock. With groups, one product per combination is bulk inserted and
        linked to the options of its values.

        Product rows and links are written in one transaction; the link insert
        runs in its own savepoint, so a failure there keeps the products and is
        reported as a warning.
        """
        base_codigo = product_data['codigo']

        if not variation_groups:
            VariationCombinationService._ensure_codigos_available(store, [base_codigo])
            product = Product.objects.create(store=store, stock=stock, **product_data)
            logger.info(f"Product created: {product.codigo} ({product.id}) store={store.id}")
            return ProductCreation(VariationCombinationService.hydrated([product.pk]), [])

        VariationCombinationService._validate_groups(variation_groups)
        combinations = generate_combinations(variation_groups)
        codigos = [combination_codigo(base_codigo, c) for c in combinations]
        VariationCombinationService._ensure_codigos_available(store, codigos)

        shared_fields = {k: v for k, v in product_data.items() if k != 'codigo'}
        rows = [
            Product(store=store, codigo=codigo, stock=combination.stock, **shared_fields)
            for codigo, combination in zip(codigos, combinations)
        ]

        warnings = []
        with transaction.atomic():
            created = bulk_create_with_history(rows, Product)
            logger.info(
                f"Created {len(created)} products from {len(variation_groups)} variation groups "
                f"(base {base_codigo}) store={store.id}"
            )

            option_lookup = VariationCombinationService.build_option_lookup(store)
            links = []
            for product, combination in zip(created, combinations):
                for attribute_id, value in combination.selections:
                    option_id = option_lookup.get(f"{attribute_id}:{value}")
                    if option_id is None:
                        logger.warning(
                            f"No option for attribute {attribute_id} value '{value}'; "
                            f"product {product.codigo} left without this variation"
                        )
                        warnings.append(
                            f"Valor '{value}' não corresponde a nenhuma opção do atributo "
                            f"{attribute_id}; produto {product.codigo} criado sem esta variação"
                        )
                        continue
                    links.append(
                        ProductVariation(product=product, attribute_option_id=option_id)
                    )

            if links:
                try:
                    with transaction.atomic():
                        ProductVariation.objects.bulk_create(links)
                except DatabaseError as e:
                    logger.warning(f"Error creating product variations for base {base_codigo}: {e}")
                    warnings.append(
                        f"Produtos criados, mas as variações não foram vinculadas: {e}"
                    )

        return ProductCreation(
            VariationCombinationService.hydrated([p.pk for p in created]),
            warnings
        )
