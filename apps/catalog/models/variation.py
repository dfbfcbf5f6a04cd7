import uuid

from django.db import models
from django.db.models import Q


class ProductVariation(models.Model):
    """
    Links a Product to the attribute value it was generated for.

    Two shapes exist:
    - option: points at a configured ProductAttributeOption (canonical)
    - legacy: stores attribute + free-text value, kept for rows whose value
      has no configured option
    """
    KIND_OPTION = 'option'
    KIND_LEGACY = 'legacy'

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='product_variations',
        verbose_name='Produto'
    )
    attribute_option = models.ForeignKey(
        'catalog.ProductAttributeOption',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='product_variations',
        verbose_name='Opção de Atributo'
    )
    attribute = models.ForeignKey(
        'catalog.ProductAttribute',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='legacy_variations',
        verbose_name='Atributo'
    )
    value = models.CharField(
        max_length=100,
        blank=True,
        default='',
        verbose_name='Valor'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )

    class Meta:
        ordering = ['created_at']
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(attribute_option__isnull=False)
                    | (Q(attribute__isnull=False) & ~Q(value=''))
                ),
                name='product_variation_option_or_legacy'
            ),
            models.UniqueConstraint(
                fields=['product', 'attribute_option'],
                condition=Q(attribute_option__isnull=False),
                name='unique_product_attribute_option'
            ),
        ]
        verbose_name = 'Variação do Produto'
        verbose_name_plural = 'Variações dos Produtos'

    def __str__(self):
        return f"{self.product.codigo} - {self.resolved_attribute}: {self.resolved_value}"

    @property
    def kind(self):
        return self.KIND_OPTION if self.attribute_option_id else self.KIND_LEGACY

    @property
    def resolved_attribute(self):
        if self.attribute_option_id:
            return self.attribute_option.attribute
        return self.attribute

    @property
    def resolved_value(self):
        if self.attribute_option_id:
            return self.attribute_option.value
        return self.value
