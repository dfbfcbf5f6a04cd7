import uuid

from django.db import models


class ProductAttribute(models.Model):
    """
    Tenant-defined product dimension stored as metadata.
    Examples: Tamanho, Cor, Voltagem.

    Attributes flagged ``is_variation`` can be used to expand one base product
    into several concrete products (one per combination of option values).
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.CASCADE,
        related_name='product_attributes',
        verbose_name='Loja'
    )
    name = models.CharField(
        max_length=100,
        verbose_name='Nome interno',
        help_text='Chave estável usada internamente (ex: "tamanho")'
    )
    label = models.CharField(
        max_length=100,
        verbose_name='Rótulo'
    )
    is_variation = models.BooleanField(
        default=False,
        verbose_name='Gera variações'
    )
    is_required = models.BooleanField(
        default=False,
        verbose_name='Obrigatório'
    )
    position = models.PositiveIntegerField(
        default=0,
        verbose_name='Posição'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    class Meta:
        ordering = ['position', 'name']
        verbose_name = 'Atributo de Produto'
        verbose_name_plural = 'Atributos de Produto'

    def __str__(self):
        return self.label or self.name


class ProductAttributeOption(models.Model):
    """
    One allowed value for an attribute (e.g. "M", "G" for Tamanho).
    Variation values are resolved to options by (attribute, value).
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    attribute = models.ForeignKey(
        ProductAttribute,
        on_delete=models.CASCADE,
        related_name='options',
        verbose_name='Atributo'
    )
    value = models.CharField(
        max_length=100,
        verbose_name='Valor'
    )
    position = models.PositiveIntegerField(
        default=0,
        verbose_name='Posição'
    )

    class Meta:
        ordering = ['position', 'value']
        constraints = [
            models.UniqueConstraint(
                fields=['attribute', 'value'],
                name='unique_attribute_option_value'
            ),
        ]
        verbose_name = 'Opção de Atributo'
        verbose_name_plural = 'Opções de Atributos'

    def __str__(self):
        return f"{self.attribute.label}: {self.value}"

    @property
    def lookup_key(self):
        return f"{self.attribute_id}:{self.value}"
