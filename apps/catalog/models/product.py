import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from simple_history.models import HistoricalRecords


# Fields a client may write on update. Anything else in an update payload
# (ids, store, timestamps, nested product_variations...) is dropped.
PRODUCT_EDITABLE_FIELDS = (
    'codigo', 'name',
    'marca', 'categoria', 'subcategoria', 'grupo', 'subgrupo',
    'departamento', 'secao', 'estacao', 'colecao',
    'descricao', 'observacao',
    'fabricante', 'fornecedor',
    'ncm', 'cest',
    'custo', 'preco1', 'preco2', 'preco3',
    'stock',
)


class Product(models.Model):
    """
    Sellable item of a store.

    Products generated from variation combinations are ordinary rows whose
    codigo carries the combination suffix (e.g. "P1-M-Azul") and which are
    linked to their attribute options through ProductVariation.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.CASCADE,
        related_name='products',
        verbose_name='Loja'
    )
    codigo = models.CharField(
        max_length=100,
        verbose_name='Código'
    )
    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )

    # Classification
    marca = models.CharField(max_length=100, blank=True, default='', verbose_name='Marca')
    categoria = models.CharField(max_length=100, blank=True, default='', verbose_name='Categoria')
    subcategoria = models.CharField(max_length=100, blank=True, default='', verbose_name='Subcategoria')
    grupo = models.CharField(max_length=100, blank=True, default='', verbose_name='Grupo')
    subgrupo = models.CharField(max_length=100, blank=True, default='', verbose_name='Subgrupo')
    departamento = models.CharField(max_length=100, blank=True, default='', verbose_name='Departamento')
    secao = models.CharField(max_length=100, blank=True, default='', verbose_name='Seção')
    estacao = models.CharField(max_length=100, blank=True, default='', verbose_name='Estação')
    colecao = models.CharField(max_length=100, blank=True, default='', verbose_name='Coleção')

    descricao = models.TextField(blank=True, default='', verbose_name='Descrição')
    observacao = models.TextField(blank=True, default='', verbose_name='Observação')

    fabricante = models.CharField(max_length=100, blank=True, default='', verbose_name='Fabricante')
    fornecedor = models.CharField(max_length=100, blank=True, default='', verbose_name='Fornecedor')

    # Tax codes
    ncm = models.CharField(max_length=10, blank=True, default='', verbose_name='NCM')
    cest = models.CharField(max_length=9, blank=True, default='', verbose_name='CEST')

    # Pricing
    custo = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Custo'
    )
    preco1 = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço 1'
    )
    preco2 = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço 2'
    )
    preco3 = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço 3'
    )

    # Inventory
    stock = models.IntegerField(
        default=0,
        verbose_name='Estoque'
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    # History tracking
    history = HistoricalRecords()

    class Meta:
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(
                fields=['store', 'codigo'],
                name='unique_store_product_codigo'
            ),
        ]
        indexes = [
            models.Index(fields=['store', 'name'], name='product_store_name_idx'),
        ]
        verbose_name = 'Produto'
        verbose_name_plural = 'Produtos'

    def __str__(self):
        return f"{self.codigo} - {self.name}"

    @classmethod
    def column_field_names(cls):
        """Product fields a ProductColumn may present."""
        return [
            f.name for f in cls._meta.concrete_fields
            if f.name not in ('id', 'store')
        ]
