import uuid

from django.db import models


class ProductColumn(models.Model):
    """
    Tenant-defined presentation of a regular Product field in the product
    table: label, visibility, editability, input type and width.
    """
    COLUMN_TYPE_CHOICES = [
        ('text', 'Texto'),
        ('number', 'Número'),
        ('currency', 'Moeda'),
        ('date', 'Data'),
        ('textarea', 'Texto longo'),
        ('select', 'Lista de opções'),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.CASCADE,
        related_name='product_columns',
        verbose_name='Loja'
    )
    field_name = models.CharField(
        max_length=50,
        verbose_name='Campo',
        help_text='Nome do campo do produto exibido por esta coluna'
    )
    label = models.CharField(
        max_length=100,
        verbose_name='Rótulo'
    )
    is_visible = models.BooleanField(
        default=True,
        verbose_name='Visível'
    )
    is_editable = models.BooleanField(
        default=True,
        verbose_name='Editável'
    )
    column_type = models.CharField(
        max_length=20,
        choices=COLUMN_TYPE_CHOICES,
        default='text',
        verbose_name='Tipo'
    )
    width = models.CharField(
        max_length=20,
        default='auto',
        verbose_name='Largura'
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
        ordering = ['position', 'label']
        constraints = [
            models.UniqueConstraint(
                fields=['store', 'field_name'],
                name='unique_store_column_field'
            ),
        ]
        verbose_name = 'Coluna de Produto'
        verbose_name_plural = 'Colunas de Produto'

    def __str__(self):
        return f"{self.label} ({self.field_name})"


class ProductColumnOption(models.Model):
    """Dropdown choice for a ``select`` column."""
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    column = models.ForeignKey(
        ProductColumn,
        on_delete=models.CASCADE,
        related_name='options',
        verbose_name='Coluna'
    )
    value = models.CharField(
        max_length=255,
        verbose_name='Valor'
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
        ordering = ['position']
        verbose_name = 'Opção de Coluna'
        verbose_name_plural = 'Opções de Colunas'

    def __str__(self):
        return self.value
