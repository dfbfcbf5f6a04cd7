import uuid
from decimal import Decimal

from django.core.validators import MinValueValidator, RegexValidator
from django.db import models


class Customer(models.Model):
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.CASCADE,
        related_name='customers',
        verbose_name='Loja'
    )
    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )
    email = models.EmailField(blank=True, default='', verbose_name='E-mail')
    phone = models.CharField(max_length=30, blank=True, default='', verbose_name='Telefone')
    document = models.CharField(
        max_length=20,
        blank=True,
        default='',
        verbose_name='Documento',
        help_text='CPF ou CNPJ'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Cliente'
        verbose_name_plural = 'Clientes'

    def __str__(self):
        return self.name


class TeamMember(models.Model):
    ROLE_SELLER = 'Vendedor'
    ROLE_MANAGER = 'Gerente'
    ROLE_ADMIN = 'Administrador'

    ROLE_CHOICES = [
        (ROLE_SELLER, 'Vendedor'),
        (ROLE_MANAGER, 'Gerente'),
        (ROLE_ADMIN, 'Administrador'),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.CASCADE,
        related_name='team_members',
        verbose_name='Loja'
    )
    full_name = models.CharField(
        max_length=255,
        verbose_name='Nome completo'
    )
    email = models.EmailField(blank=True, default='', verbose_name='E-mail')
    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=ROLE_SELLER,
        verbose_name='Função'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )

    class Meta:
        ordering = ['-created_at']
        verbose_name = 'Membro da Equipe'
        verbose_name_plural = 'Equipe'

    def __str__(self):
        return f"{self.full_name} ({self.role})"


class PaymentMethod(models.Model):
    PARCELAS_CHOICES = [('À Vista', 'À Vista')] + [
        (f'{n}x', f'{n}x') for n in range(2, 13)
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.CASCADE,
        related_name='payment_methods',
        verbose_name='Loja'
    )
    name = models.CharField(
        max_length=100,
        verbose_name='Nome'
    )
    codigo = models.CharField(
        max_length=3,
        null=True,
        blank=True,
        validators=[RegexValidator(r'^\d{1,3}$', 'Código deve ter no máximo 3 números')],
        verbose_name='Código'
    )
    parcelas = models.CharField(
        max_length=10,
        choices=PARCELAS_CHOICES,
        default='À Vista',
        verbose_name='Parcelas'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Método de Pagamento'
        verbose_name_plural = 'Métodos de Pagamento'

    def __str__(self):
        return f"{self.name} ({self.parcelas})"


class Sale(models.Model):
    STATUS_COMPLETED = 'Concluída'
    STATUS_PENDING = 'Pendente'
    STATUS_CANCELLED = 'Cancelada'

    STATUS_CHOICES = [
        (STATUS_COMPLETED, 'Concluída'),
        (STATUS_PENDING, 'Pendente'),
        (STATUS_CANCELLED, 'Cancelada'),
    ]

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    store = models.ForeignKey(
        'stores.Store',
        on_delete=models.CASCADE,
        related_name='sales',
        verbose_name='Loja'
    )
    customer = models.ForeignKey(
        Customer,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sales',
        verbose_name='Cliente'
    )
    team_member = models.ForeignKey(
        TeamMember,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sales',
        verbose_name='Vendedor'
    )
    payment_method = models.CharField(
        max_length=100,
        blank=True,
        default='',
        verbose_name='Forma de pagamento'
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_COMPLETED,
        verbose_name='Status'
    )
    total = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Total'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['store', 'created_at'], name='sale_store_created_idx'),
        ]
        verbose_name = 'Venda'
        verbose_name_plural = 'Vendas'

    def __str__(self):
        return f"Venda {self.id} - R$ {self.total}"


class SaleItem(models.Model):
    """
    Line of a sale. unit_price is the product's preco1 when the sale was
    registered; later price changes do not touch it.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )
    sale = models.ForeignKey(
        Sale,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name='Venda'
    )
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.SET_NULL,
        null=True,
        related_name='sale_items',
        verbose_name='Produto'
    )
    quantity = models.PositiveIntegerField(
        default=1,
        validators=[MinValueValidator(1)],
        verbose_name='Quantidade'
    )
    unit_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        verbose_name='Preço unitário'
    )
    subtotal = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        verbose_name='Subtotal'
    )

    class Meta:
        verbose_name = 'Item da Venda'
        verbose_name_plural = 'Itens da Venda'

    def __str__(self):
        return f"{self.quantity}x {self.product}"
