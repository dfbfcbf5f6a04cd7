"""Tests for sales services."""

import uuid
from decimal import Decimal

import pytest
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from apps.catalog.models import Product
from apps.sales.models import PaymentMethod, Sale, SaleItem, TeamMember
from apps.sales.services import PaymentMethodService, SaleService


@pytest.fixture
def seller(store):
    return TeamMember.objects.create(store=store, full_name='Ana Souza', role='Vendedor')


@pytest.fixture
def manager(store):
    return TeamMember.objects.create(store=store, full_name='Bruno Lima', role='Gerente')


@pytest.mark.django_db
class TestSaleService:

    def test_manual_total(self, store, seller):
        sale = SaleService.create_sale(
            store, team_member_id=seller.id, payment_method='Pix', total=Decimal('120.00')
        )

        assert sale.total == Decimal('120.00')
        assert sale.status == Sale.STATUS_COMPLETED
        assert sale.items.count() == 0

    def test_items_priced_from_preco1(self, store, product):
        sale = SaleService.create_sale(
            store, items=[{'product_id': product.id, 'quantity': 3}], total=Decimal('1.00')
        )

        item = SaleItem.objects.get(sale=sale)
        assert item.unit_price == Decimal('49.90')
        assert item.subtotal == Decimal('149.70')
        assert sale.total == Decimal('149.70')

    def test_price_captured_at_sale_time(self, store, product):
        sale = SaleService.create_sale(store, items=[{'product_id': product.id, 'quantity': 1}])

        product.preco1 = Decimal('99.00')
        product.save()

        assert SaleItem.objects.get(sale=sale).unit_price == Decimal('49.90')

    def test_total_or_items_required(self, store):
        with pytest.raises(ValidationError):
            SaleService.create_sale(store)

    def test_product_without_price(self, store):
        product = Product.objects.create(store=store, codigo='SP', name='Sem preço')

        with pytest.raises(ValidationError):
            SaleService.create_sale(store, items=[{'product_id': product.id, 'quantity': 1}])

        assert Sale.objects.count() == 0

    def test_product_of_other_store(self, other_store, product):
        with pytest.raises(NotFound):
            SaleService.create_sale(other_store, items=[{'product_id': product.id, 'quantity': 1}])

    def test_team_member_of_other_store(self, other_store, seller):
        with pytest.raises(NotFound):
            SaleService.create_sale(other_store, team_member_id=seller.id, total=Decimal('1'))

    def test_seller_stats(self, store, seller, manager):
        SaleService.create_sale(store, team_member_id=seller.id, total=Decimal('100.00'))
        SaleService.create_sale(store, team_member_id=seller.id, total=Decimal('50.00'))
        SaleService.create_sale(store, team_member_id=manager.id, total=Decimal('300.00'))
        SaleService.create_sale(
            store, team_member_id=seller.id, total=Decimal('999.00'), status=Sale.STATUS_CANCELLED
        )
        SaleService.create_sale(store, total=Decimal('10.00'))

        stats = SaleService.seller_stats(store)

        assert stats == [
            {
                'id': str(manager.id), 'name': 'Bruno Lima', 'role': 'Gerente',
                'totalSales': 300.0, 'totalAmount': 300.0, 'salesCount': 1,
            },
            {
                'id': str(seller.id), 'name': 'Ana Souza', 'role': 'Vendedor',
                'totalSales': 150.0, 'totalAmount': 150.0, 'salesCount': 2,
            },
        ]


@pytest.mark.django_db
class TestPaymentMethodService:

    def test_delete(self, store):
        method = PaymentMethod.objects.create(store=store, name='Pix')

        PaymentMethodService.delete_payment_method(store, method.id)

        assert not PaymentMethod.objects.exists()

    def test_delete_unknown(self, store):
        with pytest.raises(NotFound):
            PaymentMethodService.delete_payment_method(store, uuid.uuid4())

    def test_delete_from_other_store(self, store, other_store):
        method = PaymentMethod.objects.create(store=store, name='Pix')

        with pytest.raises(PermissionDenied):
            PaymentMethodService.delete_payment_method(other_store, method.id)

        assert PaymentMethod.objects.filter(pk=method.pk).exists()
