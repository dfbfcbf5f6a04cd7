"""
Sale registration and per-seller statistics.
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.db import transaction
from django.db.models import Count, Sum
from rest_framework.exceptions import ValidationError

from apps.catalog.models import Product
from apps.core.exceptions import NotFoundOrUnauthorized
from apps.sales.models import Customer, Sale, SaleItem, TeamMember

logger = logging.getLogger(__name__)


class SaleService:

    @staticmethod
    def _store_member(store, team_member_id) -> Optional[TeamMember]:
        if not team_member_id:
            return None
        member = TeamMember.objects.filter(pk=team_member_id, store=store).first()
        if member is None:
            raise NotFoundOrUnauthorized('Team member not found')
        return member

    @staticmethod
    def _store_customer(store, customer_id) -> Optional[Customer]:
        if not customer_id:
            return None
        customer = Customer.objects.filter(pk=customer_id, store=store).first()
        if customer is None:
            raise NotFoundOrUnauthorized('Customer not found')
        return customer

    @staticmethod
    def _price_items(store, items: List[Dict[str, Any]]) -> List[SaleItem]:
        """
        Build unsaved SaleItem rows priced from each product's preco1.
        """
        product_ids = [item['product_id'] for item in items]
        products = {
            p.pk: p for p in Product.objects.filter(store=store, pk__in=product_ids)
        }

        rows = []
        for item in items:
            product = products.get(item['product_id'])
            if product is None:
                raise NotFoundOrUnauthorized(f"Product not found: {item['product_id']}")
            if product.preco1 is None:
                raise ValidationError(f"Produto {product.codigo} não possui preço de venda")

            quantity = item['quantity']
            rows.append(SaleItem(
                product=product,
                quantity=quantity,
                unit_price=product.preco1,
                subtotal=product.preco1 * quantity,
            ))
        return rows

    @staticmethod
    def create_sale(
        store,
        team_member_id=None,
        customer_id=None,
        payment_method: str = '',
        status: str = Sale.STATUS_COMPLETED,
        total: Optional[Decimal] = None,
        items: Optional[List[Dict[str, Any]]] = None,
    ) -> Sale:
        """
        Register a sale.

        With ``items`` the total is the sum of the item subtotals and any
        manual ``total`` is ignored. Without items a manual total is required.
        """
        member = SaleService._store_member(store, team_member_id)
        customer = SaleService._store_customer(store, customer_id)

        rows = SaleService._price_items(store, items) if items else []
        if rows:
            computed = sum((row.subtotal for row in rows), Decimal('0.00'))
            if total is not None and total != computed:
                logger.debug(f"Ignoring manual total {total}; items sum to {computed}")
            total = computed
        elif total is None:
            raise ValidationError('Informe o total ou os itens da venda')

        with transaction.atomic():
            sale = Sale.objects.create(
                store=store,
                team_member=member,
                customer=customer,
                payment_method=payment_method or '',
                status=status,
                total=total,
            )
            for row in rows:
                row.sale = sale
            SaleItem.objects.bulk_create(rows)

        logger.info(
            f"Sale registered: {sale.id} total={sale.total} items={len(rows)} store={store.id}"
        )
        return sale

    @staticmethod
    def seller_stats(store) -> List[Dict[str, Any]]:
        """
        Completed sales grouped by team member, highest total first.
        Sales without a team member are left out.
        """
        rows = Sale.objects.filter(
            store=store,
            status=Sale.STATUS_COMPLETED,
            team_member__isnull=False,
        ).values(
            'team_member_id', 'team_member__full_name', 'team_member__role'
        ).annotate(
            amount=Sum('total'),
            count=Count('id'),
        ).order_by('-amount')

        return [
            {
                'id': str(row['team_member_id']),
                'name': row['team_member__full_name'],
                'role': row['team_member__role'],
                'totalSales': float(row['amount']),
                'totalAmount': float(row['amount']),
                'salesCount': row['count'],
            }
            for row in rows
        ]
