"""Tests for the sales API endpoints."""

import uuid
from datetime import timedelta
from decimal import Decimal

import pytest
from django.utils import timezone

from apps.sales.models import Customer, PaymentMethod, Sale, TeamMember


@pytest.fixture
def seller(store):
    return TeamMember.objects.create(store=store, full_name='Ana Souza', role='Vendedor')


@pytest.mark.django_db
class TestPaymentMethodEndpoints:

    def test_create_defaults_parcelas(self, api_client, store_url):
        response = api_client.post(store_url('payment-methods/'), {'name': ' Pix '}, format='json')

        assert response.status_code == 201
        data = response.json()
        assert data['name'] == 'Pix'
        assert data['parcelas'] == 'À Vista'
        assert data['codigo'] is None

    def test_create_with_codigo_and_parcelas(self, api_client, store_url):
        response = api_client.post(store_url('payment-methods/'), {
            'name': 'Cartão de Crédito', 'codigo': '12', 'parcelas': '6x',
        }, format='json')

        assert response.status_code == 201
        assert response.json()['codigo'] == '12'
        assert response.json()['parcelas'] == '6x'

    @pytest.mark.parametrize('payload, message', [
        ({'name': '   '}, 'Insira o nome do Método de Pagamento'),
        ({}, 'Insira o nome do Método de Pagamento'),
        ({'name': 'Pix', 'codigo': '1234'}, 'Código deve ter no máximo 3 números'),
        ({'name': 'Pix', 'codigo': 'ab'}, 'Código deve ter no máximo 3 números'),
        ({'name': 'Pix', 'parcelas': '13x'}, 'Parcela inválida'),
    ])
    def test_validation_messages(self, api_client, store_url, payload, message):
        response = api_client.post(store_url('payment-methods/'), payload, format='json')

        assert response.status_code == 400
        assert response.json()['error'] == message

    def test_list_ordered_by_name(self, api_client, store_url, store):
        PaymentMethod.objects.create(store=store, name='Pix')
        PaymentMethod.objects.create(store=store, name='Dinheiro')

        items = api_client.get(store_url('payment-methods/')).json()['items']

        assert [m['name'] for m in items] == ['Dinheiro', 'Pix']

    def test_delete(self, api_client, store_url, store):
        method = PaymentMethod.objects.create(store=store, name='Pix')

        response = api_client.delete(store_url(f'payment-methods/{method.id}/'))

        assert response.status_code == 200
        assert response.json() == {'success': True}

    def test_delete_unknown(self, api_client, store_url):
        response = api_client.delete(store_url(f'payment-methods/{uuid.uuid4()}/'))

        assert response.status_code == 404
        assert response.json() == {'error': 'Payment method not found'}

    def test_delete_from_other_store(self, api_client, store, other_store):
        method = PaymentMethod.objects.create(store=store, name='Pix')

        response = api_client.delete(f'/api/stores/{other_store.id}/payment-methods/{method.id}/')

        assert response.status_code == 403
        assert response.json() == {'error': 'Unauthorized'}


@pytest.mark.django_db
class TestCustomerAndTeamEndpoints:

    def test_customers_newest_first(self, api_client, store_url, store):
        older = Customer.objects.create(store=store, name='Carla')
        Customer.objects.filter(pk=older.pk).update(created_at=timezone.now() - timedelta(days=1))
        Customer.objects.create(store=store, name='Diego')

        items = api_client.get(store_url('customers/')).json()['items']

        assert [c['name'] for c in items] == ['Diego', 'Carla']

    def test_create_customer(self, api_client, store_url, store):
        response = api_client.post(store_url('customers/'), {
            'name': 'Carla', 'email': 'carla@example.com', 'document': '123.456.789-00',
        }, format='json')

        assert response.status_code == 201
        assert Customer.objects.get(store=store).name == 'Carla'

    def test_create_team_member_role_validated(self, api_client, store_url):
        response = api_client.post(store_url('team/'), {
            'full_name': 'Eva', 'role': 'Estagiário',
        }, format='json')

        assert response.status_code == 400

    def test_list_team(self, api_client, store_url, seller, other_store):
        TeamMember.objects.create(store=other_store, full_name='Fora')

        items = api_client.get(store_url('team/')).json()['items']

        assert [m['full_name'] for m in items] == ['Ana Souza']


@pytest.mark.django_db
class TestSaleEndpoints:

    def test_create_manual_sale(self, api_client, store_url, seller):
        response = api_client.post(store_url('sales/'), {
            'team_member_id': str(seller.id),
            'total': '80.00',
            'payment_method': 'Pix',
            'status': 'Pendente',
        }, format='json')

        assert response.status_code == 201
        data = response.json()
        assert data['status'] == 'Pendente'
        assert data['team_members'] == {
            'id': str(seller.id), 'full_name': 'Ana Souza', 'role': 'Vendedor'
        }

    def test_create_sale_with_items(self, api_client, store_url, product):
        response = api_client.post(store_url('sales/'), {
            'items': [{'product_id': str(product.id), 'quantity': 2}],
        }, format='json')

        assert response.status_code == 201
        data = response.json()
        assert Decimal(str(data['total'])) == Decimal('99.80')
        assert len(data['items']) == 1
        assert data['team_members'] is None

    def test_list_with_date_range(self, api_client, store_url, store, seller):
        old = Sale.objects.create(store=store, team_member=seller, total=Decimal('10'))
        Sale.objects.filter(pk=old.pk).update(created_at=timezone.now() - timedelta(days=30))
        recent = Sale.objects.create(store=store, team_member=seller, total=Decimal('20'))

        since = (timezone.now() - timedelta(days=7)).isoformat()
        items = api_client.get(store_url('sales/'), {'from': since}).json()['items']

        assert [s['id'] for s in items] == [str(recent.id)]

    def test_list_newest_first(self, api_client, store_url, store):
        first = Sale.objects.create(store=store, total=Decimal('10'))
        Sale.objects.filter(pk=first.pk).update(created_at=timezone.now() - timedelta(hours=1))
        second = Sale.objects.create(store=store, total=Decimal('20'))

        items = api_client.get(store_url('sales/')).json()['items']

        assert [s['id'] for s in items] == [str(second.id), str(first.id)]

    def test_sales_stats(self, api_client, store_url, store, seller):
        Sale.objects.create(store=store, team_member=seller, total=Decimal('10'))
        Sale.objects.create(store=store, team_member=seller, total=Decimal('15'))
        Sale.objects.create(store=store, team_member=seller, total=Decimal('99'), status='Cancelada')

        items = api_client.get(store_url('sales-stats/')).json()['items']

        assert items == [{
            'id': str(seller.id), 'name': 'Ana Souza', 'role': 'Vendedor',
            'totalSales': 25.0, 'totalAmount': 25.0, 'salesCount': 2,
        }]
