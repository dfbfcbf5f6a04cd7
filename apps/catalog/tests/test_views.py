"""Tests for the catalog API endpoints."""

import uuid

import pytest

from apps.catalog.models import (
    Product,
    ProductAttribute,
    ProductColumn,
    ProductColumnOption,
    ProductVariation,
)


@pytest.mark.django_db
class TestProductAttributeEndpoints:

    def test_create_attribute_with_options(self, api_client, store_url):
        response = api_client.post(store_url('product-attributes/'), {
            'name': 'tamanho',
            'label': 'Tamanho',
            'is_variation': True,
            'options': ['M', 'G'],
        }, format='json')

        assert response.status_code == 201
        data = response.json()
        assert data['warnings'] == []
        assert [(o['value'], o['position']) for o in data['product_attribute_options']] == [
            ('M', 0), ('G', 1)
        ]

    def test_list_attributes(self, api_client, store_url, tamanho, cor):
        response = api_client.get(store_url('product-attributes/'))

        assert response.status_code == 200
        attributes = response.json()['attributes']
        assert [a['name'] for a in attributes] == ['tamanho', 'cor']
        assert [o['value'] for o in attributes[1]['product_attribute_options']] == ['Azul', 'Preto']

    def test_list_is_store_scoped(self, api_client, other_store, tamanho):
        response = api_client.get(f'/api/stores/{other_store.id}/product-attributes/')

        assert response.json() == {'attributes': []}

    def test_update_attribute(self, api_client, store_url, tamanho):
        response = api_client.patch(
            store_url(f'product-attributes/{tamanho.id}/'),
            {'label': 'Tam', 'is_required': True},
            format='json'
        )

        assert response.status_code == 200
        assert response.json()['label'] == 'Tam'
        assert response.json()['is_required'] is True

    def test_update_unknown_attribute(self, api_client, store_url):
        response = api_client.patch(
            store_url(f'product-attributes/{uuid.uuid4()}/'), {'label': 'x'}, format='json'
        )

        assert response.status_code == 404
        assert response.json() == {'error': 'Attribute not found'}

    def test_delete_attribute(self, api_client, store_url, tamanho):
        response = api_client.delete(store_url(f'product-attributes/{tamanho.id}/'))

        assert response.status_code == 200
        assert response.json() == {'success': True}
        assert not ProductAttribute.objects.filter(pk=tamanho.pk).exists()

    def test_unknown_store(self, api_client):
        response = api_client.get(f'/api/stores/{uuid.uuid4()}/product-attributes/')

        assert response.status_code == 404
        assert response.json() == {'error': 'Store not found'}


@pytest.mark.django_db
class TestProductColumnEndpoints:

    def test_create_column_requires_field_and_label(self, api_client, store_url):
        response = api_client.post(store_url('product-columns/'), {'label': 'Marca'}, format='json')

        assert response.status_code == 400
        assert response.json()['error'] == 'field_name and label are required'

    def test_create_and_list_columns(self, api_client, store_url):
        api_client.post(store_url('product-columns/'), {
            'field_name': 'preco1', 'label': 'Preço', 'column_type': 'currency', 'position': 1,
        }, format='json')
        api_client.post(store_url('product-columns/'), {
            'field_name': 'marca', 'label': 'Marca',
        }, format='json')

        columns = api_client.get(store_url('product-columns/')).json()['columns']

        assert [c['field_name'] for c in columns] == ['marca', 'preco1']
        assert columns[1]['column_type'] == 'currency'
        assert columns[0]['width'] == 'auto'

    def test_update_column_keeps_field_name(self, api_client, store_url, store):
        column = ProductColumn.objects.create(store=store, field_name='marca', label='Marca')

        response = api_client.put(
            store_url(f'product-columns/{column.id}/'),
            {'field_name': 'ncm', 'label': 'Brand', 'is_visible': False},
            format='json'
        )

        assert response.status_code == 200
        column.refresh_from_db()
        assert column.field_name == 'marca'
        assert column.label == 'Brand'
        assert column.is_visible is False


@pytest.mark.django_db
class TestProductColumnOptionEndpoints:

    @pytest.fixture
    def column(self, store):
        return ProductColumn.objects.create(
            store=store, field_name='categoria', label='Categoria', column_type='select'
        )

    def test_options_are_appended(self, api_client, store_url, column):
        first = api_client.post(
            store_url('product-column-options/'), {'columnId': str(column.id), 'value': 'Camisas'},
            format='json'
        )
        second = api_client.post(
            store_url('product-column-options/'), {'columnId': str(column.id), 'value': 'Calças'},
            format='json'
        )

        assert first.status_code == 201
        assert first.json()['position'] == 0
        assert second.json()['position'] == 1

    def test_create_requires_column_and_value(self, api_client, store_url):
        response = api_client.post(store_url('product-column-options/'), {'value': 'x'}, format='json')

        assert response.status_code == 400
        assert response.json()['error'] == 'columnId and value are required'

    def test_list_filtered_by_column(self, api_client, store_url, store, column):
        other = ProductColumn.objects.create(store=store, field_name='marca', label='Marca')
        ProductColumnOption.objects.create(column=column, value='B', position=1)
        ProductColumnOption.objects.create(column=column, value='A', position=0)
        ProductColumnOption.objects.create(column=other, value='Z', position=0)

        response = api_client.get(store_url(f'product-column-options/?columnId={column.id}'))

        assert [o['value'] for o in response.json()['options']] == ['A', 'B']

    def test_list_with_bad_column_id(self, api_client, store_url):
        response = api_client.get(store_url('product-column-options/?columnId=abc'))

        assert response.status_code == 400

    def test_list_without_columns(self, api_client, store_url):
        response = api_client.get(store_url('product-column-options/'))

        assert response.json() == {'options': []}

    def test_delete_option(self, api_client, store_url, column):
        option = ProductColumnOption.objects.create(column=column, value='A')

        response = api_client.delete(store_url(f'product-column-options/{option.id}/'))

        assert response.status_code == 200
        assert not ProductColumnOption.objects.filter(pk=option.pk).exists()


@pytest.mark.django_db
class TestProductDataEndpoint:

    def test_returns_attributes_and_columns(self, api_client, store_url, store, tamanho):
        ProductColumn.objects.create(store=store, field_name='marca', label='Marca')

        data = api_client.get(store_url('product-data/')).json()

        assert [a['name'] for a in data['attributes']] == ['tamanho']
        assert len(data['attributes'][0]['product_attribute_options']) == 2
        assert [c['field_name'] for c in data['columns']] == ['marca']


@pytest.mark.django_db
class TestProductEndpoints:

    def test_create_single_product(self, api_client, store_url):
        response = api_client.post(store_url('products/'), {
            'codigo': 'P1', 'name': 'Camisa', 'preco1': '50.00', 'stock': 7,
        }, format='json')

        assert response.status_code == 201
        data = response.json()
        assert data['warnings'] == []
        assert len(data['products']) == 1
        assert data['products'][0]['stock'] == 7
        assert data['products'][0]['product_variations'] == []

    def test_create_requires_codigo_and_name(self, api_client, store_url):
        response = api_client.post(store_url('products/'), {'name': 'Camisa'}, format='json')

        assert response.status_code == 400
        assert response.json()['error'] == 'Código e Nome são obrigatórios'
        assert Product.objects.count() == 0

    def test_create_with_variation_groups(self, api_client, store_url, tamanho):
        response = api_client.post(store_url('products/'), {
            'codigo': 'P1',
            'name': 'Camisa',
            'preco1': 50,
            'variationGroups': [{
                'attributeId': str(tamanho.id),
                'values': [{'value': 'M', 'stock': 5}, {'value': 'G', 'stock': 3}],
            }],
        }, format='json')

        assert response.status_code == 201
        products = response.json()['products']
        assert [p['codigo'] for p in products] == ['P1-M', 'P1-G']
        assert [p['stock'] for p in products] == [5, 3]
        assert [p['product_variations'][0]['value'] for p in products] == ['M', 'G']
        assert products[0]['product_variations'][0]['attribute_option_id'] == str(
            tamanho.options.get(value='M').id
        )

    def test_unmatched_value_is_reported(self, api_client, store_url, tamanho):
        response = api_client.post(store_url('products/'), {
            'codigo': 'P1',
            'name': 'Camisa',
            'variationGroups': [{
                'attributeId': str(tamanho.id),
                'values': [{'value': 'M', 'stock': 1}, {'value': 'XG', 'stock': 1}],
            }],
        }, format='json')

        assert response.status_code == 201
        data = response.json()
        assert len(data['products']) == 2
        assert len(data['warnings']) == 1
        assert data['products'][1]['product_variations'] == []

    def test_negative_stock_rejected(self, api_client, store_url, tamanho):
        response = api_client.post(store_url('products/'), {
            'codigo': 'P1',
            'name': 'Camisa',
            'variationGroups': [{
                'attributeId': str(tamanho.id),
                'values': [{'value': 'M', 'stock': -1}],
            }],
        }, format='json')

        assert response.status_code == 400
        assert Product.objects.count() == 0

    def test_empty_group_rejected(self, api_client, store_url, tamanho):
        response = api_client.post(store_url('products/'), {
            'codigo': 'P1',
            'name': 'Camisa',
            'variationGroups': [{'attributeId': str(tamanho.id), 'values': []}],
        }, format='json')

        assert response.status_code == 400

    def test_generated_codigo_too_long(self, api_client, store_url, tamanho):
        response = api_client.post(store_url('products/'), {
            'codigo': 'X' * 100,
            'name': 'Camisa',
            'variationGroups': [{'attributeId': str(tamanho.id), 'values': [{'value': 'M'}]}],
        }, format='json')

        assert response.status_code == 400
        assert Product.objects.count() == 0

    def test_repeated_attribute_across_groups(self, api_client, store_url, tamanho, cor):
        response = api_client.post(store_url('products/'), {
            'codigo': 'P1',
            'name': 'Camisa',
            'variationGroups': [
                {'attributeId': str(cor.id), 'values': [{'value': 'Azul'}, {'value': 'Preto'}]},
                {'attributeId': str(tamanho.id), 'values': [{'value': 'M'}]},
                {'attributeId': str(tamanho.id), 'values': [{'value': 'M'}, {'value': 'G'}]},
            ],
        }, format='json')

        assert response.status_code == 400
        assert str(tamanho.id) in response.json()['error']
        assert Product.objects.count() == 0

    def test_update_with_array_body(self, api_client, store_url, product):
        response = api_client.patch(
            store_url(f'products/{product.id}/'), [{'name': 'x'}], format='json'
        )

        assert response.status_code == 400
        product.refresh_from_db()
        assert product.name == 'Camiseta Básica'

    def test_duplicate_codigo_rejected(self, api_client, store_url, product):
        response = api_client.post(store_url('products/'), {
            'codigo': product.codigo, 'name': 'Outro',
        }, format='json')

        assert response.status_code == 400

    def test_list_products(self, api_client, store_url, product, other_store):
        Product.objects.create(store=other_store, codigo='Z1', name='Outra loja')

        items = api_client.get(store_url('products/')).json()['items']

        assert [p['codigo'] for p in items] == [product.codigo]

    def test_filter_products(self, api_client, store_url, store, product):
        Product.objects.create(store=store, codigo='P200', name='Calça Jeans', marca='Marca Y')

        items = api_client.get(store_url('products/'), {'marca': 'marca y'}).json()['items']

        assert [p['codigo'] for p in items] == ['P200']

    def test_update_drops_relationship_fields(self, api_client, store_url, product, tamanho):
        ProductVariation.objects.create(product=product, attribute_option=tamanho.options.first())

        response = api_client.patch(store_url(f'products/{product.id}/'), {
            'name': 'Camiseta Premium',
            'preco1': '79.90',
            'product_variations': [{'id': str(uuid.uuid4())}],
            'store_id': str(uuid.uuid4()),
        }, format='json')

        assert response.status_code == 200
        assert response.json()['product_variations'] == []
        product.refresh_from_db()
        assert product.name == 'Camiseta Premium'
        assert str(product.preco1) == '79.90'
        assert ProductVariation.objects.filter(product=product).count() == 1

    def test_update_product_of_other_store(self, api_client, other_store, product):
        response = api_client.patch(
            f'/api/stores/{other_store.id}/products/{product.id}/', {'name': 'x'}, format='json'
        )

        assert response.status_code == 404
        assert response.json() == {'error': 'Product not found'}

    def test_delete_product(self, api_client, store_url, product):
        response = api_client.delete(store_url(f'products/{product.id}/'))

        assert response.status_code == 200
        assert not Product.objects.filter(pk=product.pk).exists()


@pytest.mark.django_db
class TestProductVariationEndpoints:

    def test_create_and_list(self, api_client, store_url, product, tamanho):
        option = tamanho.options.get(value='M')

        response = api_client.post(store_url('product-variations/'), {
            'productId': str(product.id), 'attributeOptionId': str(option.id),
        }, format='json')

        assert response.status_code == 201
        assert response.json()['kind'] == 'option'
        assert response.json()['product_attributes']['name'] == 'tamanho'

        listed = api_client.get(store_url(f'product-variations/?productId={product.id}')).json()
        assert [v['value'] for v in listed['variations']] == ['M']

    def test_create_duplicate_link(self, api_client, store_url, product, tamanho):
        option = tamanho.options.get(value='M')
        ProductVariation.objects.create(product=product, attribute_option=option)

        response = api_client.post(store_url('product-variations/'), {
            'productId': str(product.id), 'attributeOptionId': str(option.id),
        }, format='json')

        assert response.status_code == 400

    def test_create_missing_fields(self, api_client, store_url):
        response = api_client.post(store_url('product-variations/'), {}, format='json')

        assert response.status_code == 400
        assert response.json()['error'] == 'Missing required fields: productId, attributeOptionId'

    def test_legacy_payload_without_option(self, api_client, store_url, product, tamanho):
        response = api_client.post(store_url('product-variations/'), {
            'productId': str(product.id), 'attributeId': str(tamanho.id), 'value': 'XG',
        }, format='json')

        assert response.status_code == 201
        data = response.json()
        assert data['kind'] == 'legacy'
        assert data['value'] == 'XG'
        assert data['attribute_option_id'] is None
        assert len(data['warnings']) == 1

    def test_delete_variation(self, api_client, store_url, product, tamanho):
        variation = ProductVariation.objects.create(
            product=product, attribute_option=tamanho.options.first()
        )

        response = api_client.delete(store_url(f'product-variations/{variation.id}/'))

        assert response.status_code == 200
        assert response.json() == {'success': True}

    def test_delete_variation_from_other_store(self, api_client, other_store, product, tamanho):
        variation = ProductVariation.objects.create(
            product=product, attribute_option=tamanho.options.first()
        )

        response = api_client.delete(
            f'/api/stores/{other_store.id}/product-variations/{variation.id}/'
        )

        assert response.status_code == 404
        assert response.json() == {'error': 'Variation not found or unauthorized'}
        assert ProductVariation.objects.filter(pk=variation.pk).exists()

    def test_delete_unknown_variation(self, api_client, store_url):
        response = api_client.delete(store_url(f'product-variations/{uuid.uuid4()}/'))

        assert response.status_code == 404
        assert response.json() == {'error': 'Variation not found'}
