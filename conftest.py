"""
Shared pytest fixtures: stores, a DRF client and a small attribute setup
(Tamanho M/G, Cor Azul/Preto) used across the app test suites.
"""
import uuid
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.catalog.models import Product, ProductAttribute, ProductAttributeOption
from apps.stores.models import Store


@pytest.fixture
def api_client():
    """DRF test client."""
    return APIClient()


@pytest.fixture
def store(db):
    """Create the store under test."""
    return Store.objects.create(name='Loja Centro', owner_user_id=uuid.uuid4())


@pytest.fixture
def other_store(db):
    """Create a second tenant to check isolation."""
    return Store.objects.create(name='Loja Norte', owner_user_id=uuid.uuid4())


@pytest.fixture
def store_url(store):
    """Build /api/stores/<id>/<path> for the store under test."""
    def build(path):
        return f'/api/stores/{store.id}/{path}'
    return build


def _attribute(store, name, label, values, position=0):
    attribute = ProductAttribute.objects.create(
        store=store, name=name, label=label, is_variation=True, position=position
    )
    for index, value in enumerate(values):
        ProductAttributeOption.objects.create(attribute=attribute, value=value, position=index)
    return attribute


@pytest.fixture
def tamanho(store):
    """Tamanho with options M and G."""
    return _attribute(store, 'tamanho', 'Tamanho', ['M', 'G'])


@pytest.fixture
def cor(store):
    """Cor with options Azul and Preto."""
    return _attribute(store, 'cor', 'Cor', ['Azul', 'Preto'], position=1)


@pytest.fixture
def product(store):
    """Create a plain product."""
    return Product.objects.create(
        store=store,
        codigo='P100',
        name='Camiseta Básica',
        marca='Marca X',
        preco1=Decimal('49.90'),
        stock=10,
    )
