from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import (
    ProductAttributeViewSet,
    ProductColumnViewSet,
    ProductColumnOptionViewSet,
    ProductDataView,
    ProductViewSet,
    ProductVariationViewSet,
)

router = SimpleRouter()
router.register(r'product-attributes', ProductAttributeViewSet, basename='product-attribute')
router.register(r'product-columns', ProductColumnViewSet, basename='product-column')
router.register(r'product-column-options', ProductColumnOptionViewSet, basename='product-column-option')
router.register(r'products', ProductViewSet, basename='product')
router.register(r'product-variations', ProductVariationViewSet, basename='product-variation')

urlpatterns = [
    path('product-data/', ProductDataView.as_view(), name='product-data'),
    path('', include(router.urls)),
]
