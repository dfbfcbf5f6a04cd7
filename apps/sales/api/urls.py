from django.urls import path, include
from rest_framework.routers import SimpleRouter

from .views import (
    CustomerViewSet,
    PaymentMethodViewSet,
    SaleViewSet,
    SalesStatsView,
    TeamMemberViewSet,
)

router = SimpleRouter()
router.register(r'customers', CustomerViewSet, basename='customer')
router.register(r'team', TeamMemberViewSet, basename='team-member')
router.register(r'payment-methods', PaymentMethodViewSet, basename='payment-method')
router.register(r'sales', SaleViewSet, basename='sale')

urlpatterns = [
    path('sales-stats/', SalesStatsView.as_view(), name='sales-stats'),
    path('', include(router.urls)),
]
