import logging

from rest_framework import mixins, status, viewsets
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.mixins import EnvelopedListMixin
from apps.sales.models import Customer, PaymentMethod, Sale, TeamMember
from apps.sales.services import PaymentMethodService, SaleService
from apps.stores.api.mixins import StoreScopedMixin
from .filters import SaleFilter
from .serializers import (
    CustomerSerializer,
    PaymentMethodSerializer,
    SaleCreateSerializer,
    SaleSerializer,
    TeamMemberSerializer,
)

logger = logging.getLogger(__name__)

UUID_LOOKUP_REGEX = r'[0-9a-fA-F-]{36}'


class StoreOwnedViewSet(StoreScopedMixin,
                        EnvelopedListMixin,
                        mixins.CreateModelMixin,
                        viewsets.GenericViewSet):
    """List + create for rows that hang directly off a store."""
    model = None
    lookup_value_regex = UUID_LOOKUP_REGEX

    def get_queryset(self):
        return self.model.objects.filter(store=self.get_store())

    def perform_create(self, serializer):
        instance = serializer.save(store=self.get_store())
        logger.info(f"{self.model.__name__} created: {instance.pk} store={instance.store_id}")


class CustomerViewSet(StoreOwnedViewSet):
    """
    API endpoint for customers.

    list: Newest first
    create: Register a customer
    """
    model = Customer
    serializer_class = CustomerSerializer


class TeamMemberViewSet(StoreOwnedViewSet):
    """
    API endpoint for the store team (Vendedor, Gerente, Administrador).
    """
    model = TeamMember
    serializer_class = TeamMemberSerializer


class PaymentMethodViewSet(StoreOwnedViewSet):
    """
    API endpoint for payment methods.

    list: By name
    create: name, optional 3-digit codigo, parcelas (default À Vista)
    destroy: 404 when unknown, 403 when owned by another store
    """
    model = PaymentMethod
    serializer_class = PaymentMethodSerializer

    def get_queryset(self):
        return super().get_queryset().order_by('name')

    def destroy(self, request, *args, **kwargs):
        PaymentMethodService.delete_payment_method(self.get_store(), kwargs['pk'])
        return Response({'success': True})


class SaleViewSet(StoreOwnedViewSet):
    """
    API endpoint for sales.

    list: Newest first; ?from=&to= bound created_at; each sale embeds team_members
    create: Manual total, or items priced from the products' preco1
    """
    model = Sale
    serializer_class = SaleSerializer
    filterset_class = SaleFilter

    def get_queryset(self):
        return super().get_queryset().select_related(
            'team_member'
        ).prefetch_related('items').order_by('-created_at')

    def create(self, request, *args, **kwargs):
        payload = SaleCreateSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        sale = SaleService.create_sale(self.get_store(), **payload.validated_data)
        sale = self.get_queryset().get(pk=sale.pk)
        return Response(self.get_serializer(sale).data, status=status.HTTP_201_CREATED)


class SalesStatsView(StoreScopedMixin, APIView):
    """Completed sales per team member, best seller first."""

    def get(self, request, *args, **kwargs):
        return Response({'items': SaleService.seller_stats(self.get_store())})
