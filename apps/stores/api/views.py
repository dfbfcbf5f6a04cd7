import logging

from rest_framework import mixins, viewsets

from apps.core.mixins import EnvelopedListMixin
from apps.stores.models import Store
from .serializers import StoreSerializer

logger = logging.getLogger(__name__)


class StoreViewSet(EnvelopedListMixin,
                   mixins.CreateModelMixin,
                   viewsets.GenericViewSet):
    """
    API endpoint for tenant provisioning.

    list: All stores, newest first
    create: Provision a new store
    """
    queryset = Store.objects.all()
    serializer_class = StoreSerializer

    def perform_create(self, serializer):
        store = serializer.save()
        logger.info(f"Store provisioned: {store.name} ({store.id})")
