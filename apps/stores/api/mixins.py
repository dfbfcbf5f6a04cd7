from apps.core.exceptions import NotFoundOrUnauthorized
from apps.stores.models import Store


class StoreScopedMixin:
    """
    Resolves the tenant from the ``store_id`` URL kwarg.

    The id is trusted as given (session binding happens upstream); an unknown
    store id is reported as 404.
    """
    store_url_kwarg = 'store_id'

    def get_store(self):
        if not hasattr(self, '_store'):
            store_id = self.kwargs[self.store_url_kwarg]
            try:
                self._store = Store.objects.get(pk=store_id)
            except Store.DoesNotExist:
                raise NotFoundOrUnauthorized('Store not found')
        return self._store

    def get_serializer_context(self):
        context = super().get_serializer_context()
        context['store'] = self.get_store()
        return context
