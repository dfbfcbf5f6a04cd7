from rest_framework import mixins
from rest_framework.response import Response


class EnvelopedListMixin(mixins.ListModelMixin):
    """
    List action that wraps the rows in a named key, e.g. ``{"items": [...]}``.
    """
    list_key = 'items'

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        serializer = self.get_serializer(queryset, many=True)
        return Response({self.list_key: serializer.data})
