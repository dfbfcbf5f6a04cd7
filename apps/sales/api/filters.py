from django_filters import rest_framework as filters

from apps.sales.models import Sale


class SaleFilter(filters.FilterSet):
    """
    Filter for sales.

    ``from`` and ``to`` bound created_at (inclusive). Both names are Python
    keywords, so they are added in get_filters().
    """

    status = filters.ChoiceFilter(choices=Sale.STATUS_CHOICES)
    team_member = filters.UUIDFilter(field_name='team_member_id')

    class Meta:
        model = Sale
        fields = ['status', 'team_member']

    @classmethod
    def get_filters(cls):
        filters_ = super().get_filters()
        filters_['from'] = filters.DateTimeFilter(field_name='created_at', lookup_expr='gte')
        filters_['to'] = filters.DateTimeFilter(field_name='created_at', lookup_expr='lte')
        return filters_
