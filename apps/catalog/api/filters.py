from django_filters import rest_framework as filters

from apps.catalog.models import Product


class ProductFilter(filters.FilterSet):
    """Filter for the product table."""

    codigo = filters.CharFilter(lookup_expr='icontains')
    name = filters.CharFilter(lookup_expr='icontains')
    marca = filters.CharFilter(lookup_expr='iexact')
    categoria = filters.CharFilter(lookup_expr='iexact')

    # Price filters
    min_price = filters.NumberFilter(field_name='preco1', lookup_expr='gte')
    max_price = filters.NumberFilter(field_name='preco1', lookup_expr='lte')

    # Stock filters
    in_stock = filters.BooleanFilter(method='filter_in_stock')

    # Variation filters
    attribute = filters.CharFilter(method='filter_by_attribute')

    class Meta:
        model = Product
        fields = ['codigo', 'name', 'marca', 'categoria']

    def filter_in_stock(self, queryset, name, value):
        if value is True:
            return queryset.filter(stock__gt=0)
        elif value is False:
            return queryset.filter(stock__lte=0)
        return queryset

    def filter_by_attribute(self, queryset, name, value):
        """
        Filter by attribute in format: attribute_name:option_value
        Example: ?attribute=tamanho:M
        """
        if ':' not in value:
            return queryset

        attr_name, option_value = value.split(':', 1)
        return queryset.filter(
            product_variations__attribute_option__attribute__name__iexact=attr_name,
            product_variations__attribute_option__value=option_value
        ).distinct()
