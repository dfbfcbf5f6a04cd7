from rest_framework import serializers

from apps.catalog.models import (
    Product,
    ProductAttribute,
    ProductAttributeOption,
    ProductColumn,
    ProductColumnOption,
    ProductVariation,
)


# =============================================================================
# Attribute Serializers
# =============================================================================

class ProductAttributeOptionSerializer(serializers.ModelSerializer):
    attribute_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = ProductAttributeOption
        fields = ['id', 'attribute_id', 'value', 'position']


class ProductAttributeSerializer(serializers.ModelSerializer):
    store_id = serializers.UUIDField(read_only=True)
    product_attribute_options = ProductAttributeOptionSerializer(
        source='options', many=True, read_only=True
    )

    class Meta:
        model = ProductAttribute
        fields = [
            'id', 'store_id', 'name', 'label', 'is_variation', 'is_required',
            'position', 'product_attribute_options', 'created_at', 'updated_at'
        ]


class ProductAttributeCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    label = serializers.CharField(max_length=100)
    is_variation = serializers.BooleanField(default=False)
    is_required = serializers.BooleanField(default=False)
    position = serializers.IntegerField(min_value=0, default=0)
    options = serializers.ListField(
        child=serializers.CharField(max_length=100, allow_blank=True),
        default=list
    )


class ProductAttributeUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100, required=False)
    label = serializers.CharField(max_length=100, required=False)
    is_variation = serializers.BooleanField(required=False)
    is_required = serializers.BooleanField(required=False)


# =============================================================================
# Column Serializers
# =============================================================================

class ProductColumnSerializer(serializers.ModelSerializer):
    store_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = ProductColumn
        fields = [
            'id', 'store_id', 'field_name', 'label', 'is_visible', 'is_editable',
            'column_type', 'width', 'position', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'store_id', 'created_at', 'updated_at']
        extra_kwargs = {
            'field_name': {'required': False, 'allow_blank': True},
            'label': {'required': False, 'allow_blank': True},
            'width': {'required': False},
        }
        # (store, field_name) is checked by the service with its own message
        validators = []


class ProductColumnUpdateSerializer(serializers.ModelSerializer):
    """field_name is not writable here: a column never changes its field."""

    class Meta:
        model = ProductColumn
        fields = ['label', 'is_visible', 'is_editable', 'column_type', 'width', 'position']
        extra_kwargs = {name: {'required': False} for name in fields}


class ProductColumnOptionSerializer(serializers.ModelSerializer):
    column_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = ProductColumnOption
        fields = ['id', 'column_id', 'value', 'position', 'created_at', 'updated_at']


class ProductColumnOptionCreateSerializer(serializers.Serializer):
    columnId = serializers.UUIDField(required=False, allow_null=True)
    value = serializers.CharField(max_length=255, required=False, allow_blank=True, trim_whitespace=True)


class ProductColumnOptionUpdateSerializer(serializers.Serializer):
    value = serializers.CharField(max_length=255, required=False)
    position = serializers.IntegerField(min_value=0, required=False)


# =============================================================================
# Variation Serializers
# =============================================================================

class ProductVariationSerializer(serializers.ModelSerializer):
    """
    Both link shapes render the same way: attribute_id and value are taken
    from the option for option links and from the row for legacy links.
    """
    product_id = serializers.UUIDField(read_only=True)
    attribute_option_id = serializers.UUIDField(read_only=True)
    kind = serializers.CharField(read_only=True)
    attribute_id = serializers.SerializerMethodField()
    value = serializers.SerializerMethodField()
    product_attributes = serializers.SerializerMethodField()

    class Meta:
        model = ProductVariation
        fields = [
            'id', 'product_id', 'kind', 'attribute_option_id', 'attribute_id',
            'value', 'product_attributes', 'created_at'
        ]

    def get_attribute_id(self, obj):
        attribute = obj.resolved_attribute
        return str(attribute.id) if attribute else None

    def get_value(self, obj):
        return obj.resolved_value

    def get_product_attributes(self, obj):
        attribute = obj.resolved_attribute
        if attribute is None:
            return None
        return {'id': str(attribute.id), 'name': attribute.name, 'label': attribute.label}


class ProductVariationCreateSerializer(serializers.Serializer):
    productId = serializers.UUIDField(required=False, allow_null=True)
    attributeOptionId = serializers.UUIDField(required=False, allow_null=True)
    attributeId = serializers.UUIDField(required=False, allow_null=True)
    value = serializers.CharField(max_length=100, required=False, allow_blank=True)


# =============================================================================
# Product Serializers
# =============================================================================

class VariationValueSerializer(serializers.Serializer):
    value = serializers.CharField(max_length=100)
    stock = serializers.IntegerField(min_value=0, default=0)


class VariationGroupSerializer(serializers.Serializer):
    attributeId = serializers.UUIDField()
    values = VariationValueSerializer(many=True, allow_empty=False)


class ProductSerializer(serializers.ModelSerializer):
    """
    Product row with its variation links.

    On create, ``variationGroups`` expands the payload into one product per
    combination of values (see VariationCombinationService).
    """
    store_id = serializers.UUIDField(read_only=True)
    product_variations = ProductVariationSerializer(many=True, read_only=True)
    variationGroups = VariationGroupSerializer(many=True, required=False, write_only=True)
    stock = serializers.IntegerField(min_value=0, required=False)

    class Meta:
        model = Product
        fields = [
            'id', 'store_id', 'codigo', 'name',
            'marca', 'categoria', 'subcategoria', 'grupo', 'subgrupo',
            'departamento', 'secao', 'estacao', 'colecao',
            'descricao', 'observacao', 'fabricante', 'fornecedor',
            'ncm', 'cest',
            'custo', 'preco1', 'preco2', 'preco3',
            'stock', 'product_variations', 'variationGroups',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'store_id', 'created_at', 'updated_at']
        extra_kwargs = {
            'codigo': {'required': False, 'allow_blank': True},
            'name': {'required': False, 'allow_blank': True},
        }
        validators = []

    def validate(self, attrs):
        creating = self.instance is None
        for field in ('codigo', 'name'):
            if field in attrs:
                attrs[field] = attrs[field].strip()
            if (creating and not attrs.get(field)) or (field in attrs and not attrs[field]):
                raise serializers.ValidationError('Código e Nome são obrigatórios')

        if not creating and 'codigo' in attrs and attrs['codigo'] != self.instance.codigo:
            taken = Product.objects.filter(
                store_id=self.instance.store_id,
                codigo=attrs['codigo']
            ).exclude(pk=self.instance.pk).exists()
            if taken:
                raise serializers.ValidationError(
                    f"Código já cadastrado nesta loja: {attrs['codigo']}"
                )
        return attrs
