import re

from rest_framework import serializers

from apps.sales.models import Customer, PaymentMethod, Sale, SaleItem, TeamMember

PAYMENT_CODIGO_RE = re.compile(r'^\d{1,3}$')
VALID_PARCELAS = [choice for choice, _ in PaymentMethod.PARCELAS_CHOICES]


# =============================================================================
# Customer / Team Serializers
# =============================================================================

class CustomerSerializer(serializers.ModelSerializer):
    store_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Customer
        fields = ['id', 'store_id', 'name', 'email', 'phone', 'document', 'created_at']
        read_only_fields = ['id', 'store_id', 'created_at']


class TeamMemberSerializer(serializers.ModelSerializer):
    store_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = TeamMember
        fields = ['id', 'store_id', 'full_name', 'email', 'role', 'created_at']
        read_only_fields = ['id', 'store_id', 'created_at']


class TeamMemberSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = TeamMember
        fields = ['id', 'full_name', 'role']


# =============================================================================
# Payment Method Serializers
# =============================================================================

class PaymentMethodSerializer(serializers.ModelSerializer):
    """
    Messages are raised from validate() so the client receives them as-is.
    """
    store_id = serializers.UUIDField(read_only=True)
    name = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=True)
    codigo = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    parcelas = serializers.CharField(required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = PaymentMethod
        fields = ['id', 'store_id', 'name', 'codigo', 'parcelas', 'created_at']
        read_only_fields = ['id', 'store_id', 'created_at']

    def validate(self, attrs):
        if not attrs.get('name'):
            raise serializers.ValidationError('Insira o nome do Método de Pagamento')

        codigo = attrs.get('codigo')
        if codigo is not None and not PAYMENT_CODIGO_RE.match(codigo):
            raise serializers.ValidationError('Código deve ter no máximo 3 números')

        parcelas = attrs.get('parcelas')
        if parcelas and parcelas not in VALID_PARCELAS:
            raise serializers.ValidationError('Parcela inválida')

        attrs['codigo'] = codigo or None
        attrs['parcelas'] = parcelas or 'À Vista'
        return attrs


# =============================================================================
# Sale Serializers
# =============================================================================

class SaleItemSerializer(serializers.ModelSerializer):
    product_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = SaleItem
        fields = ['id', 'product_id', 'quantity', 'unit_price', 'subtotal']


class SaleItemInputSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)


class SaleSerializer(serializers.ModelSerializer):
    store_id = serializers.UUIDField(read_only=True)
    customer_id = serializers.UUIDField(read_only=True)
    team_member_id = serializers.UUIDField(read_only=True)
    team_members = TeamMemberSummarySerializer(source='team_member', read_only=True)
    items = SaleItemSerializer(many=True, read_only=True)

    class Meta:
        model = Sale
        fields = [
            'id', 'store_id', 'customer_id', 'team_member_id', 'team_members',
            'payment_method', 'status', 'total', 'items', 'created_at'
        ]


class SaleCreateSerializer(serializers.Serializer):
    team_member_id = serializers.UUIDField(required=False, allow_null=True)
    customer_id = serializers.UUIDField(required=False, allow_null=True)
    payment_method = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    status = serializers.ChoiceField(choices=Sale.STATUS_CHOICES, default=Sale.STATUS_COMPLETED)
    total = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False, allow_null=True
    )
    items = SaleItemInputSerializer(many=True, required=False)
