from rest_framework import serializers

from apps.stores.models import Store


class StoreSerializer(serializers.ModelSerializer):
    name = serializers.CharField(min_length=2, max_length=255)
    metadata = serializers.DictField(required=False)

    class Meta:
        model = Store
        fields = ['id', 'name', 'owner_user_id', 'metadata', 'created_at']
        read_only_fields = ['id', 'created_at']
