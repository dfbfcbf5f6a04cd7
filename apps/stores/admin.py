from django.contrib import admin

from .models import Store


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner_user_id', 'created_at']
    search_fields = ['name', 'owner_user_id']
    readonly_fields = ['id', 'created_at']
