from django.contrib import admin
from import_export import resources
from import_export.admin import ImportExportModelAdmin

from .models import Customer, PaymentMethod, Sale, SaleItem, TeamMember


# =============================================================================
# Import/Export Resources
# =============================================================================

class CustomerResource(resources.ModelResource):
    """Resource for importing/exporting customers."""

    class Meta:
        model = Customer
        fields = ('id', 'store', 'name', 'email', 'phone', 'document', 'created_at')
        export_order = fields


class SaleResource(resources.ModelResource):
    """Resource for exporting sales."""

    class Meta:
        model = Sale
        fields = (
            'id', 'store__name', 'team_member__full_name', 'customer__name',
            'payment_method', 'status', 'total', 'created_at'
        )
        export_order = fields


# =============================================================================
# Inlines
# =============================================================================

class SaleItemInline(admin.TabularInline):
    model = SaleItem
    extra = 0
    fields = ['product', 'quantity', 'unit_price', 'subtotal']
    readonly_fields = ['unit_price', 'subtotal']
    raw_id_fields = ['product']

    def has_add_permission(self, request, obj=None):
        return False


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Customer)
class CustomerAdmin(ImportExportModelAdmin):
    resource_class = CustomerResource
    list_display = ['name', 'email', 'phone', 'document', 'store', 'created_at']
    list_filter = ['store']
    search_fields = ['name', 'email', 'document']


@admin.register(TeamMember)
class TeamMemberAdmin(admin.ModelAdmin):
    list_display = ['full_name', 'role', 'email', 'store', 'created_at']
    list_filter = ['store', 'role']
    search_fields = ['full_name', 'email']


@admin.register(PaymentMethod)
class PaymentMethodAdmin(admin.ModelAdmin):
    list_display = ['name', 'codigo', 'parcelas', 'store']
    list_filter = ['store', 'parcelas']
    search_fields = ['name', 'codigo']


@admin.register(Sale)
class SaleAdmin(ImportExportModelAdmin):
    resource_class = SaleResource
    list_display = ['id', 'store', 'team_member', 'customer', 'payment_method', 'status', 'total', 'created_at']
    list_filter = ['store', 'status', 'created_at']
    search_fields = ['team_member__full_name', 'customer__name', 'payment_method']
    readonly_fields = ['created_at']
    date_hierarchy = 'created_at'
    inlines = [SaleItemInline]

    actions = ['mark_cancelled']

    @admin.action(description='Cancelar vendas selecionadas')
    def mark_cancelled(self, request, queryset):
        count = queryset.update(status=Sale.STATUS_CANCELLED)
        self.message_user(request, f'{count} vendas canceladas.')
