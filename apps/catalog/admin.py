from django.contrib import admin
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminBase, SortableAdminMixin, SortableInlineAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from apps.stores.models import Store
from .models import (
    Product,
    ProductAttribute,
    ProductAttributeOption,
    ProductColumn,
    ProductColumnOption,
    ProductVariation,
)


# =============================================================================
# Import/Export Resources
# =============================================================================

class ProductResource(resources.ModelResource):
    """Resource for importing/exporting products of a store."""

    store_name = fields.Field(
        column_name='store',
        attribute='store',
        widget=ForeignKeyWidget(Store, 'name')
    )

    class Meta:
        model = Product
        import_id_fields = ['store_name', 'codigo']
        fields = (
            'store_name', 'codigo', 'name', 'marca', 'categoria', 'subcategoria',
            'grupo', 'subgrupo', 'departamento', 'secao', 'estacao', 'colecao',
            'descricao', 'observacao', 'fabricante', 'fornecedor', 'ncm', 'cest',
            'custo', 'preco1', 'preco2', 'preco3', 'stock'
        )
        export_order = fields


class ProductAttributeOptionResource(resources.ModelResource):
    """Resource for importing/exporting attribute options."""

    attribute_id = fields.Field(
        column_name='attribute_id',
        attribute='attribute',
        widget=ForeignKeyWidget(ProductAttribute, 'id')
    )
    attribute_name = fields.Field(
        column_name='attribute',
        attribute='attribute__name',
        readonly=True
    )

    class Meta:
        model = ProductAttributeOption
        import_id_fields = ['attribute_id', 'value']
        fields = ('attribute_id', 'attribute_name', 'value', 'position')


# =============================================================================
# Inlines
# =============================================================================

class ProductAttributeOptionInline(SortableInlineAdminMixin, admin.TabularInline):
    model = ProductAttributeOption
    extra = 1
    fields = ['value', 'position']


class ProductColumnOptionInline(SortableInlineAdminMixin, admin.TabularInline):
    model = ProductColumnOption
    extra = 1
    fields = ['value', 'position']


class ProductVariationInline(admin.TabularInline):
    model = ProductVariation
    fk_name = 'product'
    extra = 0
    fields = ['attribute_option', 'attribute', 'value', 'created_at']
    readonly_fields = ['created_at']
    raw_id_fields = ['attribute_option', 'attribute']


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Product)
class ProductAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = ProductResource
    list_display = [
        'codigo', 'name', 'store', 'marca', 'categoria',
        'preco1', 'stock', 'variation_count', 'created_at'
    ]
    list_filter = ['store', 'marca', 'categoria']
    list_editable = ['preco1', 'stock']
    search_fields = ['codigo', 'name', 'marca', 'fornecedor']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ProductVariationInline]
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('store', 'codigo', 'name')
        }),
        ('Classificação', {
            'fields': (
                'marca', 'categoria', 'subcategoria', 'grupo', 'subgrupo',
                'departamento', 'secao', 'estacao', 'colecao'
            )
        }),
        ('Fornecimento', {
            'fields': ('fabricante', 'fornecedor', 'ncm', 'cest'),
            'classes': ('collapse',)
        }),
        ('Preços', {
            'fields': ('custo', 'preco1', 'preco2', 'preco3')
        }),
        ('Estoque', {
            'fields': ('stock',)
        }),
        ('Informações', {
            'fields': ('descricao', 'observacao', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['mark_out_of_stock']

    def variation_count(self, obj):
        return obj.product_variations.count()
    variation_count.short_description = 'Variações'

    @admin.action(description='Marcar como sem estoque')
    def mark_out_of_stock(self, request, queryset):
        count = queryset.update(stock=0)
        self.message_user(request, f'{count} produtos atualizados.')


@admin.register(ProductAttribute)
class ProductAttributeAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['label', 'name', 'store', 'is_variation', 'is_required', 'option_count', 'position']
    list_filter = ['store', 'is_variation', 'is_required']
    search_fields = ['name', 'label']
    inlines = [ProductAttributeOptionInline]

    def option_count(self, obj):
        return obj.options.count()
    option_count.short_description = 'Opções'


@admin.register(ProductAttributeOption)
class ProductAttributeOptionAdmin(ImportExportModelAdmin):
    resource_class = ProductAttributeOptionResource
    list_display = ['value', 'attribute', 'position']
    list_filter = ['attribute__store', 'attribute']
    list_editable = ['position']
    search_fields = ['value', 'attribute__name', 'attribute__label']


@admin.register(ProductColumn)
class ProductColumnAdmin(SortableAdminBase, admin.ModelAdmin):
    list_display = ['label', 'field_name', 'store', 'column_type', 'is_visible', 'is_editable', 'position']
    list_filter = ['store', 'column_type', 'is_visible']
    list_editable = ['is_visible', 'is_editable', 'position']
    search_fields = ['label', 'field_name']
    inlines = [ProductColumnOptionInline]

    def get_readonly_fields(self, request, obj=None):
        # field_name is fixed once the column exists
        if obj is not None:
            return ['field_name']
        return []


@admin.register(ProductVariation)
class ProductVariationAdmin(admin.ModelAdmin):
    list_display = ['product', 'kind', 'attribute_option', 'attribute', 'value', 'created_at']
    list_filter = ['product__store']
    search_fields = ['product__codigo', 'value', 'attribute_option__value']
    raw_id_fields = ['product', 'attribute_option', 'attribute']


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = 'Retaguarda Admin'
admin.site.site_title = 'Retaguarda'
admin.site.index_title = 'Painel de Administração'
