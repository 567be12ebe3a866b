from django.contrib import admin
from django.db.models import F
from django.utils.html import format_html
from .models import Category, Order, OrderDetail, Product, Supplier


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """
    Admin interface for Category model.
    """
    list_display = ['id', 'category_name', 'product_count', 'placeholder']
    search_fields = ['category_name', 'description']
    ordering = ['id']

    def product_count(self, obj):
        """Display count of products in category"""
        count = obj.products.count()
        return format_html('<strong>{}</strong>', count)
    product_count.short_description = 'Products'

    @admin.display(boolean=True, description='Placeholder')
    def placeholder(self, obj):
        return obj.is_placeholder


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    """
    Admin interface for Supplier model.
    """
    list_display = ['id', 'company_name', 'contact_name', 'city', 'country']
    list_filter = ['country']
    search_fields = ['company_name', 'contact_name', 'city']
    ordering = ['id']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """
    Admin interface for Product model.
    """
    list_display = [
        'id', 'product_name', 'category', 'supplier', 'unit_price',
        'units_in_stock', 'discontinued', 'stock_status'
    ]
    list_filter = ['discontinued', 'category', 'supplier']
    search_fields = ['product_name', 'quantity_per_unit']
    readonly_fields = ['row_version']
    autocomplete_fields = ['category', 'supplier']
    ordering = ['id']

    fieldsets = (
        ('Basic Information', {
            'fields': ('product_name', 'quantity_per_unit', 'category', 'supplier')
        }),
        ('Pricing & Inventory', {
            'fields': (
                'unit_price', 'units_in_stock', 'units_on_order',
                'reorder_level', 'discontinued'
            )
        }),
        ('Metadata', {
            'fields': ('row_version',),
            'classes': ('collapse',)
        }),
    )

    actions = ['mark_as_discontinued', 'mark_as_available']

    def stock_status(self, obj):
        """Display stock status with color coding"""
        stock = obj.units_in_stock or 0
        if stock == 0:
            color = 'red'
            text = 'Out of Stock'
        elif stock <= (obj.reorder_level or 0):
            color = 'orange'
            text = 'Reorder'
        else:
            color = 'green'
            text = 'In Stock'

        return format_html(
            '<span style="color: {}; font-weight: bold;">{}</span>',
            color, text
        )
    stock_status.short_description = 'Stock Status'

    def save_model(self, request, obj, form, change):
        """Admin edits count as writes for concurrency detection"""
        if change:
            obj.row_version += 1
        super().save_model(request, obj, form, change)

    # Admin actions
    @admin.action(description='Mark selected products as discontinued')
    def mark_as_discontinued(self, request, queryset):
        updated = queryset.update(discontinued=True, row_version=F('row_version') + 1)
        self.message_user(request, f'{updated} products marked as discontinued.')

    @admin.action(description='Mark selected products as available')
    def mark_as_available(self, request, queryset):
        updated = queryset.update(discontinued=False, row_version=F('row_version') + 1)
        self.message_user(request, f'{updated} products marked as available.')


class OrderDetailInline(admin.TabularInline):
    model = OrderDetail
    extra = 0
    autocomplete_fields = ['product']


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin interface for Order model with its order lines inline.
    """
    list_display = ['id', 'customer_id', 'order_date', 'ship_name', 'freight']
    search_fields = ['customer_id', 'ship_name']
    date_hierarchy = 'order_date'
    ordering = ['-order_date']
    inlines = [OrderDetailInline]
