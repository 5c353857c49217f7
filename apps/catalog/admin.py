"""
Django Admin configuration for Catalog app.
Products are created through the API so the converted price always comes
from the rate pipeline; the admin can browse and toggle availability.
"""

from django.contrib import admin

from apps.catalog.infrastructure.persistence.models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Product model."""

    list_display = ('code', 'name', 'price_source', 'price_target', 'is_available', 'created_at')
    list_filter = ('is_available', 'created_at')
    search_fields = ('code', 'name')
    readonly_fields = ('id', 'code', 'price_source', 'price_target', 'created_at', 'updated_at')
    ordering = ('created_at',)
    actions = ['mark_available', 'mark_unavailable']

    fieldsets = (
        ('Product Information', {
            'fields': ('code', 'name', 'price_source', 'price_target', 'is_available')
        }),
        ('Metadata', {
            'fields': ('id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        return False

    @admin.action(description='Mark selected products as available')
    def mark_available(self, request, queryset):
        """Bulk action to make products available."""
        updated = queryset.update(is_available=True)
        self.message_user(request, f'{updated} product(s) marked as available.')

    @admin.action(description='Mark selected products as unavailable')
    def mark_unavailable(self, request, queryset):
        """Bulk action to make products unavailable."""
        updated = queryset.update(is_available=False)
        self.message_user(request, f'{updated} product(s) marked as unavailable.')
