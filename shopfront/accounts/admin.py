from django.contrib import admin

from .models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    """Read-only view of registered accounts; the storefront never edits them."""

    list_display = ('name', 'email', 'phone_number', 'terms_accepted', 'created_at')
    list_filter = ('terms_accepted', 'created_at')
    search_fields = ('name', 'email', 'phone_number')
    readonly_fields = ('name', 'email', 'password_hash', 'phone_number', 'terms_accepted', 'created_at')
    ordering = ('-created_at',)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
