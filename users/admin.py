from django.contrib import admin
from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'role', 'phone_number', 'license_number')
    list_filter = ('role',)
    search_fields = ('user__username', 'user__email', 'phone_number')
    actions = ['make_owner', 'make_admin']

    def make_owner(self, request, queryset):
        queryset.update(role='owner')
    make_owner.short_description = "Mark selected profiles as owners"

    def make_admin(self, request, queryset):
        queryset.update(role='admin')
    make_admin.short_description = "Grant admin role to selected profiles"
