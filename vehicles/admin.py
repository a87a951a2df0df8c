from django.contrib import admin
from .models import Vehicle


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ('make', 'model', 'year', 'owner', 'price_per_day', 'location', 'available')
    list_filter = ('available', 'make', 'year', 'gps_enabled')
    search_fields = ('make', 'model', 'license_plate', 'owner__username')
    actions = ['mark_available', 'mark_unavailable']

    def mark_available(self, request, queryset):
        queryset.update(available=True)
    mark_available.short_description = "Mark selected vehicles as available"

    def mark_unavailable(self, request, queryset):
        queryset.update(available=False)
    mark_unavailable.short_description = "Mark selected vehicles as unavailable"
