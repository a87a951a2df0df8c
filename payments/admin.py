from django.contrib import admin
from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ('transaction_id', 'booking', 'amount', 'method', 'status', 'timestamp')
    list_filter = ('status', 'method')
    search_fields = ('transaction_id', 'booking__customer__username')
    readonly_fields = ('booking', 'amount', 'method', 'transaction_id', 'timestamp')
