from django.contrib import admin, messages

from .models import Booking, BookingStatusChange
from .state import APPROVED, CANCELLED, COMPLETED, InvalidTransition, transition


class BookingStatusChangeInline(admin.TabularInline):
    model = BookingStatusChange
    extra = 0
    readonly_fields = ('from_status', 'to_status', 'changed_by', 'note', 'created_at')
    can_delete = False


def _move(modeladmin, request, queryset, to_status):
    moved = 0
    for booking in queryset:
        try:
            transition(booking, to_status, actor=request.user, note='admin action')
        except InvalidTransition as exc:
            modeladmin.message_user(request, f"Booking {booking.pk}: {exc.message}", messages.WARNING)
        else:
            moved += 1
    modeladmin.message_user(request, f"{moved} booking(s) marked as {to_status}.")
    return moved


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ('customer', 'vehicle', 'start_date', 'end_date', 'total_price', 'status', 'payment_status')
    list_filter = ('status', 'payment_status', 'start_date')
    search_fields = ('customer__username', 'vehicle__make', 'vehicle__model')
    readonly_fields = ('total_price', 'status')
    inlines = [BookingStatusChangeInline]
    actions = ['approve_bookings', 'mark_as_completed', 'cancel_bookings']

    def approve_bookings(self, request, queryset):
        _move(self, request, queryset, APPROVED)
    approve_bookings.short_description = "Approve selected bookings"

    def mark_as_completed(self, request, queryset):
        _move(self, request, queryset, COMPLETED)
    mark_as_completed.short_description = "Mark selected bookings as completed"

    def cancel_bookings(self, request, queryset):
        _move(self, request, queryset, CANCELLED)
    cancel_bookings.short_description = "Cancel selected bookings"
