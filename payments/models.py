from django.db import models

from bookings.models import Booking


class Payment(models.Model):
    METHOD_CHOICES = (
        ('mpesa', 'M-Pesa'),
    )
    STATUS_CHOICES = (
        ('pending', 'Pending'),
        ('completed', 'Completed'),
        ('failed', 'Failed'),
    )

    # payment records outlive listing clean-up
    booking = models.ForeignKey(Booking, on_delete=models.PROTECT, related_name='payments')
    # minor units
    amount = models.PositiveBigIntegerField()
    method = models.CharField(max_length=20, choices=METHOD_CHOICES, default='mpesa')
    transaction_id = models.CharField(max_length=64, blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending')
    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-timestamp', '-id']

    def __str__(self):
        return f"{self.method} {self.transaction_id} for booking {self.booking_id}"
