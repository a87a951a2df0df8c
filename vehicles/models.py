from django.conf import settings
from django.db import models


class Vehicle(models.Model):
    owner = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='vehicles')
    make = models.CharField(max_length=100)
    model = models.CharField(max_length=100)
    year = models.PositiveIntegerField()
    license_plate = models.CharField(max_length=20)
    # minor units (cents)
    price_per_day = models.PositiveBigIntegerField()
    location = models.CharField(max_length=255)
    image_url = models.URLField(max_length=500)
    available = models.BooleanField(default=True)
    features = models.JSONField(default=list, blank=True)
    gps_enabled = models.BooleanField(default=False)
    lat = models.FloatField(blank=True, null=True)
    lng = models.FloatField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.year} {self.make} {self.model}"

    @property
    def owner_name(self):
        return self.owner.get_full_name() or self.owner.username
