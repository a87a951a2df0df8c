from datetime import date

from rest_framework import serializers

from api.fields import MoneyField
from .models import Vehicle


class OwnerSerializer(serializers.Serializer):
    first_name = serializers.CharField(allow_blank=True)
    last_name = serializers.CharField(allow_blank=True)


class VehicleSerializer(serializers.ModelSerializer):
    price_per_day = MoneyField()
    features = serializers.ListField(child=serializers.CharField(max_length=100), required=False)
    owner = OwnerSerializer(read_only=True)
    owner_id = serializers.IntegerField(read_only=True)
    owner_name = serializers.SerializerMethodField()

    class Meta:
        model = Vehicle
        fields = [
            'id', 'owner_id', 'owner', 'owner_name', 'make', 'model', 'year',
            'license_plate', 'price_per_day', 'location', 'image_url', 'available',
            'features', 'gps_enabled', 'lat', 'lng', 'created_at', 'updated_at',
        ]
        read_only_fields = ['created_at', 'updated_at']

    def get_owner_name(self, obj):
        return obj.owner_name

    def validate_year(self, value):
        if value < 1900 or value > date.today().year + 1:
            raise serializers.ValidationError("Enter a valid model year.")
        return value

    def validate(self, data):
        lat = data.get('lat', getattr(self.instance, 'lat', None))
        lng = data.get('lng', getattr(self.instance, 'lng', None))
        if lat is not None and not -90 <= lat <= 90:
            raise serializers.ValidationError({"lat": "Latitude must be between -90 and 90."})
        if lng is not None and not -180 <= lng <= 180:
            raise serializers.ValidationError({"lng": "Longitude must be between -180 and 180."})
        return data

    def create(self, validated_data):
        owner = self.context['request'].user
        return Vehicle.objects.create(owner=owner, **validated_data)


class VehicleSummarySerializer(serializers.ModelSerializer):
    """Vehicle as embedded in booking payloads."""
    price_per_day = MoneyField(read_only=True)

    class Meta:
        model = Vehicle
        fields = ['id', 'owner_id', 'make', 'model', 'year', 'license_plate',
                  'price_per_day', 'location', 'image_url']
