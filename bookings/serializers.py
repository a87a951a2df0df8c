from rest_framework import serializers

from api.fields import CalendarDateField, MoneyField
from vehicles.serializers import VehicleSummarySerializer
from .models import Booking, BookingStatusChange
from .state import STATUSES


class BookingStatusChangeSerializer(serializers.ModelSerializer):
    changed_by = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = BookingStatusChange
        fields = ['from_status', 'to_status', 'changed_by', 'note', 'created_at']


class BookingSerializer(serializers.ModelSerializer):
    total_price = MoneyField(read_only=True)
    customer_id = serializers.IntegerField(read_only=True)
    vehicle_id = serializers.IntegerField(read_only=True)
    vehicle = VehicleSummarySerializer(read_only=True)

    class Meta:
        model = Booking
        fields = ['id', 'customer_id', 'vehicle_id', 'vehicle', 'start_date', 'end_date',
                  'total_price', 'status', 'payment_status', 'created_at', 'updated_at']
        read_only_fields = fields


class BookingDetailSerializer(BookingSerializer):
    status_history = BookingStatusChangeSerializer(many=True, read_only=True)

    class Meta(BookingSerializer.Meta):
        fields = BookingSerializer.Meta.fields + ['status_history']
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    vehicle_id = serializers.IntegerField()
    start_date = CalendarDateField()
    end_date = CalendarDateField()

    def validate(self, data):
        if data['end_date'] < data['start_date']:
            raise serializers.ValidationError({"end_date": "End date cannot be before start date."})
        return data


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=STATUSES)
    note = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
