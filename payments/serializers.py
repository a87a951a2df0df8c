from rest_framework import serializers

from api.fields import MoneyField
from .models import Payment


class PaymentSerializer(serializers.ModelSerializer):
    amount = MoneyField(read_only=True)
    booking_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Payment
        fields = ['id', 'booking_id', 'amount', 'method', 'transaction_id', 'status', 'timestamp']


class PaymentCreateSerializer(serializers.Serializer):
    booking_id = serializers.IntegerField()
    phone_number = serializers.CharField(max_length=20)


class PaymentProcessSerializer(serializers.Serializer):
    payment_id = serializers.IntegerField()
    status = serializers.ChoiceField(choices=['completed', 'failed'])
