from django.urls import path

from users.views import ProfileView
from vehicles.views import (VehicleListCreateAPIView, VehicleDetailAPIView,
                            OwnerVehicleListAPIView)
from bookings.views import (BookingListCreateAPIView, BookingDetailAPIView,
                            BookingStatusAPIView)
from payments.views import PaymentCreateAPIView, PaymentProcessAPIView

urlpatterns = [
    path('profile', ProfileView.as_view(), name='profile'),

    path('vehicles', VehicleListCreateAPIView.as_view(), name='vehicle-list'),
    path('vehicles/mine', OwnerVehicleListAPIView.as_view(), name='owner-vehicles'),
    path('vehicles/<int:vehicle_id>', VehicleDetailAPIView.as_view(), name='vehicle-detail'),

    path('bookings', BookingListCreateAPIView.as_view(), name='booking-list'),
    path('bookings/<int:booking_id>', BookingDetailAPIView.as_view(), name='booking-detail'),
    path('bookings/<int:booking_id>/status', BookingStatusAPIView.as_view(), name='booking-status'),

    path('payments', PaymentCreateAPIView.as_view(), name='payment-create'),
    path('payments/process', PaymentProcessAPIView.as_view(), name='payment-process'),
]
