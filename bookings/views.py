from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import (BookingSerializer, BookingDetailSerializer,
                          BookingCreateSerializer, BookingStatusSerializer)


class BookingListCreateAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        bookings = services.bookings_for(request.user)
        return Response(BookingSerializer(bookings, many=True).data)

    def post(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = services.create_booking(request.user, **serializer.validated_data)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingDetailAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, booking_id):
        booking = services.get_visible_booking(request.user, booking_id)
        return Response(BookingDetailSerializer(booking).data)


class BookingStatusAPIView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, booking_id):
        serializer = BookingStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = services.change_status(
            request.user,
            booking_id,
            serializer.validated_data['status'],
            note=serializer.validated_data['note'],
        )
        return Response(BookingSerializer(booking).data)
