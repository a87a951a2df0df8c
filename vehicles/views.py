import logging
from decimal import InvalidOperation

from django.db.models import ProtectedError, Q
from django.shortcuts import get_object_or_404
from rest_framework import permissions, status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from api.fields import MAX_MINOR_UNITS, to_minor_units
from api.permissions import IsVehicleOwner
from users.services import ensure_owner_profile
from .models import Vehicle
from .serializers import VehicleSerializer

logger = logging.getLogger(__name__)


def _price_param(request, name):
    raw = request.query_params.get(name)
    if not raw:
        return None
    try:
        value = to_minor_units(raw)
    except (InvalidOperation, ValueError):
        raise ValidationError({name: "Must be a number."})
    if abs(value) > MAX_MINOR_UNITS:
        raise ValidationError({name: "Amount is too large."})
    return value


class VehicleListCreateAPIView(APIView):
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]

    def get_queryset(self):
        queryset = Vehicle.objects.select_related('owner')

        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(Q(make__icontains=search) | Q(model__icontains=search))

        location = self.request.query_params.get('location')
        if location:
            queryset = queryset.filter(location__icontains=location)

        min_price = _price_param(self.request, 'min_price')
        if min_price is not None:
            queryset = queryset.filter(price_per_day__gte=min_price)

        max_price = _price_param(self.request, 'max_price')
        if max_price is not None:
            queryset = queryset.filter(price_per_day__lte=max_price)

        return queryset

    def get(self, request):
        serializer = VehicleSerializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    def post(self, request):
        serializer = VehicleSerializer(data=request.data, context={'request': request})
        serializer.is_valid(raise_exception=True)
        ensure_owner_profile(request.user)
        vehicle = serializer.save()
        logger.info("User %s listed vehicle %s", request.user.pk, vehicle.pk)
        return Response(VehicleSerializer(vehicle).data, status=status.HTTP_201_CREATED)


class VehicleDetailAPIView(APIView):
    permission_classes = [permissions.IsAuthenticatedOrReadOnly, IsVehicleOwner]

    def get_object(self, vehicle_id):
        vehicle = get_object_or_404(Vehicle.objects.select_related('owner'), id=vehicle_id)
        # Owner check applies to unsafe methods only.
        if self.request.method not in permissions.SAFE_METHODS:
            self.check_object_permissions(self.request, vehicle)
        return vehicle

    def get(self, request, vehicle_id):
        return Response(VehicleSerializer(self.get_object(vehicle_id)).data)

    def put(self, request, vehicle_id):
        vehicle = self.get_object(vehicle_id)
        serializer = VehicleSerializer(vehicle, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("User %s updated vehicle %s", request.user.pk, vehicle.pk)
        return Response(serializer.data)

    def delete(self, request, vehicle_id):
        vehicle = self.get_object(vehicle_id)
        try:
            vehicle.delete()
        except ProtectedError:
            logger.warning("Vehicle %s has paid bookings; delete refused", vehicle_id)
            raise ValidationError({"vehicle_id": "Vehicle has bookings with payments and cannot be deleted."})
        logger.info("User %s deleted vehicle %s", request.user.pk, vehicle_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class OwnerVehicleListAPIView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        vehicles = Vehicle.objects.filter(owner=request.user).select_related('owner')
        return Response(VehicleSerializer(vehicles, many=True).data)
