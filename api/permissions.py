from rest_framework import permissions


class IsVehicleOwner(permissions.BasePermission):
    message = 'Forbidden'

    def has_object_permission(self, request, view, obj):
        return obj.owner_id == request.user.id
