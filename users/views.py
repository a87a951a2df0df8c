import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from .serializers import ProfileSerializer
from .services import ensure_profile

logger = logging.getLogger(__name__)


class ProfileView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        profile = ensure_profile(request.user)
        return Response(ProfileSerializer(profile).data)

    def put(self, request):
        profile = ensure_profile(request.user)
        serializer = ProfileSerializer(profile, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Updated profile for user %s", request.user.pk)
        return Response(serializer.data)
