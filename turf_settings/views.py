from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from Accounts.permissions import IsTurfAdmin
from Turf.selectors import get_turf
from .serializers import BulkSettingsSerializer, DisableBookingsSerializer, SettingSerializer
from .services import SettingService


class TurfSettingsView(APIView):
    """
    GET (authenticated)  all settings of a turf as {key: value}
    PUT (owner)          bulk upsert
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [IsAuthenticated()]
        return [IsTurfAdmin()]

    def get(self, request, turf_id):
        turf = get_turf(turf_id)
        return Response({"status": "success", "data": SettingService.get_all(turf.id)})

    def put(self, request, turf_id):
        serializer = BulkSettingsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = SettingService.bulk_update(
            turf_id, request.user.id, serializer.validated_data["settings"]
        )
        return Response({
            "status": "success",
            "message": "Settings updated successfully",
            "data": data,
        })


class TurfSettingDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, turf_id, key):
        setting = SettingService.get_one(turf_id, key)
        return Response({"status": "success", "data": SettingSerializer(setting).data})


class DisableBookingsView(APIView):
    permission_classes = [IsTurfAdmin]

    def put(self, request, turf_id):
        serializer = DisableBookingsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = SettingService.update_booking_status(
            turf_id,
            request.user.id,
            serializer.validated_data["disabled"],
            serializer.validated_data.get("reason"),
        )
        return Response({"status": "success", "data": data})
