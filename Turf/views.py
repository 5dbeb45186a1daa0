from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from Accounts.permissions import IsTurfAdmin
from .availability import build_availability
from .booking_service import booking_service
from .selectors import get_turf
from .serializers import (
    AdminBookingCreateSerializer,
    BookingCancelSerializer,
    BookingCreateSerializer,
    BookingListQuerySerializer,
    BookingSerializer,
    TurfAvailabilityQuerySerializer,
    TurfImageUploadSerializer,
    TurfSerializer,
    TurfStatusSerializer,
    TurfWriteSerializer,
)
from .service import TurfService


def _viewer_id(request):
    return request.user.id if request.user.is_authenticated else None


# -------------------------------------------------------------------
# TURF LIST / CREATE
# -------------------------------------------------------------------
class TurfListView(APIView):
    """
    GET  (public)  active turfs, optional ?status=&city=&state=
    POST (admin)   create a turf with default pricing and settings
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsTurfAdmin()]

    def get(self, request):
        turfs = TurfService.list_turfs(
            status=request.query_params.get("status"),
            city=request.query_params.get("city"),
            state=request.query_params.get("state"),
        )
        return Response({
            "status": "success",
            "count": len(turfs),
            "data": TurfSerializer(turfs, many=True).data,
        })

    def post(self, request):
        serializer = TurfWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        turf = TurfService.create_turf(request.user, **serializer.validated_data)

        return Response(
            {"status": "success", "data": TurfSerializer(turf).data},
            status=status.HTTP_201_CREATED,
        )


# -------------------------------------------------------------------
# TURF DETAIL / UPDATE / DELETE
# -------------------------------------------------------------------
class TurfDetailView(APIView):

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsTurfAdmin()]

    def get(self, request, turf_id):
        turf = TurfService.get_visible_turf(turf_id, viewer_id=_viewer_id(request))
        return Response({"status": "success", "data": TurfSerializer(turf).data})

    def patch(self, request, turf_id):
        serializer = TurfWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        turf = TurfService.update_turf(turf_id, request.user.id, **serializer.validated_data)
        return Response({"status": "success", "data": TurfSerializer(turf).data})

    def delete(self, request, turf_id):
        if request.query_params.get("hard") == "true":
            TurfService.hard_delete(turf_id, request.user.id)
            message = "Turf permanently deleted"
        else:
            TurfService.soft_delete(turf_id, request.user.id)
            message = "Turf deleted successfully"

        return Response({"status": "success", "message": message})


class TurfStatusView(APIView):
    permission_classes = [IsTurfAdmin]

    def patch(self, request, turf_id):
        serializer = TurfStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        turf = TurfService.set_status(
            turf_id, request.user.id, serializer.validated_data["status"]
        )
        return Response({"status": "success", "data": TurfSerializer(turf).data})


class MyTurfsView(APIView):
    permission_classes = [IsTurfAdmin]

    def get(self, request):
        turfs = TurfService.list_owned(request.user.id)
        return Response({
            "status": "success",
            "count": len(turfs),
            "data": TurfSerializer(turfs, many=True).data,
        })


class TurfImageUploadView(APIView):
    permission_classes = [IsTurfAdmin]

    def patch(self, request, turf_id):
        serializer = TurfImageUploadSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        turf = TurfService.set_image(
            turf_id, request.user.id, serializer.validated_data["image"]
        )
        return Response({
            "status": "success",
            "turf_id": turf.id,
            "image_url": turf.image.url,
        })


class TurfAvailabilityView(APIView):
    """Public: occupied intervals and hourly grid for ?date=YYYY-MM-DD."""
    permission_classes = [AllowAny]

    def get(self, request, turf_id):
        serializer = TurfAvailabilityQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)

        turf = get_turf(turf_id)
        data = build_availability(turf, serializer.validated_data["date"])
        return Response({"status": "success", "data": data})


# -------------------------------------------------------------------
# BOOKINGS
# -------------------------------------------------------------------
class BookingListCreateView(APIView):
    """
    GET  users see their own bookings, admins see bookings on their turfs
    POST book a slot for yourself (admins: confirmed immediately)
    """
    permission_classes = [IsAuthenticated]

    def get(self, request):
        query = BookingListQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        filters = query.validated_data
        user = request.user

        if user.is_turf_admin:
            bookings = booking_service.list_for_admin(
                user.id,
                status=filters.get("status"),
                turf_id=filters.get("turf_id"),
                booking_date=filters.get("date"),
            )
        else:
            bookings = booking_service.list_for_user(
                user.id,
                status=filters.get("status"),
                turf_id=filters.get("turf_id"),
            )

        return Response({
            "status": "success",
            "count": len(bookings),
            "data": BookingSerializer(bookings, many=True).data,
        })

    def post(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        booking = booking_service.create_booking(
            turf_id=data["turf_id"],
            user_id=request.user.id,
            booking_date=data["date"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            creator_id=request.user.id,
            creator_role=request.user.role,
        )

        return Response(
            {
                "status": "success",
                "message": "Booking created successfully",
                "data": BookingSerializer(booking).data,
            },
            status=status.HTTP_201_CREATED,
        )


class BookingDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, booking_id):
        booking = booking_service.get_booking(
            booking_id, request.user.id, request.user.role
        )
        return Response({"status": "success", "data": BookingSerializer(booking).data})

    def delete(self, request, booking_id):
        serializer = BookingCancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        booking = booking_service.cancel_booking(
            booking_id,
            request.user.id,
            request.user.role,
            reason=serializer.validated_data.get("reason"),
        )
        return Response({
            "status": "success",
            "message": "Booking cancelled successfully",
            "data": BookingSerializer(booking).data,
        })


class AdminBookingCreateView(APIView):
    """Admin books a slot on their own turf on behalf of a user."""
    permission_classes = [IsTurfAdmin]

    def post(self, request):
        serializer = AdminBookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        booking = booking_service.create_booking(
            turf_id=data["turf_id"],
            user_id=data["user_id"],
            booking_date=data["date"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            creator_id=request.user.id,
            creator_role=request.user.role,
        )

        return Response(
            {
                "status": "success",
                "message": "Booking created successfully for user",
                "data": BookingSerializer(booking).data,
            },
            status=status.HTTP_201_CREATED,
        )


class BookingConfirmView(APIView):
    permission_classes = [IsTurfAdmin]

    def patch(self, request, booking_id):
        booking = booking_service.confirm_booking(booking_id, request.user.id)
        return Response({
            "status": "success",
            "message": "Booking confirmed successfully",
            "data": BookingSerializer(booking).data,
        })


class BookingCompleteView(APIView):
    permission_classes = [IsTurfAdmin]

    def patch(self, request, booking_id):
        booking = booking_service.complete_booking(booking_id, request.user.id)
        return Response({
            "status": "success",
            "message": "Booking completed successfully",
            "data": BookingSerializer(booking).data,
        })
