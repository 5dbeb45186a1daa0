from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from Accounts.permissions import IsTurfAdmin
from Turf.selectors import get_owned_turf, get_turf
from .serializers import PricingUpdateSerializer
from .services import pricing_resolver


class TurfPricingView(APIView):
    """
    GET (public)  full price grid for a turf
    PUT (owner)   upsert any subset of cells
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsTurfAdmin()]

    def get(self, request, turf_id):
        turf = get_turf(turf_id)
        return Response({
            "status": "success",
            "data": pricing_resolver.get_all_pricing(turf.id),
        })

    def put(self, request, turf_id):
        serializer = PricingUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        grid = pricing_resolver.update_pricing(
            turf_id, request.user.id, serializer.validated_data["pricing"]
        )
        return Response({
            "status": "success",
            "message": "Pricing updated successfully",
            "data": grid,
        })


class DefaultPricingView(APIView):
    permission_classes = [IsTurfAdmin]

    def post(self, request, turf_id):
        turf = get_owned_turf(turf_id, request.user.id)
        grid = pricing_resolver.create_default_pricing(turf)

        return Response(
            {"status": "success", "data": grid},
            status=status.HTTP_201_CREATED,
        )
