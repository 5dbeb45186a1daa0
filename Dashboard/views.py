from rest_framework.response import Response
from rest_framework.views import APIView

from Accounts.permissions import IsTurfAdmin
from .serializers import AdminStatsSerializer, StatsQuerySerializer
from .services import stats_service


class AdminStatsView(APIView):
    """Dashboard numbers for the calling owner's turfs. ?fresh=true skips the memo."""
    permission_classes = [IsTurfAdmin]

    def get(self, request):
        query = StatsQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        stats = stats_service.get_admin_stats(
            request.user.id,
            use_cache=not query.validated_data["fresh"],
        )

        return Response(
            {"status": "success", "data": AdminStatsSerializer(stats).data},
            status=200
        )
