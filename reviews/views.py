from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .serializers import ReviewCreateSerializer, ReviewQuerySerializer, ReviewSerializer
from .services import ReviewService


class ReviewListCreateView(APIView):
    """
    GET  (public)         reviews, optionally for one turf (?turf_id=)
    POST (authenticated)  review one of your finished bookings
    """

    def get_permissions(self):
        if self.request.method == "GET":
            return [AllowAny()]
        return [IsAuthenticated()]

    def get(self, request):
        query = ReviewQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        reviews = ReviewService.list_reviews(query.validated_data.get("turf_id"))
        return Response({
            "status": "success",
            "count": len(reviews),
            "data": ReviewSerializer(reviews, many=True).data,
        })

    def post(self, request):
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        review = ReviewService.create_review(
            request.user.id,
            data["booking_id"],
            data["rating"],
            data.get("comment"),
        )
        return Response(
            {
                "status": "success",
                "message": "Review added successfully",
                "data": ReviewSerializer(review).data,
            },
            status=status.HTTP_201_CREATED,
        )


class MyReviewsView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        reviews = ReviewService.user_reviews(request.user.id)
        return Response({
            "status": "success",
            "count": len(reviews),
            "data": ReviewSerializer(reviews, many=True).data,
        })


class BookingReviewView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, booking_id):
        review = ReviewService.booking_review(booking_id)
        return Response({"status": "success", "data": ReviewSerializer(review).data})


class ReviewSummaryView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        query = ReviewQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        turf_id = query.validated_data.get("turf_id")

        return Response({
            "status": "success",
            "data": {
                "average_rating": ReviewService.average_rating(turf_id),
                "rating_distribution": ReviewService.rating_distribution(turf_id),
            },
        })
