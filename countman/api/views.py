import logging

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from countman import count
from countman.exceptions import CONFLICT, NOT_FOUND, INVALID, CountError
from countman.api.serializers import (
    CommitSerializer,
    DraftCountSerializer,
    DraftUpdateSerializer,
    ReviewQuerySerializer,
    ScanSerializer,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    CONFLICT: status.HTTP_409_CONFLICT,
    INVALID: status.HTTP_400_BAD_REQUEST,
}


class CountAPIView(APIView):
    """Base view: authenticated callers only, CountError as one structured body."""

    permission_classes = [IsAuthenticated]

    def handle_exception(self, exc):
        if isinstance(exc, CountError):
            code = ERROR_STATUS.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
            if code >= 500:
                logger.error("count api error: %s", exc.code, exc_info=exc)
            return Response({'success': False, 'error': exc.as_dict()}, status=code)
        return super().handle_exception(exc)


class LocationListView(CountAPIView):
    def get(self, request):
        return Response(count.locations())


class ScanView(CountAPIView):
    def post(self, request):
        serializer = ScanSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = count.scan(
            serializer.validated_data['barcode'],
            serializer.validated_data['location'],
            user=request.user,
        )
        return Response({
            'success': True,
            'product': result.product.as_dict(),
            'draft': DraftCountSerializer(result.draft).data,
        })


class ReviewView(CountAPIView):
    def get(self, request):
        query = ReviewQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        drafts = count.review(query.validated_data['location'])
        return Response(DraftCountSerializer(drafts, many=True).data)


class DraftUpdateView(CountAPIView):
    def post(self, request):
        serializer = DraftUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        draft = count.set_quantity(
            serializer.validated_data['id'],
            serializer.validated_data['quantity'],
        )
        return Response({'success': True, 'deleted': draft is None})


class CommitView(CountAPIView):
    def post(self, request):
        serializer = CommitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        promoted = count.commit(serializer.validated_data['location'], user=request.user)
        return Response({'success': True, 'count': promoted})
