import structlog
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from rest_framework.viewsets import ModelViewSet

from apps.common.responses import error_response, success_response
from .models import Inquiry
from .serializers import InquirySerializer, InquiryStatusSerializer, InquiryUpdateSerializer
from .services import InquiryService, client_identifier

logger = structlog.get_logger(__name__)

SUBMISSION_SUCCESS_MESSAGE = 'Your inquiry has been submitted successfully. We will contact you soon!'


class InquiryViewSet(ModelViewSet):
    """
    Public intake for the contact and quote forms, plus staff management of
    the resulting inquiries.
    """
    queryset = Inquiry.objects.select_related('assigned_to')
    serializer_class = InquirySerializer
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']
    lookup_value_regex = '[0-9a-f-]{32,36}'
    search_fields = ['name', 'email', 'phone']
    ordering_fields = ['created_at', 'event_date', 'guest_count', 'status']
    ordering = ['-created_at']
    inquiry_service = InquiryService()

    def get_permissions(self):
        """
        Allow public access for submitting inquiries and the health check,
        require authentication for staff operations, and admin for deletion.
        """
        if self.action in ('create', 'health'):
            permission_classes = [AllowAny]
        elif self.action == 'destroy':
            permission_classes = [IsAdminUser]
        else:
            permission_classes = [IsAuthenticated]
        return [permission() for permission in permission_classes]

    def get_serializer_class(self):
        if self.action == 'partial_update':
            return InquiryUpdateSerializer
        return InquirySerializer

    def get_queryset(self):
        queryset = super().get_queryset()
        status_filter = self.request.query_params.get('status')
        if status_filter:
            queryset = queryset.filter(status=status_filter)
        return queryset

    def create(self, request, *args, **kwargs):
        """
        Submit a contact form or quote request.
        View only handles HTTP request/response, delegates to service.
        """
        client_key = client_identifier(request)
        # Rate limit before touching the body so rejected clients cost no parsing
        self.inquiry_service.check_rate_limit(client_key)
        inquiry = self.inquiry_service.submit(request.data)
        return success_response(
            SUBMISSION_SUCCESS_MESSAGE,
            status_code=status.HTTP_201_CREATED,
            id=str(inquiry.id),
        )

    def partial_update(self, request, *args, **kwargs):
        inquiry = self.get_object()
        serializer = self.get_serializer(inquiry, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Inquiry updated", inquiry_id=str(inquiry.id), fields=sorted(request.data.keys()))
        return Response(InquirySerializer(inquiry).data)

    @action(detail=True, methods=['patch'], url_path='status')
    def update_status(self, request, pk=None):
        """Move an inquiry through its follow-up workflow"""
        inquiry = self.get_object()
        serializer = InquiryStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid status', details=serializer.errors)

        previous_status = inquiry.status
        inquiry.status = serializer.validated_data['status']
        if 'notes' in serializer.validated_data:
            inquiry.notes = serializer.validated_data['notes']
        inquiry.save(update_fields=['status', 'notes', 'updated_at'])

        logger.info(
            "Inquiry status changed",
            inquiry_id=str(inquiry.id),
            from_status=previous_status,
            to_status=inquiry.status,
        )
        return Response(InquirySerializer(inquiry).data)

    @action(detail=False, methods=['get'])
    def health(self, request):
        return Response({'status': 'ok', 'message': 'Inquiry service is running'})
