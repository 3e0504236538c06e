from rest_framework.routers import DefaultRouter
from .views import InquiryViewSet

router = DefaultRouter(trailing_slash=False)
router.register("inquiries", InquiryViewSet, basename="inquiries")

urlpatterns = router.urls
