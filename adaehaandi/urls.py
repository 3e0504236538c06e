from django.urls import include, path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    # Staff token pair for the inquiry management endpoints
    path("api/auth/token", TokenObtainPairView.as_view(), name="token-obtain-pair"),
    path("api/auth/token/refresh", TokenRefreshView.as_view(), name="token-refresh"),
    path("api/", include("apps.inquiries.urls")),
]
