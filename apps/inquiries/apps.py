from django.apps import AppConfig


class InquiriesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.inquiries"
    verbose_name = "Inquiries"

    def ready(self):
        from apps.common.document_store import document_store
        from .models import Inquiry

        document_store.register(Inquiry.COLLECTION, Inquiry)
