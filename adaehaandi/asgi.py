import os

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "adaehaandi.settings")

from django.core.asgi import get_asgi_application

# Initialize Django first
import django
django.setup()

from django.conf import settings
from app_logging.config import setup_logging
setup_logging(settings.BASE_DIR)

application = get_asgi_application()
