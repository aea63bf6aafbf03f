# apps/reports/services.py
import logging
from django.contrib.contenttypes.models import ContentType
from .models import ActivityLog

logger = logging.getLogger(__name__)


class ActivityLogger:
    @staticmethod
    def log(user, model, object_id, action_type, description="", details=None):
        """
        Uniwersalna metoda do logowania zdarzeń.
        model może być klasą modelu albo instancją (np. po usunięciu zostaje tylko ID).
        """
        if not user or not user.is_authenticated:
            return None  # Nie logujemy działań systemu/anonimowych

        entry = ActivityLog.objects.create(
            user=user,
            content_type=ContentType.objects.get_for_model(model),
            object_id=object_id,
            action_type=action_type,
            description=description,
            details=details or {}
        )
        logger.info("%s: %s", action_type, description)
        return entry
