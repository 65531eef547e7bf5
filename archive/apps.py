from django.apps import AppConfig
import logging

logger = logging.getLogger(__name__)


class ArchiveConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'archive'
    verbose_name = 'DICOM Archive'

    def ready(self):
        """
        Called when Django starts.
        Applies the archive logging configuration unless disabled in settings.
        """
        from django.conf import settings

        if getattr(settings, 'ARCHIVE_CONFIGURE_LOGGING', True):
            from archive.utils.logging import setup_logging
            setup_logging()
