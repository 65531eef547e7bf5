"""
Django management command to import DICOM files into the archive.
Usage: python manage.py importdicom [--source DIR] [--target DIR] [--workers N]
"""
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from archive.commands import ImportDirectoryCommand


class Command(BaseCommand):
    help = 'Import DICOM files from a directory into storage and the index'

    def add_arguments(self, parser):
        parser.add_argument(
            '--source',
            type=str,
            default=None,
            help='Directory to import from (defaults to ARCHIVE_IMPORT_DIR)',
        )
        parser.add_argument(
            '--target',
            type=str,
            default=None,
            help='Storage root (defaults to ARCHIVE_STORAGE_DIR)',
        )
        parser.add_argument(
            '--workers',
            type=int,
            default=None,
            help='Number of files imported concurrently (overrides settings)',
        )

    def handle(self, *args, **options):
        """Run the import."""
        source = options['source'] or getattr(settings, 'ARCHIVE_IMPORT_DIR', 'import')

        self.stdout.write(self.style.SUCCESS(f'Importing DICOM files from {source}...'))

        result = ImportDirectoryCommand(
            source=source,
            target=options['target'],
            workers=options['workers'],
        ).execute()

        if not result:
            raise CommandError(f'Import failed: {result.error}')

        report = result.data
        self.stdout.write(
            f"Scanned {report['scanned']} files: {report['imported']} imported, "
            f"{report['duplicates']} already present, {len(report['failed'])} failed"
        )
        for failure in report['failed']:
            self.stdout.write(self.style.WARNING(f"  {failure['path']}: {failure['reason']}"))

        self.stdout.write(self.style.SUCCESS(f"Import done: {report['imported']} objects imported"))
