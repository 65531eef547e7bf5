"""
Shared fixtures for the archive test suite.
"""
import pytest
from django.conf import settings

from archive.context import ArchiveContext
from archive.controllers.dicom import DicomDecoder, FrameExtractor
from archive.controllers.ingest import IngestPipeline
from archive.controllers.storage import FileManager, IndexStore
from tests.factories import DicomFactory


@pytest.fixture
def storage_root(tmp_path):
    return tmp_path / 'objects'


@pytest.fixture
def import_dir(tmp_path):
    path = tmp_path / 'import'
    path.mkdir()
    return path


@pytest.fixture
def index_store():
    return IndexStore()


@pytest.fixture
def context(index_store, storage_root):
    return ArchiveContext(store=index_store, storage_root=storage_root)


@pytest.fixture
def decoder():
    return DicomDecoder()


@pytest.fixture
def file_manager(storage_root):
    return FileManager(storage_root)


@pytest.fixture
def pipeline(context, decoder, file_manager):
    return IngestPipeline(context, decoder, file_manager)


@pytest.fixture
def frame_extractor(context, decoder, file_manager):
    return FrameExtractor(context, decoder, file_manager)


@pytest.fixture
def dicom_factory():
    return DicomFactory


@pytest.fixture
def archive_container(storage_root):
    """The application container, pointed at a temporary storage root."""
    from archive.containers import container

    container.config.storage_dir.from_value(str(storage_root))
    container.reset_singletons()
    yield container
    container.config.storage_dir.from_value(str(settings.ARCHIVE_STORAGE_DIR))
    container.reset_singletons()
