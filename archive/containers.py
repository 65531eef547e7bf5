"""
Dependency Injection Container

Centralized configuration for all archive dependencies using dependency-injector.
Manages singleton instances and dependency wiring for the entire application.

Design:
- Components are singletons (one instance per application)
- Dependencies injected via constructor
- Lazy initialization (created on first use)
- Components share one ArchiveContext (logger, index store, storage root)
"""
from dependency_injector import containers, providers
from django.conf import settings


class Container(containers.DeclarativeContainer):
    """
    Main DI Container for the archive application.

    Manages lifecycle and dependencies for:
    - Shared context and index store
    - Query translation and result finalization
    - Decoding, storage, frame extraction and ingest
    """

    # Configuration providers
    config = providers.Configuration()

    # ============================================================================
    # Index and Context
    # ============================================================================

    index_store = providers.Singleton(
        'archive.controllers.storage.IndexStore'
    )

    context = providers.Singleton(
        'archive.context.ArchiveContext',
        store=index_store,
        storage_root=config.storage_dir
    )

    # ============================================================================
    # Query (controllers/query/)
    # ============================================================================

    dictionary = providers.Singleton(
        'archive.controllers.dictionary.AttributeDictionary'
    )

    query_translator = providers.Singleton(
        'archive.controllers.query.QueryTranslator',
        dictionary=dictionary
    )

    result_finalizer = providers.Singleton(
        'archive.controllers.query.ResultFinalizer'
    )

    query_service = providers.Singleton(
        'archive.controllers.query.QueryService',
        context=context,
        translator=query_translator,
        finalizer=result_finalizer
    )

    # ============================================================================
    # Storage and DICOM (controllers/storage/, controllers/dicom/)
    # ============================================================================

    file_manager = providers.Singleton(
        'archive.controllers.storage.FileManager',
        storage_dir=config.storage_dir
    )

    decoder = providers.Singleton(
        'archive.controllers.dicom.DicomDecoder',
        force=config.decode_force,
        bulk_data_threshold=config.bulk_data_threshold
    )

    frame_extractor = providers.Singleton(
        'archive.controllers.dicom.FrameExtractor',
        context=context,
        decoder=decoder,
        file_manager=file_manager,
        content_location=config.content_location
    )

    # ============================================================================
    # Ingest (controllers/ingest/)
    # ============================================================================

    ingest_pipeline = providers.Singleton(
        'archive.controllers.ingest.IngestPipeline',
        context=context,
        decoder=decoder,
        file_manager=file_manager,
        workers=config.ingest_workers
    )


def setup_container() -> Container:
    """
    Setup and configure the DI container with Django settings.

    Loads configuration from Django settings and initializes the container.

    Returns:
        Configured Container instance with all settings loaded
    """
    container = Container()

    container.config.storage_dir.from_value(
        getattr(settings, 'ARCHIVE_STORAGE_DIR', 'storage/objects')
    )
    container.config.import_dir.from_value(
        getattr(settings, 'ARCHIVE_IMPORT_DIR', 'import')
    )
    container.config.ingest_workers.from_value(
        getattr(settings, 'ARCHIVE_INGEST_WORKERS', 1)
    )
    container.config.decode_force.from_value(
        getattr(settings, 'ARCHIVE_DECODE_FORCE', False)
    )
    container.config.bulk_data_threshold.from_value(
        getattr(settings, 'ARCHIVE_BULK_DATA_THRESHOLD', 1024)
    )
    container.config.content_location.from_value(
        getattr(settings, 'ARCHIVE_CONTENT_LOCATION', 'localhost')
    )

    return container


container = setup_container()
