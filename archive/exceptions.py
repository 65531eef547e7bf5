"""
Archive exception hierarchy.

Per-item ingest failures (MissingRequiredIdentifier, DecodeFailure,
DuplicateObject, InvalidIdentifier) are contained by the ingest pipeline.
UnknownTag propagates. NotFound and DecodeFailure are mapped to HTTP
status codes by the retrieval views.
"""


class ArchiveError(Exception):
    """Base class for all archive errors."""


class UnresolvedAttribute(ArchiveError):
    """A filter key has no entry in the attribute dictionary."""

    def __init__(self, name: str):
        super().__init__(f"Unresolved attribute: {name}")
        self.name = name


class UnknownTag(ArchiveError):
    """A tag has no value representation in the attribute dictionary."""

    def __init__(self, tag: str):
        super().__init__(f"Unknown tag: {tag}")
        self.tag = tag


class MissingRequiredIdentifier(ArchiveError):
    """A dataset lacks the Study or SOP Instance identifier."""

    def __init__(self, attribute: str, source: str = ''):
        message = f"Missing required identifier {attribute}"
        if source:
            message = f"{message} in {source}"
        super().__init__(message)
        self.attribute = attribute
        self.source = source


class InvalidIdentifier(ArchiveError):
    """An identifier cannot be used as a storage path component."""

    def __init__(self, value: str):
        super().__init__(f"Invalid identifier for storage path: {value!r}")
        self.value = value


class DuplicateObject(ArchiveError):
    """The SOP Instance UID is already present in the index."""

    def __init__(self, sop_instance_uid: str):
        super().__init__(f"Object already indexed: {sop_instance_uid}")
        self.sop_instance_uid = sop_instance_uid


class NotFound(ArchiveError):
    """A stored object does not exist."""

    def __init__(self, location: str):
        super().__init__(f"Stored object not found: {location}")
        self.location = location


class DecodeFailure(ArchiveError):
    """The DICOM decoder could not decode an object."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Failed to decode {source}: {reason}")
        self.source = source
        self.reason = reason
