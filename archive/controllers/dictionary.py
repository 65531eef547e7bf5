"""
Attribute dictionary backed by the pydicom standard data dictionary.
"""
import re
from typing import Optional

from pydicom.datadict import dictionary_VR, tag_for_keyword

from archive.exceptions import UnknownTag, UnresolvedAttribute

TAG_PATTERN = re.compile(r'[0-9A-F]{8}')


def is_tag(name: str) -> bool:
    """Check whether a name is already a canonical tag (8 uppercase hex digits)."""
    return isinstance(name, str) and TAG_PATTERN.fullmatch(name) is not None


class AttributeDictionary:
    """
    Resolves attribute keywords to tags and tags to value representations.

    Read-only; safe to share between threads.
    """

    def resolve(self, name: str) -> Optional[str]:
        """
        Resolve an attribute name to its tag.

        Args:
            name: Keyword (e.g. 'PatientName') or tag ('00100010')

        Returns:
            8-hex-digit tag, or None if the name is not in the dictionary
        """
        if is_tag(name):
            return name

        tag = tag_for_keyword(name)
        if tag is None:
            return None
        return f"{tag:08X}"

    def value_representation(self, tag: str) -> str:
        """
        Look up the VR of a tag.

        Raises:
            UnknownTag: If the tag is not in the dictionary
        """
        try:
            vr = dictionary_VR(int(tag, 16))
        except (KeyError, ValueError):
            raise UnknownTag(tag)

        # Ambiguous entries such as 'US or SS' resolve to the first VR
        return str(vr).split(' or ')[0]

    def require(self, name: str) -> str:
        """
        Resolve an attribute name, failing if it is unknown.

        Raises:
            UnresolvedAttribute: If the name is not in the dictionary
        """
        tag = self.resolve(name)
        if tag is None:
            raise UnresolvedAttribute(name)
        return tag
