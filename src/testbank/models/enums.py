"""
Enum definitions for the Test Record Service
"""

from enum import Enum

class ServiceVariant(str, Enum):
    """
    Deployable shapes of the service.

    - METADATA: categorized records plus the autocomplete metadata index
    - CATEGORIZED: records carry topic and section, no metadata index
    - BASIC: question/answer records only
    """
    METADATA = "metadata"
    CATEGORIZED = "categorized"
    BASIC = "basic"

    @property
    def is_categorized(self) -> bool:
        return self is not ServiceVariant.BASIC

    @property
    def has_metadata_index(self) -> bool:
        return self is ServiceVariant.METADATA

# Tag stored in metadata.type
class MetadataType(str, Enum):
    TOPIC = "topic"
    SECTION = "section"
