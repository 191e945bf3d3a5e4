from .image_reference import ImageReference
from .semantic_version import SemanticVersion
from .tag_list import TagListResponse
from .version_table import ComponentImage, CoreDNSImage, VersionTable, VersionTableRow

__all__ = [
    "ComponentImage",
    "CoreDNSImage",
    "ImageReference",
    "SemanticVersion",
    "TagListResponse",
    "VersionTable",
    "VersionTableRow",
]
