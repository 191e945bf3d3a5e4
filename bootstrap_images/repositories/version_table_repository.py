import os
from functools import lru_cache

from ruamel.yaml import YAML
from bootstrap_images.errors import UnsupportedVersionError
from bootstrap_images.models import SemanticVersion, VersionTable, VersionTableRow
from bootstrap_images.utils.yaml_loader import get_yaml_instance

DEFAULT_TABLE_FILE = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data", "kubernetes_versions.yaml")


class VersionTableRepository:
    def __init__(self, file_path: str | None = None):
        self.file_path: str = file_path or DEFAULT_TABLE_FILE
        self.yaml: YAML = get_yaml_instance()

    def load(self) -> VersionTable:
        if not os.path.isfile(self.file_path):
            raise FileNotFoundError(f"Version table not found: {self.file_path}")
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            try:
                return VersionTable(**data)
            except Exception as e:
                raise ValueError(f"Invalid version table: {e}") from e

    def find_all(self) -> list[VersionTableRow]:
        return list(self.load().versions)

    def find_by_version(self, version: SemanticVersion) -> VersionTableRow:
        row = self.load().find(version)
        if row is None:
            raise UnsupportedVersionError(f"Kubernetes version {version} is not supported by {self.file_path}")
        return row


@lru_cache(maxsize=None)
def load_version_table(file_path: str | None = None) -> VersionTable:
    """Version table shared by the resolvers, read once per file."""
    return VersionTableRepository(file_path).load()
