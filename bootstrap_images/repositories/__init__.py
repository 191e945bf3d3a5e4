from .version_table_repository import VersionTableRepository, load_version_table

__all__ = [
    'VersionTableRepository',
    'load_version_table',
]
