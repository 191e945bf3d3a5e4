import os
import pytest

from bootstrap_images.errors import UnsupportedVersionError
from bootstrap_images.models import SemanticVersion
from bootstrap_images.models.version_table import COMPONENT_ORDER
from bootstrap_images.repositories import VersionTableRepository, load_version_table

ASSETS_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "assets")


def test_default_table_find_all():
    rows = VersionTableRepository().find_all()

    assert [r.kubernetes_version for r in rows] == [
        "v1.16.0", "v1.17.0", "v1.18.0", "v1.19.0", "v1.20.0", "v1.21.0", "v1.22.0",
    ]
    assert rows[5].pause == "3.4.1"
    assert rows[5].coredns.name == "coredns/coredns"
    assert rows[4].coredns.name == "coredns"


def test_every_row_has_seven_components_in_order():
    for row in VersionTableRepository().find_all():
        images = row.images(row.version)
        assert tuple(i.component for i in images) == COMPONENT_ORDER
        assert all(i.tag for i in images)


def test_find_by_version_custom_file():
    repo = VersionTableRepository(os.path.join(ASSETS_DIR, "versions_minimal.yaml"))
    row = repo.find_by_version(SemanticVersion.parse("v1.30.0"))
    assert row.etcd == "3.5.12-0"


def test_find_by_version_ignores_prerelease():
    row = VersionTableRepository().find_by_version(SemanticVersion.parse("1.22.0-rc.0"))
    assert row.kubernetes_version == "v1.22.0"


def test_find_by_version_unsupported():
    with pytest.raises(UnsupportedVersionError, match="1.20.5"):
        VersionTableRepository().find_by_version(SemanticVersion.parse("1.20.5"))


def test_unordered_table_rejected():
    repo = VersionTableRepository(os.path.join(ASSETS_DIR, "versions_unordered.yaml"))
    with pytest.raises(ValueError, match="Invalid version table"):
        repo.load()


@pytest.mark.parametrize("content", [
    "versions:\n  - kubernetes_version: v1.22.0",
    "versions:\n  - kubernetes_version: not-a-version\n    pause: '3.5'\n    etcd: 3.5.0-0\n    coredns: {name: coredns, tag: v1.8.4}",
    "",
])
def test_invalid_table_schema(tmp_path, content):
    bad_file = tmp_path / "bad_versions.yaml"
    bad_file.write_text(content)

    repo = VersionTableRepository(str(bad_file))
    with pytest.raises(ValueError, match="Invalid version table"):
        repo.load()


def test_missing_table_file():
    with pytest.raises(FileNotFoundError):
        VersionTableRepository("notexistingfile").load()


def test_load_version_table_is_cached():
    assert load_version_table() is load_version_table()


def test_cached_table_is_read_only():
    table = load_version_table()
    assert isinstance(table.versions, tuple)
    with pytest.raises(AttributeError):
        table.versions.pop()
    with pytest.raises(AttributeError):
        table.versions = ()
    assert load_version_table().find(SemanticVersion.parse("1.22.0")) is not None


def test_find_all_returns_copy():
    repo = VersionTableRepository()
    repo.find_all().clear()
    assert len(repo.find_all()) == 7
