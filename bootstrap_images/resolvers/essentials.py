from bootstrap_images.models import ImageReference, SemanticVersion, VersionTable
from bootstrap_images.errors import UnsupportedVersionError
from bootstrap_images.repositories.version_table_repository import load_version_table

DEFAULT_KUBERNETES_REPO = "k8s.gcr.io"


def kubernetes_repo(mirror: str) -> str:
    return mirror or DEFAULT_KUBERNETES_REPO


def essentials(mirror: str, version: SemanticVersion, table: VersionTable | None = None) -> list[ImageReference]:
    """Images needed to bootstrap Kubernetes ``version``, in `kubeadm config images list` order."""
    table = table or load_version_table()
    row = table.find(version)
    if row is None:
        raise UnsupportedVersionError(f"Kubernetes version v{version} is not supported")
    repo = kubernetes_repo(mirror)
    return [ImageReference(registry=repo, name=image.name, tag=image.tag) for image in row.images(version)]
