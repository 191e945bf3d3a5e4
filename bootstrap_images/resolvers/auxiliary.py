from bootstrap_images.models import ImageReference
from bootstrap_images.version import get_storage_provisioner_version

DEFAULT_MINIKUBE_REPO = "gcr.io/k8s-minikube"


def storage_provisioner(mirror: str, version: str | None = None) -> ImageReference:
    repo = f"{mirror.rstrip('/')}/k8s-minikube" if mirror else DEFAULT_MINIKUBE_REPO
    return ImageReference(registry=repo, name="storage-provisioner", tag=version or get_storage_provisioner_version())


def auxiliary(mirror: str, storage_provisioner_version: str | None = None) -> list[ImageReference]:
    """Helper images whose versions do not follow Kubernetes."""
    return [storage_provisioner(mirror, storage_provisioner_version)]
