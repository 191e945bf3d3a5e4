from bootstrap_images.models import SemanticVersion, VersionTable
from bootstrap_images.resolvers.auxiliary import auxiliary
from bootstrap_images.resolvers.essentials import essentials


def kubeadm_images(
    mirror: str, version: str, storage_provisioner_version: str | None = None, table: VersionTable | None = None
) -> list[str]:
    """Every image kubeadm needs for ``version``, followed by the auxiliary images."""
    v = SemanticVersion.parse(version)
    images = essentials(mirror, v, table) + auxiliary(mirror, storage_provisioner_version)
    return [str(image) for image in images]
