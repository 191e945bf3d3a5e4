import json
import logging
from typing_extensions import override

from bootstrap_images.clients.image_registry_client import ImageRegistryClient
from bootstrap_images.models import ImageReference, SemanticVersion
from bootstrap_images.repositories import VersionTableRepository
from bootstrap_images.resolvers import auxiliary, cni_images, essentials, find_latest_tag_from_repository
from bootstrap_images.services.service import Service
from bootstrap_images.utils.logging import setup_logger


class ImageListService(Service):
    def __init__(
        self,
        kubernetes_version: str,
        mirror: str = "",
        table_file: str | None = None,
        cni: str | None = None,
        discover_dns: bool = False,
        storage_provisioner_version: str | None = None,
    ):
        self.kubernetes_version: SemanticVersion = SemanticVersion.parse(kubernetes_version)
        self.mirror: str = mirror
        self.table_repository: VersionTableRepository = VersionTableRepository(table_file)
        self.registry: ImageRegistryClient = ImageRegistryClient()
        self.cni: str | None = cni
        self.discover_dns: bool = discover_dns
        self.storage_provisioner_version: str | None = storage_provisioner_version
        self.logger: logging.Logger = setup_logger("ImageListService")

    @override
    def run(self) -> None:
        print(json.dumps(self.resolve(), indent=2))

    def resolve(self) -> list[str]:
        table = self.table_repository.load()
        images = essentials(self.mirror, self.kubernetes_version, table)
        self.logger.info(f"Resolved {len(images)} essential images for Kubernetes v{self.kubernetes_version}")
        if self.discover_dns:
            images[-1] = self.refresh_tag(images[-1])

        resolved = [str(image) for image in images]
        resolved += [str(image) for image in auxiliary(self.mirror, self.storage_provisioner_version)]
        if self.cni:
            resolved += cni_images(self.cni, self.mirror)
        return resolved

    def refresh_tag(self, image: ImageReference) -> ImageReference:
        url = self.registry.tags_url(image)
        tag = find_latest_tag_from_repository(url, image.tag, self.registry)
        if tag != image.tag:
            self.logger.info(f"Using {image.name}:{tag} instead of last known good {image.tag}")
        return image.with_tag(tag)
