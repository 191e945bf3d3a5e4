from pydantic import field_validator, model_validator
from pydantic.dataclasses import dataclass

from bootstrap_images.models.semantic_version import SemanticVersion

# order in which kubeadm lists the essential images
COMPONENT_ORDER = (
    "kube-apiserver",
    "kube-controller-manager",
    "kube-scheduler",
    "kube-proxy",
    "pause",
    "etcd",
    "coredns",
)


@dataclass(frozen=True)
class ComponentImage:
    component: str
    name: str
    tag: str


@dataclass(frozen=True)
class CoreDNSImage:
    name: str
    tag: str


@dataclass(frozen=True)
class VersionTableRow:
    kubernetes_version: str
    pause: str
    etcd: str
    coredns: CoreDNSImage

    @field_validator("kubernetes_version")
    @classmethod
    def valid_version(cls, value: str) -> str:
        SemanticVersion.parse(value)
        return value

    @property
    def version(self) -> SemanticVersion:
        return SemanticVersion.parse(self.kubernetes_version)

    def images(self, version: SemanticVersion) -> tuple[ComponentImage, ...]:
        """Essential images of this release, tagging control-plane components with ``version``."""
        # "+" is not allowed in image tags
        control_plane_tag = "v" + str(version).replace("+", "_")
        names = {"coredns": self.coredns.name}
        tags = {"pause": self.pause, "etcd": self.etcd, "coredns": self.coredns.tag}
        return tuple(
            ComponentImage(c, names.get(c, c), tags.get(c, control_plane_tag)) for c in COMPONENT_ORDER
        )


@dataclass(frozen=True)
class VersionTable:
    versions: tuple[VersionTableRow, ...]

    @model_validator(mode="after")
    def ascending(self) -> "VersionTable":
        for previous, current in zip(self.versions, self.versions[1:]):
            if not previous.version.core() < current.version.core():
                raise ValueError(
                    f"versions must be unique and ascending: "
                    f"{current.kubernetes_version} listed after {previous.kubernetes_version}"
                )
        return self

    def find(self, version: SemanticVersion) -> VersionTableRow | None:
        return next((row for row in self.versions if row.version.core() == version.core()), None)
