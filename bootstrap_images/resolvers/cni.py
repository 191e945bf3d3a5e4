from bootstrap_images.models import ImageReference

# ref: https://hub.docker.com/r/kindest/kindnetd/tags
KINDNET_REPO = "kindest"
KINDNET_TAG = "v20210326-1e038dc5"

# images listed in https://docs.projectcalico.org/manifests/calico.yaml
CALICO_REPO = "docker.io/calico"
CALICO_VERSION = "v3.20.0"


def kindnet(mirror: str) -> str:
    return str(ImageReference(registry=mirror or KINDNET_REPO, name="kindnetd", tag=KINDNET_TAG))


def calico_daemonset(mirror: str) -> str:
    return _calico(mirror, "node")


def calico_deployment(mirror: str) -> str:
    return _calico(mirror, "kube-controllers")


def calico_flexvol_driver(mirror: str) -> str:
    return _calico(mirror, "pod2daemon-flexvol")


def calico_bin(mirror: str) -> str:
    return _calico(mirror, "cni")


def _calico(mirror: str, name: str) -> str:
    return str(ImageReference(registry=mirror or CALICO_REPO, name=name, tag=CALICO_VERSION))


def cni_images(plugin: str, mirror: str) -> list[str]:
    match plugin:
        case "kindnet":
            return [kindnet(mirror)]
        case "calico":
            return [
                calico_deployment(mirror),
                calico_daemonset(mirror),
                calico_flexvol_driver(mirror),
                calico_bin(mirror),
            ]
        case _:
            raise ValueError(f"Unsupported CNI plugin: {plugin}")
