from .auxiliary import auxiliary
from .cni import calico_bin, calico_daemonset, calico_deployment, calico_flexvol_driver, cni_images, kindnet
from .essentials import essentials
from .kubeadm import kubeadm_images
from .tag_discovery import find_latest_tag_from_repository

__all__ = [
    "auxiliary",
    "calico_bin",
    "calico_daemonset",
    "calico_deployment",
    "calico_flexvol_driver",
    "cni_images",
    "essentials",
    "find_latest_tag_from_repository",
    "kindnet",
    "kubeadm_images",
]
