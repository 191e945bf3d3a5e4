import os

# version of the storage-provisioner image shipped with this release
STORAGE_PROVISIONER_VERSION = "v5"


def get_storage_provisioner_version() -> str:
    return os.environ.get("STORAGE_PROVISIONER_VERSION") or STORAGE_PROVISIONER_VERSION
