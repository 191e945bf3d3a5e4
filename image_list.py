#!/usr/bin/env python3
import argparse
import os
import sys
from bootstrap_images.services.image_list_service import ImageListService
from bootstrap_images.utils.logging import setup_logger


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List the images needed to bootstrap a Kubernetes version")
    parser.add_argument('--kubernetes-version', required=True, help='Kubernetes version, e.g. v1.22.0')
    parser.add_argument('--mirror', default=os.environ.get("REGISTRY_MIRROR", ""), help='Registry mirror replacing the default registries')
    parser.add_argument('--cni', choices=["kindnet", "calico"], help='Also list the images of this CNI plugin')
    parser.add_argument('--discover-dns', action='store_true', help='Look up the latest CoreDNS tag in the registry')
    args = parser.parse_args(argv)

    logger = setup_logger("ImageList")

    try:
        table_file = os.environ.get("VERSION_TABLE_FILE")
        logger.info(f"Listing images for Kubernetes {args.kubernetes_version} with table file: {table_file or 'built-in'}")
        service = ImageListService(
            args.kubernetes_version,
            mirror=args.mirror,
            table_file=table_file,
            cni=args.cni,
            discover_dns=args.discover_dns,
        )
        service.run()
        return 0
    except Exception as e:
        logger.error(f"Image listing failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
