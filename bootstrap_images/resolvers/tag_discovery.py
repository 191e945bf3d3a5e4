import logging

from bootstrap_images.clients.image_registry_client import ImageRegistryClient
from bootstrap_images.errors import InvalidVersionError
from bootstrap_images.models import SemanticVersion

logger = logging.getLogger(__name__)


def find_latest_tag_from_repository(
    url: str, last_known_good: str, client: ImageRegistryClient | None = None
) -> str:
    """Return the highest semantic version tag listed at ``url``.

    Any failure (unreachable registry, bad status, unexpected body, no tag
    that parses as a version) yields ``last_known_good``. The winning tag is
    returned exactly as listed, with or without its ``v`` prefix.
    """
    client = client or ImageRegistryClient()
    fallback_msg = f"Failed to get latest image version for {url}, reverting to version {last_known_good}"

    listing = client.list_tags(url)
    tags = [tag for tag in listing.tags if tag] if listing is not None else []
    if not tags:
        logger.warning(fallback_msg)
        return last_known_good

    latest_tag: str | None = None
    latest_version: SemanticVersion | None = None
    for tag in tags:
        try:
            version = SemanticVersion.parse_tolerant(tag)
        except InvalidVersionError:
            logger.debug(f"Ignoring tag {tag} from {url}")
            continue
        if latest_version is None or version > latest_version:
            latest_tag, latest_version = tag, version

    if latest_tag is None:
        logger.warning(f"{fallback_msg}: no semantic version among {len(tags)} tags")
        return last_known_good
    return latest_tag
