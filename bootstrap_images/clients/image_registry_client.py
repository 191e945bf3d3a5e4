import requests
import logging

from bootstrap_images.models import ImageReference, TagListResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5


class ImageRegistryClient:
    def __init__(self, scheme: str = "https", timeout: float = DEFAULT_TIMEOUT):
        self.scheme: str = scheme
        self.timeout: float = timeout

    def tags_url(self, image: ImageReference) -> str:
        """Docker Registry v2 tag listing URL, e.g. https://k8s.gcr.io/v2/coredns/coredns/tags/list"""
        host, _, path = image.repository.partition("/")
        if not path:
            raise ValueError(f"Image {image} has no registry host")
        return f"{self.scheme}://{host}/v2/{path}/tags/list"

    def list_tags(self, url: str) -> TagListResponse | None:
        try:
            response = requests.get(url=url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Error listing tags from {url}: {e}")
            return None
        if not 200 <= response.status_code < 300:
            logger.warning(f"Failed to list tags from {url} (status code {response.status_code})")
            return None
        try:
            return TagListResponse(**response.json())
        except (ValueError, TypeError) as e:
            logger.warning(f"Unexpected tag list from {url}: {e}")
            return None
