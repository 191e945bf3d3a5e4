from dataclasses import replace

from pydantic import field_validator
from pydantic.dataclasses import dataclass


@dataclass(frozen=True)
class ImageReference:
    registry: str
    name: str
    tag: str

    @field_validator("registry")
    @classmethod
    def strip_registry(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @field_validator("name", "tag")
    @classmethod
    def not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()

    @property
    def repository(self) -> str:
        return f"{self.registry}/{self.name}" if self.registry else self.name

    def with_tag(self, tag: str) -> "ImageReference":
        return replace(self, tag=tag)

    def __str__(self) -> str:
        return f"{self.repository}:{self.tag}"
