from pydantic import ConfigDict
from pydantic.dataclasses import dataclass


# registries add fields such as "manifest" or "child" next to the tags
@dataclass(frozen=True, config=ConfigDict(extra="ignore"))
class TagListResponse:
    tags: list[str | None]
    name: str | None = None
