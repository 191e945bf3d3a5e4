import re
from dataclasses import dataclass
from functools import total_ordering

from bootstrap_images.errors import InvalidVersionError

_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_ID = r"0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*"
_SEMVER = re.compile(
    rf"^v?(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>(?:{_PRERELEASE_ID})(?:\.(?:{_PRERELEASE_ID}))*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)


@total_ordering
@dataclass(frozen=True, eq=False)
class SemanticVersion:
    """Semantic version ordered by semver 2.0 precedence.

    Build metadata is kept for rendering only: two versions differing just in
    their build part compare (and hash) equal.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        match = _SEMVER.fullmatch(text)
        if not match:
            raise InvalidVersionError(f"Invalid semantic version: {text!r}")
        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
            build=tuple(build.split(".")) if build else (),
        )

    @classmethod
    def parse_tolerant(cls, text: str) -> "SemanticVersion":
        """Parse registry-style tags such as ``v1.8``, `` 1.08.0`` or ``1.8.7-0``."""
        candidate = text.strip().removeprefix("v")
        suffix_at = min((i for i in (candidate.find("-"), candidate.find("+")) if i >= 0), default=len(candidate))
        core, suffix = candidate[:suffix_at], candidate[suffix_at:]
        parts = core.split(".")
        if len(parts) > 3 or not all(p.isascii() and p.isdigit() for p in parts):
            raise InvalidVersionError(f"Invalid semantic version: {text!r}")
        parts += ["0"] * (3 - len(parts))
        return cls.parse(".".join(str(int(p)) for p in parts) + suffix)

    def _precedence(self) -> tuple:
        if not self.prerelease:
            return (self.major, self.minor, self.patch, 1, ())
        identifiers = tuple(
            (0, int(i), "") if i.isdigit() else (1, 0, i) for i in self.prerelease
        )
        return (self.major, self.minor, self.patch, 0, identifiers)

    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._precedence() == other._precedence()

    def __lt__(self, other: "SemanticVersion") -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._precedence() < other._precedence()

    def __hash__(self) -> int:
        return hash(self._precedence())

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text
