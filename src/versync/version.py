import re
from typing import NamedTuple

from versync.errors import InvalidBumpError, InvalidVersionError

VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+$", re.ASCII)


class Version(NamedTuple):
    major: int
    minor: int
    patch: int

    def __str__(self):
        return f"{self.major}.{self.minor}.{self.patch}"


def is_valid(text: str) -> bool:
    return VERSION_PATTERN.fullmatch(text) is not None


def parse(text: str) -> Version:
    """Parses 'X.Y.Z' into a Version, raising InvalidVersionError otherwise."""
    if not is_valid(text):
        raise InvalidVersionError(text)
    major, minor, patch = (int(part) for part in text.split("."))
    return Version(major, minor, patch)


def format_version(version: Version) -> str:
    return str(version)


def bump(version: Version, kind: str) -> Version:
    """
    Increments one component of the version, resetting the lower-order ones:
        patch: 1.2.3 -> 1.2.4
        minor: 1.2.3 -> 1.3.0
        major: 1.2.3 -> 2.0.0
    """
    match kind:
        case "patch":
            return version._replace(patch=version.patch + 1)
        case "minor":
            return Version(version.major, version.minor + 1, 0)
        case "major":
            return Version(version.major + 1, 0, 0)
        case _:
            raise InvalidBumpError(kind)
