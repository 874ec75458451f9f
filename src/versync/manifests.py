from enum import Enum
from typing import Iterable, NamedTuple, Optional, Union

from versync.util import file_util, log
from versync.util.log import quote
from versync.version import Version


class SyncStatus(Enum):
    UPDATED = "updated"
    MISSING = "missing"
    FAILED = "failed"


class ManifestResult(NamedTuple):
    path: str
    status: SyncStatus
    message: Optional[str] = None

    @property
    def ok(self):
        return self.status is not SyncStatus.FAILED


def update_one(path, version: Union[Version, str]) -> ManifestResult:
    """
    Sets the top-level "version" key of a JSON manifest, keeping every other
    key and its position. Problems are logged and reported in the result,
    never raised.
    """
    path = str(path)
    try:
        data = file_util.parse_json(path)
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, found {type(data).__name__}")
        data["version"] = str(version)
        file_util.write_json(path, data)
    except FileNotFoundError:
        log.warning(f"⚠ {quote(path)} not found")
        return ManifestResult(path, SyncStatus.MISSING, "not found")
    except (OSError, ValueError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        log.error(f"Error updating {quote(path)}: {quote(e)}")
        return ManifestResult(path, SyncStatus.FAILED, str(e))

    log.success(f"Updated {quote(path)} to version {version}")
    return ManifestResult(path, SyncStatus.UPDATED)


def sync_all(paths: Iterable[str], version: Union[Version, str]) -> list[ManifestResult]:
    return [update_one(path, version) for path in paths]
