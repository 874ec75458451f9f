"""
Reads and writes the version store file.

A store file that is missing, unreadable or empty yields the default version.
A store file holding anything other than X.Y.Z raises InvalidStoreError.
Writing raises StoreWriteError.
"""
from pathlib import Path

from versync.errors import InvalidStoreError, InvalidVersionError, StoreWriteError
from versync.util import file_util, log
from versync.util.log import quote
from versync.version import Version, parse

DEFAULT_VERSION = "0.1.0"


def read(path, default: str = DEFAULT_VERSION) -> Version:
    try:
        text = file_util.read_file_contents(path).strip()
    except (OSError, UnicodeDecodeError) as e:
        log.debug(f"Could not read {quote(path)} ({quote(e)}), using default {default}")
        return parse(default)

    if not text:
        log.debug(f"{quote(path)} is empty, using default {default}")
        return parse(default)

    try:
        return parse(text)
    except InvalidVersionError as e:
        raise InvalidStoreError(path, text) from e


def write(path, version) -> None:
    """Writes the version text as given, without a trailing newline."""
    try:
        file_util.write_file_contents(path, version)
    except OSError as e:
        raise StoreWriteError(path, e.strerror or str(e)) from e
    log.success(f"Updated {quote(Path(path).name)} file to {version}")
