from importlib import metadata as _metadata


def _load_version() -> str:
    """Return the package version from installed metadata."""
    try:
        return _metadata.version("versync")
    except _metadata.PackageNotFoundError:
        return "0.0.0"


__version__ = _load_version()
