from typing import NamedTuple, Dict, Any, ChainMap

from versync.store import DEFAULT_VERSION


class Option(NamedTuple):
    key: str
    default: Any
    help: str = ""

    def from_dict(self, config_dict: Dict[str, Any]):
        return config_dict.get(self.key, self.default)


class Settings:
    STORE = Option("store", "VERSION", "File holding the current version")
    MANIFESTS = Option("manifests", ("backend/package.json", "frontend/package.json"),
                       "JSON files whose version field is kept in sync")
    DEFAULT_VERSION = Option("default_version", DEFAULT_VERSION, "Version used when the store file can't be read")
    COLORIZE = Option("colorize", True, "Enable colored output")
    LOG_LEVEL = Option("log_level", "INFO", "Logging level")


class VersyncConfig(NamedTuple):
    store: str
    manifests: tuple[str, ...]
    default_version: str = DEFAULT_VERSION
    colorize: bool = True
    log_level: str = "INFO"


def get_all_settings() -> list[Option]:
    return [option for _name, option in vars(Settings).items() if isinstance(option, Option)]


def conf_get(d, option: Option):
    return option.from_dict(d)


def arguments_to_dict(arguments: Dict[str, Any]) -> Dict[str, Any]:
    """Maps docopt arguments onto setting keys, leaving out anything not given."""
    d = {}
    if arguments.get("--store"):
        d[Settings.STORE.key] = arguments["--store"]
    if arguments.get("--manifest"):
        d[Settings.MANIFESTS.key] = tuple(arguments["--manifest"])
    if arguments.get("--no-color"):
        d[Settings.COLORIZE.key] = False
    if arguments.get("--verbose"):
        d[Settings.LOG_LEVEL.key] = "DEBUG"
    return d


def create_config(*dicts: Dict[str, Any]) -> VersyncConfig:
    """Creates a VersyncConfig from multiple dictionaries
    Priority order:
    1. command-line arguments
    2. any further dicts, in the order given
    3. default values
    """
    defaults = {option.key: option.default for option in get_all_settings()}
    merged = ChainMap({}, *dicts, defaults)
    return VersyncConfig(
        store=str(conf_get(merged, Settings.STORE)),
        manifests=tuple(str(p) for p in conf_get(merged, Settings.MANIFESTS)),
        default_version=conf_get(merged, Settings.DEFAULT_VERSION),
        colorize=conf_get(merged, Settings.COLORIZE),
        log_level=conf_get(merged, Settings.LOG_LEVEL),
    )
