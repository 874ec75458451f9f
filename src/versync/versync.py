"""versync

Keeps the version in a VERSION file and the "version" field of package
manifests in step.

Usage:
    versync [options] [--manifest=FILE]... [<command>] [<version>]

    versync get
    versync set 1.2.3
    versync patch
    versync -m package.json minor

Commands:
    get             print the current version
    set VERSION     set a specific version (e.g. 1.2.3)
    patch           bump the patch version (1.0.0 -> 1.0.1)
    minor           bump the minor version (1.0.0 -> 1.1.0)
    major           bump the major version (1.0.0 -> 2.0.0)
    sync            write the current version to all manifest files
    help            show this screen

Options:
    -h --help                   show this screen.
    --version                   show version.
    -s FILE --store=FILE        file holding the version (VERSION if not given).
    -m FILE --manifest=FILE     manifest to sync, may be repeated
                                (backend/package.json and frontend/package.json if not given).
    --no-color                  plain output without colors.
    -v --verbose                show debug output.
"""

import sys
from typing import Union

from docopt import docopt, DocoptExit

from versync import __version__
from versync import manifests, store
from versync.errors import VersyncError, MissingArgumentError, UnknownCommandError
from versync.manifests import ManifestResult
from versync.util import log
from versync.util.log import quote
from versync.version import Version, bump, parse
from versync.versync_config import VersyncConfig, arguments_to_dict, create_config

version = __version__


def show_help():
    print(__doc__.strip("\n"))


def get_version(conf: VersyncConfig) -> Version:
    return store.read(conf.store, conf.default_version)


def sync(conf: VersyncConfig, current: Union[Version, str, None] = None) -> list[ManifestResult]:
    """Writes the given (or the stored) version to every manifest; the store file is left alone."""
    if current is None:
        current = get_version(conf)
    log.debug(f"Syncing {current} to {len(conf.manifests)} manifest(s)")
    return manifests.sync_all(conf.manifests, current)


def set_version(conf: VersyncConfig, text: str) -> list[ManifestResult]:
    # validated here, but the text is stored as the user typed it
    parse(text)
    store.write(conf.store, text)
    return sync(conf, text)


def bump_version(conf: VersyncConfig, kind: str) -> list[ManifestResult]:
    current = get_version(conf)
    new_version = bump(current, kind)
    log.info(f"Bumping {kind} version: {current} -> {new_version}")
    return set_version(conf, str(new_version))


def dispatch(command, argument, conf: VersyncConfig):
    match command:
        case "get":
            print(get_version(conf))
        case "set":
            if argument is None:
                raise MissingArgumentError("set", "Version")
            set_version(conf, argument)
        case "patch" | "minor" | "major":
            bump_version(conf, command)
        case "sync":
            sync(conf)
        case "help" | None:
            show_help()
        case _:
            raise UnknownCommandError(command)


def run(argv=None) -> int:
    try:
        arguments = docopt(__doc__, argv=argv, version=f"versync {version}")
    except DocoptExit as e:
        print(e, file=sys.stderr)
        return 1

    conf = create_config(arguments_to_dict(arguments))
    log.configure(colorize=conf.colorize, level=conf.log_level)
    log.debug(f"versync {version} | store={quote(conf.store)} manifests={quote(', '.join(conf.manifests))}")

    command = arguments.get("<command>")
    try:
        dispatch(command, arguments.get("<version>"), conf)
    except VersyncError as e:
        log.error(f"Error: {quote(e)}")
        if e.show_usage:
            show_help()
        return e.exit_code
    return 0


def run_versync():
    sys.exit(run())


if __name__ == "__main__":
    run_versync()
