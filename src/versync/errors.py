class VersyncError(Exception):
    """Base class for errors that abort a versync command."""

    exit_code = 1
    show_usage = False


class InvalidVersionError(VersyncError):
    def __init__(self, text):
        super().__init__(f"Version must be in format X.Y.Z (e.g., 1.2.3), got '{text}'")
        self.text = text


class InvalidBumpError(VersyncError):
    def __init__(self, kind):
        super().__init__(f"Invalid bump type '{kind}'. Use 'patch', 'minor', or 'major'")
        self.kind = kind


class InvalidStoreError(VersyncError):
    def __init__(self, path, text):
        super().__init__(f"{path} contains '{text}' which is not in format X.Y.Z")
        self.path = path
        self.text = text


class StoreWriteError(VersyncError):
    def __init__(self, path, reason):
        super().__init__(f"Error writing {path}: {reason}")
        self.path = path
        self.reason = reason


class MissingArgumentError(VersyncError):
    show_usage = True

    def __init__(self, command, argument):
        super().__init__(f'{argument} required for "{command}" command')
        self.command = command
        self.argument = argument


class UnknownCommandError(VersyncError):
    show_usage = True

    def __init__(self, command):
        super().__init__(f"Unknown command '{command}'")
        self.command = command
