"""Errors raised by Scilla commands."""


class ScillaError(Exception):
    """Base class for every failure surfaced to the caller."""


class ConfigDirError(ScillaError):
    """Raised when the user configuration directory cannot be determined."""


class ParseError(ScillaError):
    """Raised when the config file is not a valid TOML document."""

    def __init__(self, path, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to parse {path}: {cause}")


class ConfigIOError(ScillaError):
    """Raised when reading, writing or creating the config fails."""

    def __init__(self, path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Filesystem error on {path}: {cause}")


class PromptError(ScillaError):
    """Raised when interactive input is aborted."""


class EditorLaunchError(ScillaError):
    """Raised when the editor process cannot be started."""

    def __init__(self, editor: str, cause: Exception):
        self.editor = editor
        self.cause = cause
        super().__init__(f"Failed to launch editor '{editor}': {cause}")
