"""
Error kinds raised by dirpicker.

Every failure the package surfaces to a caller is a DirsError subclass, so the
CLI can catch one type and still tell the kinds apart.
"""


class DirsError(Exception):
    """Base class for all dirpicker errors."""


class DirectoryNotFoundError(DirsError):
    """A root or override directory does not exist."""

    def __init__(self, path):
        super().__init__(f"directory does not exist: {path}")
        self.path = str(path)


class DirectoryReadError(DirsError):
    """Listing the children of a directory failed."""


class OSQueryError(DirsError):
    """An operating system lookup failed."""


class AttributeQueryError(OSQueryError):
    """The hidden-attribute lookup for a path failed."""


class PathLookupError(OSQueryError):
    """The home directory or executable path could not be determined."""


class PromptError(DirsError):
    """Terminal interaction failed or was cancelled."""


class UnsupportedKindError(DirsError, ValueError):
    """A directory-kind tag outside the supported vocabulary."""

    def __init__(self, kind: str):
        super().__init__(f"unsupported directory type: {kind}")
        self.kind = kind


class UnsupportedPlatformError(DirsError):
    """No file-manager launcher is known for the host platform."""


class LaunchError(DirsError):
    """The file-manager process could not be started."""


class ProvisionError(DirsError):
    """Creating or removing a directory or file failed."""
