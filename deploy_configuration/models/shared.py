"""
Shared Path Models

Paths that persist between releases and are symlinked into every new one.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class SharedPath:
    """A path relative to the project root, kept across deploys."""

    path: str

    def __post_init__(self):
        if not isinstance(self.path, str):
            raise TypeError(
                f"{type(self).__name__} path must be a string, got {type(self.path).__name__}"
            )

    def __str__(self) -> str:
        return self.path


@dataclass(frozen=True)
class SharedFolder(SharedPath):
    """Folder shared between deploys, e.g. `media` or `var/import`."""


@dataclass(frozen=True)
class SharedFile(SharedPath):
    """File shared between deploys, e.g. `app/etc/env.php`."""


def to_shared_folder(folder: Union[SharedFolder, str]) -> SharedFolder:
    """Wrap a plain path into a SharedFolder, pass instances through."""
    if isinstance(folder, SharedFolder):
        return folder
    return SharedFolder(folder)


def to_shared_file(file: Union[SharedFile, str]) -> SharedFile:
    """Wrap a plain path into a SharedFile, pass instances through."""
    if isinstance(file, SharedFile):
        return file
    return SharedFile(file)
