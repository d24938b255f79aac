"""Per-identifier directories in the application's local data location."""

from __future__ import annotations

import os
import shutil
import uuid
from typing import Optional

from platformdirs import user_data_dir

from . import fileutils
from .identity import Identified
from .mathutils import APPLICATION_NAME, ORGANIZATION_NAME


def create_unique_id() -> str:
    """Return a fresh identifier suitable as a storage directory name."""
    return "{" + str(uuid.uuid4()) + "}"


def local_path() -> str:
    """Return the standard application data directory."""
    return user_data_dir(APPLICATION_NAME, ORGANIZATION_NAME)


class LocalStorage(Identified):
    """A subdirectory of the local data location named after a unique id."""

    def __init__(self, unique_id: Optional[str] = None, base_path: Optional[str] = None) -> None:
        super().__init__(unique_id or create_unique_id())
        self.base_path = base_path if base_path is not None else local_path()

    def path(self) -> str:
        """Return the directory path of this storage."""
        return fileutils.slashed(self.base_path, self.id)

    def exists(self) -> bool:
        return os.path.isdir(self.path())

    def create(self) -> bool:
        """Create the storage directory; return whether it now exists."""
        return fileutils.create_path(self.base_path, self.id)

    def remove(self) -> bool:
        """Delete the directory and everything in it; True if it is gone."""
        target = self.path()
        if not os.path.exists(target):
            return True
        try:
            shutil.rmtree(target)
        except OSError:
            return False
        return True