"""
Directory-backed profile repository.

Each profile is stored as `<id>.json` (see serialization.save_profile)
inside one directory, by default `AppSettings().profiles_dir`.

Example
-------
>>> store = ProfileStore(Path("~/.local/share/pathroi/profiles").expanduser())
>>> store.save(profile)
>>> [p.name for p in store.list()]
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import List, Optional, Union

from .exceptions import PathROIError, ProfileNotFoundError
from .profile import Profile, ProfileType
from .serialization import load_profile, save_profile

__all__ = ["ProfileStore"]

logger = logging.getLogger(__name__)


class ProfileStore:
    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path_for(self, profile_id: uuid.UUID) -> Path:
        return self.directory / f"{profile_id}.json"

    def save(self, profile: Profile) -> Path:
        """Insert or overwrite a profile; `updated_at` is refreshed on overwrite."""
        path = self._path_for(profile.id)
        if path.exists():
            profile = profile.touched()
        save_profile(profile, path)
        logger.info("Saved profile '%s' to %s", profile.name, path)
        return path

    def get(self, profile_id: Union[str, uuid.UUID]) -> Profile:
        path = self._path_for(uuid.UUID(str(profile_id)))
        if not path.exists():
            raise ProfileNotFoundError(f"No profile with id {profile_id} in {self.directory}")
        return load_profile(path)

    def find_by_name(self, name: str) -> Profile:
        matches = [p for p in self.list() if p.name == name]
        if not matches:
            raise ProfileNotFoundError(f"No profile named '{name}' in {self.directory}")
        if len(matches) > 1:
            logger.warning("%d profiles named '%s'; using the most recently updated", len(matches), name)
        return max(matches, key=lambda p: p.updated_at)

    def resolve(self, key: str) -> Profile:
        """Look up by id when `key` is a UUID, otherwise by name."""
        try:
            profile_id: Optional[uuid.UUID] = uuid.UUID(key)
        except ValueError:
            profile_id = None
        if profile_id is not None:
            return self.get(profile_id)
        return self.find_by_name(key)

    def list(self) -> List[Profile]:
        """All readable stored profiles, oldest first.

        Files that cannot be read or fail validation are skipped with a
        warning so one bad file does not hide the rest of the store.
        """
        if not self.directory.exists():
            return []
        profiles = []
        for path in sorted(self.directory.glob("*.json")):
            try:
                profiles.append(load_profile(path))
            except (PathROIError, ValueError, OSError) as e:
                logger.warning("Skipping unreadable profile %s: %s", path, e)
        return sorted(profiles, key=lambda p: p.created_at)

    def search(self, name_pattern: str) -> List[Profile]:
        """Profiles whose name contains `name_pattern` (case-insensitive)."""
        needle = name_pattern.casefold()
        return [p for p in self.list() if needle in p.name.casefold()]

    def by_type(self, profile_type: Union[str, ProfileType]) -> List[Profile]:
        """Profiles of one ProfileType ("Education" or "Work")."""
        wanted = ProfileType(profile_type)
        return [p for p in self.list() if p.profile_type is wanted]

    def delete(self, profile_id: Union[str, uuid.UUID]) -> None:
        path = self._path_for(uuid.UUID(str(profile_id)))
        if not path.exists():
            raise ProfileNotFoundError(f"No profile with id {profile_id} in {self.directory}")
        path.unlink()
        logger.info("Deleted profile %s", profile_id)
