"""Interpretation profile loader.

Profiles live in YAML or JSON documents shaped like::

    profiles:
      - id: mainstream_2024
        label: Mainstream contemporary doctrine
        parameters:
          probable_cause_threshold: 0.5
          ...

The engine only consumes parsed InterpretationProfile objects; this module
is the collaborator that produces them from storage.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from conlaw.core.errors import ProfileConfigError, ProfileNotFoundError
from conlaw.core.ontology import InterpretationProfile

logger = logging.getLogger(__name__)

PROFILE_SUFFIXES = (".yaml", ".yml", ".json")


def pick_profile(
    profiles: Mapping[str, InterpretationProfile],
    profile_id: str,
) -> InterpretationProfile:
    """Look up a profile by id.

    Raises:
        ProfileNotFoundError: If no profile has that id.
    """
    profile = profiles.get(profile_id)
    if profile is None:
        raise ProfileNotFoundError(profile_id, sorted(profiles))
    return profile


class ProfileLoader:
    """Loads and validates interpretation profiles from files or directories."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path else None
        self._profiles: dict[str, InterpretationProfile] = {}

    def load(self, path: str | Path | None = None) -> list[InterpretationProfile]:
        """Load from a file or a directory, whichever ``path`` points at."""
        path = Path(path) if path else self.path
        if not path:
            raise ProfileConfigError("No profiles path specified")
        if path.is_dir():
            return self.load_directory(path)
        return self.load_file(path)

    def load_file(self, path: str | Path) -> list[InterpretationProfile]:
        """Load profiles from a single YAML or JSON file."""
        path = Path(path)
        if not path.exists():
            raise ProfileConfigError(f"Profile file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix == ".json":
                    content = json.load(f)
                else:
                    content = yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ProfileConfigError(f"Could not parse {path}: {e}") from e

        profiles = []
        for item in self._profile_entries(content, path):
            profile = self._parse_profile(item, path)
            profiles.append(profile)
            self._profiles[profile.id] = profile

        logger.info("Loaded %d interpretation profile(s) from %s", len(profiles), path)
        return profiles

    def load_directory(self, path: str | Path | None = None) -> list[InterpretationProfile]:
        """Load every profile file in a directory, skipping files that fail."""
        path = Path(path) if path else self.path
        if not path:
            raise ProfileConfigError("No profiles directory specified")
        if not path.exists():
            raise ProfileConfigError(f"Profiles directory not found: {path}")

        profiles = []
        for profile_file in sorted(path.iterdir()):
            if profile_file.suffix not in PROFILE_SUFFIXES:
                continue
            try:
                profiles.extend(self.load_file(profile_file))
            except ProfileConfigError as e:
                logger.warning("Failed to load %s: %s", profile_file, e)

        return profiles

    def get_profile(self, profile_id: str) -> InterpretationProfile | None:
        """Get a loaded profile by ID."""
        return self._profiles.get(profile_id)

    def get_all_profiles(self) -> list[InterpretationProfile]:
        """Get all loaded profiles."""
        return list(self._profiles.values())

    def as_mapping(self) -> dict[str, InterpretationProfile]:
        """Loaded profiles keyed by id."""
        return dict(self._profiles)

    def _profile_entries(self, content: Any, path: Path) -> list[dict]:
        # Accept {profiles: [...]}, a bare list, or a single profile mapping.
        if isinstance(content, dict) and "profiles" in content:
            content = content["profiles"]
        if isinstance(content, dict):
            return [content]
        if isinstance(content, list):
            return content
        raise ProfileConfigError(f"No profiles found in {path}")

    def _parse_profile(self, data: Any, path: Path) -> InterpretationProfile:
        if not isinstance(data, dict):
            raise ProfileConfigError(f"Profile entry in {path} is not a mapping: {data!r}")
        try:
            return InterpretationProfile(**data)
        except ValidationError as e:
            raise ProfileConfigError(
                f"Invalid profile '{data.get('id', '?')}' in {path}: {e}"
            ) from e
