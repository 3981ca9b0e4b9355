"""Profile data loader from various sources."""

import json
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from job_matcher.exceptions import ProfileError
from job_matcher.profile.schema import UserProfile


class ProfileLoader:
    """Loads user profile data from files."""

    @staticmethod
    def load_from_json(file_path: str) -> UserProfile:
        """
        Load profile from a JSON file.

        The file may hold the profile object directly or wrap it as
        ``{"userProfile": {...}}`` (the request body shape of the match API).

        Args:
            file_path: Path to JSON file containing profile data.

        Returns:
            UserProfile instance.

        Raises:
            ProfileError: If the file can't be read, isn't JSON, or doesn't match the schema.
        """
        path = Path(file_path)

        if not path.exists():
            raise ProfileError(f"Profile file not found: {file_path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ProfileError(f"Invalid JSON in profile file {file_path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ProfileError(f"Could not read profile file {file_path}: {e}") from e

        if isinstance(data, dict) and isinstance(data.get("userProfile"), dict):
            data = data["userProfile"]

        return ProfileLoader.load_from_dict(data)

    @staticmethod
    def load_from_dict(data: Dict[str, Any]) -> UserProfile:
        """
        Load profile from a dictionary.

        Args:
            data: Dictionary containing profile data.

        Returns:
            UserProfile instance.

        Raises:
            ProfileError: If the data doesn't match the schema.
        """
        if not isinstance(data, dict):
            raise ProfileError(f"Profile data must be an object, got {type(data).__name__}")
        try:
            return UserProfile.model_validate(data)
        except ValidationError as e:
            raise ProfileError(f"Invalid profile data: {str(e)}") from e
