"""
Language Profile Registry - Keyed lookup of language profiles.

The registry:
1. Holds one immutable LanguageProfile per language id
2. Resolves unknown ids to the default profile (never raises)
3. Loads additional profiles from JSON definitions
4. Exposes speech locales for external collaborators
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .exceptions import ProfileLoadError, ProfileValidationError
from .models import LanguageProfile
from .profiles import BUILTIN_PROFILES, DEFAULT_LANGUAGE


logger = logging.getLogger(__name__)


class ProfileRegistry:
    """
    Registry of language profiles.

    Profiles are registered once at start-up and only read afterwards.

    Usage:
        registry = ProfileRegistry.with_builtin_profiles()
        profile = registry.resolve("ta")
        profile.locale  # "ta-IN"
    """

    def __init__(
        self,
        profiles: Optional[Iterable[LanguageProfile]] = None,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self._profiles: dict[str, LanguageProfile] = {}
        self._default_language = default_language.strip().lower()

        for profile in profiles or []:
            self.register(profile)

    @classmethod
    def with_builtin_profiles(
        cls,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> "ProfileRegistry":
        """Create a registry holding every built-in profile."""
        return cls(
            profiles=build_builtin_profiles(),
            default_language=default_language,
        )

    # =========================================================
    # REGISTRATION
    # =========================================================

    def register(self, profile: LanguageProfile) -> None:
        """Register a language profile."""
        language_id = profile.language_id
        if language_id in self._profiles:
            logger.warning(f"Overwriting existing language profile: {language_id}")

        self._profiles[language_id] = profile
        logger.info(
            f"Registered language profile: {language_id} ({profile.locale}, "
            f"{len(profile.lexicon)} lexicon entries)"
        )

    def register_many(self, profiles: Iterable[LanguageProfile]) -> int:
        """Register several profiles, returning how many were added."""
        count = 0
        for profile in profiles:
            self.register(profile)
            count += 1
        return count

    # =========================================================
    # LOOKUP
    # =========================================================

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def default_profile(self) -> LanguageProfile:
        """The profile used for unrecognized language ids."""
        try:
            return self._profiles[self._default_language]
        except KeyError:
            raise ProfileValidationError(
                f"Default language {self._default_language!r} is not registered",
                language_id=self._default_language,
                field_name="default_language",
            ) from None

    def get(self, language_id: Optional[str]) -> Optional[LanguageProfile]:
        """Get a profile by id, or None when unknown."""
        if not language_id:
            return None
        return self._profiles.get(language_id.strip().lower())

    def resolve(self, language_id: Optional[str]) -> LanguageProfile:
        """
        Resolve a language id to a profile.

        Unknown or empty ids silently resolve to the default profile.
        """
        profile = self.get(language_id)
        if profile is None:
            logger.debug(
                f"Unknown language {language_id!r}, using default {self._default_language}"
            )
            return self.default_profile
        return profile

    def locale_for(self, language_id: Optional[str]) -> str:
        """Speech locale for a language id (default profile's when unknown)."""
        return self.resolve(language_id).locale

    def languages(self) -> list[str]:
        """Registered language ids in registration order."""
        return list(self._profiles.keys())

    def __contains__(self, language_id: object) -> bool:
        return isinstance(language_id, str) and self.get(language_id) is not None

    def __len__(self) -> int:
        return len(self._profiles)

    def to_dict(self) -> dict[str, Any]:
        return {
            "default_language": self._default_language,
            "languages": {
                language_id: {
                    "locale": profile.locale,
                    "labels": profile.labels.to_dict(),
                    "lexicon_size": len(profile.lexicon),
                }
                for language_id, profile in self._profiles.items()
            },
        }


# ============================================================
# PROFILE LOADING
# ============================================================

def build_builtin_profiles() -> list[LanguageProfile]:
    """Build LanguageProfile records from the built-in definitions."""
    return [
        LanguageProfile.from_dict({"language_id": language_id, **definition})
        for language_id, definition in BUILTIN_PROFILES.items()
    ]


def load_profiles_file(path: Union[str, Path]) -> list[LanguageProfile]:
    """
    Load profile definitions from a JSON file.

    The file holds either a list of definitions (each with a
    language_id) or an object keyed by language id.

    Raises:
        ProfileLoadError: File missing or not valid JSON
        ProfileValidationError: A definition violates the schema
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ProfileLoadError(f"Profiles file not found: {p}", path=str(p)) from e
    except (OSError, json.JSONDecodeError) as e:
        raise ProfileLoadError(
            f"Could not read profiles file {p}: {e}",
            path=str(p),
        ) from e

    if isinstance(data, dict):
        definitions = [
            {"language_id": language_id, **definition}
            for language_id, definition in data.items()
        ]
    elif isinstance(data, list):
        definitions = data
    else:
        raise ProfileLoadError(
            f"Profiles file {p} must contain a JSON list or object",
            path=str(p),
        )

    profiles = []
    for definition in definitions:
        if not isinstance(definition, dict):
            raise ProfileLoadError(
                f"Profiles file {p} contains a non-object definition",
                path=str(p),
            )
        profiles.append(LanguageProfile.from_dict(definition))

    logger.info(f"Loaded {len(profiles)} language profiles from {p}")
    return profiles


def default_registry(
    profiles_path: Optional[Union[str, Path]] = None,
    default_language: str = DEFAULT_LANGUAGE,
) -> ProfileRegistry:
    """
    Build a registry with the built-in profiles plus any JSON profiles.

    Profiles from the file override built-in ones with the same id.
    A default language that no profile defines falls back to
    DEFAULT_LANGUAGE with a warning.
    """
    profiles = build_builtin_profiles()
    if profiles_path:
        profiles.extend(load_profiles_file(profiles_path))

    language_id = (default_language or "").strip().lower()
    known = {profile.language_id for profile in profiles}
    if language_id not in known:
        logger.warning(
            f"Default language {default_language!r} has no profile, "
            f"using {DEFAULT_LANGUAGE}"
        )
        language_id = DEFAULT_LANGUAGE

    return ProfileRegistry(profiles=profiles, default_language=language_id)
