"""
Tests for language profiles and the profile registry.

============================================================
PURPOSE
============================================================
Verify profile validation, immutability, lookup fallback and
loading of extra profiles from JSON.

============================================================
"""

import dataclasses
import json
import logging

import pytest

from voice_sentiment.exceptions import ProfileLoadError, ProfileValidationError
from voice_sentiment.models import LanguageProfile, ProfileMessages
from voice_sentiment.registry import (
    ProfileRegistry,
    default_registry,
    load_profiles_file,
)
from voice_sentiment.tokenizer import normalize_token


BUILTIN_LANGUAGES = ["en", "ta", "hi", "te", "ml", "fr", "es", "de", "ar"]


def _definition(**overrides):
    data = {
        "language_id": "pt",
        "locale": "pt-BR",
        "lexicon": {"bom": 2, "ruim": -2},
        "negation_words": ["não"],
        "intensifiers": {"muito": 1.5},
        "labels": {"positive": "Positivo", "negative": "Negativo", "neutral": "Neutro"},
    }
    data.update(overrides)
    return data


# ============================================================
# PROFILE VALIDATION
# ============================================================

class TestLanguageProfile:
    """Test profile construction rules."""

    def test_keys_are_normalized(self):
        profile = LanguageProfile.from_dict(_definition(lexicon={"Bom!": 2}))
        assert dict(profile.lexicon) == {"bom": 2}
        assert "não" in profile.negation_words

    def test_language_id_lowercased(self):
        profile = LanguageProfile.from_dict(_definition(language_id=" PT "))
        assert profile.language_id == "pt"

    def test_integral_float_weight_accepted(self):
        profile = LanguageProfile.from_dict(_definition(lexicon={"bom": 2.0}))
        assert profile.lexicon["bom"] == 2

    @pytest.mark.parametrize("weight", [4, -4, 1.5, "2", True])
    def test_invalid_weight_rejected(self, weight):
        with pytest.raises(ProfileValidationError) as exc_info:
            LanguageProfile.from_dict(_definition(lexicon={"bom": weight}))
        assert exc_info.value.field_name == "lexicon"
        assert exc_info.value.language_id == "pt"

    @pytest.mark.parametrize("multiplier", [0, -1.5, float("inf"), "x"])
    def test_invalid_multiplier_rejected(self, multiplier):
        with pytest.raises(ProfileValidationError) as exc_info:
            LanguageProfile.from_dict(_definition(intensifiers={"muito": multiplier}))
        assert exc_info.value.field_name == "intensifiers"

    def test_missing_locale_rejected(self):
        with pytest.raises(ProfileValidationError) as exc_info:
            LanguageProfile.from_dict(_definition(locale=""))
        assert exc_info.value.field_name == "locale"

    def test_missing_required_field(self):
        data = _definition()
        del data["lexicon"]
        with pytest.raises(ProfileValidationError) as exc_info:
            LanguageProfile.from_dict(data)
        assert exc_info.value.field_name == "lexicon"
        assert exc_info.value.to_dict()["error_type"] == "ProfileValidationError"

    @pytest.mark.parametrize("section,value", [
        ("labels", {"pos": "Positivo"}),
        ("labels", "Positivo"),
        ("messages", {"empty": "Digite algo"}),
        ("messages", ["Digite algo"]),
    ])
    def test_invalid_section_rejected(self, section, value):
        with pytest.raises(ProfileValidationError) as exc_info:
            LanguageProfile.from_dict(_definition(**{section: value}))
        assert exc_info.value.field_name == section
        assert exc_info.value.language_id == "pt"

    def test_negation_words_string_rejected(self):
        with pytest.raises(ProfileValidationError) as exc_info:
            LanguageProfile.from_dict(_definition(negation_words="não"))
        assert exc_info.value.field_name == "negation_words"

    def test_negation_words_string_rejected_on_construction(self):
        with pytest.raises(ProfileValidationError):
            LanguageProfile(
                language_id="pt",
                locale="pt-BR",
                lexicon={"bom": 2},
                negation_words="nao",
            )

    def test_lexicon_must_be_mapping(self):
        with pytest.raises(ProfileValidationError) as exc_info:
            LanguageProfile.from_dict(_definition(lexicon=["bom"]))
        assert exc_info.value.field_name == "lexicon"

    def test_profile_is_immutable(self):
        profile = LanguageProfile.from_dict(_definition())
        with pytest.raises(TypeError):
            profile.lexicon["bom"] = 3
        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.locale = "pt-PT"

    def test_default_messages(self):
        profile = LanguageProfile.from_dict(_definition())
        assert profile.messages == ProfileMessages()
        assert profile.messages.speak_template is None

    def test_to_dict_round_trip(self):
        profile = LanguageProfile.from_dict(_definition())
        assert LanguageProfile.from_dict(profile.to_dict()) == profile


# ============================================================
# REGISTRY LOOKUP
# ============================================================

class TestProfileRegistry:
    """Test lookup and fallback."""

    def test_builtin_languages(self, registry):
        assert registry.languages() == BUILTIN_LANGUAGES
        assert len(registry) == 9
        assert registry.default_language == "en"

    @pytest.mark.parametrize("language_id", ["xx", "", None, "klingon"])
    def test_unknown_resolves_to_default(self, registry, language_id):
        assert registry.resolve(language_id) is registry.default_profile
        assert registry.get(language_id) is None

    def test_resolve_is_case_insensitive(self, registry):
        assert registry.resolve("TA").language_id == "ta"
        assert "Hi" in registry

    def test_resolve_is_deterministic(self, registry):
        assert registry.resolve("hi") is registry.resolve("hi")

    @pytest.mark.parametrize("language_id,locale", [
        ("en", "en-US"),
        ("ta", "ta-IN"),
        ("hi", "hi-IN"),
        ("ar", "ar-SA"),
        ("zz", "en-US"),
    ])
    def test_locale_for(self, registry, language_id, locale):
        assert registry.locale_for(language_id) == locale

    def test_every_builtin_profile_has_labels(self, registry):
        for language_id in registry.languages():
            labels = registry.resolve(language_id).labels
            assert labels.positive and labels.negative and labels.neutral

    def test_non_latin_keys_match_tokens(self, registry):
        hindi = registry.resolve("hi")
        assert hindi.lexicon[normalize_token("शानदार")] == 3
        tamil = registry.resolve("ta")
        assert tamil.intensifiers[normalize_token("மிக")] == pytest.approx(1.6)

    def test_register_overrides(self, registry):
        registry.register(LanguageProfile.from_dict(_definition(language_id="en", locale="en-GB")))
        assert registry.locale_for("en") == "en-GB"
        assert len(registry) == 9

    def test_missing_default_profile(self):
        registry = ProfileRegistry(default_language="en")
        with pytest.raises(ProfileValidationError):
            registry.resolve("en")

    def test_to_dict(self, registry):
        data = registry.to_dict()
        assert data["default_language"] == "en"
        assert data["languages"]["ta"]["locale"] == "ta-IN"


# ============================================================
# LOADING
# ============================================================

class TestLoadProfiles:
    """Test JSON profile files."""

    def test_load_list(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps([_definition()]), encoding="utf-8")

        profiles = load_profiles_file(path)
        assert [p.language_id for p in profiles] == ["pt"]

    def test_load_object_keyed_by_id(self, tmp_path):
        data = {"pt": {k: v for k, v in _definition().items() if k != "language_id"}}
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")

        profiles = load_profiles_file(str(path))
        assert profiles[0].language_id == "pt"
        assert profiles[0].labels.neutral == "Neutro"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ProfileLoadError) as exc_info:
            load_profiles_file(tmp_path / "nope.json")
        assert exc_info.value.path.endswith("nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ProfileLoadError):
            load_profiles_file(path)

    def test_wrong_top_level_type(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("42", encoding="utf-8")
        with pytest.raises(ProfileLoadError):
            load_profiles_file(path)

    def test_invalid_definition(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([_definition(lexicon={"bom": 9})]), encoding="utf-8")
        with pytest.raises(ProfileValidationError):
            load_profiles_file(path)

    def test_default_registry_adds_file_profiles(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps([_definition()]), encoding="utf-8")

        registry = default_registry(profiles_path=path)
        assert "pt" in registry
        assert len(registry) == 10

    def test_default_registry_unknown_default(self, caplog):
        with caplog.at_level(logging.WARNING, logger="voice_sentiment.registry"):
            registry = default_registry(default_language="xx")

        assert registry.default_language == "en"
        assert registry.resolve("xx").language_id == "en"
        assert "has no profile" in caplog.text

    def test_default_registry_default_from_file(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps([_definition()]), encoding="utf-8")

        registry = default_registry(profiles_path=path, default_language="PT")
        assert registry.default_language == "pt"

    def test_unknown_section_key(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(
            json.dumps([_definition(labels={"pos": "Positivo"})]),
            encoding="utf-8",
        )
        with pytest.raises(ProfileValidationError) as exc_info:
            load_profiles_file(path)
        assert exc_info.value.field_name == "labels"
