"""Tests for settings and profile loading."""

import pytest

from fsp.core.config import Settings, load_profile, resolve_profile_path
from fsp.core.exceptions import ConfigurationError, UnknownFieldError
from fsp.core.types import FertilityInput
from fsp.scoring.engine import compute_score


class TestLoadProfile:
    """Tests for YAML profile loading."""

    def test_full_profile(self, tmp_path, mixed_input):
        path = tmp_path / "profile.yaml"
        path.write_text(
            "\n".join(f"{k}: {v}" for k, v in mixed_input.to_dict().items())
        )

        assert load_profile(path) == mixed_input

    def test_partial_profile_uses_defaults(self, tmp_path):
        path = tmp_path / "partial.yaml"
        path.write_text("age: 36\nsleep: Insomnia\n")

        record = load_profile(path)

        assert record.age == 36
        assert record.sleep == "Insomnia"
        assert record.weight == 70

    def test_camel_case_keys(self, tmp_path):
        path = tmp_path / "camel.yaml"
        path.write_text("marriageYears: 5\nsexFrequency: Once a week\n")

        record = load_profile(path)

        assert record.marriage_years == 5
        assert record.sex_frequency == "Once a week"

    def test_none_label_stays_a_string(self, tmp_path):
        path = tmp_path / "none.yaml"
        path.write_text("substance: None\novulation: None\n")

        record = load_profile(path)

        assert record.substance == "None"
        assert record.ovulation == "None"

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_profile(path) == FertilityInput()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_profile(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- age\n- weight\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_profile(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("age: [30\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_profile(path)

    def test_unknown_field(self, tmp_path):
        path = tmp_path / "unknown.yaml"
        path.write_text("blood_type: O\n")

        with pytest.raises(UnknownFieldError):
            load_profile(path)

    def test_bad_number(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("age: thirty\n")

        with pytest.raises(ConfigurationError, match="Invalid value"):
            load_profile(path)

    def test_infinite_number(self, tmp_path):
        path = tmp_path / "inf.yaml"
        path.write_text("age: .inf\n")

        with pytest.raises(ConfigurationError, match="finite"):
            load_profile(path)

    def test_null_number(self, tmp_path):
        path = tmp_path / "null_age.yaml"
        path.write_text("weight: null\n")

        with pytest.raises(ConfigurationError, match="Invalid value"):
            load_profile(path)

    def test_null_label_scores_default(self, tmp_path):
        """A YAML null is not the "None" label and scores the neutral default."""
        path = tmp_path / "null_label.yaml"
        path.write_text("substance: null\novulation: null\n")

        record = load_profile(path)
        parts = compute_score(record).parts

        assert record.substance is None
        assert record.ovulation is None
        assert parts["substance"] == 1
        assert parts["ovulation"] == 1

    def test_relative_path_uses_profiles_dir(self, tmp_path, monkeypatch):
        profiles = tmp_path / "profiles"
        profiles.mkdir()
        (profiles / "mine.yaml").write_text("age: 33\n")
        monkeypatch.chdir(tmp_path)

        settings = Settings(FSP_PROFILES_DIR=str(profiles))

        assert resolve_profile_path("mine.yaml", settings) == (profiles / "mine.yaml").resolve()
        assert load_profile("mine.yaml", settings).age == 33


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for var in ("FSP_LOG_LEVEL", "FSP_SHOW_BREAKDOWN", "FSP_PROFILES_DIR"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.show_breakdown is False
        assert settings.profiles_dir == (tmp_path / "profiles").resolve()

    def test_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("FSP_LOG_LEVEL", "debug")
        monkeypatch.setenv("FSP_SHOW_BREAKDOWN", "true")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.show_breakdown is True
