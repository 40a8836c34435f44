"""Tests for core configuration."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from file_classifier.core.config import (
    Category,
    ClassifierSettings,
    DedupPolicy,
    DedupScope,
    RunConfig,
    load_embedded_settings,
    load_settings,
    parse_settings,
)
from file_classifier.core.errors import ConfigError, UsageError

from fixtures import TEST_CONFIG, write_file


class TestDedupScope:
    """Tests for DedupScope enum."""

    def test_values(self):
        assert DedupScope.NONE.value == "none"
        assert DedupScope.CATEGORY.value == "category"
        assert DedupScope.GLOBAL.value == "global"


class TestDedupPolicy:
    """Tests for hash eligibility."""

    def test_default_is_global_all(self):
        policy = DedupPolicy()

        assert policy.scope == DedupScope.GLOBAL
        assert policy.is_eligible("images")
        assert policy.is_eligible("documents")

    def test_restricted_categories(self):
        policy = DedupPolicy(scope=DedupScope.CATEGORY, categories=["images", "movies"])

        assert policy.is_eligible("movies")
        assert not policy.is_eligible("documents")

    def test_none_disables_hashing(self):
        policy = DedupPolicy(scope=DedupScope.NONE, categories=["images"])

        assert not policy.is_eligible("images")


class TestParseSettings:
    """Tests for YAML parsing and validation."""

    def test_parse_categories(self):
        settings = parse_settings(TEST_CONFIG)

        assert [c.name for c in settings.categories] == ["images", "movies", "documents"]
        assert settings.categories[1].extensions == ["mp4", "mpeg"]
        assert settings.default_category == "others"

    def test_defaults(self):
        settings = parse_settings("categories: []")

        assert settings.default_category == "others"
        assert settings.date_patterns == []
        assert settings.date_categories == ["images", "movies"]
        assert settings.min_sizes == {"images": 1024 * 1024}
        assert settings.dedup.scope == DedupScope.GLOBAL

    def test_blank_default_category(self):
        settings = parse_settings("default_category: '  '")

        assert settings.default_category == "others"

    def test_null_default_category(self):
        settings = parse_settings("default_category:")

        assert settings.default_category == "others"

    def test_custom_default_category(self):
        settings = parse_settings("default_category: misc")

        assert settings.default_category == "misc"

    def test_empty_document(self):
        settings = parse_settings("")

        assert settings.categories == []
        assert settings.default_category == "others"

    def test_dedup_section(self):
        settings = parse_settings("dedup:\n  scope: category\n  categories: [images]\n")

        assert settings.dedup.scope == DedupScope.CATEGORY
        assert settings.dedup.categories == ["images"]

    def test_invalid_yaml(self):
        with pytest.raises(ConfigError, match="parse config"):
            parse_settings("categories: [unclosed")

    def test_non_mapping(self):
        with pytest.raises(ConfigError, match="mapping"):
            parse_settings("- just\n- a list\n")

    def test_invalid_schema(self):
        with pytest.raises(ConfigError, match="invalid config"):
            parse_settings("categories: [{extensions: [jpg]}]")

    def test_invalid_pattern(self):
        with pytest.raises(ConfigError, match="invalid date pattern"):
            parse_settings("date_patterns: ['(?P<year>\\d{4}']")

    def test_invalid_scope(self):
        with pytest.raises(ConfigError):
            parse_settings("dedup: {scope: sometimes}")

    def test_frozen(self):
        settings = parse_settings(TEST_CONFIG)

        with pytest.raises(Exception):
            settings.default_category = "changed"

    def test_with_dedup_scope(self):
        settings = parse_settings(TEST_CONFIG)

        updated = settings.with_dedup_scope(DedupScope.NONE)

        assert updated.dedup.scope == DedupScope.NONE
        assert settings.dedup.scope == DedupScope.GLOBAL
        assert updated.categories == settings.categories


class TestLoadSettings:
    """Tests for loading from files and the embedded default."""

    def test_load_from_file(self, tmp_path: Path):
        path = write_file(tmp_path, "config.yaml", TEST_CONFIG)

        settings = load_settings(path)

        assert len(settings.categories) == 3

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="read config"):
            load_settings(tmp_path / "missing.yaml")

    def test_embedded_default(self):
        settings = load_settings(None)

        names = [c.name for c in settings.categories]
        assert "images" in names
        assert "movies" in names
        assert "documents" in names
        assert settings.default_category == "others"
        assert settings.date_patterns

    def test_embedded_matches_loader(self):
        assert load_embedded_settings() == load_settings()


class TestRunConfig:
    """Tests for RunConfig validation."""

    def test_absolute_paths(self, tmp_path: Path):
        config = RunConfig(source=tmp_path / "src", destination=tmp_path / "dest")

        assert config.report_path == tmp_path / "dest" / "warn.csv"
        assert isinstance(config.settings, ClassifierSettings)

    def test_relative_source(self, tmp_path: Path):
        with pytest.raises(UsageError, match="absolute"):
            RunConfig(source=Path("src"), destination=tmp_path)

    def test_relative_destination(self, tmp_path: Path):
        with pytest.raises(UsageError, match="absolute"):
            RunConfig(source=tmp_path, destination=Path("dest"))

    def test_no_filesystem_side_effects(self, tmp_path: Path):
        RunConfig(source=tmp_path / "src", destination=tmp_path / "dest")

        assert not (tmp_path / "dest").exists()


class TestCategory:
    """Tests for the Category model."""

    def test_requires_name(self):
        with pytest.raises(Exception):
            Category(name="", extensions=["jpg"])

    @pytest.mark.parametrize("name", ["/tmp/outside", "a/b", "..", ".", "../up"])
    def test_rejects_path_like_names(self, name):
        with pytest.raises(ValidationError):
            Category(name=name, extensions=["txt"])

    def test_accepts_dotted_name(self):
        assert Category(name="my.docs", extensions=["txt"]).name == "my.docs"

    def test_config_with_absolute_name(self, tmp_path: Path):
        text = f"categories:\n  - name: {tmp_path / 'outside'}\n    extensions: [txt]\n"

        with pytest.raises(ConfigError, match="invalid config"):
            parse_settings(text)

    @pytest.mark.parametrize("name", ["/tmp/outside", "..", "misc/other"])
    def test_rejects_path_like_default(self, name):
        with pytest.raises(ConfigError, match="plain folder name"):
            parse_settings(f"default_category: '{name}'\n")
