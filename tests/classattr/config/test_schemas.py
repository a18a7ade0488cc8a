"""Tests for configuration schemas."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from classattr.config.schemas import (
    HierarchyDocument,
    LoggingSettings,
    Settings,
    TypeSpec,
)


@pytest.mark.unit
class TestSettings:
    """Test Settings defaults and validation."""

    def test_defaults(self):
        settings = Settings()
        assert settings.strict is True
        assert settings.auto_promote is False
        assert settings.thread_safe is True
        assert settings.logging.level is None

    def test_frozen(self):
        settings = Settings()
        with pytest.raises(PydanticValidationError):
            settings.strict = False  # type: ignore[misc]

    def test_unknown_key(self):
        with pytest.raises(PydanticValidationError):
            Settings(strictness=True)  # type: ignore[call-arg]

    @pytest.mark.parametrize("level", ["trace", "DEBUG", "info", "warning", "false"])
    def test_valid_log_levels(self, level):
        assert LoggingSettings(level=level).level == level

    def test_invalid_log_level(self):
        with pytest.raises(PydanticValidationError, match="Invalid log level"):
            LoggingSettings(level="loud")


@pytest.mark.unit
class TestHierarchyDocument:
    """Test document validation."""

    def test_empty(self):
        doc = HierarchyDocument()
        assert doc.name == "default"
        assert doc.types == {}

    def test_bare_type_entry(self):
        doc = HierarchyDocument.model_validate({"types": {"Base": None}})
        assert doc.types["Base"] == TypeSpec()

    def test_unknown_parent(self):
        with pytest.raises(PydanticValidationError, match="unknown parent 'Nowhere'"):
            HierarchyDocument.model_validate(
                {"types": {"Child": {"parent": "Nowhere"}}}
            )

    @pytest.mark.parametrize(
        "spec",
        [{"declare": ["1bad"]}, {"defaults": {"not valid": 1}}, {"colour": "red"}],
    )
    def test_invalid_type_spec(self, spec):
        with pytest.raises(PydanticValidationError):
            HierarchyDocument.model_validate({"types": {"Base": spec}})
