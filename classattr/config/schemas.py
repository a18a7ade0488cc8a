"""
Configuration schemas using Pydantic for validation.

Settings tunes a Hierarchy; HierarchyDocument describes a whole hierarchy
(settings plus types, their parents, declared names and defaults) as loaded
from YAML.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..log.constants import LogConstants
from ..utils import check_name
from .constants import DEFAULT_HIERARCHY_NAME


class LoggingSettings(BaseModel):
    """Logging configuration for a hierarchy."""

    level: str | None = Field(
        default=None, description="Log level for the hierarchy's logger"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: Any) -> Any:
        """Validate log level is a recognized level."""
        if v is not None and str(v).lower() not in LogConstants.LEVEL_NAMES:
            valid = ", ".join(sorted(LogConstants.LEVEL_NAMES))
            raise ValueError(f"Invalid log level '{v}'. Must be one of: {valid}")
        return v

    model_config = ConfigDict(extra="forbid")


class Settings(BaseModel):
    """Behavior switches for a Hierarchy."""

    strict: bool = Field(
        default=True,
        description="Raise NotDeclaredError for undeclared names, else return None",
    )
    auto_promote: bool = Field(
        default=False,
        description="Promote instances on first override of a declared attribute",
    )
    thread_safe: bool = Field(
        default=True, description="Guard stores with reader/writer locks"
    )
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = ConfigDict(extra="forbid", frozen=True)


class TypeSpec(BaseModel):
    """One type of a hierarchy document."""

    parent: str | None = Field(default=None, description="Name of the parent type")
    declare: list[str] = Field(
        default_factory=list, description="Attributes declared without a value"
    )
    defaults: dict[str, Any] = Field(
        default_factory=dict, description="Attributes declared with a default value"
    )

    @field_validator("declare")
    @classmethod
    def validate_declared(cls, v: list[str]) -> list[str]:
        """Validate declared names are identifiers."""
        for name in v:
            check_name(name)
        return v

    @field_validator("defaults")
    @classmethod
    def validate_defaults(cls, v: dict[str, Any]) -> dict[str, Any]:
        """Validate default names are identifiers."""
        for name in v:
            check_name(name)
        return v

    model_config = ConfigDict(extra="forbid")


class HierarchyDocument(BaseModel):
    """A complete hierarchy: name, settings and types."""

    name: str = Field(default=DEFAULT_HIERARCHY_NAME)
    settings: Settings = Field(default_factory=Settings)
    types: dict[str, TypeSpec] = Field(default_factory=dict)

    @field_validator("types", mode="before")
    @classmethod
    def fill_empty_types(cls, v: Any) -> Any:
        """Allow bare type entries (`Base:` with no body)."""
        if isinstance(v, dict):
            return {name: spec if spec is not None else {} for name, spec in v.items()}
        return v

    @model_validator(mode="after")
    def validate_parents(self) -> "HierarchyDocument":
        """Validate every parent names a type of the document."""
        for name, spec in self.types.items():
            if spec.parent is not None and spec.parent not in self.types:
                raise ValueError(f"type '{name}' has unknown parent '{spec.parent}'")
        return self

    model_config = ConfigDict(extra="forbid")
