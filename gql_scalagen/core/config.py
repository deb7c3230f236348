"""Configuration for the schema writer.

Settings can come from a JSON file and be overridden from the command line:

    {
        "effect": "zio.Task",
        "package_name": "com.example.api",
        "scalar_mappings": {"DateTime": "java.time.OffsetDateTime"}
    }
"""

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .emitters import DEFAULT_EFFECT
from .errors import ConfigError

_PACKAGE_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")


class WriterConfig(BaseModel):
    """Options controlling the generated Scala source."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Wrapper type for query and mutation results, e.g. zio.UIO or zio.Task
    effect: str = DEFAULT_EFFECT
    # Emitted as a ``package`` clause when set
    package_name: str | None = None
    # GraphQL scalar name -> Scala type
    scalar_mappings: dict[str, str] = {}

    @field_validator("effect")
    @classmethod
    def _check_effect(cls, value: str) -> str:
        value = value.strip()
        if not value or any(ch.isspace() for ch in value):
            raise ValueError("effect must be a single Scala type name, e.g. 'zio.UIO'")
        return value

    @field_validator("package_name")
    @classmethod
    def _check_package_name(cls, value: str | None) -> str | None:
        if value is not None and not _PACKAGE_NAME.match(value):
            raise ValueError(f"'{value}' is not a valid Scala package name")
        return value

    def merged(self, **overrides) -> "WriterConfig":
        """Return a copy with the non-None overrides applied and re-validated."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return WriterConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(str(e)) from e


def load_config(path: str | Path) -> WriterConfig:
    """Load a writer configuration from a JSON file."""
    path = Path(path)
    try:
        return WriterConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e
