"""Configuration management for typewright."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
import json
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator, model_validator
import yaml

from typewright.core.replacements import ReplacementRule, ReplacementTable
from typewright.utils import Constants, expand_file_path, read_text_file


def default_replacements() -> tuple[ReplacementRule, ...]:
    """Return the replacement rules used when none are configured."""
    return tuple(ReplacementRule(key=key, value=value) for key, value in Constants.DEFAULT_REPLACEMENTS)


class MagicQuotePair(BaseModel):
    """Opening and closing glyph of one directional quote family."""

    start: str = Field(min_length=1)
    end: str = Field(min_length=1)

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def parse_config_string(cls, data: Any) -> Any:
        """Accept the configured form "start…end" in place of a mapping."""
        if not isinstance(data, str):
            return data
        parts = data.split(Constants.QUOTE_SEPARATOR)
        if len(parts) != 2:
            raise ValueError(
                f"magic quotes must be two glyphs joined by '{Constants.QUOTE_SEPARATOR}', "
                f"got {data!r}"
            )
        return {"start": parts[0], "end": parts[1]}

    @classmethod
    def parse(cls, raw: str) -> MagicQuotePair:
        """Parse a configured "start…end" string."""
        return cls.model_validate(raw)

    def to_config_string(self) -> str:
        return f"{self.start}{Constants.QUOTE_SEPARATOR}{self.end}"

    def glyphs(self) -> tuple[str, str]:
        return (self.start, self.end)


class MagicQuotes(BaseModel):
    """The double-quote (primary) and single-quote (secondary) families."""

    primary: MagicQuotePair = Field(
        default_factory=lambda: MagicQuotePair.parse(Constants.DEFAULT_PRIMARY_QUOTES)
    )
    secondary: MagicQuotePair = Field(
        default_factory=lambda: MagicQuotePair.parse(Constants.DEFAULT_SECONDARY_QUOTES)
    )

    model_config = {"frozen": True}

    def for_quote(self, quote: str) -> MagicQuotePair:
        """Pick the pair that replaces a plain quote character."""
        if quote == Constants.PLAIN_DOUBLE_QUOTE:
            return self.primary
        return self.secondary


class AutocorrectConfig(BaseModel):
    """Autocorrect settings for one editing session.

    Read-only to the engine; the host may swap in a new instance between
    keystrokes.
    """

    active: bool = Field(True, description="Master switch for all autocorrect behaviour")
    replacements: tuple[ReplacementRule, ...] = Field(
        default_factory=default_replacements, description="Ordered trigger -> replacement rules"
    )
    magic_quotes: MagicQuotes = Field(
        default_factory=MagicQuotes,
        validation_alias=AliasChoices("magic_quotes", "magicQuotes"),
    )

    model_config = {"frozen": True}

    @field_validator("replacements", mode="before")
    @classmethod
    def parse_replacements(cls, v):
        """Accept a {key: value} mapping or a list of rules/pairs."""
        if v is None:
            return ()
        if isinstance(v, dict):
            return [{"key": key, "value": value} for key, value in v.items()]
        if isinstance(v, (list, tuple)):
            return [
                {"key": item[0], "value": item[1]} if isinstance(item, (list, tuple)) else item
                for item in v
            ]
        return v

    @property
    def replacement_table(self) -> ReplacementTable:
        return ReplacementTable(self.replacements)


def load_config_file(config_path: str | Path) -> dict[str, Any]:
    """Read a JSON or YAML configuration file into a dict.

    YAML is chosen for .yml/.yaml files, JSON for everything else.

    Raises:
        ValueError: If the file cannot be parsed or is not a mapping
    """
    path_str = expand_file_path(str(config_path)) or str(config_path)
    raw = read_text_file(path_str, "reading config file")

    if Path(path_str).suffix.lower() in (".yml", ".yaml"):
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            logger.error(f"✗ Invalid YAML in config file {path_str}: {e}")
            logger.error("  Please validate your YAML syntax")
            raise ValueError(f"Invalid YAML configuration: {e}") from e
    else:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"✗ Invalid JSON in config file {path_str}: {e}")
            logger.error("  Please validate your JSON syntax")
            raise ValueError(f"Invalid JSON configuration: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.error(f"✗ Config file {path_str} must contain a mapping at the top level")
        raise ValueError("Invalid configuration: top level must be a mapping")
    return data


def load_config(
    config_path: str | None,
    cli_args: Namespace | None = None,
    parser: ArgumentParser | None = None,
) -> AutocorrectConfig:
    """Load a config file, override with CLI args, return AutocorrectConfig."""

    def get_value(key: str, fallback):
        """Get value with correct priority: CLI > file > fallback."""
        if cli_args is not None and parser is not None:
            cli_value = getattr(cli_args, key, None)
            # Use CLI value only if it was explicitly set by the user
            if cli_value != parser.get_default(key):
                return cli_value
        return fallback

    file_config: dict[str, Any] = {}
    if config_path:
        file_config = load_config_file(config_path)

    file_quotes = file_config.get("magic_quotes", file_config.get("magicQuotes")) or {}
    replacements = file_config.get("replacements", Constants.DEFAULT_REPLACEMENTS)
    if isinstance(replacements, dict):
        replacements = list(replacements.items())

    # Rules given on the command line go first so they win over file rules
    # with an equally long key
    cli_rules = get_value("rule", None) or []
    if cli_rules:
        replacements = [tuple(rule) for rule in cli_rules] + list(replacements or [])

    active = file_config.get("active", True)
    if get_value("inactive", False):
        active = False

    config_dict = {
        "active": active,
        "replacements": replacements,
        "magic_quotes": {
            "primary": get_value(
                "primary_quotes", file_quotes.get("primary", Constants.DEFAULT_PRIMARY_QUOTES)
            ),
            "secondary": get_value(
                "secondary_quotes",
                file_quotes.get("secondary", Constants.DEFAULT_SECONDARY_QUOTES),
            ),
        },
    }

    try:
        return AutocorrectConfig.model_validate(config_dict)
    except ValidationError as e:
        logger.error(f"✗ Configuration validation failed: {e}")
        logger.error("  Please check your configuration values")
        raise ValueError(f"Invalid configuration: {e}") from e
