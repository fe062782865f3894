"""Configuration model and loaders for Plume.

Responsibilities:
- Define project and rendering settings as a typed dataclass.
- Load settings from YAML files and environment variables.

Key types:
- `PlumeConfig`: normalized settings for one command run.
- `ConfigLoader`: static construction helpers for `PlumeConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

_DEFAULT_PROJECT_DIR = Path("book")
_DEFAULT_OUTPUT_DIR = Path("out")
_DEFAULT_LANGUAGE = "fr"
_DEFAULT_MARKDOWN_EXTENSIONS = ("fenced_code", "tables", "nl2br")
_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return a stripped string, or `None` for missing and blank values."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_boolean_token(value: object) -> bool | None:
    """Parse `true/false`, `1/0`, `yes/no`, `on/off`; `None` when unrecognized."""

    if isinstance(value, bool):
        return value
    token = normalize_optional_string(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


@dataclass(slots=True)
class PlumeConfig:
    """Settings for one Plume command run.

    Attributes:
        project_dir: Directory holding `book.json` and chapter files.
        output_dir: Directory receiving exported files.
        language: Default book language for new projects and exports.
        typography: Whether rendering applies the typographic normalizer.
        markdown_extensions: Python-Markdown extension names used for rendering.
    """

    project_dir: Path = _DEFAULT_PROJECT_DIR
    output_dir: Path = _DEFAULT_OUTPUT_DIR
    language: str = _DEFAULT_LANGUAGE
    typography: bool = True
    markdown_extensions: tuple[str, ...] = _DEFAULT_MARKDOWN_EXTENSIONS

    def validate(self) -> None:
        """Validate settings before a command runs."""

        if not isinstance(self.language, str) or not self.language.strip():
            raise ValueError("`language` must be a non-empty string.")
        for extension in self.markdown_extensions:
            if not isinstance(extension, str) or not extension.strip():
                raise ValueError("`markdown_extensions` entries must be non-empty strings.")


class ConfigLoader:
    """Factory methods for creating `PlumeConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "project_dir",
            "output_dir",
            "language",
            "typography",
            "markdown_extensions",
        }
    )

    @staticmethod
    def from_yaml(path: Path, base: PlumeConfig | None = None) -> PlumeConfig:
        """Create a validated config from a YAML file.

        Keys missing from the file keep their value from `base` (defaults when
        omitted), so YAML can be layered over environment settings.
        """

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(
            payload,
            source_label=f"YAML `{path}`",
            base=base or PlumeConfig(),
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> PlumeConfig:
        """Create a validated config from `PLUME_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        project_dir = normalize_optional_string(env_map.get("PLUME_PROJECT_DIR"))
        output_dir = normalize_optional_string(env_map.get("PLUME_OUTPUT_DIR"))
        language = normalize_optional_string(env_map.get("PLUME_LANGUAGE"))
        typography = True
        raw_typography = normalize_optional_string(env_map.get("PLUME_TYPOGRAPHY"))
        if raw_typography is not None:
            parsed = parse_boolean_token(raw_typography)
            if parsed is None:
                raise ValueError(
                    "Environment variable `PLUME_TYPOGRAPHY` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            typography = parsed

        config = PlumeConfig(
            project_dir=Path(project_dir) if project_dir else _DEFAULT_PROJECT_DIR,
            output_dir=Path(output_dir) if output_dir else _DEFAULT_OUTPUT_DIR,
            language=language or _DEFAULT_LANGUAGE,
            typography=typography,
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any],
        source_label: str,
        base: PlumeConfig,
    ) -> PlumeConfig:
        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            raise ValueError(
                f"{source_label} includes unsupported key(s): {', '.join(unknown)}."
            )

        project_dir = normalize_optional_string(payload.get("project_dir"))
        output_dir = normalize_optional_string(payload.get("output_dir"))
        language = normalize_optional_string(payload.get("language"))

        typography = base.typography
        if "typography" in payload:
            parsed = parse_boolean_token(payload["typography"])
            if parsed is None:
                raise ValueError(
                    f"{source_label} field `typography` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            typography = parsed

        config = replace(
            base,
            project_dir=Path(project_dir) if project_dir else base.project_dir,
            output_dir=Path(output_dir) if output_dir else base.output_dir,
            language=language or base.language,
            typography=typography,
            markdown_extensions=ConfigLoader._extension_list(
                payload, source_label, base.markdown_extensions
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _extension_list(
        payload: Mapping[str, Any],
        source_label: str,
        fallback: tuple[str, ...],
    ) -> tuple[str, ...]:
        raw = payload.get("markdown_extensions")
        if raw is None:
            return fallback
        if isinstance(raw, str) or not isinstance(raw, list):
            raise ValueError(f"{source_label} field `markdown_extensions` must be a list.")
        extensions = tuple(normalize_optional_string(item) for item in raw)
        if any(item is None for item in extensions):
            raise ValueError(
                f"{source_label} field `markdown_extensions` contains a blank entry."
            )
        return extensions
