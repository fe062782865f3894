"""Unit tests for YAML and environment configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from plume.config import ConfigLoader, PlumeConfig, parse_boolean_token


def test_config_loader_from_yaml_reads_all_fields(tmp_path: Path) -> None:
    """Config loader should parse every supported YAML key."""

    config_path = tmp_path / "plume.yaml"
    config_path.write_text(
        "\n".join(
            [
                "project_dir: roman",
                "output_dir: exports",
                "language: en",
                "typography: off",
                "markdown_extensions:",
                "  - tables",
            ]
        ),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.project_dir == Path("roman")
    assert config.output_dir == Path("exports")
    assert config.language == "en"
    assert config.typography is False
    assert config.markdown_extensions == ("tables",)


def test_config_loader_from_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "plume.yaml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == PlumeConfig()


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ("- a\n- b\n", "top-level mapping"),
        ("output: x\n", "unsupported key(s): output"),
        ("typography: peut-être\n", "`typography` must be a boolean"),
        ("markdown_extensions: tables\n", "`markdown_extensions` must be a list"),
        ("extra:\n  theme: sobre\n", "unsupported key(s): extra"),
        ("markdown_extensions:\n  - tables\n  - ''\n", "contains a blank entry"),
    ],
)
def test_config_loader_from_yaml_rejects_invalid_payloads(
    tmp_path: Path, body: str, message: str
) -> None:
    config_path = tmp_path / "plume.yaml"
    config_path.write_text(body, encoding="utf-8")

    with pytest.raises(ValueError) as exc_info:
        ConfigLoader.from_yaml(config_path)

    assert message in str(exc_info.value)


def test_config_loader_from_env() -> None:
    config = ConfigLoader.from_env(
        {
            "PLUME_PROJECT_DIR": " manuscrit ",
            "PLUME_OUTPUT_DIR": "dist",
            "PLUME_LANGUAGE": "de",
            "PLUME_TYPOGRAPHY": "no",
        }
    )

    assert config.project_dir == Path("manuscrit")
    assert config.output_dir == Path("dist")
    assert config.language == "de"
    assert config.typography is False


def test_config_loader_from_env_defaults_and_invalid_boolean() -> None:
    assert ConfigLoader.from_env({}) == PlumeConfig()

    with pytest.raises(ValueError, match="PLUME_TYPOGRAPHY"):
        ConfigLoader.from_env({"PLUME_TYPOGRAPHY": "parfois"})


def test_parse_boolean_token() -> None:
    assert parse_boolean_token(True) is True
    assert parse_boolean_token(" YES ") is True
    assert parse_boolean_token("0") is False
    assert parse_boolean_token("") is None
    assert parse_boolean_token("maybe") is None


def test_config_loader_from_yaml_layers_over_base(tmp_path: Path) -> None:
    """Keys absent from the YAML file keep the base value, present keys win."""

    config_path = tmp_path / "plume.yaml"
    config_path.write_text("output_dir: exports\n", encoding="utf-8")
    base = ConfigLoader.from_env(
        {"PLUME_PROJECT_DIR": "manuscrit", "PLUME_OUTPUT_DIR": "dist", "PLUME_TYPOGRAPHY": "0"}
    )

    config = ConfigLoader.from_yaml(config_path, base=base)

    assert config.project_dir == Path("manuscrit")
    assert config.output_dir == Path("exports")
    assert config.typography is False
    assert config.language == "fr"
    assert base.output_dir == Path("dist")
