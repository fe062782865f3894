"""Command-line interface for Plume.

Responsibilities:
- Expose manuscript normalization, segmentation, and book project commands.
- Convert CLI arguments and YAML settings into `PlumeConfig` and run stages.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Annotated, TypeVar

import typer

from .cli_rendering import (
    echo_chapter_records,
    echo_detected_chapters,
    exit_with_command_error,
)
from .config import ConfigLoader, PlumeConfig
from .errors import StageError
from .io.chapter_splitter import ChapterSplitter
from .io.importer import import_manuscript, read_manuscript
from .io.storage import BookStore
from .publish.epub_generator import export_epub
from .publish.exporters import export_html, export_markdown
from .publish.renderer import MarkdownRenderer
from .telemetry.logger import RunLogger
from .text.typography import TypographyEngine

app = typer.Typer(
    name="plume",
    no_args_is_help=True,
    help="Plume manuscript toolkit CLI.",
)

_StageResult = TypeVar("_StageResult")

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Optional YAML config file."),
]
ProjectOption = Annotated[
    Path | None,
    typer.Option("--project", help="Book project directory (overrides config file value)."),
]


class ExportFormat(str, Enum):
    """Supported export formats."""

    md = "md"
    html = "html"
    epub = "epub"


def _run_stage(
    run_logger: RunLogger,
    stage: str,
    action: Callable[[], _StageResult],
) -> _StageResult:
    """Run one stage action between start/complete events, logging failures."""

    run_logger.log_stage_start(stage)
    try:
        result = action()
    except Exception as exc:
        run_logger.log_stage_failure(stage, type(exc).__name__)
        raise
    run_logger.log_stage_complete(stage)
    return result


def _load_env_config() -> PlumeConfig:
    """Read `PLUME_*` environment settings and map failures to stage errors."""

    try:
        return ConfigLoader.from_env()
    except ValueError as exc:
        raise StageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset the `PLUME_*` variables and rerun.",
        ) from exc


def _load_yaml_config(config_path: Path | None, base: PlumeConfig) -> PlumeConfig:
    """Layer a YAML config file over `base` and map failures to stage errors."""

    if config_path is None:
        return base

    try:
        return ConfigLoader.from_yaml(config_path, base=base)
    except FileNotFoundError as exc:
        raise StageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise StageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise StageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    project: Path | None = None,
    out: Path | None = None,
) -> PlumeConfig:
    """Resolve the effective config: CLI options, then YAML, then `PLUME_*`, then defaults."""

    config = _load_yaml_config(config_file, _load_env_config())
    if project is not None:
        config.project_dir = project
    if out is not None:
        config.output_dir = out
    return config


def _open_store(config: PlumeConfig) -> BookStore:
    """Load the project book, seeding the language of a brand-new project."""

    store = BookStore(config.project_dir)
    is_new = not store.book_path.exists()
    store.load()
    if is_new:
        store.metadata.language = config.language
    return store


def _renderer(config: PlumeConfig) -> MarkdownRenderer:
    return MarkdownRenderer(
        extensions=config.markdown_extensions,
        typography=config.typography,
    )


def _export(export_format: ExportFormat, store: BookStore, config: PlumeConfig) -> Path:
    if export_format is ExportFormat.md:
        return export_markdown(store, config.output_dir)
    if export_format is ExportFormat.html:
        return export_html(store, _renderer(config), config.output_dir)
    return export_epub(store, _renderer(config), config.output_dir)


def _refused(detail: str, hint: str | None = None) -> StageError:
    return StageError(stage="store", detail=detail, hint=hint)


@app.command("normalize")
def normalize_command(
    input_path: Annotated[Path, typer.Argument(help="Markdown manuscript to normalize.")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write the result here instead of standard output."),
    ] = None,
) -> None:
    """Apply typographic normalization to a manuscript."""

    run_logger = RunLogger()
    try:
        text = _run_stage(run_logger, "read", lambda: read_manuscript(input_path, stage="read"))
        normalized = _run_stage(run_logger, "normalize", lambda: TypographyEngine().process(text))
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    if out is None:
        typer.echo(normalized, nl=False)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(normalized, encoding="utf-8")
    typer.echo(f"Normalized manuscript: {out}")


@app.command("split")
def split_command(
    input_path: Annotated[Path, typer.Argument(help="Markdown manuscript to segment.")],
) -> None:
    """Show the chapters a manuscript would be split into."""

    run_logger = RunLogger()
    try:
        text = _run_stage(run_logger, "read", lambda: read_manuscript(input_path, stage="read"))
        chapters = _run_stage(run_logger, "split", lambda: ChapterSplitter().split(text))
    except Exception as exc:
        exit_with_command_error("split", exc)

    if not chapters:
        typer.echo("No chapters detected.")
        return
    echo_detected_chapters(chapters)


@app.command("import")
def import_command(
    input_path: Annotated[Path, typer.Argument(help="`.md` or `.txt` manuscript to import.")],
    project: ProjectOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Replace the project book with the chapters of a manuscript."""

    run_logger = RunLogger()
    try:
        config = _run_stage(run_logger, "config", lambda: _resolve_config(config_file, project))
        store = _run_stage(run_logger, "store", lambda: _open_store(config))
        chapters = _run_stage(run_logger, "import", lambda: import_manuscript(input_path, store))
    except Exception as exc:
        exit_with_command_error("import", exc)

    typer.echo(f"Imported {len(chapters)} chapter(s) into {config.project_dir}")


@app.command("list-chapters")
def list_chapters_command(
    project: ProjectOption = None,
    config_file: ConfigOption = None,
) -> None:
    """List the chapters of the project book."""

    run_logger = RunLogger()
    try:
        config = _run_stage(run_logger, "config", lambda: _resolve_config(config_file, project))
        store = _run_stage(run_logger, "store", lambda: _open_store(config))
    except Exception as exc:
        exit_with_command_error("list-chapters", exc)

    echo_chapter_records(store.chapters, store.current_chapter_id)


@app.command("add-chapter")
def add_chapter_command(
    title: Annotated[str, typer.Argument(help="Title of the new chapter.")] = "Nouveau chapitre",
    after: Annotated[
        str | None,
        typer.Option("--after", help="Insert after this chapter id (default: at the end)."),
    ] = None,
    project: ProjectOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Add an empty chapter."""

    run_logger = RunLogger()
    try:
        config = _run_stage(run_logger, "config", lambda: _resolve_config(config_file, project))
        store = _run_stage(run_logger, "store", lambda: _open_store(config))
        chapter_id = store.add_chapter(title, after)
        store.set_current_chapter(chapter_id)
    except Exception as exc:
        exit_with_command_error("add-chapter", exc)

    typer.echo(f"Added chapter: {chapter_id}")


@app.command("rename-chapter")
def rename_chapter_command(
    chapter_id: Annotated[str, typer.Argument(help="Chapter id.")],
    title: Annotated[str, typer.Argument(help="New chapter title.")],
    project: ProjectOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Rename a chapter."""

    run_logger = RunLogger()
    try:
        config = _run_stage(run_logger, "config", lambda: _resolve_config(config_file, project))
        store = _run_stage(run_logger, "store", lambda: _open_store(config))
        if not store.rename_chapter(chapter_id, title):
            run_logger.log_stage_warning("store", "rename_refused")
            raise _refused(
                f"Cannot rename chapter `{chapter_id}`.",
                hint="Use an existing chapter id and a non-blank title.",
            )
    except Exception as exc:
        exit_with_command_error("rename-chapter", exc)

    typer.echo(f"Renamed chapter: {chapter_id}")


@app.command("set-content")
def set_content_command(
    chapter_id: Annotated[str, typer.Argument(help="Chapter id.")],
    input_path: Annotated[Path, typer.Argument(help="Text file holding the new chapter body.")],
    project: ProjectOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Replace the body of one chapter with the contents of a file."""

    run_logger = RunLogger()
    try:
        config = _run_stage(run_logger, "config", lambda: _resolve_config(config_file, project))
        store = _run_stage(run_logger, "store", lambda: _open_store(config))
        content = _run_stage(run_logger, "read", lambda: read_manuscript(input_path, stage="read"))
        if not store.update_chapter_content(chapter_id, content):
            run_logger.log_stage_warning("store", "unknown_chapter")
            raise _refused(
                f"Unknown chapter id `{chapter_id}`.",
                hint="Run `plume list-chapters` to see the current ids.",
            )
    except Exception as exc:
        exit_with_command_error("set-content", exc)

    typer.echo(f"Updated chapter: {chapter_id} ({len(content)} chars)")


@app.command("delete-chapter")
def delete_chapter_command(
    chapter_id: Annotated[str, typer.Argument(help="Chapter id.")],
    project: ProjectOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Delete a chapter and its content."""

    run_logger = RunLogger()
    try:
        config = _run_stage(run_logger, "config", lambda: _resolve_config(config_file, project))
        store = _run_stage(run_logger, "store", lambda: _open_store(config))
        if len(store.chapters) <= 1:
            run_logger.log_stage_warning("store", "last_chapter")
            raise _refused("Cannot delete the last remaining chapter of the book.")
        if not store.delete_chapter(chapter_id):
            run_logger.log_stage_warning("store", "unknown_chapter")
            raise _refused(f"Unknown chapter id `{chapter_id}`.")
    except Exception as exc:
        exit_with_command_error("delete-chapter", exc)

    typer.echo(f"Deleted chapter: {chapter_id}")


@app.command("reorder-chapters")
def reorder_chapters_command(
    chapter_ids: Annotated[list[str], typer.Argument(help="Every chapter id, in the new order.")],
    project: ProjectOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Reorder the chapters of the book."""

    run_logger = RunLogger()
    try:
        config = _run_stage(run_logger, "config", lambda: _resolve_config(config_file, project))
        store = _run_stage(run_logger, "store", lambda: _open_store(config))
        if not store.reorder_chapters(chapter_ids):
            run_logger.log_stage_warning("store", "reorder_refused")
            raise _refused(
                "The new order must list every chapter id exactly once.",
                hint="Run `plume list-chapters` to see the current ids.",
            )
    except Exception as exc:
        exit_with_command_error("reorder-chapters", exc)

    echo_chapter_records(store.chapters, store.current_chapter_id)


@app.command("set-metadata")
def set_metadata_command(
    title: Annotated[str | None, typer.Option("--title", help="Book title.")] = None,
    author: Annotated[str | None, typer.Option("--author", help="Author name.")] = None,
    language: Annotated[str | None, typer.Option("--language", help="Language code.")] = None,
    project: ProjectOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Update book metadata used by exports."""

    run_logger = RunLogger()
    try:
        config = _run_stage(run_logger, "config", lambda: _resolve_config(config_file, project))
        store = _run_stage(run_logger, "store", lambda: _open_store(config))
        updates = {"title": title, "author": author, "language": language}
        for key, value in updates.items():
            if value is not None:
                store.update_metadata(key, value.strip(), persist=False)
        store.save()
    except Exception as exc:
        exit_with_command_error("set-metadata", exc)

    metadata = store.metadata
    typer.echo(f"Title: {metadata.title or '(none)'}")
    typer.echo(f"Author: {metadata.author or '(none)'}")
    typer.echo(f"Language: {metadata.language}")


@app.command("preview")
def preview_command(
    chapter_id: Annotated[
        str | None,
        typer.Argument(help="Chapter id (default: the current chapter)."),
    ] = None,
    project: ProjectOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Print the rendered HTML of one chapter."""

    run_logger = RunLogger()
    try:
        config = _run_stage(run_logger, "config", lambda: _resolve_config(config_file, project))
        store = _run_stage(run_logger, "store", lambda: _open_store(config))
        target_id = chapter_id or store.current_chapter_id
        if target_id is None or store.get_chapter(target_id) is None:
            raise _refused(f"Unknown chapter id `{target_id}`.")
        rendered = _run_stage(
            run_logger,
            "render",
            lambda: _renderer(config).render(store.get_chapter_content(target_id)),
        )
    except Exception as exc:
        exit_with_command_error("preview", exc)

    typer.echo(rendered)


@app.command("export")
def export_command(
    export_format: Annotated[ExportFormat, typer.Argument(help="Export format.")],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output directory (overrides config file value)."),
    ] = None,
    project: ProjectOption = None,
    config_file: ConfigOption = None,
) -> None:
    """Export the book as Markdown, standalone HTML, or EPUB."""

    run_logger = RunLogger()
    try:
        config = _run_stage(
            run_logger, "config", lambda: _resolve_config(config_file, project, out)
        )
        store = _run_stage(run_logger, "store", lambda: _open_store(config))
        path = _run_stage(
            run_logger, "export", lambda: _export(export_format, store, config)
        )
    except Exception as exc:
        exit_with_command_error("export", exc)

    typer.echo(f"Exported {export_format.value}: {path}")


def main() -> None:
    """Run the CLI application."""

    app()
