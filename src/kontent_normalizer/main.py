# ABOUTME: Main CLI application entry point using asyncclick
# ABOUTME: Normalizes saved Kontent Delivery API snapshots into generic models, entries and assets

import json
from pathlib import Path

import asyncclick as click
from pydantic import ValidationError
from rich.console import Console

from kontent_normalizer.config import get_config
from kontent_normalizer.core.service import NormalizationService
from kontent_normalizer.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_pipeline_context,
)
from kontent_normalizer.utils.rich_tables import (
    create_failures_table,
    create_logging_status_table,
    create_normalization_summary_table,
    print_rich_table,
)

console = Console()


def _load_snapshot(snapshot: Path) -> tuple[list, list]:
    """Read a {"types": [...], "items": [...]} snapshot saved from the Delivery API."""
    try:
        payload = json.loads(snapshot.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Snapshot is not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise click.ClickException("Snapshot must be a JSON object with 'types' and 'items' lists")

    types = payload.get("types", [])
    items = payload.get("items", [])
    if not isinstance(types, list) or not isinstance(items, list):
        raise click.ClickException("Snapshot 'types' and 'items' must be lists")
    return types, items


@click.command()
@click.argument("snapshot", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write normalized JSON here")
@click.option("--project-id", help="Kontent project id (defaults to KONTENT_NORMALIZER_PROJECT_ID)")
@click.option("--language", "languages", multiple=True, help="Language codename, repeatable")
@click.option("--include-kontent-metadata", is_flag=True, help="Attach raw items to entries")
@click.option("--environment", help="Project environment stamped on every record")
@click.option("--fail-on-error", is_flag=True, help="Exit with status 1 when any item failed")
@click.pass_context
async def normalize(
    ctx,
    snapshot: Path,
    output: Path | None,
    project_id: str | None,
    languages: tuple[str, ...],
    include_kontent_metadata: bool,
    environment: str | None,
    fail_on_error: bool,
):
    """
    🔄 Normalize a Kontent snapshot into models, entries and assets.

    SNAPSHOT is a JSON file with the content types and content items returned
    by the Delivery API. The result is written as JSON to --output or stdout.
    """
    json_output = ctx.obj["json_output"]

    try:
        options = get_config().to_options(
            project_id=project_id,
            language_codenames=list(languages) or None,
            include_kontent_metadata=include_kontent_metadata or None,
            project_environment=environment,
        )
    except ValidationError as e:
        raise click.ClickException(f"Invalid options: {e}") from e

    types, items = _load_snapshot(snapshot)

    with with_pipeline_context("normalize", snapshot=str(snapshot)) as logger:
        logger.info("Starting normalization", type_count=len(types), item_count=len(items))

        result = NormalizationService(options).normalize(types, items)
        rendered = json.dumps(result.to_record(), indent=2, ensure_ascii=False)

        if output is None:
            click.echo(rendered)
        else:
            output.write_text(rendered + "\n", encoding="utf-8")
            logger.info("Wrote normalized output", output=str(output))

            if not json_output:
                print_rich_table(console, create_normalization_summary_table(result, options))
                if result.has_failures:
                    print_rich_table(console, create_failures_table(result.failures))
                console.print(f"💾 Saved to [bold green]{output}[/bold green]")

        if result.has_failures:
            logger.warning("Normalization finished with failures", failures=len(result.failures))

    if fail_on_error and result.has_failures:
        ctx.exit(1)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs instead of rich interface")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🧭 Kontent Normalizer - Kontent content as generic models, entries and assets

    Converts Kontent content types and items into the source-agnostic shape
    consumed by content aggregation pipelines.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(normalize)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
