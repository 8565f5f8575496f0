"""
formkit — CLI entrypoint.

Usage:
    python -m formkit.main --help
    python -m formkit.main rules email contact required max=120
    python -m formkit.main make form UserForm
    python -m formkit.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from formkit import __version__
from formkit.core.observability.logging_config import (
    ENV_FILE,
    ENV_FILE_LEVEL,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="formkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to formkit.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """formkit — form fields that know their validation rules."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_FILE),
        log_file_level=os.environ.get(ENV_FILE_LEVEL),
    )


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate formkit.yml and show the resolved settings."""
    from formkit.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        source = str(result.config_path) if result.config_path else "(defaults)"
        click.echo(f"   Source:     {source}")
        click.echo(f"   Forms dir:  {result.config.forms_dir}")
        click.echo(f"   Package:    {result.config.forms_package}")
        click.echo(f"   Base model: {result.config.base_model}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


def _parse_option(raw: str) -> tuple[str, object]:
    """``required`` → (required, True); ``between=1,10`` → (between, ["1", "10"])."""
    if "=" not in raw:
        return raw, True
    key, _, value = raw.partition("=")
    if "," in value:
        return key, value.split(",")
    return key, value


@cli.command()
@click.argument("field_type")
@click.argument("name")
@click.argument("options", nargs=-1)
@click.option(
    "--choice",
    "choices",
    multiple=True,
    help="Static select option as value=label (repeatable).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def rules(
    field_type: str,
    name: str,
    options: tuple[str, ...],
    choices: tuple[str, ...],
    as_json: bool,
) -> None:
    """Show the validation rules a field declaration produces.

    Examples:

        formkit rules email contact required

        formkit rules number age min=18 max=99

        formkit rules select role required --choice admin=Admin --choice user=User
    """
    from formkit.core.models.field import FieldType
    from formkit.core.services.fields import make, supported_types

    try:
        kind = FieldType(field_type)
    except ValueError:
        click.secho(
            f"❌ Unknown field type '{field_type}' "
            f"(supported: {', '.join(supported_types())})",
            fg="red",
        )
        sys.exit(1)

    field = make(kind, name, [_parse_option(o) for o in options])
    if choices:
        field.options(dict(c.partition("=")[::2] for c in choices))

    tokens = [str(r) for r in field.get_validation_rules()]

    if as_json:
        click.echo(json.dumps({
            "name": field.name,
            "type": field.type.value,
            "rules": tokens,
            "attributes": field.attributes,
        }, indent=2, default=str))
        return

    click.secho(f"\n📝 {field.name} [{field.type.value}]", fg="cyan", bold=True)
    if not tokens:
        click.secho("   (no rules)", fg="yellow")
    for token in tokens:
        click.echo(f"   • {token}")
    if field.attributes:
        click.echo()
        for key, val in field.attributes.items():
            click.echo(f"   {key}={val}")
    click.echo()


# ── Register sub-command groups from formkit/ui/cli/ ──────────────

from formkit.ui.cli.make import make

cli.add_command(make)


if __name__ == "__main__":
    cli()
