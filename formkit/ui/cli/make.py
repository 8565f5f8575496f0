"""
CLI commands for scaffolding.

Thin wrappers over ``formkit.core.services.scaffold_ops``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


def _resolve_config_path(ctx: click.Context) -> Path | None:
    config_path: Path | None = ctx.obj.get("config_path")
    if config_path is None:
        from formkit.core.config.loader import find_config_file

        config_path = find_config_file()
    return config_path


@click.group()
def make() -> None:
    """Scaffold application code — forms and their base model."""


@make.command("form")
@click.argument("name")
@click.option("--force", is_flag=True, help="Replace the form module if it exists.")
@click.option("--dry-run", is_flag=True, help="Show the files without writing them.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def form(ctx: click.Context, name: str, force: bool, dry_run: bool, as_json: bool) -> None:
    """Create a form class NAME and the shared base model.

    Examples:

        formkit make form UserForm

        formkit make form UserForm --dry-run
    """
    from formkit.core.config.loader import ConfigError, load_config, project_root
    from formkit.core.services.scaffold_ops import make_form

    config_path = _resolve_config_path(ctx)
    try:
        config = load_config(config_path)
    except ConfigError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    root = project_root(config_path)
    result = make_form(root, name, config, force=force, dry_run=dry_run)

    if as_json:
        click.echo(json.dumps(result, indent=2))
        if "error" in result:
            sys.exit(1)
        return

    if "error" in result:
        click.secho(f"❌ {result['error']}", fg="red")
        sys.exit(1)

    if dry_run:
        for file in result["files"]:
            click.secho(f"\n📄 {file['path']}", fg="cyan", bold=True)
            click.echo(file["content"])
        click.secho("   (dry run, nothing written)", fg="yellow")
        return

    click.secho(f"\n🧩 Form {name}", fg="cyan", bold=True)
    if result["created_dir"]:
        click.echo(f"   📁 Created {config.forms_dir}/")
    for file in result["files"]:
        if file.get("written"):
            click.secho(f"   ✓ {file['path']}", fg="green")
        else:
            click.secho(f"   ⊘ {file['path']} (kept)", fg="yellow")
    click.echo()
