"""Form scaffolding — write generated form files into a project."""

from __future__ import annotations

import logging
from pathlib import Path

from formkit.core.models.config import FormkitConfig
from formkit.core.models.template import GeneratedFile
from formkit.core.services.generators.form import ScaffoldError, generate_form

logger = logging.getLogger(__name__)


def ensure_forms_dir(project_root: Path, config: FormkitConfig) -> bool:
    """Create the forms directory if needed.

    Returns:
        True if the directory was created, False if it already existed.
    """
    target = project_root / config.forms_dir
    if target.is_dir():
        return False
    target.mkdir(parents=True, exist_ok=True)
    logger.info("Created forms directory: %s", target)
    return True


def write_generated_file(
    project_root: Path,
    file: GeneratedFile,
    *,
    overwrite: bool = False,
) -> dict:
    """Write a GeneratedFile to disk.

    An existing shared file is kept and reported as skipped. Any other
    existing file is an error unless *overwrite* (or ``file.overwrite``)
    is set.

    Returns:
        {"ok": True, "path": "...", "written": bool} or {"error": "..."}
    """
    if not file.path or not file.content:
        return {"error": "Missing path or content"}

    target = project_root / file.path

    if target.exists():
        if file.shared:
            logger.info("Keeping existing file: %s", target)
            return {"ok": True, "path": file.path, "written": False, "skipped": True}
        if not (overwrite or file.overwrite):
            return {
                "error": f"File already exists: {file.path} (use --force to replace)",
                "path": file.path,
                "written": False,
            }

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(file.content, encoding="utf-8")
    logger.info("Wrote generated file: %s", target)

    return {"ok": True, "path": file.path, "written": True}


def make_form(
    project_root: Path,
    name: str,
    config: FormkitConfig | None = None,
    *,
    force: bool = False,
    dry_run: bool = False,
) -> dict:
    """Generate a form class and its base model under the forms directory.

    Returns:
        {"ok": True, "files": [...], "created_dir": bool} or {"error": "..."}
    """
    config = config or FormkitConfig()

    try:
        files = generate_form(name, config)
    except ScaffoldError as e:
        return {"error": str(e)}

    if dry_run:
        return {
            "ok": True,
            "dry_run": True,
            "created_dir": False,
            "files": [f.model_dump() for f in files],
        }

    created_dir = ensure_forms_dir(project_root, config)

    results: list[dict] = []
    for file in files:
        result = write_generated_file(project_root, file, overwrite=force)
        if "error" in result:
            return {"error": result["error"], "created_dir": created_dir, "files": results}
        results.append(result)

    return {"ok": True, "created_dir": created_dir, "files": results}
