"""
Generated file model — produced by the form scaffolder.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by a generator, not yet written.

    Attributes:
        path:      Path relative to the project root.
        content:   Full file content.
        overwrite: Whether an existing file may be replaced.
        shared:    Shared by every form; an existing copy is kept as is.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = False
    shared: bool = False
    reason: str = ""
