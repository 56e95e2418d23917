"""Typed dataclasses describing a reference sync run."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import (
    DEFAULT_JSON_PATH,
    DEFAULT_REPORT_PATH,
    DEFAULT_YAML_PATH,
    SECTIONS_FILENAME,
)
from ..spec import YamlStyle


class SyncConfigError(ValueError):
    """Raised when the sync configuration file is invalid."""


@dc.dataclass(slots=True)
class SyncConfig:
    """Fully resolved inputs, outputs and switches for one run.

    Attributes
    ----------
    json_path : Path
        TypeDoc ``combined.json`` snapshot.
    yaml_path : Path
        Hand-authored reference spec.
    report_path : Path
        Where the JSON validation report is written.
    sections_path : Path or None
        Sidebar JSON; ``None`` means next to ``yaml_path``.
    summary_path : Path or None
        Optional Markdown summary output.
    fix : bool
        Append stub entries for undocumented user-facing methods.
    strict : bool
        Treat warnings as failures.
    yaml_style : YamlStyle
        Emitter settings used when the spec is written back.
    """

    json_path: Path = DEFAULT_JSON_PATH
    yaml_path: Path = DEFAULT_YAML_PATH
    report_path: Path = DEFAULT_REPORT_PATH
    sections_path: Path | None = None
    summary_path: Path | None = None
    fix: bool = False
    strict: bool = False
    yaml_style: YamlStyle = dc.field(default_factory=YamlStyle)

    @property
    def resolved_sections_path(self) -> Path:
        if self.sections_path is not None:
            return self.sections_path
        return self.yaml_path.parent / SECTIONS_FILENAME


__all__ = ["SyncConfig", "SyncConfigError"]
