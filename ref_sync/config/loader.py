"""Load the optional ``ref-sync.yaml`` file into a :class:`SyncConfig`."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML, YAMLError

from .._constants import DEFAULT_CONFIG_PATH
from ..spec import YamlStyle
from .models import SyncConfig, SyncConfigError


def load_sync_config(path: Path | None = None) -> SyncConfig:
    """Load sync settings from YAML, defaulting every missing value.

    Parameters
    ----------
    path : Path or None, optional
        Explicit configuration file. When ``None`` the default
        ``ref-sync.yaml`` is read if present, otherwise defaults are used.

    Returns
    -------
    SyncConfig
        Settings with paths and YAML output style resolved.

    Raises
    ------
    FileNotFoundError
        If an explicitly requested file does not exist.
    SyncConfigError
        If the file cannot be parsed or a section has the wrong shape.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_sync_config(Path("ref-sync.yaml"))  # doctest: +SKIP
    >>> config.report_path  # doctest: +SKIP
    PosixPath('sync-report.json')
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH
        if not path.exists():
            return SyncConfig()
    elif not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Configuration file '{path}' is not valid YAML: {exc}"
        raise SyncConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SyncConfigError(msg)

    paths = _section(loaded, "paths")
    base = SyncConfig()
    return SyncConfig(
        json_path=_path(paths.get("json"), base.json_path),
        yaml_path=_path(paths.get("yaml"), base.yaml_path),
        report_path=_path(paths.get("report"), base.report_path),
        sections_path=_optional_path(paths.get("sections")),
        summary_path=_optional_path(paths.get("summary")),
        fix=bool(loaded.get("fix", base.fix)),
        strict=bool(loaded.get("strict", base.strict)),
        yaml_style=_build_yaml_style(_section(loaded, "yaml_output")),
    )


def _section(raw: cabc.Mapping[str, typ.Any], key: str) -> cabc.Mapping[str, typ.Any]:
    value = raw.get(key) or {}
    if not isinstance(value, cabc.Mapping):
        msg = f"'{key}' must be a mapping."
        raise SyncConfigError(msg)
    return value


def _path(value: object | None, default: Path) -> Path:
    return Path(str(value)) if value else default


def _optional_path(value: object | None) -> Path | None:
    return Path(str(value)) if value else None


def _build_yaml_style(payload: cabc.Mapping[str, typ.Any]) -> YamlStyle:
    base = YamlStyle()
    indent = _section(payload, "indent")
    try:
        return YamlStyle(
            width=int(payload.get("width", base.width)),
            mapping_indent=int(indent.get("mapping", base.mapping_indent)),
            sequence_indent=int(indent.get("sequence", base.sequence_indent)),
            sequence_offset=int(indent.get("offset", base.sequence_offset)),
        )
    except (TypeError, ValueError) as exc:
        msg = f"Invalid 'yaml_output' settings: {exc}"
        raise SyncConfigError(msg) from exc


def apply_overrides(config: SyncConfig, **overrides: object) -> SyncConfig:
    """Return ``config`` with every non-``None`` override applied."""
    for key, value in overrides.items():
        if value is None:
            continue
        if not hasattr(config, key):
            msg = f"Unknown configuration key '{key}'."
            raise SyncConfigError(msg)
        setattr(config, key, value)
    return config


__all__ = ["apply_overrides", "load_sync_config"]
