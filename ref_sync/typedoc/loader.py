"""Decode the TypeDoc snapshot from disk."""

from __future__ import annotations

import typing as typ

import msgspec

from .models import CombinedSpec

if typ.TYPE_CHECKING:
    from pathlib import Path


class SnapshotError(ValueError):
    """Raised when the API snapshot cannot be decoded."""


_DECODER = msgspec.json.Decoder(CombinedSpec)


def load_api_snapshot(path: Path) -> CombinedSpec:
    """Load and validate a TypeDoc ``combined.json`` snapshot.

    Parameters
    ----------
    path : Path
        Location of the JSON file produced by the TypeDoc build.

    Returns
    -------
    CombinedSpec
        Root of the decoded reflection tree.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SnapshotError
        If the file is not valid JSON or does not match the expected shape.
    """
    if not path.exists():
        msg = f"API snapshot '{path}' not found."
        raise FileNotFoundError(msg)
    try:
        return _DECODER.decode(path.read_bytes())
    except msgspec.DecodeError as exc:
        msg = f"API snapshot '{path}' could not be decoded: {exc}"
        raise SnapshotError(msg) from exc


__all__ = ["SnapshotError", "load_api_snapshot"]
