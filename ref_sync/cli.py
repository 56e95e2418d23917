"""Cyclopts CLI entrypoint for validating the SDK reference spec.

The ``ref-sync`` console script checks the hand-authored reference YAML
against the TypeDoc ``combined.json`` snapshot, writes a JSON report, and
regenerates the client-library sidebar. With ``--fix`` it also appends stub
entries for undocumented user-facing methods. The process exits with status 1
when errors are found (or warnings, under ``--strict``).

Examples
--------
Validate with the default paths:

>>> from ref_sync.cli import main
>>> main()  # doctest: +SKIP

Validate custom inputs and fix what can be fixed:

>>> from ref_sync.cli import app
>>> app(
...     ["validate", "--fix", "--yaml-path", "spec/supabase_js_v2.yml"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SyncConfigError, apply_overrides, load_sync_config
from .pipeline import ReferenceSyncRunner
from .report import exit_code, summary_lines
from .spec import SpecFileError
from .typedoc import SnapshotError

app = App(name="ref-sync", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
@app.command(help="Validate the reference spec against the TypeDoc snapshot.")
def validate(
    *,
    fix: typ.Annotated[
        bool, Parameter(help="Append stub entries for missing documentation")
    ] = False,
    strict: typ.Annotated[
        bool, Parameter(help="Fail on warnings as well as errors")
    ] = False,
    json_path: typ.Annotated[
        Path | None, Parameter(help="TypeDoc combined.json snapshot")
    ] = None,
    yaml_path: typ.Annotated[
        Path | None, Parameter(help="Reference spec YAML to validate")
    ] = None,
    report_path: typ.Annotated[
        Path | None, Parameter(help="Where to write the JSON report")
    ] = None,
    sections_path: typ.Annotated[
        Path | None,
        Parameter(help="Sidebar JSON (defaults to a file next to the spec)"),
    ] = None,
    summary_path: typ.Annotated[
        Path | None, Parameter(help="Optional Markdown summary output")
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to ref-sync.yaml settings")
    ] = None,
) -> None:
    """Validate the reference spec and regenerate the sidebar.

    Parameters
    ----------
    fix : bool, optional
        Append stub entries for error-severity missing documentation.
    strict : bool, optional
        Exit non-zero when only warnings are present.
    json_path, yaml_path, report_path, sections_path, summary_path : Path, optional
        Override the corresponding paths from the settings file.
    config : Path or None, optional
        Settings file; ``ref-sync.yaml`` is used when present.

    Raises
    ------
    SystemExit
        With status 1 when validation fails or an input cannot be loaded.
    """
    try:
        settings = apply_overrides(
            load_sync_config(config),
            json_path=json_path,
            yaml_path=yaml_path,
            report_path=report_path,
            sections_path=sections_path,
            summary_path=summary_path,
            fix=fix or None,
            strict=strict or None,
        )
        result = ReferenceSyncRunner(settings).run()
    except (
        FileNotFoundError,
        SnapshotError,
        SpecFileError,
        SyncConfigError,
    ) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"loaded {result.library_count} libraries from {_format_path(settings.json_path)}")
    print(f"loaded {result.function_count} entries from {_format_path(settings.yaml_path)}")
    if result.stubs_appended:
        print(f"appended {result.stubs_appended} stub entries")
    for path in result.written:
        print(f"wrote {_format_path(path)}")
    for line in summary_lines(result.report, strict=settings.strict):
        print(line)

    status = exit_code(result.report, strict=settings.strict)
    if status:
        raise SystemExit(status)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``ref-sync`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
