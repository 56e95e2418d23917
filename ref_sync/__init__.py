"""Keep the SDK reference spec in sync with its TypeDoc output.

This package backs the ``ref-sync`` console script used by the docs app. It
compares the hand-authored ``supabase_js_v2.yml`` reference spec with the
TypeDoc ``combined.json`` snapshot, reports broken references, undocumented
public methods and documented private APIs, optionally appends stub entries,
and regenerates the client-library sidebar.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from ref_sync import main
>>> main()  # doctest: +SKIP
>>> from ref_sync import app
>>> app.name[0]
'ref-sync'
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
