"""Resolve the settings of a reference sync run.

Settings come from an optional ``ref-sync.yaml`` file and are then overridden
by CLI flags (or their ``INPUT_*`` environment equivalents). The result is a
single :class:`SyncConfig` handed to the pipeline.

Examples
--------
>>> from ref_sync.config import SyncConfig
>>> SyncConfig().resolved_sections_path.name
'common-client-libs-sections.json'
"""

from .loader import apply_overrides, load_sync_config
from .models import SyncConfig, SyncConfigError

__all__ = ["SyncConfig", "SyncConfigError", "apply_overrides", "load_sync_config"]
