"""Common literal values used across ref_sync.

These constants keep default file locations and report naming centralized so
the CLI, the configuration loader, and tests can import the same values
without drifting. Intended for internal use within the ref_sync package.

Examples
--------
>>> from ref_sync import _constants
>>> _constants.SECTIONS_FILENAME
'common-client-libs-sections.json'
>>> _constants.EXAMPLE_ID_TEMPLATE.format(entry_id="auth-signup", index=2)
'auth-signup-typedoc-example-2'
"""

from pathlib import Path

DEFAULT_CONFIG_PATH = Path("ref-sync.yaml")
DEFAULT_JSON_PATH = Path("spec/enrichments/tsdoc_v2/combined.json")
DEFAULT_YAML_PATH = Path("spec/supabase_js_v2.yml")
DEFAULT_REPORT_PATH = Path("sync-report.json")
SECTIONS_FILENAME = "common-client-libs-sections.json"

STUB_EXAMPLE_ID_TEMPLATE = "{stub_id}-example-{index}"
EXAMPLE_ID_TEMPLATE = "{entry_id}-typedoc-example-{index}"
EXAMPLE_NAME_TEMPLATE = "Example {index}"
PLACEHOLDER_DESCRIPTION = "TODO: Add description for {member}"
