"""Read and amend the hand-authored reference spec YAML.

The spec lists documented functions, each with an ``id`` and optionally a
``$ref`` pointing at the TypeDoc symbol it documents. :class:`SpecDocument`
exposes those entries as :class:`DocFunction` values and applies edits through
ruamel.yaml so untouched regions keep their formatting.
"""

from .document import FUNCTIONS_KEY, SpecDocument, YamlStyle, build_roundtrip_yaml
from .models import REF_KEY, DocExample, DocFunction, SpecFileError

__all__ = [
    "FUNCTIONS_KEY",
    "REF_KEY",
    "DocExample",
    "DocFunction",
    "SpecDocument",
    "SpecFileError",
    "YamlStyle",
    "build_roundtrip_yaml",
]
