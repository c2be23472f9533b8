"""
Deep-merge and drift-audit engine.

Pure functions over parsed JSON-like data. Nothing in this package
touches the filesystem, the environment or the command line.
"""

from nanny.core.assemble import assemble_manifest, merge_settings, render_json
from nanny.core.check import is_current
from nanny.core.equality import canonical_dumps, structurally_equal
from nanny.core.merge import merge_copy, merge_deep, project_keys, strip_keys
from nanny.core.versions import sync_manifest_versions, sync_versions

__all__ = [
    "assemble_manifest",
    "canonical_dumps",
    "is_current",
    "merge_copy",
    "merge_deep",
    "merge_settings",
    "project_keys",
    "render_json",
    "strip_keys",
    "structurally_equal",
    "sync_manifest_versions",
    "sync_versions",
]
