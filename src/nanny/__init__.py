"""
Nanny - repository maintenance CLI

Reconciles JSON/JSONC configuration fragments into canonical files:
package.json assembly, dependency version sync with drift audit, and
VS Code settings merging.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("nanny")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "Nanny Contributors"

from nanny.config import Settings  # noqa: E402

__all__ = ["__version__", "__version_info__", "Settings"]
