"""
Command drivers for Nanny.

Each driver loads its inputs, runs the core and returns a result object;
printing and exit codes belong to the CLI.
"""

import nanny.commands.generate_package as generate_package
import nanny.commands.merge_vscode_config as merge_vscode_config
import nanny.commands.update_package as update_package

__all__ = ["generate_package", "merge_vscode_config", "update_package"]
