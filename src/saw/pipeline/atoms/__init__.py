# saw:header:start
#
#   file         : __init__.py
#   file_relpath : src/saw/pipeline/atoms/__init__.py
#   project      : Saw
#   license      : MIT
#   copyright    : (c) 2025 Saw contributors
#
# saw:header:end

"""Auto-import all atom modules in the current package."""

import importlib
import pkgutil
from pathlib import Path


# Dynamically import all modules in the atoms/ directory
def register_all_atoms() -> None:
    """Import all atom modules in the current package."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg and module_info.name != "base":
            # Import the module to ensure it registers its atoms
            importlib.import_module(f"{__name__}.{module_info.name}")
