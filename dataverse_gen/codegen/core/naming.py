"""
Naming and output-path helpers for generated files.
"""

from pathlib import PurePosixPath
from typing import Any, Optional


def name_key(item: Any) -> Optional[str]:
    """File name for enums, actions, functions and complex types."""
    return getattr(item, "name", None)


def schema_name_key(item: Any) -> Optional[str]:
    """File name for entity types."""
    return getattr(item, "schema_name", None)


def output_file_path(output_dir: str, file_name: Optional[str], file_suffix: str) -> str:
    """
    Join an output sub-directory and a file name into a relative path.

    ``"."`` as the directory collapses, so ``("." , "index", ".ts")``
    gives ``"index.ts"``. A missing name yields a file named after the
    suffix alone (``entities/.ts``).
    """
    return str(PurePosixPath(output_dir) / f"{file_name or ''}{file_suffix}")


def normalize_import_location(import_location: Optional[str]) -> Optional[str]:
    """
    Rewrite an import path for a file one directory shallower.

    A leading ``..`` is reduced to ``.`` exactly once, so ``../enums/x``
    becomes ``./enums/x``. Anything else is returned unchanged.
    """
    if import_location and import_location.startswith(".."):
        return "." + import_location[2:]
    return import_location
