"""Runtime dependency checks for archive access and CLI commands."""

from __future__ import annotations

import importlib.util
import shutil

from infopathreader.exceptions import DependencyError


def _is_module_available(module_name: str) -> bool:
    """Check whether a module can be imported.

    Args:
        module_name (str): Python module name.

    Returns:
        bool: True if import spec exists.
    """
    return importlib.util.find_spec(module_name) is not None


def _is_executable_available(executable: str) -> bool:
    """Check whether an executable can be found on PATH.

    Args:
        executable (str): Executable name or path.

    Returns:
        bool: True if the executable resolves.
    """
    return shutil.which(executable) is not None


def _collect_missing_dependencies(modules_by_package: dict[str, str]) -> list[str]:
    """Collect missing packages for a module mapping.

    Args:
        modules_by_package (Mapping[str, str]): Mapping of package name -> import module.

    Returns:
        list[str]: Missing package names.
    """
    return [package for package, module in modules_by_package.items() if not _is_module_available(module)]


def ensure_package_dependencies() -> None:
    """Validate required dependencies for XML processing.

    Raises:
        DependencyError: If required runtime dependencies are missing.
    """
    missing = _collect_missing_dependencies(
        {
            "lxml": "lxml",
            "structlog": "structlog",
            "pydantic-settings": "pydantic_settings",
        },
    )
    if missing:
        raise DependencyError(missing_package=missing, message="package import")


def ensure_cabextract_available(executable: str = "cabextract") -> None:
    """Validate that the CAB extraction tool is installed.

    Args:
        executable (str): Executable name or path.

    Raises:
        DependencyError: If the executable cannot be found.
    """
    if not _is_executable_available(executable):
        raise DependencyError(missing_package=[executable], message="cabinet extraction")
