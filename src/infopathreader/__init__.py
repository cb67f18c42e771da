"""InfoPathReader package."""

from infopathreader.archive import CabinetArchive, SourceDirectoryArchive, open_archive
from infopathreader.exceptions import (
    ArchiveError,
    ArchiveMemberMissingError,
    DependencyError,
    ManifestError,
    PackageError,
    SchemaError,
    SchemaInconsistencyError,
    SettingsError,
    UnsupportedFeatureError,
    ViewNotFoundError,
    ViewRenderError,
)
from infopathreader.infopath import InfopathDocument
from infopathreader.logging import configure_logging, get_logger
from infopathreader.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("infopathreader")

__all__ = [
    "ArchiveError",
    "ArchiveMemberMissingError",
    "CabinetArchive",
    "DependencyError",
    "InfopathDocument",
    "ManifestError",
    "PackageError",
    "SchemaError",
    "SchemaInconsistencyError",
    "Settings",
    "SettingsError",
    "SourceDirectoryArchive",
    "UnsupportedFeatureError",
    "ViewNotFoundError",
    "ViewRenderError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "logger",
    "open_archive",
]
