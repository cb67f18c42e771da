"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field


class PackageError(Exception):
    """Root exception for the package."""


@dataclass
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass
class DependencyError(PackageError):
    """Raised when runtime dependencies are missing."""

    missing_package: list[str]
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Missing runtime dependencies for '{self.message}': {', '.join(self.missing_package)}"


@dataclass
class ArchiveError(PackageError):
    """Raised when the form container cannot be opened or read."""

    message: str
    archive: str | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message} ({self.archive})" if self.archive else self.message


@dataclass
class ArchiveMemberMissingError(PackageError):
    """Raised when a named member cannot be extracted from the container."""

    archive: str
    member: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Member '{self.member}' not found in archive '{self.archive}'"


@dataclass
class ManifestError(PackageError):
    """Raised when required information is absent from `manifest.xsf`."""

    message: str
    archive: str | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message} ({self.archive})" if self.archive else self.message


@dataclass
class SchemaError(PackageError):
    """Raised when a document needed to build the field table is absent or malformed."""

    message: str
    archive: str | None = None
    member: str | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        location = ":".join(part for part in (self.archive, self.member) if part)
        return f"{self.message} ({location})" if location else self.message


@dataclass
class SchemaInconsistencyError(PackageError):
    """Raised when a view binding or group member has no schema declaration."""

    field: str
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: '{self.field}'"


@dataclass
class ViewNotFoundError(PackageError, LookupError):
    """Raised when a view name is not declared in the manifest."""

    view: str
    available: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Unknown view '{self.view}'. Available views: {', '.join(self.available) or '<none>'}"


@dataclass
class ViewRenderError(PackageError):
    """Raised when a view stylesheet cannot be compiled or applied."""

    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return self.message


@dataclass
class UnsupportedFeatureError(PackageError):
    """Raised for operations the reader does not implement."""

    feature: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Not yet implemented: {self.feature}"
