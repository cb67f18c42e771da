"""Access to the files bundled in an InfoPath form template."""

from __future__ import annotations

import subprocess  # noqa: S404
from pathlib import Path

from infopathreader.exceptions import ArchiveError, ArchiveMemberMissingError, DependencyError
from infopathreader.logging import get_logger

logger = get_logger(__name__)


class CabinetArchive:
    """CAB-compressed `.xsn` form template read through the `cabextract` tool."""

    def __init__(self, path: Path, *, cabextract: str = "cabextract") -> None:
        """Initialize the archive.

        Args:
            path (Path): `.xsn` file path.
            cabextract (str): `cabextract` executable name or path.

        Raises:
            ArchiveError: If the path is not a file.
        """
        if not path.is_file():
            raise ArchiveError(message="Form template is not a file", archive=str(path))
        self._path = path
        self._cabextract = cabextract
        self._members: list[str] | None = None

    @property
    def name(self) -> str:
        """Return the archive file path."""
        return str(self._path)

    def list_members(self) -> list[str]:
        """List files stored in the cabinet.

        Returns:
            list[str]: Member names in cabinet order.
        """
        if self._members is None:
            output = self._run("-l", str(self._path)).decode("utf-8", errors="replace")
            self._members = _parse_listing(output)
        return list(self._members)

    def extract(self, member: str) -> bytes:
        """Extract a member to memory.

        Args:
            member (str): Member name, matched case-insensitively.

        Raises:
            ArchiveMemberMissingError: If the cabinet has no such member.

        Returns:
            bytes: Member content.
        """
        stored = _match_member(self.list_members(), member)
        if stored is None:
            raise ArchiveMemberMissingError(archive=self.name, member=member)
        data = self._run("-q", "-p", "-F", stored, str(self._path))
        logger.debug("Archive member extracted", extra={"archive": self.name, "member": stored, "size": len(data)})
        return data

    def _run(self, *args: str) -> bytes:
        try:
            completed = subprocess.run(  # noqa: S603
                [self._cabextract, *args],
                capture_output=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise DependencyError(missing_package=[self._cabextract], message="cabinet extraction") from exc
        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise ArchiveError(message=f"cabextract failed: {stderr or completed.returncode}", archive=self.name)
        return completed.stdout


class SourceDirectoryArchive:
    """Form saved with InfoPath's "Save as Source Files" command."""

    def __init__(self, path: Path) -> None:
        """Initialize the archive.

        Args:
            path (Path): Directory holding `manifest.xsf` and its companions.

        Raises:
            ArchiveError: If the path is not a directory.
        """
        if not path.is_dir():
            raise ArchiveError(message="Form source path is not a directory", archive=str(path))
        self._path = path

    @property
    def name(self) -> str:
        """Return the directory path."""
        return str(self._path)

    def list_members(self) -> list[str]:
        """List files of the source directory.

        Returns:
            list[str]: File names sorted alphabetically.
        """
        return sorted(entry.name for entry in self._path.iterdir() if entry.is_file())

    def extract(self, member: str) -> bytes:
        """Read a member file.

        Args:
            member (str): File name, matched case-insensitively.

        Raises:
            ArchiveMemberMissingError: If the directory has no such file.

        Returns:
            bytes: File content.
        """
        stored = _match_member(self.list_members(), member)
        if stored is None:
            raise ArchiveMemberMissingError(archive=self.name, member=member)
        return (self._path / stored).read_bytes()


def open_archive(path: Path, *, cabextract: str = "cabextract") -> CabinetArchive | SourceDirectoryArchive:
    """Open a form template or a directory of form source files.

    Args:
        path (Path): `.xsn` file or source directory.
        cabextract (str): `cabextract` executable name or path.

    Returns:
        CabinetArchive | SourceDirectoryArchive: Archive reader.
    """
    if path.is_dir():
        return SourceDirectoryArchive(path)
    return CabinetArchive(path, cabextract=cabextract)


def _match_member(members: list[str], member: str) -> str | None:
    wanted = member.lower()
    return next((stored for stored in members if stored.lower() == wanted), None)


def _parse_listing(output: str) -> list[str]:
    """Parse the table printed by `cabextract -l`.

    Rows look like ` 1234 | 19.10.2006 14:03:32 | manifest.xsf`; the header row
    and the dashed separator are skipped.
    """
    members: list[str] = []
    for line in output.splitlines():
        columns = line.split("|", 2)
        if len(columns) != 3:  # noqa: PLR2004
            continue
        size, name = columns[0].strip(), columns[2].strip()
        if not size.isdigit() or not name:
            continue
        members.append(name)
    return members
