"""Container interfaces."""

from __future__ import annotations

from typing import Protocol


class Archive(Protocol):
    """Source of the named files making up an InfoPath form."""

    @property
    def name(self) -> str:
        """Return a display name identifying the container."""

    def list_members(self) -> list[str]:
        """List member file names.

        Returns:
            list[str]: Member names as stored in the container.
        """

    def extract(self, member: str) -> bytes:
        """Extract one member as raw bytes.

        Args:
            member: Member file name.

        Raises:
            ArchiveMemberMissingError: If the container has no such member.

        Returns:
            bytes: Member content.
        """
