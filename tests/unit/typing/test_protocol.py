from __future__ import annotations

from infopathreader.archive import CabinetArchive, SourceDirectoryArchive
from infopathreader.typing import protocol


def test_archive_protocol_members() -> None:
    for method in ("list_members", "extract"):
        assert hasattr(protocol.Archive, method)
        assert hasattr(CabinetArchive, method)
        assert hasattr(SourceDirectoryArchive, method)
