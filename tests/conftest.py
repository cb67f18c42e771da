"""Pytest marker auto-assignment by folder and shared form fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from infopathreader import logger
from infopathreader.archive import SourceDirectoryArchive
from infopathreader.exceptions import ArchiveMemberMissingError
from infopathreader.infopath import InfopathDocument
from infopathreader.settings import Settings

FORM_DIR = Path(__file__).parent / "data" / "feedback_form"


class MemoryArchive:
    """Archive backed by an in-memory mapping of member name to bytes."""

    def __init__(self, members: dict[str, bytes], name: str = "memory.xsn") -> None:
        self._members = members
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def list_members(self) -> list[str]:
        return list(self._members)

    def extract(self, member: str) -> bytes:
        try:
            return self._members[member]
        except KeyError as exc:
            raise ArchiveMemberMissingError(archive=self._name, member=member) from exc


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(
                f"Could not resolve path for test item {item.name!s}; skipping {marker!s} marker assignment",
            )
            continue

        if path == target_dir or target_dir in path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Apply directory-based markers to test items."""
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


@pytest.fixture
def form_dir() -> Path:
    return FORM_DIR


@pytest.fixture
def form_members() -> dict[str, bytes]:
    return {path.name: path.read_bytes() for path in FORM_DIR.iterdir() if path.is_file()}


@pytest.fixture
def form_document() -> InfopathDocument:
    return InfopathDocument(SourceDirectoryArchive(FORM_DIR), settings=Settings())


@pytest.fixture
def make_archive():
    """Return a factory building in-memory archives."""
    return MemoryArchive
