"""Custom exceptions raised by the download / extract / merge pipeline."""

from __future__ import annotations


class ChaosDumpError(RuntimeError):
    """Base class for every error raised by *chaosdump* itself."""

    pass


class NetworkError(ChaosDumpError):
    """Raised when the index or an archive cannot be fetched or decoded."""

    pass


class ArchiveError(ChaosDumpError):
    """Raised when a downloaded archive cannot be opened or read."""

    pass


class UnsafeArchiveError(ArchiveError):
    """Raised when an archive member would be written outside its destination."""

    def __init__(self, member: str, dest: str) -> None:
        self.member = member
        self.dest = dest
        super().__init__(f"archive member {member!r} escapes {dest}")


class SelectionError(ValueError):
    """Raised when no selection source (names, file, or *all*) was supplied."""

    pass
