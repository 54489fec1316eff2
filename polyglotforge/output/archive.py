"""ZIP packaging of converted files."""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path

from polyglotforge.converter.models import ConvertedFile

logger = logging.getLogger(__name__)


def archive_member_name(path: str) -> str:
    """Make a provider-supplied path safe to use inside a ZIP.

    Normalises separators and drops empty, `.` and `..` segments so that
    nothing can escape the archive root on extraction.
    """
    parts = [p for p in path.replace("\\", "/").split("/") if p not in ("", ".", "..")]
    return "/".join(parts) or "unknown"


def build_archive(files: list[ConvertedFile]) -> bytes:
    """Return ZIP bytes with each file's content stored at its path.

    Later entries win when two results share a path.
    """
    members: dict[str, str] = {}
    for f in files:
        name = archive_member_name(f.path)
        if name in members:
            logger.warning("duplicate archive path %s, keeping the last one", name)
        members[name] = f.content

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, content in members.items():
            zf.writestr(name, content.encode("utf-8", errors="replace"))
    return buffer.getvalue()


def write_archive(
    files: list[ConvertedFile], dest: str | Path, *, dry_run: bool = False
) -> Path:
    """Write the archive to `dest`. Returns the (would-be) path."""
    dest = Path(dest)
    if dry_run:
        logger.debug("dry-run: would write %s", dest)
        return dest
    dest.parent.mkdir(parents=True, exist_ok=True)
    data = build_archive(files)
    dest.write_bytes(data)
    logger.info("wrote %s (%d files, %d bytes)", dest, len(files), len(data))
    return dest
