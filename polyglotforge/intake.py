"""Collect InputFiles from disk paths and pasted snippets."""

from __future__ import annotations

import logging
from pathlib import Path

from polyglotforge.converter.models import InputFile

logger = logging.getLogger(__name__)

SNIPPET_PATH = "pasted-snippet.txt"

IGNORED_DIRS: frozenset[str] = frozenset(
    {".git", "node_modules", "__pycache__", ".venv", "venv", ".tox", "build", "dist"}
)


def read_input_file(path: Path, relative_to: Path) -> InputFile:
    """Read one file as text; undecodable bytes become U+FFFD."""
    rel = path.relative_to(relative_to).as_posix()
    return InputFile(
        path=rel,
        content=path.read_text(encoding="utf-8", errors="replace"),
        name=path.name,
    )


def collect_files(paths: list[str | Path]) -> list[InputFile]:
    """Expand files and directories into an ordered list of InputFiles.

    A plain file is stored under its bare name. A directory is walked
    recursively and each file keeps its path relative to the directory's
    parent (`project/src/app.js`), matching a browser folder upload.
    """
    collected: list[InputFile] = []
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            collected.append(read_input_file(path, path.parent))
        elif path.is_dir():
            root = path.resolve()
            for child in sorted(root.rglob("*")):
                rel_parts = child.relative_to(root).parts
                if any(part in IGNORED_DIRS for part in rel_parts):
                    continue
                if child.is_file():
                    collected.append(read_input_file(child, root.parent))
        else:
            raise FileNotFoundError(f"No such file or directory: {raw}")
    logger.debug("collected %d file(s) from %d path(s)", len(collected), len(paths))
    return collected


def snippet_file(text: str) -> InputFile | None:
    """Wrap pasted code as a pseudo-file; blank input yields None."""
    if not text.strip():
        return None
    return InputFile(path=SNIPPET_PATH, content=text, name=SNIPPET_PATH)
