"""Rich tree preview of converted files."""

from __future__ import annotations

from rich.markup import escape
from rich.text import Text
from rich.tree import Tree

from polyglotforge.converter.models import ConvertedFile

PREVIEW_CHARS = 400


def preview(content: str, limit: int = PREVIEW_CHARS) -> str:
    return content[:limit] + ("..." if len(content) > limit else "")


def build_tree(files: list[ConvertedFile], *, show_content: bool = False) -> Tree:
    """Group results by directory; fallbacks are flagged in red."""
    root = Tree(f"[bold]Converted files[/bold] ({len(files)})")
    dirs: dict[str, Tree] = {}
    for f in files:
        parts = [p for p in f.path.replace("\\", "/").split("/") if p]
        parent = root
        for i, part in enumerate(parts[:-1]):
            key = "/".join(parts[: i + 1])
            if key not in dirs:
                dirs[key] = parent.add(f"[blue]{escape(part)}/[/blue]")
            parent = dirs[key]
        leaf = escape(parts[-1]) if parts else "unknown"
        if f.status == "fallback":
            label = f"[red]{leaf}[/red] [dim](not converted)[/dim]"
        else:
            label = f"[green]{leaf}[/green] [dim]({len(f.content)} chars)[/dim]"
        node = parent.add(label)
        if show_content:
            node.add(Text(preview(f.content), style="dim"))
    return root
