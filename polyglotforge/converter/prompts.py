"""Prompt template for single-file conversion."""

from __future__ import annotations

from polyglotforge.converter.models import LATEST_VERSION, InputFile

CONVERSION_TEMPLATE = """\
You are Dobby, an expert AI code converter.

Convert the following file to {target}.
Preserve logic, comments, and structure.

Output ONLY valid JSON matching this schema:
{{
  "path": "<string - file path or name>",
  "content": "<string - converted file contents>"
}}

Do not include markdown fences, explanations, or any text outside JSON.

File Path: {path}
Filename: {name}
Code:
```
{content}
```
"""


def describe_target(target_language: str, target_version: str) -> str:
    """`Python (3.12)`, or just `Python` when the version is left to the model."""
    version = target_version.strip()
    if not version or version == LATEST_VERSION:
        return target_language
    return f"{target_language} ({version})"


def build_conversion_prompt(
    file: InputFile, target_language: str, target_version: str
) -> str:
    """Render the conversion instruction for one file.

    File content is embedded verbatim; nothing is escaped.
    """
    # str.format does not re-scan substituted values, so braces in the
    # source survive untouched.
    return CONVERSION_TEMPLATE.format(
        target=describe_target(target_language, target_version),
        path=file.path,
        name=file.name,
        content=file.content,
    )
