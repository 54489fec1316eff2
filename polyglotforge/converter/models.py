"""Pydantic models for the code conversion subsystem."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LATEST_VERSION = "latest"


class InputFile(BaseModel):
    """One source file submitted for conversion."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str
    name: str = ""  # base filename, informational only


class ConversionRequest(BaseModel):
    """A batch of files plus the target language/version.

    Accepts the camelCase wire names (`targetLanguage`) as well as the
    Python attribute names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    files: list[InputFile] = Field(default_factory=list)
    target_language: str = Field(default="", alias="targetLanguage")
    target_version: str = Field(default=LATEST_VERSION, alias="targetVersion")


class ConvertedFileSchema(BaseModel):
    """The object the provider must return for a single file."""

    path: str
    content: str


class ConvertedFile(BaseModel):
    """Result for one input file, converted or fallback."""

    path: str
    content: str
    status: Literal["converted", "fallback"] = "converted"


class ConversionResult(BaseModel):
    """Ordered results, one per input file."""

    files: list[ConvertedFile] = Field(default_factory=list)

    @property
    def converted_count(self) -> int:
        return sum(1 for f in self.files if f.status == "converted")

    @property
    def fallback_count(self) -> int:
        return sum(1 for f in self.files if f.status == "fallback")
