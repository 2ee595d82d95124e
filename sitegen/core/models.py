"""Domain models for build configuration and results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from .errors import DEFAULT_MAX_ERRORS


class BuildConfig(BaseModel):
    """Configuration for one site generation run."""

    source_dir: Path = Field(default=Path("./src"), description="Source tree root")
    dest_dir: Path = Field(
        default=Path("./generated"), description="Destination tree root"
    )
    markup_suffix: str = Field(
        default=".html", min_length=1, description="Case-sensitive markup suffix"
    )
    max_errors: int = Field(
        default=DEFAULT_MAX_ERRORS, ge=1, description="Error log capacity"
    )
    chunk_size: int = Field(default=4096, ge=1, description="Copy buffer size")
    file_mode: int = Field(default=0o644, description="File permissions (octal)")
    dir_mode: int = Field(default=0o755, description="Directory permissions (octal)")


class ProcessedFile(BaseModel):
    """A file the walker handed to a worker, successful or not."""

    source: Path
    destination: Path


class BuildReport(BaseModel):
    """Outcome of a run: files visited and the errors recorded on the way."""

    processed: list[ProcessedFile] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    dropped_errors: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
