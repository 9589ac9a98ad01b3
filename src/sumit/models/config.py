"""Run configuration for changelog generation."""

from pathlib import Path

from pydantic import BaseModel, field_validator


class ChangelogConfig(BaseModel):
    """Everything a single changelog run needs to know."""

    version: str
    directory: Path = Path(".")
    remote_name: str = "origin"
    verbose: bool = False

    model_config = {"frozen": True}

    @field_validator("directory", mode="before")
    @classmethod
    def _empty_directory_is_cwd(cls, value):
        if value is None or value == "":
            return Path(".")
        return value
