"""Data models for sumit."""

from .change import Change
from .config import ChangelogConfig
from .release import Release

__all__ = ["Change", "ChangelogConfig", "Release"]
