"""Release model rendered into a changelog entry."""

from typing import List

from pydantic import BaseModel

from .change import Change


class Release(BaseModel):
    """Represents the changelog entry for one version."""

    version: str
    date: str
    changes: List[Change] = []

    model_config = {"frozen": True}

    @property
    def has_links(self) -> bool:
        """Check if any change links back to the remote."""
        return any(change.url for change in self.changes)
