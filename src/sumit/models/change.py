"""Change model for a single changelog line."""

from pydantic import BaseModel


class Change(BaseModel):
    """Represents one commit as it appears in a release entry."""

    sha: str  # Short hash, first 7 characters
    title: str  # First line of the commit message
    url: str = ""

    model_config = {"frozen": True}
