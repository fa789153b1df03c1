"""
Critic Report Row

Derived, read-only result of the most-active-commenters aggregation. Never persisted.
"""

from pydantic import BaseModel, ConfigDict, Field


class Critic(BaseModel):
    """
    One row of the commenters report.

    Attributes
    ----------
    id : str
        Email of the commenter (the `$group` key, `_id`).
    count : int
        Number of comments authored.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    count: int

    @property
    def email(self) -> str:
        return self.id
