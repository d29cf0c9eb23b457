"""
Group Entity

Subset of the Okta group resource.
"""

from typing import Any, Dict

from pydantic import BaseModel


class Group(BaseModel):
    """Okta group - fetched per command, never mutated locally"""

    id: str
    name: str
    type: str

    @classmethod
    def from_okta(cls, payload: Dict[str, Any]) -> "Group":
        profile = payload.get("profile") or {}
        return cls(id=payload["id"], name=profile.get("name", ""), type=payload.get("type", ""))
