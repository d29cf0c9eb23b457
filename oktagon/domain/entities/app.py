"""
App Entity

Subset of the Okta application resource.
"""

from typing import Any, Dict

from pydantic import BaseModel


class App(BaseModel):
    id: str
    name: str
    label: str
    status: str
    last_updated: str
    created: str

    @classmethod
    def from_okta(cls, payload: Dict[str, Any]) -> "App":
        return cls(
            id=payload["id"],
            name=payload.get("name", ""),
            label=payload.get("label", ""),
            status=payload.get("status", ""),
            last_updated=payload.get("lastUpdated", ""),
            created=payload.get("created", ""),
        )
