"""Lab members and projects."""

from typing import Optional

from resource_health.models.base import DocumentModel


class PersonProfile(DocumentModel):
    """Lab member. role is a free-form label ("PI", "Lab Manager", "Researcher", ...)."""

    id: str
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    role: str = ""


class MasterProject(DocumentModel):
    """Project that consumables can be charged to."""

    id: str
    name: str = ""
    account_ids: list[str] = []
