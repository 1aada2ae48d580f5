"""Roster: lab member profiles and projects."""

from typing import Optional

from sqlalchemy import select

from resource_health.db import get_session
from resource_health.db.models.people import PersonRow, ProjectRow
from resource_health.db.repositories._convert import to_model
from resource_health.models.people import MasterProject, PersonProfile


class SqlRoster:
    def get_profile(self, user_id: str) -> Optional[PersonProfile]:
        with get_session() as session:
            row = session.get(PersonRow, user_id)
            return to_model(PersonProfile, row) if row is not None else None

    def list_profiles(self) -> list[PersonProfile]:
        with get_session() as session:
            rows = session.scalars(select(PersonRow).order_by(PersonRow.last_name, PersonRow.first_name)).all()
            return [to_model(PersonProfile, r) for r in rows]

    def list_projects(self) -> list[MasterProject]:
        with get_session() as session:
            rows = session.scalars(select(ProjectRow).order_by(ProjectRow.name)).all()
            return [to_model(MasterProject, r) for r in rows]
