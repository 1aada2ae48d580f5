"""Pick who receives operational alerts."""

from resource_health.models.people import PersonProfile

# Exact, case-sensitive role labels that receive stock and budget alerts
MANAGER_ROLES = frozenset({"PI", "Lab Manager", "Administrator"})


def lab_managers(profiles: list[PersonProfile]) -> list[PersonProfile]:
    """Profiles whose role is a manager role, in input order."""
    return [p for p in profiles if p.role in MANAGER_ROLES]
