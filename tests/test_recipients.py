"""Tests for manager recipient selection."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from resource_health.models.people import PersonProfile
from resource_health.notifications.recipients import lab_managers


def _person(pid: str, role: str) -> PersonProfile:
    return PersonProfile(id=pid, first_name=pid, last_name="Test", role=role)


def test_selects_manager_roles_in_order():
    """Managers are kept in input order."""
    people = [
        _person("r1", "Researcher"),
        _person("pi", "PI"),
        _person("mgr", "Lab Manager"),
        _person("st", "Student"),
        _person("adm", "Administrator"),
    ]
    assert [p.id for p in lab_managers(people)] == ["pi", "mgr", "adm"]


def test_roles_match_exactly():
    """Role labels are case and whitespace sensitive."""
    people = [_person("a", "pi"), _person("b", "lab manager"), _person("c", "Lab Manager "), _person("d", "")]
    assert lab_managers(people) == []


def test_empty_input():
    """No profiles means no recipients."""
    assert lab_managers([]) == []
