from __future__ import annotations

import pytest

from event_checkin.core.enums import AttendanceState
from event_checkin.core.exceptions import DuplicateError, ValidationError
from event_checkin.registrations.model import RegistrationCounts
from event_checkin.registrations.service import RegistrationService


def test_register_then_list_shows_one_unattended_record(repo):
    svc = RegistrationService(repo)

    reg = svc.register("Alice", "a@x.com", "R1")

    rows = svc.list()
    assert [r.registration_id for r in rows] == [1]
    assert rows[0] == reg
    assert rows[0].attended is False
    assert rows[0].state is AttendanceState.REGISTERED


def test_ids_are_max_plus_one_in_insertion_order(repo):
    svc = RegistrationService(repo)

    ids = [svc.register(f"P{i}", f"p{i}@x.com", f"R{i}").registration_id for i in range(1, 4)]

    assert ids == [1, 2, 3]
    assert [r.roll for r in svc.list()] == ["R1", "R2", "R3"]


@pytest.mark.parametrize(
    "email, roll",
    [
        ("a@x.com", "R2"),
        ("b@x.com", "R1"),
        ("a@x.com", "R1"),
    ],
)
def test_duplicate_email_or_roll_is_rejected_without_mutation(repo, email, roll):
    svc = RegistrationService(repo)
    svc.register("Alice", "a@x.com", "R1")

    with pytest.raises(DuplicateError):
        svc.register("Bob", email, roll)

    assert len(svc.list()) == 1
    assert svc.counts() == RegistrationCounts(total_registered=1, total_attended=0)


def test_duplicate_check_is_case_sensitive(repo):
    svc = RegistrationService(repo)
    svc.register("Alice", "a@x.com", "R1")

    reg = svc.register("Alice Again", "A@x.com", "r1")

    assert reg.registration_id == 2


@pytest.mark.parametrize(
    "name, email, roll",
    [
        ("", "a@x.com", "R1"),
        ("Alice", "   ", "R1"),
        ("Alice", "a@x.com", None),
        (None, None, None),
        ("Alice", "a@x.com", 7),
    ],
)
def test_missing_fields_raise_validation_error(repo, name, email, roll):
    svc = RegistrationService(repo)

    with pytest.raises(ValidationError):
        svc.register(name, email, roll)

    assert svc.list() == []


def test_fields_are_stripped(repo):
    svc = RegistrationService(repo)

    reg = svc.register("  Alice ", " a@x.com", "R1 ")

    assert (reg.name, reg.email, reg.roll) == ("Alice", "a@x.com", "R1")
    with pytest.raises(DuplicateError):
        svc.register("Other", "a@x.com", "R9")


def test_find_by_id(repo):
    svc = RegistrationService(repo)
    reg = svc.register("Alice", "a@x.com", "R1")

    assert svc.find_by_id(reg.registration_id) == reg
    assert svc.find_by_id("1") == reg
    assert svc.find_by_id(99) is None


def test_find_by_id_rejects_non_numeric(repo):
    svc = RegistrationService(repo)

    with pytest.raises(ValidationError):
        svc.find_by_id("abc")


def test_counts_on_empty_store(repo):
    assert RegistrationService(repo).counts() == RegistrationCounts(0, 0)


def test_find_by_id_beyond_storage_range_is_none(repo):
    svc = RegistrationService(repo)
    svc.register("Alice", "a@x.com", "R1")

    assert svc.find_by_id("99999999999999999999999") is None
    assert svc.find_by_id(2**63) is None
