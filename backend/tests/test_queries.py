from __future__ import annotations

import pytest
from sqlalchemy.orm import Session

from timesheets import services
from timesheets.validation import ValidationError


@pytest.fixture()
def seeded(session: Session, make_payload) -> dict[str, int]:
    rows = {
        "alice_ticket": make_payload(name="Alice Smith", category="Ticket", ticket_reference=None),
        "alice_meeting": make_payload(name="alice sync", category="Meeting", ticket_reference="MEET-1"),
        "bob": make_payload(name="Bob", category="Development & Testing", ticket_reference="BUG-123"),
        "percent": make_payload(name="Load at 100% CPU", category="Other", ticket_reference=None),
    }
    return {key: services.create_timesheet(session, payload).id for key, payload in rows.items()}


def _ids(records) -> set[int]:
    return {record.id for record in records}


def test_query_matches_ticket_reference_case_insensitively(session: Session, seeded) -> None:
    assert _ids(services.list_timesheets(session, query="bug")) == {seeded["bob"]}


def test_query_matches_name_case_insensitively(session: Session, seeded) -> None:
    assert _ids(services.list_timesheets(session, query="ALICE")) == {
        seeded["alice_ticket"],
        seeded["alice_meeting"],
    }


def test_null_ticket_reference_does_not_match(session: Session, seeded) -> None:
    assert services.list_timesheets(session, query="MEET") != []
    assert _ids(services.list_timesheets(session, query="MEET")) == {seeded["alice_meeting"]}


def test_category_filter_is_exact(session: Session, seeded) -> None:
    records = services.list_timesheets(session, category="Meeting")
    assert _ids(records) == {seeded["alice_meeting"]}
    assert all(record.category == "Meeting" for record in records)


def test_query_and_category_combine_with_and(session: Session, seeded) -> None:
    records = services.list_timesheets(session, query="alice", category="Ticket")
    assert _ids(records) == {seeded["alice_ticket"]}


def test_no_criteria_returns_everything(session: Session, seeded) -> None:
    assert _ids(services.list_timesheets(session)) == set(seeded.values())
    assert _ids(services.list_timesheets(session, query="", category="")) == set(seeded.values())


def test_like_wildcards_are_literal(session: Session, seeded) -> None:
    assert _ids(services.list_timesheets(session, query="100%")) == {seeded["percent"]}
    assert services.list_timesheets(session, query="_") == []


def test_unknown_category_filter_is_rejected(session: Session, seeded) -> None:
    with pytest.raises(ValidationError):
        services.list_timesheets(session, category="Lunch")


def test_results_are_newest_first(session: Session, make_payload) -> None:
    first = services.create_timesheet(session, make_payload(name="first"))
    second = services.create_timesheet(session, make_payload(name="second"))
    third = services.create_timesheet(session, make_payload(name="third"))

    records = services.list_timesheets(session)

    assert [record.id for record in records] == [third.id, second.id, first.id]


def test_query_folds_non_ascii_letters(session: Session, make_payload) -> None:
    record = services.create_timesheet(session, make_payload(name="Ärger mit Kunde", ticket_reference=None))

    assert _ids(services.list_timesheets(session, query="ärger")) == {record.id}
    assert _ids(services.list_timesheets(session, query="ÄRGER MIT")) == {record.id}
