from datetime import date, datetime

from app.models.interaction import Interaction
from app.services.followups import (
    EMPTY_BOARD_MESSAGE,
    EMPTY_SEARCH_MESSAGE,
    UNKNOWN_CUSTOMER,
    build_board,
    customer_display_name,
    delete_prompt,
    is_pending_followup,
    matches_search,
    split_by_due,
)

TODAY = date(2026, 10, 19)
CUSTOMERS = {"c1": "Ada Lovelace", "c2": "Grace Hopper"}


def _it(id, type="followup", due=None, status="pending", notes="", customer_id="c1"):
    return Interaction(id=id, customer_id=customer_id, type=type, due_date=due, status=status, notes=notes)


def test_pending_rule():
    assert is_pending_followup(_it("a"))
    assert is_pending_followup(_it("b", type="call", due=datetime(2026, 10, 1)))
    assert not is_pending_followup(_it("c", type="call"))
    assert not is_pending_followup(_it("d", status="done", due=datetime(2026, 10, 1)))


def test_split_by_due_today_is_upcoming():
    rows = [
        _it("past", due=datetime(2026, 10, 18, 23, 59)),
        _it("today_morning", due=datetime(2026, 10, 19, 0, 0)),
        _it("today_late", due=datetime(2026, 10, 19, 18, 30)),
        _it("future", due=datetime(2026, 11, 2)),
        _it("undated"),
    ]
    overdue, upcoming = split_by_due(rows, TODAY)
    assert [r.id for r in overdue] == ["past"]
    assert [r.id for r in upcoming] == ["today_morning", "today_late", "future"]


def test_search_is_case_insensitive_on_name_or_notes():
    row = _it("a", notes="Send the Q4 PROPOSAL")
    assert matches_search(row, "Ada Lovelace", "lovelace")
    assert matches_search(row, "Ada Lovelace", "proposal")
    assert matches_search(row, "Ada Lovelace", "")
    assert not matches_search(row, "Ada Lovelace", "hopper")
    assert matches_search(_it("b", notes="x"), None, "") is True


def test_customer_display_name_falls_back():
    assert customer_display_name(CUSTOMERS, "c2") == "Grace Hopper"
    assert customer_display_name(CUSTOMERS, "missing") == UNKNOWN_CUSTOMER


def test_board_buckets_and_counts():
    rows = [
        _it("late", due=datetime(2026, 10, 10), notes="call back"),
        _it("soon", due=datetime(2026, 10, 25), customer_id="c2"),
        _it("undated"),
        _it("done", due=datetime(2026, 10, 1), status="done"),
        _it("plain_call", type="call"),
    ]
    board = build_board(rows, CUSTOMERS, today=TODAY)

    assert [c.id for c in board.overdue] == ["late"]
    assert board.overdue[0].badge == "Overdue"
    assert board.overdue[0].customer_name == "Ada Lovelace"
    assert [c.id for c in board.upcoming] == ["soon"]
    assert board.upcoming[0].badge is None
    assert board.counts.overdue == 1
    assert board.counts.upcoming == 1
    assert board.counts.total_pending == 3
    assert board.counts.matching == 3
    assert board.empty_message is None
    assert board.show_schedule_action is False


def test_total_pending_ignores_search():
    rows = [
        _it("a", due=datetime(2026, 10, 10)),
        _it("b", due=datetime(2026, 10, 25), customer_id="c2"),
    ]
    board = build_board(rows, CUSTOMERS, search="GRACE", today=TODAY)
    assert board.counts.total_pending == 2
    assert board.counts.matching == 1
    assert [c.id for c in board.upcoming] == ["b"]
    assert board.overdue == []


def test_unknown_customer_only_matches_on_notes():
    rows = [_it("a", due=datetime(2026, 10, 25), customer_id="ghost", notes="renewal")]
    assert build_board(rows, CUSTOMERS, search="unknown", today=TODAY).counts.matching == 0
    board = build_board(rows, CUSTOMERS, search="renewal", today=TODAY)
    assert board.upcoming[0].customer_name == UNKNOWN_CUSTOMER


def test_empty_states():
    empty = build_board([], CUSTOMERS, today=TODAY)
    assert empty.empty_message == EMPTY_BOARD_MESSAGE
    assert empty.show_schedule_action is True

    rows = [_it("a", due=datetime(2026, 10, 25))]
    no_match = build_board(rows, CUSTOMERS, search="zzz", today=TODAY)
    assert no_match.empty_message == EMPTY_SEARCH_MESSAGE
    assert no_match.show_schedule_action is False


def test_undated_match_suppresses_empty_state():
    board = build_board([_it("a")], CUSTOMERS, today=TODAY)
    assert board.overdue == [] and board.upcoming == []
    assert board.empty_message is None
    assert board.counts.total_pending == 1


def test_delete_prompt_text():
    prompt = delete_prompt(_it("a", type="meeting"))
    assert prompt.title == "Delete Follow-up"
    assert prompt.description == "Are you sure you want to delete this follow-up"
    assert prompt.item_name == "meeting"
