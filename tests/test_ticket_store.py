import pytest

from flightdesk.errors import NotFound
from flightdesk.store import TicketStore
from flightdesk.store.records import INITIAL_CAPACITY


def test_book_numbers_tickets_from_one():
    store = TicketStore()
    tickets = [store.book(name, 42, seat) for name, seat in (("Ann", 1), ("Bob", 2), ("Cy", 3))]
    assert [t.ticket_id for t in tickets] == [1, 2, 3]


def test_cancel_second_of_three():
    store = TicketStore()
    for name in ("Ann", "Bob", "Cy"):
        store.book(name, 42, 1)

    store.cancel(2)

    assert [t.ticket_id for t in store.list_all()] == [1, 3]
    assert len(store) == 2


def test_next_id_is_count_plus_one_after_cancel():
    store = TicketStore()
    for name in ("Ann", "Bob", "Cy"):
        store.book(name, 42, 1)
    store.cancel(2)

    ticket = store.book("Di", 42, 4)

    # Two live tickets now share ID 3; cancelling by ID removes the earlier one.
    assert ticket.ticket_id == 3
    assert [t.ticket_id for t in store.list_all()] == [1, 3, 3]
    assert store.cancel(3).passenger_name == "Cy"
    assert store.search(3) is ticket


def test_cancel_unknown():
    store = TicketStore()
    with pytest.raises(NotFound):
        store.cancel(1)


def test_seat_and_flight_are_not_checked():
    store = TicketStore()
    store.book("Ann", 99999, 5000)
    store.book("Bob", 99999, 5000)
    assert len(store) == 2


def test_seats_for_flight():
    store = TicketStore()
    store.book("Ann", 1, 10)
    store.book("Bob", 2, 11)
    store.book("Cy", 1, 12)
    assert [(t.seat_no, t.passenger_name) for t in store.seats_for_flight(1)] == [(10, "Ann"), (12, "Cy")]
    assert store.seats_for_flight(3) == []


def test_growth_doubles():
    store = TicketStore()
    for i in range(INITIAL_CAPACITY):
        store.book(f"P{i}", 1, i + 1)
    assert store.capacity == INITIAL_CAPACITY
    store.book("one more", 1, 99)
    assert store.capacity == INITIAL_CAPACITY * 2


def test_grows_after_loading_an_empty_file(tmp_path):
    path = tmp_path / "tickets.txt"
    path.write_text("0\n")
    store = TicketStore()
    store.load(path)
    assert store.capacity == 0

    store.book("Ann", 1, 1)
    assert store.capacity == INITIAL_CAPACITY
    assert len(store) == 1


def test_save_and_load(tmp_path):
    path = tmp_path / "tickets.txt"
    store = TicketStore()
    store.book("Ann", 1, 10)
    store.book("Bob", 2, 11)
    store.save(path)

    loaded = TicketStore()
    loaded.load(path)
    assert list(loaded.list_all()) == list(store.list_all())
