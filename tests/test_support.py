import pytest

from tsms.support import (
    ClockTime,
    DuplicateIdError,
    EmptyQueueError,
    InvalidIdError,
    InvalidPriorityError,
    InvalidTimeError,
    Priority,
    SupportError,
    Ticket,
    TicketSystem,
    UnknownUserError,
    format_ticket,
    is_numeric,
    parse_id,
    parse_priority,
    parse_time,
)


@pytest.fixture
def system():
    return TicketSystem()


def _ids(tickets):
    return [t.user_id for t in tickets]


@pytest.mark.parametrize("text", ["0", "42", "0007"])
def test_is_numeric_accepts_digits(text):
    assert is_numeric(text) is True


@pytest.mark.parametrize("text", ["", "-1", "12a", " 3", "1.5", "٣"])
def test_is_numeric_rejects_other_text(text):
    assert is_numeric(text) is False


def test_parse_id_reads_first_word():
    assert parse_id("  17 extra") == 17


@pytest.mark.parametrize("text", ["", "abc", "-5", "4x"])
def test_parse_id_rejects(text):
    with pytest.raises(InvalidIdError):
        parse_id(text)


def test_parse_time_valid():
    assert parse_time("09:05") == ClockTime(9, 5)
    assert parse_time(" 23:59\n") == ClockTime(23, 59)


@pytest.mark.parametrize("text", ["24:00", "12:60", "-1:10", "1230", "12 :30", "ab:cd", ""])
def test_parse_time_rejects(text):
    with pytest.raises(InvalidTimeError):
        parse_time(text)


def test_clock_time_str_pads():
    assert str(ClockTime(9, 5)) == "09:05"


def test_parse_priority():
    assert parse_priority("1") is Priority.HIGH
    assert parse_priority("2") is Priority.MID
    assert parse_priority("3") is Priority.LOW


@pytest.mark.parametrize("text", ["0", "4", "high", "", "-1"])
def test_parse_priority_rejects(text):
    with pytest.raises(InvalidPriorityError):
        parse_priority(text)


def test_format_ticket():
    ticket = Ticket(7, "printer jam", ClockTime(9, 5), Priority.HIGH)
    lines = format_ticket(ticket).splitlines()
    assert lines == [
        "User ID: 7",
        "User DESC: printer jam",
        "User PRIORITY: HIGH",
        "User TIME: 09:05",
        "-------------------------",
    ]


def test_register_puts_user_in_low_queue(system):
    ticket = system.register(1, "no network", ClockTime(8, 0))
    assert ticket.priority is Priority.LOW
    assert system.queue(Priority.LOW) == [ticket]
    assert system.queue(Priority.HIGH) == []


def test_register_duplicate_id(system):
    system.register(1, "a", ClockTime(8, 0))
    with pytest.raises(DuplicateIdError):
        system.register(1, "b", ClockTime(8, 1))


def test_register_duplicate_id_in_other_queue(system):
    system.register(1, "a", ClockTime(8, 0))
    system.set_priority(1, Priority.HIGH)
    with pytest.raises(DuplicateIdError):
        system.register(1, "b", ClockTime(8, 1))


def test_set_priority_moves_user(system):
    system.register(1, "a", ClockTime(8, 0))
    system.register(2, "b", ClockTime(8, 1))
    system.register(3, "c", ClockTime(8, 2))
    ticket = system.set_priority(2, 2)
    assert ticket.priority is Priority.MID
    assert _ids(system.queue(Priority.MID)) == [2]
    assert _ids(system.queue(Priority.LOW)) == [1, 3]


def test_set_priority_low_keeps_user(system):
    system.register(1, "a", ClockTime(8, 0))
    ticket = system.set_priority(1, Priority.LOW)
    assert ticket.priority is Priority.LOW
    assert _ids(system.queue(Priority.LOW)) == [1]


def test_set_priority_only_from_low_queue(system):
    system.register(1, "a", ClockTime(8, 0))
    system.set_priority(1, Priority.HIGH)
    with pytest.raises(UnknownUserError):
        system.set_priority(1, Priority.MID)


def test_set_priority_invalid_value(system):
    system.register(1, "a", ClockTime(8, 0))
    with pytest.raises(InvalidPriorityError):
        system.set_priority(1, 9)
    assert _ids(system.queue(Priority.LOW)) == [1]


def test_find_searches_all_queues(system):
    system.register(1, "a", ClockTime(8, 0))
    system.register(2, "b", ClockTime(8, 1))
    system.set_priority(2, Priority.HIGH)
    assert system.find(1).description == "a"
    assert system.find(2).priority is Priority.HIGH


def test_find_unknown(system):
    with pytest.raises(UnknownUserError):
        system.find(99)


def test_attend_next_order(system):
    for user_id in (1, 2, 3, 4):
        system.register(user_id, "x", ClockTime(10, user_id))
    system.set_priority(3, Priority.MID)
    system.set_priority(4, Priority.HIGH)
    system.set_priority(2, Priority.HIGH)
    order = [system.attend_next().user_id for _ in range(4)]
    assert order == [4, 2, 3, 1]
    with pytest.raises(EmptyQueueError):
        system.attend_next()


def test_waiting_lists_all_queues_in_order(system):
    system.register(1, "a", ClockTime(8, 0))
    system.register(2, "b", ClockTime(8, 1))
    system.set_priority(1, Priority.MID)
    waiting = system.waiting()
    assert list(waiting) == [Priority.HIGH, Priority.MID, Priority.LOW]
    assert _ids(waiting[Priority.MID]) == [1]
    assert _ids(waiting[Priority.LOW]) == [2]


def test_errors_share_base_class():
    with pytest.raises(SupportError):
        TicketSystem().attend_next()