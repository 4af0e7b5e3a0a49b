"""Tech-support waiting lists: tickets, priorities and the queues that hold them."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from tsms.linked_list import LinkedList

SEPARATOR = "-------------------------"

_TIME_PATTERN = re.compile(r"\s*([+-]?\d+):\s*([+-]?\d+)")


class Priority(IntEnum):
    """Support priority; lower values are attended first."""

    HIGH = 1
    MID = 2
    LOW = 3


@dataclass(frozen=True)
class ClockTime:
    """A time of day on a 24-hour clock."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59):
            raise InvalidTimeError(f"time out of range: {self.hour}:{self.minute}")

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass
class Ticket:
    """A user waiting for support."""

    user_id: int
    description: str
    time: ClockTime
    priority: Priority = Priority.LOW


class SupportError(Exception):
    """Base class for errors raised by the ticket system."""


class InvalidIdError(SupportError, ValueError):
    """A user ID is not a non-negative whole number."""


class DuplicateIdError(SupportError):
    """A user ID is already registered."""


class UnknownUserError(SupportError, LookupError):
    """No waiting user has the requested ID."""


class InvalidPriorityError(SupportError, ValueError):
    """A priority is not one of 1, 2 or 3."""


class InvalidTimeError(SupportError, ValueError):
    """A time is not a valid 'hh:mm' on a 24-hour clock."""


class EmptyQueueError(SupportError):
    """Nobody is waiting."""


def is_numeric(text: str) -> bool:
    """Return True if text is non-empty and made only of ASCII digits."""
    return bool(text) and all(char in "0123456789" for char in text)


def _first_token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def parse_id(text: str) -> int:
    """Parse the first word of text as a user ID."""
    token = _first_token(text)
    if not is_numeric(token):
        raise InvalidIdError(f"invalid user ID: {text!r}")
    return int(token)


def parse_time(text: str) -> ClockTime:
    """Parse an 'hh:mm' time on a 24-hour clock."""
    match = _TIME_PATTERN.match(text)
    if match is None:
        raise InvalidTimeError(f"invalid time: {text!r}")
    return ClockTime(int(match.group(1)), int(match.group(2)))


def parse_priority(text: str) -> Priority:
    """Parse the first word of text as a priority number (1, 2 or 3)."""
    token = _first_token(text)
    if not is_numeric(token):
        raise InvalidPriorityError(f"invalid priority: {text!r}")
    return _to_priority(int(token))


def _to_priority(value: int) -> Priority:
    try:
        return Priority(value)
    except ValueError:
        raise InvalidPriorityError(f"invalid priority: {value!r}") from None


def format_ticket(ticket: Ticket) -> str:
    """Render a ticket as the block of lines shown to the operator."""
    return (
        f"User ID: {ticket.user_id}\n"
        f"User DESC: {ticket.description}\n"
        f"User PRIORITY: {ticket.priority.name}\n"
        f"User TIME: {ticket.time}\n"
        f"{SEPARATOR}\n"
    )


class TicketSystem:
    """Three first-come first-served queues, one for each priority."""

    def __init__(self) -> None:
        self._queues: dict[Priority, LinkedList] = {
            priority: LinkedList() for priority in Priority
        }

    @staticmethod
    def _search(queue: LinkedList, user_id: int) -> Ticket | None:
        return next((t for t in queue if t.user_id == user_id), None)

    def register(self, user_id: int, description: str, time: ClockTime) -> Ticket:
        """Add a new user at the end of the low-priority queue."""
        if user_id < 0:
            raise InvalidIdError(f"invalid user ID: {user_id!r}")
        for priority in (Priority.LOW, Priority.MID, Priority.HIGH):
            if self._search(self._queues[priority], user_id) is not None:
                raise DuplicateIdError(f"ID {user_id} is already in use")
        ticket = Ticket(user_id, description, time)
        self._queues[Priority.LOW].push_back(ticket)
        return ticket

    def find(self, user_id: int) -> Ticket:
        """Return the waiting user with this ID, searching high to low."""
        for priority in Priority:
            ticket = self._search(self._queues[priority], user_id)
            if ticket is not None:
                return ticket
        raise UnknownUserError(f"the user with id {user_id} does not exist")

    def set_priority(self, user_id: int, priority: int) -> Ticket:
        """Move a low-priority user to the end of the queue for priority.

        Only users still in the low-priority queue can be moved; choosing
        the low priority again leaves the user where it is.
        """
        low = self._queues[Priority.LOW]
        ticket = self._search(low, user_id)
        if ticket is None:
            raise UnknownUserError(f"no low-priority user with id {user_id}")
        new_priority = _to_priority(priority)
        if new_priority is Priority.LOW:
            return ticket
        ticket.priority = new_priority
        self._queues[new_priority].push_back(ticket)
        self._remove(low, user_id)
        return ticket

    @staticmethod
    def _remove(queue: LinkedList, user_id: int) -> None:
        item = queue.first()
        while item is not None:
            if item.user_id == user_id:
                queue.pop_current()
                return
            item = queue.next()

    def attend_next(self) -> Ticket:
        """Remove and return the next user to attend."""
        for priority in Priority:
            queue = self._queues[priority]
            if queue.first() is not None:
                return queue.pop_current()
        raise EmptyQueueError("there is no one left in the list")

    def queue(self, priority: int) -> list[Ticket]:
        """Return the users waiting with the given priority, in order."""
        return list(self._queues[_to_priority(priority)])

    def waiting(self) -> dict[Priority, list[Ticket]]:
        """Return every queue, from high to low priority."""
        return {priority: list(self._queues[priority]) for priority in Priority}