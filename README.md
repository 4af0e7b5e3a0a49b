# tsms

A small console Tech Support Management System. Users register a support
request with a numeric ID, a description of the problem and the time they
arrived. Every request starts at low priority. An operator can raise a
low-priority request to mid or high. Requests are attended in priority order:
high first, then mid, then low. Within one priority they are attended in the
order they were queued.

## Installing

```
pip install .
```

## Running

```
tsms
```

The command takes no options besides `--help`. It prints a menu and reads
one choice per line:

1. Register user. Enter a numeric ID, which must be unique across all
   queues, then a problem description, then the current time as `hh:mm` in
   24-hour form. The new user goes to the end of the low-priority queue.
2. Assign priority to user. Enter the ID of a user who is still in the
   low-priority queue, then `1` for high or `2` for mid. The user moves to
   the end of that queue. Entering `3` leaves the user where they are.
3. Show waiting list. Prints every queued user, grouped by priority.
4. Attend next user. Prints the next user in line and removes them.
5. Search for user. Prints a user's details by ID, whichever queue they
   are in.
6. Exit.

After each action the program waits for a line before it shows the menu
again. The screen is cleared with the platform's `clear` or `cls` command.
Input ends when option 6 is chosen or when standard input reaches end of
file.

## Using it from Python

```python
from tsms.support import ClockTime, Priority, TicketSystem, format_ticket

system = TicketSystem()
system.register(7, "Printer does not respond", ClockTime(9, 30))
system.set_priority(7, Priority.HIGH)
ticket = system.attend_next()
print(format_ticket(ticket))
```

`tsms.support` provides the following:

- `Priority` is an `IntEnum` with the members `HIGH = 1`, `MID = 2` and
  `LOW = 3`.
- `ClockTime(hour, minute)` is a 24-hour time that is checked when it is
  created. Its `str()` has the form `hh:mm`.
- `Ticket` holds `user_id`, `description`, `time` and `priority`.
- `TicketSystem` offers these methods:
  - `register(user_id, description, time)`
  - `find(user_id)`
  - `set_priority(user_id, priority)`, which moves only low-priority users.
  - `attend_next()`
  - `queue(priority)`, which returns a list of tickets.
  - `waiting()`, which returns a dict from each `Priority` to its tickets,
    from high to low.
- `parse_id`, `parse_time` and `parse_priority` turn typed text into values.
  `is_numeric` checks for a string made only of digits.
- `format_ticket(ticket)` renders a ticket as the block of lines the console
  prints.

Errors are raised as subclasses of `SupportError`:

- `InvalidIdError`
- `InvalidTimeError`
- `InvalidPriorityError`
- `DuplicateIdError`
- `UnknownUserError`
- `EmptyQueueError`

`tsms.cli.Console(system, stdin, stdout, clear)` is the interactive front
end. All four arguments are optional, so the console can be driven from any
text streams. `menu_text()` returns the menu as printed. `main(argv=None)` is
the function behind the `tsms` command.

`tsms.linked_list.LinkedList` is the singly linked list that backs each
queue. It has a movable cursor and these methods:

- `first` and `next` move the cursor.
- `push_front`, `push_back` and `push_current` insert data.
- `pop_front` and `pop_current` remove data.
- `clean` removes everything.

The list also supports iteration and `len`.

## What it does not do

The queues live in memory only. Nothing is saved, so every waiting user is
lost when the program exits. Users cannot be edited, removed other than by
being attended, or moved out of the mid or high queues.

## Tests

```
pip install .[test]
pytest
```