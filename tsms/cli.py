"""Interactive menu for the tech-support waiting lists."""

from __future__ import annotations

import argparse
import re
import subprocess
import sys
from collections.abc import Callable
from typing import Optional, TextIO

from tsms.support import (
    SEPARATOR,
    DuplicateIdError,
    EmptyQueueError,
    InvalidIdError,
    InvalidPriorityError,
    InvalidTimeError,
    Priority,
    TicketSystem,
    UnknownUserError,
    format_ticket,
    is_numeric,
    parse_id,
    parse_time,
)

_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


def menu_text() -> str:
    """Return the main menu as printed before every choice."""
    return (
        "========================================\n"
        "     Tech Support Management System\n"
        "========================================\n"
        "1) Register user\n"
        "2) Assign priority to user\n"
        "3) Show waiting list\n"
        "4) Attent next user\n"
        "5) Search for user\n"
        "6) Exit\n\n"
    )


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    try:
        if sys.platform.startswith("win"):
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _scan_int(text: str) -> Optional[int]:
    match = _INT_PATTERN.match(text)
    return None if match is None else int(match.group(1))


class Console:
    """Text front end that reads commands from stdin and writes to stdout."""

    def __init__(
        self,
        system: Optional[TicketSystem] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear: Optional[Callable[[], None]] = None,
    ) -> None:
        self.system = system if system is not None else TicketSystem()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._clear = clear if clear is not None else clear_screen

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _read(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def run(self) -> None:
        """Show the menu and carry out choices until the user exits."""
        try:
            while True:
                self._write(menu_text())
                option = _scan_int(self._read())
                if option == 1:
                    self.register_user()
                elif option == 2:
                    self.assign_priority()
                elif option == 3:
                    self.show_waiting_list()
                    self._read()
                    self._clear()
                elif option == 4:
                    self.attend_next_user()
                elif option == 5:
                    self.search_user()
                elif option == 6:
                    self._write("Closing Tech Support Management System...\n")
                    break
                else:
                    self._write("Invalid option, please try again\n")
                self._write("Press any key to return to the main menu.\n")
                self._read()
        except EOFError:
            return
        self._write("Thank you for using TSMS, see you later!\n")

    def register_user(self) -> None:
        """Ask for an ID, a description and a time, and register the user."""
        self._write("Insert User ID:\n")
        try:
            user_id = parse_id(self._read())
        except InvalidIdError:
            self._clear()
            self._write("Invalid Value, returning to main menu...\n")
            return

        try:
            self.system.find(user_id)
        except UnknownUserError:
            pass
        else:
            self._clear()
            self._write("This ID is already in use, please start again.\n")
            return

        self._write("Describe the Problem:\n")
        description = self._read()

        self._write("Insert current time:\n")
        self._write("Format must be in 24h and added as 'hh:mm'\n")
        try:
            time = parse_time(self._read())
        except InvalidTimeError:
            self._clear()
            self._write("Invalid time format, returning to main menu...\n")
            return

        try:
            self.system.register(user_id, description, time)
        except DuplicateIdError:
            self._clear()
            self._write("This ID is already in use, please start again.\n")
            return
        self._clear()
        self._write("User has been added to the list correctly.\n")

    def assign_priority(self) -> None:
        """Ask for a low-priority user and move it to a new priority."""
        self._write("Enter the User's ID to update priority:\n")
        user_id = _scan_int(self._read())
        low = self.system.queue(Priority.LOW)
        if user_id is None or not any(t.user_id == user_id for t in low):
            self._clear()
            self._write("The Value inserted is invalid, returning to main menu...\n")
            return

        self._write(f"The User with ID '{user_id}' has been found.\n")
        self._write("Please insert new priority (High = 1, Mid = 2 or Low = 3):\n")
        words = self._read().split()
        token = words[0] if words else ""
        if not is_numeric(token):
            self._clear()
            self._write("Invalid priority. User will remain in current list.\n")
            return

        self._clear()
        try:
            ticket = self.system.set_priority(user_id, int(token))
        except InvalidPriorityError:
            self._write("Invalid priority. Usuario will remain in current list.\n")
            return
        if ticket.priority is Priority.LOW:
            self._write("Priority has been kept the same.\n")
        else:
            self._write("Priority has been changed correctly.\n")

    def show_waiting_list(self) -> None:
        """Print every queue from high to low priority."""
        self._write("Showing waiting list...\n")
        titles = {Priority.HIGH: "High", Priority.MID: "Mid", Priority.LOW: "Low"}
        for priority, tickets in self.system.waiting().items():
            self._write(f"\n{titles[priority]} Priority:\n")
            if tickets:
                self._write(SEPARATOR + "\n")
                self._write("".join(format_ticket(t) for t in tickets))

    def attend_next_user(self) -> None:
        """Remove the next user to attend and print its details."""
        self._clear()
        try:
            ticket = self.system.attend_next()
        except EmptyQueueError:
            self._write("There is no one left in the list, returning to main menu...\n")
            return
        self._write("Processing next User on the list...\n")
        self._write(SEPARATOR + "\n")
        self._write(format_ticket(ticket))

    def search_user(self) -> None:
        """Ask for an ID and print the matching waiting user."""
        self._write("Insert the ID you are searching for\n")
        raw = self._read()
        user_id = _scan_int(raw)
        self._clear()
        try:
            if user_id is None:
                raise UnknownUserError(raw)
            ticket = self.system.find(user_id)
        except UnknownUserError:
            shown = raw.strip() if user_id is None else user_id
            self._write(
                f"The User with id {shown} does not exist, returning to main menu...\n"
            )
            return
        self._write(SEPARATOR + "\n")
        self._write(format_ticket(ticket))


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive tech-support console."""
    parser = argparse.ArgumentParser(
        prog="tsms", description="Tech Support Management System"
    )
    parser.parse_args(argv)
    Console().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())