"""Console front end for the user directory.

This module renders the user list and an add‑user form in a terminal
and lets the operator create, rename and delete users.  It talks to
the service through :class:`user_directory_api.UserDirectoryAPI`.

State lives in :class:`DirectoryView`.  The view never changes its
user list on its own: a record is appended, replaced or removed only
after the server has confirmed the operation, and it is always the
record returned by the server that is stored.  A failed request leaves
the state where it was and sets :attr:`DirectoryView.error`, which is
cleared again by the next action.

Commands understood by the console loop::

    list                 reload users from the server
    add <name>           create a user
    edit <id>            start editing a user
    save [name]          save the edit buffer, or [name] instead
    cancel               leave edit mode
    delete <id>          delete a user (asks for confirmation)
    help                 show this list
    quit                 leave the console

Usage:
    python directory_console.py --mode development
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Callable, Dict, List, Optional

from user_directory_api import UserDirectoryAPI, resolve_api_base_url


logger = logging.getLogger(__name__)

Confirm = Callable[[Dict[str, Any]], bool]

HELP_TEXT = """Commands:
  list                 reload users from the server
  add <name>           create a user
  edit <id>            start editing a user
  save [name]          save the edit buffer, or [name] instead
  cancel               leave edit mode
  delete <id>          delete a user (asks for confirmation)
  help                 show this list
  quit                 leave the console"""


class DirectoryView:
    """UI state of the user directory and the flows that change it."""

    def __init__(self, api: UserDirectoryAPI) -> None:
        self.api = api
        self.users: List[Dict[str, Any]] = []
        self.loading = False
        self.error: Optional[str] = None
        # Contents of the "new user" input field.
        self.new_name = ""
        # Inline edit state; ``editing_id`` is ``None`` outside edit mode.
        self.editing_id: Optional[int] = None
        self.edit_name = ""

    # ------------------------------------------------------------------
    # Flows
    # ------------------------------------------------------------------
    def load(self) -> bool:
        """Check service health, then fetch the user list.

        A failed health check is only logged; a failed list request is
        shown to the user.
        """
        self.error = None
        self.loading = True
        _, health_error = self.api.health_check()
        if health_error:
            logger.warning("Health check failed: %s", health_error["message"])
        users, error = self.api.list_users()
        self.loading = False
        if error:
            self.error = f"Failed to fetch users: {error['message']}"
            return False
        self.users = users
        return True

    def submit(self, name: Optional[str] = None) -> bool:
        """Create a user from the input field (or ``name`` when given)."""
        self.error = None
        if name is not None:
            self.new_name = name
        if not self.new_name.strip():
            self.error = "Please enter a name"
            return False
        user, error = self.api.create_user(self.new_name)
        if error:
            self.error = f"Failed to create user: {error['message']}"
            return False
        self.users.append(user)
        self.new_name = ""
        return True

    def start_edit(self, user_id: int) -> bool:
        """Enter edit mode for ``user_id`` with its current name in the buffer."""
        self.error = None
        user = self._find(user_id)
        if user is None:
            self.error = f"No user with id {user_id}"
            return False
        self.editing_id = user["id"]
        self.edit_name = user["name"]
        return True

    def cancel_edit(self) -> None:
        self.error = None
        self.editing_id = None
        self.edit_name = ""

    def save_edit(self, name: Optional[str] = None) -> bool:
        """Send the edit buffer (or ``name`` when given) to the server.

        Edit mode is left only when the server accepted the new name.
        """
        self.error = None
        if self.editing_id is None:
            self.error = "No user is being edited"
            return False
        if name is not None:
            self.edit_name = name
        if not self.edit_name.strip():
            self.error = "Name cannot be empty"
            return False
        updated, error = self.api.update_user(self.editing_id, self.edit_name)
        if error:
            self.error = f"Failed to update user: {error['message']}"
            return False
        self.users = [updated if user["id"] == updated["id"] else user for user in self.users]
        self.editing_id = None
        self.edit_name = ""
        return True

    def delete(self, user_id: int, confirm: Confirm) -> bool:
        """Delete a user after ``confirm`` approved it.

        ``confirm`` receives the user about to be deleted (or a stub
        with only the id when the user is not in the local list) and
        returns whether to go ahead.
        """
        self.error = None
        user = self._find(user_id) or {"id": user_id, "name": None}
        if not confirm(user):
            return False
        result, error = self.api.delete_user(user_id)
        if error:
            self.error = f"Failed to delete user: {error['message']}"
            return False
        deleted_id = result["user"]["id"] if result and result.get("user") else user_id
        self.users = [u for u in self.users if u["id"] != deleted_id]
        if self.editing_id == deleted_id:
            self.editing_id = None
            self.edit_name = ""
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> str:
        """Return the current screen as text."""
        lines = ["User Directory", "=============="]
        if self.error:
            lines.append(f"! {self.error}")
        lines.append(f"New user: [{self.new_name}]")
        if self.loading:
            lines.append("Loading users...")
        elif not self.users:
            lines.append("No users found.")
        else:
            lines.append(f"Users ({len(self.users)}):")
            for user in self.users:
                if user["id"] == self.editing_id:
                    lines.append(f"  {user['id']:>4}  [{self.edit_name}]  (editing: save [name] / cancel)")
                else:
                    lines.append(f"  {user['id']:>4}  {user['name']}")
        return "\n".join(lines)

    def _find(self, user_id: int) -> Optional[Dict[str, Any]]:
        for user in self.users:
            if user["id"] == user_id:
                return user
        return None


class DirectoryConsole:
    """Read‑eval loop that maps console commands onto a ``DirectoryView``."""

    def __init__(
        self,
        view: DirectoryView,
        *,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self.view = view
        self.read = read
        self.write = write

    def confirm_delete(self, user: Dict[str, Any]) -> bool:
        label = user["name"] or f"user {user['id']}"
        answer = self.read(f"Delete {label}? [y/N] ")
        return answer.strip().lower() in {"y", "yes"}

    def handle(self, line: str) -> bool:
        """Execute one command.  Returns ``False`` when the loop should stop."""
        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        argument = argument.strip()
        if not command:
            return True
        if command in {"quit", "exit"}:
            return False
        if command == "help":
            self.write(HELP_TEXT)
            return True
        if command == "list":
            self.view.load()
        elif command == "add":
            self.view.submit(argument)
        elif command == "save":
            self.view.save_edit(argument or None)
        elif command == "cancel":
            self.view.cancel_edit()
        elif command in {"edit", "delete"}:
            user_id = self._parse_id(argument)
            if user_id is None:
                self.view.error = f"Usage: {command} <id>"
            elif command == "edit":
                self.view.start_edit(user_id)
            else:
                self.view.delete(user_id, self.confirm_delete)
        else:
            self.view.error = f"Unknown command: {command} (type 'help')"
        self.write(self.view.render())
        return True

    def run(self) -> None:
        """Load the directory and process commands until ``quit`` or EOF."""
        self.view.load()
        self.write(self.view.render())
        self.write("Type 'help' for commands.")
        try:
            while True:
                try:
                    line = self.read("> ")
                except EOFError:
                    break
                if not self.handle(line):
                    break
        except KeyboardInterrupt:
            logger.info("Console stopped by user.")

    @staticmethod
    def _parse_id(text: str) -> Optional[int]:
        try:
            return int(text)
        except ValueError:
            return None


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Manage the user directory from a terminal.")
    ap.add_argument("--url", help="API base URL. Overrides USER_DIRECTORY_API_URL and --mode.")
    ap.add_argument("--mode", choices=["development", "production"], help="Build mode used to pick the API URL.")
    ap.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING).",
    )
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s [%(levelname)s] %(message)s")
    try:
        base_url = args.url or resolve_api_base_url(args.mode)
    except RuntimeError as exc:
        logger.error(str(exc))
        sys.exit(1)

    console = DirectoryConsole(DirectoryView(UserDirectoryAPI(base_url=base_url)))
    console.run()


if __name__ == "__main__":
    main()
