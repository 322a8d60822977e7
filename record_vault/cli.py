# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Interactive, menu-driven shell over the Vault controller.
#   This is how operators interact with the system.
#
# USAGE:
# ------
#   python -m record_vault.cli
#   python -m record_vault.cli --env-file prod.env
#   python -m record_vault.cli --backups-dir /var/vault/backups --export-file report.txt
#
# MENU:
# -----
#   1. Add Record            5. Search Records
#   2. Update Record         6. Sort Records
#   3. Delete Record         7. Export Data
#   4. List All Records      8. View Vault Statistics
#   0. Exit
#
# IMPLEMENTATION:
# ---------------
# - argparse for the command-line flags
# - VaultShell reads prompts through an injectable input_fn and
#   prints through output_fn, so tests can script a session
# - Every menu action goes through the Vault controller; the
#   shell only maps menu choices to controller arguments
# - A failing action is reported and the loop continues
# - Ctrl+C / EOF / "0" close the MongoDB connection once and exit
#
# ==============================================

import argparse
import sys
from typing import Callable, List, Optional

from record_vault.config import get_config, reset_config
from record_vault.errors import InvalidSelectionError, VaultError
from record_vault.query.selection import SearchMode, SortDirection, SortField
from record_vault.vault import CANCELLED, OperationResult, Vault

SEARCH_CHOICES = {"1": SearchMode.BY_NAME, "2": SearchMode.BY_ID}
SORT_FIELD_CHOICES = {"1": SortField.NAME, "2": SortField.CREATED_AT}
SORT_DIRECTION_CHOICES = {"1": SortDirection.ASC, "2": SortDirection.DESC}


class VaultShell:
    """Read-eval-print loop that drives a Vault."""

    def __init__(
        self,
        vault: Vault,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.vault = vault
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.running = False
        self.menu = [
            ("1", "Add Record", self.add_record),
            ("2", "Update Record", self.update_record),
            ("3", "Delete Record", self.delete_record),
            ("4", "List All Records", self.list_records),
            ("5", "Search Records", self.search_records),
            ("6", "Sort Records", self.sort_records),
            ("7", "Export Data", self.export_data),
            ("8", "View Vault Statistics", self.view_statistics),
            ("0", "Exit", self.exit),
        ]

    def ask(self, prompt: str) -> str:
        return self.input_fn(prompt).strip()

    def show(self, result: OperationResult) -> None:
        self.output_fn("")
        self.output_fn(result.message)
        for line in result.lines:
            self.output_fn(line)

    def prompt_menu(self) -> str:
        self.output_fn("")
        self.output_fn("==== Vault Menu ====")
        for key, label, _ in self.menu:
            self.output_fn(f"{key}. {label}")
        return self.ask("Select an option: ")

    # --- menu actions ---

    def add_record(self) -> None:
        name = self.ask("Enter record name: ")
        if not name:
            self.output_fn("Name is required. Aborting add operation.")
            return
        details = self.ask("Enter record details (optional): ")
        self.show(self.vault.add_record(name, details))

    def update_record(self) -> None:
        record_id = self.ask("Enter record ID to update: ")
        # Look the record up first so the prompts can show current values.
        found = self.vault.search_records(SearchMode.BY_ID, record_id)
        if not found.ok:
            self.show(found)
            return
        if not found.records:
            self.output_fn("Record not found.")
            return
        current = found.records[0]

        name = self.ask(f"Enter new name ({current.name}): ")
        details = self.ask(f"Enter new details ({current.details or 'N/A'}): ")
        self.show(self.vault.update_record(current.id, new_name=name, new_details=details))

    def delete_record(self) -> None:
        record_id = self.ask("Enter record ID to delete: ")
        answer = self.ask("Are you sure you want to delete this record? (y/N): ").lower()
        result = self.vault.delete_record(record_id, confirmed=answer == "y")
        if result.status == CANCELLED:
            self.output_fn(result.message)
            return
        self.show(result)

    def list_records(self) -> None:
        self.show(self.vault.list_records())

    def invalid_choice(self, kind: str, choice: str) -> None:
        self.show(OperationResult.failure(InvalidSelectionError(kind, choice)))

    def search_records(self) -> None:
        self.output_fn("")
        self.output_fn("Search by:")
        self.output_fn("1. Name")
        self.output_fn("2. ID")
        choice = self.ask("Select an option: ")
        mode = SEARCH_CHOICES.get(choice)
        if mode is None:
            self.invalid_choice("search mode", choice)
            return
        if mode is SearchMode.BY_ID:
            term = self.ask("Enter ID to search: ")
        else:
            term = self.ask("Enter name to search: ")
        self.show(self.vault.search_records(mode, term))

    def sort_records(self) -> None:
        self.output_fn("")
        self.output_fn("Sort by:")
        self.output_fn("1. Name")
        self.output_fn("2. Creation Date")
        field_choice = self.ask("Select an option: ")
        field = SORT_FIELD_CHOICES.get(field_choice)
        if field is None:
            self.invalid_choice("sort field", field_choice)
            return

        self.output_fn("")
        self.output_fn("Order:")
        self.output_fn("1. Ascending")
        self.output_fn("2. Descending")
        order_choice = self.ask("Select an option: ")
        direction = SORT_DIRECTION_CHOICES.get(order_choice)
        if direction is None:
            self.invalid_choice("sort direction", order_choice)
            return
        self.show(self.vault.sort_records(field, direction))

    def export_data(self) -> None:
        self.show(self.vault.export_data())

    def view_statistics(self) -> None:
        self.show(self.vault.view_statistics())

    def exit(self) -> None:
        self.output_fn("Exiting application...")
        self.running = False

    # --- loop ---

    def run(self) -> None:
        """
        Run the menu loop until the operator exits.

        Unexpected errors in an action are reported and the loop
        continues; Ctrl+C and end of input stop the loop.
        """
        self.running = True
        try:
            while self.running:
                choice = self.prompt_menu()
                action = next((entry[2] for entry in self.menu if entry[0] == choice), None)
                if action is None:
                    self.output_fn("Invalid selection. Please try again.")
                    continue

                try:
                    action()
                except Exception as e:
                    self.output_fn(f"✗ An error occurred: {e}")

                if self.running:
                    self.ask("\nPress Enter to return to menu...")
        except (KeyboardInterrupt, EOFError):
            self.output_fn("")
            self.output_fn("Gracefully shutting down...")
            self.running = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="record-vault",
        description="Interactive record vault backed by MongoDB.",
    )
    parser.add_argument("--env-file", help="Path to a .env file (default: project .env)")
    parser.add_argument("--backups-dir", help="Directory for automatic JSON backups")
    parser.add_argument("--export-file", help="Path of the text export report")
    return parser


def main(argv: Optional[List[str]] = None, client_factory=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.env_file:
            reset_config()
        config = get_config(args.env_file)
        if args.backups_dir:
            config.vault.backups_dir = args.backups_dir
        if args.export_file:
            config.vault.export_file = args.export_file
        vault = Vault.open(config, client_factory=client_factory)
    except VaultError as e:
        print(f"✗ {e}")
        return 1

    try:
        VaultShell(vault).run()
    finally:
        vault.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
