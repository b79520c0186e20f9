"""Terminal interface - interactive menu over a single wallet session.

The terminal owns one Ledger for the lifetime of the run, reads commands,
calls into the balance engine and history view, prints the outcome and logs
every step. Logs go to a timestamped file under the configured log directory.
"""

import sys
from typing import Callable, Optional

from pydantic import ValidationError

from wallettracker.balance_engine import Ledger, new_session
from wallettracker.config import Settings, load_settings
from wallettracker.history import render_history
from wallettracker.logging_config import (
    configure_logging,
    get_logger,
    timestamped_log_path,
)
from wallettracker.models import EntryKind

logger = get_logger(__name__)

MENU = (
    "\nPlease select an option:\n"
    "1. Check Balance\n"
    "2. Deposit\n"
    "3. Withdraw\n"
    "4. View Transaction History\n"
    "5. Exit"
)


class WalletTerminal:
    """Interactive menu loop for one wallet session.

    Usage Example:
        ```python
        terminal = WalletTerminal()
        terminal.run()  # blocks until the user picks "5. Exit"
        ```

    Tests drive it by passing `input_fn` and `output` callables instead of the
    real console.

    Attributes:
        ledger (Ledger): The session's ledger
    """

    def __init__(self, ledger: Optional[Ledger] = None,
                 input_fn: Optional[Callable[[str], str]] = None,
                 output: Optional[Callable[[str], None]] = None):
        self.ledger = ledger if ledger is not None else new_session()
        self._input = input_fn or input
        self._output = output or print
        logger.info("Initializing new WalletTerminal instance")

    def run(self) -> None:
        """Run the menu until the user exits or input runs out."""
        logger.info("Starting wallet terminal session")
        self._output("Welcome to the Wallet Terminal!")

        while True:
            try:
                should_exit = self.show_menu()
            except (EOFError, KeyboardInterrupt):
                logger.info("Input closed, ending session")
                should_exit = True
            except OSError as e:
                logger.error("Menu error: %s", e)
                self._output(f"Error: {e}")
                continue

            if should_exit:
                logger.info("Terminating wallet terminal session")
                self._output("Thank you for using the Wallet Terminal!")
                break

    def show_menu(self) -> bool:
        """Show the menu and handle one choice.

        Returns:
            bool: True if the user asked to exit
        """
        self._output(MENU)
        choice = self._input("\nEnter your choice (1-5): ").strip()

        if choice == "1":
            logger.info("Selected: Check Balance")
            self.check_balance()
        elif choice == "2":
            logger.info("Selected: Deposit")
            self.submit(EntryKind.DEPOSIT)
        elif choice == "3":
            logger.info("Selected: Withdraw")
            self.submit(EntryKind.WITHDRAWAL)
        elif choice == "4":
            logger.info("Selected: View History")
            self.view_history()
        elif choice == "5":
            logger.info("Selected: Exit")
            return True
        else:
            logger.error("Invalid menu choice entered: %s", choice)
            self._output("Invalid choice. Please try again.")
        return False

    def check_balance(self) -> None:
        balance = self.ledger.balance
        logger.info("Balance check: %s", balance)
        self._output(f"Current balance: {balance}")

    def submit(self, kind: EntryKind) -> None:
        """Prompt for address and amount, then apply the movement."""
        address = self._read_address()
        amount = self._read_amount()
        if amount is None:
            return

        result = self.ledger.apply(kind, address, amount)
        if result.success:
            if kind is EntryKind.DEPOSIT:
                logger.info("Successful deposit of %s to wallet %s", amount, address)
                self._output(f"Successfully deposited {amount} to the wallet")
            else:
                logger.info("Successful withdrawal of %s from wallet %s", amount, address)
                self._output(f"Successfully withdrew {amount} from the wallet")
            self._output(f"New balance: {result.balance}")
        else:
            logger.error("%s failed for wallet %s: %s",
                         kind.label, address, result.error_message)
            self._output(f"Error: {result.error_message}")

    def view_history(self) -> None:
        lines = render_history(self.ledger)
        logger.info("Viewing transaction history (%d entries)", len(lines))
        if not lines:
            self._output("No transactions yet.")
            return
        self._output("Transaction history:")
        for line in lines:
            self._output(line)

    def _read_address(self) -> str:
        address = self._input("Enter wallet address: ").strip()
        logger.info("Wallet address entered: %s", address)
        return address

    def _read_amount(self) -> Optional[int]:
        raw = self._input("Enter amount: ").strip()
        try:
            amount = int(raw)
        except ValueError:
            logger.error("Invalid amount entered: %s", raw)
            self._output("Invalid amount. Please enter a valid number.")
            return None
        logger.info("Amount entered: %s", amount)
        return amount


def main(settings: Optional[Settings] = None) -> int:
    """Console entry point: set up file logging and run the terminal.

    Returns 2 without starting the menu if the environment holds an invalid
    setting.
    """
    if settings is None:
        try:
            settings = load_settings()
        except ValidationError as e:
            err = e.errors()[0]
            field = ".".join(str(p) for p in err["loc"])
            print(f"Error: invalid configuration for {field}: {err['msg']}", file=sys.stderr)
            return 2
    try:
        log_path = timestamped_log_path(settings.log_dir)
        configure_logging(level=settings.log_level, log_file=log_path)
    except OSError as e:
        print(f"Warning: Failed to initialize logging: {e}", file=sys.stderr)

    WalletTerminal().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
