"""Interactive read-eval-print loop for Session Calculator.

The loop is a small state machine:

    AWAITING_SEED -> AWAITING_OPERATION <-> AWAITING_OPERAND
                          |    ^
                          v    |
                         BROWSING
    AWAITING_OPERATION -> AWAITING_SEED (new session)
    AWAITING_OPERATION -> TERMINATED (quit)

Every read is one line. Bad input is discarded and the prompt repeated;
arithmetic errors abort only the current operation.
"""

import logging
from enum import Enum
from typing import Optional, TextIO, Union

from rich.console import Console

from .config import CalculatorConfig
from .errors import EvaluationError, IndexOutOfRange
from .evaluator import Operation, calculate
from .output_helper import format_number, format_summary, parse_number, parse_selection
from .session_store import SessionStore


logger = logging.getLogger(__name__)


SEED_LABEL = "the first number"
OPERAND_LABEL = "the next number"
OPERATION_PROMPT = "Choose operation (+, -, *, /, %, n for new, m for memory, q to quit): "
SELECTION_PROMPT = "Select calculation number to view (0 to return): "

INVALID_NUMBER = "Invalid number. Please try again."
UNSUPPORTED_TOKEN = "Unsupported operation. Please choose one of +, -, *, /, %, n, m, or q."
INVALID_SELECTION = "Invalid selection. Please enter a number from the list."
SELECTION_OUT_OF_RANGE = "Selection out of range. Try again."


class ReplState(str, Enum):
    """States of the calculator loop."""

    AWAITING_SEED = "awaiting_seed"
    AWAITING_OPERATION = "awaiting_operation"
    AWAITING_OPERAND = "awaiting_operand"
    BROWSING = "browsing"
    TERMINATED = "terminated"


class Command(str, Enum):
    """Non-arithmetic choices at the operation prompt."""

    NEW_SESSION = "n"
    SHOW_HISTORY = "m"
    QUIT = "q"


def parse_choice(text: str) -> Optional[Union[Operation, Command]]:
    """Resolve an operation-prompt token.

    Returns:
        The Operation or Command, or None for anything that is not exactly
        one of + - * / % n N m M q Q.
    """
    token = text.strip()
    if len(token) != 1:
        return None
    try:
        return Operation(token)
    except ValueError:
        pass
    try:
        return Command(token.lower())
    except ValueError:
        return None


class CalculatorRepl:
    """Drives the console calculator over a SessionStore."""

    def __init__(
        self,
        config: Optional[CalculatorConfig] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        store: Optional[SessionStore] = None,
    ):
        """Initialize the loop.

        Args:
            config: Display options (defaults apply when omitted).
            console: Console for all output and prompts.
            stream: Text stream to read lines from. When omitted, input()
                is used through the console.
            store: Session store to fill. A new one is created when omitted.
        """
        self.config = config or CalculatorConfig()
        self.console = console or Console()
        self.stream = stream
        if store is None:
            store = SessionStore(precision=self.config.precision)
        elif store.precision != self.config.precision:
            raise ValueError(
                f"store precision {store.precision} does not match "
                f"config precision {self.config.precision}"
            )
        self.store = store
        self.state = ReplState.AWAITING_SEED
        self.pending_operation: Optional[Operation] = None

    # --- I/O ---

    def _read(self, prompt: str) -> str:
        """Print prompt and read the next non-blank line.

        Blank lines are skipped without repeating the prompt.

        Raises:
            EOFError: When input is exhausted.
        """
        self._say(prompt, end="")
        while True:
            line = self.console.input(stream=self.stream)
            # Console.input returns "" from a stream at end of input
            if self.stream is not None and line == "":
                raise EOFError
            if line.strip():
                return line.strip()

    def _say(self, message: str = "", style: Optional[str] = None, end: str = "\n"):
        self.console.print(
            message, style=style, end=end, markup=False, highlight=False, soft_wrap=True
        )

    def _fmt(self, value: float) -> str:
        return format_number(value, self.config.precision)

    def show_banner(self):
        for line in self.config.banner_lines:
            self._say(line, style="bold")

    # --- State handlers ---

    def _on_awaiting_seed(self) -> ReplState:
        seed = parse_number(self._read(f"Enter {SEED_LABEL}: "))
        if seed is None:
            logger.debug("Discarded invalid seed input")
            self._say(INVALID_NUMBER, style="yellow")
            return ReplState.AWAITING_SEED

        self.store.create_session(seed)
        self._say(f"Current result: {self._fmt(seed)}", style="green")
        return ReplState.AWAITING_OPERATION

    def _on_awaiting_operation(self) -> ReplState:
        choice = parse_choice(self._read(OPERATION_PROMPT))
        if choice is None:
            logger.debug("Discarded unsupported operation token")
            self._say(UNSUPPORTED_TOKEN, style="yellow")
            return ReplState.AWAITING_OPERATION

        if isinstance(choice, Operation):
            self.pending_operation = choice
            return ReplState.AWAITING_OPERAND
        if choice is Command.NEW_SESSION:
            return ReplState.AWAITING_SEED
        if choice is Command.SHOW_HISTORY:
            return ReplState.BROWSING
        return ReplState.TERMINATED

    def _on_awaiting_operand(self) -> ReplState:
        operand = parse_number(self._read(f"Enter {OPERAND_LABEL}: "))
        if operand is None:
            logger.debug("Discarded invalid operand input")
            self._say(INVALID_NUMBER, style="yellow")
            return ReplState.AWAITING_OPERAND

        operation = self.pending_operation
        self.pending_operation = None
        previous = self.store.last_result
        try:
            result = calculate(previous, operand, operation)
        except EvaluationError as e:
            logger.debug("Evaluation failed: %s", e)
            self._say(f"Error: {e}", style="red")
            return ReplState.AWAITING_OPERATION

        self.store.append_step(previous, operation, operand, result)
        self._say(f"Result: {self._fmt(result)}", style="green")
        return ReplState.AWAITING_OPERATION

    def _on_browsing(self) -> ReplState:
        """Run the history sub-loop until the user selects 0."""
        if self.store.is_empty:
            self._say("Memory is empty.")
            return ReplState.AWAITING_OPERATION

        while True:
            self._say()
            self._say("Stored calculations:", style="bold")
            for summary in self.store.list_summaries():
                self._say(format_summary(summary.index, summary.last_result, self.config.precision))

            selection = parse_selection(self._read(SELECTION_PROMPT))
            if selection is None:
                self._say(INVALID_SELECTION, style="yellow")
                continue
            if selection == 0:
                self._say()
                return ReplState.AWAITING_OPERATION

            try:
                steps = self.store.get_steps(selection)
            except IndexOutOfRange:
                self._say(SELECTION_OUT_OF_RANGE, style="yellow")
                continue

            self._say(f"Calculation {selection} steps:")
            for entry in steps:
                self._say(f"  {entry}")
            self._say()

    _HANDLERS = {
        ReplState.AWAITING_SEED: _on_awaiting_seed,
        ReplState.AWAITING_OPERATION: _on_awaiting_operation,
        ReplState.AWAITING_OPERAND: _on_awaiting_operand,
        ReplState.BROWSING: _on_browsing,
    }

    # --- Driving ---

    def step(self) -> ReplState:
        """Perform one transition and return the new state.

        Reaching end of input moves straight to TERMINATED.
        """
        if self.state is ReplState.TERMINATED:
            return self.state

        previous = self.state
        try:
            self.state = self._HANDLERS[previous](self)
        except EOFError:
            logger.debug("Input closed in state %s", previous.value)
            self._say()
            self.state = ReplState.TERMINATED

        if self.state is not previous:
            logger.debug("%s -> %s", previous.value, self.state.value)
        if self.state is ReplState.TERMINATED:
            self._say("Goodbye!")
        return self.state

    def run(self):
        """Show the banner and loop until the user quits."""
        self.show_banner()
        while self.step() is not ReplState.TERMINATED:
            pass
