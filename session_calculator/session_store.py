"""In-memory history of calculation sessions.

Each session is a CalculationRecord: an append-only log of textual steps
plus the running result. The SessionStore keeps records in creation order
and tracks which one receives new steps. Records are addressed by a 1-based
index that never changes.
"""

import logging
from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional

from .errors import IndexOutOfRange, NoActiveSession
from .evaluator import Operation
from .output_helper import DEFAULT_PRECISION, format_seed, format_step


logger = logging.getLogger(__name__)


@dataclass
class CalculationRecord:
    """One chain of calculations starting from a seed value."""

    steps: List[str] = field(default_factory=list)
    last_result: float = 0.0

    @classmethod
    def seeded(cls, seed: float, precision: int = DEFAULT_PRECISION) -> "CalculationRecord":
        """Create a record holding only the seed entry."""
        return cls(steps=[format_seed(seed, precision)], last_result=seed)

    def append(
        self,
        previous: float,
        operation: Operation,
        operand: float,
        result: float,
        precision: int = DEFAULT_PRECISION,
    ):
        """Log an applied operation and move the running result."""
        self.steps.append(format_step(previous, operation.symbol, operand, result, precision))
        self.last_result = result

    @property
    def step_count(self) -> int:
        return len(self.steps)


class SessionSummary(NamedTuple):
    """Index and running result of a stored record."""

    index: int
    last_result: float


class SessionStore:
    """Owns every calculation record created during the process."""

    def __init__(self, precision: int = DEFAULT_PRECISION):
        """Initialize an empty store.

        Args:
            precision: Significant digits used when writing step entries.
        """
        self.precision = precision
        self._records: List[CalculationRecord] = []
        self._active: Optional[int] = None

    def __len__(self) -> int:
        return len(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    @property
    def active_index(self) -> Optional[int]:
        """1-based index of the active record, or None before the first session."""
        return None if self._active is None else self._active + 1

    @property
    def active_record(self) -> CalculationRecord:
        """The record currently receiving steps.

        Raises:
            NoActiveSession: If no session has been created.
        """
        if self._active is None:
            raise NoActiveSession()
        return self._records[self._active]

    @property
    def last_result(self) -> float:
        """Running result of the active record."""
        return self.active_record.last_result

    def create_session(self, seed: float) -> int:
        """Start a new record and make it active.

        Args:
            seed: Starting value of the session.

        Returns:
            1-based index of the new record.
        """
        self._records.append(CalculationRecord.seeded(seed, self.precision))
        self._active = len(self._records) - 1
        logger.debug("Created session %d with seed %r", self._active + 1, seed)
        return self._active + 1

    def append_step(
        self,
        previous: float,
        operation: Operation,
        operand: float,
        result: float,
    ):
        """Append an applied operation to the active record.

        Raises:
            NoActiveSession: If no session has been created.
        """
        record = self.active_record
        record.append(previous, Operation.from_symbol(operation), operand, result, self.precision)
        logger.debug("Session %d: %s", self._active + 1, record.steps[-1])

    def get_record(self, index: int) -> CalculationRecord:
        """Get a record by its 1-based index.

        Raises:
            IndexOutOfRange: If index is not within [1, len(store)].
        """
        if index < 1 or index > len(self._records):
            raise IndexOutOfRange(
                f"Calculation {index} does not exist (have {len(self._records)})."
            )
        return self._records[index - 1]

    def get_steps(self, index: int) -> List[str]:
        """Get a copy of the step log of a record.

        Raises:
            IndexOutOfRange: If index is not within [1, len(store)].
        """
        return list(self.get_record(index).steps)

    def list_summaries(self) -> List[SessionSummary]:
        """Summaries of all records in creation order."""
        return [
            SessionSummary(index, record.last_result)
            for index, record in enumerate(self._records, 1)
        ]
