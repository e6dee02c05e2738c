"""Display configuration for Session Calculator.

Settings come from command-line options only; nothing is read from files
or the environment.
"""

from dataclasses import dataclass

from .output_helper import DEFAULT_PRECISION


MIN_PRECISION = 1
MAX_PRECISION = 17


@dataclass
class CalculatorConfig:
    """Calculator display options."""

    precision: int = DEFAULT_PRECISION  # significant digits
    show_banner: bool = True
    title: str = "Simple Calculator"

    def __post_init__(self):
        if not MIN_PRECISION <= self.precision <= MAX_PRECISION:
            raise ValueError(
                f"precision must be between {MIN_PRECISION} and {MAX_PRECISION}, "
                f"got {self.precision}"
            )
        if not self.title.strip():
            raise ValueError("title must not be empty")

    @property
    def banner_lines(self) -> list:
        """Title and its dash rule, or nothing when the banner is off."""
        if not self.show_banner:
            return []
        return [self.title, "-" * len(self.title)]
