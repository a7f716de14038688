"""Expected fixture loading.

The fixture is a single line ``<float>,<float>,<int>`` followed by a newline.
It is read-only input and is re-read by the harness on every iteration.
"""

import math
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict

from .errors import FixtureFormatError, FixtureIOError

DEFAULT_FIXTURE_PATH = "points-verify.txt"

# Plain decimal notation only: no whitespace, underscores, nan or infinity.
_FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)


@dataclass(frozen=True)
class ExpectedFixture:
    """Expected sums and line count."""

    first: float
    second: float
    lines: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert fixture to dictionary."""
        return asdict(self)


def parse_fixture_text(text: str) -> ExpectedFixture:
    """Parse fixture content.

    Args:
        text: Raw file content; one trailing newline is stripped

    Returns:
        ExpectedFixture

    Raises:
        FixtureFormatError: If the content is not three numeric fields
    """
    if text.endswith("\r\n"):
        text = text[:-2]
    elif text.endswith("\n"):
        text = text[:-1]

    parts = text.split(",")
    if len(parts) != 3:
        raise FixtureFormatError(f"Expected 3 comma-separated fields, got {len(parts)}: {text!r}")

    first = _parse_sum(parts[0])
    second = _parse_sum(parts[1])
    if not _INT_RE.fullmatch(parts[2]):
        raise FixtureFormatError(f"Fixture line count must be an integer: {parts[2]!r}")
    lines = int(parts[2])

    return ExpectedFixture(first=first, second=second, lines=lines)


def _parse_sum(field: str) -> float:
    if not _FLOAT_RE.fullmatch(field):
        raise FixtureFormatError(f"Fixture sums must be numeric: {field!r}")
    value = float(field)
    if not math.isfinite(value):
        raise FixtureFormatError(f"Fixture sum is out of range: {field!r}")
    return value


def load_fixture(filepath: str = DEFAULT_FIXTURE_PATH) -> ExpectedFixture:
    """Read and parse the fixture file.

    Raises:
        FixtureIOError: If the file is missing or unreadable
        FixtureFormatError: If the content is malformed
    """
    try:
        with open(filepath, encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FixtureIOError(f"Cannot read fixture {filepath}: {exc}") from exc
    return parse_fixture_text(text)
