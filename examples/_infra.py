from __future__ import annotations

import logging
import random
import sys
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class LookupFailure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(slots=True)
class FakeSource:
    """Random numbers; a "hit" is a multiple of `modulus`."""

    seed: int = 0
    modulus: int = 1000
    max_attempts: int = 1000
    _random: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._random = random.Random(self.seed)

    def draw(self) -> int:
        return self._random.randrange(100_000)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def setup_logging() -> logging.Logger:  # pragma: no cover (examples only)
    logging.basicConfig(level=logging.INFO, format="%(levelname)-7s %(message)s")
    return logging.getLogger("examples")
