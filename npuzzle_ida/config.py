from __future__ import annotations
from dataclasses import dataclass
import argparse
import logging

# Hard cap on bound increments. Harder 15-puzzle instances need more than
# this and are reported as unsolved.
MAXITER = 8

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class SearchConfig:
    max_iter: int = MAXITER
    trace: bool = False

    def __post_init__(self):
        if self.max_iter < 1:
            raise ValueError(f"max_iter must be >= 1, got {self.max_iter}")


def setup_logging(trace: bool = False) -> None:
    """DEBUG when tracing a search, WARNING otherwise."""
    logging.basicConfig(level=logging.DEBUG if trace else logging.WARNING,
                        format=LOG_FORMAT)


def positive_int(text: str) -> int:
    """argparse type for --max-iter."""
    try:
        v = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if v < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {v}")
    return v
