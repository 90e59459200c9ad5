"""Shared helpers: logging, config files, seeded randomness."""

from .config import load_config
from .logging import setup_logging
from .seed import make_rng, random_choice

__all__ = [
    "load_config",
    "setup_logging",
    "make_rng",
    "random_choice",
]
