"""aoc2020: Advent of Code 2020 solutions.

Contains:
- a small challenge registry (``challenge`` decorator, ``all_challenges``)
- input containers for line- and group-shaped puzzle inputs
- one solver module per day under ``aoc2020.challenges``
- a ``run <challenge>`` command-line driver
"""

from .challenge import Challenge, Example, all_challenges, extract_description, find_challenge
from .config import AocConfig, load_config
from .inputs import GroupedLines, Lines
from .driver import ExampleCheck, RunResult, check_examples, input_path_for, read_input, run_challenge
from .diagnostics import InputSummary, TimingSummary, print_summary, summarize_input, summarize_timings
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    "Challenge",
    "Example",
    "all_challenges",
    "extract_description",
    "find_challenge",
    "AocConfig",
    "load_config",
    "GroupedLines",
    "Lines",
    "ExampleCheck",
    "RunResult",
    "check_examples",
    "input_path_for",
    "read_input",
    "run_challenge",
    "InputSummary",
    "TimingSummary",
    "print_summary",
    "summarize_input",
    "summarize_timings",
    "setup_logging",
]
