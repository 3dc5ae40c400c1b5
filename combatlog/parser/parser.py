"""
Main combat log parser that coordinates tokenization and error collection.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ..config import get_settings
from .errors import LogParseError
from .events import Event
from .tokenizer import LineTokenizer

logger = logging.getLogger(__name__)


class CombatLogParser:
    """
    Main parser for WoW combat log files.

    Handles file reading and line tokenization. Lines that fail to decode are
    logged and recorded in ``parse_errors``; they never abort the parse.
    """

    def __init__(self, year: Optional[int] = None, require_target: Optional[bool] = None):
        """
        Initialize the combat log parser.

        Args:
            year: Year to assume for timestamps without one (default from settings)
            require_target: Reject records without a target (default from settings)
        """
        parser_settings = get_settings().parser
        self.year = year if year is not None else parser_settings.year
        self.require_target = (
            require_target if require_target is not None else parser_settings.require_target
        )
        self.tokenizer = LineTokenizer(year=self.year, require_target=self.require_target)
        self.current_file: Optional[Path] = None
        self.events_processed = 0
        self.parse_errors: List[LogParseError] = []

    def parse_file(self, file_path) -> Iterator[Event]:
        """
        Parse a combat log file and yield events.

        Args:
            file_path: Path to the combat log file

        Yields:
            Event objects in file order
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Combat log file not found: {file_path}")

        self.current_file = file_path
        logger.info(f"Starting parse of {file_path.name} ({file_path.stat().st_size / 1024:.1f} KB)")

        with open(file_path, "r", encoding="utf-8", errors="ignore") as f:
            yield from self.parse_lines(f)

        logger.info(
            f"Completed parsing {file_path.name}: "
            f"{self.events_processed} events, {len(self.parse_errors)} errors"
        )

    def parse_lines(self, lines: Iterable[str]) -> Iterator[Event]:
        """
        Parse raw lines and yield events.

        Args:
            lines: Raw combat log lines

        Yields:
            Event objects for every line that decodes
        """
        for line_number, line in enumerate(lines, 1):
            event = self._process_line(line, line_number)
            if event is not None:
                yield event

    def parse_string(self, text: str) -> List[Event]:
        """Parse a whole combat log held in memory."""
        return list(self.parse_lines(text.splitlines()))

    def _process_line(self, line: str, line_number: int) -> Optional[Event]:
        """
        Process a single line.

        Args:
            line: Raw line from combat log
            line_number: 1-based line number, for error reports

        Returns:
            Event if the line parses successfully
        """
        if not line.strip():
            return None

        try:
            event = self.tokenizer.parse_line(line)
        except LogParseError as e:
            e.line_number = line_number
            self.parse_errors.append(e)
            logger.error(f"Error parsing, {e}")
            return None

        self.events_processed += 1
        return event

    def get_stats(self) -> Dict[str, Any]:
        """
        Get parsing statistics.

        Returns:
            Dictionary with parsing stats
        """
        return {
            "file": str(self.current_file) if self.current_file else None,
            "events_processed": self.events_processed,
            "parse_errors": len(self.parse_errors),
            "tokenizer_stats": self.tokenizer.get_stats(),
        }

    def reset(self):
        """Reset parser state for new file."""
        self.tokenizer = LineTokenizer(year=self.year, require_target=self.require_target)
        self.events_processed = 0
        self.parse_errors = []
        self.current_file = None
