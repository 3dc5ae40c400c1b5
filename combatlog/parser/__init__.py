"""
Combat log parser module for decoding WoW combat log files.
"""

from .units import Unit
from .events import Event, EventType
from .errors import LogParseError, ParseErrorType
from .tokenizer import LineTokenizer
from .parser import CombatLogParser
from .log import CombatLog

__all__ = [
    "Unit",
    "Event",
    "EventType",
    "LogParseError",
    "ParseErrorType",
    "LineTokenizer",
    "CombatLogParser",
    "CombatLog",
]
