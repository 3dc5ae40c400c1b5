"""
Extraction and statistics over combat events.
"""

from .extract import (
    MissingAmountError,
    damage_dealt,
    healing_done,
    damage_by_source,
    healing_by_source,
)
from .stats import (
    probabilities,
    simpsons_d,
    simpsons_d_of_one,
    letis_d,
    letis_d_of_one,
    entropy,
)

__all__ = [
    "MissingAmountError",
    "damage_dealt",
    "healing_done",
    "damage_by_source",
    "healing_by_source",
    "probabilities",
    "simpsons_d",
    "simpsons_d_of_one",
    "letis_d",
    "letis_d_of_one",
    "entropy",
]
