"""
Segmentation module for identifying and grouping combat encounters.
"""

from typing import Optional

from .encounters import (
    Encounter,
    EncounterSegmenter,
    SegmentationWarning,
    WarningSink,
    compute_life_windows,
    merge_windows,
    segment,
)
from .alive_set import AliveSetSegmenter

SEGMENTERS = {
    "interval": EncounterSegmenter,
    "alive": AliveSetSegmenter,
}


def get_segmenter(method: str = "interval", on_warning: Optional[WarningSink] = None) -> EncounterSegmenter:
    """
    Create a segmenter by name.

    Args:
        method: "interval" for life window merging, "alive" for death tracking
        on_warning: Optional anomaly sink
    """
    try:
        segmenter_class = SEGMENTERS[method]
    except KeyError:
        raise ValueError(f"Unknown segmentation method: {method}")
    return segmenter_class(on_warning=on_warning)


__all__ = [
    "Encounter",
    "EncounterSegmenter",
    "AliveSetSegmenter",
    "SegmentationWarning",
    "compute_life_windows",
    "merge_windows",
    "segment",
    "get_segmenter",
    "SEGMENTERS",
]
