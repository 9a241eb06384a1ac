"""
analytics/performance.py

Position of a hammer price within its pre-sale estimate band.

Formula::

    factor = (hammer - low) / (high - low)        defined only when high > low

0.0 means the hammer equalled the low estimate, 1.0 the high estimate;
values below 0 or above 1 fall outside the band.
"""

from __future__ import annotations

from decimal import Decimal


def performance_factor(hammer: Decimal, low: Decimal, high: Decimal) -> Decimal | None:
    """
    Return the normalized position of *hammer* in ``[low, high]``.

    ``None`` when the band is empty or inverted (``high <= low``); such a
    sale cannot be scored and must be left out of derived series rather
    than counted as zero.
    """
    band = high - low
    if band <= 0:
        return None
    return (hammer - low) / band
