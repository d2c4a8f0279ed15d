"""Domain models and rendering for gregcal.

This package contains the functional core:
- Pure text rendering with no console access
- Lookup tables shared read-only by every layout
- Easy to test
"""

from gregcal.domain.models import Day, MonthNumber, Year

__all__ = ["Year", "MonthNumber", "Day"]
