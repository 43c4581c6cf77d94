"""
Date helpers shared by services and scripts.

Calendar dates (appointment_date, record_date, ...) are local dates with no
timezone; only `created_at` timestamps are stored timezone-aware.
"""

from datetime import date


def today() -> date:
    """
    Current calendar date, the default for "on or after today" style filters.
    """
    return date.today()
