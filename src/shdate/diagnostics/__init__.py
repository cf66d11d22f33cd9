"""Diagnostics package.

- pretty_month, new_years_table, round_trip, leap_years: always available
- new_year_scatter: needs the `diagnostics` extra (numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years", "new_year_scatter"]
