"""Diagnostics package.

- round_trip, new_years_table: always available, standard library only
- year_lengths: needs the `diagnostics` extra (numpy; matplotlib for --plot)
"""

__all__ = ["round_trip", "year_lengths", "new_years_table"]
