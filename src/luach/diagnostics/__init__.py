"""Diagnostics package.

Text tables need nothing beyond luach itself; year_types and
rosh_hashana_scatter need the "diagnostics" extra (numpy, matplotlib).
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "year_types", "rosh_hashana_scatter"]
