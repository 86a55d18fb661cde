"""FactureXL billing engine — invoice totals, CFP rounding, subscription renewals."""

__version__ = "0.1.0"
