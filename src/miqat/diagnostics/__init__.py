"""Diagnostics package.

Command-line tools run through `miqat diag <tool>`; plotting needs the
diagnostics extra (pip install "miqat[diagnostics]").
"""

__all__ = ["eot_compare", "eot_curve"]
