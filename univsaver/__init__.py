"""
uNivUSaver - Source Package

A command-line personal finance tracker for recording income and
expenses, grouping them into categories, and querying totals,
history and keyword-filtered views.

DESIGN PRINCIPLES:
1. Everything lives in memory for one session
2. Every command answers with plain feedback lines
3. Bad input never stops the loop
"""

__version__ = "1.0.0"
__author__ = "uNivUSaver Team"
