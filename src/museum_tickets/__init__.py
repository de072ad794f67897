"""
Museum Ticket Calculator

A single-page admission pricing calculator for New York City museums.
Resolves a visitor party into per-category subtotals and a grand total.
"""

__version__ = "1.0.0"
