"""
Pricing Engine - Museum admission pricing with traceability.

Holds the static catalog, the current museum selection and the visitor
counts. Totals are recomputed on demand from that state; listeners are
notified after every mutation so a view can re-render.
"""
import re
from decimal import Decimal
from typing import Callable, Optional, Union

from ..config.settings import get_settings, Settings
from .catalog import Catalog, default_catalog
from .formatting import format_currency, pluralize, to_amount
from .models import Category, Museum, Summary, SummaryLine, VisitorCounts

ZERO = to_amount(0)

# Leading integer, as typed into a number field ("7", " 12", "3 adults")
_LEADING_INT = re.compile(r'^\s*([+-]?[0-9]+)')


def parse_count(raw_input) -> int:
    """
    Parse a visitor count from raw field input.

    Unparseable or negative input clamps to 0. Trailing characters after
    the leading integer are ignored, so "2.9" reads as 2.
    """
    if isinstance(raw_input, bool):
        return 0
    if isinstance(raw_input, int):
        return max(0, raw_input)
    if raw_input is None:
        return 0

    match = _LEADING_INT.match(str(raw_input))
    if not match:
        return 0
    return max(0, int(match.group(1)))


class PricingEngine:
    """
    Ticket pricing engine for a single calculator session.

    Resolution:
    1. A museum is picked from the catalog (unknown ids are ignored)
    2. Visitor counts are entered per category and clamped to >= 0
    3. Subtotal per category = count × museum price for that category
    4. Total = sum of subtotals, or 0 while no museum is selected
    """

    def __init__(self, catalog: Optional[Catalog] = None, settings: Optional[Settings] = None):
        """Initialize engine with the museum catalog and empty counts."""
        self.settings = settings or get_settings()

        self.catalog = catalog if catalog is not None else default_catalog(self.settings)

        self.selected: Optional[Museum] = None
        self.visitors = VisitorCounts()
        self._listeners: list[Callable[['PricingEngine'], None]] = []

    def subscribe(self, listener: Callable[['PricingEngine'], None]) -> Callable[[], None]:
        """
        Register a callback run after every state change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    def select_museum(self, museum_id: str) -> Optional[Museum]:
        """
        Select a museum by id.

        Returns the museum, or None (selection unchanged) if the id is unknown.
        Visitor counts are kept across a change of museum unless
        settings.reset_counts_on_select is set.
        """
        museum = self.catalog.get(museum_id)
        if museum is None:
            return None

        if self.selected is not None and self.selected.id == museum.id:
            return museum

        switching = self.selected is not None
        self.selected = museum
        if switching and self.settings.reset_counts_on_select:
            self.visitors = VisitorCounts()
        self._notify()
        return museum

    def set_visitor_count(self, category: Union[Category, str], raw_input) -> VisitorCounts:
        """Set the count for one category from raw input, clamping to >= 0."""
        self.visitors.set(category, parse_count(raw_input))
        self._notify()
        return self.visitors

    def reset_counts(self) -> VisitorCounts:
        """Zero every visitor count."""
        self.visitors = VisitorCounts()
        self._notify()
        return self.visitors

    def subtotal(self, category: Union[Category, str]) -> Decimal:
        """Count × price for one category under the selected museum."""
        category = Category.parse(category)
        if self.selected is None:
            return ZERO
        return to_amount(self.visitors.get(category) * self.selected.prices[category])

    def total(self) -> Decimal:
        """Sum of all category subtotals. 0 while no museum is selected."""
        if self.selected is None:
            return ZERO
        return to_amount(sum((self.subtotal(c) for c in Category), ZERO))

    def total_visitors(self) -> int:
        """Sum of all category counts."""
        return self.visitors.total

    def summary(self) -> Optional[Summary]:
        """
        Build the itemized price summary.

        Returns None unless a museum is selected and at least one visitor
        is entered. Categories with a zero count are left out.
        """
        if self.selected is None or self.total_visitors() == 0:
            return None

        museum = self.selected
        symbol = self.settings.currency_symbol
        summary = Summary(
            museum=museum,
            total_visitors=self.total_visitors(),
            total=ZERO,
            lines=[],
        )
        summary.add_trace("Museum", f"{museum.name} ({museum.location})", museum.id)
        summary.add_trace("Visitors", "Total visitors entered", str(summary.total_visitors))

        for category, count in self.visitors.items():
            if count == 0:
                continue
            unit_price = to_amount(museum.prices[category])
            line = SummaryLine(
                category=category,
                count=count,
                unit_price=unit_price,
                subtotal=self.subtotal(category),
                label=pluralize(count, category),
            )
            line.add_trace(
                "Extension",
                f"{category.value.capitalize()}: {count} × {format_currency(unit_price, symbol)}",
                format_currency(line.subtotal, symbol),
            )
            summary.lines.append(line)

        summary.total = self.total()
        summary.add_trace("Total", "Sum of category subtotals", format_currency(summary.total, symbol))
        return summary
