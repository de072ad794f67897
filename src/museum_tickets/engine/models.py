"""
Data models for the pricing engine.

Uses dataclasses for structured, type-safe data representation.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class Category(str, Enum):
    """Visitor pricing category. Closed set; order is display order."""
    ADULT = "adult"
    CHILD = "child"
    SENIOR = "senior"
    STUDENT = "student"

    @classmethod
    def parse(cls, value: Union["Category", str]) -> "Category":
        """Accept a Category or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown visitor category {value!r}. "
                f"Expected one of: {', '.join(c.value for c in cls)}"
            ) from None


@dataclass
class TraceStep:
    """A single step in the pricing resolution trace."""
    step: str
    description: str
    value: Optional[str] = None


@dataclass(frozen=True)
class Museum:
    """A catalog entry. Immutable once loaded."""
    id: str
    name: str
    location: str
    prices: Mapping[Category, Decimal] = field(hash=False)

    def __post_init__(self):
        # Freeze the price table so catalog entries cannot be edited in place
        object.__setattr__(self, 'prices', MappingProxyType(dict(self.prices)))

    def price(self, category: Union[Category, str]) -> Decimal:
        """Unit price for a category."""
        return self.prices[Category.parse(category)]


@dataclass
class VisitorCounts:
    """Visitor count per category. Every category is always present."""
    adult: int = 0
    child: int = 0
    senior: int = 0
    student: int = 0

    def get(self, category: Union[Category, str]) -> int:
        return getattr(self, Category.parse(category).value)

    def set(self, category: Union[Category, str], count: int):
        """Store a count; negatives clamp to 0."""
        setattr(self, Category.parse(category).value, max(0, int(count)))

    def items(self) -> list[tuple[Category, int]]:
        """(category, count) pairs in display order."""
        return [(c, getattr(self, c.value)) for c in Category]

    @property
    def total(self) -> int:
        return sum(count for _, count in self.items())

    def as_dict(self) -> dict[str, int]:
        return {c.value: count for c, count in self.items()}


@dataclass
class SummaryLine:
    """A single category line in the price summary."""
    category: Category
    count: int
    unit_price: Decimal
    subtotal: Decimal
    label: str  # e.g. "3 childs"
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the trace for this line."""
        self.trace.append(TraceStep(step=step, description=description, value=value))


@dataclass
class Summary:
    """Itemized price summary for the selected museum and party."""
    museum: Museum
    total_visitors: int
    total: Decimal
    lines: list[SummaryLine]
    trace: list[TraceStep] = field(default_factory=list)

    def add_trace(self, step: str, description: str, value: str = None):
        """Add a step to the summary-level trace."""
        self.trace.append(TraceStep(step=step, description=description, value=value))

    def get_trace_text(self) -> str:
        """Get human-readable trace as formatted text."""
        lines = []
        for t in self.trace:
            if t.value:
                lines.append(f"• {t.step}: {t.description} = {t.value}")
            else:
                lines.append(f"• {t.step}: {t.description}")
        for line in self.lines:
            for t in line.trace:
                if t.value:
                    lines.append(f"  → {t.step}: {t.description} = {t.value}")
                else:
                    lines.append(f"  → {t.step}: {t.description}")
        return "\n".join(lines)

    def to_records(self) -> list[dict]:
        """Flat rows for tabular display and CSV export."""
        return [
            {
                "Museum": self.museum.name,
                "Category": line.category.value,
                "Visitors": line.count,
                "Unit Price": float(line.unit_price),
                "Subtotal": float(line.subtotal),
            }
            for line in self.lines
        ]
