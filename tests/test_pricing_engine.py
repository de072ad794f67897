"""
Pricing engine behaviour: count normalization, subtotals, totals and the
itemized summary, checked against the packaged museum catalog.
"""
from decimal import Decimal

import pytest

from museum_tickets.config.settings import Settings
from museum_tickets.engine import Category, PricingEngine, VisitorCounts, parse_count


@pytest.mark.parametrize("category", list(Category))
def test_negative_input_clamps_to_zero(engine, category):
    counts = engine.set_visitor_count(category, "-5")
    assert counts.get(category) == 0


@pytest.mark.parametrize("category", list(Category))
def test_unparseable_input_clamps_to_zero(engine, category):
    counts = engine.set_visitor_count(category, "abc")
    assert counts.get(category) == 0


@pytest.mark.parametrize("category", list(Category))
def test_valid_input_is_used(engine, category):
    counts = engine.set_visitor_count(category, "7")
    assert counts.get(category) == 7


@pytest.mark.parametrize("raw, expected", [
    ("", 0),
    ("   ", 0),
    (None, 0),
    ("0", 0),
    (" 12", 12),
    ("+4", 4),
    ("2.9", 2),
    ("3 adults", 3),
    ("1e3", 1),
    (5, 5),
    (-2, 0),
    ("1000000", 1000000),
])
def test_parse_count_leading_integer(raw, expected):
    assert parse_count(raw) == expected


def test_category_accepts_string_names(engine):
    engine.set_visitor_count("Senior", "2")
    assert engine.visitors.senior == 2
    assert engine.visitors.get(Category.SENIOR) == 2


def test_unknown_category_is_rejected(engine):
    with pytest.raises(ValueError):
        engine.set_visitor_count("toddler", "1")


def test_total_is_zero_without_selection(engine):
    for category in Category:
        engine.set_visitor_count(category, "3")

    assert engine.selected is None
    assert engine.total() == 0
    assert engine.subtotal(Category.ADULT) == 0
    assert engine.total_visitors() == 12
    assert engine.summary() is None, "Summary should only show once a museum is selected"


def test_amnh_family_scenario(engine):
    museum = engine.select_museum("amnh")
    assert museum is not None and museum.name == "American Museum of Natural History"

    engine.set_visitor_count(Category.ADULT, "2")
    engine.set_visitor_count(Category.CHILD, "1")
    engine.set_visitor_count(Category.SENIOR, "0")
    engine.set_visitor_count(Category.STUDENT, "0")

    assert engine.subtotal(Category.ADULT) == Decimal("56.00")
    assert engine.subtotal(Category.CHILD) == Decimal("16.50")
    assert engine.total() == Decimal("72.50")
    assert engine.total_visitors() == 3

    summary = engine.summary()
    assert summary is not None
    assert [line.category for line in summary.lines] == [Category.ADULT, Category.CHILD], \
        "Zero-count categories should be left out of the summary"
    assert [line.label for line in summary.lines] == ["2 adults", "1 child"]
    assert summary.total == Decimal("72.50")
    assert summary.total_visitors == 3


def test_free_children_still_listed(engine):
    engine.select_museum("met")
    engine.set_visitor_count(Category.CHILD, "3")

    assert engine.subtotal(Category.CHILD) == Decimal("0.00")
    assert engine.total() == Decimal("0.00")
    assert engine.total_visitors() == 3

    summary = engine.summary()
    assert summary is not None, "Summary shows whenever visitors are entered, even if free"
    assert len(summary.lines) == 1
    assert summary.lines[0].label == "3 childs"
    assert summary.lines[0].subtotal == Decimal("0.00")


def test_switching_museum_keeps_counts(engine):
    engine.select_museum("met")
    engine.set_visitor_count(Category.ADULT, "2")
    engine.set_visitor_count(Category.STUDENT, "1")
    assert engine.total() == Decimal("77.00")  # 2 × 30 + 17

    engine.select_museum("moma")
    assert engine.selected.id == "moma"
    assert engine.visitors.adult == 2 and engine.visitors.student == 1
    assert engine.total() == Decimal("64.00")  # 2 × 25 + 14


def test_reset_on_select_setting():
    engine = PricingEngine(settings=Settings.load(reset_counts_on_select=True))
    engine.select_museum("met")
    engine.set_visitor_count(Category.ADULT, "2")

    engine.select_museum("moma")
    assert engine.total_visitors() == 0
    assert engine.total() == 0


def test_unknown_museum_keeps_selection(engine):
    engine.select_museum("whitney")
    assert engine.select_museum("louvre") is None
    assert engine.selected.id == "whitney"


def test_unknown_museum_from_empty_state(engine):
    assert engine.select_museum("") is None
    assert engine.selected is None


def test_no_upper_bound_on_counts(engine):
    engine.select_museum("brooklyn")
    engine.set_visitor_count(Category.ADULT, "100000")
    assert engine.total() == Decimal("2000000.00")


def test_listeners_fire_after_each_change(engine):
    seen = []
    unsubscribe = engine.subscribe(lambda e: seen.append((e.selected and e.selected.id, e.total())))

    engine.select_museum("guggenheim")
    engine.set_visitor_count(Category.SENIOR, "2")
    engine.select_museum("nowhere")  # ignored, no notification
    engine.select_museum("guggenheim")  # already selected, no notification
    engine.reset_counts()

    assert seen == [
        ("guggenheim", Decimal("0.00")),
        ("guggenheim", Decimal("44.00")),
        ("guggenheim", Decimal("0.00")),
    ]

    unsubscribe()
    engine.set_visitor_count(Category.ADULT, "1")
    assert len(seen) == 3


def test_summary_trace_explains_total(engine):
    engine.select_museum("amnh")
    engine.set_visitor_count(Category.ADULT, "2")
    engine.set_visitor_count(Category.CHILD, "1")

    text = engine.summary().get_trace_text()
    assert "American Museum of Natural History" in text
    assert "Adult: 2 × $28.00 = $56.00" in text
    assert "Child: 1 × $16.50 = $16.50" in text
    assert "Total: Sum of category subtotals = $72.50" in text


def test_summary_records_for_export(engine):
    engine.select_museum("whitney")
    engine.set_visitor_count(Category.SENIOR, "1")
    engine.set_visitor_count(Category.STUDENT, "2")

    records = engine.summary().to_records()
    assert records == [
        {"Museum": "Whitney Museum", "Category": "senior", "Visitors": 1, "Unit Price": 24.0, "Subtotal": 24.0},
        {"Museum": "Whitney Museum", "Category": "student", "Visitors": 2, "Unit Price": 24.0, "Subtotal": 48.0},
    ]


def test_summary_hidden_until_visitors_entered(engine):
    engine.select_museum("moma")
    assert engine.total_visitors() == 0
    assert engine.summary() is None, "No summary while every count is zero"

    engine.set_visitor_count(Category.ADULT, "1")
    assert engine.summary() is not None

    engine.set_visitor_count(Category.ADULT, "0")
    assert engine.summary() is None


def test_visitor_counts_model_rejects_negatives():
    counts = VisitorCounts()
    counts.set(Category.CHILD, -4)
    counts.set("adult", 3)
    assert counts.child == 0
    assert counts.as_dict() == {"adult": 3, "child": 0, "senior": 0, "student": 0}
