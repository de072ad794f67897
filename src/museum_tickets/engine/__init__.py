"""Engine subpackage - catalog loading and ticket pricing."""
from .pricing_engine import PricingEngine, parse_count
from .catalog import Catalog, CatalogError, load_catalog, default_catalog
from .models import Category, Museum, VisitorCounts, Summary, SummaryLine

__all__ = [
    'PricingEngine', 'parse_count',
    'Catalog', 'CatalogError', 'load_catalog', 'default_catalog',
    'Category', 'Museum', 'VisitorCounts', 'Summary', 'SummaryLine',
]
