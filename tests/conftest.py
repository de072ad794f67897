import os
import sys

import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from museum_tickets.engine import PricingEngine


@pytest.fixture(scope="function")  # fresh selection and counts per test
def engine():
    return PricingEngine()
