"""Query engine configuration constants and environment parsing."""
import os
from typing import Dict

from dotenv import load_dotenv

# Values in a local .env file apply unless the variable is already set
load_dotenv()

# ============================================================================
# CONSTANTS
# ============================================================================

ALL = 'all'
PERCENT_DECIMALS = 1
EMPTY_RESULT_MESSAGE = 'No records match the current filters.'

# Time-range select values mapped to the number of trailing periods kept.
TIME_RANGES: Dict[str, int] = {
    '1month': 1,
    '3months': 3,
    '6months': 6,
    '1year': 12,
}

# ============================================================================
# ENVIRONMENT
# ============================================================================

ZERO_POLICY = os.environ.get('DASHBOARD_ZERO_POLICY', 'zero').strip().lower()
CURRENCY_SYMBOL = os.environ.get('DASHBOARD_CURRENCY', '$')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
