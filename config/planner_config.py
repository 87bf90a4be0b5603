"""
Shared configuration for the package planner.

Centralizes tunable parameters and dataset locations so the ranking
engine, the web API and the CLI agree on them. Values marked (env) can be
overridden with the environment variable of the same name prefixed with
PLANNER_.
"""

import logging
import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# =============================================================================
# Combination Search
# =============================================================================
# Largest package combination explored. Search cost grows as C(n, k) for n
# packages with coverage, so raising this quickly gets expensive.  (env)
MAX_COMBINATION_SIZE = int(os.getenv('PLANNER_MAX_COMBINATION_SIZE', '3'))

# =============================================================================
# Prices
# =============================================================================
CENTS_PER_UNIT = 100             # Dataset prices are integer cents
CURRENCY_SYMBOL = '€'            # Used by the CLI report only

# =============================================================================
# Datasets
# =============================================================================
DATA_DIR = Path(os.getenv('PLANNER_DATA_DIR', str(PROJECT_ROOT / 'data' / 'csv')))  # (env)
DATA_BASE_URL = os.getenv('PLANNER_DATA_URL') or None                              # (env)

GAMES_FILE = 'bc_game.csv'
PACKAGES_FILE = 'bc_streaming_package.csv'
OFFERS_FILE = 'bc_streaming_offer.csv'

HTTP_TIMEOUT = 30                # Seconds, for datasets fetched over HTTP

# =============================================================================
# Logging
# =============================================================================
LOG_LEVEL = getattr(logging, os.getenv('PLANNER_LOG_LEVEL', 'INFO').upper(), logging.INFO)  # (env)
