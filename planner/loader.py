"""
Dataset loading for the planner.

Reads the games, packages and offers CSV files either from a local
directory or from a base URL. Every field is kept as a string (blank
cells stay ""), which is what the indexer expects.

Usage:
    from planner.loader import load_datasets
    datasets = load_datasets()                       # config.DATA_DIR
    datasets = load_datasets(base_url='https://example.org/csv')
"""

import io
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Union

import pandas as pd
import requests

from config import planner_config as cfg
from config.logging_config import get_logger

log = get_logger(__name__)


class DatasetLoadError(Exception):
    """A dataset could not be fetched or parsed."""

    def __init__(self, source, reason):
        self.source = str(source)
        self.reason = reason
        super().__init__(f"Could not load {self.source}: {reason}")


class Datasets(NamedTuple):
    games: List[Dict[str, str]]
    packages: List[Dict[str, str]]
    offers: List[Dict[str, str]]


def _is_url(source) -> bool:
    return isinstance(source, str) and source.startswith(('http://', 'https://'))


def _fetch_text(url: str) -> str:
    resp = requests.get(url, timeout=cfg.HTTP_TIMEOUT)
    resp.raise_for_status()
    return resp.text


def read_csv(source: Union[str, Path]) -> List[Dict[str, str]]:
    """Read one CSV file (path or http(s) URL) into a list of string rows."""
    try:
        if _is_url(source):
            buffer = io.StringIO(_fetch_text(source))
        else:
            buffer = Path(source)
        df = pd.read_csv(buffer, dtype=str, keep_default_na=False)
    except (requests.RequestException, OSError, ValueError) as e:
        # pandas parse errors (EmptyDataError, ParserError) are ValueErrors
        raise DatasetLoadError(source, e) from e

    return df.to_dict('records')


def _location(data_dir=None, base_url=None):
    """Dataset root: a base URL (argument or PLANNER_DATA_URL) wins over a directory."""
    base_url = base_url or cfg.DATA_BASE_URL
    if base_url:
        return base_url.rstrip('/')
    return Path(data_dir) if data_dir else cfg.DATA_DIR


def _source(root, name):
    return f"{root}/{name}" if isinstance(root, str) else root / name


def load_games(data_dir: Optional[Union[str, Path]] = None,
               base_url: Optional[str] = None) -> List[Dict[str, str]]:
    """Load only the games dataset, for callers that need team names."""
    root = _location(data_dir, base_url)
    games = read_csv(_source(root, cfg.GAMES_FILE))
    log.info(f"Loaded {len(games)} games from {root}")
    return games


def load_datasets(data_dir: Optional[Union[str, Path]] = None,
                  base_url: Optional[str] = None) -> Datasets:
    """
    Load the three datasets.

    A base URL (argument or PLANNER_DATA_URL) takes precedence over the
    data directory.

    Raises:
        DatasetLoadError: if any of the files is missing or unreadable
    """
    root = _location(data_dir, base_url)
    games, packages, offers = (
        read_csv(_source(root, name))
        for name in (cfg.GAMES_FILE, cfg.PACKAGES_FILE, cfg.OFFERS_FILE)
    )
    log.info(f"Loaded {len(games)} games, {len(packages)} packages, {len(offers)} offers from {root}")
    return Datasets(games=games, packages=packages, offers=offers)
