#!/usr/bin/env python3
"""
Subscription Data Loader

Loads and saves the subscription list as a local JSON file. This stands in
for the app's backend storage; the core only needs "a list of subscriptions".

Functions:
- load_subscriptions: Load subscriptions as domain models
- save_subscriptions: Write subscriptions in the storage shape
"""

import logging
from pathlib import Path
from typing import Any

from ..core.config import get_subscriptions_file
from ..core.json_utils import read_json, write_json
from ..core.models import Subscription

logger = logging.getLogger(__name__)


def _resolve_path(path: str | Path | None) -> Path:
    if path is None:
        return get_subscriptions_file()
    return Path(path)


def load_subscriptions(path: str | Path | None = None) -> list[Subscription]:
    """
    Load subscriptions from a JSON file as domain models.

    Args:
        path: JSON file holding a list of records or {"subscriptions": [...]}.
              If None, uses the configured subscriptions file.

    Returns:
        List of Subscription domain models, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidDateFormat: If a record has a malformed renewal date
        ValueError: If a record is not an object or has an invalid cost or billing cycle
    """
    subscriptions_file = _resolve_path(path)

    if not subscriptions_file.exists():
        raise FileNotFoundError(f"Subscriptions file not found: {subscriptions_file}")

    data: Any = read_json(subscriptions_file)

    # Handle both array format and object format
    if isinstance(data, dict):
        records: list[dict[str, Any]] = data.get("subscriptions", [])
    elif isinstance(data, list):
        records = data
    else:
        records = []

    subscriptions = []
    for record in records:
        if not isinstance(record, dict):
            raise ValueError(f"Invalid subscription record: {record!r}")
        subscriptions.append(Subscription.from_dict(record))

    logger.info(f"Loaded {len(subscriptions)} subscriptions from {subscriptions_file}")
    return subscriptions


def save_subscriptions(subscriptions: list[Subscription], path: str | Path | None = None) -> Path:
    """
    Write subscriptions to a JSON file as {"subscriptions": [...]}.

    Returns:
        Path written
    """
    subscriptions_file = _resolve_path(path)
    write_json(subscriptions_file, {"subscriptions": [sub.to_dict() for sub in subscriptions]})
    logger.info(f"Saved {len(subscriptions)} subscriptions to {subscriptions_file}")
    return subscriptions_file
