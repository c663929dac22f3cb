#!/usr/bin/env python3
"""
Demo Data Manager
Loads debug/demo_data.json into the system-of-record tables

Inserts employees, assets, licenses and desks in that order. Each group is
skipped when its table already has rows, so repeated builds are harmless.
"""

from pathlib import Path
import json

from asset_verification.data.core.asset import Asset
from asset_verification.data.core.desk import Desk
from asset_verification.data.core.employee import Employee
from asset_verification.data.core.license import License
from asset_verification.logger import get_logger

logger = get_logger("asset_verification.debug_data_manager")

DEMO_DATA_FILE = Path(__file__).parent / 'demo_data.json'

# Assets reference employees by emp_id value, not by foreign key
MODEL_GROUPS = [
    ('Employees', Employee),
    ('Assets', Asset),
    ('Licenses', License),
    ('Desks', Desk),
]


def load_demo_data(path=DEMO_DATA_FILE):
    with open(path, 'r') as f:
        return json.load(f)


def insert_demo_data(enabled=True, path=DEMO_DATA_FILE):
    """
    Insert demo data

    Args:
        enabled (bool): Whether to insert demo data (default: True)
        path (Path): JSON fixture to load

    Returns:
        dict: Per-group summary, e.g. {'Assets': {'status': 'inserted', 'count': 6}}
    """
    if not enabled:
        logger.info("Demo data insertion is disabled")
        return {}

    data = load_demo_data(path)
    summary = {}
    for group, model in MODEL_GROUPS:
        rows = data.get(group, [])
        if not rows:
            summary[group] = {'status': 'skipped', 'reason': 'no_rows'}
            continue
        if model.query.first() is not None:
            logger.info(f"{group} already present, skipping demo rows")
            summary[group] = {'status': 'skipped', 'reason': 'data_present'}
            continue
        model.bulk_create_from_dicts(rows)
        summary[group] = {'status': 'inserted', 'count': len(rows)}

    logger.info(f"Demo data insertion complete: {summary}")
    return summary
