#!/usr/bin/env python3
"""
Build orchestrator for the asset verification engine
Creates tables and optionally loads demo data
"""

from asset_verification import db
from asset_verification.logger import get_logger

logger = get_logger("asset_verification.build")


def build_database(enable_demo_data=False):
    """
    Create all tables (idempotent) and optionally insert demo data.

    Must run inside an application context.

    Args:
        enable_demo_data (bool): Load debug/demo_data.json after creating tables

    Returns:
        dict: Demo data summary (empty when demo data is disabled)
    """
    logger.info("Creating database tables...")
    db.create_all()
    logger.info("Database tables ready")

    from asset_verification.debug.debug_data_manager import insert_demo_data
    return insert_demo_data(enabled=enable_demo_data)
