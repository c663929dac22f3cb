#!/usr/bin/env python3
#USE VENV: source venv/bin/activate
"""
Run script for the asset verification engine
"""

import argparse
import os
import sys

from dotenv import load_dotenv

# Load environment variables from .env file before the app reads them
load_dotenv()

from asset_verification import create_app  # noqa: E402
from asset_verification.build import build_database  # noqa: E402
from asset_verification.logger import get_logger  # noqa: E402

# Run 'python generate_env.py' to create a .env file with a secure SECRET_KEY.

logger = get_logger("asset_verification.run")


def parse_arguments():
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(description='Asset Verification Engine')
    parser.add_argument('--build-only', action='store_true',
                        help='Create database tables (and demo data if enabled), then exit without starting the server')
    parser.add_argument('--demo-data', action='store_true', default=False, dest='demo_data',
                        help='Insert demo employees, assets, licenses and desks')
    parser.add_argument('--no-demo-data', action='store_false', dest='demo_data',
                        help='Do not insert demo data (default)')
    return parser.parse_args()


if __name__ == '__main__':
    args = parse_arguments()
    app = create_app()

    logger.debug("Starting Asset Verification Engine...")
    with app.app_context():
        build_database(enable_demo_data=args.demo_data)

    if args.build_only:
        logger.debug("Build completed. Exiting without starting web server.")
        sys.exit(0)

    debug_mode = os.environ.get('FLASK_DEBUG', 'False').lower() in ('true', '1', 'yes', 'on')
    use_reloader = os.environ.get('USE_RELOADER', 'False').lower() in ('true', '1', 'yes', 'on')
    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', '5000'))

    if debug_mode:
        logger.warning("DEBUG MODE ENABLED - Do not use in production!")

    logger.info(f"Starting server on {host}:{port} (debug={debug_mode}, reloader={use_reloader})")
    app.run(debug=debug_mode, host=host, port=port, use_reloader=use_reloader)
