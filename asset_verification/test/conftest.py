"""
Pytest configuration and fixtures for the verification engine
"""
import os

# Console-only logging during tests
os.environ['LOG_DIR'] = ''

import pytest  # noqa: E402

from asset_verification import create_app  # noqa: E402
from asset_verification import db as _db  # noqa: E402
from asset_verification.test.factories import add_asset, add_employee  # noqa: E402

TEST_CONFIG = {
    'TESTING': True,
    'SECRET_KEY': 'test-secret-key',
    'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    'ENABLE_HTTPS': False,
    'FORCE_HTTPS_REDIRECT': False,
    'RATELIMIT_ENABLED': False,
}


@pytest.fixture(scope='function')
def app():
    """Create Flask application on a fresh in-memory database"""
    app = create_app(TEST_CONFIG)

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture(scope='function')
def db(app):
    return _db


@pytest.fixture(scope='function')
def client(app):
    """Create Flask test client"""
    return app.test_client()


@pytest.fixture(scope='function')
def runner(app):
    """Create Flask CLI runner"""
    return app.test_cli_runner()


@pytest.fixture
def seeded(app):
    """
    Two employees with assets and one unassigned asset:

    EMP001: LT-1, LT-2, LT-3
    EMP002: LT-4, MN-5
    (unassigned): LT-6
    """
    employees = {
        'EMP001': add_employee('EMP001', 'Priya Raman', 'Engineering'),
        'EMP002': add_employee('EMP002', 'Marcus Osei', 'Finance'),
    }
    assets = {
        'LT-1': add_asset('LT-1', 'EMP001'),
        'LT-2': add_asset('LT-2', 'EMP001'),
        'LT-3': add_asset('LT-3', 'EMP001'),
        'LT-4': add_asset('LT-4', 'EMP002'),
        'MN-5': add_asset('MN-5', 'EMP002', asset_type='Monitor'),
        'LT-6': add_asset('LT-6', None, status='STORAGE'),
    }
    return {'employees': employees, 'assets': assets}
