"""
Tests for the `flask verification` CLI group
"""

from asset_verification.buisness.verification.context import VerificationContext
from asset_verification.data.core.employee import Employee


def test_summary_without_cycles(runner, seeded):
    result = runner.invoke(args=['verification', 'summary'])
    assert result.exit_code == 0
    assert 'No verification cycles have been started' in result.output


def test_summary_table(runner, seeded):
    ctx = VerificationContext.default()
    cycle = ctx.start_cycle('Q1 2026', 'ADMIN01')
    ctx.submit_verification(cycle.id, 'EMP001', seeded['assets']['LT-1'].id, 'LT-1')

    result = runner.invoke(args=['verification', 'summary', '--cycle-id', str(cycle.id)])

    assert result.exit_code == 0
    assert 'Q1 2026' in result.output
    assert 'Priya Raman' in result.output
    assert '33%' in result.output


def test_summary_unknown_cycle(runner, seeded):
    result = runner.invoke(args=['verification', 'summary', '--cycle-id', '999'])
    assert result.exit_code != 0
    assert 'Verification cycle 999 not found' in result.output


def test_audit_report_command(runner, seeded):
    result = runner.invoke(args=['verification', 'audit-report'])
    assert result.exit_code == 0
    assert 'Audit report generated at' in result.output
    assert '1 asset unassigned' in result.output


def test_init_db_with_demo_data(runner, app):
    result = runner.invoke(args=['verification', 'init-db', '--demo-data'])
    assert result.exit_code == 0
    assert 'Employees: inserted' in result.output
    assert Employee.query.count() == 4

    again = runner.invoke(args=['verification', 'init-db', '--demo-data'])
    assert 'Employees: skipped' in again.output
    assert Employee.query.count() == 4
