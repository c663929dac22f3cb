"""
Flask CLI commands for the verification engine

    flask --app asset_verification verification summary [--cycle-id N]
    flask --app asset_verification verification audit-report
    flask --app asset_verification verification init-db [--demo-data]
"""

import click
from flask import current_app
from flask.cli import AppGroup
from tabulate import tabulate

from asset_verification.buisness.audit.structs import AuditThresholds
from asset_verification.buisness.verification.context import VerificationContext
from asset_verification.buisness.verification.errors import VerificationDomainError

verification_cli = AppGroup('verification', help='Verification cycle and audit reporting commands')


def _context():
    return VerificationContext.default(AuditThresholds.from_config(current_app.config))


@verification_cli.command('summary')
@click.option('--cycle-id', type=int, default=None, help='Cycle to summarize (default: most recent)')
def summary_command(cycle_id):
    """Print the compliance summary for a cycle"""
    try:
        rollup = _context().get_cycle_rollup(cycle_id)
    except VerificationDomainError as e:
        raise click.ClickException(e.message)

    if rollup.cycle is None:
        click.echo("No verification cycles have been started")
        return

    click.echo(f"Cycle {rollup.cycle.id}: {rollup.cycle.title} ({rollup.cycle.status})")
    click.echo(
        f"Employees: {rollup.total_employees}  Verified: {rollup.verified_count}  "
        f"Discrepant: {rollup.discrepant_count}  Pending: {rollup.pending_count}  "
        f"Submitted: {rollup.submitted_count}"
    )
    rows = [
        [s.employee_id, s.employee_name, s.department, s.total_assigned, s.total_verified,
         s.matched, s.mismatched, s.flagged, s.overall_status, f"{s.compliance}%"]
        for s in rollup.summaries
    ]
    headers = ['Employee', 'Name', 'Department', 'Assigned', 'Submitted',
               'Matched', 'Mismatched', 'Flagged', 'Status', 'Compliance']
    click.echo(tabulate(rows, headers=headers, tablefmt='grid'))


@verification_cli.command('audit-report')
def audit_report_command():
    """Print the audit findings and section overview"""
    report = _context().get_audit_report()

    click.echo(f"Audit report generated at {report.generated_at.isoformat()}")
    overview = []
    if report.assets is not None:
        overview.append(['Assets', report.assets['total_assets'],
                         f"{report.assets['assigned']} assigned, {report.assets['unassigned']} unassigned"])
    if report.verification is not None:
        overview.append(['Verification', report.verification['total'],
                         f"{report.verification['verified']} verified, {report.verification['pending']} pending, "
                         f"{report.verification['flagged']} flagged"])
    if report.licenses is not None:
        overview.append(['Licenses', report.licenses['total'],
                         f"{report.licenses['expired']} expired, {report.licenses['expiring']} expiring"])
    if report.workspace is not None:
        overview.append(['Workspace', report.workspace['total_desks'],
                         f"{report.workspace['utilization']}% utilized"])
    for section, error in sorted(report.section_errors.items()):
        overview.append([section.title(), '-', f"unavailable: {error}"])
    click.echo(tabulate(overview, headers=['Section', 'Total', 'Detail'], tablefmt='grid'))

    if report.findings:
        rows = [[f.severity.upper(), f.area, f.message] for f in report.findings]
        click.echo(tabulate(rows, headers=['Severity', 'Area', 'Finding'], tablefmt='grid'))
    else:
        click.echo("No findings")


@verification_cli.command('init-db')
@click.option('--demo-data/--no-demo-data', default=False, help='Load the demo fixture after creating tables')
def init_db_command(demo_data):
    """Create tables and optionally load demo data"""
    from asset_verification.build import build_database

    summary = build_database(enable_demo_data=demo_data)
    click.echo("Database tables ready")
    for group, result in summary.items():
        click.echo(f"{group}: {result['status']}")
