"""
Verification cycle routes: list, start, active, close, per-employee status
"""

from flask import jsonify, request

from asset_verification.presentation.routes import current_context
from asset_verification.presentation.routes.verification import verification_bp
from asset_verification.services.verification.verification_service import VerificationService


def json_body():
    return request.get_json(silent=True) or {}


def pick(data, *names):
    """First present value among snake_case / camelCase spellings"""
    for name in names:
        if data.get(name) is not None:
            return data[name]
    return None


@verification_bp.get('/cycles')
def list_cycles():
    ctx = current_context()
    return jsonify(VerificationService.cycles_payload(ctx))


@verification_bp.post('/cycles')
def start_cycle():
    data = json_body()
    ctx = current_context()
    cycle = ctx.start_cycle(
        title=pick(data, 'title'),
        created_by=pick(data, 'created_by', 'createdBy'),
        notes=pick(data, 'notes'),
    )
    return jsonify(VerificationService.cycle_payload(ctx, cycle)), 201


@verification_bp.get('/cycles/active')
def active_cycle():
    ctx = current_context()
    return jsonify({'cycle': VerificationService.cycle_payload(ctx, ctx.get_active_cycle())})


@verification_bp.post('/cycles/<int:cycle_id>/close')
def close_cycle(cycle_id):
    data = json_body()
    ctx = current_context()
    cycle = ctx.close_cycle(cycle_id, pick(data, 'closed_by', 'closedBy'))
    return jsonify(VerificationService.cycle_payload(ctx, cycle))


@verification_bp.get('/cycles/<int:cycle_id>/employees/<employee_id>/status')
def employee_status(cycle_id, employee_id):
    ctx = current_context()
    return jsonify(ctx.employee_status(cycle_id, employee_id))


@verification_bp.get('/cycles/<int:cycle_id>/employees/<employee_id>/submitted')
def submitted_assets(cycle_id, employee_id):
    ctx = current_context()
    return jsonify({'asset_ids': ctx.submitted_asset_ids(cycle_id, employee_id)})
