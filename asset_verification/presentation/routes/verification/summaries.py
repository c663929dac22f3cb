"""
Read-only verification views: cycle summary and employee detail
"""

from flask import jsonify, request

from asset_verification.buisness.verification.errors import ValidationError
from asset_verification.presentation.routes import current_context
from asset_verification.presentation.routes.verification import verification_bp
from asset_verification.services.verification.verification_service import VerificationService


def cycle_id_arg():
    """Optional ``cycle_id`` query argument; absent or empty selects the latest cycle"""
    raw = request.args.get('cycle_id', '').strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValidationError("cycle_id must be an integer", details={'cycle_id': raw})


@verification_bp.get('/summary')
def verification_summary():
    return jsonify(VerificationService.summary_payload(current_context(), cycle_id_arg()))


@verification_bp.get('/employees/<employee_id>')
def employee_detail(employee_id):
    return jsonify(VerificationService.detail_payload(current_context(), employee_id, cycle_id_arg()))
