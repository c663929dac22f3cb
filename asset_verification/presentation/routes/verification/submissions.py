"""
Submission routes: single and batch attestations
"""

from flask import jsonify

from asset_verification import limiter
from asset_verification.buisness.verification.errors import ValidationError
from asset_verification.presentation.routes import current_context
from asset_verification.presentation.routes.verification import verification_bp
from asset_verification.presentation.routes.verification.cycles import json_body, pick
from asset_verification.services.verification.verification_service import VerificationService

SUBMISSION_LIMIT = "60 per minute"


@verification_bp.post('/submissions')
@limiter.limit(SUBMISSION_LIMIT)
def submit_verification():
    data = json_body()
    ctx = current_context()
    record = ctx.submit_verification(
        cycle_id=pick(data, 'cycle_id', 'cycleId'),
        employee_id=pick(data, 'employee_id', 'employeeId'),
        asset_id=pick(data, 'asset_id', 'assetId'),
        entered_asset_id=pick(data, 'entered_asset_id', 'enteredAssetId'),
        notes=pick(data, 'notes'),
    )
    return jsonify(VerificationService.serialize_record(record)), 201


@verification_bp.post('/submissions/batch')
@limiter.limit(SUBMISSION_LIMIT)
def submit_batch():
    data = json_body()
    entries = pick(data, 'entries')
    if not isinstance(entries, list):
        raise ValidationError("entries must be a list of verification entries")

    normalized = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValidationError("Each verification entry must be an object")
        normalized.append({
            'asset_id': pick(entry, 'asset_id', 'assetId'),
            'entered_asset_id': pick(entry, 'entered_asset_id', 'enteredAssetId'),
            'notes': pick(entry, 'notes'),
        })

    ctx = current_context()
    records = ctx.submit_batch(
        cycle_id=pick(data, 'cycle_id', 'cycleId'),
        employee_id=pick(data, 'employee_id', 'employeeId'),
        entries=normalized,
    )
    return jsonify([VerificationService.serialize_record(r) for r in records]), 201
