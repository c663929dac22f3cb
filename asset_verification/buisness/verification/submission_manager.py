"""
SubmissionManager - Records employee attestations

Classifies each entry and appends a VerificationRecord. A resubmission for
the same (cycle, employee, asset) stamps the previous record superseded
rather than editing it.
"""

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from asset_verification import db
from asset_verification.data.core.employee import Employee
from asset_verification.data.verification.cycle import VerificationCycle
from asset_verification.data.verification.record import VerificationRecord
from asset_verification.buisness.verification.classifier import classify_submission, normalize_identifier
from asset_verification.buisness.verification.errors import (
    InvalidStateError,
    NotFoundError,
    ValidationError,
    VerificationDomainError,
)
from asset_verification.buisness.verification.policies import AssetAssignmentPolicy, SubmissionWindowPolicy
from asset_verification.logger import get_logger
from asset_verification.utils.timekeeping import utc_now

logger = get_logger("asset_verification.buisness.submissions")


def _coerce_id(value, field: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer id", details={field: value})


class SubmissionManager:

    def submit(self, cycle_id, employee_id: str, asset_id, entered_asset_id: Optional[str],
               notes: Optional[str] = None) -> VerificationRecord:
        """
        Record one attestation.

        Raises:
            ValidationError: Missing entry, unknown asset, or asset not assigned to the employee
            NotFoundError: Unknown cycle or employee
            CycleClosedError: The cycle is no longer active
        """
        records = self.submit_batch(cycle_id, employee_id, [
            {'asset_id': asset_id, 'entered_asset_id': entered_asset_id, 'notes': notes},
        ])
        return records[0]

    def submit_batch(self, cycle_id, employee_id: str,
                     entries: Sequence[Dict[str, Any]]) -> List[VerificationRecord]:
        """
        Record several attestations in one transaction; either all are stored or none.

        Each entry is a mapping with ``asset_id``, ``entered_asset_id`` and optional ``notes``.
        """
        cycle_id = _coerce_id(cycle_id, 'cycle_id')
        employee_id = (employee_id or '').strip()
        if not employee_id:
            raise ValidationError("employeeId is required")
        if not entries:
            raise ValidationError("At least one verification entry is required")

        try:
            cycle = SubmissionWindowPolicy.lock_open_cycle(cycle_id)
            employee = Employee.query.filter_by(emp_id=employee_id).first()
            if employee is None:
                raise NotFoundError(f"Employee {employee_id} not found", details={'employee_id': employee_id})

            now = utc_now()
            records = []
            seen = set()
            for entry in entries:
                asset_id = _coerce_id(entry.get('asset_id'), 'asset_id')
                if asset_id in seen:
                    raise ValidationError(f"Asset {asset_id} appears more than once in the submission",
                                          details={'asset_id': asset_id})
                seen.add(asset_id)
                records.append(self._append_record(cycle, employee, asset_id,
                                                   entry.get('entered_asset_id'), entry.get('notes'), now))
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            logger.warning(f"Concurrent submission for cycle {cycle_id} by {employee_id} rejected",
                           extra={"cycle_id": cycle_id, "employee_id": employee_id})
            raise InvalidStateError(
                "Another submission for the same asset was recorded at the same time; please retry",
                details={'cycle_id': cycle_id, 'employee_id': employee_id},
            )
        except VerificationDomainError as e:
            db.session.rollback()
            logger.info(f"Submission for cycle {cycle_id} by {employee_id} rejected: {e.message}",
                        extra={"cycle_id": cycle_id, "employee_id": employee_id})
            raise

        logger.info(
            f"Recorded {len(records)} verification(s) for {employee_id} in cycle {cycle_id}: "
            + ", ".join(f"{r.asset_id}={r.status}" for r in records),
            extra={"cycle_id": cycle_id, "employee_id": employee_id},
        )
        return records

    def _append_record(self, cycle: VerificationCycle, employee: Employee, asset_id: int,
                       entered_value: Optional[str], notes: Optional[str], now) -> VerificationRecord:
        if not normalize_identifier(entered_value):
            raise ValidationError("Please enter the asset ID or mark it as lost",
                                  details={'asset_id': asset_id})

        asset = AssetAssignmentPolicy.check(asset_id, employee.emp_id)
        classification = classify_submission(asset.tag, entered_value, notes)

        db.session.execute(
            db.update(VerificationRecord)
            .where(
                VerificationRecord.cycle_id == cycle.id,
                VerificationRecord.employee_id == employee.emp_id,
                VerificationRecord.asset_id == asset.id,
                VerificationRecord.superseded_at.is_(None),
            )
            .values(superseded_at=now)
            .execution_options(synchronize_session=False)
        )

        record = VerificationRecord(
            cycle_id=cycle.id,
            employee_id=employee.emp_id,
            employee_name=employee.full_name,
            asset_id=asset.id,
            expected_tag=asset.tag,
            entered_asset_id=classification.entered_asset_id,
            status=classification.status,
            is_match=classification.is_match,
            notes=classification.notes,
            verification_date=now,
        )
        db.session.add(record)
        db.session.flush()
        return record

    def submitted_asset_ids(self, cycle_id, employee_id: str) -> List[int]:
        """Asset ids with a current record for the employee in the cycle"""
        cycle_id = _coerce_id(cycle_id, 'cycle_id')
        rows = (
            db.session.query(VerificationRecord.asset_id)
            .filter(
                VerificationRecord.cycle_id == cycle_id,
                VerificationRecord.employee_id == employee_id,
                VerificationRecord.superseded_at.is_(None),
            )
            .order_by(VerificationRecord.asset_id)
            .all()
        )
        return [row[0] for row in rows]

    def employee_status(self, cycle_id, employee_id: str) -> Dict[str, Any]:
        """Whether the employee has submitted anything in the cycle, and how many records"""
        count = len(self.submitted_asset_ids(cycle_id, employee_id))
        return {'has_submitted': count > 0, 'submission_count': count}
