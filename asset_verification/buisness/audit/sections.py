"""
Audit report section builders

Each builder is a pure function of its snapshots and ``now``. Counts are
plain ints and breakdowns are lists sorted by count (desc) then key, so the
same inputs always give the same section.
"""

from collections import Counter, defaultdict
from datetime import datetime, timedelta
from typing import Any, Dict, List, Sequence

from asset_verification.buisness.core.snapshots import (
    AssetSnapshot,
    DeskSnapshot,
    LicenseSnapshot,
)
from asset_verification.buisness.verification.classifier import FLAGGED, PENDING, VERIFIED
from asset_verification.buisness.verification.reconciliation import merge_assets_with_records
from asset_verification.buisness.verification.structs import AssetVerificationItem, CycleRollup
from asset_verification.utils.percentages import percent


def _breakdown(counter: Counter, key_name: str) -> List[Dict[str, Any]]:
    return [
        {key_name: key, 'count': count}
        for key, count in sorted(counter.items(), key=lambda kv: (-kv[1], kv[0]))
    ]


def build_assets_section(assets: Sequence[AssetSnapshot], now: datetime, window_days: int) -> Dict[str, Any]:
    horizon = now + timedelta(days=window_days)
    assigned = sum(1 for a in assets if a.assigned_employee_id)
    return {
        'total_assets': len(assets),
        'status_breakdown': _breakdown(Counter(a.status or 'Unknown' for a in assets), 'status'),
        'by_type': _breakdown(Counter(a.asset_type or 'Unknown' for a in assets), 'type'),
        'assigned': assigned,
        'unassigned': len(assets) - assigned,
        'warranty_expired': sum(
            1 for a in assets if a.warranty_expiry is not None and a.warranty_expiry < now
        ),
        'warranty_expiring': sum(
            1 for a in assets if a.warranty_expiry is not None and now <= a.warranty_expiry < horizon
        ),
    }


def _action_sort_key(item: AssetVerificationItem):
    # Flagged before Pending; stable otherwise
    return 0 if item.status == FLAGGED else 1


def build_verification_section(rollup: CycleRollup, assigned: Sequence[AssetSnapshot], records,
                               assets_by_id, employee_names) -> Dict[str, Any]:
    """
    Verification section for the roll-up's cycle.

    Assigned assets without a record count as Pending; records for assets
    that have since been unassigned are kept.
    """
    items = merge_assets_with_records(assigned, records, assets_by_id, employee_names)
    action_items = sorted((i for i in items if i.status != VERIFIED), key=_action_sort_key)

    return {
        'cycle': rollup.cycle,
        'total': len(items),
        'verified': sum(1 for i in items if i.status == VERIFIED),
        'pending': sum(1 for i in items if i.status == PENDING),
        'flagged': sum(1 for i in items if i.status == FLAGGED),
        'submitted_count': rollup.submitted_count,
        'discrepant_employees': rollup.discrepant_count,
        'employee_summary': list(rollup.summaries),
        'action_items': action_items,
    }


def build_licenses_section(licenses: Sequence[LicenseSnapshot], now: datetime, window_days: int) -> Dict[str, Any]:
    horizon = now + timedelta(days=window_days)

    def is_expired(lic):
        return lic.expiry_date is not None and lic.expiry_date < now

    def is_expiring(lic):
        return lic.expiry_date is not None and now <= lic.expiry_date <= horizon

    groups = defaultdict(list)
    for lic in licenses:
        groups[lic.software_name or 'Unknown'].append(lic)

    by_software = []
    for name, items in groups.items():
        total_seats = sum(max(0, lic.seats_limit) for lic in items)
        used_seats = sum(max(0, lic.used_seats) for lic in items)
        by_software.append({
            'software_name': name,
            'total': len(items),
            'total_seats': total_seats,
            'used_seats': used_seats,
            'seat_utilization': percent(used_seats, total_seats),
            'active': sum(1 for lic in items if not is_expired(lic)),
            'expired': sum(1 for lic in items if is_expired(lic)),
            'expiring': sum(1 for lic in items if is_expiring(lic)),
        })
    by_software.sort(key=lambda row: (-row['total'], row['software_name']))

    return {
        'total': len(licenses),
        'active': sum(1 for lic in licenses if not is_expired(lic)),
        'expired': sum(1 for lic in licenses if is_expired(lic)),
        'expiring': sum(1 for lic in licenses if is_expiring(lic)),
        'by_software': by_software,
    }


def build_workspace_section(desks: Sequence[DeskSnapshot]) -> Dict[str, Any]:
    statuses = Counter(d.status for d in desks)
    occupied = statuses.get('Occupied', 0)
    return {
        'total_desks': len(desks),
        'occupied': occupied,
        'available': statuses.get('Available', 0),
        'reserved': statuses.get('Reserved', 0),
        'utilization': percent(occupied, len(desks)),
    }
