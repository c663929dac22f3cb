"""
Audit findings rules

Deterministic rules over the compiled sections. A rule whose section is
missing (None) is skipped. Findings are ordered high -> medium -> low, then by
area name; order within the same severity and area follows rule order.
Nothing is de-duplicated.
"""

from typing import Any, Dict, List, Optional

from asset_verification.buisness.audit.structs import (
    AREA_ASSETS,
    AREA_LICENSES,
    AREA_VERIFICATION,
    AREA_WORKSPACE,
    HIGH,
    LOW,
    MEDIUM,
    SEVERITY_RANK,
    AuditFinding,
    AuditThresholds,
)


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _asset_findings(assets: Dict[str, Any], thresholds: AuditThresholds) -> List[AuditFinding]:
    findings = []
    expired = assets['warranty_expired']
    if expired > 0:
        findings.append(AuditFinding(
            HIGH,
            f"{expired} {_plural(expired, 'asset has an expired warranty', 'assets have expired warranties')}",
            AREA_ASSETS,
        ))
    expiring = assets['warranty_expiring']
    if expiring > 0:
        findings.append(AuditFinding(
            MEDIUM,
            f"{expiring} asset {_plural(expiring, 'warranty', 'warranties')} expiring within "
            f"{thresholds.expiry_window_days} days",
            AREA_ASSETS,
        ))
    unassigned = assets['unassigned']
    if unassigned > 0:
        findings.append(AuditFinding(
            LOW,
            f"{unassigned} {_plural(unassigned, 'asset', 'assets')} unassigned",
            AREA_ASSETS,
        ))
    return findings


def _license_findings(licenses: Dict[str, Any], thresholds: AuditThresholds) -> List[AuditFinding]:
    findings = []
    expired = licenses['expired']
    if expired > 0:
        findings.append(AuditFinding(
            HIGH, f"{expired} {_plural(expired, 'license', 'licenses')} expired", AREA_LICENSES,
        ))
    expiring = licenses['expiring']
    if expiring > 0:
        findings.append(AuditFinding(
            MEDIUM,
            f"{expiring} {_plural(expiring, 'license', 'licenses')} expiring within "
            f"{thresholds.expiry_window_days} days",
            AREA_LICENSES,
        ))
    return findings


def _verification_findings(verification: Dict[str, Any], thresholds: AuditThresholds) -> List[AuditFinding]:
    findings = []
    flagged = verification['flagged']
    if flagged > 0:
        findings.append(AuditFinding(
            HIGH,
            f"{flagged} {_plural(flagged, 'asset', 'assets')} reported lost during verification",
            AREA_VERIFICATION,
        ))
    discrepant = verification['discrepant_employees']
    if discrepant > 0:
        findings.append(AuditFinding(
            MEDIUM,
            f"{discrepant} {_plural(discrepant, 'employee has', 'employees have')} discrepant verifications",
            AREA_VERIFICATION,
        ))
    pending = verification['pending']
    if pending > thresholds.pending_backlog:
        findings.append(AuditFinding(
            LOW,
            f"{pending} {_plural(pending, 'verification', 'verifications')} still pending",
            AREA_VERIFICATION,
        ))
    return findings


def _workspace_findings(workspace: Dict[str, Any], thresholds: AuditThresholds) -> List[AuditFinding]:
    if workspace['total_desks'] == 0:
        return []
    utilization = workspace['utilization']
    if utilization > thresholds.utilization_high:
        return [AuditFinding(
            LOW,
            f"Workspace utilization at {utilization}% is above the {thresholds.utilization_high}% threshold",
            AREA_WORKSPACE,
        )]
    if utilization < thresholds.utilization_low:
        return [AuditFinding(
            LOW,
            f"Workspace utilization at {utilization}% is below the {thresholds.utilization_low}% threshold",
            AREA_WORKSPACE,
        )]
    return []


def derive_findings(assets: Optional[Dict[str, Any]], verification: Optional[Dict[str, Any]],
                    licenses: Optional[Dict[str, Any]], workspace: Optional[Dict[str, Any]],
                    thresholds: AuditThresholds) -> List[AuditFinding]:
    findings: List[AuditFinding] = []
    if assets is not None:
        findings.extend(_asset_findings(assets, thresholds))
    if verification is not None:
        findings.extend(_verification_findings(verification, thresholds))
    if licenses is not None:
        findings.extend(_license_findings(licenses, thresholds))
    if workspace is not None:
        findings.extend(_workspace_findings(workspace, thresholds))

    # sort() is stable, so rule order survives inside (severity, area)
    findings.sort(key=lambda f: (SEVERITY_RANK[f.severity], f.area))
    return findings
