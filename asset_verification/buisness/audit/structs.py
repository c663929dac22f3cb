from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional


HIGH = 'high'
MEDIUM = 'medium'
LOW = 'low'

SEVERITY_RANK = {HIGH: 0, MEDIUM: 1, LOW: 2}

AREA_ASSETS = 'Assets'
AREA_VERIFICATION = 'Verification'
AREA_LICENSES = 'Licenses'
AREA_WORKSPACE = 'Workspace'


@dataclass(frozen=True)
class AuditFinding:
    severity: str
    message: str
    area: str


@dataclass(frozen=True)
class AuditThresholds:
    expiry_window_days: int = 30
    utilization_high: int = 90
    utilization_low: int = 30
    pending_backlog: int = 0

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'AuditThresholds':
        """Build thresholds from a Flask config mapping, keeping defaults for missing keys"""
        defaults = cls()
        return cls(
            expiry_window_days=int(config.get('AUDIT_EXPIRY_WINDOW_DAYS', defaults.expiry_window_days)),
            utilization_high=int(config.get('AUDIT_UTILIZATION_HIGH', defaults.utilization_high)),
            utilization_low=int(config.get('AUDIT_UTILIZATION_LOW', defaults.utilization_low)),
            pending_backlog=int(config.get('AUDIT_PENDING_BACKLOG_THRESHOLD', defaults.pending_backlog)),
        )


@dataclass
class AuditReport:
    """
    Point-in-time audit report.

    A section is None when it could not be compiled; ``section_errors`` then
    holds the reason keyed by section name.
    """
    generated_at: datetime
    assets: Optional[Dict[str, Any]] = None
    verification: Optional[Dict[str, Any]] = None
    licenses: Optional[Dict[str, Any]] = None
    workspace: Optional[Dict[str, Any]] = None
    findings: List[AuditFinding] = field(default_factory=list)
    section_errors: Dict[str, str] = field(default_factory=dict)
