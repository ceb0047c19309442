"""Models describing the SCC IaC validation report consumed by the tooling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class PolicyDetails:
    """Details of the policy a violation was raised against."""

    constraint: str = ""
    constraint_type: str = ""
    compliance_standards: Tuple[str, ...] = ()
    description: str = ""


@dataclass(frozen=True, slots=True)
class PostureDetails:
    """Posture deployment the violated policy belongs to."""

    posture_deployment: str = ""
    posture_deployment_target_resource: str = ""
    posture: str = ""
    posture_revision_id: str = ""
    policy_set: str = ""


@dataclass(frozen=True, slots=True)
class AssetDetails:
    """The IaC asset that violated the policy."""

    asset: str = ""
    asset_type: str = ""


@dataclass(frozen=True, slots=True)
class Violation:
    """A single finding from an IaC validation report.

    ``severity`` holds the value exactly as it appeared in the report; it is
    canonicalised through :meth:`Severity.parse` by the consumers.
    """

    asset_id: str = ""
    policy_id: str = ""
    severity: str = ""
    next_steps: str = ""
    violated_policy: PolicyDetails = field(default_factory=PolicyDetails)
    violated_posture: PostureDetails = field(default_factory=PostureDetails)
    violated_asset: AssetDetails = field(default_factory=AssetDetails)


@dataclass(slots=True)
class IaCValidationReport:
    """The ``iacValidationReport`` section of an SCC response."""

    violations: List[Violation] = field(default_factory=list)
    note: str = ""


@dataclass(slots=True)
class ReportResponse:
    """Top-level ``response`` object wrapping the validation report."""

    name: str = ""
    create_time: str = ""
    update_time: str = ""
    iac_validation_report: IaCValidationReport = field(default_factory=IaCValidationReport)

    @property
    def violations(self) -> List[Violation]:
        return self.iac_validation_report.violations
