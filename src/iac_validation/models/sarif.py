"""SARIF 2.1.0 models covering the subset emitted for IaC validation reports.

Only the fields needed to describe SCC IaC violations are modelled. Empty
optional values are dropped on serialization so the emitted JSON stays
compact; ``fullDescription.text`` is always written.

See https://docs.oasis-open.org/sarif/sarif/v2.1.0/sarif-v2.1.0.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA = (
    "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json"
)


def _compact(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in payload.items() if value not in ("", None, [], {})}


@dataclass(frozen=True, slots=True)
class RuleProperties:
    severity: str = ""
    policy_type: str = ""
    compliance_standard: Tuple[str, ...] = ()
    policy_set: str = ""
    posture: str = ""
    posture_revision_id: str = ""
    posture_deployment_id: str = ""
    constraints: str = ""
    next_steps: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                "severity": self.severity,
                "policyType": self.policy_type,
                "complianceStandard": list(self.compliance_standard),
                "policySet": self.policy_set,
                "posture": self.posture,
                "postureRevisionId": self.posture_revision_id,
                "postureDeploymentId": self.posture_deployment_id,
                "constraints": self.constraints,
                "nextSteps": self.next_steps,
            }
        )


@dataclass(frozen=True, slots=True)
class RuleCatalogEntry:
    """A ``reportingDescriptor`` describing one violated policy."""

    id: str
    description: str = ""
    properties: RuleProperties = field(default_factory=RuleProperties)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"fullDescription": {"text": self.description}}
        if self.id:
            payload = {"id": self.id, **payload}
        properties = self.properties.to_dict()
        if properties:
            payload["properties"] = properties
        return payload


@dataclass(frozen=True, slots=True)
class ResultEntry:
    """A SARIF ``result`` describing one violation occurrence."""

    rule_id: str
    message: str
    asset_id: str = ""
    asset_type: str = ""
    asset: str = ""

    def to_dict(self) -> Dict[str, Any]:
        location = _compact({"fullyQualifiedName": self.asset_id})
        return _compact(
            {
                "ruleId": self.rule_id,
                "message": _compact({"text": self.message}),
                "locations": [{"logicalLocations": [location]}],
                "properties": _compact(
                    {
                        "assetId": self.asset_id,
                        "assetType": self.asset_type,
                        "asset": self.asset,
                    }
                ),
            }
        )


@dataclass(frozen=True, slots=True)
class ToolDriver:
    """Identity of the tool that produced the SARIF run."""

    name: str
    version: str
    information_uri: str


@dataclass(slots=True)
class SarifReport:
    """A single-run SARIF log built from an IaC validation report."""

    driver: ToolDriver
    rules: List[RuleCatalogEntry] = field(default_factory=list)
    results: List[ResultEntry] = field(default_factory=list)
    version: str = SARIF_VERSION
    schema: str = SARIF_SCHEMA

    def to_dict(self) -> Dict[str, Any]:
        driver = _compact(
            {
                "name": self.driver.name,
                "version": self.driver.version,
                "informationUri": self.driver.information_uri,
                "rules": [rule.to_dict() for rule in self.rules],
            }
        )
        run: Dict[str, Any] = {"tool": {"driver": driver}}
        if self.results:
            run["results"] = [result.to_dict() for result in self.results]

        return {"version": self.version, "$schema": self.schema, "runs": [run]}
