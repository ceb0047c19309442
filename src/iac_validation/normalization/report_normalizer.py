"""Conversion helpers that turn raw SCC report JSON into service models."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping

from ..adapters import ReportLoaderError
from ..models import (
    AssetDetails,
    IaCValidationReport,
    PolicyDetails,
    PostureDetails,
    ReportResponse,
    Violation,
)


class ReportNormalizer:
    """Normalize SCC IaC validation report JSON into :class:`ReportResponse`."""

    def normalize(self, document: Mapping[str, Any]) -> ReportResponse:
        """Return the normalized response for the supplied report document."""

        if not isinstance(document, Mapping):
            raise ReportLoaderError("IaC validation report must be a JSON object")

        response = self._section(document, "response")
        report = self._section(response, "iacValidationReport")

        raw_violations = report.get("violations")
        if raw_violations is None:
            raw_violations = []
        if not isinstance(raw_violations, list):
            raise ReportLoaderError("'violations' must be a list")

        return ReportResponse(
            name=self._text(response, "name"),
            create_time=self._text(response, "createTime"),
            update_time=self._text(response, "updateTime"),
            iac_validation_report=IaCValidationReport(
                violations=self.normalize_violations(raw_violations),
                note=self._text(report, "note"),
            ),
        )

    def normalize_violations(self, raw_violations: Iterable[Any]) -> List[Violation]:
        return [self._normalize_violation(entry) for entry in raw_violations]

    # ------------------------------------------------------------------
    def _normalize_violation(self, entry: Any) -> Violation:
        if not isinstance(entry, Mapping):
            raise ReportLoaderError(f"Violation entries must be objects, got {type(entry).__name__}")

        policy = self._section(entry, "violatedPolicy")
        posture = self._section(entry, "violatedPosture")
        asset = self._section(entry, "violatedAsset")

        return Violation(
            asset_id=self._text(entry, "assetId"),
            policy_id=self._text(entry, "policyId"),
            severity=self._text(entry, "severity"),
            next_steps=self._text(entry, "nextSteps"),
            violated_policy=PolicyDetails(
                constraint=self._text(policy, "constraint"),
                constraint_type=self._text(policy, "constraintType"),
                compliance_standards=self._text_list(policy, "complianceStandards"),
                description=self._text(policy, "description"),
            ),
            violated_posture=PostureDetails(
                posture_deployment=self._text(posture, "postureDeployment"),
                posture_deployment_target_resource=self._text(
                    posture, "postureDeploymentTargetResource"
                ),
                posture=self._text(posture, "posture"),
                posture_revision_id=self._text(posture, "postureRevisionId"),
                policy_set=self._text(posture, "policySet"),
            ),
            violated_asset=AssetDetails(
                asset=self._text(asset, "asset"),
                asset_type=self._text(asset, "assetType"),
            ),
        )

    def _section(self, data: Mapping[str, Any], key: str) -> Dict[str, Any]:
        value = data.get(key)
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ReportLoaderError(f"'{key}' must be an object")
        return dict(value)

    def _text(self, data: Mapping[str, Any], key: str) -> str:
        value = data.get(key)
        if value is None:
            return ""
        return str(value)

    def _text_list(self, data: Mapping[str, Any], key: str) -> tuple[str, ...]:
        value = data.get(key) or []
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, list):
            raise ReportLoaderError(f"'{key}' must be a list of strings")
        return tuple(str(item) for item in value)
