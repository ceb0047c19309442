"""Convert SCC IaC validation violations into a SARIF report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..models import (
    ResultEntry,
    RuleCatalogEntry,
    RuleProperties,
    SarifReport,
    Severity,
    ToolDriver,
    Violation,
)

logger = logging.getLogger(__name__)

TOOL_NAME = "analyze-code-security-scc"
TOOL_VERSION = "1.0.0"
TOOL_INFORMATION_URI = "https://cloud.google.com/security-command-center/docs/validate-iac"

RESULT_MESSAGE_TEMPLATE = "Asset type: {asset_type} has a violation, next steps: {next_steps}"

DEFAULT_DRIVER = ToolDriver(
    name=TOOL_NAME,
    version=TOOL_VERSION,
    information_uri=TOOL_INFORMATION_URI,
)


@dataclass(slots=True)
class ConversionResult:
    """Rule catalog and result list produced from one set of violations."""

    rules: List[RuleCatalogEntry]
    results: List[ResultEntry]


class SarifConverter:
    """Build SARIF rules and results from IaC validation violations."""

    def __init__(self, driver: ToolDriver | None = None) -> None:
        self.driver = driver or DEFAULT_DRIVER

    # ------------------------------------------------------------------
    def convert(self, violations: Sequence[Violation]) -> SarifReport:
        """Return a single-run SARIF report describing ``violations``."""

        converted = self.transform(violations)
        return SarifReport(driver=self.driver, rules=converted.rules, results=converted.results)

    # ------------------------------------------------------------------
    def transform(self, violations: Sequence[Violation]) -> ConversionResult:
        """Return the rule catalog and the result list for ``violations``.

        Every violation's severity is validated before anything is built, so
        a single invalid severity fails the whole conversion.
        """

        rules = self._build_rules(violations)
        results = [self._build_result(violation) for violation in violations]

        logger.debug("Converted %d violations into %d rules", len(results), len(rules))
        return ConversionResult(rules=rules, results=results)

    # ------------------------------------------------------------------
    def _build_rules(self, violations: Sequence[Violation]) -> List[RuleCatalogEntry]:
        first_seen: Dict[str, tuple[Violation, Severity]] = {}
        for violation in violations:
            severity = Severity.parse(violation.severity)
            if violation.policy_id not in first_seen:
                first_seen[violation.policy_id] = (violation, severity)

        return [
            self._build_rule(policy_id, violation, severity)
            for policy_id, (violation, severity) in first_seen.items()
        ]

    def _build_rule(
        self, policy_id: str, violation: Violation, severity: Severity
    ) -> RuleCatalogEntry:
        policy = violation.violated_policy
        posture = violation.violated_posture

        return RuleCatalogEntry(
            id=policy_id,
            description=policy.description,
            properties=RuleProperties(
                severity=severity.value,
                policy_type=policy.constraint_type,
                compliance_standard=tuple(policy.compliance_standards),
                policy_set=posture.policy_set,
                posture=posture.posture,
                posture_revision_id=posture.posture_revision_id,
                posture_deployment_id=posture.posture_deployment,
                constraints=policy.constraint,
                next_steps=violation.next_steps,
            ),
        )

    def _build_result(self, violation: Violation) -> ResultEntry:
        asset = violation.violated_asset
        return ResultEntry(
            rule_id=violation.policy_id,
            message=RESULT_MESSAGE_TEMPLATE.format(
                asset_type=asset.asset_type,
                next_steps=violation.next_steps,
            ),
            asset_id=violation.asset_id,
            asset_type=asset.asset_type,
            asset=asset.asset,
        )


__all__ = [
    "ConversionResult",
    "DEFAULT_DRIVER",
    "RESULT_MESSAGE_TEMPLATE",
    "SarifConverter",
    "TOOL_INFORMATION_URI",
    "TOOL_NAME",
    "TOOL_VERSION",
]
