from pathlib import Path

import pytest

from iac_validation.adapters import ReportLoader, ReportLoaderError

FIXTURES = Path(__file__).resolve().parent.parent / "fixtures"


def test_load_report_from_json_artifact():
    loader = ReportLoader(FIXTURES / "iac_report.json")

    data = loader.load_report()

    violations = data["response"]["iacValidationReport"]["violations"]
    assert len(violations) == 4
    assert violations[0]["policyId"] == "organizations/123/policies/publicAccessPrevention"


def test_load_report_tolerates_byte_order_mark(tmp_path):
    report_path = tmp_path / "bom.json"
    report_path.write_text('\ufeff{"response": {}}', encoding="utf-8")

    assert ReportLoader(report_path).load_report() == {"response": {}}


def test_missing_report_raises(tmp_path):
    loader = ReportLoader(tmp_path / "missing.json")

    with pytest.raises(ReportLoaderError, match="not found"):
        loader.load_report()


def test_invalid_json_raises(tmp_path):
    report_path = tmp_path / "broken.json"
    report_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ReportLoaderError, match="Invalid JSON"):
        ReportLoader(report_path).load_report()


def test_non_object_document_raises(tmp_path):
    report_path = tmp_path / "list.json"
    report_path.write_text("[]", encoding="utf-8")

    with pytest.raises(ReportLoaderError, match="JSON object"):
        ReportLoader(report_path).load_report()


def test_undecodable_report_raises(tmp_path):
    report_path = tmp_path / "corrupt.json"
    report_path.write_bytes(b'{"response": "\xff\xfe\xfa"}')

    with pytest.raises(ReportLoaderError, match="Failed to read"):
        ReportLoader(report_path).load_report()
