"""
ImportResult / parse_export_bytes 테스트
"""
import time

import pytest

from exceptions import InvalidExportError
from service.importer.import_service import ImportResult, ItemOutcome, parse_export_bytes


class TestParseExportBytes:
    """업로드 원본 파싱 테스트"""

    def test_bytes_with_bom(self):
        assert parse_export_bytes('\ufeff{"items": []}'.encode("utf-8")) == {"items": []}

    def test_text(self):
        assert parse_export_bytes('{"items": [1]}') == {"items": [1]}

    @pytest.mark.parametrize("raw", [b"\xff\xfe\x00", b"{oops", b"[1, 2]"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidExportError):
            parse_export_bytes(raw)


class TestImportResult:
    """결과 누적기 테스트"""

    def test_record(self):
        result = ImportResult()
        result.record(ItemOutcome("hero", "1", True))
        result.record(ItemOutcome("item", "2", True, warnings=["unknown rank 'X', defaulted to COMMON"]))
        result.record(ItemOutcome("item", None, False, reason="bad"))

        assert result.hero_count == 1
        assert result.gear_count == 1
        assert result.count == 1
        assert result.errors == ["Failed to import item unknown: bad"]
        assert result.warnings == ["item 2: unknown rank 'X', defaulted to COMMON"]

    def test_failure(self):
        result = ImportResult.failure("Invalid export file", "items: Field required", time.monotonic())

        assert result.success is False
        assert result.errors == ["items: Field required"]
        assert result.duration_ms >= 0

    def test_to_dict_keys(self):
        assert set(ImportResult().to_dict()) == {
            "success", "message", "count", "gearCount", "heroCount",
            "durationMs", "errors", "warnings", "timedOut",
        }
