"""Tests for the sales report PDF export."""

from datetime import datetime
from decimal import Decimal

import pytest

from meatmart.store import SalesLedger


def _ledger() -> SalesLedger:
    ledger = SalesLedger()
    ledger.record_sale(datetime(2026, 10, 19, 10), Decimal("615.00"))
    ledger.record_sale(datetime(2026, 11, 2, 16), Decimal("280.00"))
    return ledger


class TestSalesPDF:
    def test_generate_sales_pdf_creates_file(self, tmp_path):
        """generate_sales_pdf writes a PDF file."""
        pytest.importorskip("reportlab")
        from meatmart.pdf import generate_sales_pdf

        output = tmp_path / "sales.pdf"
        result = generate_sales_pdf(_ledger().report(), output)
        assert result == output
        assert output.stat().st_size > 0
        with open(output, "rb") as f:
            assert f.read(4) == b"%PDF"

    def test_generate_sales_pdf_creates_parent_dirs(self, tmp_path):
        pytest.importorskip("reportlab")
        from meatmart.pdf import generate_sales_pdf

        output = tmp_path / "reports" / "2026" / "sales.pdf"
        generate_sales_pdf(_ledger().report(), output, currency_symbol="$")
        assert output.exists()

    def test_generate_sales_pdf_empty_report(self, tmp_path):
        """An empty ledger still renders."""
        pytest.importorskip("reportlab")
        from meatmart.pdf import generate_sales_pdf

        output = tmp_path / "empty.pdf"
        generate_sales_pdf(SalesLedger().report(), output)
        assert output.exists()
