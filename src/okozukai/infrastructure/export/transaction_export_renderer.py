"""Transaction export renderer - infrastructure adapter for JSON/CSV export."""

import csv
import json
from io import StringIO

from okozukai.application.dtos import CSV_HEADER, ExportResult
from okozukai.domain.budgeting.value_objects import ExportFormat


class TransactionExportRenderer:
    """Renders an ExportResult into UTF-8 encoded file content.

    CSV output quotes every field and doubles embedded quotes; JSON output
    is an array of flat records with amounts as decimal strings.
    """

    def render(self, result: ExportResult) -> bytes:
        if result.format is ExportFormat.CSV:
            return self._render_csv(result)
        return self._render_json(result)

    @staticmethod
    def _render_json(result: ExportResult) -> bytes:
        payload = [dto.to_dict() for dto in result.transactions]
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")

    @staticmethod
    def _render_csv(result: ExportResult) -> bytes:
        output = StringIO()
        writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for dto in result.transactions:
            writer.writerow(dto.to_csv_row())
        return output.getvalue().encode("utf-8")
