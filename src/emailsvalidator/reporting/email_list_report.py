from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence

from xlsxwriter import Workbook

from emailsvalidator.common.defaults import DEFAULT_TABLE_STYLE
from emailsvalidator.common.utils import prepare_string_for_excel
from emailsvalidator.data.candidate_data import CandidateData
from emailsvalidator.data.rejection import Rejection
from emailsvalidator.reporting.format_manager import FormatManager


@dataclass(frozen=True)
class ReportContext:
    workbook: Workbook
    formats: FormatManager


class ExcelSheetWriter:
    def __init__(self, ctx: ReportContext, *, table_style: str = DEFAULT_TABLE_STYLE):
        self._ctx = ctx
        self._table_style = table_style

    @staticmethod
    def sanitize_table_name(name: str) -> str:
        invalid_chars = ' +-*[]:/\\&()'
        for ch in invalid_chars:
            name = name.replace(ch, '')
        if not name or not name[0].isalpha():
            name = 'T_' + name
        return name[:255]

    def write_report_sheet(
        self,
        *,
        sheet_name: str,
        headers: Sequence[str],
        rows: Iterable[Sequence[Any]],
        cell_format=None,
    ) -> int:
        fm = self._ctx.formats
        cell_format = cell_format or fm.data_cell_format
        sheet = self._ctx.workbook.add_worksheet(sheet_name)

        for c_index, header in enumerate(headers):
            sheet.write_string(0, c_index, header, fm.header_format)

        r_index = 1
        for row in rows:
            for c_index, value in enumerate(row):
                sheet.write_string(r_index, c_index, prepare_string_for_excel(value), cell_format)
            r_index += 1

        # A table needs at least one data row
        if r_index > 1:
            sheet.add_table(0, 0, r_index - 1, len(headers) - 1, {
                "columns": [{"header": str(col)} for col in headers],
                "name": self.sanitize_table_name(sheet_name),
                "style": self._table_style,
            })

        sheet.autofit()
        return r_index - 1


class EmailListReport:
    """Excel workbook listing the cleaned up entries and, optionally, the rejected fields."""

    def __init__(self, output_file: str):
        self.__output_file = output_file
        self.__workbook = Workbook(output_file)
        self.__format_manager = FormatManager(self.__workbook)
        self._ctx = ReportContext(self.__workbook, self.__format_manager)
        self._writer = ExcelSheetWriter(self._ctx)
        self.__records: List[CandidateData] = []
        self.__rejected: List[Rejection] = []

    @property
    def output_file(self) -> str:
        return self.__output_file

    def add_records(self, records: Iterable[CandidateData]) -> None:
        self.__records.extend(records)

    def add_rejections(self, rejected: Iterable[Rejection]) -> None:
        self.__rejected.extend(rejected)

    def generate(self) -> None:
        self._writer.write_report_sheet(
            sheet_name="Addresses",
            headers=["Entry", "Display Name", "Email Address"],
            rows=([r.entry, r.display_name or "", r.email] for r in self.__records),
        )
        if self.__rejected:
            self._writer.write_report_sheet(
                sheet_name="Rejected",
                headers=["Reason", "Text"],
                rows=([r.reason, r.text] for r in self.__rejected),
                cell_format=self.__format_manager.rejected_cell_format,
            )

    def close(self) -> None:
        self.__workbook.close()
