from __future__ import annotations

import csv
import io
from typing import Sequence

import pandas as pd

from .model import PayrollSummary

REPORT_FIELDS = [
    "date",
    "guard_name",
    "status",
    "check_in",
    "check_out",
    "is_late",
    "late_minutes",
    "is_absent",
    "total_work_hours",
    "wage",
    "deduction",
    "net_wage",
    "note",
]

SUMMARY_FIELDS = [
    "guard_name",
    "total_days",
    "total_late_days",
    "total_absent_days",
    "total_wage",
    "total_deduction",
    "diligence_bonus",
    "net_payable",
]


def build_report_rows(summaries: Sequence[PayrollSummary]) -> list[dict]:
    """One flat row per guard-day, in summary order."""
    rows = []
    for s in summaries:
        for d in s.details:
            rows.append(
                {
                    "date": d.date.strftime("%Y-%m-%d"),
                    "guard_name": d.guard_name,
                    "status": d.status.value,
                    "check_in": d.check_in or "",
                    "check_out": d.check_out or "",
                    "is_late": d.is_late,
                    "late_minutes": d.late_minutes,
                    "is_absent": d.is_absent,
                    "total_work_hours": d.total_work_hours,
                    "wage": d.wage,
                    "deduction": d.deduction,
                    "net_wage": d.net_wage,
                    "note": d.note,
                }
            )
    return rows


def build_summary_rows(summaries: Sequence[PayrollSummary]) -> list[dict]:
    return [{name: getattr(s, name) for name in SUMMARY_FIELDS} for s in summaries]


def write_report_csv(summaries: Sequence[PayrollSummary]) -> bytes:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
    writer.writeheader()
    for row in build_report_rows(summaries):
        writer.writerow(row)
    # BOM so spreadsheet apps open Thai text correctly
    return out.getvalue().encode("utf-8-sig")


def write_report_excel(summaries: Sequence[PayrollSummary]) -> bytes:
    """Workbook with a summary sheet and a daily detail sheet, built in memory."""
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        pd.DataFrame(build_summary_rows(summaries), columns=SUMMARY_FIELDS).to_excel(
            writer, index=False, sheet_name="Summary"
        )
        pd.DataFrame(build_report_rows(summaries), columns=REPORT_FIELDS).to_excel(
            writer, index=False, sheet_name="Daily"
        )
    return output.getvalue()
