from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import ValidationError
from ..punches.model import PunchEvent
from .export import write_report_csv, write_report_excel

logger = logging.getLogger(__name__)

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    def _summaries_from_args():
        """Resolve the reporting window from ?start=&end= or ?month=&period=."""
        guard = request.args.get("guard") or None
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        if start_s or end_s:
            if not start_s or not end_s:
                raise ValidationError("Both start and end are required")
            return service.calculate(parse_iso_date(start_s), parse_iso_date(end_s), guard=guard), f"{start_s}_{end_s}"

        month = request.args.get("month")
        if not month:
            raise ValidationError("Missing month (YYYY-MM) or start/end")
        period = request.args.get("period") or "ALL"
        return service.calculate_for_period(month, period, guard=guard), f"{month}_{period}"

    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _download(payload: bytes, *, mimetype: str, filename: str):
        return app.response_class(
            payload,
            mimetype=mimetype,
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return _error(str(e), 400)

    @app.errorhandler(500)
    def handle_internal_error(e):
        logger.error("Unhandled error on %s: %s", request.path, getattr(e, "original_exception", e))
        return _error("Internal error while computing payroll", 500)

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_summary")
    def payroll_summary():
        summaries, _ = _summaries_from_args()
        return jsonify([s.to_dict() for s in summaries])

    @app.route("/api/payroll", methods=["POST"], endpoint="payroll_calculate")
    def payroll_calculate():
        """Compute over posted punch events instead of the configured source."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Expected a JSON object body")

        raw_events = data.get("events")
        if not isinstance(raw_events, list) or not all(isinstance(e, dict) for e in raw_events):
            raise ValidationError("events must be a list of objects")

        start = parse_iso_date(str(data.get("start", "")))
        end = parse_iso_date(str(data.get("end", "")))
        try:
            events = [PunchEvent.from_dict(e) for e in raw_events]
        except (TypeError, ValueError):
            raise ValidationError("Malformed punch event") from None

        summaries = service.calculate(start, end, guard=data.get("guard") or None, events=events)
        return jsonify([s.to_dict() for s in summaries])

    @app.route("/payroll/report.csv", methods=["GET"], endpoint="payroll_report_csv")
    def payroll_report_csv():
        summaries, label = _summaries_from_args()
        return _download(write_report_csv(summaries), mimetype="text/csv", filename=f"payroll_{label}.csv")

    @app.route("/payroll/report.xlsx", methods=["GET"], endpoint="payroll_report_xlsx")
    def payroll_report_xlsx():
        summaries, label = _summaries_from_args()
        return _download(write_report_excel(summaries), mimetype=XLSX_MIMETYPE, filename=f"payroll_{label}.xlsx")

    @app.route("/api/guards", methods=["GET"], endpoint="guard_names")
    def guard_names():
        return jsonify(service.guard_names())

    @app.route("/api/guards/status", methods=["GET"], endpoint="guard_status")
    def guard_status():
        status = container.guard_status_service.current_status()
        return jsonify({"status": status.value})
