from __future__ import annotations

import io

from flask import jsonify, send_file

from ..core.result import Failure
from ..exports.model import ExportFile


def fetch_failed(failure: Failure):
    """Fetch failures are retryable from the UI."""
    return jsonify({"success": False, "message": failure.reason, "retry": True}), 502


def send_export(export: ExportFile):
    return send_file(
        io.BytesIO(export.content),
        mimetype=export.mimetype,
        as_attachment=True,
        download_name=export.filename,
    )
