"""
Operator status page.

Routes: GET /status - HTML dump of every table (operators only)

Dependencies: docvault.application.services, docvault.api.deps
System role: Operational inspection HTTP API
"""

import html
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from docvault.api.deps import get_diagnostics_service, require_operator
from docvault.application.services import DiagnosticsService

router = APIRouter(tags=["status"], dependencies=[Depends(require_operator)])


def render_tables(dump: dict[str, list[dict[str, Any]]]) -> str:
    """Render a table dump as a minimal HTML page with escaped values."""
    parts = ["<!DOCTYPE html>", "<html><head><title>Status</title></head><body>"]
    for table_name, rows in dump.items():
        parts.append(f"<h2>{html.escape(table_name)}</h2>")
        if not rows:
            parts.append("<p>(empty)</p>")
            continue
        columns = list(rows[0].keys())
        parts.append("<table border=\"1\"><tr>")
        parts.extend(f"<th>{html.escape(column)}</th>" for column in columns)
        parts.append("</tr>")
        for row in rows:
            parts.append("<tr>")
            parts.extend(f"<td>{html.escape(str(row[column]))}</td>" for column in columns)
            parts.append("</tr>")
        parts.append("</table>")
    parts.append("</body></html>")
    return "\n".join(parts)


@router.get("/status", response_class=HTMLResponse)
async def status_page(
    diagnostics: DiagnosticsService = Depends(get_diagnostics_service),
) -> HTMLResponse:
    """Dump all tables for operators, with password hashes redacted."""
    dump = await diagnostics.dump_tables()
    return HTMLResponse(render_tables(dump))
