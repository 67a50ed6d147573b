"""Multi-format exporters for validation results.

Supports:

*  **Console**: plain-text summary for terminals and CI logs.
*  **JSON**: machine-readable, schema-validated, for CI artifact storage.
*  **Markdown**: human-readable, suitable for PR comments.
*  **HTML**: self-contained HTML document with embedded CSS.

All exporters accept a finished :class:`ValidationResult` and produce a
string.  Issues are rendered in recorded order; exporters never mutate
the result.
"""

from __future__ import annotations

import html as html_mod
from pathlib import Path

from contract_validator.contracts.load import validate_instance
from contract_validator.model import Severity
from contract_validator.model.result import ValidationResult
from contract_validator.utils.json_norm import stable_json_dumps

FORMATS = ("console", "markdown", "html", "json")

_TIME_FMT = "%H:%M:%S"
_DATETIME_FMT = "%Y-%m-%d %H:%M:%S UTC"
_RULE = "=" * 40


def _fmt_time(result: ValidationResult, fmt: str) -> tuple[str, str]:
    started = result.started_at.strftime(fmt)
    finished = result.finished_at.strftime(fmt) if result.finished_at else "-"
    return started, finished


# ════════════════════════════════════════════════════════════════════
# Console exporter
# ════════════════════════════════════════════════════════════════════


def export_console(result: ValidationResult) -> str:
    started, finished = _fmt_time(result, _TIME_FMT)
    lines = [
        "",
        _RULE,
        "VALIDATION RESULTS",
        _RULE,
        f"Base URL:    {result.base_url}",
        f"Endpoints:   {result.total_endpoints}",
        f"Issues:      {result.total_issues}",
        f"Duration:    {result.duration_ms} ms",
        f"Started:     {started}",
        f"Finished:    {finished}",
        f"Status:      {result.status}",
        _RULE,
    ]
    if result.total_issues:
        lines += ["", "ISSUES FOUND:", "-" * 12]
        lines += [str(issue) for issue in result.issues]
    else:
        lines += ["", "All endpoints passed validation!"]
    lines.append(_RULE)
    return "\n".join(lines) + "\n"


# ════════════════════════════════════════════════════════════════════
# JSON exporter
# ════════════════════════════════════════════════════════════════════


def export_json(result: ValidationResult, *, indent: int = 2) -> str:
    """Export a ``ValidationResult`` as schema-validated JSON."""
    data = result.to_dict()
    validate_instance(data, "validation_result.schema.json")
    return stable_json_dumps(data, indent=indent)


# ════════════════════════════════════════════════════════════════════
# Markdown exporter
# ════════════════════════════════════════════════════════════════════


def _md_cell(value: str | None) -> str:
    if value is None:
        return "-"
    return value.replace("|", "\\|").replace("\n", " ")


def export_markdown(result: ValidationResult) -> str:
    started, finished = _fmt_time(result, _DATETIME_FMT)
    lines: list[str] = []

    lines.append("# API Contract Validation Report")
    lines.append("")
    lines.append(f"**Base URL:** `{result.base_url}`  ")
    lines.append(f"**Status:** {result.status}  ")
    lines.append(f"**Endpoints:** {result.total_endpoints}  ")
    lines.append(
        f"**Issues:** {result.total_issues} "
        f"({result.error_count} errors, {result.warning_count} warnings)  "
    )
    lines.append(f"**Duration:** {result.duration_ms} ms  ")
    lines.append(f"**Started:** {started}  ")
    lines.append(f"**Finished:** {finished}")
    lines.append("")

    if result.issues:
        lines.append("## Issues")
        lines.append("")
        lines.append("| Severity | Method | Endpoint | Description | Expected | Actual |")
        lines.append("|----------|--------|----------|-------------|----------|--------|")
        for i in result.issues:
            lines.append(
                f"| {i.severity.value} | {i.method} | `{_md_cell(i.path)}` "
                f"| {_md_cell(i.description)} | {_md_cell(i.expected)} "
                f"| {_md_cell(i.actual)} |"
            )
        lines.append("")
    else:
        lines.append("All endpoints passed validation.")
        lines.append("")

    lines.append("---")
    lines.append(f"*Generated by api-contract-validator {result.tool_version}*")
    lines.append("")
    return "\n".join(lines)


# ════════════════════════════════════════════════════════════════════
# HTML exporter
# ════════════════════════════════════════════════════════════════════

_STATUS_CLASS = {"FAILED": "error", "WARNINGS": "warning", "PASSED": "success"}

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>API Contract Validation Report</title>
<style>
  body {{ font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; margin: 40px; background: #f5f5f5; }}
  .container {{ max-width: 1200px; margin: 0 auto; background: #fff; padding: 30px; border-radius: 10px; }}
  h1 {{ color: #2c3e50; border-bottom: 3px solid #3498db; padding-bottom: 10px; }}
  .summary {{ background: #ecf0f1; padding: 20px; border-radius: 5px; margin-bottom: 30px; }}
  .status {{ padding: 3px 12px; border-radius: 12px; font-weight: bold; color: #fff; display: inline-block; }}
  .status-success {{ background: #27ae60; }}
  .status-error {{ background: #e74c3c; }}
  .status-warning {{ background: #f39c12; }}
  table {{ width: 100%; border-collapse: collapse; margin-top: 20px; }}
  th, td {{ padding: 10px; text-align: left; border-bottom: 1px solid #ddd; }}
  th {{ background: #3498db; color: #fff; }}
  .error-row {{ background: #ffebee; }}
  .warning-row {{ background: #fff3e0; }}
  footer {{ margin-top: 30px; color: #7f8c8d; font-size: 0.9em; }}
</style>
</head>
<body>
<div class="container">
{body}
</div>
</body>
</html>
"""


def export_html(result: ValidationResult) -> str:
    """Export a ``ValidationResult`` as a self-contained HTML document."""
    esc = html_mod.escape
    started, finished = _fmt_time(result, _DATETIME_FMT)
    status_cls = _STATUS_CLASS[result.status]
    parts: list[str] = []

    parts.append("<h1>API Contract Validation Report</h1>")
    parts.append('<div class="summary">')
    parts.append(f"<p><strong>Base URL:</strong> {esc(result.base_url)}</p>")
    parts.append(f"<p><strong>Endpoints Checked:</strong> {result.total_endpoints}</p>")
    parts.append(f"<p><strong>Issues Found:</strong> {result.total_issues}</p>")
    parts.append(f"<p><strong>Duration:</strong> {result.duration_ms} ms</p>")
    parts.append(f"<p><strong>Started:</strong> {started}</p>")
    parts.append(f"<p><strong>Finished:</strong> {finished}</p>")
    parts.append(
        f'<p><strong>Status:</strong> '
        f'<span class="status status-{status_cls}">{result.status}</span></p>'
    )
    parts.append("</div>")

    if result.issues:
        parts.append("<h2>Issues Found</h2>")
        parts.append(
            "<table><thead><tr><th>Severity</th><th>Method</th><th>Endpoint</th>"
            "<th>Description</th><th>Expected</th><th>Actual</th></tr></thead><tbody>"
        )
        for i in result.issues:
            kind = "error" if i.severity is Severity.ERROR else "warning"
            parts.append(
                f'<tr class="{kind}-row">'
                f'<td><span class="status status-{kind}">{i.severity.value}</span></td>'
                f"<td>{esc(i.method)}</td>"
                f"<td><code>{esc(i.path)}</code></td>"
                f"<td>{esc(i.description)}</td>"
                f"<td>{esc(i.expected or '-')}</td>"
                f"<td>{esc(i.actual or '-')}</td>"
                f"</tr>"
            )
        parts.append("</tbody></table>")
    else:
        parts.append("<h2>All endpoints passed validation!</h2>")

    parts.append(
        f"<footer>Generated by api-contract-validator {esc(result.tool_version)}"
        f" &bull; {finished}</footer>"
    )
    return _HTML_TEMPLATE.format(body="\n".join(parts))


# ════════════════════════════════════════════════════════════════════
# Dispatcher
# ════════════════════════════════════════════════════════════════════

_SUFFIX_FORMATS = {
    ".html": "html",
    ".htm": "html",
    ".json": "json",
    ".md": "markdown",
    ".markdown": "markdown",
}


def select_format(output_path: str | Path | None, explicit: str | None = None) -> str:
    """Pick the report format: explicit flag, else output suffix, else console."""
    if explicit:
        if explicit not in FORMATS:
            raise ValueError(f"Unknown report format: {explicit!r} (use {'|'.join(FORMATS)})")
        return explicit
    if output_path is None or not str(output_path).strip():
        return "console"
    return _SUFFIX_FORMATS.get(Path(output_path).suffix.lower(), "console")


def export_result(result: ValidationResult, fmt: str = "console") -> str:
    """Export a ``ValidationResult`` in the specified format.

    Raises
    ------
    ValueError
        If *fmt* is not recognised.
    """
    if fmt == "console":
        return export_console(result)
    if fmt == "json":
        return export_json(result)
    if fmt in ("markdown", "md"):
        return export_markdown(result)
    if fmt == "html":
        return export_html(result)
    raise ValueError(f"Unknown report format: {fmt!r} (use {'|'.join(FORMATS)})")
