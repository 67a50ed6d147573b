"""Report rendering for finished validation results."""

from contract_validator.reports.exporters import (
    FORMATS,
    export_result,
    select_format,
)

__all__ = ["FORMATS", "export_result", "select_format"]
