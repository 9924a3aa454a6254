from .resolve import job_from_row, resolve_row
from .size_gate import check_file_size

__all__ = ["check_file_size", "job_from_row", "resolve_row"]
