from .job import JobDescriptor
from .outcome import Failure, OutcomeStatus, RowResult, Success, UploadOutcome

__all__ = [
    "JobDescriptor",
    "Failure",
    "OutcomeStatus",
    "RowResult",
    "Success",
    "UploadOutcome",
]
