"""
Exceptions raised by the job board core.
"""


class JobBoardError(Exception):
    """Base class for job board failures."""


class JobNotFoundError(JobBoardError, LookupError):
    """Raised by the store when a job id does not exist."""

    def __init__(self, job_id: str):
        super().__init__(f"Job {job_id} not found")
        self.job_id = job_id


class FetchError(JobBoardError):
    """Raised when listing jobs fails and failures are surfaced."""
