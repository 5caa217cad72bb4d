"""
Exception hierarchy for the GanttPRO importer

Fatal errors (validation, configuration, project creation) propagate to the
caller. Task-level errors are caught by the importer and recorded as outcomes.
"""
from typing import Any, Optional


class GanttProImportError(Exception):
    """Base class for all importer errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GanttProImportError):
    """Import request is missing fields or malformed"""


class ConfigurationError(GanttProImportError):
    """Required configuration (API key) is not available"""


class RemoteError(GanttProImportError):
    """
    The GanttPRO API rejected a call, could not be reached, or answered with
    a payload we could not use.

    Args:
        message: Human readable description
        status: HTTP status code, when a response was received
        body: Parsed JSON body or raw text of the response, when available
    """

    def __init__(self, message: str, status: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status = status
        self.body = body

    def to_dict(self) -> dict:
        data = {'error': self.message}
        if self.status is not None:
            data['status'] = self.status
        if self.body is not None:
            data['details'] = self.body
        return data


class ProjectCreationError(RemoteError):
    """Project could not be created. Aborts the whole import."""


class TaskCreationError(RemoteError):
    """A single task could not be created. The import continues."""


class NormalizationFailure(RemoteError):
    """No identifier could be found in a response payload"""
