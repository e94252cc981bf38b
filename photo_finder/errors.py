"""Service exception types.

Service code stays HTTP-agnostic and raises these; the app's exception handlers
map each one to a status code and an ``{error, details}`` body.
"""

from typing import Optional


class PhotoFinderError(Exception):
    """Base class for every failure reported to a caller."""

    status_code: int = 500
    public_message: str = "Request failed."
    expose_details: bool = True

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message
        self.details = details


class CriteriaValidationError(PhotoFinderError):
    """Required input missing or malformed (e.g. no recipient, non-numeric bound)."""

    status_code = 400
    public_message = "Invalid request."
    expose_details = False


class FolderScanError(PhotoFinderError):
    """The photos folder could not be listed."""

    public_message = "Failed to search photos."


class MetadataResolveError(PhotoFinderError):
    """At least one creation-time lookup failed; the batch is unusable."""

    public_message = "Failed to search photos."


class NoMatchesError(PhotoFinderError):
    """A report was requested but the search matched nothing."""

    status_code = 404
    public_message = "No photos matched the search criteria."
    expose_details = False


class ReportGenerationError(PhotoFinderError):
    """Writing the report document failed."""

    public_message = "Failed to generate report."


class DeliveryError(PhotoFinderError):
    """The mail relay rejected the upload or could not be reached."""

    status_code = 502
    public_message = "Failed to send report email."
