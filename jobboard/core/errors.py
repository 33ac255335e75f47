"""
Error taxonomy for the job board pipeline.

Whole-run failures (MalformedRowError, UpstreamLayoutError, GatewayError)
propagate to the caller. ParseFailure subclasses are raised per detail document
and handled by the aggregator, which drops the affected posting.
"""

from typing import Optional


class JobBoardError(Exception):
    """Base error for everything raised by the pipeline."""


class MalformedRowError(JobBoardError):
    """A listing row cannot be read; the listing layout can no longer be trusted."""

    def __init__(self, message: str, row_index: Optional[int] = None) -> None:
        if row_index is not None:
            message = f"Row {row_index}: {message}"
        super().__init__(message)
        self.row_index = row_index


class ParseFailure(JobBoardError):
    """A single detail document could not be turned into a DetailRecord."""


class PayRateError(ParseFailure):
    """Pay rate paragraph does not hold a number."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Pay rate is not numeric: {text!r}")
        self.text = text


class ParagraphCountError(ParseFailure):
    """Detail document has fewer paragraphs than the field table addresses."""

    def __init__(self, found: int, required: int) -> None:
        super().__init__(
            f"Detail page has {found} paragraphs, at least {required} required"
        )
        self.found = found
        self.required = required


class UpstreamLayoutError(JobBoardError):
    """Every fetched detail document failed to parse."""

    def __init__(self, failed: int) -> None:
        super().__init__(
            f"All {failed} detail pages failed to parse; "
            "the portal layout has probably changed"
        )
        self.failed = failed


class GatewayError(JobBoardError):
    """The gateway could not be reached or answered with an unusable response."""

    def __init__(self, url: str, message: str, status: Optional[int] = None) -> None:
        detail = f"{message} (HTTP {status})" if status is not None else message
        super().__init__(f"{detail}: {url}")
        self.url = url
        self.status = status
