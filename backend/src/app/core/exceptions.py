class ExtractionError(Exception):
    """Raised when contact extraction for a document fails."""


class PayloadTooLargeError(ExtractionError):
    """Raised when the AI provider rejects the document as too large."""


class ExtractionParseError(ExtractionError):
    """Raised when the AI reply holds no usable contact JSON."""
