"""Exception types shared by the conversion and validation packages."""


class ReportError(Exception):
    """Base exception for report conversion and validation errors."""

    pass


class ParseError(ReportError):
    """Raised when input is malformed for its declared source format."""

    pass


class InvalidRequest(ReportError):
    """Raised for an unknown format label or identical source and target formats."""

    pass


class UnsupportedConversion(ReportError):
    """Raised when a (source, target) pair is valid but not a wired route."""

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"Conversion from {source} to {target} is not supported")


class ValidationInputError(ReportError):
    """Raised when validator input is not a report record at all."""

    pass
