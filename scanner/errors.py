# scanner/errors.py


class ScannerError(Exception):
    pass

class StreamExhausted(ScannerError, EOFError):
    """Raised when the input source has no more lines (or was closed)."""
    pass

class InvalidArgument(ScannerError, ValueError):
    pass
