from __future__ import annotations


class ConsolePlotError(ValueError):
    pass


class ValidationError(ConsolePlotError):
    """Series or options rejected before any scene is built."""


class EncodingError(ConsolePlotError):
    """Scene markup could not be serialized or percent-encoded."""


class UnsupportedPlotError(ConsolePlotError, NotImplementedError):
    """Plot variant that validates but has no renderer, such as 3D scatter."""
