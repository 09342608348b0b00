from .normalize import coerce_series, normalize_series

__all__ = ["coerce_series", "normalize_series"]
