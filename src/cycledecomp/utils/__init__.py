from .naming import describe_edges, format_path

__all__ = [
    "describe_edges",
    "format_path",
]
