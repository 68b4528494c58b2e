from .formatting import DASH, group_indian, format_rupees, display, to_title

__all__ = [
    "DASH",
    "group_indian",
    "format_rupees",
    "display",
    "to_title",
]
