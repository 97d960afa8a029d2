"""Byte count formatting for usage reports (binary units)."""

KB = 1024
MB = 1024 * 1024
GB = 1024 * 1024 * 1024


def human_size(size_bytes: int) -> str:
    """Format a byte count as e.g. '512B', '1.50KB', '15.25MB' or '2.00GB'."""
    if size_bytes < KB:
        return f"{size_bytes}B"
    if size_bytes < MB:
        return f"{size_bytes / KB:.2f}KB"
    if size_bytes < GB:
        return f"{size_bytes / MB:.2f}MB"
    return f"{size_bytes / GB:.2f}GB"


def usage_mb(size_bytes: int) -> str:
    """Format a byte count as megabytes with two decimals, whatever its magnitude."""
    return f"{size_bytes / MB:.2f}"
