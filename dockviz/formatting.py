SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
TRUNCATED_ID_LENGTH = 12


def human_size(raw: int) -> str:
    """Format a byte count with decimal units, e.g. ``103.7 MB``.

    Values of 1000 TB and above are outside the unit scale and raise IndexError.
    """
    value = float(raw)
    index = 0
    while value >= 1000:
        value /= 1000
        index += 1
    return f"{value:.1f} {SIZE_UNITS[index]}"


def truncate_id(image_id: str) -> str:
    return image_id[:TRUNCATED_ID_LENGTH]
