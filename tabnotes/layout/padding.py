"""Padding helpers shared by the layout engines."""

DASH = "-"


def dashes(count: int) -> str:
    """Return ``count`` dashes (an empty string for zero or less)."""
    return DASH * count


def center_pad(label: str, total_width: int, fill: str = DASH) -> str:
    """Center a label in a cell of fixed width.

    When the leftover width is odd the extra fill character goes on the
    right.

    Parameters
    ----------
    label : str
        The text to center.
    total_width : int
        The cell width. Must be at least ``len(label)``.
    fill : str
        The padding character.

    Returns
    -------
    str
        The padded cell, exactly ``total_width`` characters long.

    Examples
    --------
    >>> center_pad("3", 2)
    '3-'
    >>> center_pad("12", 3)
    '12-'
    >>> center_pad("7", 4)
    '-7--'
    """
    padding = total_width - len(label)
    left = padding // 2
    right = padding - left
    return fill * left + label + fill * right
