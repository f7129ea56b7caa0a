"""
Viewport offset calculation for the list screen.

The screen shows VISIBLE_ROWS rows. Scrolling down moves the window one row
per step once the selection passes the lower margin; scrolling up recenters
immediately; reaching the last row pins the window to the tail.
"""

from constants import VISIBLE_ROWS


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def reposition(selected_index: int, list_length: int, previous_offset: int) -> int:
    """
    Compute the new scroll offset for a selection change.

    Args:
        selected_index: Highlighted row
        list_length: Number of rows in the listing
        previous_offset: Offset before this step

    Returns:
        New offset, always within [0, max(0, list_length - bound)]
    """
    if list_length <= 0:
        return 0

    bound = 2 if list_length > VISIBLE_ROWS - 1 else list_length
    ceiling = max(0, list_length - bound)

    if list_length > VISIBLE_ROWS - 1 and selected_index >= list_length - 1:
        offset = selected_index - (VISIBLE_ROWS - 1)
    elif previous_offset < selected_index - bound:
        offset = _clamp(previous_offset + 1, 0, ceiling)
    elif previous_offset > selected_index - bound:
        offset = _clamp(selected_index - 1, 0, ceiling)
    else:
        offset = previous_offset

    # A pre-seeded negative offset can land on the equality branch
    return _clamp(offset, 0, ceiling)


def ascend_offset(selected_index: int, list_length: int) -> int:
    """Offset jump applied right after leaving a directory, before reposition()."""
    return selected_index - min(VISIBLE_ROWS - 1, list_length)
