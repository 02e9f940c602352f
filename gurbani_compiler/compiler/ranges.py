"""Compile bani membership into contiguous line ranges."""

import logging
from bisect import bisect_left, bisect_right
from collections.abc import Sequence

from gurbani_compiler.errors import IntegrityWarning
from gurbani_compiler.models import BaniLine, LineRange

logger = logging.getLogger(__name__)


def _group_bounds(members: Sequence[BaniLine]) -> dict[int, tuple[BaniLine, BaniLine, int]]:
    """Map each line group to its first member, last member and member count.

    Groups keep the order in which they first appear.
    """
    bounds: dict[int, tuple[BaniLine, BaniLine, int]] = {}
    for member in members:
        if member.line_group not in bounds:
            bounds[member.line_group] = (member, member, 1)
            continue
        first, last, count = bounds[member.line_group]
        if member.order_id < first.order_id:
            first = member
        if member.order_id > last.order_id:
            last = member
        bounds[member.line_group] = (first, last, count + 1)
    return bounds


def compile_ranges(members: Sequence[BaniLine]) -> list[LineRange]:
    """Reduce a bani's membership to one boundary range per line group.

    Members must be ordered by ``order_id``. Each group is represented by
    the lines at its lowest and highest ``order_id``; lines between the
    boundaries that are not members are not reported here (see
    ``find_gaps``).

    Args:
        members: The bani's membership rows.

    Returns:
        One LineRange per line group, in order of first appearance.
    """
    return [
        LineRange(line_group=group, start_line=first.line_id, end_line=last.line_id)
        for group, (first, last, _) in _group_bounds(members).items()
    ]


def find_gaps(
    members: Sequence[BaniLine], line_orders: Sequence[int], bani: str = ""
) -> list[IntegrityWarning]:
    """Report line groups whose range covers lines that are not members.

    Args:
        members: The bani's membership rows.
        line_orders: Ascending order_ids of every line spanned by the
            membership. Order ids need not be consecutive.
        bani: Bani name used in the warning messages.

    Returns:
        One IntegrityWarning per non-contiguous line group.
    """
    warnings: list[IntegrityWarning] = []
    for group, (first, last, count) in _group_bounds(members).items():
        spanned = bisect_right(line_orders, last.order_id) - bisect_left(line_orders, first.order_id)
        missing = spanned - count
        if missing > 0:
            warning = IntegrityWarning(bani, group, missing)
            logger.warning("%s", warning)
            warnings.append(warning)
    return warnings
