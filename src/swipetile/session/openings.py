"""Free-edge computation for a client inside its cluster."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

from swipetile.kernel.model import Client, ClientID, Openings, Segment


def _flush(a: float, b: float) -> bool:
    return math.isclose(a, b, abs_tol=1e-9)


def subtract_segments(length: float, blocked: Iterable[Segment]) -> tuple[Segment, ...]:
    """Remove blocked stretches from the edge ``[0, length)``.

    Zero-length leftovers are dropped, so a fully covered edge yields ().
    """
    free = [Segment(0, length)]
    for block in blocked:
        remaining: list[Segment] = []
        for seg in free:
            if block.end <= seg.start or block.start >= seg.end:
                remaining.append(seg)
                continue
            if block.start > seg.start:
                remaining.append(Segment(seg.start, block.start))
            if block.end < seg.end:
                remaining.append(Segment(block.end, seg.end))
        free = remaining
    return tuple(seg for seg in free if seg.length > 0)


def _neighbors(clients: Mapping[ClientID, Client], client: Client) -> list[Client]:
    return [
        clients[other_id]
        for other_id in sorted(client.adjacent_client_ids)
        if other_id != client.id and other_id in clients
    ]


def get_openings(clients: Mapping[ClientID, Client], client: Client) -> Openings:
    """Compute the free segments on every edge of ``client``.

    Only direct neighbours (``adjacent_client_ids``) whose footprint sits
    exactly flush against an edge take space away from it.
    """
    x, y = client.transform.x, client.transform.y
    width, height = client.size.width, client.size.height

    top: list[Segment] = []
    bottom: list[Segment] = []
    left: list[Segment] = []
    right: list[Segment] = []

    for other in _neighbors(clients, client):
        ox, oy = other.transform.x, other.transform.y
        ow, oh = other.size.width, other.size.height
        along_x = Segment(ox - x, ox + ow - x)
        along_y = Segment(oy - y, oy + oh - y)

        if _flush(oy + oh, y):
            top.append(along_x)
        if _flush(oy, y + height):
            bottom.append(along_x)
        if _flush(ox + ow, x):
            left.append(along_y)
        if _flush(ox, x + width):
            right.append(along_y)

    return Openings(
        top=subtract_segments(width, top),
        bottom=subtract_segments(width, bottom),
        left=subtract_segments(height, left),
        right=subtract_segments(height, right),
    )
