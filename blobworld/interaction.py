"""Blob to cloud soft contact.

Overlapping clouds pick up a share of the blob's velocity plus a small
impulse along the cloud-to-blob centre line. The blob itself is never pushed.
"""

from __future__ import annotations

import math
from typing import Iterable

from blobworld.clouds import Cloud
from blobworld.constants import CLOUD_RADIUS_RATIO, PUSH_STRENGTH, SEPARATION_FORCE
from blobworld.entities import Blob


def resolve_cloud_contacts(blob: Blob, clouds: Iterable[Cloud]) -> int:
    """Apply contact impulses; returns how many clouds were touched."""
    contacts = 0
    for cloud in clouds:
        dx = blob.pos[0] - cloud.pos[0]
        dy = blob.pos[1] - cloud.pos[1]
        distance = math.hypot(dx, dy)
        # coincident centres have no defined normal
        if not 0 < distance < blob.radius + cloud.size * CLOUD_RADIUS_RATIO:
            continue
        cloud.velocity[0] += blob.velocity[0] * PUSH_STRENGTH + dx / distance * SEPARATION_FORCE
        cloud.velocity[1] += blob.velocity[1] * PUSH_STRENGTH + dy / distance * SEPARATION_FORCE
        contacts += 1
    return contacts


__all__ = ["resolve_cloud_contacts"]
