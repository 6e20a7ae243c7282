from dataclasses import dataclass, field
from typing import List, Tuple

from blobworld.simulation import Simulation


@dataclass
class BlobSnapshot:
    pos: Tuple[float, float]
    velocity: Tuple[float, float]
    on_ground: bool
    scale_x: float
    scale_y: float
    bob_offset: float
    anchor_offset: float
    outline: List[Tuple[float, float]]

    @property
    def draw_y(self) -> float:
        return self.pos[1] + self.bob_offset + self.anchor_offset

    def world_outline(self) -> List[Tuple[float, float]]:
        """Outline scaled and translated to scene coordinates."""
        x, y = self.pos[0], self.draw_y
        return [(x + px * self.scale_x, y + py * self.scale_y) for px, py in self.outline]


@dataclass
class CloudSnapshot:
    pos: Tuple[float, float]
    size: float


@dataclass
class SparkleSnapshot:
    pos: Tuple[float, float]
    size: float
    life: float
    alpha: int


@dataclass
class FrameSnapshot:
    frame: int
    width: float
    height: float
    floor_y: float
    blob: BlobSnapshot
    clouds: List[CloudSnapshot] = field(default_factory=list)
    sparkles: List[SparkleSnapshot] = field(default_factory=list)


class SnapshotService:
    @staticmethod
    def capture(sim: Simulation, with_outline: bool = True) -> FrameSnapshot:
        """Copy everything the renderer needs out of a simulation.

        The snapshot shares no mutable state with the simulation, so drawing
        it can never disturb physics.
        """
        blob = sim.blob
        scale_x, scale_y = blob.render_scale()
        blob_snap = BlobSnapshot(
            pos=(blob.pos[0], blob.pos[1]),
            velocity=(blob.velocity[0], blob.velocity[1]),
            on_ground=blob.on_ground,
            scale_x=scale_x,
            scale_y=scale_y,
            bob_offset=blob.bob_offset,
            anchor_offset=blob.anchor_offset(scale_y),
            outline=blob.silhouette() if with_outline else [],
        )
        clouds = [CloudSnapshot(pos=(c.pos[0], c.pos[1]), size=c.size) for c in sim.clouds]
        sparkles = [
            SparkleSnapshot(pos=(s.pos[0], s.pos[1]), size=s.draw_size, life=s.life, alpha=s.alpha)
            for s in sim.particles
        ]
        return FrameSnapshot(
            frame=sim.frame,
            width=sim.scene.width,
            height=sim.scene.height,
            floor_y=sim.scene.floor_y,
            blob=blob_snap,
            clouds=clouds,
            sparkles=sparkles,
        )


__all__ = ["BlobSnapshot", "CloudSnapshot", "SparkleSnapshot", "FrameSnapshot", "SnapshotService"]
