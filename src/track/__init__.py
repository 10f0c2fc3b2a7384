"""Track package: re-export the simulation pieces for simpler imports.

    from track import Character, EntitySpawner, resolve_collisions

Scene and HUD modules import core.session, which imports this package;
import them by path (track.runner_scene, track.track_hud).
"""

from .entities import Character, Collectible, Hitbox, Obstacle, ObstacleKind, clamp_lane
from .physics import JumpPhysics
from .spawner import EntitySpawner, advance_entities, prune_entities
from .collision import CollisionResult, resolve_collisions

__all__ = [
    "Character",
    "Collectible",
    "CollisionResult",
    "EntitySpawner",
    "Hitbox",
    "JumpPhysics",
    "Obstacle",
    "ObstacleKind",
    "advance_entities",
    "clamp_lane",
    "prune_entities",
    "resolve_collisions",
]
