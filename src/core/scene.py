from typing import Callable, List
from dataclasses import dataclass, field

UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    """Base for anything the engine can host: gets events, frame deltas and a render call."""

    updaters: List[UpdateFn] = field(default_factory=list)
    running: bool = True

    def update(self, dt_ms: float) -> None:
        for fn in self.updaters:
            fn(dt_ms)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    def render(self) -> None:  # pragma: no cover - visual
        pass

    def close(self) -> None:
        pass
