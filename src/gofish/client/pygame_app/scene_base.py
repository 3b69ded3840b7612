"""Scene contract shared by the boot and table screens."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import pygame  # type: ignore[import-not-found]


@dataclass
class SceneTransition:
    next_scene: "Scene"


class Scene(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...

    def update(self, dt: float) -> SceneTransition | None:
        """Advance by `dt` seconds. The table scene uses it to run the computer's reply."""
        ...

    def render(self, screen: pygame.Surface) -> None: ...
