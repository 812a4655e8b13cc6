"""
FruitFall - Optional sprite images.

Images are looked up relative to an assets directory. Anything missing
or unreadable is reported once and the entity is drawn as a solid
rectangle in its appearance colour instead.
"""
from pathlib import Path
from typing import Dict, Optional, Set, Tuple

import pygame

from arcade_core.logging import get_logger
from games.FruitFall.entity import Appearance, Entity

log = get_logger('sprites')


class SpriteCache:
    """Loads, scales and caches sprite surfaces by path and size."""

    def __init__(self, assets_dir: Optional[Path] = None):
        self._assets_dir = Path(assets_dir) if assets_dir else None
        self._images: Dict[str, pygame.Surface] = {}
        self._scaled: Dict[Tuple[str, int, int], pygame.Surface] = {}
        self._failed: Set[str] = set()

    @property
    def enabled(self) -> bool:
        return self._assets_dir is not None

    def _load(self, image: str) -> Optional[pygame.Surface]:
        if image in self._images:
            return self._images[image]
        if image in self._failed:
            return None

        path = self._assets_dir / image
        if not path.exists():
            log.warning("Sprite file not found: %s", path)
            self._failed.add(image)
            return None

        try:
            surface = pygame.image.load(str(path))
        except pygame.error as e:
            log.warning("Failed to load sprite '%s': %s", path, e)
            self._failed.add(image)
            return None

        # convert_alpha needs a display mode
        if pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self._images[image] = surface
        return surface

    def get(self, image: Optional[str], size: Tuple[float, float]) -> Optional[pygame.Surface]:
        """Get an image scaled to size, or None to fall back to a colour."""
        if not image or not self.enabled:
            return None
        width, height = max(1, int(size[0])), max(1, int(size[1]))
        key = (image, width, height)
        scaled = self._scaled.get(key)
        if scaled is None:
            source = self._load(image)
            if source is None:
                return None
            scaled = pygame.transform.smoothscale(source, (width, height))
            self._scaled[key] = scaled
        return scaled

    def draw(self, screen: pygame.Surface, entity: Entity,
             appearance: Optional[Appearance] = None) -> None:
        """Draw an entity using its image, or its colour as a filled rectangle."""
        appearance = appearance or entity.appearance
        rect = pygame.Rect(int(entity.x), int(entity.y), int(entity.width), int(entity.height))
        image = self.get(appearance.image, (entity.width, entity.height))
        if image is not None:
            screen.blit(image, rect.topleft)
        else:
            pygame.draw.rect(screen, appearance.color, rect)
