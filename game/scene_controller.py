"""Scene sequencing state machine driven once per rendered frame.

The controller owns every piece of mutable scene state: the active index,
the live particle field, the focal image placement and the two free-running
counters (focal rotation and caption font). The host feeds it one
:class:`FrameInput` per frame and draws whatever :class:`FrameCommands`
comes back; nothing else ever touches the session.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, Tuple

import constants
from ui.layout import TextPlacement, center_image, center_text_block, point_in_box
from .colors import Color
from .particles import Particle, ParticleKind, advance, spawn
from .scene_registry import SceneCatalog, SceneDescriptor

logger = logging.getLogger("heartdrift")

Vec2 = Tuple[float, float]
Size = Tuple[float, float]
MeasureText = Callable[[str, int], Tuple[float, float]]


@dataclass(frozen=True)
class FrameInput:
    """Host state sampled once at the start of a tick."""

    viewport_size: Size
    pointer: Vec2
    pressed: bool = False


@dataclass(frozen=True)
class ParticleSprite:
    x: float
    y: float
    rotation: float
    color: Color


@dataclass(frozen=True)
class FrameCommands:
    """Everything the renderer needs to present one frame."""

    scene_index: int
    is_terminal: bool
    viewport_size: Size
    background: Color
    particle_kind: ParticleKind
    particles: Tuple[ParticleSprite, ...]
    focal_image: str
    focal_position: Vec2
    focal_rotation: float
    focal_tint: Tuple[float, float, float, float]
    caption: Tuple[TextPlacement, ...]
    text_color: Color
    outline_color: Color
    outline_offset: Vec2
    font_index: int
    pointer_over_focal: bool
    advanced: bool = False


@dataclass
class SceneSession:
    scene_index: int = 0
    particles: List[Particle] = field(default_factory=list)
    focal_position: Vec2 = (0.0, 0.0)
    viewport_size: Size = (0.0, 0.0)
    focal_rotation: float = 0.0
    font_index: int = 0


class SceneController:
    """Advances the scene sequence when the focal image is clicked."""

    def __init__(
        self,
        catalog: SceneCatalog,
        image_sizes: Mapping[str, Size],
        measure_text: MeasureText,
        font_count: int,
        rng: random.Random,
        particle_extent: float = constants.PARTICLE_SPRITE_SIZE,
    ) -> None:
        if font_count < 1:
            raise ValueError("At least one caption font is required")
        catalog.validate(image_sizes)
        self._catalog = catalog
        self._image_sizes = dict(image_sizes)
        self._measure_text = measure_text
        self._font_count = font_count
        self._rng = rng
        self._particle_extent = particle_extent
        self._session: Optional[SceneSession] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def start(self, viewport_size: Size) -> None:
        """Enter scene 0 for the given viewport, discarding any prior state."""

        self._session = SceneSession(viewport_size=viewport_size)
        self._rebuild()
        logger.info(
            f"Scene sequence started: {len(self._catalog)} scenes, viewport={viewport_size}"
        )

    @property
    def session(self) -> SceneSession:
        if self._session is None:
            raise RuntimeError("SceneController.start() has not been called")
        return self._session

    @property
    def scene(self) -> SceneDescriptor:
        return self._catalog.get(self.session.scene_index)

    @property
    def is_terminal(self) -> bool:
        return self._catalog.is_terminal(self.session.scene_index)

    def focal_size(self) -> Size:
        return self._image_sizes[self.scene.focal_image]

    def pointer_over_focal(self, pointer: Vec2) -> bool:
        return point_in_box(pointer, self.session.focal_position, self.focal_size())

    def tick(self, frame: FrameInput) -> FrameCommands:
        """Run one frame of animation, resize handling and click handling."""

        session = self.session
        advance(session.particles, self._particle_extent, session.viewport_size, self._rng)
        session.focal_rotation = self._next_focal_rotation(session.focal_rotation)
        if self._rng.uniform(0.0, 1.0) < constants.FONT_SWITCH_CHANCE:
            session.font_index = (session.font_index + 1) % self._font_count

        if tuple(frame.viewport_size) != tuple(session.viewport_size):
            logger.debug(
                f"Viewport resized {session.viewport_size} -> {frame.viewport_size}; rebuilding scene {session.scene_index}"
            )
            session.viewport_size = tuple(frame.viewport_size)
            self._rebuild()

        hovering = self.pointer_over_focal(frame.pointer)
        advanced = False
        if hovering and frame.pressed and not self.is_terminal:
            self._advance_scene()
            advanced = True
            # Cursor hint follows the new scene's image.
            hovering = self.pointer_over_focal(frame.pointer)

        return self._frame_commands(hovering, advanced)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _advance_scene(self) -> None:
        session = self.session
        previous = self.scene.name
        session.scene_index += 1
        self._rebuild()
        logger.info(f"Scene advanced: {previous} -> {self.scene.name} (index {session.scene_index})")
        if self.is_terminal:
            logger.info("Reached the final scene")

    def _rebuild(self) -> None:
        """Recreate focal placement and particles from scratch for the current scene."""

        session = self.session
        scene = self.scene
        session.focal_position = center_image(
            session.viewport_size,
            self._image_sizes[scene.focal_image],
            constants.FOCAL_VERTICAL_OFFSET,
        )
        session.particles = spawn(
            session.viewport_size, scene.palette, scene.particle_kind, self._rng
        )

    @staticmethod
    def _next_focal_rotation(rotation: float) -> float:
        rotation += constants.FOCAL_ROTATION_STEP
        if rotation >= constants.FULL_TURN:
            return 0.0
        return rotation

    def _layout_caption(self) -> List[TextPlacement]:
        session = self.session
        lines = self.scene.caption
        widths: List[float] = []
        heights: List[float] = []
        for line in lines:
            width, height = self._measure_text(line, session.font_index)
            widths.append(width)
            heights.append(height)
        return center_text_block(
            lines,
            widths,
            heights,
            session.viewport_size,
            constants.CAPTION_Y_OFFSET,
            constants.CAPTION_LINE_SPACING,
        )

    def _frame_commands(self, hovering: bool, advanced: bool) -> FrameCommands:
        session = self.session
        scene = self.scene
        sprites = tuple(
            ParticleSprite(x=p.x, y=p.y, rotation=p.angle, color=p.color)
            for p in session.particles
        )
        return FrameCommands(
            scene_index=session.scene_index,
            is_terminal=self.is_terminal,
            viewport_size=session.viewport_size,
            background=scene.background,
            particle_kind=scene.particle_kind,
            particles=sprites,
            focal_image=scene.focal_image,
            focal_position=session.focal_position,
            focal_rotation=session.focal_rotation,
            focal_tint=constants.FOCAL_TINT,
            caption=tuple(self._layout_caption()),
            text_color=scene.text_color,
            outline_color=scene.outline_color,
            outline_offset=constants.CAPTION_OUTLINE_OFFSET,
            font_index=session.font_index,
            pointer_over_focal=hovering,
            advanced=advanced,
        )
