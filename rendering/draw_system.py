"""Immediate-mode OpenGL renderer for Heartdrift frames."""
from __future__ import annotations

import math
from typing import Dict, Mapping, Sequence, Tuple

import pygame
from OpenGL import GL as gl

from game.colors import Color
from game.scene_controller import FrameCommands, ParticleSprite
from ui.layout import text_window_anchor
from .opengl_context import clear_background
from .sprites import PARTICLE_SPRITE_KEYS

Vec2 = Tuple[float, float]


class Texture:
    """GL texture uploaded once from a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.width, self.height = surface.get_size()
        data = pygame.image.tostring(surface, "RGBA", False)
        self.texture_id = gl.glGenTextures(1)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture_id)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D,
            0,
            gl.GL_RGBA,
            self.width,
            self.height,
            0,
            gl.GL_RGBA,
            gl.GL_UNSIGNED_BYTE,
            data,
        )
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)

    def release(self) -> None:
        gl.glDeleteTextures([self.texture_id])


class SceneRenderer:
    """Draws background, particles, focal image and the outlined caption."""

    def __init__(
        self,
        sprites: Mapping[str, pygame.Surface],
        fonts: Sequence[pygame.font.Font],
    ) -> None:
        self._textures: Dict[str, Texture] = {
            key: Texture(surface) for key, surface in sprites.items()
        }
        self._fonts = list(fonts)

    def draw(self, frame: FrameCommands) -> None:
        clear_background(frame.background.as_tuple())

        gl.glEnable(gl.GL_TEXTURE_2D)
        gl.glTexEnvi(gl.GL_TEXTURE_ENV, gl.GL_TEXTURE_ENV_MODE, gl.GL_MODULATE)
        self._draw_particles(PARTICLE_SPRITE_KEYS[frame.particle_kind], frame.particles)
        self._draw_sprite(
            self._textures[frame.focal_image],
            frame.focal_position,
            frame.focal_rotation,
            frame.focal_tint,
        )
        gl.glBindTexture(gl.GL_TEXTURE_2D, 0)
        gl.glDisable(gl.GL_TEXTURE_2D)

        self._draw_caption(frame)

    def release(self) -> None:
        for texture in self._textures.values():
            texture.release()
        self._textures.clear()

    # ------------------------------------------------------------------
    # Rendering helpers
    def _draw_particles(self, sprite_key: str, particles: Sequence[ParticleSprite]) -> None:
        texture = self._textures[sprite_key]
        for particle in particles:
            self._draw_sprite(
                texture, (particle.x, particle.y), particle.rotation, particle.color.as_tuple()
            )

    def _draw_sprite(
        self,
        texture: Texture,
        position: Vec2,
        rotation: float,
        tint: Tuple[float, float, float, float],
    ) -> None:
        half_w = texture.width * 0.5
        half_h = texture.height * 0.5
        gl.glBindTexture(gl.GL_TEXTURE_2D, texture.texture_id)
        gl.glPushMatrix()
        # Rotate about the sprite centre, keeping ``position`` as its top-left corner.
        gl.glTranslatef(position[0] + half_w, position[1] + half_h, 0.0)
        if rotation:
            gl.glRotatef(math.degrees(rotation), 0.0, 0.0, 1.0)
        gl.glColor4f(*tint)
        gl.glBegin(gl.GL_QUADS)
        gl.glTexCoord2f(0.0, 0.0)
        gl.glVertex2f(-half_w, -half_h)
        gl.glTexCoord2f(1.0, 0.0)
        gl.glVertex2f(half_w, -half_h)
        gl.glTexCoord2f(1.0, 1.0)
        gl.glVertex2f(half_w, half_h)
        gl.glTexCoord2f(0.0, 1.0)
        gl.glVertex2f(-half_w, half_h)
        gl.glEnd()
        gl.glPopMatrix()

    def _draw_caption(self, frame: FrameCommands) -> None:
        font = self._fonts[frame.font_index]
        offset_x, offset_y = frame.outline_offset
        viewport_height = frame.viewport_size[1]
        for line in frame.caption:
            self._draw_text(
                font,
                line.text,
                line.x + offset_x,
                line.y + offset_y,
                viewport_height,
                frame.outline_color,
            )
            self._draw_text(font, line.text, line.x, line.y, viewport_height, frame.text_color)

    def _draw_text(
        self,
        font: pygame.font.Font,
        text: str,
        x: float,
        y: float,
        viewport_height: float,
        color: Color,
    ) -> None:
        surface = font.render(text, True, color.to_rgb255())
        data = pygame.image.tostring(surface, "RGBA", True)
        # Window positions stay valid off-screen, unlike glRasterPos; GL clips the pixels.
        gl.glWindowPos2f(*text_window_anchor(x, y, surface.get_height(), viewport_height))
        gl.glDrawPixels(
            surface.get_width(),
            surface.get_height(),
            gl.GL_RGBA,
            gl.GL_UNSIGNED_BYTE,
            data,
        )
