"""Entry point for Heartdrift."""
from __future__ import annotations

import logging
import os
import random
from typing import List, Tuple

import pygame

import constants
import logger_setup
from game.scene_controller import FrameInput, SceneController
from game.scene_registry import build_catalog
from rendering.draw_system import SceneRenderer
from rendering.opengl_context import initialize_gl, resize_viewport
from rendering.sprites import PARTICLE_SPRITE_KEYS, load_sprites, sprite_sizes

logger = logging.getLogger("heartdrift")

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")


def _display_flags(resizable: bool) -> int:
    flags = pygame.OPENGL | pygame.DOUBLEBUF
    if resizable:
        flags |= pygame.RESIZABLE
    return flags


def _load_fonts(names: List[str], size: int) -> List[pygame.font.Font]:
    pygame.font.init()
    fonts = [pygame.font.SysFont(name, size) for name in names]
    if not fonts:
        fonts = [pygame.font.Font(None, size)]
    return fonts


def _set_cursor(hovering: bool, current: bool) -> bool:
    if hovering != current:
        cursor = pygame.SYSTEM_CURSOR_HAND if hovering else pygame.SYSTEM_CURSOR_ARROW
        pygame.mouse.set_cursor(cursor)
    return hovering


def run(config_path: str = CONFIG_PATH) -> None:
    config = logger_setup.load_config(config_path)
    logger_setup.setup_logging(config)
    logger.info("Application starting...")

    rng = random.Random(config["master_seed"])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    window = config["window"]
    flags = _display_flags(window["resizable"])
    pygame.init()
    pygame.display.set_caption(window["title"])
    pygame.display.set_mode((window["width"], window["height"]), flags)
    window_size: Tuple[int, int] = pygame.display.get_surface().get_size()
    initialize_gl(window_size)

    try:
        sprites = load_sprites(constants.PARTICLE_SPRITE_SIZE, image_paths=config["image_paths"])
        fonts = _load_fonts(config["fonts"], config["font_size"])
        catalog = build_catalog(rng)
        particle_extent = max(
            sprites[key].get_width() for key in PARTICLE_SPRITE_KEYS.values()
        )
        controller = SceneController(
            catalog,
            sprite_sizes(sprites),
            measure_text=lambda line, index: fonts[index].size(line),
            font_count=len(fonts),
            rng=rng,
            particle_extent=particle_extent,
        )
        renderer = SceneRenderer(sprites, fonts)
        controller.start(window_size)

        clock = pygame.time.Clock()
        hovering = False
        running = True
        while running:
            pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    pygame.display.set_mode(event.size, flags)
                    resize_viewport(event.size)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    pressed = True

            frame = controller.tick(
                FrameInput(
                    viewport_size=pygame.display.get_surface().get_size(),
                    pointer=pygame.mouse.get_pos(),
                    pressed=pressed,
                )
            )
            hovering = _set_cursor(frame.pointer_over_focal, hovering)
            renderer.draw(frame)
            pygame.display.flip()
            clock.tick(config["fps"])

        renderer.release()
    except Exception:
        logger.exception("Fatal error in the scene loop")
        raise
    finally:
        logger.info("Application shutting down.")
        pygame.quit()


if __name__ == "__main__":
    run()
