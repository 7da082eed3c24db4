# shadercomp/graphics/context.py
from typing import Tuple

import moderngl
import pygame


def create_headless_context(require: int = 330) -> moderngl.Context:
    """OpenGL context without a window, enough to compile programs."""
    return moderngl.create_context(standalone=True, require=require)


class GraphicsContext:
    def __init__(self, resolution: Tuple[int, int], scale: int = 1):
        """
        Initializes the Window and OpenGL Context.

        :param resolution: The native logic resolution (e.g., 480x270)
        :param scale: Integer scaling factor for the window (e.g., x3 = 1440x810)
        """

        self.logical_res = resolution
        self.window_res = (resolution[0] * scale, resolution[1] * scale)

        pygame.init()
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, 3)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, 3)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
        )
        pygame.display.set_mode(self.window_res, pygame.OPENGL | pygame.DOUBLEBUF)

        self.ctx = moderngl.create_context()
        self.clock = pygame.time.Clock()

    def clear(self):
        self.ctx.clear(0.1, 0.1, 0.12)

    def flip(self):
        pygame.display.flip()

    def tick(self, fps: int = 60) -> float:
        """Wait for the next frame and return elapsed seconds."""
        return self.clock.tick(fps) / 1000.0

    def close(self):
        self.ctx.release()
        pygame.quit()
