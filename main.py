"""
Minimal demo for the program catalog.

Builds every material shipped with shadercomp against a real OpenGL
context, lists them, then draws a spinning triangle with the "basic"
material.

Run with `--headless` to only build and list the catalog (no window).

Expected keys:
    - ESC: quit
"""

from __future__ import annotations

import logging
import math
import sys

import moderngl
import numpy as np
import pygame
from numpy.typing import NDArray

from shadercomp.assets import DefaultMaterials
from shadercomp.graphics.context import GraphicsContext, create_headless_context
from shadercomp.graphics.materials import SimpleMaterial
from shadercomp.graphics.shaders import (
    ModernGLCompiler,
    ProgramCatalog,
    ShaderCompositionError,
    ShaderSettings,
)


def rotation_z(angle: float) -> NDArray[np.float32]:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4, dtype="f4")
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def triangle_vertices() -> NDArray[np.float32]:
    # position (3f) + uv (2f)
    return np.array(
        [
            [-0.6, -0.5, 0.0, 0.0, 0.0],
            [0.6, -0.5, 0.0, 1.0, 0.0],
            [0.0, 0.6, 0.0, 0.5, 1.0],
        ],
        dtype="f4",
    )


def build_headless(settings: ShaderSettings) -> int:
    ctx = create_headless_context()
    try:
        catalog = ProgramCatalog.from_package(ModernGLCompiler(ctx), settings)
    except ShaderCompositionError as e:
        print(e, file=sys.stderr)
        return 1
    finally:
        ctx.release()

    print("Materials:", ", ".join(catalog.names()))
    return 0


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = ShaderSettings(glsl_version="330 core")
    if "--headless" in sys.argv[1:]:
        return build_headless(settings)

    gfx = GraphicsContext((960, 540))
    try:
        catalog = ProgramCatalog.from_package(
            ModernGLCompiler(gfx.ctx), settings
        )
    except ShaderCompositionError as e:
        print(e, file=sys.stderr)
        gfx.close()
        return 1

    print("Materials:", ", ".join(catalog.names()))

    material = SimpleMaterial.from_catalog(catalog, DefaultMaterials.BASIC)
    if material is None:
        print("basic material missing from catalog", file=sys.stderr)
        gfx.close()
        return 1

    program = material.program
    vbo = gfx.ctx.buffer(triangle_vertices().tobytes())
    vao = gfx.ctx.vertex_array(program, [(vbo, "3f 2f", "in_position", "in_uv")])

    identity = np.eye(4, dtype="f4")
    program["u_view"].write(identity.tobytes())
    program["u_projection"].write(identity.tobytes())
    program["u_color"].value = (0.9, 0.5, 0.2, 1.0)

    angle = 0.0
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False

        angle += gfx.tick() * 0.8
        # numpy is row-major, GLSL expects column-major
        program["u_model"].write(rotation_z(angle).T.copy().tobytes())

        gfx.clear()
        material.apply(gfx.ctx)
        vao.render(moderngl.TRIANGLES)
        gfx.flip()

    vao.release()
    vbo.release()
    gfx.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
