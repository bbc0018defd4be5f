"""
Helper classes for OpenGL setup, shader compilation, and GL object lifetime.
"""

from __future__ import annotations
import contextlib
import logging
from collections import defaultdict
from typing import Callable, DefaultDict, Iterator, List, Optional, Tuple

import OpenGL.GL as gl  # noqa: N811

logger = logging.getLogger(__name__)

_STAGES = {gl.GL_VERTEX_SHADER: "vertex", gl.GL_FRAGMENT_SHADER: "fragment"}


class ShaderProgram:
    """
    A linked vertex + fragment program.
    `name` labels log lines and errors, e.g. "flat-color".
    """

    def __init__(
        self,
        vertex_source: Optional[str] = None,
        fragment_source: Optional[str] = None,
        name: str = "shader",
    ) -> None:
        if vertex_source is None or fragment_source is None:
            raise ValueError(
                f"{name} program needs both vertex and fragment sources"
            )
        self.name = name
        vs = self._compile_shader(vertex_source, gl.GL_VERTEX_SHADER)
        fs = self._compile_shader(fragment_source, gl.GL_FRAGMENT_SHADER)
        self.id = self._link_program(vs, fs)
        # Shaders are owned by the program once linked
        gl.glDeleteShader(vs)
        gl.glDeleteShader(fs)
        logger.debug("Built %s program %s", name, self.id)

    def _compile_shader(self, source: str, shader_type: int) -> int:
        stage = _STAGES.get(shader_type, str(shader_type))
        shader = gl.glCreateShader(shader_type)
        gl.glShaderSource(shader, source)
        gl.glCompileShader(shader)
        if not gl.glGetShaderiv(shader, gl.GL_COMPILE_STATUS):
            log = gl.glGetShaderInfoLog(shader).decode()
            gl.glDeleteShader(shader)
            logger.error("%s %s stage did not compile: %s", self.name, stage, log)
            raise RuntimeError(f"{self.name} {stage} stage: {log}")
        return shader

    def _link_program(self, vs: int, fs: int) -> int:
        prog = gl.glCreateProgram()
        for shader in (vs, fs):
            gl.glAttachShader(prog, shader)
        gl.glLinkProgram(prog)
        if not gl.glGetProgramiv(prog, gl.GL_LINK_STATUS):
            log = gl.glGetProgramInfoLog(prog).decode()
            gl.glDeleteProgram(prog)
            logger.error("%s program did not link: %s", self.name, log)
            raise RuntimeError(f"{self.name} program link: {log}")
        return prog

    def use(self) -> None:
        gl.glUseProgram(self.id)

    def stop(self) -> None:
        gl.glUseProgram(0)

    def get_attrib(self, name: str) -> int:
        return gl.glGetAttribLocation(self.id, name)

    def get_uniform(self, name: str) -> int:
        return gl.glGetUniformLocation(self.id, name)

    def delete(self) -> None:
        gl.glDeleteProgram(self.id)


class GLResourceManager:
    """
    Tracks GL buffers created at runtime and frees them on shutdown.

    Usage:
        res = GLResourceManager()
        vbo = res.gen(lambda: gl.glGenBuffers(1), delete_buffer)
        with res.bind(bind_array_buffer, vbo):
            ...
        res.shutdown()
    """

    def __init__(self) -> None:
        self._objs: DefaultDict[Callable[[int], None], List[int]] = defaultdict(list)

    def gen(self, creator: Callable[[], int], deleter: Callable[[int], None]) -> int:
        """Create one GL object and remember how to delete it."""
        obj_id = int(creator())
        self._objs[deleter].append(obj_id)
        return obj_id

    @contextlib.contextmanager
    def bind(self, binder: Callable[[int], None], obj_id: int) -> Iterator[None]:
        """Bind for the duration of the block, then bind 0."""
        binder(obj_id)
        try:
            yield
        finally:
            binder(0)

    def tracked(self) -> int:
        return sum(len(ids) for ids in self._objs.values())

    def shutdown(self) -> None:
        """Call at program exit with the GL context still current."""
        logger.debug("Releasing %d GL objects", self.tracked())
        for deleter, ids in self._objs.items():
            for obj_id in ids:
                deleter(obj_id)
        self._objs.clear()


def delete_buffer(obj_id: int) -> None:
    gl.glDeleteBuffers(1, [obj_id])


def bind_array_buffer(obj_id: int) -> None:
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, obj_id)


def setup_opengl(
    width: int, height: int, clear_color: Tuple[int, int, int] = (0, 0, 0)
) -> None:
    """
    Configure GL state for flat 2D drawing (viewport, no depth test, clear color).
    """
    gl.glViewport(0, 0, width, height)
    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)
    r, g, b = clear_color
    gl.glClearColor(r / 255.0, g / 255.0, b / 255.0, 1.0)
