from __future__ import annotations

import contextlib
import logging
import OpenGL.GL as gl
from collections import defaultdict
from typing import Callable, DefaultDict, List

logger = logging.getLogger(__name__)


def _delete_texture(obj_id: int) -> None:
    gl.glDeleteTextures(1, [obj_id])


def _delete_framebuffer(obj_id: int) -> None:
    gl.glDeleteFramebuffers(1, [obj_id])


class GLResourceManager:
    """
    Tracks the GL objects backing the drawing surface and frees them on shutdown.

    Usage:
        mgr = GLResourceManager()
        tex = mgr.gen_texture()
        fbo = mgr.gen_framebuffer()
        ...
        mgr.shutdown()
    """

    def __init__(self) -> None:
        self._objs: DefaultDict[Callable[[int], None], List[int]] = defaultdict(list)

    def gen(self, creator: Callable[[], int], deleter: Callable[[int], None]) -> int:
        """Wraps any glGen* that returns ONE uint id."""
        obj_id: int = creator()
        self._objs[deleter].append(obj_id)
        return obj_id

    def gen_texture(self) -> int:
        return self.gen(lambda: gl.glGenTextures(1), _delete_texture)

    def gen_framebuffer(self) -> int:
        return self.gen(lambda: gl.glGenFramebuffers(1), _delete_framebuffer)

    @contextlib.contextmanager
    def bind(self, binder: Callable[[int], None], obj_id: int):
        """Context-manager for glBind*, auto-unbinds to 0."""
        binder(obj_id)
        try:
            yield
        finally:
            binder(0)

    def tracked(self) -> int:
        """Number of GL objects currently owned."""
        return sum(len(ids) for ids in self._objs.values())

    def shutdown(self) -> None:
        """Call at program exit **WITH A VALID GL CONTEXT**."""
        logger.info("Releasing %d GL objects", self.tracked())
        for deleter, ids in self._objs.items():
            for obj_id in ids:
                deleter(int(obj_id))
        self._objs.clear()
