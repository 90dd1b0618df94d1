import pytest
import OpenGL.GL as gl

import tracerfire.gl_utils as gu
from tracerfire.canvas import DESTINATION_OUT, LIGHTER, SOURCE_OVER
from tracerfire.gl_resources import GLResourceManager


def record(monkeypatch, calls, *names, results=None):
    """Replace the named GL functions with stubs that log their arguments."""
    results = results or {}
    for name in names:
        def stub(*args, _name=name):
            calls.append((_name,) + args)
            return results.get(_name)

        monkeypatch.setattr(gl, name, stub)


def test_setup_opengl_calls(monkeypatch):
    calls = []
    record(
        monkeypatch,
        calls,
        "glViewport",
        "glMatrixMode",
        "glLoadIdentity",
        "glOrtho",
        "glDisable",
        "glEnable",
        "glBlendFuncSeparate",
    )
    gu.setup_opengl(10, 20)
    assert ("glViewport", 0, 0, 10, 20) in calls
    # Top-left origin: bottom edge at height, top edge at 0
    assert ("glOrtho", 0, 10, 20, 0, -1, 1) in calls
    assert ("glDisable", gl.GL_DEPTH_TEST) in calls
    assert ("glEnable", gl.GL_BLEND) in calls
    assert calls[-1] == ("glBlendFuncSeparate",) + gu.BLEND_FUNCS[SOURCE_OVER]


@pytest.mark.parametrize(
    "mode,expected",
    [
        (DESTINATION_OUT, (gl.GL_ZERO, gl.GL_ONE_MINUS_SRC_ALPHA)),
        (LIGHTER, (gl.GL_SRC_ALPHA, gl.GL_ONE)),
        (SOURCE_OVER, (gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)),
    ],
)
def test_set_blend_mode(monkeypatch, mode, expected):
    calls = []
    record(monkeypatch, calls, "glBlendFuncSeparate")
    gu.set_blend_mode(mode)
    assert len(calls) == 1
    assert calls[0][1:3] == expected


def test_set_blend_mode_rejects_unknown():
    with pytest.raises(ValueError):
        gu.set_blend_mode("multiply")


def test_hsla_to_rgba_primaries():
    assert gu.hsla_to_rgba(0, 100, 50, 1.0) == pytest.approx((1.0, 0.0, 0.0, 1.0), abs=0.01)
    assert gu.hsla_to_rgba(120, 100, 50, 0.5) == pytest.approx((0.0, 1.0, 0.0, 0.5), abs=0.01)
    assert gu.hsla_to_rgba(240, 100, 50) == pytest.approx((0.0, 0.0, 1.0, 1.0), abs=0.01)


def test_hsla_to_rgba_wraps_hue_and_clamps():
    assert gu.hsla_to_rgba(480, 100, 50, 1.0) == pytest.approx(gu.hsla_to_rgba(120, 100, 50, 1.0))
    assert gu.hsla_to_rgba(-240, 100, 50, 1.0) == pytest.approx(gu.hsla_to_rgba(120, 100, 50, 1.0))
    assert gu.hsla_to_rgba(0, 0, 0, 2.0)[3] == 1.0
    assert gu.hsla_to_rgba(0, 0, 0, -0.5)[3] == 0.0
    assert gu.hsla_to_rgba(0, 100, 150, 1.0) == pytest.approx((1.0, 1.0, 1.0, 1.0), abs=0.01)


GL_TARGET_CALLS = (
    "glBindTexture",
    "glTexParameteri",
    "glTexImage2D",
    "glBindFramebuffer",
    "glFramebufferTexture2D",
    "glCheckFramebufferStatus",
    "glClearColor",
    "glClear",
)


def test_create_render_target(monkeypatch):
    calls = []
    monkeypatch.setattr(gl, "glGenTextures", lambda n: 5)
    monkeypatch.setattr(gl, "glGenFramebuffers", lambda n: 8)
    record(
        monkeypatch,
        calls,
        *GL_TARGET_CALLS,
        results={"glCheckFramebufferStatus": gl.GL_FRAMEBUFFER_COMPLETE},
    )
    mgr = GLResourceManager()
    fbo, tex = gu.create_render_target(64, 32, mgr)
    assert (fbo, tex) == (8, 5)
    assert mgr.tracked() == 2
    # Normalized 16-bit storage: additive blending clamps at full intensity
    image = [c for c in calls if c[0] == "glTexImage2D"][0]
    assert image[3] == gl.GL_RGBA16
    assert image[3] != gl.GL_RGBA16F
    assert ("glFramebufferTexture2D", gl.GL_FRAMEBUFFER, gl.GL_COLOR_ATTACHMENT0, gl.GL_TEXTURE_2D, 5, 0) in calls
    # The framebuffer is unbound again afterwards
    assert calls[-1] == ("glBindFramebuffer", gl.GL_FRAMEBUFFER, 0)


def test_create_render_target_incomplete(monkeypatch):
    calls = []
    monkeypatch.setattr(gl, "glGenTextures", lambda n: 5)
    monkeypatch.setattr(gl, "glGenFramebuffers", lambda n: 8)
    record(monkeypatch, calls, *GL_TARGET_CALLS, results={"glCheckFramebufferStatus": 0})
    with pytest.raises(RuntimeError):
        gu.create_render_target(64, 32, GLResourceManager())
    assert calls[-1] == ("glBindFramebuffer", gl.GL_FRAMEBUFFER, 0)
