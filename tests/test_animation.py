import random

import pytest

from tracerfire.animation import Animation
from tracerfire.canvas import DESTINATION_OUT, LIGHTER
from tracerfire.config import (
    CANVAS_CLEANUP_ALPHA,
    HUE_INITIAL,
    HUE_STEP_INCREASE,
    IMPACT_COUNT,
    IMPACT_TRANSPARENCY,
    TICKS_PER_BULLET_AUTOMATED_MAX,
    TICKS_PER_BULLET_MIN,
)
from tracerfire.input_handler import InputState


class RecordingCanvas:
    """Canvas stub that records every drawing call in order."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.ops = []

    def set_composite(self, mode):
        self.ops.append(("composite", mode))

    def fill_rect(self, x, y, w, h, color):
        self.ops.append(("fill", (x, y, w, h), color))

    def stroke_line(self, x0, y0, x1, y1, color):
        self.ops.append(("line", (x0, y0), (x1, y1), color))

    def stroke_circle(self, cx, cy, radius, color):
        self.ops.append(("circle", (cx, cy), radius, color))


@pytest.fixture
def animation():
    return Animation(rng=random.Random(1234))


def test_initial_state(animation):
    assert animation.bullets == []
    assert animation.impacts == []
    assert animation.hue == HUE_INITIAL
    assert animation.ticks_since_bullet == 0
    assert animation.ticks_since_bullet_automated == 0
    assert not animation.input.pointer_down


def test_create_impacts_adds_burst_at_point(animation):
    animation.create_impacts(42.0, 17.0)
    assert len(animation.impacts) == IMPACT_COUNT == 20
    for impact in animation.impacts:
        assert (impact.x, impact.y) == (42.0, 17.0)


def test_bullet_arrival_spawns_single_burst(animation):
    canvas = RecordingCanvas()
    animation.spawn_bullet(0.0, 0.0, 100.0, 100.0)
    arrivals = 0
    for _ in range(500):
        before = len(animation.bullets)
        animation.update_bullets(canvas)
        if len(animation.bullets) < before:
            arrivals += 1
        if not animation.bullets:
            break
    assert arrivals == 1
    assert len(animation.impacts) == IMPACT_COUNT
    for impact in animation.impacts:
        assert (impact.x, impact.y) == (100.0, 100.0)


def test_tick_fades_canvas_first(animation):
    canvas = RecordingCanvas()
    animation.tick(canvas)
    assert canvas.ops[:3] == [
        ("composite", DESTINATION_OUT),
        ("fill", (0, 0, 800, 600), (0, 0, 0, CANVAS_CLEANUP_ALPHA)),
        ("composite", LIGHTER),
    ]


def test_hue_advances_each_tick(animation):
    canvas = RecordingCanvas()
    for n in range(1, 6):
        animation.tick(canvas)
        assert animation.hue == pytest.approx(HUE_INITIAL + n * HUE_STEP_INCREASE)


def test_bullets_drawn_before_update(animation):
    canvas = RecordingCanvas()
    bullet = animation.spawn_bullet(10.0, 500.0, 700.0, 100.0)
    animation.tick(canvas)
    lines = [op for op in canvas.ops if op[0] == "line"]
    # The stroke ends at the launch point, not at the post-update position
    assert lines[0][2] == (10.0, 500.0)
    assert (bullet.x, bullet.y) != (10.0, 500.0)
    assert lines[0][3][0] == animation.hue


def test_detonation_impacts_processed_same_tick(animation):
    canvas = RecordingCanvas()
    animation.spawn_bullet(50.0, 50.0, 50.0, 50.0)
    animation.tick(canvas)
    assert animation.bullets == []
    assert len(animation.impacts) == IMPACT_COUNT
    for impact in animation.impacts:
        assert impact.transparency < IMPACT_TRANSPARENCY


def test_expired_impacts_removed(animation):
    canvas = RecordingCanvas()
    animation.create_impacts(0.0, 0.0)
    for _ in range(20):
        animation.update_impacts(canvas)
    # Slowest decay is 0.1 per tick, so every impact is gone by now
    assert animation.impacts == []


def test_automated_spawn_at_max_threshold(animation):
    canvas = RecordingCanvas(width=1000, height=800)
    animation.ticks_since_bullet_automated = TICKS_PER_BULLET_AUTOMATED_MAX
    animation.tick(canvas)
    assert len(animation.bullets) == 1
    bullet = animation.bullets[0]
    assert (bullet.start_x, bullet.start_y) in animation.edge_points.points
    assert 0.0 <= bullet.end_x <= 1000
    assert 0.0 <= bullet.end_y <= 400
    assert animation.ticks_since_bullet_automated == 0


def test_automated_counter_increments_below_threshold(animation):
    assert animation.launch_automated_bullet(800, 600) is None
    assert animation.ticks_since_bullet_automated == 1
    assert animation.bullets == []


def test_pointer_down_suppresses_automated_spawn():
    state = InputState()
    state.pointer_down = True
    anim = Animation(input_state=state, rng=random.Random(5))
    anim.ticks_since_bullet_automated = TICKS_PER_BULLET_AUTOMATED_MAX
    assert anim.launch_automated_bullet(800, 600) is None
    assert anim.bullets == []
    # Neither spawned nor counted
    assert anim.ticks_since_bullet_automated == TICKS_PER_BULLET_AUTOMATED_MAX


def test_manual_spawn_from_bottom_center_to_pointer():
    state = InputState()
    state.pointer_down = True
    state.pointer_x, state.pointer_y = 300.0, 50.0
    anim = Animation(input_state=state, rng=random.Random(5))
    anim.ticks_since_bullet = TICKS_PER_BULLET_MIN
    bullet = anim.launch_manual_bullet(800, 600)
    assert bullet is not None
    assert anim.bullets == [bullet]
    assert (bullet.start_x, bullet.start_y) == (400.0, 600)
    assert (bullet.end_x, bullet.end_y) == (300.0, 50.0)
    assert anim.ticks_since_bullet == 0


def test_manual_spawn_waits_for_minimum_ticks():
    state = InputState()
    state.pointer_down = True
    anim = Animation(input_state=state, rng=random.Random(5))
    for n in range(TICKS_PER_BULLET_MIN):
        assert anim.launch_manual_bullet(800, 600) is None
        assert anim.ticks_since_bullet == n + 1
    assert anim.launch_manual_bullet(800, 600) is not None


def test_manual_spawn_requires_pointer_down(animation):
    animation.ticks_since_bullet = TICKS_PER_BULLET_MIN
    assert animation.launch_manual_bullet(800, 600) is None
    assert animation.ticks_since_bullet == TICKS_PER_BULLET_MIN
