import io
import math
import random

import pygame
import pytest

from particles.particle import (
    G,
    TTL,
    Particle,
    almost_equal,
    map_coords_to_pixel,
    map_pixel_to_coords,
)

SIZE = (800, 600)


def _distances(p):
    cx, cy = p.center
    return [math.hypot(p.points[0, j] - cx, p.points[1, j] - cy) for j in range(p.points.cols)]


@pytest.fixture
def particle():
    return Particle(SIZE, 30, (200, 150), random.Random(1))


def test_almost_equal():
    assert almost_equal(1.0, 1.00005)
    assert not almost_equal(1.0, 1.001)
    assert almost_equal(1.0, 1.05, eps=0.1)


def test_window_center_maps_to_origin():
    assert map_pixel_to_coords((400, 300), SIZE) == (0.0, 0.0)


def test_top_left_maps_with_y_up():
    assert map_pixel_to_coords((0, 0), SIZE) == (-400.0, 300.0)


@pytest.mark.parametrize("pixel", [(0, 0), (400, 300), (123, 456), (799, 1)])
def test_pixel_round_trip(pixel):
    assert map_coords_to_pixel(map_pixel_to_coords(pixel, SIZE), SIZE) == pixel


def test_self_test_scores_full_at_origin():
    p = Particle(SIZE, 4, (400, 300), random.Random(7))
    out = io.StringIO()
    assert p.self_test(out) == 7
    assert "Score: 7 / 7" in out.getvalue()


def test_self_test_reports_off_center_particle(particle):
    out = io.StringIO()
    assert particle.self_test(out) == 6
    assert "Failed. Expected (0,0)." in out.getvalue()


def test_constructor_ranges(particle):
    assert particle.ttl == TTL
    assert particle.points.cols == 30
    assert 100 <= particle.vx <= 500 and 100 <= particle.vy <= 500
    assert 0 <= particle.radians_per_sec <= math.pi
    assert particle.color1 == (255, 255, 255)
    assert all(0 <= c <= 255 for c in particle.color2)
    assert all(60 - 1e-9 <= d <= 79 + 1e-9 for d in _distances(particle))


def test_same_seed_same_particle():
    a = Particle(SIZE, 25, (10, 20), random.Random(42))
    b = Particle(SIZE, 25, (10, 20), random.Random(42))
    assert a.points == b.points
    assert a.color2 == b.color2


def test_rotate_preserves_distances(particle):
    before = _distances(particle)
    center = particle.center
    particle.rotate(1.2)
    assert particle.center == pytest.approx(center)
    assert _distances(particle) == pytest.approx(before)


def test_scale_shrinks_about_center(particle):
    before = _distances(particle)
    particle.scale(0.5)
    assert _distances(particle) == pytest.approx([d * 0.5 for d in before])


def test_translate_moves_points_and_center(particle):
    x0, y0 = particle.points[0, 3], particle.points[1, 3]
    cx, cy = particle.center
    particle.translate(10, 5)
    assert (particle.points[0, 3], particle.points[1, 3]) == pytest.approx((x0 + 10, y0 + 5))
    assert particle.center == pytest.approx((cx + 10, cy + 5))


def test_update_moves_under_gravity(particle):
    ttl, vy, vx = particle.ttl, particle.vy, particle.vx
    cx, _ = particle.center
    particle.update(0.1)
    assert particle.ttl == pytest.approx(ttl - 0.1)
    assert particle.vy == pytest.approx(vy - G * 0.1)
    assert particle.center[0] == pytest.approx(cx + vx * 0.1)


def test_pixel_points_start_at_center(particle):
    pixels = particle.pixel_points()
    assert len(pixels) == 31
    assert pixels[0] == (200, 150)


def test_draw_marks_center_and_fan():
    p = Particle(SIZE, 30, (400, 300), random.Random(3))
    surface = pygame.Surface(SIZE)
    p.draw(surface)
    assert tuple(surface.get_at((400, 300)))[:3] == (255, 255, 255)
    _, *outer = p.pixel_points()
    x, y = outer[0]
    mid = ((400 + x) // 2, (300 + y) // 2)
    assert tuple(surface.get_at(mid))[:3] == p.color2