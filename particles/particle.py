"""A spinning, shrinking, falling particle shape."""

from __future__ import annotations

import math
import random
import sys

from particles.matrices import Matrix, RotationMatrix, ScalingMatrix, TranslationMatrix

G = 1000.0
TTL = 5.0
SCALE = 0.999

_WHITE = (255, 255, 255)


def almost_equal(a, b, eps=0.0001):
    """True if a and b differ by less than eps."""
    return abs(a - b) < eps


def map_pixel_to_coords(pixel, size):
    """Map a window pixel to Cartesian coordinates centred on the window, y up."""
    width, height = size
    px, py = pixel
    return (px - width / 2.0, height / 2.0 - py)


def map_coords_to_pixel(coords, size):
    """Map Cartesian coordinates back to an integer window pixel."""
    width, height = size
    x, y = coords
    return (int(x + width / 2.0), int(height / 2.0 - y))


class Particle:
    """A randomly shaped polygon that moves under gravity until its time runs out."""

    def __init__(self, size, num_points, mouse_position, rng=None):
        rng = rng if rng is not None else random.Random()
        self.size = (int(size[0]), int(size[1]))
        self.ttl = TTL
        self.num_points = num_points
        self.points = Matrix(2, num_points)
        self.radians_per_sec = rng.random() * math.pi
        self.center = map_pixel_to_coords(mouse_position, self.size)
        self.vx = float(rng.randint(100, 500))
        self.vy = float(rng.randint(100, 500))
        self.color1 = _WHITE
        self.color2 = (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))

        theta = rng.random() * (math.pi / 2)
        d_theta = 2 * math.pi / (num_points - 1) if num_points > 1 else 0.0
        cx, cy = self.center
        for j in range(num_points):
            radius = rng.randint(60, 79)
            self.points[0, j] = cx + radius * math.cos(theta)
            self.points[1, j] = cy + radius * math.sin(theta)
            theta += d_theta

    def update(self, dt):
        """Advance the particle by dt seconds."""
        self.ttl -= dt
        self.rotate(dt * self.radians_per_sec)
        self.scale(SCALE)
        dx = self.vx * dt
        self.vy -= G * dt
        dy = self.vy * dt
        self.translate(dx, dy)

    def translate(self, x_shift, y_shift):
        """Shift every point and the centre by (x_shift, y_shift)."""
        self.points = TranslationMatrix(x_shift, y_shift, self.points.cols) + self.points
        cx, cy = self.center
        self.center = (cx + x_shift, cy + y_shift)

    def _about_center(self, transform):
        cx, cy = self.center
        self.translate(-cx, -cy)
        self.points = transform * self.points
        self.translate(cx, cy)

    def rotate(self, theta):
        """Rotate theta radians counter-clockwise about the centre."""
        self._about_center(RotationMatrix(theta))

    def scale(self, c):
        """Scale by factor c about the centre."""
        self._about_center(ScalingMatrix(c))

    def pixel_points(self):
        """Window pixels of the fan: the centre first, then each outer point."""
        pixels = [map_coords_to_pixel(self.center, self.size)]
        pixels.extend(
            map_coords_to_pixel((self.points[0, j], self.points[1, j]), self.size)
            for j in range(self.points.cols)
        )
        return pixels

    def draw(self, surface):
        """Draw the particle as a triangle fan on a pygame surface."""
        import pygame

        center, *outer = self.pixel_points()
        for first, second in zip(outer, outer[1:]):
            pygame.draw.polygon(surface, self.color2, [center, first, second])
        width, height = surface.get_size()
        if 0 <= center[0] < width and 0 <= center[1] < height:
            surface.set_at(center, self.color1)

    def _check_mapping(self, initial, expected, out):
        passed = True
        for j in range(initial.cols):
            want_x, want_y = expected(initial[0, j], initial[1, j])
            got_x, got_y = self.points[0, j], self.points[1, j]
            if not almost_equal(got_x, want_x) or not almost_equal(got_y, want_y):
                out.write(
                    f"Failed mapping: ({initial[0, j]:g}, {initial[1, j]:g}) "
                    f"({got_x:g}, {got_y:g})\n"
                )
                passed = False
        return passed

    def self_test(self, out=None):
        """Run the built-in checks, report to out, and return the score out of 7."""
        out = out if out is not None else sys.stdout
        score = 0

        def report(passed):
            nonlocal score
            if passed:
                out.write("Passed. +1\n")
                score += 1
            else:
                out.write("Failed.\n")

        out.write("Testing RotationMatrix constructor...")
        theta = math.pi / 4.0
        r = RotationMatrix(math.pi / 4)
        report(
            r.rows == 2 and r.cols == 2
            and almost_equal(r[0, 0], math.cos(theta))
            and almost_equal(r[0, 1], -math.sin(theta))
            and almost_equal(r[1, 0], math.sin(theta))
            and almost_equal(r[1, 1], math.cos(theta))
        )

        out.write("Testing ScalingMatrix constructor...")
        s = ScalingMatrix(1.5)
        report(
            s.rows == 2 and s.cols == 2
            and almost_equal(s[0, 0], 1.5)
            and almost_equal(s[0, 1], 0)
            and almost_equal(s[1, 0], 0)
            and almost_equal(s[1, 1], 1.5)
        )

        out.write("Testing TranslationMatrix constructor...")
        t = TranslationMatrix(5, -5, 3)
        report(
            t.rows == 2 and t.cols == 3
            and all(almost_equal(t[0, j], 5) and almost_equal(t[1, j], -5) for j in range(3))
        )

        out.write("Testing Particles...\n")
        out.write("Testing Particle mapping to Cartesian origin...\n")
        cx, cy = self.center
        if cx != 0 or cy != 0:
            out.write(f"Failed. Expected (0,0). Received: ({cx:g},{cy:g})\n")
        else:
            out.write("Passed. +1\n")
            score += 1

        out.write("Applying one rotation of 90 degrees about the origin...\n")
        initial = self.points.copy()
        self.rotate(math.pi / 2.0)
        report(self._check_mapping(initial, lambda x, y: (-y, x), out))

        out.write("Applying a scale of 0.5...\n")
        initial = self.points.copy()
        self.scale(0.5)
        report(self._check_mapping(initial, lambda x, y: (0.5 * x, 0.5 * y), out))

        out.write("Applying a translation of (10, 5)...\n")
        initial = self.points.copy()
        self.translate(10, 5)
        report(self._check_mapping(initial, lambda x, y: (10 + x, 5 + y), out))

        out.write(f"Score: {score} / 7\n")
        return score