"""The particle engine: window, input handling, the particle list and the main loop."""

from __future__ import annotations

import random
import sys

import pygame

from particles.particle import Particle

_BURST = 5
_MIN_POINTS = 25
_MAX_POINTS = 50
_BACKGROUND = (0, 0, 0)


class Engine:
    """Owns the drawing surface and the live particles, and runs the event loop."""

    def __init__(self, size=None, rng=None):
        if size is None:
            pygame.display.init()
            size = pygame.display.get_desktop_sizes()[0]
        self.size = (int(size[0]), int(size[1]))
        self.rng = rng if rng is not None else random.Random()
        self.particles = []
        self.running = True
        self.surface = pygame.Surface(self.size)
        self._on_screen = False

    def spawn(self, position):
        """Create a burst of particles at a window pixel position."""
        for _ in range(_BURST):
            num_points = self.rng.randint(_MIN_POINTS, _MAX_POINTS)
            self.particles.append(Particle(self.size, num_points, position, self.rng))

    def update(self, dt):
        """Drop expired particles and advance the rest by dt seconds."""
        alive = [p for p in self.particles if p.ttl > 0.0]
        for particle in alive:
            particle.update(dt)
        self.particles = alive

    def handle_events(self, events):
        """Apply window and input events; return whether the engine keeps running."""
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.spawn(event.pos)
        return self.running

    def draw(self):
        """Clear the surface, draw every particle and show it if a window is open."""
        self.surface.fill(_BACKGROUND)
        for particle in self.particles:
            particle.draw(self.surface)
        if self._on_screen:
            pygame.display.flip()
        return self.surface

    def run(self):
        """Run the self-test, open the window and loop until it is closed."""
        print("Starting Particle unit tests...")
        probe = Particle(self.size, 4, (self.size[0] // 2, self.size[1] // 2), self.rng)
        probe.self_test(sys.stdout)
        print("Unit tests complete.  Starting engine...")

        pygame.init()
        try:
            self.surface = pygame.display.set_mode(self.size)
            pygame.display.set_caption("Particles")
            self._on_screen = True
            clock = pygame.time.Clock()
            clock.tick()
            while self.running:
                dt = clock.tick() / 1000.0
                self.handle_events(pygame.event.get())
                if not self.running:
                    break
                self.update(dt)
                self.draw()
        finally:
            self._on_screen = False
            pygame.quit()


def main(argv=None):
    """Start the particle engine full size on the desktop."""
    Engine().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())