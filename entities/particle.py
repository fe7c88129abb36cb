"""
Particle Effects System
Bounded particle pool with four effect kinds: trail, explosion, sparkle, confetti
"""

import math
import random
from enum import Enum

from utils.colors import CONFETTI_COLORS, EXPLOSION_COLORS, SPARKLE_COLORS, TRAIL_COLORS
from utils.constants import (
    CONFETTI_DURATION, CONFETTI_GRAVITY, CONFETTI_LIFE, CONFETTI_PER_FRAME,
    GRID_HEIGHT, GRID_WIDTH, MAX_PARTICLES, TILE_SIZE
)
from utils.helpers import clamp, random_choice, random_range


class ParticleKind(Enum):
    """Effect a particle belongs to"""
    TRAIL = 'trail'
    EXPLOSION = 'explosion'
    SPARKLE = 'sparkle'
    CONFETTI = 'confetti'


class Particle:
    """
    Single particle

    Positions are in pixels, velocities in pixels per frame and
    life in frames.
    """
    def __init__(self, kind, x, y, vx, vy, life, max_life, size, color):
        self.kind = kind
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life
        self.max_life = max_life
        self.size = size
        self.color = color

    @property
    def opacity(self):
        """Fade factor for rendering, derived from remaining life"""
        return clamp(self.life / self.max_life, 0.0, 1.0)

    def move(self):
        """Integrate position by velocity"""
        self.x += self.vx
        self.y += self.vy

    def __repr__(self):
        return f"Particle({self.kind.value}, pos=({self.x:.1f},{self.y:.1f}), life={self.life})"


class ConfettiParticle(Particle):
    """
    Falling, spinning confetti piece
    """
    def __init__(self, x, y, vx, vy, size, color, rotation, rotation_speed, life=CONFETTI_LIFE):
        super().__init__(ParticleKind.CONFETTI, x, y, vx, vy, life, life, size, color)
        self.rotation = rotation
        self.rotation_speed = rotation_speed


class ParticleSystem:
    """
    Owns every live particle.

    The pool keeps emission order; when it grows past max_particles the
    oldest particles are dropped first.
    """
    def __init__(self, max_particles=MAX_PARTICLES, width=GRID_WIDTH * TILE_SIZE,
                 height=GRID_HEIGHT * TILE_SIZE, rng=None):
        """
        Args:
            max_particles: Pool capacity
            width, height: Viewport size in pixels
            rng: random.Random used for every emission
        """
        self.particles = []
        self.max_particles = max_particles
        self.width = width
        self.height = height
        self.rng = rng or random.Random()

        # Confetti celebration state
        self.confetti_active = False
        self.confetti_frame_count = 0
        self.confetti_duration = CONFETTI_DURATION

    def update(self):
        """Advance, prune, emit confetti, then enforce capacity"""
        survivors = []
        for particle in self.particles:
            self._step(particle)
            if not self._expired(particle):
                survivors.append(particle)
        self.particles = survivors

        if self.confetti_active:
            self.confetti_frame_count += 1

            for _ in range(CONFETTI_PER_FRAME):
                self._emit_confetti_piece()

            if self.confetti_frame_count >= self.confetti_duration:
                self.confetti_active = False
                self.confetti_frame_count = 0

        overflow = len(self.particles) - self.max_particles
        if overflow > 0:
            del self.particles[:overflow]

    def _step(self, particle):
        """Apply one frame of kind-specific physics"""
        match particle:
            case ConfettiParticle():
                particle.vy += CONFETTI_GRAVITY
                particle.move()
                particle.rotation += particle.rotation_speed
            case _:
                particle.move()
        particle.life -= 1

    def _expired(self, particle):
        match particle:
            # Confetti also leaves once it falls past the bottom edge
            case ConfettiParticle(y=y) if y > self.height:
                return True
            case _:
                return particle.life <= 0

    def create_trail(self, x, y, playing=True):
        """
        Trail puff where the player left a tile

        Args:
            x, y: Pixel position
            playing: Trails only appear during active play
        """
        if not playing:
            return

        rng = self.rng
        for _ in range(rng.randint(2, 3)):
            self.particles.append(Particle(
                ParticleKind.TRAIL,
                x + random_range(rng, -TILE_SIZE / 4, TILE_SIZE / 4),
                y + random_range(rng, -TILE_SIZE / 4, TILE_SIZE / 4),
                random_range(rng, -0.25, 0.25),
                random_range(rng, -0.25, 0.25),
                rng.randint(20, 29),
                30,
                random_range(rng, 3, 5),
                random_choice(rng, TRAIL_COLORS)
            ))

    def create_explosion(self, x, y):
        """
        Radial burst of 12-16 particles, evenly spread with a little jitter

        Args:
            x, y: Pixel position
        """
        rng = self.rng
        count = rng.randint(12, 16)

        for i in range(count):
            angle = (2 * math.pi * i) / count + random_range(rng, -0.25, 0.25)
            speed = random_range(rng, 2, 4)

            self.particles.append(Particle(
                ParticleKind.EXPLOSION,
                x, y,
                math.cos(angle) * speed,
                math.sin(angle) * speed,
                rng.randint(20, 30),
                30,
                random_range(rng, 3, 5),
                random_choice(rng, EXPLOSION_COLORS)
            ))

    def create_sparkle(self, x, y):
        """
        Shimmer drifting upward from near a wall

        Args:
            x, y: Pixel position
        """
        rng = self.rng
        for _ in range(rng.randint(3, 5)):
            self.particles.append(Particle(
                ParticleKind.SPARKLE,
                x + random_range(rng, -7.5, 7.5),
                y + random_range(rng, -7.5, 7.5),
                random_range(rng, -0.25, 0.25),
                random_range(rng, -1.0, -0.5),
                rng.randint(15, 25),
                25,
                random_range(rng, 2, 6),
                random_choice(rng, SPARKLE_COLORS)
            ))

    def start_confetti(self):
        """Arm the confetti celebration; restarts the frame count if running"""
        self.confetti_active = True
        self.confetti_frame_count = 0

    def _emit_confetti_piece(self):
        rng = self.rng
        self.particles.append(ConfettiParticle(
            random_range(rng, 0, self.width),
            0.0,
            random_range(rng, -2, 2),
            random_range(rng, 0, 2),
            random_range(rng, 4, 8),
            random_choice(rng, CONFETTI_COLORS),
            random_range(rng, 0, 2 * math.pi),
            random_range(rng, -0.1, 0.1)
        ))

    def count(self, kind):
        """Number of live particles of one kind"""
        return sum(1 for particle in self.particles if particle.kind is kind)

    def clear(self):
        """Remove all particles and stop any celebration"""
        self.particles.clear()
        self.confetti_active = False
        self.confetti_frame_count = 0

    def __len__(self):
        return len(self.particles)
