"""Drawing helpers on top of pygame.draw.

pygame.draw writes pixels without blending, so translucent shapes are
drawn onto a per-pixel-alpha scratch surface first and blitted. Gradients
and glows are cached because the same few are requested every frame.
"""

import math
from functools import lru_cache
from typing import Iterable, List, Sequence, Tuple

import pygame

from scene.color import RGB, ColorLike, lerp_color, to_rgb

Point = Tuple[float, float]
GradientStops = Tuple[Tuple[float, RGB], ...]


def alpha_layer(size: Tuple[int, int]) -> pygame.Surface:
    """A transparent surface to draw translucent shapes on."""
    return pygame.Surface(size, pygame.SRCALPHA)


def alpha_byte(alpha: float) -> int:
    return max(0, min(255, int(round(alpha * 255))))


def normalize_stops(stops: Iterable[Tuple[float, ColorLike]]) -> GradientStops:
    return tuple((float(pos), to_rgb(color)) for pos, color in stops)


def gradient_color(stops: GradientStops, t: float) -> RGB:
    """Colour at position t (0 = top) of a multi-stop gradient."""
    if t <= stops[0][0]:
        return stops[0][1]
    for (p0, c0), (p1, c1) in zip(stops, stops[1:]):
        if t <= p1:
            span = p1 - p0
            return lerp_color(c0, c1, 0.0 if span <= 0 else (t - p0) / span)
    return stops[-1][1]


@lru_cache(maxsize=64)
def _gradient_strip(stops: GradientStops, height: int) -> pygame.Surface:
    strip = pygame.Surface((1, height), 0, 32)
    denom = max(1, height - 1)
    for y in range(height):
        strip.set_at((0, y), gradient_color(stops, y / denom))
    return strip


def fill_vertical_gradient(surface: pygame.Surface, stops: GradientStops) -> None:
    """Fill the whole surface with a top-to-bottom gradient."""
    width, height = surface.get_size()
    if width <= 0 or height <= 0:
        return
    strip = _gradient_strip(stops, height)
    surface.blit(pygame.transform.scale(strip, (width, height)), (0, 0))


def fill_overlay(surface: pygame.Surface, color: ColorLike, alpha: float) -> None:
    """Cover the surface with a uniform translucent colour."""
    if alpha <= 0:
        return
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((*to_rgb(color), alpha_byte(alpha)))
    surface.blit(overlay, (0, 0))


@lru_cache(maxsize=16)
def _glow_sprite(radius: int, color: RGB, stops: Tuple[float, float, float]) -> pygame.Surface:
    """Radial glow: alpha falls from stops[0] at the centre through stops[1]
    at half radius to stops[2] at the rim."""
    sprite = alpha_layer((radius * 2, radius * 2))
    inner, middle, outer = stops
    for r in range(radius, 0, -1):
        t = r / radius
        if t <= 0.5:
            a = inner + (middle - inner) * (t / 0.5)
        else:
            a = middle + (outer - middle) * ((t - 0.5) / 0.5)
        pygame.draw.circle(sprite, (*color, alpha_byte(a)), (radius, radius), r)
    return sprite


def draw_glow(surface: pygame.Surface, center: Point, radius: int,
              color: ColorLike, stops: Tuple[float, float, float]) -> None:
    sprite = _glow_sprite(int(radius), to_rgb(color), tuple(stops))
    surface.blit(sprite, (int(center[0] - radius), int(center[1] - radius)))


def draw_translucent_circles(surface: pygame.Surface, color: ColorLike, alpha: float,
                             circles: Sequence[Tuple[Point, float]]) -> None:
    """Draw overlapping circles as one shape with a single opacity."""
    if alpha <= 0 or not circles:
        return
    min_x = min(c[0] - r for c, r in circles)
    min_y = min(c[1] - r for c, r in circles)
    max_x = max(c[0] + r for c, r in circles)
    max_y = max(c[1] + r for c, r in circles)
    w = int(math.ceil(max_x - min_x)) + 2
    h = int(math.ceil(max_y - min_y)) + 2
    shape = alpha_layer((w, h))
    rgb = to_rgb(color)
    for (cx, cy), r in circles:
        pygame.draw.circle(shape, (*rgb, 255), (cx - min_x + 1, cy - min_y + 1), r)
    shape.set_alpha(alpha_byte(alpha))
    surface.blit(shape, (int(min_x) - 1, int(min_y) - 1))


def arc_band_polygon(center: Point, outer: float, inner: float,
                     segments: int = 64) -> List[Point]:
    """Outline of the upper half of an annulus (a rainbow band)."""
    cx, cy = center
    points: List[Point] = []
    for i in range(segments + 1):
        theta = math.pi * i / segments
        points.append((cx + outer * math.cos(theta), cy - outer * math.sin(theta)))
    for i in range(segments, -1, -1):
        theta = math.pi * i / segments
        points.append((cx + inner * math.cos(theta), cy - inner * math.sin(theta)))
    return points


def draw_rotated_ellipse(surface: pygame.Surface, color: ColorLike, alpha: float,
                         center: Point, radius_x: float, radius_y: float,
                         rotation: float) -> None:
    """Filled ellipse rotated by ``rotation`` radians (clockwise on screen)."""
    w = max(2, int(math.ceil(radius_x * 2)))
    h = max(2, int(math.ceil(radius_y * 2)))
    shape = alpha_layer((w, h))
    pygame.draw.ellipse(shape, (*to_rgb(color), alpha_byte(alpha)), shape.get_rect())
    rotated = pygame.transform.rotate(shape, -math.degrees(rotation))
    surface.blit(rotated, rotated.get_rect(center=(int(center[0]), int(center[1]))))
