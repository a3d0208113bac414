"""Pytest configuration and fixtures for rainbow scene tests."""

import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

WIDTH = 800
HEIGHT = 600


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def blank_scene(seeded_rng):
    """A scene with no entities, 800x600, sunny noon."""
    from scene.state import SceneState

    return SceneState(WIDTH, HEIGHT, rng=seeded_rng)


@pytest.fixture
def scene(seeded_rng):
    """A scene with its starting clouds and birds."""
    from scene.state import SceneState

    return SceneState.create(WIDTH, HEIGHT, rng=seeded_rng)


@pytest.fixture
def controller(blank_scene):
    from scene.input_controller import InputController

    return InputController(blank_scene)


@pytest.fixture
def pygame_headless():
    """Initialise pygame against the SDL dummy drivers."""
    import pygame

    pygame.init()
    yield pygame


@pytest.fixture
def surface(pygame_headless):
    return pygame_headless.Surface((WIDTH, HEIGHT), 0, 32)
