"""Pytest configuration for rtweekend tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls, which would reset
    the runtime under fields that other tests still hold.
    """
    ti.init(arch=ti.cpu, default_fp=ti.f64, random_seed=42)
    yield


@pytest.fixture
def gradient_256():
    """The 256x256 gradient test image, quantized to 8 bits."""
    from rtweekend.preview.export import image_to_uint8
    from rtweekend.render.scanline import render_gradient

    return image_to_uint8(render_gradient(256, 256))
