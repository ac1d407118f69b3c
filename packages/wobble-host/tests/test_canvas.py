"""Tests for the pygame-backed drawing surface."""
import math

import pygame
import pytest

from wobble import Blob
from wobble_host import PygameCanvas
from wobble_host.canvas import blur, quadratic_points

MINT = pygame.Color("#41ffc9")


def triangle(canvas):
    canvas.begin_path()
    canvas.move_to(10, 10)
    canvas.line_to(90, 10)
    canvas.line_to(50, 90)


class TestSize:
    def test_reports_target_size(self):
        canvas = PygameCanvas(pygame.Surface((120, 80), 0, 32))
        assert (canvas.width, canvas.height) == (120, 80)

    def test_resize_replaces_target(self):
        canvas = PygameCanvas(pygame.Surface((120, 80), 0, 32))
        canvas.width = 200
        canvas.height = 150
        assert canvas.target.get_size() == (200, 150)

    def test_resize_hook(self):
        sizes = []

        def hook(size):
            sizes.append(size)
            return pygame.Surface(size)

        canvas = PygameCanvas(pygame.Surface((100, 100), 0, 32), on_resize=hook)
        canvas.width = 100
        assert sizes == []
        canvas.width = 140
        assert sizes == [(140, 100)]


class TestPath:
    def test_move_starts_subpath(self):
        canvas = PygameCanvas(pygame.Surface((10, 10), 0, 32))
        canvas.begin_path()
        canvas.move_to(0, 0)
        canvas.move_to(5, 5)
        canvas.line_to(6, 6)
        assert canvas.subpaths == [[(0, 0)], [(5, 5), (6, 6)]]

    def test_begin_path_resets(self):
        canvas = PygameCanvas(pygame.Surface((10, 10), 0, 32))
        triangle(canvas)
        canvas.begin_path()
        assert canvas.subpaths == []

    def test_line_without_subpath_starts_one(self):
        canvas = PygameCanvas(pygame.Surface((10, 10), 0, 32))
        canvas.begin_path()
        canvas.line_to(3, 4)
        assert canvas.subpaths == [[(3, 4)]]

    def test_quadratic_is_flattened(self):
        canvas = PygameCanvas(pygame.Surface((10, 10), 0, 32), curve_steps=8)
        canvas.begin_path()
        canvas.move_to(0, 0)
        canvas.quadratic_curve_to(5, 10, 10, 0)
        path = canvas.subpaths[0]
        assert len(path) == 9
        assert path[-1] == (10, 0)

    def test_quadratic_points_midpoint(self):
        """At t = 0.5 the curve sits halfway between the chord and the control."""
        points = quadratic_points((0.0, 0.0), (5.0, 10.0), (10.0, 0.0), steps=2)
        assert points[0] == pytest.approx((5.0, 5.0))
        assert points[1] == (10.0, 0.0)


class TestPaint:
    def test_fill_polygon(self):
        canvas = PygameCanvas(pygame.Surface((100, 100), 0, 32))
        triangle(canvas)
        canvas.fill_style = "#41ffc9"
        canvas.fill()
        assert canvas.target.get_at((50, 30)) == MINT
        assert canvas.target.get_at((5, 95)) != MINT

    def test_fill_with_shadow_keeps_fill_on_top(self):
        canvas = PygameCanvas(pygame.Surface((100, 100), pygame.SRCALPHA))
        triangle(canvas)
        canvas.fill_style = "#41ffc9"
        canvas.shadow_blur = 20
        canvas.shadow_color = "black"
        canvas.fill()
        assert canvas.target.get_at((50, 30)) == MINT

    def test_degenerate_subpaths_are_skipped(self):
        canvas = PygameCanvas(pygame.Surface((20, 20), 0, 32))
        canvas.target.fill((1, 2, 3))
        canvas.begin_path()
        canvas.move_to(0, 0)
        canvas.line_to(19, 19)
        canvas.fill_style = "white"
        canvas.fill()
        assert canvas.target.get_at((10, 10)) == pygame.Color(1, 2, 3)

    def test_clear_rect(self):
        canvas = PygameCanvas(pygame.Surface((20, 20), pygame.SRCALPHA))
        canvas.target.fill((255, 0, 0, 255))
        canvas.clear_rect(0, 0, 10, 20)
        assert canvas.target.get_at((5, 5)) == pygame.Color(0, 0, 0, 0)
        assert canvas.target.get_at((15, 5)) == pygame.Color(255, 0, 0, 255)

    def test_blur_keeps_size(self):
        layer = pygame.Surface((64, 48), pygame.SRCALPHA)
        assert blur(layer, 20).get_size() == (64, 48)


class TestBlobOnCanvas:
    def test_blob_fills_top_right_corner(self):
        canvas = PygameCanvas(pygame.Surface((600, 800), pygame.SRCALPHA))
        blob = Blob(4, math.pi / 2, math.pi / 2, canvas, seed=3)
        blob.update()
        assert canvas.target.get_at((590, 10)) == MINT
        assert canvas.target.get_at((5, 790)).a == 0
