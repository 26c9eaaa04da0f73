"""Tests for lat/lng <-> cell quantization."""

from __future__ import annotations

import unittest

from geocoin.config import WorldConfig
from geocoin.core.models import Cell, LatLng
from geocoin.systems.grid_mapper import GridMapper


class TestGridMapper(unittest.TestCase):
    def setUp(self):
        self.mapper = GridMapper(0.0001)

    def test_start_position_cell(self):
        cfg = WorldConfig()
        cell = self.mapper.to_cell(cfg.start_lat, cfg.start_lng)
        self.assertEqual(cell, Cell(369894, -1220628))

    def test_origin_is_cell_zero(self):
        self.assertEqual(self.mapper.to_cell(0.0, 0.0), Cell(0, 0))
        self.assertEqual(self.mapper.to_cell(0.00005, 0.00005), Cell(0, 0))

    def test_negative_coordinates_floor(self):
        self.assertEqual(self.mapper.to_cell(-0.00001, -0.00001), Cell(-1, -1))
        self.assertEqual(self.mapper.to_cell(-0.00015, 0.00025), Cell(-2, 2))

    def test_cell_position_cell_is_identity(self):
        for i in range(-300, 300, 7):
            for j in range(-300, 300, 11):
                cell = Cell(i, j)
                pos = self.mapper.to_position(cell)
                self.assertEqual(self.mapper.to_cell(pos.lat, pos.lng), cell)

    def test_identity_near_start(self):
        base = self.mapper.to_cell(36.98949379578401, -122.06277128548504)
        for di in range(-10, 10):
            for dj in range(-10, 10):
                cell = base.offset(di, dj)
                pos = self.mapper.to_position(cell)
                self.assertEqual(self.mapper.to_cell(pos.lat, pos.lng), cell)

    def test_position_to_cell_is_lossy(self):
        pos = LatLng(0.00012345, 0.00067891)
        cell = self.mapper.to_cell(pos.lat, pos.lng)
        corner = self.mapper.to_position(cell)
        self.assertNotEqual(corner, pos)
        self.assertEqual(self.mapper.to_cell(corner.lat, corner.lng), cell)

    def test_bounds_and_center(self):
        sw, ne = self.mapper.bounds(Cell(2, 3))
        self.assertAlmostEqual(sw.lat, 0.0002)
        self.assertAlmostEqual(sw.lng, 0.0003)
        self.assertAlmostEqual(ne.lat, 0.0003)
        self.assertAlmostEqual(ne.lng, 0.0004)
        c = self.mapper.center(Cell(2, 3))
        self.assertEqual(self.mapper.to_cell(c.lat, c.lng), Cell(2, 3))

    def test_custom_origin(self):
        mapper = GridMapper(0.001, LatLng(10.0, 20.0))
        self.assertEqual(mapper.to_cell(10.0025, 19.9995), Cell(2, -1))
        self.assertEqual(mapper.to_position(Cell(2, -1)), LatLng(10.0 + 2 * 0.001, 20.0 - 0.001))

    def test_rejects_non_positive_tile(self):
        with self.assertRaises(ValueError):
            GridMapper(0.0)
