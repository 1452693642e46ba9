import unittest

from catan_layout.domain.geometry import (
    EDGE_FALLING,
    EDGE_RISING,
    EDGE_VERTICAL,
    BoardGeometry,
    edge_orientation,
    format_coord,
    hex_coord,
    legal_facings,
    parse_board_size,
)
from catan_layout.domain.hexes import Facing, is_frequent, is_rare


class BoardGeometryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.geometry = BoardGeometry()

    def test_hex_parity_follows_row_pairs(self) -> None:
        self.assertTrue(self.geometry.is_hex_on_board(0x0707))
        self.assertTrue(self.geometry.is_hex_on_board(0x0504))
        self.assertFalse(self.geometry.is_hex_on_board(0x0708))
        self.assertFalse(self.geometry.is_hex_on_board(0x0604))
        self.assertFalse(self.geometry.is_hex_on_board(0x0100))
        self.assertFalse(self.geometry.is_hex_on_board(hex_coord(17, 2)))

    def test_interior_hex_has_six_neighbors(self) -> None:
        self.assertEqual(
            sorted(self.geometry.adjacent_hex_coords(0x0707)),
            [0x0506, 0x0508, 0x0705, 0x0709, 0x0906, 0x0908],
        )

    def test_corner_hex_neighbors_stay_on_board(self) -> None:
        self.assertEqual(sorted(self.geometry.adjacent_hex_coords(0x0102)), [0x0104, 0x0301, 0x0303])

    def test_adjacency_is_symmetric(self) -> None:
        neighbors = self.geometry.adjacent_hex_coords(0x0908)
        self.assertEqual(len(neighbors), 6)
        for neighbor in neighbors:
            self.assertTrue(self.geometry.are_hexes_adjacent(0x0908, neighbor))
            self.assertTrue(self.geometry.are_hexes_adjacent(neighbor, 0x0908))
        self.assertFalse(self.geometry.are_hexes_adjacent(0x0707, 0x070B))

    def test_nodes_of_hex_go_clockwise_from_top(self) -> None:
        self.assertEqual(
            self.geometry.nodes_of_hex(0x0707),
            [0x0607, 0x0608, 0x0808, 0x0807, 0x0806, 0x0606],
        )

    def test_edge_orientation_and_nodes(self) -> None:
        self.assertEqual(edge_orientation(0x0708), EDGE_VERTICAL)
        self.assertEqual(edge_orientation(0x0606), EDGE_RISING)
        self.assertEqual(edge_orientation(0x0607), EDGE_FALLING)
        self.assertEqual(self.geometry.nodes_of_edge(0x0708), (0x0608, 0x0808))
        self.assertEqual(self.geometry.nodes_of_edge(0x0606), (0x0606, 0x0607))

    def test_hex_across_edge_for_each_orientation(self) -> None:
        self.assertEqual(self.geometry.hex_across_edge(0x0708, Facing.W), 0x0707)
        self.assertEqual(self.geometry.hex_across_edge(0x0708, Facing.E), 0x0709)
        self.assertEqual(self.geometry.hex_across_edge(0x0606, Facing.SE), 0x0707)
        self.assertEqual(self.geometry.hex_across_edge(0x0606, Facing.NW), 0x0506)
        self.assertEqual(self.geometry.hex_across_edge(0x0607, Facing.SW), 0x0707)
        self.assertEqual(self.geometry.hex_across_edge(0x0607, Facing.NE), 0x0508)

    def test_hex_across_edge_rejects_illegal_facing(self) -> None:
        self.assertEqual(legal_facings(0x0708), (Facing.E, Facing.W))
        with self.assertRaises(ValueError):
            self.geometry.hex_across_edge(0x0708, Facing.NE)

    def test_facing_opposites(self) -> None:
        self.assertIs(Facing.E.opposite, Facing.W)
        self.assertIs(Facing.NE.opposite, Facing.SW)
        self.assertIs(Facing.NW.opposite, Facing.SE)

    def test_board_size_and_formatting(self) -> None:
        self.assertEqual(parse_board_size(0x1012), (16, 18))
        self.assertEqual(format_coord(0x070B), "0x070b")

    def test_frequent_and_rare_numbers(self) -> None:
        self.assertTrue(is_frequent(6))
        self.assertTrue(is_frequent(8))
        self.assertFalse(is_frequent(None))
        self.assertTrue(is_rare(2))
        self.assertTrue(is_rare(11))
        self.assertFalse(is_rare(5))
        self.assertFalse(is_rare(0))
        self.assertFalse(is_rare(None))


if __name__ == "__main__":
    unittest.main()
