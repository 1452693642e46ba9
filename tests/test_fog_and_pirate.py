import random
import unittest

from catan_layout.domain.board import PIRATE_PATH_PART
from catan_layout.domain.hexes import HexType
from catan_layout.domain.scenario import Scenario
from catan_layout.errors import LayoutStateError
from catan_layout.generation.fog import hide_hexes_in_fog, reveal_fog_hex
from catan_layout.generation.pirate import PirateFleet
from catan_layout.generation.state import GenerationState


def small_state() -> GenerationState:
    state = GenerationState.create(16, 18, land_area_count=1, rng=random.Random(2))
    state.set_hex_type(0x0707, HexType.WHEAT)
    state.set_dice_number(0x0707, 5)
    state.set_hex_type(0x0709, HexType.GOLD)
    state.set_dice_number(0x0709, 11)
    state.land_hex_coords.extend([0x0707, 0x0709])
    return state


def freeze(state: GenerationState, scenario: Scenario = Scenario.FOG_ISLAND):
    return state.freeze(scenario=scenario, player_variant=4, starting_land_area=1)


class FogTests(unittest.TestCase):
    def test_hidden_hex_remembers_what_it_covers(self) -> None:
        state = small_state()
        hide_hexes_in_fog(state, [0x0707, 0x0709])

        self.assertIs(state.hex_type(0x0707), HexType.FOG)
        self.assertIsNone(state.dice_number(0x0707))
        self.assertEqual(state.fog_hidden_hexes[0x0709], (HexType.GOLD, 11))

    def test_hex_cannot_be_hidden_twice(self) -> None:
        state = small_state()
        hide_hexes_in_fog(state, [0x0707])
        with self.assertRaises(LayoutStateError):
            hide_hexes_in_fog(state, [0x0707])

    def test_reveal_restores_hex_on_a_copy(self) -> None:
        state = small_state()
        hide_hexes_in_fog(state, [0x0707, 0x0709])
        board = freeze(state)

        revealed, hex_type, number = reveal_fog_hex(board, 0x0709)

        self.assertEqual((hex_type, number), (HexType.GOLD, 11))
        self.assertIs(revealed.hex_type(0x0709), HexType.GOLD)
        self.assertEqual(revealed.dice_number(0x0709), 11)
        self.assertNotIn(0x0709, revealed.fog_hidden_hexes)
        self.assertIn(0x0707, revealed.fog_hidden_hexes)
        self.assertIs(board.hex_type(0x0709), HexType.FOG)
        self.assertIn(0x0709, board.fog_hidden_hexes)

    def test_reveal_of_clear_hex_fails(self) -> None:
        board = freeze(small_state())
        with self.assertRaises(LayoutStateError):
            reveal_fog_hex(board, 0x0707)


class PirateFleetTests(unittest.TestCase):
    def test_fleet_starts_at_pirate_hex(self) -> None:
        fleet = PirateFleet([0x0101, 0x0103, 0x0105, 0x0107], 0x0105)
        self.assertEqual(fleet.index, 2)
        self.assertEqual(fleet.advance(3), 0x0103)
        self.assertEqual(fleet.advance(4), 0x0103)

    def test_unknown_start_uses_first_hex(self) -> None:
        fleet = PirateFleet([0x0101, 0x0103], None)
        self.assertEqual(fleet.index, 0)
        self.assertTrue(fleet.defeated)
        self.assertIsNone(fleet.advance(1))

    def test_defeated_fleet_stops_moving(self) -> None:
        fleet = PirateFleet([0x0101, 0x0103, 0x0105], 0x0101)
        fleet.defeat()
        self.assertTrue(fleet.defeated)
        self.assertIsNone(fleet.advance(2))
        self.assertIsNone(fleet.pirate_hex)

    def test_empty_path_is_rejected(self) -> None:
        with self.assertRaises(LayoutStateError):
            PirateFleet([], 0x0101)

    def test_fleet_from_board_needs_a_path(self) -> None:
        state = small_state()
        with self.assertRaises(LayoutStateError):
            PirateFleet.from_board(freeze(state, Scenario.PIRATE_ISLANDS))

        state.added_parts[PIRATE_PATH_PART] = (0x0D0A, 0x0D0C)
        state.pirate_hex = 0x0D0C
        fleet = PirateFleet.from_board(freeze(state, Scenario.PIRATE_ISLANDS))
        self.assertEqual(fleet.advance(1), 0x0D0A)


if __name__ == "__main__":
    unittest.main()
