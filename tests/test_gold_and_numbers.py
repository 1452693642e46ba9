import itertools
import random
import unittest

from catan_layout.domain.geometry import hex_coord
from catan_layout.domain.hexes import RESOURCE_HEX_TYPES, HexType, is_frequent
from catan_layout.domain.scenario import Scenario
from catan_layout.errors import LayoutConfigError
from catan_layout.generation.gold import arrange_gold
from catan_layout.generation.numbers import NumberSwap, SwapLog, balance_frequent_numbers
from catan_layout.generation.state import GenerationState

RARE_AND_MIDDLE = (2, 3, 4, 5, 9, 10, 11, 12)


def new_state(seed: int = 5) -> GenerationState:
    return GenerationState.create(16, 18, land_area_count=3, rng=random.Random(seed))


def block_coords(state: GenerationState):
    coords = (hex_coord(row, col) for row in range(3, 12, 2) for col in range(2, 15))
    return [coord for coord in coords if state.geometry.is_hex_on_board(coord)]


def fill_block(state: GenerationState, numbers=RARE_AND_MIDDLE):
    coords = block_coords(state)
    for coord, hex_type, number in zip(coords, itertools.cycle(RESOURCE_HEX_TYPES), itertools.cycle(numbers)):
        state.set_hex_type(coord, hex_type)
        state.set_dice_number(coord, number)
    return coords


def frequent_pairs(state: GenerationState, coords):
    return [
        (coord, neighbor)
        for coord in coords
        if state.is_frequent_hex(coord)
        for neighbor in state.geometry.adjacent_hex_coords(coord)
        if state.is_frequent_hex(neighbor)
    ]


class GoldArrangerTests(unittest.TestCase):
    def test_row_of_golds_is_broken_up(self) -> None:
        state = new_state()
        coords = fill_block(state)
        for coord in (0x0707, 0x0709, 0x070B):
            state.set_hex_type(coord, HexType.GOLD)

        swaps = arrange_gold(state, coords, ((1, len(coords)),), Scenario.NONE)

        golds = [coord for coord in coords if state.hex_type(coord) is HexType.GOLD]
        self.assertEqual(swaps, 1)
        self.assertEqual(len(golds), 3)
        for gold in golds:
            for neighbor in state.geometry.adjacent_hex_coords(gold):
                self.assertIsNot(state.hex_type(neighbor), HexType.GOLD)

    def test_separate_golds_are_left_alone(self) -> None:
        state = new_state()
        coords = fill_block(state)
        state.set_hex_type(0x0504, HexType.GOLD)
        state.set_hex_type(0x090C, HexType.GOLD)
        self.assertEqual(arrange_gold(state, coords, ((1, len(coords)),), Scenario.NONE), 0)
        self.assertIs(state.hex_type(0x0504), HexType.GOLD)

    def test_desert_crossing_gold_moves_to_far_side(self) -> None:
        state = new_state()
        coords = (0x0707, 0x0709, 0x070B, 0x070D, 0x0908, 0x090A)
        for coord in coords:
            state.set_hex_type(coord, HexType.WOOD)
        state.set_hex_type(0x0707, HexType.GOLD)

        swaps = arrange_gold(state, coords, ((1, 4), (2, 2)), Scenario.THROUGH_THE_DESERT)

        self.assertEqual(swaps, 1)
        self.assertIs(state.hex_type(0x0707), HexType.WOOD)
        self.assertEqual(
            [coord for coord in coords[4:] if state.hex_type(coord) is HexType.GOLD],
            [coord for coord in coords if state.hex_type(coord) is HexType.GOLD],
        )

    def test_desert_crossing_needs_exactly_one_gold(self) -> None:
        state = new_state()
        coords = (0x0707, 0x0709, 0x070B, 0x070D)
        for coord in coords:
            state.set_hex_type(coord, HexType.GOLD)
        with self.assertRaises(LayoutConfigError):
            arrange_gold(state, coords, ((1, 2), (2, 2)), Scenario.THROUGH_THE_DESERT)


class FrequentNumberTests(unittest.TestCase):
    def test_adjacent_six_and_eight_are_separated(self) -> None:
        state = new_state()
        coords = fill_block(state)
        state.set_dice_number(0x0707, 6)
        state.set_dice_number(0x0709, 8)
        before = sorted(state.dice_number(coord) for coord in coords)

        self.assertTrue(balance_frequent_numbers(state, coords, [0x0707, 0x0709]))

        self.assertEqual(frequent_pairs(state, coords), [])
        self.assertEqual(sorted(state.dice_number(coord) for coord in coords), before)

    def test_hex_between_two_frequent_numbers_moves(self) -> None:
        state = new_state(seed=11)
        coords = fill_block(state)
        for coord, number in ((0x0705, 6), (0x0707, 8), (0x0709, 6)):
            state.set_dice_number(coord, number)

        self.assertTrue(balance_frequent_numbers(state, coords, [0x0705, 0x0707, 0x0709]))
        self.assertEqual(frequent_pairs(state, coords), [])
        self.assertEqual(sum(1 for coord in coords if state.is_frequent_hex(coord)), 3)

    def test_gold_never_keeps_a_frequent_number(self) -> None:
        state = new_state()
        coords = fill_block(state)
        state.set_hex_type(0x0707, HexType.GOLD)
        state.set_dice_number(0x0707, 8)

        balance_frequent_numbers(state, coords, [0x0707])

        self.assertFalse(is_frequent(state.dice_number(0x0707)))
        self.assertEqual(sum(1 for coord in coords if state.dice_number(coord) == 8), 1)

    def test_gold_without_rare_partner_is_a_config_error(self) -> None:
        state = new_state()
        coords = fill_block(state, numbers=(5, 9))
        state.set_hex_type(0x0707, HexType.GOLD)
        state.set_dice_number(0x0707, 6)
        with self.assertRaises(LayoutConfigError):
            balance_frequent_numbers(state, coords, [0x0707])

    def test_reports_failure_when_no_swap_target_exists(self) -> None:
        state = new_state()
        flower = (0x0707, 0x0506, 0x0508, 0x0709, 0x0908, 0x0906, 0x0705)
        for coord, number in zip(flower, (6, 8, 3, 4, 5, 9, 10)):
            state.set_hex_type(coord, HexType.WHEAT)
            state.set_dice_number(coord, number)

        self.assertFalse(balance_frequent_numbers(state, flower, [0x0707, 0x0506]))
        self.assertEqual(state.dice_number(0x0707), 6)
        self.assertEqual(state.dice_number(0x0506), 8)

    def test_nothing_to_do_without_frequent_hexes(self) -> None:
        state = new_state()
        coords = fill_block(state)
        self.assertTrue(balance_frequent_numbers(state, coords, []))

    def test_swap_log_undo_restores_numbers(self) -> None:
        state = new_state()
        state.set_dice_number(0x0707, 2)
        state.set_dice_number(0x0709, 6)
        state.set_dice_number(0x070B, 9)
        log = SwapLog()
        for first, second in ((0x0707, 0x0709), (0x0709, 0x070B)):
            state.swap_dice_numbers(first, second)
            log.record(NumberSwap(first, second))

        log.undo(state)

        self.assertEqual(len(log), 0)
        self.assertEqual(
            [state.dice_number(coord) for coord in (0x0707, 0x0709, 0x070B)],
            [2, 6, 9],
        )


if __name__ == "__main__":
    unittest.main()
