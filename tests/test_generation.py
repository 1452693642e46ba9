import random
import unittest
from unittest import mock

from click.testing import CliRunner

from catan_layout import BoardConfig, HexType, LayoutGenerationError, Scenario, generate_board, make_board
from catan_layout.cli import main
from catan_layout.generation.signature import layout_digest, layout_signature
from catan_layout.scenarios import resolve_scenario


def digest_line(output: str) -> str:
    return next(line for line in output.splitlines() if "Digest" in line)


def component_size(board, start, coords):
    hex_type = board.hex_type(start)
    seen = {start}
    stack = [start]
    while stack:
        current = stack.pop()
        for neighbor in board.geometry.adjacent_hex_coords(current):
            if neighbor in coords and neighbor not in seen and board.hex_type(neighbor) is hex_type:
                seen.add(neighbor)
                stack.append(neighbor)
    return len(seen)


class GenerationTests(unittest.TestCase):
    def test_same_seed_gives_same_board(self) -> None:
        for scenario in Scenario:
            with self.subTest(scenario=scenario.name):
                config = BoardConfig(scenario=scenario, player_count=4)
                first = generate_board(config, seed=77)
                second = generate_board(config, seed=77)
                self.assertEqual(layout_signature(first), layout_signature(second))
                self.assertEqual(layout_digest(first), layout_digest(second))

    def test_small_clump_limit_is_reproducible_and_respected(self) -> None:
        config = BoardConfig(clump_size=2)
        first = generate_board(config, seed=2024)
        second = generate_board(config, seed=2024)
        self.assertEqual(first.hex_layout, second.hex_layout)
        self.assertEqual(first.number_layout, second.number_layout)

        mainland = resolve_scenario(config).land_groups[0].coords
        for coord in mainland:
            hex_type = first.hex_type(coord)
            if hex_type is HexType.DESERT:
                continue
            self.assertLessEqual(component_size(first, coord, mainland), 2, msg=hex_type.value)

    def test_different_seeds_vary_the_board(self) -> None:
        digests = {layout_digest(generate_board(seed=seed)) for seed in range(6)}
        self.assertGreater(len(digests), 1)

    def test_make_board_uses_the_given_rng(self) -> None:
        config = BoardConfig(scenario=Scenario.FORGOTTEN_TRIBE)
        first = make_board(config, random.Random(3))
        second = make_board(config, random.Random(3))
        self.assertEqual(layout_signature(first), layout_signature(second))

    def test_no_adjacent_frequent_numbers_when_balanced(self) -> None:
        balanced_boards = 0
        for seed in range(20):
            board = generate_board(BoardConfig(scenario=Scenario.FOUR_ISLANDS, player_count=4), seed=seed)
            if not board.frequent_numbers_balanced:
                continue
            balanced_boards += 1
            geometry = board.geometry
            for coord in board.land_hex_coords:
                if board.dice_number(coord) not in (6, 8):
                    continue
                for neighbor in geometry.adjacent_hex_coords(coord):
                    self.assertNotIn(
                        board.dice_number(neighbor),
                        (6, 8),
                        msg=f"Frequent numbers touch at seed {seed}",
                    )
        self.assertGreater(balanced_boards, 0)

    def test_clump_breaking_can_be_disabled(self) -> None:
        board = generate_board(BoardConfig(break_clumps=False), seed=8)
        self.assertEqual(len(board.land_hex_coords), 33)

    def test_whole_board_retry_gives_up(self) -> None:
        config = BoardConfig(max_board_attempts=3)
        failure = LayoutGenerationError("clumped", attempts=300)
        with mock.patch("catan_layout.generation.board.make_board", side_effect=failure) as make:
            with self.assertRaises(LayoutGenerationError) as ctx:
                generate_board(config, seed=1)
        self.assertEqual(make.call_count, 3)
        self.assertEqual(ctx.exception.attempts, 3)
        self.assertIs(ctx.exception.__cause__, failure)


class CliTests(unittest.TestCase):
    def test_prints_board_tables(self) -> None:
        runner = CliRunner()
        result = runner.invoke(main, ["--scenario", "fog_island", "--players", "3", "--seed", "5"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("Fog Island", result.output)
        self.assertIn("Ports", result.output)
        self.assertIn("Digest", result.output)

    def test_seeded_runs_print_the_same_digest(self) -> None:
        runner = CliRunner()
        args = ["--seed", "11", "--no-break-clumps"]
        first = runner.invoke(main, args)
        second = runner.invoke(main, args)
        self.assertEqual(first.exit_code, 0, msg=first.output)
        self.assertEqual(digest_line(first.output), digest_line(second.output))

    def test_rejects_out_of_range_players(self) -> None:
        result = CliRunner().invoke(main, ["--players", "9"])
        self.assertEqual(result.exit_code, 2)

    def test_rejects_unknown_scenario(self) -> None:
        result = CliRunner().invoke(main, ["--scenario", "SC_NOPE"])
        self.assertEqual(result.exit_code, 2)


if __name__ == "__main__":
    unittest.main()
