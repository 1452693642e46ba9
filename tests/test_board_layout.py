import unittest

from catan_layout import BoardConfig, HexType, Scenario, generate_board
from catan_layout.domain.board import PIRATE_PATH_PART
from catan_layout.domain.hexes import is_frequent
from catan_layout.generation.pirate import PirateFleet
from catan_layout.scenarios import resolve_scenario
from catan_layout.scenarios.registry import DEV_CARD_EDGES_PART, VP_EDGES_PART

PLAYER_COUNTS = (3, 4, 6)


def board_for(scenario: Scenario, players: int, seed: int = 21):
    return generate_board(BoardConfig(scenario=scenario, player_count=players), seed=seed)


class BoardLayoutTests(unittest.TestCase):
    def test_every_scenario_and_player_count_generates(self) -> None:
        for scenario in Scenario:
            for players in PLAYER_COUNTS:
                with self.subTest(scenario=scenario.name, players=players):
                    board = board_for(scenario, players)
                    layout = resolve_scenario(BoardConfig(scenario=scenario, player_count=players))
                    self.assertIs(board.scenario, scenario)
                    self.assertEqual((board.height, board.width), (layout.board_height, layout.board_width))
                    expected = sum(len(spec.coords) for spec in layout.land_groups)
                    self.assertEqual(len(board.land_hex_coords), expected)

    def test_land_areas_are_all_populated(self) -> None:
        for scenario in Scenario:
            for players in PLAYER_COUNTS:
                with self.subTest(scenario=scenario.name, players=players):
                    board = board_for(scenario, players)
                    self.assertIsNone(board.land_area_nodes[0])
                    for area, nodes in enumerate(board.land_area_nodes[1:], start=1):
                        self.assertTrue(nodes, msg=f"land area {area} is empty")
                        self.assertTrue(nodes <= board.nodes_on_land)

    def test_land_hex_types_match_the_tables(self) -> None:
        board = board_for(Scenario.NONE, 4)
        layout = resolve_scenario(BoardConfig())
        expected = sorted(hex_type for spec in layout.land_groups for hex_type in spec.hex_types)
        actual = sorted(board.hex_type(coord) for coord in board.land_hex_coords)
        self.assertEqual(actual, expected)

    def test_deserts_have_no_number_and_hold_the_robber(self) -> None:
        board = board_for(Scenario.NONE, 4)
        deserts = board.hexes_of_type(HexType.DESERT)
        self.assertTrue(deserts)
        for desert in deserts:
            self.assertIsNone(board.dice_number(desert))
        self.assertIn(board.robber_hex, deserts)

    def test_gold_hexes_never_hold_six_or_eight(self) -> None:
        for seed in range(10):
            board = board_for(Scenario.NONE, 6, seed=seed)
            for gold in board.hexes_of_type(HexType.GOLD):
                self.assertFalse(is_frequent(board.dice_number(gold)), msg=f"seed {seed}")

    def test_ports_sit_on_land_and_map_their_nodes(self) -> None:
        for scenario in Scenario:
            with self.subTest(scenario=scenario.name):
                board = board_for(scenario, 4)
                geometry = board.geometry
                self.assertTrue(board.ports)
                for port in board.ports:
                    land_hex = geometry.hex_across_edge(port.edge, port.facing)
                    self.assertIsNotNone(land_hex)
                    self.assertTrue(board.hex_type(land_hex).is_land)
                    for node in port.nodes:
                        self.assertIn(node, board.port_nodes(port.port_type))

    def test_fog_island_hides_its_middle_island(self) -> None:
        for players in PLAYER_COUNTS:
            with self.subTest(players=players):
                board = board_for(Scenario.FOG_ISLAND, players)
                layout = resolve_scenario(BoardConfig(scenario=Scenario.FOG_ISLAND, player_count=players))
                self.assertEqual(set(board.fog_hidden_hexes), set(layout.fog_hexes))
                for coord in layout.fog_hexes:
                    self.assertIs(board.hex_type(coord), HexType.FOG)
                    self.assertIsNone(board.dice_number(coord))

    def test_pirate_islands_have_a_fleet_and_no_robber(self) -> None:
        board = board_for(Scenario.PIRATE_ISLANDS, 4)
        self.assertIsNone(board.robber_hex)
        self.assertIsNotNone(board.pirate_hex)
        self.assertTrue(board.added_part(PIRATE_PATH_PART))
        fleet = PirateFleet.from_board(board)
        self.assertIn(fleet.advance(1), board.added_part(PIRATE_PATH_PART))

    def test_forgotten_tribe_carries_special_edges(self) -> None:
        board = board_for(Scenario.FORGOTTEN_TRIBE, 6)
        self.assertTrue(board.added_part(DEV_CARD_EDGES_PART))
        self.assertTrue(board.added_part(VP_EDGES_PART))

    def test_four_islands_lets_players_start_anywhere(self) -> None:
        board = board_for(Scenario.FOUR_ISLANDS, 4)
        self.assertEqual(board.starting_land_area, 0)
        self.assertEqual(len(board.land_area_sizes()), len(board.land_area_nodes) - 1)

    def test_desert_crossing_gold_lands_past_the_strip(self) -> None:
        for players in PLAYER_COUNTS:
            layout = resolve_scenario(BoardConfig(scenario=Scenario.THROUGH_THE_DESERT, player_count=players))
            main = layout.land_groups[1]
            _, strip_length = main.land_area_ranges[1]
            for seed in range(5):
                with self.subTest(players=players, seed=seed):
                    board = board_for(Scenario.THROUGH_THE_DESERT, players, seed=seed)
                    golds = [coord for coord in main.coords if board.hex_type(coord) is HexType.GOLD]
                    self.assertEqual(len(golds), 1)
                    self.assertIn(golds[0], main.coords[-strip_length:])


if __name__ == "__main__":
    unittest.main()
