import unittest

from helpers import paint, uniform_board

from catanalyzer.analysis.analyzer import SettlementAnalyzer, analyze_board
from catanalyzer.analysis.enumeration import enumerate_junctions
from catanalyzer.analysis.ranking import rank_junctions
from catanalyzer.analysis.scoring import score_junction
from catanalyzer.analysis.types import AnalysisConfig
from catanalyzer.domain.board import Board, Resource, build_board
from catanalyzer.domain.randomizer import generate_randomized_board


class AnalysisTests(unittest.TestCase):
    def test_analysis_is_deterministic_for_same_board(self) -> None:
        board = generate_randomized_board(seed=123)
        analyzer = SettlementAnalyzer()

        result_one = analyzer.analyze(board)
        result_two = analyzer.analyze(board)
        self.assertEqual(result_one.to_dict(), result_two.to_dict())
        self.assertEqual(
            [ranked.score for ranked in result_one.ranked],
            [ranked.score for ranked in result_two.ranked],
        )

    def test_returns_top_ten_ranked_in_order(self) -> None:
        result = analyze_board(generate_randomized_board(seed=45))
        self.assertEqual(len(result.ranked), 10)
        self.assertEqual([ranked.rank for ranked in result.ranked], list(range(1, 11)))
        scores = [ranked.score for ranked in result.ranked]
        self.assertEqual(scores, sorted(scores, reverse=True))
        self.assertIs(result.best, result.ranked[0])

    def test_top_k_is_configurable(self) -> None:
        board = generate_randomized_board(seed=9)
        self.assertEqual(len(analyze_board(board, AnalysisConfig(top_k=3)).ranked), 3)
        everything = analyze_board(board, AnalysisConfig(top_k=100))
        self.assertEqual(len(everything.ranked), everything.junction_count)

    def test_invalid_top_k_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            analyze_board(build_board(), AnalysisConfig(top_k=0))
        with self.assertRaises(ValueError):
            rank_junctions([], top_k=0)

    def test_uniform_board_scores_every_junction_equally(self) -> None:
        result = analyze_board(uniform_board(), AnalysisConfig(top_k=100))
        self.assertEqual(result.junction_count, 24)
        for ranked in result.ranked:
            self.assertAlmostEqual(ranked.score, 74.4, places=6)
            self.assertEqual(ranked.diversity, 1)

    def test_ties_keep_enumeration_order(self) -> None:
        board = uniform_board()
        result = analyze_board(board)
        expected_keys = [junction.key for junction in enumerate_junctions(board)[:10]]
        self.assertEqual([ranked.junction.key for ranked in result.ranked], expected_keys)

    def test_ranking_is_stable_for_equal_scores(self) -> None:
        board = generate_randomized_board(seed=61)
        scores = [score_junction(junction) for junction in enumerate_junctions(board)]
        ranked = rank_junctions(scores, top_k=len(scores))
        position = {item.junction.key: index for index, item in enumerate(scores)}
        for earlier, later in zip(ranked, ranked[1:]):
            self.assertGreaterEqual(earlier.score, later.score)
            if earlier.score == later.score:
                self.assertLess(position[earlier.junction.key], position[later.junction.key])

    def test_near_tied_scores_match_reference_ranking(self) -> None:
        eighth = analyze_board(generate_randomized_board(seed=1)).ranked[7]
        self.assertEqual(eighth.hex_coords, frozenset({(-1, 0), (0, 0), (-1, 1)}))
        self.assertEqual(eighth.score, 76.40000000000002)

    def test_scores_ignore_tile_storage_order(self) -> None:
        board = generate_randomized_board(seed=1)
        reordered = Board(radius=board.radius, tiles=list(reversed(board.tiles)))
        self.assertEqual(
            {item.junction.key: item.score for item in map(score_junction, enumerate_junctions(board))},
            {item.junction.key: item.score for item in map(score_junction, enumerate_junctions(reordered))},
        )

    def test_best_spot_on_hand_built_board(self) -> None:
        board = build_board()
        paint(board, 0, 0, Resource.WHEAT, 6)
        paint(board, 1, 0, Resource.ORE, 8)
        paint(board, 0, 1, Resource.WOOD, 5)
        paint(board, 1, -1, Resource.SHEEP, 2)

        result = analyze_board(board)
        self.assertEqual(result.junction_count, 2)
        best = result.best
        assert best is not None
        self.assertEqual(best.junction.key, "0,0|0,1|1,0")
        self.assertEqual(best.diversity, 3)
        self.assertEqual([tile.coord for tile in best.oriented.as_tuple()], [(1, 0), (0, 0), (0, 1)])
        self.assertEqual(best.hex_coords, frozenset({(0, 0), (1, 0), (0, 1)}))
        self.assertEqual(result.ranked[1].junction.coords, frozenset({(0, 0), (1, -1), (1, 0)}))

    def test_result_wire_format(self) -> None:
        board = build_board()
        paint(board, 0, 0, Resource.WHEAT, 6)
        paint(board, 1, 0, Resource.ORE, 8)
        paint(board, 0, 1, Resource.WOOD, 5)

        payload = analyze_board(board).to_dict()
        self.assertEqual(payload["junction_count"], 1)
        entry = payload["results"][0]
        self.assertEqual(entry["rank"], 1)
        self.assertEqual(entry["diversity"], 3)
        self.assertAlmostEqual(entry["score"], 97.6, places=6)
        self.assertEqual(
            entry["hexes"],
            [
                {"q": 1, "r": 0, "resource": "ore", "number": 8},
                {"q": 0, "r": 0, "resource": "wheat", "number": 6},
                {"q": 0, "r": 1, "resource": "wood", "number": 5},
            ],
        )
        self.assertEqual(entry["hex_coords"], [{"q": 0, "r": 0}, {"q": 1, "r": 0}, {"q": 0, "r": 1}])

    def test_empty_board_gives_empty_result(self) -> None:
        result = analyze_board(build_board())
        self.assertEqual(result.ranked, [])
        self.assertEqual(result.junction_count, 0)
        self.assertIsNone(result.best)

    def test_desert_never_appears_in_results(self) -> None:
        board = uniform_board(resource=Resource.ORE, number=8)
        board.set_resource(0, 0, Resource.DESERT)
        result = analyze_board(board, AnalysisConfig(top_k=100))
        self.assertEqual(result.junction_count, 18)
        for ranked in result.ranked:
            self.assertNotIn((0, 0), ranked.hex_coords)

    def test_removing_a_number_refreshes_results(self) -> None:
        board = uniform_board()
        board.set_resource(1, 0, Resource.ORE)
        board.set_number(1, 0, 8)
        before = analyze_board(board)
        self.assertIn((1, 0), before.best.hex_coords)

        board.set_number(1, 0, None)
        after = analyze_board(board, AnalysisConfig(top_k=100))
        self.assertEqual(after.junction_count, 24 - 6)
        for ranked in after.ranked:
            self.assertNotIn((1, 0), ranked.hex_coords)

    def test_analysis_does_not_touch_the_board(self) -> None:
        board = generate_randomized_board(seed=4)
        before = board.to_dict()
        analyze_board(board)
        self.assertEqual(board.to_dict(), before)


if __name__ == "__main__":
    unittest.main()
