"""Unit tests for the pattern store and recognizer."""

import pytest

from gesture_runes.gestures import (
    DegenerateInputError,
    EmptyPatternStoreError,
    RecognizerConfig,
    UnistrokeRecognizer,
)
from gesture_runes.utils.gesture_utils import Point

from conftest import as_capture, polyline, rotated


@pytest.fixture
def recognizer(recognizer_config, up_stroke, down_stroke):
    return UnistrokeRecognizer(recognizer_config, [('up', up_stroke), ('down', down_stroke)])


class TestPatternStore:

    def test_patterns_are_normalized(self, recognizer):
        assert [p.name for p in recognizer.patterns] == ['up', 'down']
        for pattern in recognizer.patterns:
            assert len(pattern.points) == 64

    def test_add_pattern_appends(self, recognizer, up_stroke):
        pattern = recognizer.add_pattern('up', up_stroke)
        assert len(recognizer) == 3
        assert recognizer.patterns[-1] is pattern

    def test_add_degenerate_pattern(self, recognizer_config):
        recognizer = UnistrokeRecognizer(recognizer_config)
        with pytest.raises(DegenerateInputError):
            recognizer.add_pattern('flat', [Point(0, 0), Point(50, 0)])
        assert len(recognizer) == 0


class TestRecognize:

    def test_empty_store(self, recognizer_config, up_stroke):
        with pytest.raises(EmptyPatternStoreError):
            UnistrokeRecognizer(recognizer_config).recognize(up_stroke)

    def test_round_trip(self, up_stroke):
        config = RecognizerConfig.from_degrees(10.0, 0.1, 100.0, 100.0, 64)
        recognizer = UnistrokeRecognizer(config)
        pattern = recognizer.add_pattern('up', up_stroke)
        result = recognizer.recognize(up_stroke)

        assert result.pattern is pattern
        assert result.distance < 0.1
        assert result.similarity == pytest.approx(1.0, abs=1e-3)

    def test_round_trip_default_precision(self, recognizer_config, up_stroke):
        recognizer = UnistrokeRecognizer(recognizer_config)
        recognizer.add_pattern('up', up_stroke)
        result = recognizer.recognize(up_stroke)
        assert result.distance < 0.7
        assert result.similarity > 0.985

    def test_rotated_copy(self, recognizer, up_stroke):
        result = recognizer.recognize(rotated(up_stroke, 5))
        assert result.name == 'up'
        assert result.similarity > 0.8

    def test_other_pattern(self, recognizer, down_stroke):
        result = recognizer.recognize(rotated(down_stroke, -5))
        assert result.name == 'down'
        assert result.similarity > 0.8

    def test_position_and_scale_invariance(self, recognizer, up_stroke):
        moved = [Point(p.x * 3.5 + 700, p.y * 3.5 - 40) for p in up_stroke]
        result = recognizer.recognize(moved)
        assert result.name == 'up'
        assert result.similarity == pytest.approx(1.0, abs=0.02)

    def test_first_pattern_wins_ties(self, recognizer_config, up_stroke):
        recognizer = UnistrokeRecognizer(recognizer_config, [('first', up_stroke), ('second', up_stroke)])
        result = recognizer.recognize(up_stroke)
        assert result.pattern is recognizer.patterns[0]

    def test_accepts_capture_dicts(self, recognizer, up_stroke):
        assert recognizer.recognize(as_capture(up_stroke)).name == 'up'

    def test_unpacks_as_pattern_and_similarity(self, recognizer, up_stroke):
        pattern, similarity = recognizer.recognize(up_stroke)
        assert pattern.name == 'up'
        assert similarity > 0.9

    def test_degenerate_input(self, recognizer):
        with pytest.raises(DegenerateInputError):
            recognizer.recognize([Point(5, 5)])
        with pytest.raises(DegenerateInputError):
            recognizer.recognize(polyline((0, 0), (0, 100)))

    def test_score_patterns_in_store_order(self, recognizer, up_stroke):
        scores = recognizer.score_patterns(up_stroke)
        assert [p.name for p, _ in scores] == ['up', 'down']
        assert scores[0][1] < scores[1][1]


class TestSimilarity:

    def test_similarity_is_not_clamped(self):
        recognizer = UnistrokeRecognizer(RecognizerConfig(width=30.0, height=40.0))
        assert recognizer.config.half_diagonal == pytest.approx(25.0)
        assert recognizer.distance_to_similarity(0.0) == 1.0
        assert recognizer.distance_to_similarity(25.0) == pytest.approx(0.0)
        assert recognizer.distance_to_similarity(50.0) == pytest.approx(-1.0)

    def test_config_from_degrees(self):
        config = RecognizerConfig.from_degrees(180.0, 90.0, 10.0, 20.0, 8)
        assert config.angle_range == pytest.approx(3.141592653589793)
        assert config.angle_precision == pytest.approx(1.5707963267948966)
        assert config.resample_num_points == 8


class TestBestMatch:

    def test_agrees_with_recognize(self, recognizer, down_stroke):
        path = rotated(down_stroke, 4)
        picked = recognizer.best_match(recognizer.score_patterns(path))
        result = recognizer.recognize(path)
        assert picked.pattern is result.pattern
        assert picked.distance == result.distance
        assert picked.similarity == result.similarity

    def test_first_score_wins_ties(self, recognizer):
        up, down = recognizer.patterns
        result = recognizer.best_match([(down, 3.0), (up, 3.0)])
        assert result.pattern is down
        assert result.distance == 3.0

    def test_empty_scores(self, recognizer):
        with pytest.raises(EmptyPatternStoreError):
            recognizer.best_match([])
