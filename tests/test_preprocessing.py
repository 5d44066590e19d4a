"""
Tests for the segment preprocessors.
"""

import pytest

from transcript_pro.core.preprocessing import (
    filter_empty_segments,
    is_silence_marker,
    merge_overlapping_segments,
    remove_silence_markers,
)
from transcript_pro.models.schemas import TranscriptSource


def texts(segments):
    return [segment.text for segment in segments]


@pytest.mark.parametrize("preprocess", [
    filter_empty_segments,
    remove_silence_markers,
    merge_overlapping_segments,
])
def test_empty_input(preprocess):
    """Test that every preprocessor maps an empty list to an empty list."""
    assert preprocess([]) == []


def test_filter_empty_segments(seg):
    """Test that empty and whitespace-only segments are dropped in order."""
    segments = [
        seg(0, 1, "Hello"),
        seg(1, 2, ""),
        seg(2, 3, "   "),
        seg(3, 4, "\t\n"),
        seg(4, 5, "World"),
    ]

    result = filter_empty_segments(segments)

    assert texts(result) == ["Hello", "World"]
    assert result[1].start == 4


def test_filter_empty_keeps_punctuation(seg):
    segments = [seg(0, 1, "."), seg(1, 2, "-")]
    assert filter_empty_segments(segments) == segments


def test_filter_empty_does_not_mutate_input(seg):
    segments = [seg(0, 1, "Hello"), seg(1, 2, " ")]
    filter_empty_segments(segments)
    assert len(segments) == 2


def test_remove_silence_markers_case_insensitive(seg):
    """Test that bracketed markers are matched regardless of case."""
    segments = [
        seg(0, 1, "Hello"),
        seg(1, 2, "[silence]"),
        seg(2, 3, "[SILENCE]"),
        seg(3, 4, "[Silence]"),
        seg(4, 5, "World"),
    ]

    assert texts(remove_silence_markers(segments)) == ["Hello", "World"]


def test_remove_silence_markers_all_patterns(seg):
    """Test every marker pattern, including surrounding whitespace."""
    segments = [
        seg(0, 1, "[pause]"),
        seg(1, 2, "[Music]"),
        seg(2, 3, "  [MUSIC]  "),
        seg(3, 4, "."),
        seg(4, 5, "-"),
        seg(5, 6, ""),
        seg(6, 7, "   "),
        seg(7, 8, "Kept"),
    ]

    assert texts(remove_silence_markers(segments)) == ["Kept"]


def test_remove_silence_markers_whole_text_only(seg):
    """Test that markers inside longer text are kept."""
    segments = [
        seg(0, 1, "The silence was deafening"),
        seg(1, 2, "Test..."),
        seg(2, 3, ".."),
        seg(3, 4, "--"),
        seg(4, 5, "[Music] playing"),
        seg(5, 6, "[applause]"),
    ]

    assert remove_silence_markers(segments) == segments


def test_merge_overlapping_segments(seg):
    """Test the basic two-segment merge."""
    segments = [seg(0, 1.5, "Hello"), seg(1.2, 2.5, "world")]

    result = merge_overlapping_segments(segments)

    assert len(result) == 1
    assert result[0].start == 0
    assert result[0].end == 2.5
    assert result[0].text == "Hello world"


def test_merge_touching_segments_not_merged(seg):
    """Test that segments sharing an endpoint are not an overlap."""
    segments = [seg(0, 1, "One"), seg(1, 2, "Two"), seg(2, 3, "Three")]

    assert merge_overlapping_segments(segments) == segments


def test_merge_chain_of_overlaps(seg):
    """Test that a run of overlaps collapses into one segment."""
    segments = [
        seg(0, 2, " A "),
        seg(1, 3, "B"),
        seg(2.5, 4, "C "),
        seg(5, 6, "D"),
    ]

    result = merge_overlapping_segments(segments)

    assert texts(result) == ["A B C", "D"]
    assert (result[0].start, result[0].end) == (0, 4)
    assert (result[1].start, result[1].end) == (5, 6)


def test_merge_contained_segment_keeps_outer_end(seg):
    segments = [seg(0, 10, "Long"), seg(2, 3, "short")]

    result = merge_overlapping_segments(segments)

    assert result[0].end == 10
    assert result[0].text == "Long short"


def test_merge_keeps_first_segment_language_and_source(seg):
    """Test that a merged chain keeps the first segment's lang and source."""
    segments = [
        seg(0, 2, "Bonjour", lang="fr", source=TranscriptSource.MANUAL),
        seg(1, 3, "hello", lang="en", source=TranscriptSource.AUTO_GENERATED),
        seg(2, 4, "hola", lang="es", source=TranscriptSource.SPEECH_RECOGNIZED),
    ]

    result = merge_overlapping_segments(segments)

    assert len(result) == 1
    assert result[0].lang == "fr"
    assert result[0].source == TranscriptSource.MANUAL


def test_merge_single_segment_unchanged(seg):
    segments = [seg(0, 1, "  Alone  ")]
    assert merge_overlapping_segments(segments) == segments


def test_merge_does_not_mutate_input(seg):
    """Test that the input segments are left untouched."""
    first = seg(0, 1.5, "Hello")
    second = seg(1.2, 2.5, "world")
    segments = [first, second]

    merge_overlapping_segments(segments)

    assert segments == [first, second]
    assert first.end == 1.5
    assert first.text == "Hello"


def test_merge_is_idempotent(seg):
    """Test that merging already merged output changes nothing."""
    segments = [
        seg(0, 1.5, "a"),
        seg(1.2, 2.5, "b"),
        seg(2.5, 3, "c"),
        seg(2.9, 4, "d"),
        seg(6, 7, "e"),
    ]

    once = merge_overlapping_segments(segments)

    assert merge_overlapping_segments(once) == once
    assert texts(once) == ["a b", "c d", "e"]


def test_preprocessors_compose(seg):
    """Test the pipeline order: silence markers, then empty text, then merging."""
    segments = [
        seg(0, 2.5, "Hello"),
        seg(1, 3, "[Music]"),
        seg(1.5, 2.5, "   "),
        seg(2.2, 4, "there"),
    ]

    result = merge_overlapping_segments(filter_empty_segments(remove_silence_markers(segments)))

    assert texts(result) == ["Hello there"]


@pytest.mark.parametrize("text, expected", [
    ("[Music]", True),
    ("  [PAUSE] ", True),
    ("-", True),
    ("", True),
    ("[Music] playing", False),
    ("...", False),
])
def test_is_silence_marker(text, expected):
    assert is_silence_marker(text) is expected
