"""
Tests for the plain text renderer.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from transcript_pro.core.formatters import format_as_txt
from transcript_pro.models.schemas import TXTFormatOptions, TranscriptSource

EXPORTED_AT = datetime(2025, 10, 17, 14, 30, 0, tzinfo=timezone.utc)


def test_empty_input():
    """Test that no segments give an empty string in every mode."""
    assert format_as_txt([]) == ""
    assert format_as_txt([], TXTFormatOptions(mode="paragraph", include_metadata=True)) == ""


def test_plain_mode_is_default(seg):
    segments = [seg(0, 1, "Hello"), seg(1, 2, " world "), seg(2, 3, "test")]
    assert format_as_txt(segments) == "Hello world test\n"


def test_plain_mode_ignores_metadata(seg):
    """Test that the metadata header never applies to plain mode."""
    options = TXTFormatOptions(mode="plain", include_metadata=True)
    assert format_as_txt([seg(0, 1, "Test")], options) == "Test\n"


def test_plain_mode_special_characters(seg):
    segments = [seg(0, 2, "Special: @#$%"), seg(2, 4, "He said \"hello\" and 'goodbye' 你好 🎉")]
    assert format_as_txt(segments) == "Special: @#$% He said \"hello\" and 'goodbye' 你好 🎉\n"


def test_timestamped_mode(seg):
    segments = [seg(0, 1, "Hello"), seg(1, 2, "world"), seg(3661, 3665, "After one hour")]

    output = format_as_txt(segments, TXTFormatOptions(mode="timestamped"))

    assert output == "[00:00:00] Hello\n[00:00:01] world\n[01:01:01] After one hour\n"


def test_timestamped_mode_with_millis(seg):
    options = TXTFormatOptions(mode="timestamped", timestamp_format="hms-millis")
    assert format_as_txt([seg(125.5, 130, "Test")], options) == "[00:02:05.500] Test\n"


def test_paragraph_mode_splits_on_gap(seg):
    """Test that a gap larger than the threshold starts a new paragraph."""
    segments = [
        seg(0, 1, "Para1a"),
        seg(1, 2, "Para1b"),
        seg(11, 12, "Para2a"),
        seg(12, 13, "Para2b"),
    ]

    output = format_as_txt(segments, TXTFormatOptions(mode="paragraph", paragraph_gap=2))
    paragraphs = output.rstrip("\n").split("\n\n")

    assert len(paragraphs) == 2
    assert paragraphs == ["Para1a Para1b", "Para2a Para2b"]
    assert output.endswith("Para2b\n")


def test_paragraph_gap_threshold_is_inclusive(seg):
    """Test that a gap exactly equal to the threshold splits."""
    segments = [seg(0, 1, "First"), seg(3, 4, "Second"), seg(5.5, 6, "Third")]

    output = format_as_txt(segments, TXTFormatOptions(mode="paragraph"))

    assert output == "First\n\nSecond Third\n"


def test_paragraph_custom_gap(seg):
    segments = [seg(0, 1, "First"), seg(2, 3, "Second"), seg(5, 6, "Third")]

    output = format_as_txt(segments, TXTFormatOptions(mode="paragraph", paragraph_gap=1.5))

    assert output == "First Second\n\nThird\n"


def test_metadata_header(seg):
    """Test the exact metadata header layout."""
    segments = [
        seg(0, 1, "Hello", source=TranscriptSource.MANUAL),
        seg(1, 125.5, "world", source=TranscriptSource.MANUAL),
    ]
    options = TXTFormatOptions(mode="timestamped", include_metadata=True)

    output = format_as_txt(segments, options, exported_at=EXPORTED_AT)

    assert output == (
        "=== Transcript Export ===\n"
        "Exported: 2025-10-17 14:30:00\n"
        "Language: en\n"
        "Source: manual\n"
        "Segments: 2\n"
        "Duration: 00:02:05\n"
        "========================\n"
        "\n"
        "[00:00:00] Hello\n"
        "[00:00:01] world\n"
    )


def test_metadata_flag_off(seg):
    output = format_as_txt([seg(0, 1, "Test")], TXTFormatOptions(mode="paragraph"))
    assert "=== Transcript Export ===" not in output


def test_metadata_header_uses_current_time(seg):
    options = TXTFormatOptions(mode="paragraph", include_metadata=True)
    assert "Exported: " in format_as_txt([seg(0, 1, "Test")], options)


def test_large_input(seg):
    segments = [seg(i, i + 1, f"word{i + 1}") for i in range(100)]

    plain = format_as_txt(segments)
    timestamped = format_as_txt(segments[:50], TXTFormatOptions(mode="timestamped"))

    assert plain.startswith("word1 word2")
    assert plain.endswith("word99 word100\n")
    assert "[00:00:49] word50" in timestamped


def test_invalid_options_rejected():
    """Test that options are a closed set of known fields and values."""
    with pytest.raises(ValidationError):
        TXTFormatOptions(mode="karaoke")
    with pytest.raises(ValidationError):
        TXTFormatOptions(paragraph_gap=-1)
    with pytest.raises(ValidationError):
        TXTFormatOptions.model_validate({"mode": "plain", "fontSize": 12})
