"""
Tests for the SubRip renderer.
"""

from transcript_pro.core.formatters import format_as_srt


def test_empty_input():
    """Test that no segments give an empty string."""
    assert format_as_srt([]) == ""


def test_format_as_srt(seg):
    """Test the exact SRT layout for two segments."""
    segments = [seg(0, 3.5, "Hello world"), seg(3.5, 7.0, "This is a test")]

    expected = (
        "1\n"
        "00:00:00,000 --> 00:00:03,500\n"
        "Hello world\n"
        "\n"
        "2\n"
        "00:00:03,500 --> 00:00:07,000\n"
        "This is a test\n"
    )
    assert format_as_srt(segments) == expected


def test_single_trailing_newline(sample_segments):
    output = format_as_srt(sample_segments)
    assert output.endswith("After the pause\n")
    assert not output.endswith("\n\n")


def test_sequence_numbers(seg):
    segments = [seg(i, i + 1, f"Line {i}") for i in range(12)]

    blocks = format_as_srt(segments).strip().split("\n\n")

    assert [block.split("\n")[0] for block in blocks] == [str(n) for n in range(1, 13)]


def test_end_before_start_is_clamped(seg):
    """Test that an end time before the start renders as the start time."""
    output = format_as_srt([seg(5, 2, "Backwards")])
    assert "00:00:05,000 --> 00:00:05,000" in output


def test_html_entities_are_decoded(seg):
    output = format_as_srt([seg(0, 1, "Tom &amp; Jerry &lt;3 &quot;hi&quot; it&apos;s &gt;")])
    assert "Tom & Jerry <3 \"hi\" it's >" in output


def test_whitespace_normalization(seg):
    """Test trimming, space/tab collapsing and blank line limiting."""
    output = format_as_srt([seg(0, 1, "  Too   many\t\tspaces\n\n\n\nand lines  ")])
    assert output == "1\n00:00:00,000 --> 00:00:01,000\nToo many spaces\n\nand lines\n"


def test_multiline_cue_preserved(seg):
    output = format_as_srt([seg(0, 1, "First line\nSecond line")])
    assert "First line\nSecond line\n" in output


def test_long_video_timestamps(seg):
    output = format_as_srt([seg(359999, 360000.5, "Late")])
    assert "99:59:59,000 --> 100:00:00,500" in output
