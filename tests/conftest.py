"""
Configuration for pytest tests.
"""

import os
import pytest

from transcript_pro.models.schemas import TranscriptSegment, TranscriptSource


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""
    os.environ["GROQ_API_KEY"] = os.environ.get("GROQ_API_KEY", "test_api_key")
    os.environ["ENVIRONMENT"] = "development"
    yield


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"


@pytest.fixture(scope="session")
def test_video_id():
    """Return the ID of the test video."""
    return "V3TUEeB0kW0"


@pytest.fixture
def seg():
    """Factory fixture building transcript segments."""
    def make(start, end, text, lang="en", source=TranscriptSource.WEB_EXTRACTED):
        return TranscriptSegment(start=start, end=end, text=text, lang=lang, source=source)
    return make


@pytest.fixture
def sample_segments(seg):
    """Three consecutive segments with a long pause before the last one."""
    return [
        seg(0.0, 3.5, "Hello world"),
        seg(3.5, 7.0, "This is a test"),
        seg(16.0, 18.25, "After the pause"),
    ]
