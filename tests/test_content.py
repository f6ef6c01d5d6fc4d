"""
Tests for strkit.content.
Run with: pytest tests/test_content.py -v
"""
import pytest

from strkit.content import ReadingTime, excerpt, reading_time, word_count


class TestExcerpt:
    def test_strips_tags_then_truncates(self):
        assert excerpt("<p>Hello <em>world</em></p>", 8) == "Hello..."

    def test_short_content_unchanged(self):
        assert excerpt("<p>Hi</p>") == "Hi"

    def test_keep_tags(self):
        assert excerpt("<b>bold</b>", 150, strip_tags=False) == "<b>bold</b>"

    def test_default_length(self):
        result = excerpt("word " * 100)
        assert len(result) == 150
        assert result.endswith("...")


class TestWordCount:
    def test_plain_text(self):
        assert word_count("The quick brown fox") == 4

    def test_ignores_markup(self):
        assert word_count("<p>Hello <strong>world</strong></p>") == 2

    def test_hyphens_and_apostrophes_join_words(self):
        assert word_count("It's a well-known fact.") == 4

    def test_punctuation_is_not_a_word(self):
        assert word_count("Wait - what ?!") == 2

    def test_empty(self):
        assert word_count("") == 0
        assert word_count("<br/>") == 0


class TestReadingTime:
    def test_two_hundred_words_is_one_minute(self):
        assert reading_time("word " * 200, 200) == ReadingTime(minutes=1, seconds=0)

    def test_fractional_minutes(self):
        assert reading_time("word " * 300) == ReadingTime(minutes=1, seconds=30)

    def test_as_dict(self):
        assert reading_time("word " * 100).as_dict() == {"minutes": 0, "seconds": 30}

    def test_seconds_rounded(self):
        # 3 words at 120 wpm is 1.5 seconds
        assert reading_time("word word word", 120) == ReadingTime(minutes=0, seconds=2)

    def test_rollover_into_next_minute(self):
        # 199 words at 200 wpm is 59.7 seconds
        assert reading_time("word " * 199, 200) == ReadingTime(minutes=1, seconds=0)

    def test_empty_content(self):
        assert reading_time("") == ReadingTime(minutes=0, seconds=0)

    @pytest.mark.parametrize("wpm", [0, -100])
    def test_non_positive_rate_raises(self, wpm):
        with pytest.raises(ValueError):
            reading_time("some words", wpm)
