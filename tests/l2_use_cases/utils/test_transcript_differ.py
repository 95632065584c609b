"""Tests for transcript diffing helpers."""

from dictaphone.l2_use_cases.utils.transcript_differ import has_shrunk, unconsumed


class TestUnconsumed:
    def test_everything_new(self):
        assert unconsumed('  hello world ', 0) == 'hello world'

    def test_suffix_after_prefix(self):
        assert unconsumed('hello world this is', 11) == 'this is'

    def test_nothing_new(self):
        assert unconsumed('hello world', 11) == ''

    def test_whitespace_only_suffix(self):
        assert unconsumed('hello world   ', 11) == ''

    def test_shrunk_transcript_is_no_new_text(self):
        assert unconsumed('hello', 11) == ''
        assert has_shrunk('hello', 11)

    def test_negative_marker_clamped(self):
        assert unconsumed('abc', -5) == 'abc'
