"""Unit tests for the plain-transcript parser.

Tests cover: block splitting, paragraph-break handling, empty input,
blocks without a speaker prefix, speaker label edge cases, and logging.
"""

from __future__ import annotations

import logging

import pytest

from dialogue_convert.parser import collapse_paragraph_breaks, parse_plain_transcript, split_blocks

# ---------------------------------------------------------------------------
# Happy Path
# ---------------------------------------------------------------------------


class TestHappyPath:
    """Basic parsing scenarios that follow the expected format."""

    def test_parse_two_blocks(self) -> None:
        """Two speaker blocks yield 2 utterances with 1-based indexes."""
        result = parse_plain_transcript("Alice: Hello there\n\nBob: Hi Alice\n\n")

        assert [(u.speaker, u.text, u.index) for u in result.utterances] == [
            ("Alice", "Hello there", 1),
            ("Bob", "Hi Alice", 2),
        ]
        assert result.speakers == ["Alice", "Bob"]
        assert result.warnings == []

    def test_speakers_list_ordered_by_first_appearance(self) -> None:
        """Speakers list preserves first-appearance order, no duplicates."""
        result = parse_plain_transcript("Bob: 1\n\nAlice: 2\n\nBob: 3")

        assert result.speakers == ["Bob", "Alice"]

    def test_single_newline_is_line_break(self) -> None:
        """A single newline stays inside the utterance."""
        result = parse_plain_transcript("Alice: one\ntwo")

        assert result.utterances[0].text == "one\ntwo"

    def test_single_newline_before_speaker_does_not_split(self) -> None:
        """Only a blank line can separate blocks."""
        result = parse_plain_transcript("Alice: one\nBob: two")

        assert len(result.utterances) == 1
        assert result.utterances[0].text == "one\nBob: two"


# ---------------------------------------------------------------------------
# Paragraph Breaks
# ---------------------------------------------------------------------------


class TestParagraphBreaks:
    """Blank lines not followed by a speaker prefix belong to the utterance."""

    def test_blank_line_without_speaker_is_paragraph_break(self) -> None:
        """An inner blank line becomes newline+tab."""
        result = parse_plain_transcript("Alice: first part\n\nsecond part\n\nBob: reply")

        assert len(result.utterances) == 2
        assert result.utterances[0].text == "first part\n\tsecond part"
        assert result.utterances[1].text == "reply"

    def test_many_blank_lines_collapse_to_one_break(self) -> None:
        """Three or more newlines still produce a single newline+tab."""
        result = parse_plain_transcript("Alice: a\n\n\n\nb")

        assert result.utterances[0].text == "a\n\tb"

    def test_triple_newline_before_speaker(self) -> None:
        """The separator takes the last two newlines; the leftover one is trimmed."""
        result = parse_plain_transcript("Alice: a\n\n\nBob: b")

        assert [u.text for u in result.utterances] == ["a", "b"]

    def test_collapse_paragraph_breaks_trims(self) -> None:
        """collapse_paragraph_breaks trims surrounding whitespace."""
        assert collapse_paragraph_breaks("\n\n  text\n\n\nmore  \n\n") == "text\n\tmore"


# ---------------------------------------------------------------------------
# Empty and Malformed Input
# ---------------------------------------------------------------------------


class TestEmptyAndMalformed:
    """Empty input and blocks without a speaker prefix."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\n", " \t\n "])
    def test_blank_input(self, text: str) -> None:
        """Blank input yields an empty result with no warnings."""
        result = parse_plain_transcript(text)

        assert result.utterances == []
        assert result.warnings == []
        assert split_blocks(text) == []

    def test_leading_text_without_speaker_is_skipped(self) -> None:
        """A preamble block is reported as a warning; later blocks parse."""
        result = parse_plain_transcript("Some preamble\n\nAlice: Hi")

        assert [u.speaker for u in result.utterances] == ["Alice"]
        assert len(result.warnings) == 1
        assert result.warnings[0].index == 1
        assert result.warnings[0].raw == "Some preamble"

    def test_speaker_with_space_is_not_a_prefix(self) -> None:
        """Labels may only contain letters, digits, '_' and '-'."""
        result = parse_plain_transcript("Dr Smith: Hello")

        assert result.utterances == []
        assert len(result.warnings) == 1

    def test_speaker_with_no_text(self) -> None:
        """A bare 'Alice:' yields an empty utterance."""
        result = parse_plain_transcript("Alice:")

        assert result.utterances[0].speaker == "Alice"
        assert result.utterances[0].text == ""


# ---------------------------------------------------------------------------
# Speaker Label Edge Cases
# ---------------------------------------------------------------------------


class TestSpeakerLabels:
    """Edge cases in speaker label formatting."""

    def test_label_characters(self) -> None:
        """Digits, underscores and hyphens are valid label characters."""
        result = parse_plain_transcript("agent_2-b: ok")

        assert result.utterances[0].speaker == "agent_2-b"

    def test_colon_in_utterance(self) -> None:
        """Only the first colon ends the label."""
        result = parse_plain_transcript("Alice: Time is 3:00 PM")

        assert result.utterances[0].text == "Time is 3:00 PM"

    def test_colon_after_paragraph_break_starts_new_block(self) -> None:
        """A label-like word after a blank line starts a new block."""
        result = parse_plain_transcript("Alice: Note the following\n\nWarning: hot")

        assert [u.speaker for u in result.utterances] == ["Alice", "Warning"]


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestLogging:
    """Verify that the parser emits expected log messages."""

    def test_logging_on_skipped_block(self, caplog: pytest.LogCaptureFixture) -> None:
        """A skipped block emits WARNING with its index and text."""
        with caplog.at_level(logging.WARNING, logger="dialogue_convert.parser"):
            parse_plain_transcript("garbled text here")

        warning_records = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warning_records) == 1
        assert "1" in warning_records[0].message
        assert "garbled text here" in warning_records[0].message

    def test_logging_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        """A successful parse emits a DEBUG summary with counts."""
        with caplog.at_level(logging.DEBUG, logger="dialogue_convert.parser"):
            parse_plain_transcript("Alice: a\n\nBob: b\n\nAlice: c")

        assert any(
            "3 utterance(s)" in r.message and "2 speaker(s)" in r.message for r in caplog.records
        )
