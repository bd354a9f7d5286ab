"""Tests for entry block parsing and sense splitting."""

import logging

import pytest

from warodai.entry import ParsedEntry, parse_entry, split_meanings
from warodai.header import Header


class TestSplitMeanings:
    """Numbered sense segmentation."""

    @pytest.mark.parametrize("body,expected", [
        (
            "1) приобретать, покупать;\n2) вербовать за награду.",
            "приобретать, покупать;|вербовать за награду.",
        ),
        (
            "компенсация, возмещение;",
            "компенсация, возмещение;",
        ),
        (
            "закладываемая вещь, заклад, залог;\n～がない закладывать нечего.",
            "закладываемая вещь, заклад, залог;\n～がない закладывать нечего.",
        ),
        (
            "1) в городе; на территории города\n市中は火の消えたようです;\n2) открытый (вольный) рынок.",
            "в городе; на территории города\n市中は火の消えたようです;|открытый (вольный) рынок.",
        ),
    ])
    def test_warodai_bodies(self, body, expected):
        assert "|".join(split_meanings(body)) == expected

    def test_numbering_is_not_validated(self):
        assert split_meanings("3) первое\n7) второе") == ["первое", "второе"]

    def test_blank_lines_between_senses(self):
        assert split_meanings("1) первое;\r\n\r\n2) второе.") == ["первое;", "второе."]

    def test_number_inside_line_is_not_a_marker(self):
        assert split_meanings("в 1990) году") == ["в 1990) году"]

    def test_empty_body(self):
        assert split_meanings("") == []
        assert split_meanings("  \n ") == []


class TestParseEntry:
    """Header/body split."""

    def test_round_trip_scenario(self):
        raw = "てんげん【天元】(тэнгэн)〔006-56-61〕\n1) центр вселенной;\n2) центр доски (для игры в го)."
        entry = parse_entry(raw)

        assert entry == ParsedEntry(
            header=Header(kana="てんげん", kanji="天元", transcription="тэнгэн", tag="", id="006-56-61"),
            meanings=("центр вселенной;", "центр доски (для игры в го)."),
        )

    def test_markup_is_kept_until_cleaning(self):
        raw = "てんげん【天元】(тэнгэн)〔006-56-61〕\n1) центр вселенной;\n2) центр доски <i>(для игры в го)</i>."
        entry = parse_entry(raw)
        assert entry.meanings[0] == "центр вселенной;"
        assert entry.meanings[1] == "центр доски <i>(для игры в го)</i>."

    def test_crlf_line_endings(self):
        entry = parse_entry("あ【亜】\r\n1) первое;\r\n2) второе.")
        assert entry.header.kana == "あ"
        assert entry.meanings == ("первое;", "второе.")

    def test_byte_order_mark_is_ignored(self):
        entry = parse_entry("\ufeffてんげん【天元】\nцентр вселенной.")
        assert entry.header.kana == "てんげん"

    def test_missing_body_is_logged_not_raised(self, caplog):
        with caplog.at_level(logging.WARNING, logger="warodai.entry"):
            entry = parse_entry("てんげん【天元】")

        assert entry.header.kanji == "天元"
        assert entry.meanings == ()
        assert "Wrong entry" in caplog.text

    def test_empty_body_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="warodai.entry"):
            entry = parse_entry("てんげん【天元】〔006-56-61〕\n\n")

        assert entry.meanings == ()
        assert "without meanings" in caplog.text
