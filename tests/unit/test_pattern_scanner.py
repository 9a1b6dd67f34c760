from collections.abc import Callable

from clausescan.pdf.pattern_scanner import (
    PatternScanner,
    decode_literal,
    estimate_page_count,
    merge_passes,
    scan_array_show,
    scan_content_streams,
    scan_show_text,
    scan_text_objects,
)


class TestDecodeLiteral:
    def test_decodes_newline_and_tab(self) -> None:
        assert decode_literal(r"a\nb\tc") == "a\nb\tc"

    def test_drops_carriage_return(self) -> None:
        assert decode_literal(r"line\r") == "line"

    def test_decodes_escaped_parentheses_and_backslash(self) -> None:
        assert decode_literal(r"\(a\) \\ b") == "(a) \\ b"

    def test_keeps_octal_unless_requested(self) -> None:
        assert decode_literal(r"\101") == r"\101"
        assert decode_literal(r"\101", octal=True) == "A"

    def test_leaves_unknown_escape(self) -> None:
        assert decode_literal(r"\q") == r"\q"


class TestContentStreamPass:
    def test_keeps_readable_stream(self) -> None:
        text = "stream\nThe Provider shall deliver services\nendstream"
        assert scan_content_streams(text) == ["The Provider shall deliver services"]

    def test_drops_short_stream(self) -> None:
        assert scan_content_streams("stream abc endstream") == []

    def test_drops_stream_without_letter_run(self) -> None:
        text = "stream 12 34 56 78 90 12 34 56 78 90 ab endstream"
        assert scan_content_streams(text) == []

    def test_replaces_non_printable_characters(self) -> None:
        text = "stream\x00\x01Confidential terms of payment\x02endstream"
        assert scan_content_streams(text) == ["Confidential terms of payment"]


class TestShowTextPass:
    def test_joins_literals_with_spaces(self) -> None:
        assert scan_show_text("(Hello) Tj (World wide) Tj") == ["Hello World wide"]

    def test_skips_short_output(self) -> None:
        assert scan_show_text("(Hi) Tj") == []

    def test_skips_literals_without_letters(self) -> None:
        assert scan_show_text("(12.50) Tj (Payment schedule) Tj") == ["Payment schedule"]

    def test_handles_escaped_parentheses(self) -> None:
        text = r"(Tenant \(the Lessee\) agrees) Tj"
        assert scan_show_text(text) == ["Tenant (the Lessee) agrees"]


class TestArrayShowPass:
    def test_concatenates_kerned_fragments(self) -> None:
        assert scan_array_show("[(Agree)-250(ment)] TJ") == ["Agreement"]

    def test_decodes_octal_escapes(self) -> None:
        assert scan_array_show(r"[(Caf\351 terms)] TJ") == ["Café terms"]

    def test_skips_lines_without_letters(self) -> None:
        assert scan_array_show("[(1)20(2)(3)] TJ") == []


class TestTextObjectPass:
    def test_joins_literals_in_block(self) -> None:
        text = "BT /F1 12 Tf (Governing) Tj (law applies) Tj ET"
        assert scan_text_objects(text) == ["Governing law applies"]

    def test_skips_short_block(self) -> None:
        assert scan_text_objects("BT (Hi) Tj ET") == []

    def test_each_block_is_a_line(self) -> None:
        text = "BT (First clause) Tj ET\nBT (Second clause) Tj ET"
        assert scan_text_objects(text) == ["First clause", "Second clause"]


class TestMergePasses:
    def test_removes_duplicate_lines_keeping_first(self) -> None:
        merged = merge_passes([["a line", "dup"], ["dup", "other"]])
        assert merged == "a line\ndup\nother"

    def test_collapses_horizontal_whitespace(self) -> None:
        assert merge_passes([["too    many\tspaces"]]) == "too many spaces"

    def test_empty_passes_give_empty_text(self) -> None:
        assert merge_passes([[], [], [], []]) == ""


class TestEstimatePageCount:
    def test_counts_page_objects(self) -> None:
        text = "/Type /Page\n/Type/Page\n/Type  /Page >>\n/Type /Pages"
        assert estimate_page_count(text) == 3

    def test_defaults_to_one(self) -> None:
        assert estimate_page_count("/Type /Pages /Count 0") == 1
        assert estimate_page_count("") == 1


class TestPatternScanner:
    def test_empty_buffer(self) -> None:
        candidate = PatternScanner().extract(b"")
        assert candidate.text == ""
        assert candidate.page_count == 1

    def test_tiny_buffer(self) -> None:
        candidate = PatternScanner().extract(b"%PDF")
        assert candidate.text == ""
        assert candidate.page_count == 1

    def test_undecodable_bytes_do_not_raise(self) -> None:
        candidate = PatternScanner().extract(bytes(range(256)) * 4)
        assert isinstance(candidate.text, str)
        assert candidate.page_count == 1

    def test_same_literal_from_two_passes_appears_once(
        self, raw_pdf: Callable[..., bytes]
    ) -> None:
        data = raw_pdf(
            "stream\nPreamble text of the contract\nendstream\n"
            "BT (Master Service Agreement) Tj ET"
        )
        candidate = PatternScanner().extract(data)
        assert candidate.text.count("Master Service Agreement") == 1
        assert candidate.text.split("\n") == [
            "Preamble text of the contract",
            "Master Service Agreement",
        ]

    def test_page_count_from_structure(self, raw_pdf: Callable[..., bytes]) -> None:
        candidate = PatternScanner().extract(raw_pdf("", page_count=3))
        assert candidate.page_count == 3

    def test_reads_generated_pdf(self, sample_pdf_bytes: bytes) -> None:
        candidate = PatternScanner().extract(sample_pdf_bytes)
        assert "Hello PDF World" in candidate.text
        assert candidate.page_count == 1

    def test_reads_generated_multi_page_pdf(self, multi_page_pdf_bytes: bytes) -> None:
        candidate = PatternScanner().extract(multi_page_pdf_bytes)
        assert "Page one content" in candidate.text
        assert "Page two content" in candidate.text
        assert candidate.page_count == 2
