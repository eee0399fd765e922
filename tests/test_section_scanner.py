"""Tests for the two-phase section scanner."""

from scrape_docs.extractors import LineCursor, SectionScanner, scan_sections


def scan(text):
    return scan_sections(LineCursor(text.split("\n")))


def test_parameter_and_return_sections():
    sections = scan("### -param lpFileName\nThe file name.\n### -returns\nA handle.")

    assert sections.parameters == {"lpFileName": "The file name."}
    assert sections.return_value == "A handle."


def test_return_header_before_parameters_is_captured_and_ends_scan():
    sections = scan("## -returns\nEarly text.\n### -param x\nLater text.")

    assert sections.return_value == "Early text."
    assert sections.parameters == {}


def test_sections_after_return_block_are_ignored():
    sections = scan("### -param x\nP.\n## -returns\nR.\n### -field y\nF.")

    assert sections.parameters == {"x": "P."}
    assert sections.return_value == "R."
    assert sections.fields == {}


def test_duplicate_identifier_keeps_first_occurrence():
    sections = scan("### -param x\nfirst\n### -param x\nsecond")

    assert sections.parameters == {"x": "first"}


def test_parameters_and_fields_are_separate_namespaces():
    sections = scan("### -param cbSize\nparam text\n### -field cbSize\nfield text")

    assert sections.parameters == {"cbSize": "param text"}
    assert sections.fields == {"cbSize": "field text"}


def test_header_without_body_stores_empty_string():
    sections = scan("### -param a\n### -param b\ntext")

    assert sections.parameters == {"a": "", "b": "text"}


def test_document_without_sections():
    sections = scan("## -description\nJust prose.\n\n## -remarks\nMore prose.")

    assert sections.parameters == {}
    assert sections.fields == {}
    assert sections.return_value is None


def test_empty_body():
    sections = scan_sections(LineCursor([]))

    assert sections.parameters == {}
    assert sections.return_value is None


def test_section_text_is_trimmed_and_keeps_inner_lines():
    sections = scan("### -param hFile [in]\n\n  First line.\nSecond line.  \n\n## -remarks\nignored")

    assert sections.parameters == {"hFile": "First line.\nSecond line."}


def test_other_headings_end_a_section_and_are_skipped():
    sections = scan(
        "## -parameters\n"
        "### -param a\nA text.\n"
        "## -remarks\nNot a parameter.\n"
        "### -param b\nB text.\n"
    )

    assert sections.parameters == {"a": "A text.", "b": "B text."}


def test_return_section_after_unrelated_headings():
    sections = scan("## -description\nfoo\n## -syntax\nbar\n## -returns\n\nR.\n\n## -remarks\nbaz")

    assert sections.return_value == "R."


def test_only_first_return_section_is_used():
    sections = scan("## -returns\nA\n## -returns\nB")

    assert sections.return_value == "A"


def test_return_section_without_body():
    sections = scan("### -param a\nA\n## -returns\n## -remarks\ntext")

    assert sections.return_value == ""


def test_field_sections():
    sections = scan("## -struct-fields\n### -field cbSize\nSize of the structure.\n### -field dwTime\nTick count.")

    assert sections.fields == {"cbSize": "Size of the structure.", "dwTime": "Tick count."}


def test_heading_with_extra_hashes_still_ends_a_section():
    sections = scan("### -param a\nA\n#### Example\ncode")

    assert sections.parameters == {"a": "A"}


def test_scanner_continues_from_cursor_position():
    cursor = LineCursor(["---", "### -param skipped", "---", "### -param kept", "text"])
    cursor.advance()
    cursor.advance()
    cursor.advance()

    sections = SectionScanner(cursor).scan()

    assert sections.parameters == {"kept": "text"}
    assert cursor.exhausted


def test_level_three_returns_heading_inside_parameters_is_the_return_section():
    sections = scan("### -param a\nA\n### -returns\nsub\n## -returns\nreal")

    assert sections.parameters == {"a": "A"}
    assert sections.return_value == "sub"
