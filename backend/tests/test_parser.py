import pytest

from lifelex import GrammarError, ParseError, StructuralError, lookup, parse_lexicon
from lifelex.lexicon import Cell
from lifelex.parsing import iter_lines, parse_file
from lifelex.config import DEFAULT_SOURCE_PATH


GLIDER = ":glider: The smallest spaceship.\n\t***\n\t*..\n\t.*."


def test_term_count_matches_headers(sample_text, sample_lexicon):
    body = sample_text.split("-" * 77)[1]
    headers = [line for line in body.splitlines() if line.startswith(":")]
    assert len(sample_lexicon) == len(headers) == 9


def test_header_only_term(make_text):
    lexicon = parse_lexicon(make_text(":X: See {Y}."))
    term = lookup(lexicon, "X")
    assert term is not None
    assert term.description == "See {Y}."
    assert term.cells == ()
    assert term.width == 0
    assert term.height == 0
    assert term.tags == ()


def test_glider_cells(make_text):
    term = parse_lexicon(make_text(GLIDER)).get_term("glider")
    assert term.width == 3
    assert term.height == 3
    assert len(term.cells) == 5
    assert term.cells == (Cell(0, 0), Cell(1, 0), Cell(2, 0), Cell(0, 1), Cell(1, 2))
    assert set(term.cells) == {Cell(0, 0), Cell(1, 0), Cell(2, 0), Cell(0, 1), Cell(1, 2)}


def test_tags_in_source_order(make_text):
    term = parse_lexicon(make_text(":pufferfish: (c/2, p12) A puffer.")).get_term("pufferfish")
    assert term.tags == ("c/2", "p12")


def test_multiline_description(make_text):
    entry = ":101: (p5) Found by Achim Flammenkamp.  \n   The name was\n      suggested by Bill Gosper.   "
    term = parse_lexicon(make_text(entry)).get_term("101")
    assert term.description == "Found by Achim Flammenkamp. The name was suggested by Bill Gosper."


def test_inner_spacing_of_fragments_is_preserved(make_text):
    entry = ":a: First.  Second\n   third."
    assert parse_lexicon(make_text(entry)).get_term("a").description == "First.  Second third."


def test_grid_closes_when_description_resumes(make_text):
    entry = ":odd: Before.\n\t**\n\t**\n   Between rows.\n\t**\n\t**"
    term = parse_lexicon(make_text(entry)).get_term("odd")
    assert term.height == 2
    assert term.cells == (Cell(0, 0), Cell(1, 0), Cell(0, 1), Cell(1, 1))
    assert term.description == "Before. Between rows."


def test_description_before_grid_keeps_grid_open(make_text):
    entry = ":blinker: (p2) A small\n   oscillator.\n\t***"
    term = parse_lexicon(make_text(entry)).get_term("blinker")
    assert term.height == 1
    assert term.width == 3
    assert term.description == "A small oscillator."


def test_ragged_grid_uses_first_row_width(make_text):
    entry = ":ragged: Uneven rows.\n\t*.\n\t...*"
    term = parse_lexicon(make_text(entry)).get_term("ragged")
    assert term.width == 2
    assert term.height == 2
    assert Cell(3, 1) in term.cells


def test_duplicate_names_lookup_first(make_text):
    lexicon = parse_lexicon(make_text(":dup: First.", ":dup: Second."))
    assert len(lexicon) == 2
    assert lookup(lexicon, "dup").description == "First."
    assert lookup(lexicon, "DUP") is None
    assert lookup(lexicon, "missing") is None


def test_unterminated_term_raises_structural_error(make_text):
    text = "Intro\n" + "-" * 10 + "\n:glider: Spaceship.\n\t***\n\t*..\n\t.*."
    with pytest.raises(StructuralError) as excinfo:
        parse_lexicon(text)
    assert excinfo.value.line_number == 3
    assert "unexpected end of input" in str(excinfo.value)


def test_missing_start_delimiter():
    with pytest.raises(StructuralError, match="no lexicon start"):
        parse_lexicon(":X: See {Y}.\n\n")


def test_missing_end_delimiter():
    text = "-" * 10 + "\n\n:X: See {Y}.\n\n"
    with pytest.raises(StructuralError):
        parse_lexicon(text)


def test_malformed_header_aborts_whole_parse(make_text):
    text = make_text(":good: Fine.", GLIDER, ":broken header without marker")
    with pytest.raises(GrammarError) as excinfo:
        parse_lexicon(text)
    assert isinstance(excinfo.value, ParseError)
    assert excinfo.value.line_number is not None


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_lexicon("")


def test_text_outside_delimiters_is_ignored(make_text):
    text = make_text(":X: See {Y}.", intro=":not a header")
    text += ":after: ignored.\n"
    lexicon = parse_lexicon(text)
    assert [term.name for term in lexicon] == ["X"]


def test_stray_lines_between_terms_are_skipped(make_text):
    text = make_text(":a: One.", "stray line", ":b: Two.")
    assert [term.name for term in parse_lexicon(text)] == ["a", "b"]


def test_crlf_line_endings(make_text):
    text = make_text(GLIDER).replace("\n", "\r\n")
    term = parse_lexicon(text).get_term("glider")
    assert term.width == 3
    assert term.description == "The smallest spaceship."


def test_iter_lines_drops_final_terminator():
    assert list(iter_lines("a\r\nb\n")) == [(1, "a"), (2, "b")]
    assert list(iter_lines("a\n\n")) == [(1, "a"), (2, "")]


def test_parse_is_idempotent(sample_text):
    assert parse_lexicon(sample_text) == parse_lexicon(sample_text)


def test_sample_file_terms():
    lexicon = parse_file(DEFAULT_SOURCE_PATH)

    demonoid = lexicon.get_term("0hd Demonoid")
    assert demonoid.description == "See {Demonoid}."
    assert demonoid.cells == ()

    gun = lexicon.get_term("Gosper glider gun")
    assert len(gun.cells) == 36
    assert gun.height == 9
    assert gun.width == 36
    assert gun.tags == ()

    mickey = lexicon.get_term("Mickey Mouse")
    assert mickey.description == "The following {still life}, named by Mark Niemiec:"
    assert mickey.tags == ("p1",)

    pufferfish = lexicon.get_term("pufferfish")
    assert pufferfish.tags == ("c/2", "p12")
    assert pufferfish.height == 0

    assert lexicon.get_term("101").height == 12
    assert lexicon.get_term("glider").tags == ("c/4 diagonally", "p4")


def test_malformed_header_inside_term_aborts_parse(make_text):
    text = make_text(":a: One.\n:broken\n   more prose.")
    with pytest.raises(GrammarError) as excinfo:
        parse_lexicon(text)
    assert excinfo.value.line_number == 6
    assert "':broken'" in str(excinfo.value)


def test_parse_file_and_parse_lexicon_split_lines_alike(tmp_path, make_text):
    text = make_text(":a: One.\rtwo", ":b: Two.\r\n   three.")
    path = tmp_path / "lexicon.txt"
    path.write_bytes(text.encode("utf-8"))
    from_file = parse_file(path)
    assert from_file == parse_lexicon(text)
    assert from_file.get_term("a").description == "One.\rtwo"
    assert from_file.get_term("b").description == "Two. three."
