"""End-to-end translation tests."""

import logging

import pytest

from kosc import ParseError, parse, render, translate
from kosc.core.config import Settings


class TestStatementTranslation:
    """Test the documented source → target pairs."""

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("var x;", "DECLARE x TO 0."),
            ("var x = 5;", "DECLARE x TO 5."),
            ("x = 5;", "SET x to 5."),
            ("x = 1+2*3;", "SET x to 1+2*3."),
            ("x = a == 5;", "SET x to a=5."),
            ("x = a != 5;", "SET x to a<>5."),
            ("x = a >= 5;", "SET x to a>=5."),
            ("x = !ready;", "SET x to not ready."),
            ("x = a && b;", "SET x to a and b."),
            ("x = a || b;", "SET x to a or b."),
            ("assign steering = heading(90, 45);", "LOCK steering TO heading(90,45)."),
            ('print("Apoapsis: ", ship.orbit.apoapsis);', 'print "Apoapsis: "+ship:orbit:apoapsis.'),
        ],
    )
    def test_single_statement(self, source, expected):
        assert translate(source) == expected

    def test_while_loop(self):
        assert translate("while x<10 { x = x+1; }") == "UNTIL not (x<10) {\nSET x to x+1.\n}"

    def test_for_loop(self):
        assert translate("for var i = 0; i<10; i = i+1 { print(i); }") == (
            "FROM {DECLARE i TO 0.} UNTIL not(i<10) STEP {SET i to i+1.} DO {\nprint i.\n}"
        )


class TestProgramTranslation:
    """Test multi-statement programs."""

    def test_program(self):
        source = (
            "var i = 0;\n"
            "while i < 3 {\n"
            '    print("i=", i);\n'
            "    i = i + 1;\n"
            "}\n"
            "assign throttle = 1.0;\n"
        )
        assert translate(source) == (
            "DECLARE i TO 0.\n"
            "UNTIL not (i<3) {\n"
            'print "i="+i.\n'
            "SET i to i+1.\n"
            "}\n"
            "LOCK throttle TO 1.0."
        )

    def test_nested_for_in_while(self):
        source = (
            "while running == 1 {\n"
            "  for var n = 0; n < 3 && ok; n = n + 1 {\n"
            "    print(n);\n"
            "  }\n"
            "}"
        )
        assert translate(source) == (
            "UNTIL not (running=1) {\n"
            "FROM {DECLARE n TO 0.} UNTIL not(n<3 and ok) STEP {SET n to n+1.} DO {\n"
            "print n.\n"
            "}\n"
            "}"
        )

    def test_order_is_preserved(self):
        lines = [f"var v{n} = {n};" for n in range(20)]
        output = translate("\n".join(lines))
        assert output.split("\n") == [f"DECLARE v{n} TO {n}." for n in range(20)]

    def test_empty_input(self):
        assert translate("") == ""


class TestFailure:
    """Translation is all-or-nothing."""

    def test_one_bad_statement_fails_everything(self):
        with pytest.raises(ParseError):
            translate("var a = 1;\nvar b = 2\nvar c = 3;")

    def test_unmatched_brace(self):
        with pytest.raises(ParseError):
            translate("while x<1 {\n x = 1;\n")

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="kosc.translator"):
            with pytest.raises(ParseError):
                translate("x = ")

        assert any("Parse failed" in record.getMessage() for record in caplog.records)

    def test_failure_log_carries_position(self, caplog):
        with caplog.at_level(logging.INFO, logger="kosc.translator"):
            with pytest.raises(ParseError):
                translate("x = 5")

        record = caplog.records[-1]
        assert (record.line, record.column, record.offset) == (1, 6, 5)
        assert record.source_length == 5
        assert "';'" in record.expected

    def test_deep_nesting_is_a_parse_error(self):
        depth = 2000
        with pytest.raises(ParseError) as exc_info:
            translate("x = " + "(" * depth + "1" + ")" * depth + ";")
        assert "shallower nesting" in str(exc_info.value)

    def test_moderate_nesting_translates(self):
        nested = "(" * 30 + "1" + ")" * 30
        assert translate(f"x = {nested};") == f"SET x to {nested}."

    def test_context_width_comes_from_settings(self):
        with pytest.raises(ParseError) as exc_info:
            translate("@" * 50, Settings(CONTEXT_WIDTH=5))
        assert exc_info.value.context == "@" * 5


class TestParseAndRender:
    """Test the two halves of the facade separately."""

    def test_parse_then_render(self):
        program = parse("var a; a = 2;")
        assert len(program.statements) == 2
        assert render(program) == "DECLARE a TO 0.\nSET a to 2."

    def test_render_is_repeatable(self):
        program = parse("for var i = 0; i<2; i = i+1 { x = x*2; }")
        assert render(program) == render(program)
