"""Unit tests for positional "{}" message templating."""

import pytest

from argcheck.messages import format_message


class TestFormatMessage:
    def test_single_placeholder(self) -> None:
        assert format_message("msg {}", "x") == "msg x"

    def test_multiple_placeholders_left_to_right(self) -> None:
        assert format_message("{} < {}", 1, 2) == "1 < 2"

    def test_no_args_returns_template(self) -> None:
        assert format_message("value {} here") == "value {} here"

    def test_too_few_args_leaves_placeholders(self) -> None:
        assert format_message("a {} b {}", 1) == "a 1 b {}"

    def test_excess_args_appended(self) -> None:
        assert format_message("a {}", 1, 2, 3) == "a 1 - [2, 3]"

    def test_no_placeholders_all_excess(self) -> None:
        assert format_message("plain", "x") == "plain - [x]"

    def test_none_template(self) -> None:
        assert format_message(None) == ""
        assert format_message(None, "x") == " - [x]"

    def test_none_arg_renders_null(self) -> None:
        assert format_message("got {}", None) == "got null"

    def test_arg_containing_placeholder_not_reexpanded(self) -> None:
        assert format_message("{} and {}", "{}", "b") == "{} and b"

    @pytest.mark.parametrize(
        "template,args,expected",
        [
            ("{}", (0,), "0"),
            ("{}{}", ("a", "b"), "ab"),
            ("x={}", (1.5,), "x=1.5"),
            ("{ }", ("a",), "{ } - [a]"),
        ],
    )
    def test_cases(self, template: str, args: tuple, expected: str) -> None:
        assert format_message(template, *args) == expected
