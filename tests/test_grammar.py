import pickle

import pytest

from hostexpr.errors import (
    HostlistSyntaxError,
    NumericOverflowError,
    PaddingError,
    ParseError,
)
from hostexpr.grammar import Parser, parse
from hostexpr.numbers import NumberToken
from hostexpr.structs import Ascending, Descending, Disjoint, Literal, RangeGroup


def group(text):
    return Parser(text).range_group()


def n(value, padding=0):
    return NumberToken(padding, value)


@pytest.mark.parametrize(
    "text,fragment",
    [
        ("001-003", Ascending(2, True, 1, 3)),
        ("001 -  003", Ascending(2, True, 1, 3)),
        ("1-100", Ascending(0, True, 1, 100)),
        ("100-0", Descending(0, True, 0, 100)),
        ("01-10", Ascending(1, False, 1, 10)),
        ("10-01", Descending(1, False, 1, 10)),
        ("5-5", Ascending(0, True, 5, 5)),
    ],
)
def test_range_form(text, fragment):
    assert Parser(text).range_form() == fragment


def test_range_form_rewinds_on_single_number():
    parser = Parser("12,3")

    assert parser.range_form() is None
    assert parser.pos == 0


def test_range_form_rejects_larger_end_padding():
    with pytest.raises(PaddingError) as err:
        Parser("9-0011").range_form()

    assert err.value.message == "inconsistent end padding"


def test_group_disjoint():
    assert group("[1,2,3,4,5]") == RangeGroup((Disjoint((n(1), n(2), n(3), n(4), n(5))),))


def test_group_mixed():
    assert group("[1,2,3-5]") == RangeGroup(
        (Disjoint((n(1), n(2))), Ascending(0, True, 3, 5))
    )
    assert group("[1,2,3-5,6,7,8-10]") == RangeGroup(
        (
            Disjoint((n(1), n(2))),
            Ascending(0, True, 3, 5),
            Disjoint((n(6), n(7))),
            Ascending(0, True, 8, 10),
        )
    )


def test_group_spaces():
    assert group("[ 1 , 02 - 03 ]") == RangeGroup(
        (Disjoint((n(1),)), Ascending(1, True, 2, 3))
    )


def test_parse_literal():
    assert parse("oss1.local") == [(Literal("oss1.local"),)]


def test_parse_range():
    assert parse("oss[1,2].local") == [
        (
            Literal("oss"),
            RangeGroup((Disjoint((n(1), n(2))),)),
            Literal(".local"),
        )
    ]


def test_parse_literal_dashes():
    assert parse("hostname[0-3]-eth0.iml.com") == [
        (
            Literal("hostname"),
            RangeGroup((Ascending(0, True, 0, 3),)),
            Literal("-eth0.iml.com"),
        )
    ]


def test_parse_adjacent_groups():
    entry, = parse("h[1,2][3,4]")

    assert [type(part) for part in entry] == [Literal, RangeGroup, RangeGroup]


@pytest.mark.parametrize(
    "text",
    [
        "hostname[2,6,7].iml.com,hostname[10,11-12,2-3,5].iml.com,hostname[15-17].iml.com",
        "hostname[2,6,7].iml.com, hostname[10,11-12,2-3,5].iml.com, hostname[15-17].iml.com",
        "hostname[2,6,7].iml.com ,hostname[10,11-12,2-3,5].iml.com  ,  hostname[15-17].iml.com",
    ],
)
def test_parse_hostlists(text):
    entries = parse(text)

    assert len(entries) == 3
    assert entries[1] == (
        Literal("hostname"),
        RangeGroup(
            (
                Disjoint((n(10),)),
                Ascending(0, True, 11, 12),
                Ascending(0, True, 2, 3),
                Disjoint((n(5),)),
            )
        ),
        Literal(".iml.com"),
    )


def test_parse_empty_expression():
    assert parse("") == [(Literal(""),)]


@pytest.mark.parametrize(
    "text,error,offset",
    [
        # Invalid character in range (snowman)
        ("test[00☃-002].localdomain", HostlistSyntaxError, 7),
        # No separation between commas
        ("hostname[1,,2].iml.com", HostlistSyntaxError, 11),
        # No separation between dashes
        ("hostname[1--2].iml.com", HostlistSyntaxError, 10),
        # No separation between dash and comma
        ("hostname[1-,2].iml.com", HostlistSyntaxError, 10),
        # No separation between comma and dash
        ("hostname[1,-2].iml.com", HostlistSyntaxError, 11),
        # Missing closing bracket
        ("hostname[1", HostlistSyntaxError, 10),
        # Ending an expression with a comma
        ("hostname[1],", HostlistSyntaxError, 12),
        # Closing bracket before opening bracket
        ("hostname]00[asdf", HostlistSyntaxError, 8),
        ("a,,b", HostlistSyntaxError, 2),
        ("   ", HostlistSyntaxError, 3),
        ("n[]", HostlistSyntaxError, 2),
        ("node_1", HostlistSyntaxError, 4),
        ("hostname[9-0011]", PaddingError, 9),
        ("hostname[01-009]", PaddingError, 9),
        ("n[99999999999999999999]", NumericOverflowError, 2),
    ],
)
def test_parse_errors(text, error, offset):
    with pytest.raises(error) as err:
        parse(text)

    assert isinstance(err.value, ParseError)
    assert err.value.offset == offset
    assert err.value.text == text


def test_parse_error_messages():
    with pytest.raises(ParseError) as err:
        parse("hostname[1],")
    assert err.value.message == "no host found"
    assert err.value.found is None

    with pytest.raises(ParseError) as err:
        parse("hostname[1;2]")
    assert err.value.message == "expected ',' or ']'"
    assert err.value.found == ";"
    assert str(err.value) == "expected ',' or ']' at offset 10 (found ';')"


@pytest.mark.parametrize("text", ["hostname[1;2]", "hostname[01-009]", "n[99999999999999999999]"])
def test_parse_error_pickles(text):
    with pytest.raises(ParseError) as err:
        parse(text)

    clone = pickle.loads(pickle.dumps(err.value))

    assert type(clone) is type(err.value)
    assert clone.message == err.value.message
    assert clone.text == text
    assert clone.offset == err.value.offset
    assert str(clone) == str(err.value)
