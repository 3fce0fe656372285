"""Tests for query-parameter helpers."""

import pytest
from werkzeug.datastructures import MultiDict

from spotify_gateway.utils.validation import ValidationError, id_list_arg, int_arg, str_arg


class TestIdListArg:
    def test_missing(self):
        assert id_list_arg(MultiDict(), "ids") == []

    def test_comma_separated(self):
        args = MultiDict([("ids", "a, b,,c")])
        assert id_list_arg(args, "ids") == ["a", "b", "c"]

    def test_repeated_keeps_order_and_duplicates(self):
        args = MultiDict([("ids", "b"), ("ids", "a,b")])
        assert id_list_arg(args, "ids") == ["b", "a", "b"]


class TestIntArg:
    def test_default_when_missing_or_blank(self):
        assert int_arg({}, "limit", 10) == 10
        assert int_arg({"limit": "  "}, "limit", 10) == 10

    def test_out_of_range_passes_through(self):
        assert int_arg({"limit": "500"}, "limit", 10) == 500
        assert int_arg({"offset": "-1"}, "offset", 0) == -1

    def test_not_an_integer(self):
        with pytest.raises(ValidationError, match="`offset` must be an integer"):
            int_arg({"offset": "1.5"}, "offset", 0)


class TestStrArg:
    def test_default(self):
        assert str_arg({}, "market", "US") == "US"
        assert str_arg({"market": ""}, "market", "US") == "US"

    def test_value_stripped(self):
        assert str_arg({"market": " ES "}, "market", "US") == "ES"
