"""
Unit tests for building order filters from request parameters.
"""

import pytest

from order_service.services.query_filter import build_order_filter, order_number_filter


class TestBuildOrderFilter:
    """Tests for build_order_filter."""

    def test_empty_params_match_everything(self):
        assert build_order_filter({}) == {}

    def test_all_recognized_params(self):
        """Should AND together every recognized parameter."""
        params = {"buyer_id": "1", "status": "in-cart", "product_user_id": "10"}

        assert build_order_filter(params) == {
            "buyer_id": 1,
            "status": "in-cart",
            "product_user_id": 10,
        }

    def test_ids_are_integers(self):
        result = build_order_filter({"buyer_id": "42"})
        assert result == {"buyer_id": 42}
        assert isinstance(result["buyer_id"], int)

    def test_unparseable_ids_are_omitted(self):
        """Should silently drop empty or non-numeric ids."""
        params = {"buyer_id": "", "product_user_id": "abc", "status": "done"}

        assert build_order_filter(params) == {"status": "done"}

    def test_empty_status_is_omitted(self):
        assert build_order_filter({"status": ""}) == {}

    def test_unknown_params_are_ignored(self):
        params = {"order_number": "abc", "qty": "2", "buyer_id": "3", "$where": "1"}

        assert build_order_filter(params) == {"buyer_id": 3}

    def test_negative_id_is_kept(self):
        """Should accept signed integers."""
        assert build_order_filter({"buyer_id": "-1"}) == {"buyer_id": -1}

    @pytest.mark.parametrize("value", ["1_0", " 7 ", "7\n", "\u0661\u0662", "0x10", "1e3", "+", "3.0"])
    def test_non_decimal_ids_are_omitted(self, value):
        """Should only accept plain ASCII decimal integers."""
        assert build_order_filter({"buyer_id": value, "product_user_id": value}) == {}

    def test_ids_outside_int64_are_omitted(self):
        params = {"buyer_id": "99999999999999999999", "product_user_id": "-9223372036854775809"}

        assert build_order_filter(params) == {}

    def test_int64_bounds_are_kept(self):
        params = {"buyer_id": "9223372036854775807", "product_user_id": "-9223372036854775808"}

        assert build_order_filter(params) == {
            "buyer_id": 2**63 - 1,
            "product_user_id": -(2**63),
        }

    def test_signed_ids(self):
        assert build_order_filter({"buyer_id": "+7"}) == {"buyer_id": 7}


class TestOrderNumberFilter:
    """Tests for order_number_filter."""

    def test_order_number_filter(self):
        assert order_number_filter("aZ3kP9qLm2Xw7Rt") == {"order_number": "aZ3kP9qLm2Xw7Rt"}
