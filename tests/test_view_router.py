import pytest

from models import AppView
from view_router import ViewRouter, classify


class TestClassify:
    @pytest.mark.parametrize("text", ["帮我分析下个月的预算分配方案", "这点钱怎么花"])
    def test_budget_keywords(self, text):
        assert classify(text) == AppView.BUDGET

    @pytest.mark.parametrize("text", ["设计一个新人券", "有什么优惠活动"])
    def test_coupon_keywords(self, text):
        assert classify(text) == AppView.COUPONS

    def test_budget_takes_precedence_over_coupons(self):
        assert classify("帮我分析预算和优惠券") == AppView.BUDGET

    def test_no_keyword(self):
        assert classify("raise ROI next quarter") is None
        assert classify("") is None

    def test_matching_is_literal(self):
        assert classify("budget plan") is None


class TestViewRouter:
    def test_defaults_to_dashboard(self):
        assert ViewRouter().active_view == AppView.DASHBOARD

    def test_set_view_accepts_enum_and_value(self):
        router = ViewRouter()
        assert router.set_view(AppView.ANALYSIS) == AppView.ANALYSIS
        assert router.set_view("COUPONS") == AppView.COUPONS
        assert router.active_view == AppView.COUPONS

    def test_set_view_rejects_unknown(self):
        router = ViewRouter()
        with pytest.raises(ValueError):
            router.set_view("SETTINGS")
        assert router.active_view == AppView.DASHBOARD

    def test_route_switches_on_match(self):
        router = ViewRouter()
        assert router.route("优惠券怎么发") == AppView.COUPONS

    def test_route_keeps_view_without_match(self):
        router = ViewRouter(AppView.ANALYSIS)
        assert router.route("hello") == AppView.ANALYSIS
