import logging
from typing import Optional, Union

from models import AppView

logger = logging.getLogger(__name__)

BUDGET_KEYWORDS = ("预算", "钱")
COUPON_KEYWORDS = ("券", "优惠")

# Checked in order; the first rule with a matching keyword wins.
ROUTING_RULES = (
    (AppView.BUDGET, BUDGET_KEYWORDS),
    (AppView.COUPONS, COUPON_KEYWORDS),
)


def classify(text: str) -> Optional[AppView]:
    """
    Picks the view a submitted prompt is about, by literal substring match.

    Budget keywords take precedence over coupon keywords. Returns None when
    no keyword is present.
    """
    for view, keywords in ROUTING_RULES:
        if any(keyword in text for keyword in keywords):
            return view
    return None


class ViewRouter:
    def __init__(self, active_view: AppView = AppView.DASHBOARD):
        self.active_view = active_view

    def set_view(self, view: Union[AppView, str]) -> AppView:
        """Explicit navigation. Raises ValueError for an unknown view name."""
        self.active_view = AppView(view)
        logger.debug(f"Active view set to {self.active_view.value}")
        return self.active_view

    def route(self, text: str) -> AppView:
        view = classify(text)
        if view is not None:
            logger.info(f"Routing to {view.value} based on prompt keywords.")
            self.active_view = view
        return self.active_view
