from enum import Enum
from typing import Optional, List, Literal

from pydantic import BaseModel, ConfigDict, Field


class AppView(str, Enum):
    DASHBOARD = "DASHBOARD"
    BUDGET = "BUDGET"
    COUPONS = "COUPONS"
    ANALYSIS = "ANALYSIS"


class _WireModel(BaseModel):
    """Accepts both the camelCase wire names and the Python field names."""
    model_config = ConfigDict(populate_by_name=True)


class BudgetAllocation(_WireModel):
    channel: str = Field(description="Marketing channel receiving the budget.")
    amount: float = Field(ge=0, description="Absolute budget assigned to the channel.")
    percentage: float = Field(ge=0, le=100, description="Share of the total budget, 0-100.")
    expected_roi: float = Field(alias="expectedROI", description="Expected return on investment.")


class CouponStrategy(_WireModel):
    type: str = Field(description="Coupon type, e.g. threshold discount or new-user gift.")
    value: str = Field(description="Coupon value, e.g. '100-20' or '8.5折'.")
    target_segment: str = Field(alias="targetSegment", description="Customer segment targeted.")
    trigger_condition: str = Field(alias="triggerCondition", description="Event that issues the coupon.")
    efficiency: Optional[float] = Field(None, description="Observed conversion efficiency, if known.")
    status: Literal["RUNNING", "TESTING", "STOPPED"] = Field(
        "TESTING",
        description="Lifecycle state. Freshly generated strategies start in TESTING."
    )


class MarketingPlan(_WireModel):
    """
    Structured marketing plan returned by the generation provider.

    Allocation percentages are expected to sum to 100 but this is left to the
    provider and not checked here.
    """
    name: str = Field(description="Short plan label.")
    objective: str = Field(description="Strategic intent of the plan.")
    total_budget: float = Field(alias="totalBudget", ge=0, description="Total budget of the plan.")
    allocations: List[BudgetAllocation] = Field(description="Per-channel budget split.")
    strategies: List[CouponStrategy] = Field(description="Coupon strategies to run alongside the budget.")
    reasoning: str = Field(description="Rationale behind the allocations and strategies.")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str
    plan: Optional[MarketingPlan] = None


# Response schema handed to the provider as a structured-output constraint.
PLAN_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "objective": {"type": "string"},
        "totalBudget": {"type": "number"},
        "allocations": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "channel": {"type": "string"},
                    "amount": {"type": "number"},
                    "percentage": {"type": "number"},
                    "expectedROI": {"type": "number"},
                },
                "required": ["channel", "amount", "percentage", "expectedROI"],
            },
        },
        "strategies": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "type": {"type": "string"},
                    "value": {"type": "string"},
                    "targetSegment": {"type": "string"},
                    "triggerCondition": {"type": "string"},
                },
                "required": ["type", "value", "targetSegment", "triggerCondition"],
            },
        },
        "reasoning": {"type": "string"},
    },
    "required": ["name", "objective", "totalBudget", "allocations", "strategies", "reasoning"],
}
