import asyncio
import json

import pytest
from langchain_core.messages import AIMessage

from models import MarketingPlan


SAMPLE_PLAN = {
    "name": "Q3 Boost",
    "objective": "raise ROI",
    "totalBudget": 100000,
    "allocations": [
        {"channel": "抖音信息流", "amount": 50000, "percentage": 50, "expectedROI": 5.4},
        {"channel": "小红书KOL", "amount": 30000, "percentage": 30, "expectedROI": 6.1},
        {"channel": "微信朋友圈", "amount": 20000, "percentage": 20, "expectedROI": 3.2},
    ],
    "strategies": [
        {
            "type": "满减券",
            "value": "100-20",
            "targetSegment": "沉睡30天用户",
            "triggerCondition": "Inactivity > 30 days",
        },
    ],
    "reasoning": "Shift spend toward the highest ROI channels.",
}


class StubChatModel:
    """
    Stands in for ChatOpenAI: records every request and answers with the
    queued responses. A queued exception is raised instead of returned.
    """

    def __init__(self, *responses, gate: asyncio.Event = None):
        self.responses = list(responses)
        self.gate = gate
        self.calls = []
        self.bound_kwargs = {}

    def bind(self, **kwargs):
        self.bound_kwargs = kwargs
        return self

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.gate is not None:
            await self.gate.wait()
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return AIMessage(content=response)


@pytest.fixture
def sample_plan_dict():
    return json.loads(json.dumps(SAMPLE_PLAN))


@pytest.fixture
def sample_plan():
    return MarketingPlan.model_validate(SAMPLE_PLAN)


@pytest.fixture
def plan_json():
    return json.dumps(SAMPLE_PLAN, ensure_ascii=False)


@pytest.fixture
def make_llm():
    return StubChatModel
