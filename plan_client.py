import json
import logging
from typing import Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from pydantic import ValidationError

from config import OPENAI_API_KEY, LLM_MODEL, LLM_TEMPERATURE, LLM_TIMEOUT
from models import MarketingPlan, PLAN_SCHEMA
from prompts import SYSTEM_PROMPT

logger = logging.getLogger(__name__)

RESPONSE_FORMAT = {
    "type": "json_schema",
    "json_schema": {"name": "marketing_plan", "schema": PLAN_SCHEMA},
}


class GenerationFailure(Exception):
    """Base class for every way a plan request can fail."""


class TransportFailure(GenerationFailure):
    """The provider call could not complete (network, auth, quota, bad request)."""


class EmptyPayload(GenerationFailure):
    """The provider answered without any text."""


class MalformedPayload(GenerationFailure):
    """The provider text is not JSON or does not describe a marketing plan."""


def create_llm(api_key: str, model: str = LLM_MODEL) -> ChatOpenAI:
    """
    Initializes the chat model for a single request/response round trip.
    """
    if not api_key:
        raise ValueError("OpenAI API key is not configured.")
    return ChatOpenAI(
        model=model,
        temperature=LLM_TEMPERATURE,
        openai_api_key=api_key,
        timeout=LLM_TIMEOUT,
        max_retries=0,
    )


def _response_text(response) -> str:
    content = getattr(response, "content", response)
    if isinstance(content, list):
        content = "".join(
            part.get("text", "") if isinstance(part, dict) else str(part)
            for part in content
        )
    return content or ""


def parse_plan(text: Optional[str]) -> MarketingPlan:
    """
    Parses the provider's JSON text into a MarketingPlan.

    Raises EmptyPayload when there is no text and MalformedPayload when the
    text is not JSON or is missing required plan fields.
    """
    if not text or not text.strip():
        raise EmptyPayload("Provider returned no text payload.")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedPayload(f"Provider payload is not valid JSON: {e}") from e

    try:
        return MarketingPlan.model_validate(payload)
    except ValidationError as e:
        raise MalformedPayload(f"Provider payload is not a marketing plan: {e}") from e


class PlanRequestClient:
    """
    Turns a free-text prompt into a MarketingPlan with one provider call.

    The chat model is built on first use so that a missing API key fails the
    call rather than application startup.
    """

    def __init__(self, llm=None, api_key: Optional[str] = OPENAI_API_KEY, model: str = LLM_MODEL):
        self._llm = llm
        self.api_key = api_key
        self.model = model

    def _structured_llm(self):
        if self._llm is None:
            try:
                self._llm = create_llm(self.api_key, self.model)
            except ValueError as e:
                raise TransportFailure(str(e)) from e
        return self._llm.bind(response_format=RESPONSE_FORMAT)

    def build_messages(self, prompt_text: str) -> list:
        return [SystemMessage(content=SYSTEM_PROMPT), HumanMessage(content=prompt_text)]

    async def generate(self, prompt_text: str) -> MarketingPlan:
        llm = self._structured_llm()
        logger.info(f"Requesting marketing plan ({len(prompt_text)} chars of prompt)")

        try:
            response = await llm.ainvoke(self.build_messages(prompt_text))
        except Exception as e:
            logger.error(f"Plan request failed: {e}", exc_info=True)
            raise TransportFailure(str(e)) from e

        plan = parse_plan(_response_text(response))
        logger.info(f"Received marketing plan '{plan.name}' with {len(plan.allocations)} allocations.")
        return plan
