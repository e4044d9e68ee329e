import logging
from typing import Optional, List, Tuple, Union

from config import MAX_TRANSCRIPT_MESSAGES
from models import AppView, ChatMessage, MarketingPlan
from plan_client import GenerationFailure, PlanRequestClient
from view_router import ViewRouter

logger = logging.getLogger(__name__)

GREETING = (
    "您好！我是您的智能营销助手。您可以切换左侧菜单查看不同维度的分析，"
    "或直接在这里向我提问，如：“帮我分析下个月的预算分配方案”。"
)
APOLOGY = "抱歉，系统暂时繁忙。请确保网络连接正常并重试。"
PLAN_SUMMARY = (
    "根据您的实时需求，我已为您生成了 **{name}**。该方案着重于 {objective}，"
    "您可以直接在“预算分配”页查看详细明细。"
)


class ConversationState:
    """
    Chat transcript plus the state that changes with each submission.

    The presentation layer reads `messages`, `is_generating`, `active_view`
    and `active_plan`, and writes only through `submit`, `set_input` and
    `set_view`.
    """

    def __init__(
        self,
        client: PlanRequestClient,
        router: Optional[ViewRouter] = None,
        max_messages: int = MAX_TRANSCRIPT_MESSAGES,
        greeting: Optional[str] = GREETING,
    ):
        self.client = client
        self.router = router or ViewRouter()
        self.max_messages = max_messages
        self.input_buffer = ""
        self.is_generating = False
        self.active_plan: Optional[MarketingPlan] = None
        self._messages: List[ChatMessage] = []
        if greeting:
            self._append(ChatMessage(role="assistant", content=greeting))

    @property
    def messages(self) -> Tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def active_view(self) -> AppView:
        return self.router.active_view

    def set_view(self, view: Union[AppView, str]) -> AppView:
        return self.router.set_view(view)

    def set_input(self, text: str):
        self.input_buffer = text

    def _append(self, message: ChatMessage):
        self._messages.append(message)
        if self.max_messages and len(self._messages) > self.max_messages:
            dropped = len(self._messages) - self.max_messages
            del self._messages[:dropped]
            logger.debug(f"Transcript trimmed by {dropped} oldest messages.")

    async def submit(self, text: Optional[str] = None) -> Optional[ChatMessage]:
        """
        Runs one submission cycle and returns the assistant turn it produced.

        Returns None without touching any state when the input is blank or a
        request is already in flight.
        """
        prompt = (self.input_buffer if text is None else text).strip()
        if not prompt or self.is_generating:
            logger.debug("Submission ignored (empty input or generation in flight).")
            return None

        self._append(ChatMessage(role="user", content=prompt))
        self.input_buffer = ""
        self.is_generating = True

        try:
            plan = await self.client.generate(prompt)
        except GenerationFailure as e:
            logger.warning(f"Plan generation failed: {e}")
            reply = ChatMessage(role="assistant", content=APOLOGY)
            self._append(reply)
        else:
            reply = ChatMessage(
                role="assistant",
                content=PLAN_SUMMARY.format(name=plan.name, objective=plan.objective),
                plan=plan,
            )
            self._append(reply)
            self.active_plan = plan
            self.router.route(prompt)
        finally:
            self.is_generating = False

        return reply
