import uvicorn
import logging
from typing import Optional
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from config import OPENAI_API_KEY, LLM_MODEL, LOG_LEVEL
from conversation import ConversationState
from mock_data import dashboard_snapshot
from models import AppView, ChatMessage
from plan_client import PlanRequestClient

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


class ChatRequest(BaseModel):
    user_message: str


class ViewRequest(BaseModel):
    view: str


app = FastAPI(title="OmniDecide AI")

# Single in-memory conversation for the whole process.
conversation: Optional[ConversationState] = None


def _message_payload(message: ChatMessage) -> dict:
    payload = {"role": message.role, "content": message.content}
    if message.plan is not None:
        payload["plan"] = message.plan.to_wire()
    return payload


def _get_conversation() -> ConversationState:
    if conversation is None:
        raise HTTPException(status_code=503, detail="Conversation is not initialized.")
    return conversation


@app.on_event("startup")
async def on_startup():
    """
    Builds the conversation. A missing API key is only reported here; each
    chat request then fails with the generic apology.
    """
    global conversation

    if conversation is not None:
        return
    if not OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set. Plan generation will fail until it is configured.")

    conversation = ConversationState(PlanRequestClient(api_key=OPENAI_API_KEY, model=LLM_MODEL))
    logger.info("Conversation initialized for FastAPI deployment.")


@app.get("/state")
async def get_state():
    state = _get_conversation()
    return {
        "messages": [_message_payload(m) for m in state.messages],
        "is_generating": state.is_generating,
        "active_view": state.active_view.value,
        "active_plan": state.active_plan.to_wire() if state.active_plan else None,
    }


@app.post("/chat")
async def chat(request: ChatRequest):
    """
    Submits the user's text. Blank input, or input arriving while another
    request is in flight, is ignored and reported as not accepted.
    """
    state = _get_conversation()
    reply = await state.submit(request.user_message)
    if reply is None:
        return {"accepted": False}

    return {
        "accepted": True,
        "ai_message": _message_payload(reply),
        "active_view": state.active_view.value,
    }


@app.post("/view")
async def set_view(request: ViewRequest):
    state = _get_conversation()
    try:
        view = state.set_view(request.view.upper())
    except ValueError:
        options = ", ".join(v.value for v in AppView)
        raise HTTPException(status_code=400, detail=f"Unknown view '{request.view}'. Expected one of: {options}")
    return {"active_view": view.value}


@app.get("/dashboard")
async def dashboard():
    return dashboard_snapshot()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
