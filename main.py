import asyncio
import logging

from config import OPENAI_API_KEY, LLM_MODEL, LOG_LEVEL
from conversation import ConversationState
from plan_client import PlanRequestClient
from run_interaction import run_interaction_loop

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


async def main():
    if not OPENAI_API_KEY:
        # Requests will fail individually; the loop still starts.
        logger.warning("OPENAI_API_KEY is not set. Plan generation will fail until it is configured.")

    conversation = ConversationState(PlanRequestClient(api_key=OPENAI_API_KEY, model=LLM_MODEL))
    logger.info("Conversation ready. Starting run_interaction_loop...")

    await run_interaction_loop(conversation)

if __name__ == "__main__":
    asyncio.run(main())
