import asyncio
import logging

from conversation import ConversationState
from models import AppView, MarketingPlan

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ["quit", "exit", "stop"]


def format_plan(plan: MarketingPlan) -> str:
    lines = [f"--- {plan.name} (¥{plan.total_budget:,.0f}) ---", f"Objective: {plan.objective}"]
    for allocation in plan.allocations:
        lines.append(
            f"  {allocation.channel}: ¥{allocation.amount:,.0f} "
            f"({allocation.percentage:.0f}%, ROI {allocation.expected_roi})"
        )
    for strategy in plan.strategies:
        lines.append(
            f"  [{strategy.type} {strategy.value}] {strategy.target_segment} <- {strategy.trigger_condition}"
        )
    lines.append(f"Reasoning: {plan.reasoning}")
    return "\n".join(lines)


def handle_view_command(conversation: ConversationState, command: str) -> str:
    """Handles '/view <name>'; returns the text to show the user."""
    _, _, name = command.partition(" ")
    try:
        view = conversation.set_view(name.strip().upper())
    except ValueError:
        options = ", ".join(v.value.lower() for v in AppView)
        return f"Unknown view '{name.strip()}'. Choose one of: {options}"
    return f"[view: {view.value}]"


async def run_interaction_loop(conversation: ConversationState):
    logger.info("Starting OmniDecide marketing assistant.")
    print("\nWelcome to the OmniDecide AI marketing assistant!")
    for message in conversation.messages:
        print(f"\nAI: {message.content}")

    while True:
        user_input = await asyncio.to_thread(input, "\nUser: ")
        if user_input.lower().strip() in EXIT_COMMANDS:
            logger.info("User requested exit.")
            break

        if user_input.startswith("/view"):
            print(handle_view_command(conversation, user_input))
            continue

        previous_view = conversation.active_view
        reply = await conversation.submit(user_input)
        if reply is None:
            continue

        print(f"\nAI: {reply.content}")
        if reply.plan is not None:
            print(format_plan(reply.plan))
        if conversation.active_view != previous_view:
            print(f"[view: {conversation.active_view.value}]")
