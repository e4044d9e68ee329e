import asyncio
import logging

import pandas as pd
import streamlit as st

from config import OPENAI_API_KEY, LLM_MODEL, LOG_LEVEL
from conversation import ConversationState
from mock_data import (
    MENU_ITEMS, METRIC_CARDS, CHANNEL_SPEND, HISTORICAL_PERFORMANCE,
    BUDGET_CHANNELS, STRATEGIES, ATTRIBUTION_WEIGHTS, FUNNEL_STAGES,
)
from models import AppView, MarketingPlan
from plan_client import PlanRequestClient

logger = logging.getLogger(__name__)
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')


def init_conversation() -> ConversationState:
    return ConversationState(PlanRequestClient(api_key=OPENAI_API_KEY, model=LLM_MODEL))


def allocations_frame(plan: MarketingPlan) -> pd.DataFrame:
    return pd.DataFrame([
        {"渠道": a.channel, "金额": a.amount, "占比(%)": a.percentage, "预期ROI": a.expected_roi}
        for a in plan.allocations
    ])


def strategies_frame(strategies) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "券类型": s.type, "面额": s.value, "目标人群": s.target_segment,
            "触发条件": s.trigger_condition, "转化率(%)": s.efficiency, "状态": s.status,
        }
        for s in strategies
    ])


def render_sidebar(conversation: ConversationState):
    labels = {view: label for view, label in MENU_ITEMS}
    views = [view for view, _ in MENU_ITEMS]
    with st.sidebar:
        st.title("OmniDecide AI")
        selected = st.radio(
            "导航",
            views,
            index=views.index(conversation.active_view),
            format_func=lambda view: labels[view],
        )
    if selected != conversation.active_view:
        conversation.set_view(selected)


def render_dashboard():
    for column, card in zip(st.columns(len(METRIC_CARDS)), METRIC_CARDS):
        delta = card["change"] if card["is_trend_up"] else -card["change"]
        column.metric(card["title"], f"{card['prefix']}{card['value']}", f"{delta}%")

    left, right = st.columns(2)
    with left:
        st.subheader("各渠道预算分布")
        st.bar_chart(pd.DataFrame(CHANNEL_SPEND).set_index("name"))
    with right:
        st.subheader("投放趋势分析")
        st.line_chart(pd.DataFrame(HISTORICAL_PERFORMANCE).set_index("month")[["budget", "revenue"]])


def render_budget(plan: MarketingPlan = None):
    st.subheader("预算智能调优")
    st.caption("AI实时扫描全渠道ROI，为您推荐最优分配方案")
    if plan is not None:
        st.markdown(f"**{plan.name}** · 总预算 ¥{plan.total_budget:,.0f}")
        st.dataframe(allocations_frame(plan), use_container_width=True)
        st.info(plan.reasoning)

    st.markdown("#### 各渠道预算微调 (人工/AI 协同)")
    st.dataframe(pd.DataFrame(BUDGET_CHANNELS), use_container_width=True)


def render_coupons(plan: MarketingPlan = None):
    st.subheader("全路径自动化发券")
    st.caption("根据用户实时行为匹配最优权益方案")
    if plan is not None and plan.strategies:
        st.markdown(f"**{plan.name}** 推荐策略")
        st.dataframe(strategies_frame(plan.strategies), use_container_width=True)
    st.dataframe(strategies_frame(STRATEGIES), use_container_width=True)


def render_analysis():
    st.subheader("全链路效果回溯")
    st.caption("从流量引入到最终转化的归因深度解析")
    left, right = st.columns(2)
    with left:
        st.markdown("#### 营销漏斗转化分析")
        st.bar_chart(pd.DataFrame(FUNNEL_STAGES).set_index("stage"))
    with right:
        st.markdown("#### 渠道归因权重 (MTA)")
        st.bar_chart(pd.DataFrame(ATTRIBUTION_WEIGHTS).set_index("name"))


def render_chat(conversation: ConversationState):
    st.subheader("AI 营销助手")
    for msg in conversation.messages:
        with st.chat_message(msg.role):
            st.markdown(msg.content)
            if msg.plan is not None:
                st.dataframe(allocations_frame(msg.plan), use_container_width=True)

    if user_input := st.chat_input(placeholder="输入您的营销需求...", disabled=conversation.is_generating):
        with st.spinner("正在生成方案..."):
            # Streamlit is synchronous, so each submission runs its own event loop.
            asyncio.run(conversation.submit(user_input))
        st.rerun()


def main():
    st.set_page_config(page_title="OmniDecide AI", layout="wide")

    if "conversation" not in st.session_state:
        st.session_state.conversation = init_conversation()
    conversation = st.session_state.conversation

    render_sidebar(conversation)

    view_column, chat_column = st.columns([2, 1])
    with view_column:
        if conversation.active_view == AppView.BUDGET:
            render_budget(conversation.active_plan)
        elif conversation.active_view == AppView.COUPONS:
            render_coupons(conversation.active_plan)
        elif conversation.active_view == AppView.ANALYSIS:
            render_analysis()
        else:
            render_dashboard()
    with chat_column:
        render_chat(conversation)


if __name__ == "__main__":
    main()
