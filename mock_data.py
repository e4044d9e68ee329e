"""Static dashboard content. None of these numbers are computed."""

from models import AppView, CouponStrategy

MENU_ITEMS = [
    (AppView.DASHBOARD, "概览 Dashboard"),
    (AppView.BUDGET, "预算分配 Budget"),
    (AppView.COUPONS, "发券策略 Coupons"),
    (AppView.ANALYSIS, "效果回溯 Analysis"),
]

METRIC_CARDS = [
    {"title": "本月总预算消耗", "value": "124,500", "change": 12, "is_trend_up": True, "prefix": "¥"},
    {"title": "整体 ROI", "value": "4.82", "change": 8.5, "is_trend_up": True, "prefix": ""},
    {"title": "发券核销率", "value": "28.4%", "change": 3.2, "is_trend_up": False, "prefix": ""},
    {"title": "预估增量GMV", "value": "452,000", "change": 15.4, "is_trend_up": True, "prefix": "¥"},
]

CHANNEL_SPEND = [
    {"name": "抖音投放", "value": 45000},
    {"name": "微信私域", "value": 25000},
    {"name": "淘宝直通车", "value": 35000},
    {"name": "搜索关键词", "value": 15000},
]

HISTORICAL_PERFORMANCE = [
    {"month": "1月", "budget": 4000, "revenue": 12000, "roi": 3.0},
    {"month": "2月", "budget": 5000, "revenue": 15000, "roi": 3.0},
    {"month": "3月", "budget": 6000, "revenue": 18000, "roi": 3.0},
    {"month": "4月", "budget": 7000, "revenue": 22000, "roi": 3.1},
    {"month": "5月", "budget": 8500, "revenue": 28000, "roi": 3.3},
    {"month": "6月", "budget": 10000, "revenue": 35000, "roi": 3.5},
]

BUDGET_CHANNELS = [
    {"name": "抖音信息流", "current": 45000, "recommended": 52000, "roi": 5.4},
    {"name": "微信朋友圈", "current": 25000, "recommended": 18000, "roi": 3.2},
    {"name": "天猫品专", "current": 35000, "recommended": 35000, "roi": 4.8},
    {"name": "小红书KOL", "current": 15000, "recommended": 19500, "roi": 6.1},
]

STRATEGIES = [
    CouponStrategy(type="满减券", value="100-20", target_segment="沉睡30天用户",
                   trigger_condition="APP推送", efficiency=18.5, status="RUNNING"),
    CouponStrategy(type="折扣券", value="8.5折", target_segment="高客单价潜在用户",
                   trigger_condition="加购后1小时", efficiency=24.2, status="RUNNING"),
    CouponStrategy(type="新人礼", value="50无门槛", target_segment="注册未首单用户",
                   trigger_condition="注册完成", efficiency=32.1, status="TESTING"),
]

ATTRIBUTION_WEIGHTS = [
    {"name": "直接打开", "weight": 35},
    {"name": "搜索关键词", "weight": 25},
    {"name": "KOL种草", "weight": 20},
    {"name": "朋友圈广告", "weight": 15},
    {"name": "其他", "weight": 5},
]

FUNNEL_STAGES = [
    {"stage": "访问落地页", "rate": 100},
    {"stage": "点击商品", "rate": 85},
    {"stage": "加入购物车", "rate": 60},
    {"stage": "确认订单", "rate": 40},
    {"stage": "支付成功", "rate": 12},
]


def dashboard_snapshot() -> dict:
    return {
        "metric_cards": METRIC_CARDS,
        "channel_spend": CHANNEL_SPEND,
        "historical_performance": HISTORICAL_PERFORMANCE,
        "budget_channels": BUDGET_CHANNELS,
        "strategies": [s.model_dump(by_alias=True) for s in STRATEGIES],
        "attribution_weights": ATTRIBUTION_WEIGHTS,
        "funnel_stages": FUNNEL_STAGES,
    }
