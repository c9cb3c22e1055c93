"""
Pricing 子模块 - 定价相关值对象

包含定价输入、Greeks 结果、IV 求解结果和风险指标。
"""
from .greeks import OptionType, SolveStatus, PricingInputs, GreeksResult, IVResult, IVQuote
from .risk_metrics import ExpectedMove, OptionAnalytics

__all__ = [
    "OptionType",
    "SolveStatus",
    "PricingInputs",
    "GreeksResult",
    "IVResult",
    "IVQuote",
    "ExpectedMove",
    "OptionAnalytics",
]
