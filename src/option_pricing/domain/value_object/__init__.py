"""
Value Object Module

领域层值对象定义。

子模块分类:
- pricing/: 定价相关 (定价输入、Greeks、IV 求解结果、风险指标)
- config/: 配置相关 (定价引擎配置)
"""

from .pricing.greeks import OptionType, SolveStatus, PricingInputs, GreeksResult, IVResult, IVQuote
from .pricing.risk_metrics import ExpectedMove, OptionAnalytics
from .config.pricing_engine_config import PricingEngineConfig

__all__ = [
    # 定价相关
    "OptionType",
    "SolveStatus",
    "PricingInputs",
    "GreeksResult",
    "IVResult",
    "IVQuote",
    # 风险指标
    "ExpectedMove",
    "OptionAnalytics",
    # 配置
    "PricingEngineConfig",
]
