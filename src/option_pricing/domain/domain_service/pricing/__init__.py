"""
Pricing Module

期权定价领域服务。

服务列表:
- norm_cdf / norm_pdf: 标准正态分布函数
- GreeksCalculator: Black-Scholes 价格与 Greeks 计算器
- IVSolver: 隐含波动率求解器（牛顿法）
- RiskMetricsCalculator: 盈利概率与预期波动计算器
- OptionAnalyticsService: 带输入校验和配置的统一入口
"""

from .normal import norm_cdf, norm_pdf
from .greeks_calculator import GreeksCalculator
from .iv_solver import IVSolver
from .risk_metrics_calculator import RiskMetricsCalculator
from .validation import validate_pricing_inputs, validate_iv_inputs
from .option_analytics_service import OptionAnalyticsService

__all__ = [
    "norm_cdf",
    "norm_pdf",
    "GreeksCalculator",
    "IVSolver",
    "RiskMetricsCalculator",
    "validate_pricing_inputs",
    "validate_iv_inputs",
    "OptionAnalyticsService",
]
