"""
Greeks 相关值对象

定义 Black-Scholes 定价输入、价格与 Greeks 结果，以及隐含波动率求解结果。
"""
from dataclasses import dataclass, replace
from enum import Enum


class OptionType(str, Enum):
    """期权类型"""
    CALL = "call"
    PUT = "put"


class SolveStatus(str, Enum):
    """IV 求解结束状态"""
    CONVERGED = "converged"
    MAX_ITERATIONS_EXCEEDED = "max_iterations_exceeded"
    DEGENERATE_VEGA = "degenerate_vega"


@dataclass(frozen=True)
class PricingInputs:
    """
    定价输入参数

    Attributes:
        spot_price: 标的价格 (S)
        strike_price: 行权价 (K)
        time_to_expiry: 剩余到期时间 (年化, 0 表示到期时刻)
        risk_free_rate: 无风险利率 (连续复利, 可为负)
        volatility: 年化波动率
        option_type: 期权类型 ("call" | "put")
        dividend_yield: 连续股息率 (q)
    """
    spot_price: float
    strike_price: float
    time_to_expiry: float
    risk_free_rate: float
    volatility: float
    option_type: OptionType
    dividend_yield: float = 0.0

    def with_volatility(self, volatility: float) -> "PricingInputs":
        """返回仅替换波动率的新输入"""
        return replace(self, volatility=volatility)


@dataclass(frozen=True)
class GreeksResult:
    """
    价格与 Greeks 计算结果

    theta 为每自然日衰减; vega、rho 为波动率/利率变动 1 个百分点的价格变化。

    Attributes:
        price: 理论价格 (>= 0)
        delta: Delta
        gamma: Gamma
        theta: Theta (每日)
        vega: Vega (每 1%)
        rho: Rho (每 1%)
        success: 计算是否成功
        error_message: 失败时的错误描述
    """
    price: float = 0.0
    delta: float = 0.0
    gamma: float = 0.0
    theta: float = 0.0
    vega: float = 0.0
    rho: float = 0.0
    success: bool = True
    error_message: str = ""


@dataclass(frozen=True)
class IVResult:
    """
    隐含波动率求解结果

    未收敛时 implied_volatility 仍为最后一次迭代的估计值，由 status 区分。

    Attributes:
        implied_volatility: 隐含波动率
        iterations: 迭代次数
        status: 求解结束状态
        success: 输入是否有效且求解已执行
        error_message: 失败时的错误描述
    """
    implied_volatility: float = 0.0
    iterations: int = 0
    status: SolveStatus = SolveStatus.CONVERGED
    success: bool = True
    error_message: str = ""

    @property
    def converged(self) -> bool:
        return self.success and self.status == SolveStatus.CONVERGED


@dataclass(frozen=True)
class IVQuote:
    """
    批量 IV 求解的单个报价输入

    Attributes:
        market_price: 期权市场价格
        spot_price: 标的价格
        strike_price: 行权价
        time_to_expiry: 剩余到期时间（年化）
        risk_free_rate: 无风险利率
        option_type: 期权类型 ("call" | "put")
        dividend_yield: 连续股息率
    """
    market_price: float
    spot_price: float
    strike_price: float
    time_to_expiry: float
    risk_free_rate: float
    option_type: OptionType
    dividend_yield: float = 0.0
