"""
IVSolver 隐含波动率求解器

以 Brenner-Subrahmanyam 近似为初值，在 Black-Scholes 价格-波动率曲线上做
牛顿迭代，从市场价格反推隐含波动率。

未收敛（迭代耗尽或 vega 为 0）时仍返回最后一次的估计值；
solve() 额外通过 SolveStatus 标明结束原因。
"""
import logging
import math
from typing import List, Optional

from ...value_object.pricing.greeks import (
    IVQuote,
    IVResult,
    OptionType,
    PricingInputs,
    SolveStatus,
)
from .greeks_calculator import GreeksCalculator

logger = logging.getLogger(__name__)


class IVSolver:
    """隐含波动率求解器（牛顿法）"""

    DEFAULT_MAX_ITERATIONS = 100
    DEFAULT_TOLERANCE = 0.0001
    IV_LOWER_BOUND = 0.01
    IV_UPPER_BOUND = 5.0

    def __init__(
        self,
        calculator: Optional[GreeksCalculator] = None,
        lower_bound: float = IV_LOWER_BOUND,
        upper_bound: float = IV_UPPER_BOUND,
    ):
        self._calculator = calculator or GreeksCalculator()
        self._lower_bound = lower_bound
        self._upper_bound = upper_bound

    @staticmethod
    def initial_guess(market_price: float, spot_price: float, time_to_expiry: float) -> float:
        """Brenner-Subrahmanyam 初值: sqrt(2π/T) · (C / S)"""
        if time_to_expiry == 0:
            # 到期时价格与波动率无关，初值发散为无穷大
            return math.inf
        if time_to_expiry < 0:
            return math.nan
        return math.sqrt(2.0 * math.pi / time_to_expiry) * (market_price / spot_price)

    def solve(
        self,
        market_price: float,
        spot_price: float,
        strike_price: float,
        time_to_expiry: float,
        risk_free_rate: float,
        option_type: OptionType,
        dividend_yield: float = 0.0,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> IVResult:
        """
        求解单个期权的隐含波动率。

        Returns:
            IVResult 包含隐含波动率、迭代次数和结束状态
        """
        params = PricingInputs(
            spot_price=spot_price,
            strike_price=strike_price,
            time_to_expiry=time_to_expiry,
            risk_free_rate=risk_free_rate,
            volatility=self.initial_guess(market_price, spot_price, time_to_expiry),
            option_type=option_type,
            dividend_yield=dividend_yield,
        )
        iv = params.volatility

        for i in range(max_iterations):
            computed = self._calculator.price_and_greeks(params.with_volatility(iv))
            diff = computed.price - market_price

            if abs(diff) < tolerance:
                return IVResult(implied_volatility=iv, iterations=i + 1)

            # vega 以 1% 为单位，乘 100 还原为 dPrice/dSigma
            vega_per_unit = computed.vega * 100.0
            if vega_per_unit == 0:
                logger.debug(
                    "IV 求解 vega 为 0, 提前结束: iv=%s, diff=%s, 迭代=%d",
                    iv, diff, i + 1,
                )
                return IVResult(
                    implied_volatility=iv,
                    iterations=i + 1,
                    status=SolveStatus.DEGENERATE_VEGA,
                )

            iv = iv - diff / vega_per_unit
            iv = min(max(iv, self._lower_bound), self._upper_bound)

        logger.debug("IV 求解在 %d 次迭代内未收敛, 返回 iv=%s", max_iterations, iv)
        return IVResult(
            implied_volatility=iv,
            iterations=max_iterations,
            status=SolveStatus.MAX_ITERATIONS_EXCEEDED,
        )

    def solve_iv(
        self,
        market_price: float,
        spot_price: float,
        strike_price: float,
        time_to_expiry: float,
        risk_free_rate: float,
        option_type: OptionType,
        dividend_yield: float = 0.0,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> float:
        """求解隐含波动率，仅返回数值（不区分是否收敛）"""
        return self.solve(
            market_price=market_price,
            spot_price=spot_price,
            strike_price=strike_price,
            time_to_expiry=time_to_expiry,
            risk_free_rate=risk_free_rate,
            option_type=option_type,
            dividend_yield=dividend_yield,
            max_iterations=max_iterations,
            tolerance=tolerance,
        ).implied_volatility

    def solve_batch(
        self,
        quotes: List[IVQuote],
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
    ) -> List[IVResult]:
        """
        批量求解隐含波动率。

        每个报价独立求解，单个失败不影响其他。
        返回列表与输入列表保持相同顺序和长度。
        """
        results: List[IVResult] = []
        for quote in quotes:
            try:
                result = self.solve(
                    market_price=quote.market_price,
                    spot_price=quote.spot_price,
                    strike_price=quote.strike_price,
                    time_to_expiry=quote.time_to_expiry,
                    risk_free_rate=quote.risk_free_rate,
                    option_type=quote.option_type,
                    dividend_yield=quote.dividend_yield,
                    max_iterations=max_iterations,
                    tolerance=tolerance,
                )
            except (OverflowError, ValueError, ZeroDivisionError) as e:
                logger.warning("批量 IV 求解单个报价失败: %s, %s", quote, e)
                result = IVResult(success=False, error_message=f"求解异常: {e}")
            results.append(result)
        return results
