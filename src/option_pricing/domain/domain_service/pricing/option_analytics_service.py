"""
OptionAnalyticsService 领域服务

期权分析统一入口: 在核心计算前做输入校验，按 PricingEngineConfig 配置 IV 求解，
并将价格、Greeks、盈利概率和预期波动汇总为 OptionAnalytics。

输入无效或计算异常时返回 success=False 的结果，不向调用方抛出异常。
"""
import logging
from typing import List, Optional

from ...value_object.config.pricing_engine_config import PricingEngineConfig
from ...value_object.pricing.greeks import GreeksResult, IVQuote, IVResult, OptionType, PricingInputs
from ...value_object.pricing.risk_metrics import OptionAnalytics
from .greeks_calculator import DAYS_PER_YEAR, GreeksCalculator
from .iv_solver import IVSolver
from .risk_metrics_calculator import RiskMetricsCalculator
from .validation import validate_iv_inputs, validate_pricing_inputs

logger = logging.getLogger(__name__)


class OptionAnalyticsService:
    """期权分析统一入口"""

    def __init__(self, config: Optional[PricingEngineConfig] = None):
        self._config = config or PricingEngineConfig()
        self._calculator = GreeksCalculator()
        self._iv_solver = IVSolver(
            self._calculator,
            lower_bound=self._config.iv_lower_bound,
            upper_bound=self._config.iv_upper_bound,
        )
        self._risk_metrics = RiskMetricsCalculator()

    @property
    def config(self) -> PricingEngineConfig:
        return self._config

    def price(self, params: PricingInputs) -> GreeksResult:
        """校验后计算价格与 Greeks"""
        error = validate_pricing_inputs(params)
        if error:
            logger.warning("定价输入无效: %s, %s", error, params)
            return GreeksResult(success=False, error_message=error)

        try:
            return self._calculator.price_and_greeks(params)
        except (OverflowError, ValueError, ZeroDivisionError) as e:
            logger.warning("定价计算异常: %s, %s", e, params)
            return GreeksResult(success=False, error_message=f"计算异常: {e}")

    def implied_volatility(
        self,
        market_price: float,
        spot_price: float,
        strike_price: float,
        time_to_expiry: float,
        risk_free_rate: float,
        option_type: OptionType,
        dividend_yield: float = 0.0,
    ) -> IVResult:
        """校验后按配置的迭代次数和容差求解隐含波动率"""
        error = validate_iv_inputs(
            market_price, spot_price, strike_price,
            time_to_expiry, risk_free_rate, option_type, dividend_yield,
        )
        if error:
            logger.warning("IV 输入无效: %s", error)
            return IVResult(success=False, error_message=error)

        try:
            return self._iv_solver.solve(
                market_price=market_price,
                spot_price=spot_price,
                strike_price=strike_price,
                time_to_expiry=time_to_expiry,
                risk_free_rate=risk_free_rate,
                option_type=option_type,
                dividend_yield=dividend_yield,
                max_iterations=self._config.max_iterations,
                tolerance=self._config.tolerance,
            )
        except (OverflowError, ValueError, ZeroDivisionError) as e:
            logger.warning("IV 求解异常: %s", e)
            return IVResult(success=False, error_message=f"计算异常: {e}")

    def implied_volatility_batch(self, quotes: List[IVQuote]) -> List[IVResult]:
        """批量求解，结果与报价一一对应"""
        return [
            self.implied_volatility(
                market_price=quote.market_price,
                spot_price=quote.spot_price,
                strike_price=quote.strike_price,
                time_to_expiry=quote.time_to_expiry,
                risk_free_rate=quote.risk_free_rate,
                option_type=quote.option_type,
                dividend_yield=quote.dividend_yield,
            )
            for quote in quotes
        ]

    def analyze(
        self,
        params: PricingInputs,
        is_selling: bool = False,
        days_to_expiry: Optional[float] = None,
    ) -> OptionAnalytics:
        """
        计算单个合约的价格、Greeks 及风险指标

        Args:
            params: 定价输入参数
            is_selling: True 为卖方视角的盈利概率
            days_to_expiry: 预期波动的天数，默认由 time_to_expiry 换算
        """
        greeks = self.price(params)
        if not greeks.success:
            return OptionAnalytics(greeks=greeks)

        if days_to_expiry is None:
            days_to_expiry = params.time_to_expiry * DAYS_PER_YEAR

        probability = self._risk_metrics.probability_of_profit(
            spot_price=params.spot_price,
            strike_price=params.strike_price,
            time_to_expiry=params.time_to_expiry,
            volatility=params.volatility,
            option_type=params.option_type,
            is_selling=is_selling,
        )
        expected_move = self._risk_metrics.expected_move(
            spot_price=params.spot_price,
            volatility=params.volatility,
            days_to_expiry=days_to_expiry,
        )
        return OptionAnalytics(
            greeks=greeks,
            probability_of_profit=probability,
            expected_move=expected_move,
        )
