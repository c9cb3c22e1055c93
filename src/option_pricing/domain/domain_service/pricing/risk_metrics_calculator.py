"""
RiskMetricsCalculator 领域服务

到期盈利概率与预期波动幅度。纯计算服务，无副作用。
"""
import math

from ...value_object.pricing.greeks import OptionType
from ...value_object.pricing.risk_metrics import ExpectedMove
from .greeks_calculator import DAYS_PER_YEAR
from .normal import norm_cdf


class RiskMetricsCalculator:
    """盈利概率与预期波动计算器"""

    def probability_of_profit(
        self,
        spot_price: float,
        strike_price: float,
        time_to_expiry: float,
        volatility: float,
        option_type: OptionType,
        is_selling: bool,
    ) -> float:
        """
        到期盈利概率（以行权价为盈亏分界，正态近似价格分布）

        Args:
            spot_price: 标的价格
            strike_price: 行权价
            time_to_expiry: 剩余到期时间 (年化)
            volatility: 年化波动率
            option_type: 期权类型
            is_selling: True 为卖方, False 为买方

        Returns:
            [0, 1] 之间的概率
        """
        std_dev = spot_price * volatility * math.sqrt(time_to_expiry)
        if std_dev == 0:
            # 无波动时价格停留在现价
            diff = strike_price - spot_price
            z_score = math.copysign(math.inf, diff) if diff != 0 else 0.0
        else:
            z_score = (strike_price - spot_price) / std_dev

        below_strike = norm_cdf(z_score)
        if option_type == OptionType.CALL:
            # 卖方: 标的留在行权价下方; 买方: 涨过行权价
            probability = below_strike if is_selling else 1.0 - below_strike
        else:
            probability = 1.0 - below_strike if is_selling else below_strike

        return min(1.0, max(0.0, probability))

    def expected_move(
        self,
        spot_price: float,
        volatility: float,
        days_to_expiry: float,
    ) -> ExpectedMove:
        """按 365 天/年换算，计算一倍、两倍标准差的价格波动"""
        time_to_expiry = days_to_expiry / DAYS_PER_YEAR
        one_std_dev = spot_price * volatility * math.sqrt(time_to_expiry)
        return ExpectedMove(one_std_dev=one_std_dev, two_std_dev=2.0 * one_std_dev)
