"""
风险指标值对象

预期波动区间，以及单个合约的定价与风险指标汇总。
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .greeks import GreeksResult


@dataclass(frozen=True)
class ExpectedMove:
    """
    预期价格波动幅度

    Attributes:
        one_std_dev: 一倍标准差对应的价格波动
        two_std_dev: 两倍标准差对应的价格波动
    """
    one_std_dev: float
    two_std_dev: float

    def range(self, spot_price: float, std_devs: int = 1) -> Tuple[float, float]:
        """返回 (下沿, 上沿) 价格区间, std_devs 取 1 或 2"""
        if std_devs == 1:
            move = self.one_std_dev
        elif std_devs == 2:
            move = self.two_std_dev
        else:
            raise ValueError(f"std_devs 只能为 1 或 2, 实际为 {std_devs}")
        return spot_price - move, spot_price + move


@dataclass(frozen=True)
class OptionAnalytics:
    """
    单个合约的定价与风险指标

    Attributes:
        greeks: 价格与 Greeks
        probability_of_profit: 到期盈利概率, 输入无效时为 None
        expected_move: 预期波动幅度, 输入无效时为 None
    """
    greeks: GreeksResult
    probability_of_profit: Optional[float] = None
    expected_move: Optional[ExpectedMove] = None

    @property
    def success(self) -> bool:
        return self.greeks.success
