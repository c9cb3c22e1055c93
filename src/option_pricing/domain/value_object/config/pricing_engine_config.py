"""PricingEngineConfig 配置值对象"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PricingEngineConfig:
    """定价引擎配置"""

    max_iterations: int = 100  # IV 牛顿法最大迭代次数
    tolerance: float = 0.0001  # IV 价格收敛容差
    iv_lower_bound: float = 0.01  # 迭代中 IV 下限
    iv_upper_bound: float = 5.0  # 迭代中 IV 上限

    def __post_init__(self):
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations 必须大于 0, 实际为 {self.max_iterations}")
        if self.tolerance <= 0:
            raise ValueError(f"tolerance 必须大于 0, 实际为 {self.tolerance}")
        if not 0 < self.iv_lower_bound < self.iv_upper_bound:
            raise ValueError(
                f"需满足 0 < iv_lower_bound < iv_upper_bound, "
                f"实际为 {self.iv_lower_bound}, {self.iv_upper_bound}"
            )