"""
标准正态分布函数

CDF 采用 Abramowitz-Stegun 7.1.26 有理多项式近似 erf，
在 [-8, 8] 范围内绝对误差小于 1e-7。
"""
import math

_A1 = 0.254829592
_A2 = -0.284496736
_A3 = 1.421413741
_A4 = -1.453152027
_A5 = 1.061405429
_P = 0.3275911

_SQRT_2 = math.sqrt(2.0)
_SQRT_2PI = math.sqrt(2.0 * math.pi)


def norm_cdf(x: float) -> float:
    """标准正态分布累积分布函数 Φ(x)"""
    sign = -1.0 if x < 0 else 1.0
    z = abs(x) / _SQRT_2

    t = 1.0 / (1.0 + _P * z)
    y = 1.0 - ((((_A5 * t + _A4) * t + _A3) * t + _A2) * t + _A1) * t * math.exp(-z * z)

    return 0.5 * (1.0 + sign * y)


def norm_pdf(x: float) -> float:
    """标准正态分布概率密度函数 φ(x)"""
    return math.exp(-0.5 * x * x) / _SQRT_2PI
