"""
定价输入校验

核心计算函数不校验输入；由 OptionAnalyticsService 在调用前统一校验。
校验函数返回错误信息，有效时返回空字符串。
"""
import math

from ...value_object.pricing.greeks import OptionType, PricingInputs


def _is_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def validate_pricing_inputs(params: PricingInputs) -> str:
    """校验定价输入参数，返回错误信息或空字符串"""
    if not _is_finite(
        params.spot_price,
        params.strike_price,
        params.time_to_expiry,
        params.risk_free_rate,
        params.volatility,
        params.dividend_yield,
    ):
        return "输入参数必须为有限数值"
    if params.spot_price <= 0:
        return "spot_price 必须大于 0"
    if params.strike_price <= 0:
        return "strike_price 必须大于 0"
    if params.volatility <= 0:
        return "volatility 必须大于 0"
    if params.time_to_expiry < 0:
        return "time_to_expiry 不能为负数"
    if params.dividend_yield < 0:
        return "dividend_yield 不能为负数"
    if params.option_type not in (OptionType.CALL, OptionType.PUT):
        return f"option_type 无效: {params.option_type}"
    return ""


def validate_iv_inputs(
    market_price: float,
    spot_price: float,
    strike_price: float,
    time_to_expiry: float,
    risk_free_rate: float,
    option_type: OptionType,
    dividend_yield: float = 0.0,
) -> str:
    """校验 IV 求解输入参数，返回错误信息或空字符串"""
    if not _is_finite(market_price, spot_price, strike_price,
                      time_to_expiry, risk_free_rate, dividend_yield):
        return "输入参数必须为有限数值"
    if market_price <= 0:
        return "market_price 必须大于 0"
    if spot_price <= 0:
        return "spot_price 必须大于 0"
    if strike_price <= 0:
        return "strike_price 必须大于 0"
    if time_to_expiry <= 0:
        return "time_to_expiry 必须大于 0"
    if dividend_yield < 0:
        return "dividend_yield 不能为负数"
    if option_type not in (OptionType.CALL, OptionType.PUT):
        return f"option_type 无效: {option_type}"
    return ""
