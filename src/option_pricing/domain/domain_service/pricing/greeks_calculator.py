"""
GreeksCalculator 领域服务

基于 Black-Scholes 模型（含连续股息率）计算欧式期权理论价格及
Greeks (Delta, Gamma, Theta, Vega, Rho)。纯计算服务，无副作用，不做输入校验。
"""
import math

from ...value_object.pricing.greeks import GreeksResult, OptionType, PricingInputs
from .normal import norm_cdf, norm_pdf

DAYS_PER_YEAR = 365.0


class GreeksCalculator:
    """
    Black-Scholes 价格与 Greeks 计算器

    单位约定: theta 为每自然日; vega、rho 为每 1 个百分点。
    """

    def price_and_greeks(self, params: PricingInputs) -> GreeksResult:
        """
        计算理论价格和全部 Greeks

        Args:
            params: 定价输入参数

        Returns:
            GreeksResult 包含 price, delta, gamma, theta, vega, rho
        """
        S = params.spot_price
        K = params.strike_price
        T = params.time_to_expiry
        r = params.risk_free_rate
        q = params.dividend_yield
        sigma = params.volatility
        is_call = params.option_type == OptionType.CALL

        # 到期时边界处理: 返回内在价值，不做平滑
        if T <= 0:
            if is_call:
                price = max(0.0, S - K)
                delta = 1.0 if S > K else 0.0
            else:
                price = max(0.0, K - S)
                delta = -1.0 if S < K else 0.0
            return GreeksResult(price=price, delta=delta)

        sqrt_T = math.sqrt(T)
        sigma_sqrt_T = sigma * sqrt_T
        if sigma_sqrt_T > 0:
            d1 = (math.log(S / K) + (r - q + 0.5 * sigma * sigma) * T) / sigma_sqrt_T
            d2 = d1 - sigma_sqrt_T
        else:
            # 波动率非正时远期价格确定: d1/d2 退化为 ±inf, 平值远期视为虚值
            forward_moneyness = math.log(S / K) + (r - q) * T
            d1 = d2 = math.inf if forward_moneyness > 0 else -math.inf

        exp_qT = math.exp(-q * T)
        exp_rT = math.exp(-r * T)
        pdf_d1 = norm_pdf(d1)

        if is_call:
            cdf_d1 = norm_cdf(d1)
            cdf_d2 = norm_cdf(d2)
            price = S * exp_qT * cdf_d1 - K * exp_rT * cdf_d2
            delta = exp_qT * cdf_d1
            rho = K * T * exp_rT * cdf_d2 / 100.0
            carry = -r * K * exp_rT * cdf_d2 + q * S * exp_qT * cdf_d1
        else:
            cdf_neg_d1 = norm_cdf(-d1)
            cdf_neg_d2 = norm_cdf(-d2)
            price = K * exp_rT * cdf_neg_d2 - S * exp_qT * cdf_neg_d1
            delta = -exp_qT * cdf_neg_d1
            rho = -K * T * exp_rT * cdf_neg_d2 / 100.0
            carry = r * K * exp_rT * cdf_neg_d2 - q * S * exp_qT * cdf_neg_d1

        # Gamma 和 Vega 对 call/put 相同
        gamma = exp_qT * pdf_d1 / (S * sigma_sqrt_T) if sigma_sqrt_T > 0 else 0.0
        vega = S * exp_qT * pdf_d1 * sqrt_T / 100.0  # 除以100使单位为1%波动率
        theta = (-(S * sigma * exp_qT * pdf_d1) / (2.0 * sqrt_T) + carry) / DAYS_PER_YEAR

        return GreeksResult(
            price=max(0.0, price),
            delta=delta,
            gamma=gamma,
            theta=theta,
            vega=vega,
            rho=rho,
        )
