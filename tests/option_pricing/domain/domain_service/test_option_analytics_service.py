"""
OptionAnalyticsService 单元测试

验证输入校验、异常转换、按配置求解 IV 以及合约风险指标汇总。
"""
import logging
import math
import pytest

from src.option_pricing.domain.domain_service.pricing import (
    GreeksCalculator,
    OptionAnalyticsService,
    RiskMetricsCalculator,
)
from src.option_pricing.domain.value_object.config.pricing_engine_config import PricingEngineConfig
from src.option_pricing.domain.value_object.pricing import (
    IVQuote,
    OptionType,
    PricingInputs,
    SolveStatus,
)


@pytest.fixture
def service():
    return OptionAnalyticsService()


def _make_input(
    spot_price=100.0,
    strike_price=100.0,
    time_to_expiry=0.25,
    risk_free_rate=0.05,
    volatility=0.2,
    option_type=OptionType.CALL,
    dividend_yield=0.0,
) -> PricingInputs:
    return PricingInputs(
        spot_price=spot_price,
        strike_price=strike_price,
        time_to_expiry=time_to_expiry,
        risk_free_rate=risk_free_rate,
        volatility=volatility,
        option_type=option_type,
        dividend_yield=dividend_yield,
    )


class TestPriceValidation:

    @pytest.mark.parametrize("field,value", [
        ("spot_price", 0.0),
        ("spot_price", -1.0),
        ("strike_price", 0.0),
        ("volatility", 0.0),
        ("volatility", -0.2),
        ("time_to_expiry", -0.01),
        ("dividend_yield", -0.01),
    ])
    def test_invalid_field_rejected(self, service, field, value):
        result = service.price(_make_input(**{field: value}))
        assert not result.success
        assert field in result.error_message

    def test_non_finite_rejected(self, service):
        result = service.price(_make_input(volatility=math.nan))
        assert not result.success
        assert "有限" in result.error_message

    def test_unknown_option_type_rejected(self, service):
        result = service.price(_make_input(option_type="straddle"))
        assert not result.success
        assert "option_type" in result.error_message

    def test_invalid_input_logged(self, service, caplog):
        with caplog.at_level(logging.WARNING):
            service.price(_make_input(spot_price=-5.0))
        assert "spot_price" in caplog.text

    def test_negative_rate_allowed(self, service):
        assert service.price(_make_input(risk_free_rate=-0.01)).success

    def test_expiry_allowed(self, service):
        result = service.price(_make_input(spot_price=103.0, time_to_expiry=0.0))
        assert result.success
        assert result.price == 3.0


class TestPrice:

    def test_matches_calculator(self, service):
        params = _make_input(strike_price=95.0, dividend_yield=0.01)
        assert service.price(params) == GreeksCalculator().price_and_greeks(params)

    def test_overflow_converted_to_failure(self, service):
        result = service.price(_make_input(risk_free_rate=-1e6, time_to_expiry=1.0))
        assert not result.success
        assert "计算异常" in result.error_message


class TestImpliedVolatility:

    def test_round_trip(self, service):
        market_price = service.price(_make_input(volatility=0.32, option_type=OptionType.PUT)).price
        result = service.implied_volatility(market_price, 100.0, 100.0, 0.25, 0.05, OptionType.PUT)
        assert result.converged
        assert result.implied_volatility == pytest.approx(0.32, abs=1e-4)

    @pytest.mark.parametrize("kwargs,field", [
        ({"market_price": 0.0}, "market_price"),
        ({"spot_price": -1.0}, "spot_price"),
        ({"strike_price": 0.0}, "strike_price"),
        ({"time_to_expiry": 0.0}, "time_to_expiry"),
        ({"dividend_yield": -0.02}, "dividend_yield"),
    ])
    def test_invalid_inputs_rejected(self, service, kwargs, field):
        args = dict(
            market_price=4.0, spot_price=100.0, strike_price=100.0,
            time_to_expiry=0.25, risk_free_rate=0.05, option_type=OptionType.CALL,
        )
        args.update(kwargs)
        result = service.implied_volatility(**args)
        assert not result.success
        assert field in result.error_message

    def test_uses_configured_iteration_budget(self):
        service = OptionAnalyticsService(PricingEngineConfig(max_iterations=1, tolerance=1e-12))
        result = service.implied_volatility(4.0, 100.0, 100.0, 0.25, 0.05, OptionType.CALL)
        assert result.success
        assert result.iterations == 1
        assert result.status == SolveStatus.MAX_ITERATIONS_EXCEEDED

    def test_uses_configured_bounds(self):
        config = PricingEngineConfig(max_iterations=1, tolerance=1e-12, iv_upper_bound=0.5)
        service = OptionAnalyticsService(config)
        # 第一步牛顿更新超过上限 0.5, 被截断
        result = service.implied_volatility(40.0, 100.0, 100.0, 0.25, 0.05, OptionType.CALL)
        assert result.implied_volatility == 0.5

    def test_batch_isolates_invalid_quote(self, service):
        good = service.price(_make_input(volatility=0.25)).price
        quotes = [
            IVQuote(good, 100.0, 100.0, 0.25, 0.05, OptionType.CALL),
            IVQuote(-1.0, 100.0, 100.0, 0.25, 0.05, OptionType.CALL),
        ]
        results = service.implied_volatility_batch(quotes)
        assert results[0].implied_volatility == pytest.approx(0.25, abs=1e-4)
        assert not results[1].success


class TestAnalyze:

    def test_bundles_greeks_and_risk_metrics(self, service):
        params = _make_input(strike_price=110.0, time_to_expiry=30 / 365, volatility=0.3)
        analytics = service.analyze(params, is_selling=True)

        risk = RiskMetricsCalculator()
        assert analytics.success
        assert analytics.greeks == service.price(params)
        assert analytics.probability_of_profit == risk.probability_of_profit(
            100.0, 110.0, 30 / 365, 0.3, OptionType.CALL, True,
        )
        assert analytics.expected_move.one_std_dev == pytest.approx(100.0 * 0.3 * math.sqrt(30 / 365))

    def test_explicit_days_to_expiry(self, service):
        analytics = service.analyze(_make_input(), days_to_expiry=365)
        assert analytics.expected_move.one_std_dev == pytest.approx(20.0)
        assert analytics.expected_move.two_std_dev == pytest.approx(40.0)

    def test_invalid_input_has_no_metrics(self, service):
        analytics = service.analyze(_make_input(volatility=0.0))
        assert not analytics.success
        assert analytics.probability_of_profit is None
        assert analytics.expected_move is None
