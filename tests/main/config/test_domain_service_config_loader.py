"""
领域服务配置加载单元测试

验证 TOML 解析、环境变量覆盖、运行时覆盖的优先级及默认值回退。
"""
import pytest

from src.main.config.domain_service_config_loader import load_pricing_engine_config
from src.option_pricing.domain.value_object.config.pricing_engine_config import PricingEngineConfig


_ENV_KEYS = ("OPTION_PRICING_MAX_ITERATIONS", "OPTION_PRICING_TOLERANCE")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def toml_file(tmp_path):
    path = tmp_path / "option_analytics.toml"
    path.write_text(
        "[iv_solver]\n"
        "max_iterations = 50\n"
        "tolerance = 0.001\n"
        "lower_bound = 0.02\n"
        "upper_bound = 3.0\n",
        encoding="utf-8",
    )
    return path


class TestLoadPricingEngineConfig:

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_pricing_engine_config(path=tmp_path / "missing.toml")
        assert config == PricingEngineConfig()

    def test_bundled_file_matches_defaults(self):
        assert load_pricing_engine_config() == PricingEngineConfig()

    def test_toml_values(self, toml_file):
        config = load_pricing_engine_config(path=toml_file)
        assert config.max_iterations == 50
        assert config.tolerance == 0.001
        assert config.iv_lower_bound == 0.02
        assert config.iv_upper_bound == 3.0

    def test_env_overrides_toml(self, toml_file, monkeypatch):
        monkeypatch.setenv("OPTION_PRICING_MAX_ITERATIONS", "200")
        monkeypatch.setenv("OPTION_PRICING_TOLERANCE", " ")
        config = load_pricing_engine_config(path=toml_file)
        assert config.max_iterations == 200
        assert config.tolerance == 0.001

    def test_overrides_win(self, toml_file, monkeypatch):
        monkeypatch.setenv("OPTION_PRICING_TOLERANCE", "0.01")
        config = load_pricing_engine_config(
            overrides={"tolerance": 1e-6, "iv_upper_bound": 4.0},
            path=toml_file,
        )
        assert config.tolerance == 1e-6
        assert config.iv_upper_bound == 4.0
        assert config.max_iterations == 50

    def test_malformed_env_value(self, tmp_path, monkeypatch):
        monkeypatch.setenv("OPTION_PRICING_MAX_ITERATIONS", "many")
        with pytest.raises(ValueError, match="OPTION_PRICING_MAX_ITERATIONS"):
            load_pricing_engine_config(path=tmp_path / "missing.toml")

    def test_invalid_values_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            load_pricing_engine_config(overrides={"max_iterations": -1}, path=tmp_path / "missing.toml")
