"""
domain_service_config_loader.py - 领域服务 TOML 配置加载器

从 config/domain_service/ 目录下的 TOML 文件和环境变量 (.env) 加载领域服务配置，
并转换为对应的配置值对象。
"""
import os
import tomllib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from src.option_pricing.domain.value_object.config.pricing_engine_config import PricingEngineConfig


# 项目根目录 (从 src/main/config/ 向上 3 级)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_DOMAIN_SERVICE_CONFIG_DIR = _PROJECT_ROOT / "config" / "domain_service"

# 环境变量名 -> (配置字段, 类型)
_ENV_OVERRIDES = {
    "OPTION_PRICING_MAX_ITERATIONS": ("max_iterations", int),
    "OPTION_PRICING_TOLERANCE": ("tolerance", float),
}


def _load_toml(path: Path) -> dict:
    """加载 TOML 文件，文件不存在时返回空字典"""
    if not path.exists():
        return {}
    with open(path, "rb") as f:
        return tomllib.load(f)


def _load_env() -> dict:
    """从环境变量读取配置覆盖值，空字符串视为未配置"""
    env_path = _PROJECT_ROOT / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)

    values = {}
    for env_key, (field, cast) in _ENV_OVERRIDES.items():
        raw = os.getenv(env_key, "").strip()
        if not raw:
            continue
        try:
            values[field] = cast(raw)
        except ValueError:
            raise ValueError(f"环境变量 {env_key} 格式错误: {raw!r}") from None
    return values


def load_pricing_engine_config(
    overrides: Optional[dict] = None,
    path: Optional[Path] = None,
) -> PricingEngineConfig:
    """
    加载定价引擎配置

    优先级: overrides > 环境变量 > TOML 文件 > dataclass 默认值

    Args:
        overrides: 运行时覆盖值
        path: TOML 文件路径，默认 config/domain_service/pricing/option_analytics.toml
    """
    data = _load_toml(path or _DOMAIN_SERVICE_CONFIG_DIR / "pricing" / "option_analytics.toml")
    env = _load_env()
    overrides = overrides or {}

    iv_solver = data.get("iv_solver", {})

    kwargs = {}

    # max_iterations / tolerance
    for field in ("max_iterations", "tolerance"):
        if field in overrides:
            kwargs[field] = overrides[field]
        elif field in env:
            kwargs[field] = env[field]
        elif field in iv_solver:
            kwargs[field] = iv_solver[field]

    # 迭代边界
    if "iv_lower_bound" in overrides:
        kwargs["iv_lower_bound"] = overrides["iv_lower_bound"]
    elif "lower_bound" in iv_solver:
        kwargs["iv_lower_bound"] = iv_solver["lower_bound"]

    if "iv_upper_bound" in overrides:
        kwargs["iv_upper_bound"] = overrides["iv_upper_bound"]
    elif "upper_bound" in iv_solver:
        kwargs["iv_upper_bound"] = iv_solver["upper_bound"]

    return PricingEngineConfig(**kwargs)
