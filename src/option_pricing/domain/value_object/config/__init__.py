from .pricing_engine_config import PricingEngineConfig

__all__ = [
    "PricingEngineConfig",
]
