"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    AnalysisConfig,
    AnalyticsParams,
    BollingerParams,
    MACDParams,
    MovingAverageParams,
    RSIParams,
    TrendParams,
    VolatilityParams,
    get_default_config,
)
from .validation import ConfigValidator

_SECTION_TYPES = {
    "moving_average": MovingAverageParams,
    "rsi": RSIParams,
    "bollinger": BollingerParams,
    "macd": MACDParams,
    "volatility": VolatilityParams,
    "trend": TrendParams,
    "analytics": AnalyticsParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: AnalysisConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_market_config(self, market_id: str) -> dict[str, Any]:
        """Load market-specific configuration overrides."""
        markets_file = self.config_dir / "markets.yaml"

        if not markets_file.exists():
            return {}

        with open(markets_file) as f:
            markets_config = yaml.safe_load(f) or {}

        return markets_config.get("markets", {}).get(market_id, {})  # type: ignore[no-any-return]

    def merge_config(
        self,
        market_id: str,
        call_overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Market-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        market_config = self.load_market_config(market_id)
        config = self._deep_merge(config, market_config)

        if call_overrides:
            config = self._deep_merge(config, call_overrides)

        return config

    def load_config(
        self,
        market_id: str,
        call_overrides: Optional[dict[str, Any]] = None
    ) -> AnalysisConfig:
        """Merge, validate and build the configuration for a market."""
        return self.build_config(self.merge_config(market_id, call_overrides))

    @staticmethod
    def build_config(config: dict[str, Any]) -> AnalysisConfig:
        """
        Convert a merged configuration dictionary into an AnalysisConfig.

        Raises:
            ConfigurationError: If validation fails or unknown keys are present
        """
        errors = ConfigValidator.validate_config(config)
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value})" for err in errors)
            raise ConfigurationError(
                f"Invalid analysis configuration: {details}",
                context={"errors": errors}
            )

        unknown_sections = set(config) - set(_SECTION_TYPES)
        if unknown_sections:
            raise ConfigurationError(
                f"Unknown configuration sections: {sorted(unknown_sections)}",
                parameter="config",
                value=sorted(unknown_sections)
            )

        sections = {}
        for name, params_type in _SECTION_TYPES.items():
            values = config.get(name, {})
            known = {f.name for f in fields(params_type)}
            unknown = set(values) - known
            if unknown:
                raise ConfigurationError(
                    f"Unknown {name} parameters: {sorted(unknown)}",
                    parameter=name,
                    value=sorted(unknown)
                )
            sections[name] = params_type(**values)

        return AnalysisConfig(**sections)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
