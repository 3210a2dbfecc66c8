"""
Strategy configuration and thresholds.

Centralizes the indicator periods and entry threshold for the crossover
strategy. Values can come from code, a dict, or the environment / .env file.
"""

import logging
import os
from dataclasses import asdict, dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "BACKTEST_"

# camelCase parameter names -> field names
_CAMEL_CASE_KEYS = {
    "maPeriod": "ma_period",
    "rsiPeriod": "rsi_period",
    "rsiOverbought": "rsi_overbought",
    "macdFast": "macd_fast",
    "macdSlow": "macd_slow",
    "macdSignal": "macd_signal",
}


@dataclass(frozen=True)
class StrategyConfig:
    """Configuration for the SMA / MACD / RSI crossover strategy.

    TUNABLE PARAMETERS:
    - Trend filter: ma_period
    - Momentum filter: rsi_period, rsi_overbought
    - Entry/exit trigger: macd_fast, macd_slow, macd_signal
    """

    # Close must be above this SMA to enter
    ma_period: int = 20

    # Entries are skipped while RSI >= rsi_overbought
    # Range: 0 - 100 | Lower = fewer, earlier entries
    rsi_period: int = 14
    rsi_overbought: float = 70.0

    # MACD crossovers trigger entries and exits
    macd_fast: int = 12
    macd_slow: int = 26
    macd_signal: int = 9

    def __post_init__(self) -> None:
        """Validate configuration."""
        for name in ("ma_period", "rsi_period", "macd_fast", "macd_slow", "macd_signal"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got: {value!r}")
        if not 0 <= self.rsi_overbought <= 100:
            raise ValueError(
                f"rsi_overbought must be between 0 and 100, got: {self.rsi_overbought}"
            )
        if self.macd_fast >= self.macd_slow:
            logger.warning(
                f"macd_fast ({self.macd_fast}) >= macd_slow ({self.macd_slow}); "
                "crossover signals will be inverted or degenerate"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "StrategyConfig":
        """Create config from dictionary (snake_case or camelCase keys)."""
        values = {}
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = value
        return cls(**values)

    @classmethod
    def from_env(cls, env_path: str | None = None) -> "StrategyConfig":
        """
        Create config from environment variables.

        Looks for BACKTEST_MA_PERIOD, BACKTEST_RSI_PERIOD, BACKTEST_RSI_OVERBOUGHT,
        BACKTEST_MACD_FAST, BACKTEST_MACD_SLOW and BACKTEST_MACD_SIGNAL.
        Unset variables keep their defaults.
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        values: dict = {}
        for name, field in cls.__dataclass_fields__.items():
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is None or raw.strip() == "":
                continue
            try:
                values[name] = float(raw) if field.type in (float, "float") else int(raw)
            except ValueError as e:
                raise ValueError(f"{ENV_PREFIX}{name.upper()} is not a number: {raw!r}") from e
        return cls(**values)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)
