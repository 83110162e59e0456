"""
Application configuration for chainquant.

Holds the policy constants of the gas-price and risk façade with environment
overrides. The numeric toolkit itself takes everything it needs as arguments;
only the façade reads from here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GasPolicyConfig(BaseModel):
	"""
	Heuristics for gas-price prediction.

	Rationale:
	- fallback_* values are returned when no history is supplied at all.
	- trend_threshold is the relative first-to-last change that counts as rising/falling.
	- Confidence grows with history length and shrinks with volatility, then is clamped.
	"""

	fallback_prediction: float = Field(25.0, ge=0.0, description="Prediction (gwei) with no history")
	fallback_confidence: int = Field(50, ge=0, le=100)

	sma_window: int = Field(5, ge=1, description="Max trailing points averaged for the prediction")
	trend_threshold: float = Field(
		0.05, ge=0.0, description="Relative change beyond which the trend is rising/falling"
	)
	trend_adjustment: float = Field(
		0.02, ge=0.0, lt=1.0, description="Fraction added to (or removed from) the SMA on a trend"
	)

	confidence_base: float = Field(60.0, ge=0.0, le=100.0)
	confidence_per_point: float = Field(5.0, ge=0.0)
	volatility_penalty: float = Field(2.0, ge=0.0)
	confidence_floor: float = Field(60.0, ge=0.0, le=100.0)
	confidence_cap: float = Field(85.0, ge=0.0, le=100.0)


class RiskScoringConfig(BaseModel):
	"""
	Linear risk-score combiner.

	Notes:
	- Factors missing from weights contribute nothing.
	- neutral_score is returned when no factors are supplied.
	"""

	weights: Dict[str, float] = Field(
		default_factory=lambda: {
			"volatility": 0.4,
			"trend_strength": 0.3,
			"market_conditions": 0.3,
		}
	)
	neutral_score: int = Field(50, ge=0, le=100)
	score_floor: float = Field(0.0)
	score_cap: float = Field(100.0)


class Config(BaseSettings):
	"""
	Global configuration with environment overrides.
	"""

	model_config = SettingsConfigDict(
		env_prefix="CHAINQUANT_",
		env_file=".env",
		env_nested_delimiter="__",
		extra="ignore",
	)

	log_level: str = Field("INFO", description="Default logging level")
	logs_dir: Path = Field(Path("logs"), description="Directory for log files")
	log_to_file: bool = Field(False, description="Also write rotating log files to logs_dir")
	gas: GasPolicyConfig = GasPolicyConfig()
	risk: RiskScoringConfig = RiskScoringConfig()

	def model_post_init(self, __context: object) -> None:
		if self.log_to_file:
			self.logs_dir.mkdir(parents=True, exist_ok=True)


config = Config()
