"""
FinWell - Data Models
=====================
Pydantic models for the two calculators.

These models serve as the contract between:
- Form input collection (Streamlit shell, HTTP API)
- The scoring and allocation engines
- Result display and report generation

Input models coerce absent or malformed values instead of rejecting them:
any amount that cannot be read as a non-negative number becomes 0.
"""

import logging
import math
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, computed_field

from wealth_constants import (
    AssetClass,
    AllocationStatus,
    HealthTier,
    IncomeSource,
    RiskProfile,
    DEFAULT_STABILITY_RATING,
    MIN_FACTOR_SCORE,
    MAX_FACTOR_SCORE,
    TIER_INTERPRETATIONS,
)

logger = logging.getLogger(__name__)


# =============================================================================
# INPUT COERCION
# =============================================================================

YES_VALUES = {"yes", "y", "true", "1"}


def coerce_amount(value: Any) -> float:
    """
    Read a monetary amount the way a lenient form would.

    None, blank strings, non-numeric text, NaN/infinity and negative
    numbers all become 0.0.
    """
    if value is None:
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Unparseable amount {value!r} coerced to 0")
        return 0.0
    if math.isnan(amount) or math.isinf(amount) or amount < 0:
        logger.warning(f"Out-of-domain amount {value!r} coerced to 0")
        return 0.0
    return amount


def coerce_yes_no(value: Any) -> bool:
    """Map a Yes/No style answer to a boolean; anything unknown is No."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in YES_VALUES


# =============================================================================
# FINANCIAL HEALTH MODELS
# =============================================================================

class InvestmentFlags(BaseModel):
    """Which investment instruments the user currently holds."""

    fixed_deposit: bool = False
    mutual_fund: bool = False
    shares: bool = False
    provident_fund: bool = False
    public_provident_fund: bool = False
    other: bool = False

    @field_validator('*', mode='before')
    @classmethod
    def normalize_flag(cls, v):
        return coerce_yes_no(v)

    @computed_field
    @property
    def active_count(self) -> int:
        """Number of instruments held."""
        return sum([
            self.fixed_deposit,
            self.mutual_fund,
            self.shares,
            self.provident_fund,
            self.public_provident_fund,
            self.other,
        ])


class HealthInputs(BaseModel):
    """
    Snapshot of the health form at the moment the user hits calculate.

    HealthInputs() with no arguments is the reset state of the form.
    """

    monthly_income: float = Field(default=0.0, ge=0)
    income_source: IncomeSource = IncomeSource.SALARIED
    income_stability_rating: int = Field(
        default=DEFAULT_STABILITY_RATING,
        ge=MIN_FACTOR_SCORE,
        le=MAX_FACTOR_SCORE,
        description="Self-assessed, 5 = very stable, 1 = highly irregular"
    )
    monthly_expenses: float = Field(default=0.0, ge=0)
    emergency_fund: float = Field(default=0.0, ge=0)
    monthly_emis: float = Field(default=0.0, ge=0, description="Total monthly loan EMIs")

    investments: InvestmentFlags = Field(default_factory=InvestmentFlags)
    regular_investments: bool = False
    health_insurance: bool = False
    life_insurance: bool = False

    @field_validator('monthly_income', 'monthly_expenses', 'emergency_fund', 'monthly_emis', mode='before')
    @classmethod
    def normalize_amount(cls, v):
        return coerce_amount(v)

    @field_validator('regular_investments', 'health_insurance', 'life_insurance', mode='before')
    @classmethod
    def normalize_yes_no(cls, v):
        return coerce_yes_no(v)

    @field_validator('investments', mode='before')
    @classmethod
    def normalize_investments(cls, v):
        if v is None:
            return InvestmentFlags()
        return v

    @field_validator('income_stability_rating', mode='before')
    @classmethod
    def normalize_rating(cls, v):
        try:
            rating = int(float(v))
        except (TypeError, ValueError, OverflowError):
            return DEFAULT_STABILITY_RATING
        return min(MAX_FACTOR_SCORE, max(MIN_FACTOR_SCORE, rating))

    @field_validator('income_source', mode='before')
    @classmethod
    def normalize_income_source(cls, v):
        if isinstance(v, IncomeSource):
            return v
        mapping = {
            "salaried": IncomeSource.SALARIED,
            "salary": IncomeSource.SALARIED,
            "business": IncomeSource.BUSINESS,
        }
        return mapping.get(str(v).strip().lower(), IncomeSource.SALARIED)

    @computed_field
    @property
    def savings_ratio(self) -> float:
        """Percent of income left after expenses; 0 when there is no income."""
        if self.monthly_income > 0:
            return (self.monthly_income - self.monthly_expenses) / self.monthly_income * 100
        return 0.0

    @computed_field
    @property
    def emergency_cover_months(self) -> float:
        """Months of expenses the emergency fund covers."""
        if self.monthly_expenses > 0:
            return self.emergency_fund / self.monthly_expenses
        return 0.0

    @computed_field
    @property
    def debt_to_income_ratio(self) -> float:
        """EMIs as a percent of income."""
        if self.monthly_income > 0:
            return self.monthly_emis / self.monthly_income * 100
        return 0.0


class HealthScores(BaseModel):
    """Six factor scores and the derived total and tier."""

    income_stability: int = Field(ge=MIN_FACTOR_SCORE, le=MAX_FACTOR_SCORE)
    expense_management: int = Field(ge=MIN_FACTOR_SCORE, le=MAX_FACTOR_SCORE)
    emergency_fund: int = Field(ge=MIN_FACTOR_SCORE, le=MAX_FACTOR_SCORE)
    debt_management: int = Field(ge=MIN_FACTOR_SCORE, le=MAX_FACTOR_SCORE)
    investments: int = Field(ge=MIN_FACTOR_SCORE, le=MAX_FACTOR_SCORE)
    insurance: int = Field(ge=MIN_FACTOR_SCORE, le=MAX_FACTOR_SCORE)

    model_config = {"frozen": True}

    def factor_scores(self) -> Dict[str, int]:
        """Factor name -> score, in display order."""
        return {
            "income_stability": self.income_stability,
            "expense_management": self.expense_management,
            "emergency_fund": self.emergency_fund,
            "debt_management": self.debt_management,
            "investments": self.investments,
            "insurance": self.insurance,
        }

    @computed_field
    @property
    def total_score(self) -> int:
        return sum(self.factor_scores().values())

    @computed_field
    @property
    def tier(self) -> HealthTier:
        from health_scorer import classify_health
        return classify_health(self.total_score)

    @computed_field
    @property
    def interpretation(self) -> str:
        return TIER_INTERPRETATIONS[self.tier]


# =============================================================================
# PORTFOLIO MODELS
# =============================================================================

class PortfolioInputs(BaseModel):
    """Current holdings per asset class, in currency units."""

    equity: float = Field(default=0.0, ge=0)
    debt: float = Field(default=0.0, ge=0)
    gold: float = Field(default=0.0, ge=0)
    reit: float = Field(default=0.0, ge=0)
    cash: float = Field(default=0.0, ge=0)

    @field_validator('*', mode='before')
    @classmethod
    def normalize_amount(cls, v):
        return coerce_amount(v)

    def amount_for(self, asset_class: AssetClass) -> float:
        return getattr(self, asset_class.value)

    @computed_field
    @property
    def total_portfolio(self) -> float:
        return sum(self.amount_for(asset) for asset in AssetClass)


class AssetAllocationResult(BaseModel):
    """Comparison of one asset class against its ideal share."""

    asset_class: AssetClass
    ideal_percent: float
    actual_percent: float
    difference_percent: float = Field(description="actual - ideal, in percentage points")
    status: AllocationStatus
    deviation_amount: float = Field(description="Positive = excess money, Negative = shortfall")
    ideal_range: Dict[str, Any] = Field(default_factory=dict, description="Display only")


class AllocationRecommendation(BaseModel):
    """A single rebalancing suggestion for a non-balanced asset class."""

    asset_class: AssetClass
    action: str = Field(pattern="^(increase|reduce)$")
    amount: float = Field(ge=0)
    percent: float = Field(ge=0)
    message: str


class AllocationOutcome(BaseModel):
    """Complete portfolio analysis result."""

    total_portfolio: float
    actual_allocations: Dict[AssetClass, float]
    risk_profile: RiskProfile
    per_asset_results: List[AssetAllocationResult]
    recommendations: List[AllocationRecommendation] = Field(default_factory=list)

    @computed_field
    @property
    def is_analyzable(self) -> bool:
        """False when there is nothing invested; callers should not surface results."""
        return self.total_portfolio > 0

    def result_for(self, asset_class: AssetClass) -> Optional[AssetAllocationResult]:
        for result in self.per_asset_results:
            if result.asset_class == asset_class:
                return result
        return None


# =============================================================================
# API REQUEST/RESPONSE MODELS
# =============================================================================

class HealthScoreResponse(BaseModel):
    """Response with scores and the ratios that produced them."""
    inputs: HealthInputs
    scores: HealthScores
    total_score: int
    tier: HealthTier
    interpretation: str


class ReportResponse(BaseModel):
    """Plain-text report ready for download."""
    filename: str
    content: str
