"""
FinWell - Reference Constants
=============================
Hardcoded scoring thresholds, health tiers and the ideal portfolio allocation.

These tables are the ONLY source of truth for both calculators. Threshold
tables are ordered and evaluated top-down: the first matching row wins.
"""

from enum import Enum
from typing import Dict, List, Tuple

# =============================================================================
# ENUMS
# =============================================================================

class AssetClass(str, Enum):
    EQUITY = "equity"
    DEBT = "debt"
    GOLD = "gold"
    REIT = "reit"
    CASH = "cash"


class RiskProfile(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class AllocationStatus(str, Enum):
    SURPLUS = "surplus"
    DEFICIT = "deficit"
    BALANCED = "balanced"


class HealthTier(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    NEEDS_ATTENTION = "Needs Attention"


class IncomeSource(str, Enum):
    SALARIED = "Salaried"
    BUSINESS = "Business"


# =============================================================================
# HEALTH SCORE THRESHOLDS
# Format: List of (bound, score) tuples, highest score first
# =============================================================================

MIN_FACTOR_SCORE = 1
MAX_FACTOR_SCORE = 5
NUM_HEALTH_FACTORS = 6
MIN_TOTAL_SCORE = MIN_FACTOR_SCORE * NUM_HEALTH_FACTORS
MAX_TOTAL_SCORE = MAX_FACTOR_SCORE * NUM_HEALTH_FACTORS

DEFAULT_STABILITY_RATING = 3

# Savings ratio in percent, higher is better (value >= bound)
SAVINGS_RATIO_THRESHOLDS: List[Tuple[float, int]] = [
    (30, 5),
    (20, 4),
    (10, 3),
    (1, 2),
]

# Emergency cover in months of expenses, higher is better (value >= bound)
EMERGENCY_COVER_THRESHOLDS: List[Tuple[float, int]] = [
    (6, 5),
    (4, 4),
    (3, 3),
    (1, 2),
]

# EMI-to-income ratio in percent, lower is better (value <= bound)
DEBT_RATIO_THRESHOLDS: List[Tuple[float, int]] = [
    (20, 5),
    (30, 4),
    (40, 3),
    (50, 2),
]

INSURANCE_SCORES = {
    "both": 5,
    "one": 3,
    "none": 1,
}


# =============================================================================
# HEALTH TIERS
# =============================================================================

HEALTH_TIERS: List[Tuple[int, HealthTier]] = [
    (26, HealthTier.EXCELLENT),
    (21, HealthTier.GOOD),
    (15, HealthTier.AVERAGE),
]

TIER_INTERPRETATIONS: Dict[HealthTier, str] = {
    HealthTier.EXCELLENT: "Excellent Financial Health",
    HealthTier.GOOD: "Good, scope for optimization",
    HealthTier.AVERAGE: "Average, needs improvement",
    HealthTier.NEEDS_ATTENTION: "Financial stress zone",
}

TIER_DISPLAY = {
    HealthTier.EXCELLENT: {"emoji": "🟢", "color": "excellent"},
    HealthTier.GOOD: {"emoji": "🟡", "color": "good"},
    HealthTier.AVERAGE: {"emoji": "🟠", "color": "average"},
    HealthTier.NEEDS_ATTENTION: {"emoji": "🔴", "color": "poor"},
}

# Labels and hints shown next to each factor in the shells
HEALTH_FACTORS: Dict[str, Dict[str, str]] = {
    "income_stability": {
        "label": "Income Stability",
        "hint": "5 = Very stable (fixed salary) | 3 = Variable but consistent | 1 = Highly irregular",
    },
    "expense_management": {
        "label": "Expense Management",
        "hint": "Savings ratio: 30%+ scores 5, below 1% scores 1",
    },
    "emergency_fund": {
        "label": "Emergency Fund",
        "hint": "6+ months of expenses scores 5",
    },
    "debt_management": {
        "label": "Debt Management",
        "hint": "EMIs at or below 20% of income score 5",
    },
    "investments": {
        "label": "Investments",
        "hint": "3+ instruments with regular investing scores 5",
    },
    "insurance": {
        "label": "Insurance",
        "hint": "Health and life cover together score 5",
    },
}

INVESTMENT_LABELS: Dict[str, str] = {
    "fixed_deposit": "Fixed Deposit",
    "mutual_fund": "Mutual Funds",
    "shares": "Shares",
    "provident_fund": "PF",
    "public_provident_fund": "PPF",
    "other": "Others",
}


# =============================================================================
# IDEAL ALLOCATION
# Midpoints of the general-purpose target ranges
# =============================================================================

IDEAL_ALLOCATION: Dict[AssetClass, float] = {
    AssetClass.EQUITY: 50,
    AssetClass.DEBT: 27.5,
    AssetClass.GOLD: 7.5,
    AssetClass.REIT: 7.5,
    AssetClass.CASH: 5,
}

# Display only; never used for surplus/deficit
IDEAL_RANGES: Dict[AssetClass, Dict] = {
    AssetClass.EQUITY: {"min": 40, "max": 60, "label": "40-60%"},
    AssetClass.DEBT: {"min": 20, "max": 35, "label": "20-35%"},
    AssetClass.GOLD: {"min": 5, "max": 10, "label": "5-10%"},
    AssetClass.REIT: {"min": 5, "max": 10, "label": "5-10%"},
    AssetClass.CASH: {"min": 5, "max": 5, "label": "5%"},
}

ASSET_INFO: Dict[AssetClass, Dict[str, str]] = {
    AssetClass.EQUITY: {
        "label": "Equities (Stocks/Mutual Funds)",
        "short_label": "Equities",
        "color": "#6366f1",
        "purpose": "Growth & beating inflation",
    },
    AssetClass.DEBT: {
        "label": "Debt (Bonds/FD/PF)",
        "short_label": "Debt",
        "color": "#ec4899",
        "purpose": "Stability & income",
    },
    AssetClass.GOLD: {
        "label": "Gold/Precious Metals",
        "short_label": "Gold/Precious Metals",
        "color": "#f59e0b",
        "purpose": "Hedge against inflation & crisis",
    },
    AssetClass.REIT: {
        "label": "Real Estate/REITs",
        "short_label": "Real Estate/REITs",
        "color": "#14b8a6",
        "purpose": "Long-term wealth & income",
    },
    AssetClass.CASH: {
        "label": "Cash & Cash Equivalents",
        "short_label": "Cash & Cash Equivalents",
        "color": "#8b5cf6",
        "purpose": "Liquidity for emergencies",
    },
}

# Percentage points either side of the ideal that still count as balanced
BALANCE_TOLERANCE = 2

# Equity percent lower bounds, most aggressive first
RISK_THRESHOLDS: List[Tuple[float, RiskProfile]] = [
    (55, RiskProfile.AGGRESSIVE),
    (40, RiskProfile.MODERATE),
]

RISK_DISPLAY: Dict[RiskProfile, Dict[str, str]] = {
    RiskProfile.CONSERVATIVE: {"text": "Conservative", "color": "#10b981", "emoji": "🛡️"},
    RiskProfile.MODERATE: {"text": "Moderate", "color": "#f59e0b", "emoji": "⚖️"},
    RiskProfile.AGGRESSIVE: {"text": "Aggressive", "color": "#ef4444", "emoji": "🚀"},
}


# =============================================================================
# THRESHOLD HELPERS
# =============================================================================

def score_at_least(value: float, thresholds: List[Tuple[float, int]]) -> int:
    """
    Score a higher-is-better ratio against an ordered threshold table.

    Args:
        value: The ratio to score
        thresholds: (bound, score) rows, highest bound first

    Returns:
        Score of the first row with value >= bound, else the minimum score
    """
    for bound, score in thresholds:
        if value >= bound:
            return score
    return MIN_FACTOR_SCORE


def score_at_most(value: float, thresholds: List[Tuple[float, int]]) -> int:
    """Score a lower-is-better ratio: first row with value <= bound wins."""
    for bound, score in thresholds:
        if value <= bound:
            return score
    return MIN_FACTOR_SCORE


def get_reference_summary() -> str:
    """Render the ideal allocation and tier boundaries as plain text."""
    output = []
    output.append("=" * 60)
    output.append("FINWELL REFERENCE DATA")
    output.append("=" * 60)

    output.append("\n--- IDEAL ALLOCATION ---")
    for asset, percent in IDEAL_ALLOCATION.items():
        output.append(f"{ASSET_INFO[asset]['short_label']}: {percent}% (range {IDEAL_RANGES[asset]['label']})")

    output.append("\n--- HEALTH TIERS ---")
    for bound, tier in HEALTH_TIERS:
        output.append(f"{tier.value}: {bound}+ of {MAX_TOTAL_SCORE}")
    output.append(f"{HealthTier.NEEDS_ATTENTION.value}: below {HEALTH_TIERS[-1][0]}")

    return "\n".join(output)
