"""
FinWell - Financial Health Scorer
=================================
Six-factor financial health scoring engine.

Each factor is a step function over a single ratio, scored 1-5 and
evaluated independently; the total is their plain sum (6-30). There is no
state between calls: the same HealthInputs always produce the same scores.
"""

import logging

from wealth_constants import (
    HealthTier,
    HEALTH_TIERS,
    INSURANCE_SCORES,
    SAVINGS_RATIO_THRESHOLDS,
    EMERGENCY_COVER_THRESHOLDS,
    DEBT_RATIO_THRESHOLDS,
    score_at_least,
    score_at_most,
)
from models import HealthInputs, HealthScores, InvestmentFlags

logger = logging.getLogger(__name__)


# =============================================================================
# SCORING ENGINE
# =============================================================================

class FinancialHealthScorer:
    """
    Scores a HealthInputs snapshot.
    Inputs are expected to be coerced already; scoring never fails.
    """

    def compute_health_scores(self, inputs: HealthInputs) -> HealthScores:
        """Score all six factors for one snapshot."""
        scores = HealthScores(
            income_stability=inputs.income_stability_rating,
            expense_management=self._score_expense_management(inputs),
            emergency_fund=self._score_emergency_fund(inputs),
            debt_management=self._score_debt_management(inputs),
            investments=self._score_investments(inputs.investments, inputs.regular_investments),
            insurance=self._score_insurance(inputs.health_insurance, inputs.life_insurance),
        )
        logger.debug(
            f"savings={inputs.savings_ratio:.1f}% cover={inputs.emergency_cover_months:.1f}m "
            f"debt={inputs.debt_to_income_ratio:.1f}% -> total {scores.total_score}"
        )
        return scores

    def _score_expense_management(self, inputs: HealthInputs) -> int:
        # Zero income gives a 0% savings ratio, which falls through to 1
        return score_at_least(inputs.savings_ratio, SAVINGS_RATIO_THRESHOLDS)

    def _score_emergency_fund(self, inputs: HealthInputs) -> int:
        return score_at_least(inputs.emergency_cover_months, EMERGENCY_COVER_THRESHOLDS)

    def _score_debt_management(self, inputs: HealthInputs) -> int:
        # Zero income gives a 0% debt ratio, which scores 5
        return score_at_most(inputs.debt_to_income_ratio, DEBT_RATIO_THRESHOLDS)

    def _score_investments(self, flags: InvestmentFlags, is_regular: bool) -> int:
        active = flags.active_count

        if active >= 3 and is_regular:
            return 5
        elif active >= 2 and is_regular:
            return 4
        elif active >= 1:
            return 3
        # Never reached: fixed_deposit is counted in active_count above.
        # Kept so the branch order matches the published scoring table.
        elif flags.fixed_deposit:
            return 2
        return 1

    def _score_insurance(self, has_health: bool, has_life: bool) -> int:
        if has_health and has_life:
            return INSURANCE_SCORES["both"]
        elif has_health or has_life:
            return INSURANCE_SCORES["one"]
        return INSURANCE_SCORES["none"]


def classify_health(total_score: int) -> HealthTier:
    """Map a 6-30 total onto its tier; the first bound reached wins."""
    for bound, tier in HEALTH_TIERS:
        if total_score >= bound:
            return tier
    return HealthTier.NEEDS_ATTENTION


_scorer = FinancialHealthScorer()


def compute_health_scores(inputs: HealthInputs) -> HealthScores:
    """Score a snapshot with the shared scorer."""
    return _scorer.compute_health_scores(inputs)


# =============================================================================
# DEMO / TESTING
# =============================================================================

def demo():
    """Score a sample household."""

    print("=" * 60)
    print("FINANCIAL HEALTH DEMO")
    print("=" * 60)

    inputs = HealthInputs(
        monthly_income=100000,
        monthly_expenses=60000,
        emergency_fund=240000,
        monthly_emis=15000,
        income_stability_rating=5,
        investments=InvestmentFlags(fixed_deposit=True, mutual_fund=True, provident_fund=True),
        regular_investments="Yes",
        health_insurance="Yes",
        life_insurance="Yes",
    )

    print("\n--- INPUTS ---")
    print(f"Monthly Income: {inputs.monthly_income:,.2f}")
    print(f"Savings Ratio: {inputs.savings_ratio:.1f}%")
    print(f"Emergency Cover: {inputs.emergency_cover_months:.1f} months")
    print(f"Debt-to-Income: {inputs.debt_to_income_ratio:.1f}%")

    scores = compute_health_scores(inputs)

    print("\n--- SCORES ---")
    for name, score in scores.factor_scores().items():
        print(f"{name}: {score}/5")
    print(f"Total: {scores.total_score}/30 -> {scores.tier.value} ({scores.interpretation})")


if __name__ == "__main__":
    demo()
