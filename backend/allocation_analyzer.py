"""
FinWell - Portfolio Allocation Analyzer
=======================================
Compares a user's asset mix against the fixed ideal allocation.

For each asset class the analyzer reports the actual share, the gap to the
ideal share, a surplus/deficit/balanced status (with a +-2 point tolerance)
and the money that gap represents. Risk profile is read from the equity
share alone.
"""

import os
import logging
from typing import Dict, List

from wealth_constants import (
    AssetClass,
    AllocationStatus,
    RiskProfile,
    IDEAL_ALLOCATION,
    IDEAL_RANGES,
    ASSET_INFO,
    RISK_THRESHOLDS,
    RISK_DISPLAY,
    BALANCE_TOLERANCE,
)
from models import (
    PortfolioInputs,
    AllocationOutcome,
    AssetAllocationResult,
    AllocationRecommendation,
)

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL = os.getenv("FINWELL_CURRENCY_SYMBOL", "₹")

ACTION_VERBS = {
    "increase": "increasing",
    "reduce": "reducing",
}


def classify_risk(equity_percent: float) -> RiskProfile:
    """
    Risk profile from the equity share only.

    Debt, gold, REIT and cash shares are deliberately ignored.
    """
    for bound, profile in RISK_THRESHOLDS:
        if equity_percent >= bound:
            return profile
    return RiskProfile.CONSERVATIVE


def classify_difference(difference: float) -> AllocationStatus:
    """Status for a gap in percentage points; exactly +-2 is still balanced."""
    if difference > BALANCE_TOLERANCE:
        return AllocationStatus.SURPLUS
    elif difference < -BALANCE_TOLERANCE:
        return AllocationStatus.DEFICIT
    return AllocationStatus.BALANCED


def format_money(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


# =============================================================================
# ANALYSIS ENGINE
# =============================================================================

class PortfolioAnalyzer:
    """
    Builds an AllocationOutcome from a PortfolioInputs snapshot.
    An empty portfolio is not an error: every share comes back as 0.
    """

    def compute_allocation(self, inputs: PortfolioInputs) -> AllocationOutcome:
        total = inputs.total_portfolio
        actual = self._actual_allocations(inputs, total)

        per_asset = [
            self._compare_to_ideal(asset, actual[asset], total)
            for asset in AssetClass
        ]

        outcome = AllocationOutcome(
            total_portfolio=total,
            actual_allocations=actual,
            risk_profile=classify_risk(actual[AssetClass.EQUITY]),
            per_asset_results=per_asset,
        )
        outcome.recommendations = build_recommendations(outcome)

        if outcome.is_analyzable:
            logger.debug(
                f"Analyzed portfolio of {total:,.2f}: {outcome.risk_profile.value}, "
                f"{len(outcome.recommendations)} recommendation(s)"
            )
        return outcome

    def _actual_allocations(self, inputs: PortfolioInputs, total: float) -> Dict[AssetClass, float]:
        if total == 0:
            return {asset: 0.0 for asset in AssetClass}
        return {
            asset: inputs.amount_for(asset) / total * 100
            for asset in AssetClass
        }

    def _compare_to_ideal(self, asset: AssetClass, actual_percent: float, total: float) -> AssetAllocationResult:
        ideal = IDEAL_ALLOCATION[asset]
        difference = actual_percent - ideal
        return AssetAllocationResult(
            asset_class=asset,
            ideal_percent=ideal,
            actual_percent=actual_percent,
            difference_percent=difference,
            status=classify_difference(difference),
            deviation_amount=total * (difference / 100),
            ideal_range=IDEAL_RANGES[asset],
        )


def build_recommendations(outcome: AllocationOutcome) -> List[AllocationRecommendation]:
    """One suggestion per non-balanced asset class, in table order."""
    recommendations = []
    if not outcome.is_analyzable:
        return recommendations

    for result in outcome.per_asset_results:
        if result.status == AllocationStatus.BALANCED:
            continue

        action = "increase" if result.status == AllocationStatus.DEFICIT else "reduce"
        amount = abs(result.deviation_amount)
        percent = abs(result.difference_percent)
        label = ASSET_INFO[result.asset_class]["short_label"]

        recommendations.append(AllocationRecommendation(
            asset_class=result.asset_class,
            action=action,
            amount=amount,
            percent=percent,
            message=f"Consider {ACTION_VERBS[action]} {label} by {format_money(amount)} ({percent:.1f}%)",
        ))

    return recommendations


def describe_status(result: AssetAllocationResult) -> str:
    """Short per-asset status line for result cards."""
    if result.status == AllocationStatus.SURPLUS:
        return f"Over-invested by {format_money(abs(result.deviation_amount))}"
    elif result.status == AllocationStatus.DEFICIT:
        return f"Under-invested by {format_money(abs(result.deviation_amount))}"
    return "Well balanced"


def describe_risk(outcome: AllocationOutcome) -> str:
    """Sentence explaining the risk classification."""
    equity = outcome.actual_allocations[AssetClass.EQUITY]
    text = RISK_DISPLAY[outcome.risk_profile]["text"].lower()
    return (
        f"Based on your equity allocation of {equity:.1f}%, "
        f"you are classified as a {text} investor."
    )


def chart_data(inputs: PortfolioInputs) -> Dict[str, List]:
    """Labels, values and colours for the user's and the ideal pie charts."""
    return {
        "labels": [ASSET_INFO[asset]["short_label"] for asset in AssetClass],
        "colors": [ASSET_INFO[asset]["color"] for asset in AssetClass],
        "user_values": [inputs.amount_for(asset) for asset in AssetClass],
        "ideal_values": [IDEAL_ALLOCATION[asset] for asset in AssetClass],
    }


_analyzer = PortfolioAnalyzer()


def compute_allocation(inputs: PortfolioInputs) -> AllocationOutcome:
    """Analyze a snapshot with the shared analyzer."""
    return _analyzer.compute_allocation(inputs)


# =============================================================================
# DEMO / TESTING
# =============================================================================

def demo():
    """Analyze a sample portfolio."""

    print("=" * 60)
    print("PORTFOLIO ALLOCATION DEMO")
    print("=" * 60)

    inputs = PortfolioInputs(equity=500000, debt=200000, gold=50000, reit=50000, cash=200000)
    outcome = compute_allocation(inputs)

    print(f"\nTotal Portfolio: {format_money(outcome.total_portfolio)}")
    print(f"Risk Profile: {outcome.risk_profile.value}")
    print(describe_risk(outcome))

    print("\n--- ALLOCATION ---")
    for result in outcome.per_asset_results:
        print(
            f"{result.asset_class.value:<8} actual {result.actual_percent:5.1f}% "
            f"ideal {result.ideal_percent:5.1f}% -> {result.status.value}"
        )

    print("\n--- RECOMMENDATIONS ---")
    for rec in outcome.recommendations:
        print(f"  - {rec.message}")


if __name__ == "__main__":
    demo()
