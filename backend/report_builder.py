"""
FinWell - Report Builder
========================
Human-readable, plain-text summaries of calculator results.

The shells offer these as downloadable reports. Everything here reads
finished result models; nothing is recalculated.
"""

from datetime import date
from typing import Optional

from wealth_constants import (
    AllocationStatus,
    ASSET_INFO,
    HEALTH_FACTORS,
    INVESTMENT_LABELS,
    MAX_FACTOR_SCORE,
    MAX_TOTAL_SCORE,
    RISK_DISPLAY,
)
from models import HealthInputs, HealthScores, PortfolioInputs, AllocationOutcome
from allocation_analyzer import format_money, describe_risk

HEALTH_REPORT_FILENAME = "Financial_Health_Report.txt"
PORTFOLIO_REPORT_FILENAME = "Portfolio_Analysis_Report.txt"

DISCLAIMER = (
    "This analysis is for educational purposes only. Actual investment decisions "
    "should consider your age, financial goals, risk tolerance and time horizon."
)


def _score_bar(score: int) -> str:
    return "#" * score + "-" * (MAX_FACTOR_SCORE - score)


def build_health_summary(inputs: HealthInputs, scores: HealthScores) -> str:
    """Build a human-readable summary of a health assessment."""

    held = [
        label for key, label in INVESTMENT_LABELS.items()
        if getattr(inputs.investments, key)
    ]

    lines = [
        "=== FINANCIAL HEALTH INPUTS ===",
        f"Monthly Income: {format_money(inputs.monthly_income)} ({inputs.income_source.value})",
        f"Monthly Expenses: {format_money(inputs.monthly_expenses)}",
        f"Emergency Fund: {format_money(inputs.emergency_fund)}",
        f"Monthly EMIs: {format_money(inputs.monthly_emis)}",
        f"Investments Held: {', '.join(held) if held else 'None'}",
        f"Regular Investments: {'Yes' if inputs.regular_investments else 'No'}",
        f"Health Insurance: {'Yes' if inputs.health_insurance else 'No'}",
        f"Life Insurance: {'Yes' if inputs.life_insurance else 'No'}",
        "",
        f"Savings Ratio: {inputs.savings_ratio:.1f}%",
        f"Emergency Cover: {inputs.emergency_cover_months:.1f} months",
        f"Debt-to-Income: {inputs.debt_to_income_ratio:.1f}%",
        "",
        "=== FACTOR SCORES ===",
    ]

    for name, score in scores.factor_scores().items():
        label = HEALTH_FACTORS[name]["label"]
        lines.append(f"{label:<20} [{_score_bar(score)}] {score}/{MAX_FACTOR_SCORE}")

    lines += [
        "",
        f"=== TOTAL: {scores.total_score}/{MAX_TOTAL_SCORE} - {scores.tier.value.upper()} ===",
        scores.interpretation,
    ]

    return "\n".join(lines)


def build_allocation_summary(outcome: AllocationOutcome) -> str:
    """Build a human-readable summary of a portfolio analysis."""

    risk_text = RISK_DISPLAY[outcome.risk_profile]["text"]

    lines = [
        "=== PORTFOLIO SUMMARY ===",
        f"Total Investment: {format_money(outcome.total_portfolio)}",
        f"Risk Profile: {risk_text} Investor",
        describe_risk(outcome),
        "",
        "=== ALLOCATION VS TARGET ===",
        f"{'ASSET CLASS':<26}{'ACTUAL':>8}{'TARGET':>8}  {'STATUS':<10}ACTION REQUIRED",
    ]

    for result in outcome.per_asset_results:
        label = ASSET_INFO[result.asset_class]["short_label"]
        if result.status == AllocationStatus.BALANCED:
            action = "Maintain"
        else:
            action = f"{round(abs(result.deviation_amount)):,}"
        lines.append(
            f"{label:<26}{result.actual_percent:>7.1f}%{result.ideal_percent:>7}%  "
            f"{result.status.value.upper():<10}{action}"
        )

    lines += ["", "=== KEY RECOMMENDATIONS ==="]
    if outcome.recommendations:
        lines += [f"- {rec.message}" for rec in outcome.recommendations]
    else:
        lines.append("- Your portfolio is well balanced. Keep it up!")

    return "\n".join(lines)


def build_health_report(inputs: HealthInputs, scores: HealthScores, generated_on: Optional[date] = None) -> str:
    """Full downloadable health report with header and disclaimer."""
    generated_on = generated_on or date.today()
    return "\n".join([
        "FINANCIAL HEALTH REPORT",
        f"Generated: {generated_on.isoformat()}",
        "",
        build_health_summary(inputs, scores),
        "",
        DISCLAIMER,
    ])


def build_portfolio_report(
    inputs: PortfolioInputs,
    outcome: AllocationOutcome,
    generated_on: Optional[date] = None
) -> str:
    """Full downloadable portfolio report with holdings, analysis and disclaimer."""
    generated_on = generated_on or date.today()

    holdings = [
        f"{ASSET_INFO[result.asset_class]['label']}: {format_money(inputs.amount_for(result.asset_class))}"
        for result in outcome.per_asset_results
    ]

    return "\n".join([
        "WEALTH PORTFOLIO ANALYSIS",
        f"Generated: {generated_on.isoformat()}",
        "",
        "=== HOLDINGS ===",
        *holdings,
        "",
        build_allocation_summary(outcome),
        "",
        DISCLAIMER,
    ])
