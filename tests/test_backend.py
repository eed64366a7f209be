"""
FinWell - Test Suite
====================
Tests for the scoring engine, allocation analyzer, reports and API.
"""

import os
import sys
from datetime import date

import pytest
from pydantic import ValidationError

# Import modules to test
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'backend'))

from wealth_constants import (
    AssetClass,
    AllocationStatus,
    HealthTier,
    RiskProfile,
    IDEAL_ALLOCATION,
    IDEAL_RANGES,
    SAVINGS_RATIO_THRESHOLDS,
    EMERGENCY_COVER_THRESHOLDS,
    DEBT_RATIO_THRESHOLDS,
    score_at_least,
    score_at_most,
    get_reference_summary,
)
from models import (
    HealthInputs,
    HealthScores,
    InvestmentFlags,
    PortfolioInputs,
    coerce_amount,
    coerce_yes_no,
)
from health_scorer import (
    FinancialHealthScorer,
    compute_health_scores,
    classify_health,
)
from allocation_analyzer import (
    compute_allocation,
    classify_risk,
    classify_difference,
    describe_risk,
    describe_status,
    chart_data,
    format_money,
)
from report_builder import (
    build_health_report,
    build_portfolio_report,
    build_allocation_summary,
)


@pytest.fixture
def healthy_inputs():
    """Household from the worked example: total 29, Excellent."""
    return HealthInputs(
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


@pytest.fixture
def sample_portfolio():
    return PortfolioInputs(equity=500000, debt=200000, gold=50000, reit=50000, cash=200000)


# =============================================================================
# CONSTANTS TESTS
# =============================================================================

class TestConstants:
    """Test reference tables and threshold helpers."""

    def test_ideal_allocation_values(self):
        """Targets leave 2.5 points unassigned; the table is not normalised."""
        assert IDEAL_ALLOCATION == {
            AssetClass.EQUITY: 50,
            AssetClass.DEBT: 27.5,
            AssetClass.GOLD: 7.5,
            AssetClass.REIT: 7.5,
            AssetClass.CASH: 5,
        }
        assert sum(IDEAL_ALLOCATION.values()) == 97.5

    def test_every_asset_class_has_ideal_and_range(self):
        for asset in AssetClass:
            assert asset in IDEAL_ALLOCATION
            assert asset in IDEAL_RANGES

    def test_ideal_within_display_range(self):
        for asset, percent in IDEAL_ALLOCATION.items():
            assert IDEAL_RANGES[asset]["min"] <= percent <= IDEAL_RANGES[asset]["max"]

    def test_savings_thresholds_inclusive(self):
        assert score_at_least(30, SAVINGS_RATIO_THRESHOLDS) == 5
        assert score_at_least(29.99, SAVINGS_RATIO_THRESHOLDS) == 4
        assert score_at_least(20, SAVINGS_RATIO_THRESHOLDS) == 4
        assert score_at_least(10, SAVINGS_RATIO_THRESHOLDS) == 3
        assert score_at_least(1, SAVINGS_RATIO_THRESHOLDS) == 2
        assert score_at_least(0.99, SAVINGS_RATIO_THRESHOLDS) == 1
        assert score_at_least(-50, SAVINGS_RATIO_THRESHOLDS) == 1

    def test_emergency_thresholds_inclusive(self):
        assert score_at_least(6, EMERGENCY_COVER_THRESHOLDS) == 5
        assert score_at_least(4, EMERGENCY_COVER_THRESHOLDS) == 4
        assert score_at_least(3, EMERGENCY_COVER_THRESHOLDS) == 3
        assert score_at_least(1, EMERGENCY_COVER_THRESHOLDS) == 2
        assert score_at_least(0.5, EMERGENCY_COVER_THRESHOLDS) == 1

    def test_debt_thresholds_lower_is_better(self):
        assert score_at_most(0, DEBT_RATIO_THRESHOLDS) == 5
        assert score_at_most(20, DEBT_RATIO_THRESHOLDS) == 5
        assert score_at_most(20.01, DEBT_RATIO_THRESHOLDS) == 4
        assert score_at_most(30, DEBT_RATIO_THRESHOLDS) == 4
        assert score_at_most(40, DEBT_RATIO_THRESHOLDS) == 3
        assert score_at_most(50, DEBT_RATIO_THRESHOLDS) == 2
        assert score_at_most(50.01, DEBT_RATIO_THRESHOLDS) == 1

    def test_reference_summary_lists_assets_and_tiers(self):
        summary = get_reference_summary()
        assert "Equities: 50% (range 40-60%)" in summary
        assert "Excellent: 26+ of 30" in summary
        assert "Needs Attention: below 15" in summary


# =============================================================================
# INPUT MODEL TESTS
# =============================================================================

class TestInputModels:
    """Test coercion of raw form values."""

    def test_coerce_amount_blank_and_invalid(self):
        assert coerce_amount(None) == 0.0
        assert coerce_amount("") == 0.0
        assert coerce_amount("   ") == 0.0
        assert coerce_amount("abc") == 0.0
        assert coerce_amount(float("nan")) == 0.0
        assert coerce_amount(float("inf")) == 0.0

    def test_coerce_amount_negative_is_zero(self):
        assert coerce_amount(-500) == 0.0
        assert coerce_amount("-500") == 0.0

    def test_coerce_amount_numeric_strings(self):
        assert coerce_amount("1500.5") == 1500.5
        assert coerce_amount("1,00,000") == 100000.0

    def test_coerce_yes_no(self):
        assert coerce_yes_no("Yes") is True
        assert coerce_yes_no("yes") is True
        assert coerce_yes_no(True) is True
        assert coerce_yes_no("No") is False
        assert coerce_yes_no(None) is False
        assert coerce_yes_no("maybe") is False

    def test_health_inputs_defaults(self):
        """A fresh snapshot is the reset state of the form."""
        inputs = HealthInputs()
        assert inputs.monthly_income == 0
        assert inputs.monthly_expenses == 0
        assert inputs.emergency_fund == 0
        assert inputs.monthly_emis == 0
        assert inputs.income_stability_rating == 3
        assert inputs.investments.active_count == 0
        assert inputs.regular_investments is False
        assert inputs.health_insurance is False
        assert inputs.life_insurance is False

    def test_health_inputs_coerce_form_strings(self):
        inputs = HealthInputs(monthly_income="50000", monthly_expenses="", emergency_fund="n/a", monthly_emis=None)
        assert inputs.monthly_income == 50000
        assert inputs.monthly_expenses == 0
        assert inputs.emergency_fund == 0
        assert inputs.monthly_emis == 0

    def test_stability_rating_clamped(self):
        assert HealthInputs(income_stability_rating=9).income_stability_rating == 5
        assert HealthInputs(income_stability_rating=0).income_stability_rating == 1
        assert HealthInputs(income_stability_rating="4").income_stability_rating == 4
        assert HealthInputs(income_stability_rating="high").income_stability_rating == 3

    def test_ratios_guard_zero_denominators(self):
        inputs = HealthInputs(monthly_income=0, monthly_expenses=0, emergency_fund=10000, monthly_emis=5000)
        assert inputs.savings_ratio == 0
        assert inputs.emergency_cover_months == 0
        assert inputs.debt_to_income_ratio == 0

    def test_ratios(self, healthy_inputs):
        assert healthy_inputs.savings_ratio == pytest.approx(40)
        assert healthy_inputs.emergency_cover_months == pytest.approx(4)
        assert healthy_inputs.debt_to_income_ratio == pytest.approx(15)

    def test_null_investments_default(self):
        """A null investments block reads as no instruments held."""
        inputs = HealthInputs(investments=None)
        assert inputs.investments == InvestmentFlags()
        assert inputs.investments.active_count == 0

    def test_investment_flags_count(self):
        flags = InvestmentFlags(shares=True, public_provident_fund="Yes", other="No")
        assert flags.active_count == 2

    def test_portfolio_inputs_total(self, sample_portfolio):
        assert sample_portfolio.total_portfolio == 1000000
        assert sample_portfolio.amount_for(AssetClass.GOLD) == 50000

    def test_portfolio_inputs_coerce(self):
        inputs = PortfolioInputs(equity="1000", debt="", gold="x", reit=None, cash=-5)
        assert inputs.total_portfolio == 1000

    def test_health_scores_reject_out_of_range(self):
        with pytest.raises(ValidationError):
            HealthScores(
                income_stability=6, expense_management=1, emergency_fund=1,
                debt_management=1, investments=1, insurance=1,
            )


# =============================================================================
# HEALTH SCORER TESTS
# =============================================================================

class TestHealthScorer:
    """Test the six-factor scoring rules."""

    @pytest.fixture
    def scorer(self):
        return FinancialHealthScorer()

    def test_worked_example(self, healthy_inputs):
        """Four months of cover scores 4, not 5."""
        scores = compute_health_scores(healthy_inputs)

        assert scores.income_stability == 5
        assert scores.expense_management == 5
        assert scores.emergency_fund == 4
        assert scores.debt_management == 5
        assert scores.investments == 5
        assert scores.insurance == 5
        assert scores.total_score == 29
        assert scores.tier == HealthTier.EXCELLENT
        assert scores.interpretation == "Excellent Financial Health"

    def test_stability_is_pass_through(self):
        for rating in range(1, 6):
            scores = compute_health_scores(HealthInputs(income_stability_rating=rating))
            assert scores.income_stability == rating

    def test_zero_income_asymmetry(self):
        """With no income, expenses score 1 while debt still scores 5."""
        inputs = HealthInputs(monthly_income=0, monthly_expenses=20000, monthly_emis=8000)
        scores = compute_health_scores(inputs)
        assert scores.expense_management == 1
        assert scores.debt_management == 5

    def test_expenses_exceeding_income(self):
        inputs = HealthInputs(monthly_income=50000, monthly_expenses=75000)
        assert compute_health_scores(inputs).expense_management == 1

    def test_expense_management_bands(self):
        def score(expenses):
            return compute_health_scores(HealthInputs(monthly_income=100000, monthly_expenses=expenses)).expense_management

        assert score(50000) == 5
        assert score(75000) == 4
        assert score(85000) == 3
        assert score(95000) == 2
        assert score(99500) == 1

    def test_emergency_fund_bands(self):
        def score(fund):
            return compute_health_scores(HealthInputs(monthly_expenses=10000, emergency_fund=fund)).emergency_fund

        assert score(60000) == 5
        assert score(40000) == 4
        assert score(30000) == 3
        assert score(10000) == 2
        assert score(5000) == 1
        assert score(0) == 1

    def test_emergency_fund_without_expenses(self):
        """No expenses means zero cover, even with savings."""
        inputs = HealthInputs(monthly_expenses=0, emergency_fund=500000)
        assert compute_health_scores(inputs).emergency_fund == 1

    def test_debt_management_bands(self):
        def score(emis):
            return compute_health_scores(HealthInputs(monthly_income=100000, monthly_emis=emis)).debt_management

        assert score(0) == 5
        assert score(25000) == 4
        assert score(35000) == 3
        assert score(45000) == 2
        assert score(60000) == 1

    def test_investments_three_regular(self, scorer):
        flags = InvestmentFlags(mutual_fund=True, shares=True, other=True)
        assert scorer._score_investments(flags, True) == 5

    def test_investments_three_irregular(self, scorer):
        flags = InvestmentFlags(mutual_fund=True, shares=True, other=True)
        assert scorer._score_investments(flags, False) == 3

    def test_investments_two_regular(self, scorer):
        flags = InvestmentFlags(mutual_fund=True, shares=True)
        assert scorer._score_investments(flags, True) == 4

    def test_investments_one_regular(self, scorer):
        assert scorer._score_investments(InvestmentFlags(shares=True), True) == 3

    def test_investments_fixed_deposit_only_scores_three(self, scorer):
        """Fixed deposit counts as an active investment, so the 2-point rule never applies."""
        assert scorer._score_investments(InvestmentFlags(fixed_deposit=True), False) == 3

    def test_investments_none(self, scorer):
        assert scorer._score_investments(InvestmentFlags(), True) == 1

    def test_insurance(self):
        def score(health, life):
            return compute_health_scores(HealthInputs(health_insurance=health, life_insurance=life)).insurance

        assert score("Yes", "Yes") == 5
        assert score("Yes", "No") == 3
        assert score("No", "Yes") == 3
        assert score("No", "No") == 1

    def test_reset_defaults_score(self):
        """The empty form scores 3+1+1+5+1+1."""
        scores = compute_health_scores(HealthInputs())
        assert scores.factor_scores() == {
            "income_stability": 3,
            "expense_management": 1,
            "emergency_fund": 1,
            "debt_management": 5,
            "investments": 1,
            "insurance": 1,
        }
        assert scores.total_score == 12
        assert scores.tier == HealthTier.NEEDS_ATTENTION

    def test_scores_always_in_range(self):
        samples = [
            HealthInputs(),
            HealthInputs(monthly_income=1, monthly_expenses=10**9, monthly_emis=10**9),
            HealthInputs(monthly_income=10**9, emergency_fund=10**12, monthly_expenses=1),
        ]
        for inputs in samples:
            scores = compute_health_scores(inputs)
            for value in scores.factor_scores().values():
                assert 1 <= value <= 5
            assert 6 <= scores.total_score <= 30

    def test_idempotent(self, healthy_inputs):
        assert compute_health_scores(healthy_inputs) == compute_health_scores(healthy_inputs)


class TestHealthTiers:
    """Test total score classification."""

    @pytest.mark.parametrize("total,tier", [
        (30, HealthTier.EXCELLENT),
        (26, HealthTier.EXCELLENT),
        (25, HealthTier.GOOD),
        (21, HealthTier.GOOD),
        (20, HealthTier.AVERAGE),
        (15, HealthTier.AVERAGE),
        (14, HealthTier.NEEDS_ATTENTION),
        (6, HealthTier.NEEDS_ATTENTION),
    ])
    def test_classify_health(self, total, tier):
        assert classify_health(total) == tier


# =============================================================================
# ALLOCATION ANALYZER TESTS
# =============================================================================

class TestAllocationAnalyzer:
    """Test allocation percentages, risk profile and surplus/deficit."""

    def test_worked_example(self, sample_portfolio):
        outcome = compute_allocation(sample_portfolio)

        assert outcome.total_portfolio == 1000000
        assert outcome.actual_allocations[AssetClass.EQUITY] == pytest.approx(50)
        assert outcome.actual_allocations[AssetClass.DEBT] == pytest.approx(20)
        assert outcome.actual_allocations[AssetClass.GOLD] == pytest.approx(5)
        assert outcome.actual_allocations[AssetClass.REIT] == pytest.approx(5)
        assert outcome.actual_allocations[AssetClass.CASH] == pytest.approx(20)
        assert outcome.risk_profile == RiskProfile.MODERATE

        statuses = {r.asset_class: r.status for r in outcome.per_asset_results}
        assert statuses == {
            AssetClass.EQUITY: AllocationStatus.BALANCED,
            AssetClass.DEBT: AllocationStatus.DEFICIT,
            AssetClass.GOLD: AllocationStatus.DEFICIT,
            AssetClass.REIT: AllocationStatus.DEFICIT,
            AssetClass.CASH: AllocationStatus.SURPLUS,
        }

    def test_deviation_amounts(self, sample_portfolio):
        outcome = compute_allocation(sample_portfolio)
        assert outcome.result_for(AssetClass.DEBT).difference_percent == pytest.approx(-7.5)
        assert outcome.result_for(AssetClass.DEBT).deviation_amount == pytest.approx(-75000)
        assert outcome.result_for(AssetClass.CASH).deviation_amount == pytest.approx(150000)
        assert outcome.result_for(AssetClass.EQUITY).deviation_amount == pytest.approx(0)

    def test_results_in_table_order(self, sample_portfolio):
        outcome = compute_allocation(sample_portfolio)
        assert [r.asset_class for r in outcome.per_asset_results] == list(AssetClass)

    def test_percentages_sum_to_100(self):
        outcome = compute_allocation(PortfolioInputs(equity=1234.5, debt=987, gold=55, reit=3, cash=1))
        assert sum(outcome.actual_allocations.values()) == pytest.approx(100)

    def test_empty_portfolio(self):
        outcome = compute_allocation(PortfolioInputs())
        assert outcome.total_portfolio == 0
        assert all(p == 0 for p in outcome.actual_allocations.values())
        assert outcome.is_analyzable is False
        assert outcome.risk_profile == RiskProfile.CONSERVATIVE
        for result in outcome.per_asset_results:
            assert result.deviation_amount == 0
        assert outcome.recommendations == []

    def test_single_asset_portfolio(self):
        outcome = compute_allocation(PortfolioInputs(cash=1000))
        assert outcome.actual_allocations[AssetClass.CASH] == 100
        assert outcome.risk_profile == RiskProfile.CONSERVATIVE
        assert outcome.result_for(AssetClass.CASH).status == AllocationStatus.SURPLUS

    def test_ideal_portfolio_is_balanced(self):
        outcome = compute_allocation(PortfolioInputs(equity=500, debt=275, gold=75, reit=75, cash=50))
        assert all(r.status == AllocationStatus.BALANCED for r in outcome.per_asset_results)
        assert outcome.recommendations == []

    @pytest.mark.parametrize("equity,profile", [
        (100, RiskProfile.AGGRESSIVE),
        (55, RiskProfile.AGGRESSIVE),
        (54.9, RiskProfile.MODERATE),
        (40, RiskProfile.MODERATE),
        (39.9, RiskProfile.CONSERVATIVE),
        (0, RiskProfile.CONSERVATIVE),
    ])
    def test_classify_risk(self, equity, profile):
        assert classify_risk(equity) == profile

    def test_risk_ignores_other_assets(self):
        """Only equity drives the risk profile."""
        heavy_gold = compute_allocation(PortfolioInputs(equity=60, gold=40))
        heavy_debt = compute_allocation(PortfolioInputs(equity=60, debt=40))
        assert heavy_gold.risk_profile == heavy_debt.risk_profile == RiskProfile.AGGRESSIVE

    @pytest.mark.parametrize("difference,status", [
        (2, AllocationStatus.BALANCED),
        (-2, AllocationStatus.BALANCED),
        (0, AllocationStatus.BALANCED),
        (2.01, AllocationStatus.SURPLUS),
        (-2.01, AllocationStatus.DEFICIT),
    ])
    def test_tolerance_band(self, difference, status):
        assert classify_difference(difference) == status

    def test_recommendations(self, sample_portfolio):
        outcome = compute_allocation(sample_portfolio)
        recs = {r.asset_class: r for r in outcome.recommendations}

        assert set(recs) == {AssetClass.DEBT, AssetClass.GOLD, AssetClass.REIT, AssetClass.CASH}
        assert recs[AssetClass.DEBT].action == "increase"
        assert recs[AssetClass.DEBT].amount == pytest.approx(75000)
        assert recs[AssetClass.DEBT].percent == pytest.approx(7.5)
        assert recs[AssetClass.DEBT].message == f"Consider increasing Debt by {format_money(75000)} (7.5%)"
        assert recs[AssetClass.CASH].action == "reduce"
        assert recs[AssetClass.CASH].message.startswith("Consider reducing Cash & Cash Equivalents")

    def test_describe_helpers(self, sample_portfolio):
        outcome = compute_allocation(sample_portfolio)
        assert describe_risk(outcome) == (
            "Based on your equity allocation of 50.0%, you are classified as a moderate investor."
        )
        assert describe_status(outcome.result_for(AssetClass.CASH)).startswith("Over-invested by")
        assert describe_status(outcome.result_for(AssetClass.DEBT)).startswith("Under-invested by")
        assert describe_status(outcome.result_for(AssetClass.EQUITY)) == "Well balanced"

    def test_chart_data(self, sample_portfolio):
        data = chart_data(sample_portfolio)
        assert data["labels"][0] == "Equities"
        assert data["user_values"] == [500000, 200000, 50000, 50000, 200000]
        assert data["ideal_values"] == [50, 27.5, 7.5, 7.5, 5]
        assert sum(data["ideal_values"]) == 97.5
        assert len(data["colors"]) == 5

    def test_idempotent(self, sample_portfolio):
        assert compute_allocation(sample_portfolio) == compute_allocation(sample_portfolio)


# =============================================================================
# REPORT TESTS
# =============================================================================

class TestReports:
    """Test plain-text report generation."""

    def test_health_report(self, healthy_inputs):
        scores = compute_health_scores(healthy_inputs)
        report = build_health_report(healthy_inputs, scores, generated_on=date(2025, 1, 31))

        assert "Generated: 2025-01-31" in report
        assert "TOTAL: 29/30 - EXCELLENT" in report
        assert "Savings Ratio: 40.0%" in report
        assert "Investments Held: Fixed Deposit, Mutual Funds, PF" in report
        assert "[####-] 4/5" in report

    def test_portfolio_report(self, sample_portfolio):
        outcome = compute_allocation(sample_portfolio)
        report = build_portfolio_report(sample_portfolio, outcome, generated_on=date(2025, 1, 31))

        assert "Risk Profile: Moderate Investor" in report
        assert "Maintain" in report
        assert "SURPLUS" in report
        assert "150,000" in report
        assert "Consider reducing Cash & Cash Equivalents" in report

    def test_balanced_summary(self):
        outcome = compute_allocation(PortfolioInputs(equity=500, debt=275, gold=75, reit=75, cash=50))
        assert "well balanced" in build_allocation_summary(outcome)


# =============================================================================
# API TESTS
# =============================================================================

class TestAPI:
    """Test the FastAPI endpoints."""

    @pytest.fixture
    def client(self):
        from fastapi.testclient import TestClient
        from main import app
        return TestClient(app)

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_score_endpoint(self, client):
        response = client.post("/api/health-score", json={
            "monthly_income": "100000",
            "monthly_expenses": 60000,
            "emergency_fund": 240000,
            "monthly_emis": 15000,
            "income_stability_rating": 5,
            "investments": {"fixed_deposit": True, "mutual_fund": True, "provident_fund": True},
            "regular_investments": "Yes",
            "health_insurance": "Yes",
            "life_insurance": "Yes",
        })
        assert response.status_code == 200
        body = response.json()
        assert body["total_score"] == 29
        assert body["tier"] == "Excellent"
        assert body["scores"]["emergency_fund"] == 4
        assert body["inputs"]["savings_ratio"] == pytest.approx(40)

    def test_health_score_blank_form(self, client):
        response = client.post("/api/health-score", json={"monthly_income": "", "monthly_expenses": "abc"})
        assert response.status_code == 200
        assert response.json()["total_score"] == 12

    def test_health_score_null_investments(self, client):
        response = client.post("/api/health-score", json={"monthly_income": 50000, "investments": None})
        assert response.status_code == 200
        assert response.json()["scores"]["investments"] == 1

    def test_health_report_endpoint(self, client):
        response = client.post("/api/health-score/report", json={})
        assert response.status_code == 200
        assert response.json()["filename"].endswith(".txt")
        assert "NEEDS ATTENTION" in response.json()["content"]

    def test_portfolio_endpoint(self, client):
        response = client.post("/api/portfolio/analyze", json={
            "equity": 500000, "debt": 200000, "gold": 50000, "reit": 50000, "cash": 200000,
        })
        assert response.status_code == 200
        body = response.json()
        assert body["risk_profile"] == "moderate"
        assert body["is_analyzable"] is True
        assert body["actual_allocations"]["equity"] == pytest.approx(50)
        assert len(body["recommendations"]) == 4

    def test_empty_portfolio_rejected(self, client):
        response = client.post("/api/portfolio/analyze", json={})
        assert response.status_code == 400
        assert "Insufficient data" in response.json()["detail"]

    def test_empty_portfolio_report_rejected(self, client):
        response = client.post("/api/portfolio/report", json={"equity": "", "cash": "0"})
        assert response.status_code == 400

    def test_defaults(self, client):
        health = client.get("/api/defaults/health").json()
        assert health["income_stability_rating"] == 3
        assert health["regular_investments"] is False
        portfolio = client.get("/api/defaults/portfolio").json()
        assert portfolio["total_portfolio"] == 0

    def test_reference_endpoints(self, client):
        ideal = client.get("/api/reference/ideal-allocation").json()
        assert ideal["debt"]["ideal_percent"] == 27.5
        assert ideal["cash"]["range"]["label"] == "5%"

        tiers = client.get("/api/reference/health-tiers").json()["tiers"]
        assert [t["tier"] for t in tiers] == ["Excellent", "Good", "Average", "Needs Attention"]

    def test_reference_summary_endpoint(self, client):
        response = client.get("/api/reference/summary")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "Equities: 50% (range 40-60%)" in response.text
        assert "Needs Attention: below 15" in response.text
