"""
FinWell - Financial Tools Suite
===============================
Streamlit front end for the two calculators.

Flow:
1. Home → pick a calculator
2. Financial Health Calculator (6-point evaluation)
3. Wealth Portfolio Analyzer (allocation vs ideal, risk profile, report)
"""

import sys
import os

# Path setup for Streamlit Cloud
_current_file = os.path.abspath(__file__)
_backend_dir = os.path.dirname(_current_file)
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

# Import backend modules
from wealth_constants import (
    AssetClass,
    ASSET_INFO, HEALTH_FACTORS, INVESTMENT_LABELS, IDEAL_RANGES,
    RISK_DISPLAY, TIER_DISPLAY, MAX_FACTOR_SCORE, MAX_TOTAL_SCORE,
    DEFAULT_STABILITY_RATING, IncomeSource,
)
from models import HealthInputs, InvestmentFlags, PortfolioInputs
from health_scorer import compute_health_scores
from allocation_analyzer import (
    compute_allocation, describe_status, describe_risk, chart_data, format_money,
)
from report_builder import (
    build_health_report, build_portfolio_report,
    HEALTH_REPORT_FILENAME, PORTFOLIO_REPORT_FILENAME, DISCLAIMER,
)


# =============================================================================
# PAGE CONFIG
# =============================================================================

st.set_page_config(page_title="FinWell", page_icon="📈", layout="wide")

SCREENS = ("home", "health", "portfolio")


# =============================================================================
# SESSION STATE
# =============================================================================

def init_session_state():
    """Initialize all session state variables."""
    if 'screen' not in st.session_state:
        st.session_state.screen = "home"

    if 'health_inputs' not in st.session_state:
        st.session_state.health_inputs = None
    if 'health_scores' not in st.session_state:
        st.session_state.health_scores = None

    if 'portfolio_inputs' not in st.session_state:
        st.session_state.portfolio_inputs = None
    if 'portfolio_outcome' not in st.session_state:
        st.session_state.portfolio_outcome = None


def go_to(screen: str):
    if screen in SCREENS:
        st.session_state.screen = screen


def reset_health():
    """Drop the snapshot and every widget value of the health form."""
    st.session_state.health_inputs = None
    st.session_state.health_scores = None
    for key in list(st.session_state.keys()):
        if key.startswith("hf_"):
            del st.session_state[key]


def reset_portfolio():
    st.session_state.portfolio_inputs = None
    st.session_state.portfolio_outcome = None
    for key in list(st.session_state.keys()):
        if key.startswith("pf_"):
            del st.session_state[key]


init_session_state()


# =============================================================================
# CHARTS
# =============================================================================

def pie_chart(labels, values, colors, title):
    fig = go.Figure(data=[go.Pie(
        labels=labels,
        values=values,
        hole=.4,
        sort=False,
        textinfo='percent',
        marker=dict(colors=colors, line=dict(color='#ffffff', width=3))
    )])
    fig.update_layout(
        title=title,
        legend=dict(orientation="h", yanchor="top", y=-0.1),
        margin=dict(t=60, b=20, l=20, r=20),
    )
    return fig


# =============================================================================
# HOME
# =============================================================================

def render_home():
    st.title("📈 Financial Tools Suite")
    st.caption("Comprehensive tools to analyze your financial health and optimize your investment portfolio")
    st.divider()

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("🧮 Financial Health Calculator")
        st.write(
            "Assess your overall financial wellness with a 6-point evaluation covering income, "
            "expenses, emergency funds, debt, investments, and insurance."
        )
        st.markdown("- Income Stability Analysis\n- Expense Management Score\n- Investment Evaluation")
        st.button("Get Started →", key="open_health", on_click=go_to, args=("health",), use_container_width=True)

    with col2:
        st.subheader("🥧 Wealth Portfolio Analyzer")
        st.write(
            "Analyze your portfolio allocation, discover your risk profile, and get personalized "
            "recommendations for optimal asset distribution."
        )
        st.markdown("- Asset Allocation Analysis\n- Risk Profile Assessment\n- Rebalancing Suggestions")
        st.button("Get Started →", key="open_portfolio", on_click=go_to, args=("portfolio",), use_container_width=True)


# =============================================================================
# FINANCIAL HEALTH CALCULATOR
# =============================================================================

def render_health():
    st.button("← Back to Home", on_click=go_to, args=("home",))
    st.header("🧮 Financial Health Calculator")

    # ---- Section 1: Income ----
    st.subheader("1. Income Stability")
    c1, c2 = st.columns(2)
    income = c1.text_input("Monthly Income (₹)", key="hf_income", placeholder="Enter your monthly income")
    source = c2.selectbox("Income Source", [s.value for s in IncomeSource], key="hf_source")
    rating = st.radio(
        "Income Stability Rating", [1, 2, 3, 4, 5],
        index=DEFAULT_STABILITY_RATING - 1, horizontal=True, key="hf_rating"
    )
    st.caption(HEALTH_FACTORS["income_stability"]["hint"])

    # ---- Section 2: Expenses ----
    st.subheader("2. Expense Management")
    expenses = st.text_input("Monthly Expenses (₹)", key="hf_expenses", placeholder="Enter your monthly expenses")

    # ---- Section 3: Emergency Fund ----
    st.subheader("3. Emergency Fund")
    emergency = st.text_input("Emergency Fund (₹)", key="hf_emergency", placeholder="Enter your emergency fund amount")

    # ---- Section 4: Debt ----
    st.subheader("4. Debt Management")
    emis = st.text_input("Monthly EMIs (₹)", key="hf_emis", placeholder="Enter total monthly EMI payments")

    # ---- Section 5: Investments ----
    st.subheader("5. Investments")
    flag_cols = st.columns(len(INVESTMENT_LABELS))
    flags = {
        key: col.checkbox(label, key=f"hf_inv_{key}")
        for col, (key, label) in zip(flag_cols, INVESTMENT_LABELS.items())
    }
    regular = st.radio("Do you invest regularly?", ["Yes", "No"], index=1, horizontal=True, key="hf_regular")

    # ---- Section 6: Insurance ----
    st.subheader("6. Insurance")
    c1, c2 = st.columns(2)
    health_ins = c1.radio("Health Insurance", ["Yes", "No"], index=1, horizontal=True, key="hf_health_ins")
    life_ins = c2.radio("Life Insurance", ["Yes", "No"], index=1, horizontal=True, key="hf_life_ins")

    snapshot = HealthInputs(
        monthly_income=income,
        income_source=source,
        income_stability_rating=rating,
        monthly_expenses=expenses,
        emergency_fund=emergency,
        monthly_emis=emis,
        investments=InvestmentFlags(**flags),
        regular_investments=regular,
        health_insurance=health_ins,
        life_insurance=life_ins,
    )

    # Live ratio hints, only once both sides of a ratio are entered
    hints = st.columns(3)
    if income and expenses:
        hints[0].metric("Savings Ratio", f"{snapshot.savings_ratio:.1f}%")
    if emergency and expenses:
        hints[1].metric("Emergency Cover", f"{snapshot.emergency_cover_months:.1f} months")
    if emis and income:
        hints[2].metric("Debt-to-Income", f"{snapshot.debt_to_income_ratio:.1f}%")

    st.divider()
    c1, c2 = st.columns([3, 1])
    if c1.button("🧮 Calculate Financial Health", type="primary", use_container_width=True):
        st.session_state.health_inputs = snapshot
        st.session_state.health_scores = compute_health_scores(snapshot)
    if st.session_state.health_scores:
        c2.button("🔄 Reset Calculator", on_click=reset_health, use_container_width=True)

    scores = st.session_state.health_scores
    if not scores:
        return

    st.divider()
    display = TIER_DISPLAY[scores.tier]
    st.subheader(f"{display['emoji']} {scores.tier.value}: {scores.total_score}/{MAX_TOTAL_SCORE}")
    st.write(scores.interpretation)

    for name, score in scores.factor_scores().items():
        st.progress(score / MAX_FACTOR_SCORE, text=f"{HEALTH_FACTORS[name]['label']}: {score}/{MAX_FACTOR_SCORE}")

    st.download_button(
        label="📥 Download Report",
        data=build_health_report(st.session_state.health_inputs, scores),
        file_name=HEALTH_REPORT_FILENAME,
        mime="text/plain",
    )


# =============================================================================
# WEALTH PORTFOLIO ANALYZER
# =============================================================================

def render_portfolio():
    st.button("← Back to Home", on_click=go_to, args=("home",))
    st.header("🥧 Wealth Portfolio Analyzer")
    st.caption("Analyze your portfolio allocation, discover your risk profile, and get personalized recommendations")

    raw = {}
    for asset in AssetClass:
        info = ASSET_INFO[asset]
        raw[asset.value] = st.text_input(
            f"{info['label']} (₹)",
            key=f"pf_{asset.value}",
            help=f"{info['purpose']} | Ideal: {IDEAL_RANGES[asset]['label']}",
        )

    snapshot = PortfolioInputs(**raw)
    st.metric("Total Portfolio", format_money(snapshot.total_portfolio))

    c1, c2 = st.columns([3, 1])
    analyze = c1.button(
        "📊 Analyze Portfolio", type="primary", use_container_width=True,
        disabled=snapshot.total_portfolio <= 0,
    )
    if analyze:
        st.session_state.portfolio_inputs = snapshot
        st.session_state.portfolio_outcome = compute_allocation(snapshot)
    if st.session_state.portfolio_outcome:
        c2.button("🔄 Reset Calculator", on_click=reset_portfolio, use_container_width=True)

    outcome = st.session_state.portfolio_outcome
    if not outcome or not outcome.is_analyzable:
        return

    # ---- Risk profile ----
    st.divider()
    risk = RISK_DISPLAY[outcome.risk_profile]
    st.subheader(f"{risk['emoji']} {risk['text']} Investor")
    st.write(describe_risk(outcome))

    # ---- Charts ----
    data = chart_data(st.session_state.portfolio_inputs)
    col1, col2 = st.columns(2)
    with col1:
        st.plotly_chart(
            pie_chart(data["labels"], data["user_values"], data["colors"], "Your Current Portfolio"),
            use_container_width=True
        )
    with col2:
        st.plotly_chart(
            pie_chart(data["labels"], data["ideal_values"], data["colors"], "Ideal Portfolio"),
            use_container_width=True
        )

    # ---- Per-asset table ----
    st.subheader("Portfolio Analysis & Recommendations")
    rows = []
    for result in outcome.per_asset_results:
        rows.append({
            "Asset Class": ASSET_INFO[result.asset_class]["short_label"],
            "Actual": f"{result.actual_percent:.1f}%",
            "Target": f"{result.ideal_percent}%",
            "Ideal Range": result.ideal_range.get("label", ""),
            "Status": result.status.value.upper(),
            "Detail": describe_status(result),
        })
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

    # ---- Recommendations ----
    st.markdown("#### 📌 Key Recommendations")
    if outcome.recommendations:
        for rec in outcome.recommendations:
            if rec.action == "reduce":
                st.warning(rec.message)
            else:
                st.info(rec.message)
    else:
        st.success("Your portfolio is well balanced. Keep it up!")
    st.caption(DISCLAIMER)

    st.download_button(
        label="📥 Download Report",
        data=build_portfolio_report(st.session_state.portfolio_inputs, outcome),
        file_name=PORTFOLIO_REPORT_FILENAME,
        mime="text/plain",
    )


# =============================================================================
# ROUTER
# =============================================================================

if st.session_state.screen == "health":
    render_health()
elif st.session_state.screen == "portfolio":
    render_portfolio()
else:
    render_home()
