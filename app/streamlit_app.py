"""
Venture Power Law — Portfolio Size Explainer
============================================

Why you need 50-100 bets to make money in venture. Walks through the
power-law outcome model and simulates portfolios of N companies:
  1. The outcome model:      P(0x), P(1x), P(power-law upside)
  2. Single portfolio:       histogram of mean multiples for one size
  3. Benchmark curves:       P(>= 1x, 2x, 3x, 5x) vs portfolio size
  4. Full probability table: more sizes x more thresholds

Based on Jerry Neumann, "Power Laws in Venture Portfolio Construction" (2017).

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import SimulationConfig
from core.utils import benchmark_label
from core.validators import InvalidParameterError

from distributions.sampler import DistributionParams
from distributions.benchmarks import TABLE_BENCHMARKS, get_named_distribution

from engine.runner import run_simulation

from pm.metrics import compute_outcome_metrics
from pm.aggregator import (
    benchmark_curves,
    benchmark_table,
    benchmarks_to_dataframe,
    benchmarks_to_long,
    compute_histogram,
    histogram_to_dataframe,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

SOURCE_URL = "https://reactionwheel.net/2017/12/power-laws-in-venture-portfolio-construction.html"


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _fmt_pct(val):
    return f"{val * 100:.1f}%"


def _plot_histogram(hist_df: pd.DataFrame, *, title, height=260):
    chart = (
        alt.Chart(hist_df).mark_bar(opacity=0.85)
        .encode(
            x=alt.X("label:N", sort=None, title="Mean return multiple"),
            y=alt.Y("percent:Q", title="% of portfolios"),
            color=alt.condition(alt.datum.bin < 1, alt.value("#e5534b"), alt.value("steelblue")),
            tooltip=["label", "count", "percent"],
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_benchmark_curves(long_df: pd.DataFrame, *, title, height=320):
    chart = (
        alt.Chart(long_df).mark_line(point=True)
        .encode(
            x=alt.X("size:Q", title="Portfolio size (companies)"),
            y=alt.Y("probability:Q", title="Probability (%)", scale=alt.Scale(domain=[0, 100])),
            color=alt.Color("benchmark:N", title="Return >="),
            tooltip=["size", "benchmark", "probability"],
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _run_safely(fn, *args, **kwargs):
    try:
        return fn(*args, **kwargs)
    except InvalidParameterError as exc:
        st.error(f"Invalid parameters:\n{exc}")
        return None


# ═══════════════════════════════════════════════════════════════════════════
# PAGE CONFIG
# ═══════════════════════════════════════════════════════════════════════════
st.set_page_config(page_title="Venture Power Law", layout="wide")
st.title("Why You Need 50-100 Bets to Make Money in Venture")
st.caption(f"An interactive walkthrough of the power-law math behind portfolio construction. Based on [Jerry Neumann's analysis]({SOURCE_URL}).")

# ═══════════════════════════════════════════════════════════════════════════
# SIDEBAR — Global parameters
# ═══════════════════════════════════════════════════════════════════════════
defaults = get_named_distribution("neumann")
base_config = SimulationConfig()

with st.sidebar:
    st.header("Global Parameters")
    alpha = st.slider("Alpha (α)", 1.5, 2.5, float(defaults.alpha), 0.01,
                      help="Power-law exponent. Below 2 = infinite mean (fat tail). Neumann estimates ~1.98.")
    trials = st.slider("Simulation Runs", 500, 10000, base_config.trials, 500,
                       help="More runs = smoother results, but slower.")
    p_zero = st.slider("P(0x return)", 0.0, 0.8, float(defaults.p_zero), 0.01,
                       help="Probability of total loss.")
    p_one = st.slider("P(1x return)", 0.0, 0.8, float(defaults.p_one), 0.01,
                      help="Probability of just getting your money back.")

params = DistributionParams(alpha=alpha, p_zero=p_zero, p_one=p_one)
config = base_config.with_overrides(trials=trials)

with st.sidebar:
    st.markdown(f"P(power-law upside) = **{_fmt_pct(params.p_tail)}**")
    if params.p_tail <= 0:
        st.warning("No upside probability; adjust the sliders.")

# ═══════════════════════════════════════════════════════════════════════════
# STEP 1 — The outcome model
# ═══════════════════════════════════════════════════════════════════════════
st.subheader("1. The Venture Outcome Model")
c1, c2, c3 = st.columns(3)
c1.metric("Total Loss (0x)", _fmt_pct(params.p_zero))
c2.metric("Break Even (1x)", _fmt_pct(params.p_one))
c3.metric("Power-Law Upside (>1x)", _fmt_pct(params.p_tail))
if not params.has_finite_mean:
    st.info(f"α = {params.alpha:.2f} < 2: the expected value of the tail is infinite. "
            "No finite sample captures the true mean.")

# ═══════════════════════════════════════════════════════════════════════════
# STEP 2 — Single portfolio histogram
# ═══════════════════════════════════════════════════════════════════════════
st.subheader("2. Simulate a Single Portfolio")
port_size = st.slider("Portfolio Size", 1, 200, base_config.portfolio_size, 1)

if st.button("Run Histogram Simulation", type="primary"):
    with st.spinner(f"Simulating {trials:,} portfolios of {port_size} companies..."):
        sim = _run_safely(run_simulation, params, config.with_overrides(portfolio_size=port_size))
        if sim is not None:
            st.session_state["step2"] = {
                "hist": compute_histogram(sim.outcomes, config.histogram_bin_width, config.histogram_max_bin),
                "metrics": compute_outcome_metrics(sim.outcomes),
                "size": port_size,
            }

step2 = st.session_state.get("step2")
if step2 is not None:
    m = step2["metrics"]
    k1, k2, k3 = st.columns(3)
    k1.metric("Lost Money", f"{m.loss_pct:.1f}%")
    k2.metric("Mean Return", f"{m.mean:.2f}x")
    k3.metric("Median Return", f"{m.median:.2f}x")
    _plot_histogram(histogram_to_dataframe(step2["hist"]),
                    title=f"{m.n_trials:,} portfolios of {step2['size']} companies")

# ═══════════════════════════════════════════════════════════════════════════
# STEP 3 — Benchmark curves
# ═══════════════════════════════════════════════════════════════════════════
st.subheader("3. Probability of Hitting Return Benchmarks")
if st.button("Run Benchmark Simulation"):
    with st.spinner("Simulating every portfolio size..."):
        rows = _run_safely(benchmark_curves, params, config)
        if rows is not None:
            st.session_state["step3"] = rows

step3 = st.session_state.get("step3")
if step3 is not None:
    _plot_benchmark_curves(benchmarks_to_long(step3), title="P(portfolio return >= benchmark)")

# ═══════════════════════════════════════════════════════════════════════════
# STEP 4 — Full table
# ═══════════════════════════════════════════════════════════════════════════
st.subheader("4. The Full Picture")
if st.button("Generate Full Table"):
    with st.spinner(f"Simulating with {config.table_trials:,} runs per size..."):
        rows = _run_safely(benchmark_table, params, config)
        if rows is not None:
            st.session_state["step4"] = rows

step4 = st.session_state.get("step4")
if step4 is not None:
    table = benchmarks_to_dataframe(step4)
    pct_cols = [benchmark_label(b) for b in TABLE_BENCHMARKS if benchmark_label(b) in table.columns]
    st.dataframe(
        table.style.format({c: "{:.1f}%" for c in pct_cols}),
        use_container_width=True,
        hide_index=True,
    )
    st.caption("Results vary between runs due to random sampling. That's the point.")
