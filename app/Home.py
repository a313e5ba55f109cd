"""Calculadora do Primeiro Milhão — compound-interest projection page."""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repo root is on sys.path so `from app.components...` imports work
# when running `streamlit run app/Home.py`.
_root = str(Path(__file__).resolve().parent.parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

import pandas as pd
import streamlit as st
from pydantic import ValidationError

st.set_page_config(
    page_title="Calculadora do Primeiro Milhão",
    page_icon="💰",
    layout="wide",
    initial_sidebar_state="collapsed",
)

from app.components.charts import composition_chart, growth_chart, monthly_interest_chart
from app.components.forms import projection_form, seed_form_state
from app.components.theme import register_theme
from firstmillion.analytics.metrics import return_on_investment, yearly_breakdown
from firstmillion.config.defaults import (
    MILESTONE_AMOUNT,
    default_inputs,
    preset_inputs,
    preset_label,
    preset_names,
)
from firstmillion.config.schema import ProjectionInputs
from firstmillion.core.engine import ProjectionResult, project_inputs
from firstmillion.io.formatting import format_currency, format_duration, format_elapsed
from firstmillion.io.serialize import dump_inputs, dump_schedule_csv, dump_summary
from firstmillion.utils.exceptions import InputParseError
from firstmillion.utils.logging import configure_logging

configure_logging()

TABLE_PREVIEW_YEARS = 10


@st.cache_data(show_spinner=False)
def run_projection(inputs_json: str) -> ProjectionResult:
    """Run the projection with JSON-serialized inputs for caching."""
    return project_inputs(ProjectionInputs.model_validate_json(inputs_json))


dark = st.toggle("🌙 Modo escuro", key="dark_mode")
register_theme(dark=dark)

st.title("Calculadora do Primeiro Milhão 💰")
st.markdown(
    "Planeje sua liberdade financeira. Simule o poder dos juros compostos e "
    "descubra quanto tempo falta para atingir seus objetivos."
)

st.caption("Cenários prontos")
preset_cols = st.columns(len(preset_names()))
for col, name in zip(preset_cols, preset_names(), strict=True):
    with col:
        if st.button(preset_label(name), key=f"preset_{name}"):
            seed_form_state(preset_inputs(name))

try:
    inputs = projection_form(default_inputs())
except InputParseError as exc:
    st.error(f"Valor inválido: {exc}")
    st.stop()
except ValidationError as exc:
    st.error("Parâmetros fora do intervalo aceito.")
    for err in exc.errors():
        st.caption(err["msg"])
    st.stop()

result = run_projection(inputs.model_dump_json())
summary = result.summary

st.header("Resultado 🎯")

if summary.months_to_million is not None:
    st.success(
        f"🚀 Você atingirá {format_currency(MILESTONE_AMOUNT)} em: "
        f"**{format_duration(summary.months_to_million)}**"
    )
else:
    st.info("Continue investindo para alcançar o primeiro milhão! 💪")

col1, col2, col3 = st.columns(3)
with col1:
    st.metric("Valor Total Final", format_currency(summary.total_amount))
with col2:
    st.metric("Total Investido", format_currency(summary.total_invested))
    st.caption("Seu esforço direto 💼")
with col3:
    st.metric(
        "Total em Juros",
        format_currency(summary.total_interest),
        delta=f"+{return_on_investment(summary):.0f}% de rentabilidade",
    )

st.warning(
    "**Considerações Importantes:**\n"
    "- Este cálculo não considera Imposto de Renda sobre rendimentos.\n"
    "- A inflação pode reduzir o poder de compra do valor final.\n"
    "- Rentabilidades podem variar ao longo do tempo."
)

col1, col2 = st.columns(2)
with col1:
    st.plotly_chart(composition_chart(summary, dark=dark), use_container_width=True)
with col2:
    st.plotly_chart(growth_chart(result, dark=dark), use_container_width=True)

with st.expander("Juros ganhos mês a mês"):
    st.plotly_chart(monthly_interest_chart(result, dark=dark), use_container_width=True)

st.subheader("Detalhamento Anual 📋")
rows = yearly_breakdown(result.snapshots)
show_all = st.toggle(f"Ver todo o período ({len(rows)} linhas)", value=False)
shown = rows if show_all else rows[:TABLE_PREVIEW_YEARS]
table = pd.DataFrame(
    {
        "Tempo": [format_elapsed(r.month) for r in shown],
        "Investido Total": [format_currency(r.invested) for r in shown],
        "Juros Acumulados": [f"+{format_currency(r.interest)}" for r in shown],
        "Total Acumulado": [format_currency(r.total) for r in shown],
    }
)
st.dataframe(table, hide_index=True, use_container_width=True)

st.subheader("Exportar")
col1, col2, col3 = st.columns(3)
with col1:
    st.download_button(
        "Parâmetros (JSON)",
        data=dump_inputs(inputs),
        file_name="primeiro_milhao_parametros.json",
        mime="application/json",
    )
with col2:
    st.download_button(
        "Resumo (JSON)",
        data=dump_summary(summary, inputs),
        file_name="primeiro_milhao_resumo.json",
        mime="application/json",
    )
with col3:
    st.download_button(
        "Evolução mensal (CSV)",
        data=dump_schedule_csv(result.snapshots),
        file_name="primeiro_milhao_mensal.csv",
        mime="text/csv",
    )

st.divider()
st.caption("Feito com ❤️ para seu futuro financeiro. Veja a página *Como Usar* para a metodologia.")
