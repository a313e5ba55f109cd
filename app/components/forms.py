"""Reusable form components for the Streamlit app."""

from __future__ import annotations

import streamlit as st

from firstmillion.config.schema import PeriodType, ProjectionInputs, RateType
from firstmillion.io.parsing import format_currency_input, parse_currency, parse_number

_RATE_LABELS = {RateType.YEARLY: "Anual", RateType.MONTHLY: "Mensal"}
_PERIOD_LABELS = {PeriodType.YEARS: "Anos", PeriodType.MONTHS: "Meses"}


def _reformat_currency(key: str) -> None:
    st.session_state[key] = format_currency_input(st.session_state[key])


def _as_field_text(value: float) -> str:
    # Plain decimal only; the rate/period fields reject exponent notation
    return f"{value:.10f}".rstrip("0").rstrip(".")


def seed_form_state(inputs: ProjectionInputs) -> None:
    """Write ``inputs`` into the widget keys used by :func:`projection_form`."""
    st.session_state["initial_text"] = format_currency_input(f"{round(inputs.initial * 100)}")
    st.session_state["monthly_text"] = format_currency_input(f"{round(inputs.monthly * 100)}")
    st.session_state["rate_text"] = _as_field_text(inputs.rate)
    st.session_state["rate_type"] = inputs.rate_type
    st.session_state["period_text"] = _as_field_text(inputs.period)
    st.session_state["period_type"] = inputs.period_type


def projection_form(defaults: ProjectionInputs) -> ProjectionInputs:
    """Render the investment parameter inputs and return the validated values.

    Raises:
        InputParseError: If the rate or period field holds non-numeric text.
        pydantic.ValidationError: If the values fall outside the accepted range.
    """
    if "initial_text" not in st.session_state:
        seed_form_state(defaults)

    st.subheader("Parâmetros do Investimento")

    col1, col2 = st.columns(2)
    with col1:
        initial_text = st.text_input(
            "Valor Inicial (R$)",
            key="initial_text",
            on_change=_reformat_currency,
            args=("initial_text",),
            help="Quanto você já tem investido hoje.",
        )
    with col2:
        monthly_text = st.text_input(
            "Valor Mensal (R$)",
            key="monthly_text",
            on_change=_reformat_currency,
            args=("monthly_text",),
            help="Aporte feito ao final de cada mês.",
        )

    col1, col2, col3, col4 = st.columns([3, 1, 3, 1])
    with col1:
        rate_text = st.text_input("Taxa de Juros (%)", key="rate_text")
    with col2:
        rate_type = st.selectbox(
            "Taxa",
            list(RateType),
            format_func=_RATE_LABELS.__getitem__,
            key="rate_type",
        )
    with col3:
        period_text = st.text_input("Período", key="period_text")
    with col4:
        period_type = st.selectbox(
            "Unidade",
            list(PeriodType),
            format_func=_PERIOD_LABELS.__getitem__,
            key="period_type",
        )

    return ProjectionInputs(
        initial=parse_currency(initial_text),
        monthly=parse_currency(monthly_text),
        rate=parse_number(rate_text),
        rate_type=rate_type,
        period=parse_number(period_text),
        period_type=period_type,
    )
