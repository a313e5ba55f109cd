"""Como Usar page — how to fill the calculator and how it computes."""

from __future__ import annotations

import streamlit as st

st.set_page_config(page_title="Como Usar — Calculadora do Primeiro Milhão", layout="wide")
st.title("Como usar a Calculadora do Primeiro Milhão 🤔")

col1, col2 = st.columns(2)
with col1:
    st.markdown(
        """
        #### 1. Informe o valor inicial
        Digite quanto você já tem investido hoje. Se está começando do zero,
        deixe R$ 0,00.

        #### 3. Taxa de Juros
        Use 8% a 10% ao ano como referência conservadora para renda variável
        ou mista no Brasil.
        """
    )
with col2:
    st.markdown(
        """
        #### 2. Defina os aportes
        Quanto você consegue investir por mês? A consistência é a chave para
        o sucesso.

        #### 4. O Tempo
        Defina por quanto tempo deseja investir e veja a mágica dos juros
        compostos acontecer.
        """
    )

st.header("Metodologia dos Juros Compostos 📚")
st.markdown(
    """
    A calculadora utiliza a fórmula clássica dos juros compostos com aportes
    mensais. O cálculo é feito mês a mês, considerando o reinvestimento
    automático dos rendimentos:

    - os juros de cada mês incidem sobre o saldo do mês anterior;
    - o aporte mensal entra ao final do mês e passa a render no mês seguinte;
    - uma taxa anual é convertida na taxa mensal equivalente, de modo que
      doze meses compostos reproduzem exatamente a taxa anual informada.
    """
)
st.latex(r"i_{mensal} = (1 + i_{anual})^{1/12} - 1")

st.subheader("Quando buscar orientação profissional?")
st.markdown(
    """
    - Para estratégias personalizadas de acumulação de patrimônio.
    - Para escolha de produtos específicos (Ações, FIIs, Renda Fixa).
    - Para otimização tributária e planejamento de aposentadoria.
    """
)

st.caption(
    "Ferramenta educacional. Os resultados são simulações e não constituem "
    "recomendação de investimento."
)
