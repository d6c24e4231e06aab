# frontend/components.py
import html
from typing import List, Sequence

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from evolution_engine.models import EvolutionView, ProcessedEvolution
from evolution_engine.tree import INVALID_SPECIES_ID
from frontend.data_loader import STAT_COLUMNS

ARROW_HTML = "<p class='evo-arrow'>➡️</p>"


def create_radar_chart(pokemon: pd.Series):
    """Creates a Plotly radar chart for a single Pokémon's stats."""
    stats_labels = [s.replace('-', ' ').title() for s in STAT_COLUMNS]
    stats_values = [pokemon.get(s, 0) for s in STAT_COLUMNS]

    fig = go.Figure()
    fig.add_trace(go.Scatterpolar(
        r=stats_values,
        theta=stats_labels,
        fill='toself',
        name=pokemon['name'].title()
    ))
    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True, range=[0, 255])),
        showlegend=False, height=300, margin=dict(l=40, r=40, t=40, b=40)
    )
    return fig


def evolution_card_html(evolution: ProcessedEvolution, is_current: bool = False, is_shiny: bool = False) -> str:
    """HTML for one evolution card: sprite, name, dex number and the condition that leads to it."""
    sprite = evolution.shiny_sprite if is_shiny else evolution.sprite
    alt = f"{'Shiny ' if is_shiny else ''}{evolution.name}"
    number = f"#{evolution.id:03d}" if evolution.id != INVALID_SPECIES_ID else "#???"
    condition = f"<p><small>{html.escape(evolution.condition_label)}</small></p>" if evolution.evolution_detail else ""
    css_class = "evo-card current" if is_current else "evo-card"
    return (
        f"<div class='{css_class}'>"
        f"<img src='{sprite}' alt='{html.escape(alt)}'/>"
        f"<p>{html.escape(evolution.name)}</p><p><small>{number}</small></p>{condition}"
        f"</div>"
    )


def _draw_row(steps: Sequence[ProcessedEvolution], current: ProcessedEvolution, is_shiny: bool, key: str,
              lead_arrow: bool = False):
    # Cards alternate with arrow columns
    col_count = len(steps) * 2 - 1 + (1 if lead_arrow else 0)
    cols = st.columns(col_count)
    col_idx = 0
    if lead_arrow:
        cols[col_idx].markdown(ARROW_HTML, unsafe_allow_html=True)
        col_idx += 1

    for i, evolution in enumerate(steps):
        if i > 0:
            cols[col_idx].markdown(ARROW_HTML, unsafe_allow_html=True)
            col_idx += 1
        is_current = evolution is current
        with cols[col_idx]:
            st.markdown(evolution_card_html(evolution, is_current, is_shiny), unsafe_allow_html=True)
            # Id 0 marks a species URL we could not parse; nothing to navigate to
            if not is_current and evolution.id != INVALID_SPECIES_ID:
                if st.button("View", key=f"{key}-{i}-{evolution.id}", use_container_width=True):
                    st.session_state['navigate_to'] = str(evolution.id)
                    st.rerun()
        col_idx += 1


def display_evolution_view(view: EvolutionView, is_shiny: bool = False):
    """Draws previous -> current -> next, one row per branch when the chain splits."""
    st.subheader("Evolution Chain")

    head: List[ProcessedEvolution] = list(view.previous) + [view.current]
    if len(view.next) == 1:
        _draw_row(head + list(view.next[0]), view.current, is_shiny, key="evo-main")
        return

    _draw_row(head, view.current, is_shiny, key="evo-main")
    for branch_idx, branch in enumerate(view.next):
        _draw_row(branch, view.current, is_shiny, key=f"evo-branch-{branch_idx}", lead_arrow=True)

    if view.has_branches:
        st.caption("This Pokemon has multiple evolution paths")


def display_paths_table(paths_df: pd.DataFrame):
    with st.expander("All evolution paths in this chain"):
        if paths_df.empty:
            st.info("No paths.")
        else:
            st.dataframe(paths_df, hide_index=True, use_container_width=True)
