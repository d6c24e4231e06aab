# frontend/styling.py
import streamlit as st

TYPE_COLORS = {
    "normal": "#A8A77A", "fire": "#EE8130", "water": "#6390F0", "electric": "#F7D02C",
    "grass": "#7AC74C", "ice": "#96D9D6", "fighting": "#C22E28", "poison": "#A33EA1",
    "ground": "#E2BF65", "flying": "#A98FF3", "psychic": "#F95587", "bug": "#A6B91A",
    "rock": "#B6A136", "ghost": "#735797", "dragon": "#6F35FC", "dark": "#705746",
    "steel": "#B7B7CE", "fairy": "#D685AD"
}

CSS = """
<style>
    /* Colored type badges */
    .type-badge {
        display: inline-block;
        padding: .25em .6em;
        font-size: .75em;
        font-weight: 700;
        line-height: 1;
        text-align: center;
        white-space: nowrap;
        border-radius: .375rem;
        color: white;
        margin-right: .5em;
    }
    /* Evolution cards; the resolved species is highlighted */
    .evo-card {
        text-align: center;
        padding: .6em;
        border-radius: .5rem;
        border: 2px solid #ccc;
    }
    .evo-card.current {
        background-color: #22c55e;
        border-color: #16a34a;
        color: white;
        font-weight: 700;
    }
    .evo-card img { width: 80px; height: 80px; image-rendering: pixelated; }
    .evo-card p { margin: .2em 0; text-transform: capitalize; }
    .evo-arrow { text-align: center; font-size: 24px; margin-top: 40px; }
</style>
"""

def type_badges(types) -> str:
    return "".join(
        f'<span class="type-badge" style="background-color:{TYPE_COLORS.get(t, "#777")}">{t.title()}</span>'
        for t in types
    )

def apply_styling():
    st.markdown(CSS, unsafe_allow_html=True)
