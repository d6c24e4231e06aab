# frontend/main_app.py
import streamlit as st

from config.logging_config import configure_logger
from evolution_engine.errors import CatalogError, NotFoundError
from frontend.components import create_radar_chart, display_evolution_view, display_paths_table
from frontend.data_loader import clear_caches, load_evolution, load_pokemon
from frontend.styling import apply_styling, type_badges

configure_logger()

# --- Main Application ---
st.set_page_config(page_title="Pokémon Evolutions", page_icon="🧬", layout="wide")
apply_styling()

st.title("Streamlit Evolution Explorer")
st.markdown("Look up a Pokémon and explore what it evolves from and into, branches included.")

if 'pokemon_query' not in st.session_state:
    st.session_state['pokemon_query'] = "1"
# Clicking an evolution card queues a new query; apply it before the widget exists
if 'navigate_to' in st.session_state:
    st.session_state['pokemon_query'] = st.session_state.pop('navigate_to')

# --- Sidebar ---
st.sidebar.header("Search")
st.sidebar.text_input("Name or National Dex number", key='pokemon_query')
is_shiny = st.sidebar.toggle("Shiny sprites", value=False)
if st.sidebar.button("Refresh data"):
    clear_caches()

query = st.session_state['pokemon_query'].strip()
if not query:
    st.info("Enter a Pokémon name or number in the sidebar.")
    st.stop()

try:
    pokemon = load_pokemon(query)
except NotFoundError:
    st.error(f"No Pokémon called '{query}' was found.", icon="🚨")
    st.stop()
except CatalogError as e:
    st.error(f"PokéAPI could not be reached: {e}", icon="🚨")
    st.stop()

# --- Pokémon card ---
card_col, chart_col = st.columns([1, 2])
with card_col:
    with st.container(border=True):
        st.subheader(f"{pokemon['name'].title()} #{pokemon['id']}")
        sprite = pokemon['shiny_sprite_url'] if is_shiny else pokemon['sprite_url']
        if sprite:
            st.image(sprite, width=160)
        st.markdown(type_badges(pokemon['types']), unsafe_allow_html=True)
with chart_col:
    st.plotly_chart(create_radar_chart(pokemon), use_container_width=True)

# --- Evolution view ---
try:
    view, paths_df = load_evolution(int(pokemon['id']))
except CatalogError as e:
    st.error(f"Could not load evolution data: {e}", icon="🚨")
    st.stop()

if view is None:
    st.info(f"No evolution data for {pokemon['name'].title()}.")
else:
    display_evolution_view(view, is_shiny=is_shiny)
    display_paths_table(paths_df)
