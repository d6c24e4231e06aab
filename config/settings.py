# config/settings.py
import os

# API Configuration
API_BASE_URL = os.environ.get("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2").rstrip("/")
SPRITE_BASE_URL = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon"
HTTP_TIMEOUT_SECONDS = float(os.environ.get("POKEAPI_TIMEOUT", "30"))

# Creatures resolved by `python main.py` when no ids are given
POKEMON_TO_RESOLVE = [1, 25, 44, 133, 236, 265]

# Frontend Configuration
EVOLUTION_CACHE_TTL = 60 * 15
POKEMON_CACHE_TTL = 60 * 10

# Logging
LOG_LEVEL = os.environ.get("EVOLUTION_LOG_LEVEL", "INFO")
