# evolution_engine/client.py

import asyncio
import logging
from typing import Any, Dict, Optional, Union

import aiohttp

from config import settings
from evolution_engine.errors import CatalogUnavailableError, NotFoundError
from evolution_engine.models import EvolutionChain, PokemonRecord, SpeciesRecord


class PokeAPIClient:
    """
    Thin async client for the three PokéAPI resources the evolution viewer needs.

    Use it as an async context manager; it opens its own `aiohttp.ClientSession`
    unless one is passed in, in which case the caller keeps ownership of it.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None,
                 base_url: str = settings.API_BASE_URL,
                 timeout: float = settings.HTTP_TIMEOUT_SECONDS):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "PokeAPIClient":
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=self.timeout))
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None

    async def _fetch_url(self, url: str) -> Dict[str, Any]:
        """Fetches one JSON document, translating transport failures into CatalogError subclasses."""
        if self._session is None:
            raise RuntimeError("PokeAPIClient must be used inside 'async with'")
        try:
            async with self._session.get(url) as response:
                response.raise_for_status()
                return await response.json()
        except aiohttp.ClientResponseError as e:
            if e.status == 404:
                self.logger.warning(f"Not found: {url}")
                raise NotFoundError(f"Resource not found: {url}", url=url) from e
            self.logger.error(f"HTTP {e.status} while fetching {url}")
            raise CatalogUnavailableError(f"HTTP {e.status} for {url}", url=url) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.error(f"Network error while fetching {url}: {e!r}")
            raise CatalogUnavailableError(f"Network error for {url}", url=url) from e

    async def fetch_species(self, creature_id: int) -> SpeciesRecord:
        self.logger.info(f"Fetching species {creature_id}...")
        data = await self._fetch_url(f"{self.base_url}/pokemon-species/{creature_id}/")
        return SpeciesRecord.from_api(data)

    async def fetch_chain(self, chain_ref: Union[int, str]) -> EvolutionChain:
        """`chain_ref` is either a numeric chain id or the full URL from a species record."""
        if isinstance(chain_ref, int) or str(chain_ref).isdigit():
            url = f"{self.base_url}/evolution-chain/{chain_ref}/"
        else:
            url = str(chain_ref)
        self.logger.info(f"Fetching evolution chain {url}...")
        data = await self._fetch_url(url)
        return EvolutionChain.from_api(data)

    async def fetch_pokemon(self, id_or_name: Union[int, str]) -> PokemonRecord:
        key = str(id_or_name).lower().strip()
        self.logger.info(f"Fetching details for {key}...")
        data = await self._fetch_url(f"{self.base_url}/pokemon/{key}/")
        return PokemonRecord.from_api(data)
