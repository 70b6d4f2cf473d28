"""Tests du ScreenRegistry (controleurs par session, LRU borne)."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from cinesearch.services.detail import DetailController
from cinesearch.services.screens import ScreenRegistry
from cinesearch.services.search import SearchController
from cinesearch.services.task_runner import TaskSuperseded


class TestScreenRegistry:
    """Tests du registre des ecrans."""

    def test_cree_les_deux_controleurs(self, mock_client: AsyncMock):
        registry = ScreenRegistry(mock_client)
        screens = registry.get("abc")
        assert isinstance(screens.search, SearchController)
        assert isinstance(screens.detail, DetailController)
        assert len(registry) == 1
        assert "abc" in registry

    def test_meme_session_memes_ecrans(self, mock_client: AsyncMock):
        registry = ScreenRegistry(mock_client)
        assert registry.get("abc") is registry.get("abc")

    def test_sessions_isolees(self, mock_client: AsyncMock):
        """Deux sessions ne partagent aucun etat."""
        registry = ScreenRegistry(mock_client)
        assert registry.get("a").search is not registry.get("b").search

    def test_eviction_lru(self, mock_client: AsyncMock):
        """Au-dela de max_sessions, la session la moins recemment utilisee est oubliee."""
        registry = ScreenRegistry(mock_client, max_sessions=2)
        registry.get("a")
        registry.get("b")
        registry.get("a")
        registry.get("c")

        assert len(registry) == 2
        assert "a" in registry
        assert "b" not in registry
        assert "c" in registry

    def test_max_sessions_invalide(self, mock_client: AsyncMock):
        with pytest.raises(ValueError):
            ScreenRegistry(mock_client, max_sessions=0)

    def test_discard(self, mock_client: AsyncMock):
        registry = ScreenRegistry(mock_client)
        registry.get("a")
        registry.discard("a")
        registry.discard("inconnue")
        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_clear_annule_les_chargements(self, mock_client: AsyncMock):
        """clear() annule les recherches en vol de toutes les sessions."""
        started = asyncio.Event()

        async def search(query):
            started.set()
            await asyncio.sleep(10)
            return []

        mock_client.search_movies.side_effect = search
        registry = ScreenRegistry(mock_client)

        pending = asyncio.create_task(registry.get("a").search.submit("Matrix"))
        await started.wait()

        registry.clear()

        with pytest.raises(TaskSuperseded):
            await pending
        assert len(registry) == 0
