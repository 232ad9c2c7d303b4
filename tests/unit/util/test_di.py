"""Unit tests for provider selection."""

import pytest

from vidtube.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from vidtube.util.error import DependencyInjectionError
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider

    def test_component_resolves_by_mock_flag(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component_is_rejected(self):
        with pytest.raises(DependencyInjectionError, match="unknown component"):
            build_test_container(unmock={"search"})
