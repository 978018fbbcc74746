"""Test the configuration module functionality."""

from routegraph.config import SEARCH_CONFIG, SearchConfig


def test_search_config_defaults():
    config = SearchConfig()

    assert config.zero_weight_hop_ceiling == 64
    assert config.default_weight is None


def test_search_config_hop_ceiling():
    config = SearchConfig(zero_weight_hop_ceiling=10)

    assert config.hop_ceiling(True) == 10
    assert config.hop_ceiling(False) is None


def test_global_config_instance():
    assert isinstance(SEARCH_CONFIG, SearchConfig)
