"""
Tests for configuration module and the DataLoader interface.

Run with:
    pytest code/tests/test_config.py -v
"""

import logging
import sys
from pathlib import Path

# Add code directory to path for imports
code_dir = Path(__file__).parent.parent
sys.path.insert(0, str(code_dir))

import pandas as pd
import pytest


class TestDataLoader:
    """Test the DataLoader abstract base class."""

    def test_dataloader_is_abstract(self):
        """Test that DataLoader cannot be instantiated directly."""
        from config import DataLoader

        with pytest.raises(TypeError):
            DataLoader()  # type: ignore

    def test_dataloader_requires_load_method(self):
        """Test that DataLoader subclasses must implement load()."""
        from config import DataLoader

        with pytest.raises(TypeError):

            class IncompleteLoader(DataLoader):
                pass

            IncompleteLoader()


class TestBubbleCompareConfig:
    """Test the BubbleCompareConfig dataclass."""

    def test_defaults(self):
        from config import BubbleCompareConfig

        config = BubbleCompareConfig()
        assert config.min_r == 11
        assert config.max_r == 74
        assert config.expand_scale == 1

    def test_inverted_range_is_kept_with_warning(self, caplog):
        """min_r > max_r is accepted as-is and logged."""
        from config import BubbleCompareConfig

        with caplog.at_level(logging.WARNING):
            config = BubbleCompareConfig(min_r=50, max_r=5)

        assert (config.min_r, config.max_r) == (50, 5)
        assert "inverted" in caplog.text

    def test_from_options_none_gives_defaults(self):
        from config import BubbleCompareConfig

        assert BubbleCompareConfig.from_options(None) == BubbleCompareConfig()

    def test_from_options_snake_case(self):
        from config import BubbleCompareConfig

        config = BubbleCompareConfig.from_options({"min_r": 2, "expand_scale": 1.4})
        assert config == BubbleCompareConfig(min_r=2, expand_scale=1.4)


class TestAppConfig:
    """Test the AppConfig class and project registry."""

    def test_registry_configs_have_loaders(self):
        """Every registered dataset has a data loader."""
        from config import PROJECT_REGISTRY, DataLoader

        assert PROJECT_REGISTRY
        for _, config in PROJECT_REGISTRY.values():
            assert isinstance(config.data_loader, DataLoader)

    def test_mixed_config_declares_bar_series(self):
        from config import MIXED_BAR_CONFIG

        assert MIXED_BAR_CONFIG.bubble_chart.bar_series == ["target"]

    def test_config_with_custom_loader(self):
        """Test creating AppConfig with a custom loader."""
        from config import AppConfig, DataLoader

        class CustomLoader(DataLoader):
            def load(self) -> pd.DataFrame:
                return pd.DataFrame({"series": ["a"], "x": [1], "y": [2]})

        config = AppConfig(app_title="Test App", data_loader=CustomLoader())

        assert config.app_title == "Test App"
        assert isinstance(config.data_loader, CustomLoader)
        assert len(config.data_loader.load()) == 1


class TestRunCapsule:
    """Test the panel serve launcher."""

    def test_default_command(self):
        from run_capsule import APP_PATH, DEFAULT_PORT, build_command

        cmd = build_command()

        assert str(APP_PATH) in cmd
        assert cmd[cmd.index("--port") + 1] == str(DEFAULT_PORT)
        assert "--dev" not in cmd

    def test_custom_port_and_dev(self):
        from run_capsule import build_command

        cmd = build_command(8080, dev=True)

        assert cmd[cmd.index("--port") + 1] == "8080"
        assert cmd[-1] == "--dev"
