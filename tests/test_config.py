"""
Optimistic Rollup Configuration Tests
"""

import logging

from rollup.node.config import ChainConfig, LogConfig, RollupConfig, setup_logging
from rollup.state.chain import RollupChain

from tests.conftest import FixedOracle


class TestRollupConfig:
    """Tests for RollupConfig."""

    def test_defaults_valid(self):
        assert RollupConfig().validate() == []

    def test_invalid_window(self):
        config = RollupConfig(chain=ChainConfig(challenge_window=0))
        errors = config.validate()
        assert len(errors) == 1
        assert "challenge_window" in errors[0]

    def test_invalid_log_level(self):
        config = RollupConfig(log=LogConfig(level="LOUD"))
        assert any("log level" in e for e in config.validate())

    def test_save_load(self, tmp_path):
        """Test JSON round trip through a file."""
        path = tmp_path / "rollup.json"
        config = RollupConfig(chain=ChainConfig(name="devnet", challenge_window=42))
        config.save(str(path))

        loaded = RollupConfig.load(str(path))

        assert loaded.chain.name == "devnet"
        assert loaded.chain.challenge_window == 42
        assert loaded.to_dict() == config.to_dict()

    def test_build_chain(self, root_r1):
        config = RollupConfig(chain=ChainConfig(challenge_window=9))
        chain = config.build_chain(FixedOracle(root_r1))
        assert isinstance(chain, RollupChain)
        assert chain.window_duration == 9


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "rollup.log"
        root = logging.getLogger()
        saved = list(root.handlers)
        for handler in saved:
            root.removeHandler(handler)
        try:
            setup_logging(LogConfig(level="DEBUG", file=str(log_file)))
            logging.getLogger("rollup.test").debug("hello")
            for handler in root.handlers:
                handler.flush()
            assert "hello" in log_file.read_text()
        finally:
            for handler in list(root.handlers):
                root.removeHandler(handler)
                handler.close()
            for handler in saved:
                root.addHandler(handler)
