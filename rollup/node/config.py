"""
Optimistic Rollup Node Configuration
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Any, List, Optional

from rollup.constants import DEFAULT_CHALLENGE_WINDOW, MIN_CHALLENGE_WINDOW

logger = logging.getLogger(__name__)


@dataclass
class ChainConfig:
    """Chain parameters."""
    name: str = "rollup"
    challenge_window: int = DEFAULT_CHALLENGE_WINDOW


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size_mb: int = 100
    backup_count: int = 5


@dataclass
class RollupConfig:
    """
    Complete node configuration.

    All settings for running a rollup dispute node.
    """
    chain: ChainConfig = field(default_factory=ChainConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        window = self.chain.challenge_window
        if isinstance(window, bool) or not isinstance(window, int):
            errors.append(f"challenge_window must be an integer: {window!r}")
        elif window < MIN_CHALLENGE_WINDOW:
            errors.append(f"challenge_window must be at least {MIN_CHALLENGE_WINDOW}")

        if not self.chain.name:
            errors.append("chain name cannot be empty")

        if getattr(logging, self.log.level.upper(), None) is None:
            errors.append(f"Invalid log level: {self.log.level}")

        return errors

    def save(self, path: str) -> None:
        """Save configuration to file."""
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.info(f"Configuration saved to {path}")

    @classmethod
    def load(cls, path: str) -> "RollupConfig":
        """Load configuration from file."""
        with open(path, 'r') as f:
            data = json.load(f)

        config = cls()

        if "chain" in data:
            config.chain = ChainConfig(**data["chain"])

        if "log" in data:
            config.log = LogConfig(**data["log"])

        logger.info(f"Configuration loaded from {path}")
        return config

    def to_dict(self) -> dict:
        """Export configuration as dictionary."""
        return {
            "chain": asdict(self.chain),
            "log": asdict(self.log),
        }

    def build_chain(self, oracle: Any):
        """Create a RollupChain with this configuration's window."""
        from rollup.state.chain import RollupChain

        return RollupChain(oracle, window_duration=self.chain.challenge_window)


def setup_logging(config: LogConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers = [logging.StreamHandler()]

    if config.file:
        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
    )
