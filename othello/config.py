# othello/config.py
from dataclasses import dataclass, field
import logging
import os
import tomllib

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    # search depth grows as the board fills up and the tree narrows
    default_depth: int = 5
    midgame_filled: int = 44
    midgame_depth: int = 7
    endgame_filled: int = 52
    endgame_depth: int = 10


@dataclass
class WebConfig:
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    web: WebConfig = field(default_factory=WebConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "web"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    logger.warning("Ignoring unknown config key %s.%s", section, k)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("OTHELLO_CONFIG_TOML", "config.toml"))
if os.environ.get("OTHELLO_LOG_LEVEL"):
    CONFIG.log_level = os.environ["OTHELLO_LOG_LEVEL"]
