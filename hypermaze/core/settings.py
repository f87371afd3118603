"""Server and solver settings."""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

ALGORITHMS = ("dfs", "bfs", "random")


def load_config(path: str = "config.yaml") -> dict:
    """加载配置文件，缺失或解析失败时返回空字典"""
    config_path = Path(path)
    if not config_path.exists():
        logger.warning("%s not found, using default config", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Failed to load %s (%s), using default config", config_path, exc)
        return {}


def _env_int(environ: Mapping[str, str], key: str, current: Optional[int]) -> Optional[int]:
    raw = environ.get(key)
    if raw is None:
        return current
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer)", key, raw)
        return current


class MazeSettings:
    """Maze API settings."""

    def __init__(self):
        # Maze
        self.default_width = 10
        self.default_height = 10
        self.max_width = 50
        self.max_height = 50
        self.seed: Optional[int] = None

        # Web server
        self.server_host = "127.0.0.1"
        self.server_port = 8080
        self.log_level = "info"

    def load_from_dict(self, config: dict) -> None:
        if "maze" in config:
            m = config["maze"] or {}
            self.default_width = m.get("default_width", self.default_width)
            self.default_height = m.get("default_height", self.default_height)
            self.max_width = m.get("max_width", self.max_width)
            self.max_height = m.get("max_height", self.max_height)
            self.seed = m.get("seed", self.seed)

        if "server" in config:
            srv = config["server"] or {}
            self.server_host = srv.get("host", self.server_host)
            self.server_port = srv.get("port", self.server_port)
            self.log_level = srv.get("log_level", self.log_level)

    def load_from_env(self, environ: Optional[Mapping[str, str]] = None) -> None:
        env = os.environ if environ is None else environ
        self.default_width = _env_int(env, "MAZE_DEFAULT_WIDTH", self.default_width)
        self.default_height = _env_int(env, "MAZE_DEFAULT_HEIGHT", self.default_height)
        self.max_width = _env_int(env, "MAZE_MAX_WIDTH", self.max_width)
        self.max_height = _env_int(env, "MAZE_MAX_HEIGHT", self.max_height)
        self.seed = _env_int(env, "MAZE_SEED", self.seed)
        self.server_host = env.get("MAZE_HOST", self.server_host)
        self.server_port = _env_int(env, "MAZE_PORT", self.server_port)


class SolverSettings:
    """Solver loop settings."""

    def __init__(self):
        self.api_base_url = "http://localhost:8080"
        self.maze_width = 10
        self.maze_height = 10
        self.delay_between_mazes_ms = 2000
        self.delay_between_moves_ms = 0
        self.stats_interval_mazes = 10
        self.algorithm = "dfs"
        self.retry_backoff_ms = 5000
        self.seed: Optional[int] = None
        self.max_moves = 0  # 0: 4 * width * height of the maze being solved
        self.request_timeout_s = 10.0

    def load_from_dict(self, config: dict) -> None:
        s = config.get("solver") or {}
        self.api_base_url = s.get("api_base_url", self.api_base_url)
        self.maze_width = s.get("maze_width", self.maze_width)
        self.maze_height = s.get("maze_height", self.maze_height)
        self.delay_between_mazes_ms = s.get("delay_between_mazes_ms", self.delay_between_mazes_ms)
        self.delay_between_moves_ms = s.get("delay_between_moves_ms", self.delay_between_moves_ms)
        self.stats_interval_mazes = s.get("stats_interval_mazes", self.stats_interval_mazes)
        self.algorithm = s.get("algorithm", self.algorithm)
        self.retry_backoff_ms = s.get("retry_backoff_ms", self.retry_backoff_ms)
        self.seed = s.get("seed", self.seed)
        self.max_moves = s.get("max_moves", self.max_moves)
        self.request_timeout_s = s.get("request_timeout_s", self.request_timeout_s)

    def load_from_env(self, environ: Optional[Mapping[str, str]] = None) -> None:
        env = os.environ if environ is None else environ
        self.api_base_url = env.get("SOLVER_API_BASE_URL", self.api_base_url)
        self.maze_width = _env_int(env, "SOLVER_MAZE_WIDTH", self.maze_width)
        self.maze_height = _env_int(env, "SOLVER_MAZE_HEIGHT", self.maze_height)
        self.delay_between_mazes_ms = _env_int(
            env, "SOLVER_DELAY_BETWEEN_MAZES_MS", self.delay_between_mazes_ms
        )
        self.delay_between_moves_ms = _env_int(
            env, "SOLVER_DELAY_BETWEEN_MOVES_MS", self.delay_between_moves_ms
        )
        self.stats_interval_mazes = _env_int(
            env, "SOLVER_STATS_INTERVAL_MAZES", self.stats_interval_mazes
        )
        self.algorithm = env.get("SOLVER_ALGORITHM", self.algorithm)
        self.retry_backoff_ms = _env_int(env, "SOLVER_RETRY_BACKOFF_MS", self.retry_backoff_ms)
        self.seed = _env_int(env, "SOLVER_SEED", self.seed)

    @property
    def normalized_algorithm(self) -> str:
        """Configured algorithm, falling back to dfs for unknown names."""
        name = (self.algorithm or "").strip().lower()
        if name in ALGORITHMS:
            return name
        logger.warning("Unknown solver algorithm %r, using dfs", self.algorithm)
        return "dfs"
