"""迷宫求解脚本

不断创建迷宫并用配置的算法（dfs / bfs / random）求解。
加 --local 参数时在进程内运行服务端，无需先启动 API。
"""

import argparse
import logging
import signal
import sys
import threading

from dotenv import load_dotenv

from hypermaze.core.settings import MazeSettings, SolverSettings, load_config
from hypermaze.server.controller import build_controller
from hypermaze.solver.client_http import MazeApiClient
from hypermaze.solver.client_local import LocalMazeClient
from hypermaze.solver.runner import SolverRunner
from hypermaze.solver.solver import build_solver

load_dotenv()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Hypermaze solver loop")
    parser.add_argument("--config", default="config.yaml", help="YAML config file")
    parser.add_argument("--algorithm", choices=["dfs", "bfs", "random"], help="override solver.algorithm")
    parser.add_argument("--mazes", type=int, default=None, help="stop after N mazes")
    parser.add_argument("--local", action="store_true", help="solve in-process without HTTP")
    parser.add_argument("--verbose", action="store_true", help="log every move")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    settings = SolverSettings()
    settings.load_from_dict(config)
    settings.load_from_env()
    if args.algorithm:
        settings.algorithm = args.algorithm

    if args.local:
        maze_settings = MazeSettings()
        maze_settings.load_from_dict(config)
        maze_settings.load_from_env()
        client = LocalMazeClient(build_controller(settings=maze_settings))
        print("[OK] Solving in-process")
    else:
        client = MazeApiClient(settings.api_base_url, timeout=settings.request_timeout_s)
        print(f"[OK] Solving against {settings.api_base_url}")

    stop_event = threading.Event()
    signal.signal(signal.SIGINT, lambda *_: stop_event.set())
    signal.signal(signal.SIGTERM, lambda *_: stop_event.set())

    runner = SolverRunner(client, build_solver(client, settings), settings)
    stats = runner.run(stop_event, max_mazes=args.mazes)
    print(f"Solved {stats.mazes_solved}, failed {stats.mazes_failed}, "
          f"avg {stats.average_moves:.1f} moves/maze")
    return 0


if __name__ == "__main__":
    sys.exit(main())
