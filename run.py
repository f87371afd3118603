"""迷宫 API 启动脚本

运行 FastAPI 服务，客户端只通过响应中的链接在迷宫中移动。
"""

import logging
import sys

import uvicorn
from dotenv import load_dotenv

from hypermaze.core.settings import MazeSettings, load_config
from hypermaze.server.api import create_app
from hypermaze.server.controller import build_controller

# 预加载环境变量
load_dotenv()


def main():
    """脚本入口，启动 Web 服务"""
    print("=" * 60)
    print("Hypermaze - Hypermedia Maze API")
    print("=" * 60)
    print()

    # 加载配置（配置文件 -> 环境变量）
    print("Loading configuration...")
    settings = MazeSettings()
    settings.load_from_dict(load_config())
    settings.load_from_env()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("[OK] Configuration loaded")
    print(f"     default maze {settings.default_width}x{settings.default_height}, "
          f"max {settings.max_width}x{settings.max_height}")
    print()

    # 构建控制器和 FastAPI 应用
    controller = build_controller(settings=settings)
    app = create_app(controller)

    url = f"http://{settings.server_host}:{settings.server_port}"
    print("=" * 60)
    print(f"Server running at: {url}")
    print(f"API docs: {url}/docs")
    print("=" * 60)
    print()

    config = uvicorn.Config(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level,
    )
    server = uvicorn.Server(config)
    try:
        server.run()
    except KeyboardInterrupt:
        print("\nServer interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
