"""FastAPI 应用定义"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..core.models import (
    AggregateMetrics,
    CreateMazeRequest,
    MazeListResponse,
    MazeMetrics,
    MazeResponse,
    SessionResponse,
)
from . import links
from .controller import ApiError, MazeController


def create_app(controller: MazeController) -> FastAPI:
    """构建 FastAPI 实例并注入控制器。"""
    app = FastAPI(title="Hypermaze API", version="1.0.0")
    app.state.controller = controller

    # 允许前端直接请求
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    @app.exception_handler(ApiError)
    async def api_error_handler(_: Request, exc: ApiError):
        return JSONResponse(
            status_code=exc.status,
            content=exc.problem.model_dump(),
            media_type="application/problem+json",
        )

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    @app.post("/api/mazes", status_code=201, response_model=MazeResponse)
    def create_maze(response: Response, payload: Optional[CreateMazeRequest] = None):
        maze = controller.create_maze(
            payload.width if payload else None,
            payload.height if payload else None,
        )
        response.headers["Location"] = links.maze_path(maze.id)
        return maze

    @app.get("/api/mazes", response_model=MazeListResponse)
    def list_mazes():
        return controller.list_mazes()

    @app.get("/api/mazes/{maze_id}", response_model=MazeResponse)
    def get_maze(maze_id: str):
        return controller.get_maze(maze_id)

    @app.post("/api/mazes/{maze_id}/sessions", status_code=201, response_model=SessionResponse)
    def create_session(maze_id: str, response: Response):
        session = controller.create_session(maze_id)
        response.headers["Location"] = links.session_path(maze_id, session.id)
        return session

    @app.get("/api/mazes/{maze_id}/sessions/{session_id}", response_model=SessionResponse)
    def get_session(maze_id: str, session_id: str):
        return controller.get_session(maze_id, session_id)

    @app.post(
        "/api/mazes/{maze_id}/sessions/{session_id}/move/{direction}",
        response_model=SessionResponse,
    )
    def move(maze_id: str, session_id: str, direction: str):
        return controller.move(maze_id, session_id, direction)

    @app.get("/api/metrics", response_model=AggregateMetrics)
    def aggregate_metrics():
        return controller.aggregate_metrics()

    @app.get("/api/metrics/mazes/{maze_id}", response_model=MazeMetrics)
    def maze_metrics(maze_id: str):
        return controller.maze_metrics(maze_id)

    return app
