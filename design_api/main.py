"""
Design Component API - HTTP Server

PrimeVueのコンポーネント情報とデザイントークンを返す読み取り専用API
FastAPIベース

エンドポイント:
- GET /                       : サービス情報と統計
- GET /mcp/components         : コンポーネント一覧（?q= で絞り込み）
- GET /mcp/component/{name}   : コンポーネント詳細（?section= で部分取得）
- GET /mcp/tokens             : デザイントークン（?q= で絞り込み）
- GET /mcp/search             : コンポーネントとトークンの横断検索（?q= 必須）
"""

import sys
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import queries
from .config import Settings
from .dataset import DatasetStore
from .errors import DesignApiError
from .schemas import ComponentSummary, SearchResponse, ServiceInfo, TokensResponse


def get_store(request: Request) -> DatasetStore:
    return request.app.state.store


async def handle_api_error(request: Request, exc: DesignApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    print(f"[エラー] {request.method} {request.url.path}: {exc!r}", file=sys.stderr, flush=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """アプリケーションを生成する（データセットは初回リクエストで読み込む）"""
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        print(f"[起動] {queries.SERVICE_NAME}: http://localhost:{settings.port}", flush=True)
        print(f"[起動] 検索: http://localhost:{settings.port}/mcp/search?q=button", flush=True)
        print(f"[起動] データセット: {settings.data_path}（初回リクエスト時に読み込み）", flush=True)
        yield
        print("[終了] 終了しました", flush=True)

    app = FastAPI(
        title=queries.SERVICE_NAME,
        description=queries.SERVICE_DESCRIPTION,
        version=queries.SERVICE_VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.store = DatasetStore(settings.data_path)

    # CORS設定
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DesignApiError, handle_api_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # ==================== エンドポイント ====================

    @app.get("/", response_model=ServiceInfo)
    async def root(store: DatasetStore = Depends(get_store)):
        """サービス情報"""
        return queries.service_info(store)

    @app.get(
        "/mcp/components",
        response_model=List[ComponentSummary],
        response_model_exclude_unset=True
    )
    async def list_components(q: Optional[str] = None, store: DatasetStore = Depends(get_store)):
        """コンポーネント一覧"""
        return queries.list_components(store, q)

    @app.get("/mcp/component/{name}")
    async def get_component(
        name: str,
        section: Optional[str] = None,
        store: DatasetStore = Depends(get_store)
    ):
        """コンポーネント詳細（sectionを指定するとその部分のみ）"""
        return queries.get_component(store, name, section)

    @app.get("/mcp/tokens", response_model=TokensResponse)
    async def get_tokens(q: Optional[str] = None, store: DatasetStore = Depends(get_store)):
        """デザイントークン"""
        return queries.get_tokens(store, q)

    @app.get(
        "/mcp/search",
        response_model=SearchResponse,
        response_model_exclude_unset=True
    )
    async def search(q: Optional[str] = None, store: DatasetStore = Depends(get_store)):
        """コンポーネントとトークンの横断検索"""
        return queries.search(store, q)

    return app


app = create_app()


def main():
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
