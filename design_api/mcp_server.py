#!/usr/bin/env python3
"""
Design Component MCP Server

HTTP APIと同じデータセットをMCPツールとしてAIに提供する

提供するツール:
- get_service_info: サービス情報と統計
- list_components: コンポーネント一覧を取得
- get_component: コンポーネント詳細を取得
- get_tokens: デザイントークンを取得
- search: コンポーネントとトークンを横断検索
"""

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from fastmcp import FastMCP

from . import queries
from .config import Settings
from .dataset import DatasetStore
from .errors import DatasetLoadError, DesignApiError, NotFoundError


@contextmanager
def tool_errors():
    """エラーをMCPクライアント向けの ValueError に変換する（ファイルパスは含めない）"""
    try:
        yield
    except NotFoundError as e:
        available = ", ".join(e.available)
        raise ValueError(f"{e.message}. Available: {available}") from e
    except DatasetLoadError as e:
        raise ValueError(e.to_dict()["error"]) from e
    except DesignApiError as e:
        raise ValueError(e.message) from e


def create_mcp_server(store: DatasetStore) -> FastMCP:
    mcp = FastMCP("design-components")

    # =========================================================================
    # Tool 1: get_service_info
    # =========================================================================
    @mcp.tool()
    def get_service_info() -> Dict[str, Any]:
        """サービス名・バージョンと、コンポーネント数・トークン数の統計を取得する"""
        with tool_errors():
            return queries.service_info(store)

    # =========================================================================
    # Tool 2: list_components
    # =========================================================================
    @mcp.tool()
    def list_components(q: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        コンポーネント一覧を取得する

        Args:
            q: 名前・タイトル・説明で絞り込む文字列（大文字小文字を区別しない）
               指定しない場合はすべてのコンポーネントを返す

        Returns:
            コンポーネントの要約一覧（props・使用例の有無を含む）
        """
        with tool_errors():
            return queries.list_components(store, q)

    # =========================================================================
    # Tool 3: get_component
    # =========================================================================
    @mcp.tool()
    def get_component(name: str, section: Optional[str] = None) -> Any:
        """
        特定のコンポーネントの詳細情報を取得する

        Args:
            name: コンポーネント名 (例: "button", "datatable")
            section: 取得するセクション (例: "props", "examples")
                     指定しない場合はコンポーネント全体を返す

        Returns:
            コンポーネントのデータ、またはセクションの値
        """
        with tool_errors():
            return queries.get_component(store, name, section)

    # =========================================================================
    # Tool 4: get_tokens
    # =========================================================================
    @mcp.tool()
    def get_tokens(q: Optional[str] = None) -> Dict[str, Any]:
        """
        デザイントークン（色、スペーシングなど）を取得する

        Args:
            q: トークン名または値で絞り込む文字列 (例: "primary", "#007bff")

        Returns:
            件数とトークンの一覧
        """
        with tool_errors():
            return queries.get_tokens(store, q)

    # =========================================================================
    # Tool 5: search
    # =========================================================================
    @mcp.tool()
    def search(q: str) -> Dict[str, Any]:
        """
        コンポーネント（名前・タイトル・説明・props名）とトークンを横断検索する

        Args:
            q: 検索文字列

        Returns:
            一致したコンポーネントとトークンの一覧
        """
        with tool_errors():
            return queries.search(store, q)

    return mcp


settings = Settings()
mcp = create_mcp_server(DatasetStore(settings.data_path))


# =============================================================================
# エントリーポイント
# =============================================================================
def main():
    import sys

    if "--http" in sys.argv:
        mcp.run(transport="streamable-http", host="127.0.0.1", port=settings.mcp_port)
    else:
        mcp.run()


if __name__ == "__main__":
    main()
