"""
Query Service

データセットに対する読み取り専用の検索・絞り込み処理
HTTPエンドポイントとMCPツールの両方から使う
"""

from typing import Any, Dict, List, Optional

from .dataset import ComponentRecord, DatasetStore
from .errors import BadRequestError, NotFoundError

SERVICE_NAME = "PrimeVue MCP API"
SERVICE_VERSION = "1.0.0"
SERVICE_DESCRIPTION = "Model Context Protocol server for PrimeVue components and design tokens"

ENDPOINTS = [
    "/mcp/components",
    "/mcp/component/:name",
    "/mcp/tokens",
    "/mcp/search",
]

# 見つからない場合に提示するコンポーネント名の上限
MAX_SUGGESTIONS = 10


def _contains(value: Optional[str], term: str) -> bool:
    return value is not None and term in value.lower()


def _token_matches(key: str, value: Any, term: str) -> bool:
    return term in key.lower() or (isinstance(value, str) and term in value.lower())


def service_info(store: DatasetStore) -> Dict[str, Any]:
    """サービス情報とデータセットの統計"""
    component_count = len(store.component_names())
    token_count = len(store.tokens())

    return {
        "name": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "description": SERVICE_DESCRIPTION,
        "endpoints": list(ENDPOINTS),
        "stats": {
            "components": component_count,
            "tokens": token_count,
            "total": component_count + token_count,
        },
    }


def list_components(store: DatasetStore, q: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    コンポーネント一覧を取得する

    Args:
        store: データセット
        q: 名前・タイトル・説明に対する部分一致（大文字小文字を無視）

    Returns:
        name, title, description, hasProps, hasExamples を持つ要約の一覧
    """
    records = store.components()

    if q:
        term = q.lower()
        records = [
            r for r in records
            if term in r.name.lower() or _contains(r.title, term) or _contains(r.description, term)
        ]

    return [
        {
            "name": r.name,
            **r.summary_fields(),
            "hasProps": r.has_props(),
            "hasExamples": r.has_examples(),
        }
        for r in records
    ]


def get_component(store: DatasetStore, name: str, section: Optional[str] = None) -> Any:
    """
    コンポーネントを1件取得する（sectionを指定するとその部分のみ）

    Raises:
        NotFoundError: コンポーネントまたはセクションが存在しない
    """
    record = store.find_component(name)
    if record is None:
        raise NotFoundError(
            f"Component '{name}' not found",
            available=store.component_names()[:MAX_SUGGESTIONS]
        )

    if section:
        key = record.find_section(section)
        if key is None:
            raise NotFoundError(
                f"Section '{section}' not found in '{name}'",
                available=record.section_names()
            )
        return record.data[key]

    return record.raw


def get_tokens(store: DatasetStore, q: Optional[str] = None) -> Dict[str, Any]:
    """デザイントークンを取得する（qでキー・値を絞り込み）"""
    tokens = store.tokens()

    if q:
        term = q.lower()
        tokens = {k: v for k, v in tokens.items() if _token_matches(k, v, term)}

    return {
        "count": len(tokens),
        "tokens": tokens,
    }


def _component_matches(record: ComponentRecord, term: str) -> List[str]:
    matches = []
    if term in record.name.lower():
        matches.append("name")
    if _contains(record.title, term):
        matches.append("title")
    if _contains(record.description, term):
        matches.append("description")
    for prop in record.props or {}:
        if term in prop.lower():
            matches.append(f"prop:{prop}")
    return matches


def search(store: DatasetStore, q: Optional[str]) -> Dict[str, Any]:
    """
    コンポーネントとトークンを横断検索する

    結果はコンポーネント（データセットの順序）、トークンの順に並ぶ

    Raises:
        BadRequestError: qが指定されていない
    """
    if not q or not isinstance(q, str):
        raise BadRequestError("Query parameter 'q' is required")

    term = q.lower()
    results: List[Dict[str, Any]] = []

    for record in store.components():
        matches = _component_matches(record, term)
        if matches:
            results.append({
                "type": "component",
                "name": record.name,
                **record.summary_fields(),
                "matches": matches,
            })

    for key, value in store.tokens().items():
        if _token_matches(key, value, term):
            results.append({
                "type": "token",
                "name": key,
                "value": value,
                "matches": ["token"],
            })

    return {
        "query": q,
        "count": len(results),
        "results": results,
    }
