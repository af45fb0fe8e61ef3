"""
Dataset Store

コンポーネント情報とデザイントークンをまとめたJSON（combined.json）を
初回アクセス時に読み込み、プロセス内で保持する

ファイル形式:
    {
        "button": {"title": "Button", "description": "...", "props": {...}, "examples": [...]},
        ...
        "_tokens": {"primary.color": "#007bff", ...}
    }
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import DatasetLoadError

# トークン用の予約キー
TOKENS_KEY = "_tokens"


class ComponentRecord:
    """
    コンポーネント1件分のレコード

    任意のJSONフィールドを持つ。既知のフィールド（title, description,
    props, examples）は型付きのアクセサで取得し、存在しない・型が違う
    場合は None を返す
    """

    def __init__(self, name: str, raw: Any):
        self.name = name
        self.raw = raw
        # オブジェクト以外の値はフィールドを持たないレコードとして扱う
        self.data: Dict[str, Any] = raw if isinstance(raw, dict) else {}

    @property
    def title(self) -> Optional[str]:
        return _string_or_none(self.data.get("title"))

    @property
    def description(self) -> Optional[str]:
        return _string_or_none(self.data.get("description"))

    @property
    def props(self) -> Optional[Dict[str, Any]]:
        props = self.data.get("props")
        return props if isinstance(props, dict) else None

    @property
    def examples(self) -> Optional[list]:
        examples = self.data.get("examples")
        return examples if isinstance(examples, list) else None

    def has_props(self) -> bool:
        """propsが存在し、かつ真値であるか（空のオブジェクトも真）"""
        return "props" in self.data and _is_truthy(self.data["props"])

    def has_examples(self) -> bool:
        return self.examples is not None and len(self.examples) > 0

    def summary_fields(self) -> Dict[str, Any]:
        """title / description のうちレコードに存在するものだけを返す"""
        return {k: self.data[k] for k in ("title", "description") if k in self.data}

    def find_section(self, section: str) -> Optional[str]:
        """
        セクションのキーを大文字小文字を無視して探す

        小文字化したキーを優先し、なければレコードの順序で最初に一致したキー
        """
        lowered = section.lower()
        if lowered in self.data:
            return lowered
        for key in self.data:
            if key.lower() == lowered:
                return key
        return None

    def section_names(self) -> List[str]:
        """値がnullでないオブジェクト（辞書・配列）のキー一覧"""
        return [k for k, v in self.data.items() if isinstance(v, (dict, list))]


class DatasetStore:
    """
    データセットの遅延読み込みとキャッシュ

    初回の get_dataset() でファイル全体を読み込む。読み込み済みかどうかは
    保持しているマッピングが空でないかで判定し、以降ファイルの変更は反映しない
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._data: Dict[str, Any] = {}

    def get_dataset(self) -> Dict[str, Any]:
        if not self._data:
            self._data = self._load()
            count = len([key for key in self._data if key != TOKENS_KEY])
            print(f"[読込] {self.path.name}: {count}個のコンポーネント", file=sys.stderr, flush=True)
        return self._data

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"[エラー] {self.path} の読み込みに失敗: {e}", file=sys.stderr, flush=True)
            raise DatasetLoadError(str(self.path), str(e)) from e

        if not isinstance(data, dict):
            print(f"[エラー] {self.path} のトップレベルがオブジェクトではありません", file=sys.stderr, flush=True)
            raise DatasetLoadError(str(self.path), "top-level value is not an object")

        return data

    def component_names(self) -> List[str]:
        """予約キーを除いたコンポーネント名（ファイル内の順序）"""
        return [key for key in self.get_dataset() if key != TOKENS_KEY]

    def components(self) -> List[ComponentRecord]:
        data = self.get_dataset()
        return [ComponentRecord(key, data[key]) for key in data if key != TOKENS_KEY]

    def tokens(self) -> Dict[str, Any]:
        tokens = self.get_dataset().get(TOKENS_KEY)
        return tokens if isinstance(tokens, dict) else {}

    def find_component(self, name: str) -> Optional[ComponentRecord]:
        """
        小文字化した名前、元の名前の順で検索する

        同じコンポーネントが複数の表記で登録されている場合は小文字側が優先される
        予約キー _tokens もキーとして引けるため、トークン全体がレコードとして返る
        """
        data = self.get_dataset()
        for key in (name.lower(), name):
            if data.get(key) is not None:
                return ComponentRecord(key, data[key])
        return None


def _string_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _is_truthy(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, (int, float, str)) and not isinstance(value, bool):
        return bool(value)
    return True
