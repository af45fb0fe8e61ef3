"""
Error types

リクエスト処理中に発生するエラーの分類
"""

from typing import List, Optional


class DesignApiError(Exception):
    """エラーの基底クラス"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message}


class DatasetLoadError(DesignApiError):
    """データセットファイルが読めない、またはJSONとして不正"""

    def __init__(self, path: str, reason: str = ""):
        super().__init__(f"Failed to load dataset: {path}")
        self.path = path
        self.reason = reason

    def to_dict(self) -> dict:
        # ファイルパスや原因はレスポンスに含めない
        return {"error": "Failed to load dataset"}


class NotFoundError(DesignApiError):
    """コンポーネントまたはセクションが存在しない"""

    status_code = 404

    def __init__(self, message: str, available: Optional[List[str]] = None):
        super().__init__(message)
        self.available = available or []

    def to_dict(self) -> dict:
        return {"error": self.message, "available": self.available}


class BadRequestError(DesignApiError):
    """必須パラメータの不足"""

    status_code = 400
