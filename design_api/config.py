"""
Configuration

環境変数（.env対応）からサーバー設定を読み込む
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_DATA_PATH = "data/combined.json"


class Settings:
    """サーバー設定"""

    def __init__(
        self,
        data_path: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        cors_origins: Optional[List[str]] = None,
        mcp_port: Optional[int] = None
    ):
        self.data_path = Path(data_path or os.getenv("DATA_PATH", DEFAULT_DATA_PATH)).resolve()
        self.host = host or os.getenv("HOST", "0.0.0.0")
        self.port = port or int(os.getenv("PORT", 3000))
        self.cors_origins = cors_origins or _split_origins(os.getenv("CORS_ORIGINS", "*"))
        self.mcp_port = mcp_port or int(os.getenv("MCP_PORT", 8003))


def _split_origins(value: str) -> List[str]:
    origins = [o.strip() for o in value.split(",") if o.strip()]
    return origins or ["*"]
