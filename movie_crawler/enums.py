# movie_crawler/enums.py
"""標準化字典 (Standardized Dictionary)。

此模組定義了整個應用程式中使用的枚舉類型，
站點標識同時作為日誌前綴 `[Douban]` / `[IMDb]` 使用。
"""
from enum import Enum

class SourceSite(str, Enum):
    """資料來源站點。"""
    DOUBAN = "Douban"
    IMDB = "IMDb"

class FetchErrorKind(str, Enum):
    """單頁抓取失敗的分類。"""
    NETWORK = "network"
    PARSE = "parse"
    MISSING_DEPENDENCY = "missing_dependency"
