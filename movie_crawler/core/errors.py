# movie_crawler/core/errors.py
"""單頁抓取失敗的異常體系。

策略在遇到可預期的失敗（網絡、解析、缺少依賴）時拋出 `FetchError`
的子類，由調度器在頁面邊界捕獲並記錄，不會傳播給調用方。
"""
from movie_crawler.enums import FetchErrorKind


class FetchError(Exception):
    """某一頁抓取失敗，攜帶頁碼與可讀的錯誤訊息。"""
    kind: FetchErrorKind = FetchErrorKind.NETWORK

    def __init__(self, page_index: int, message: str):
        super().__init__(message)
        self.page_index = page_index
        self.message = message

    def __str__(self) -> str:
        return self.message


class NetworkError(FetchError):
    """請求或讀取響應失敗。"""
    kind = FetchErrorKind.NETWORK


class ParseError(FetchError):
    """頁面內容無法被提取器處理。"""
    kind = FetchErrorKind.PARSE


class MissingDependencyError(FetchError):
    """策略需要提取器但調用時未提供。"""
    kind = FetchErrorKind.MISSING_DEPENDENCY
