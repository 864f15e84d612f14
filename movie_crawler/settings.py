# movie_crawler/settings.py
"""統一配置管理中心 (The Rulebook)。

此模組使用 Pydantic V2 進行配置管理，提供類型安全、環境變數載入
和預設值設定。HTTP 客戶端、各站點（豆瓣、IMDb）的分頁參數與延遲策略，
以及除錯輸出的配置都集中在此。
"""
from typing import Optional

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"

# --- 站點特定配置模型 ---

class DoubanSettings(BaseModel):
    """豆瓣 Top 250 的特定配置。"""
    start_page: int = 0
    end_page: int = 10
    page_size: int = 25
    min_delay: float = 2.0
    max_delay: float = 4.0
    list_url: str = "https://movie.douban.com/top250"

class ImdbSettings(BaseModel):
    """IMDb Top 1000 片單的特定配置。"""
    start_page: int = 0
    end_page: int = 4
    page_size: int = 250
    min_delay: float = 2.0
    max_delay: float = 4.0
    list_url: str = "https://www.imdb.com/list/ls048276758/"

# --- 基礎設施配置模型 ---

class HttpSettings(BaseSettings):
    """共享 HTTP 客戶端配置。"""
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float = 20.0
    # 未設置時按最大頁面範圍計算，每頁一個併發連接
    pool_size: Optional[int] = None
    model_config = SettingsConfigDict(env_prefix='HTTP_')

class DebugSettings(BaseSettings):
    """原始頁面輸出 (dump) 配置。"""
    dump_html: bool = False
    dump_path: str = "dump_page.html"
    model_config = SettingsConfigDict(env_prefix='DEBUG_')

# --- 主配置類 ---

class Settings(BaseSettings):
    """主配置類，聚合所有配置項。"""
    http: HttpSettings = HttpSettings()
    debug: DebugSettings = DebugSettings()

    douban: DoubanSettings = DoubanSettings()
    imdb: ImdbSettings = ImdbSettings()

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_nested_delimiter='__', extra='ignore')

# --- 創建全域唯一的配置實例 ---
settings = Settings()
