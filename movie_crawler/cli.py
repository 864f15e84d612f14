# movie_crawler/cli.py
"""電影榜單爬蟲命令行界面。

提供一個基於 Typer 的命令行入口，負責組裝共享客戶端、抓取策略與提取器，
調用調度器，並把排序後的結果對齊打印到標準輸出。診斷日誌寫到標準錯誤。
"""
import logging

import typer
from typing_extensions import Annotated

from movie_crawler.client import create_session
from movie_crawler.core.scheduler import scrape_douban_top250, scrape_imdb_top1000
from movie_crawler.enums import SourceSite
from movie_crawler.factory import create_extractor, create_fetch_strategy
from movie_crawler.settings import settings
from movie_crawler.utils import format_aligned

# 配置日誌，以便在 CLI 中看到詳細輸出
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

app = typer.Typer(name="movie-crawler", help="電影榜單併發爬蟲 CLI", add_completion=False)


@app.command("douban", help="抓取豆瓣電影 Top 250。")
def douban_command(
    no_timing: Annotated[bool, typer.Option("--no-timing", help="不記錄每頁耗時。")] = False,
) -> None:
    try:
        session = create_session(settings.http)
    except RuntimeError as e:
        typer.secho(f"初始化失敗: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    strategy = create_fetch_strategy(SourceSite.DOUBAN, session, timed=not no_timing)
    records = scrape_douban_top250(strategy, create_extractor(SourceSite.DOUBAN))
    for i, record in enumerate(records, start=1):
        typer.echo(format_aligned(i, record.title, record.link))


@app.command("imdb", help="抓取 IMDb Top 1000 片單。")
def imdb_command(
    no_timing: Annotated[bool, typer.Option("--no-timing", help="不記錄每頁耗時。")] = False,
    dump_html: Annotated[bool, typer.Option("--dump-html", help="將抓取到的原始頁面保存到除錯文件（已存在則跳過）。")] = False,
) -> None:
    try:
        session = create_session(settings.http)
    except RuntimeError as e:
        typer.secho(f"初始化失敗: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    dump_path = settings.debug.dump_path if (dump_html or settings.debug.dump_html) else None
    strategy = create_fetch_strategy(SourceSite.IMDB, session, timed=not no_timing, dump_path=dump_path)
    records = scrape_imdb_top1000(strategy)
    for i, record in enumerate(records, start=1):
        typer.echo(f"{i:03}: title:{record.title:80}  link:{record.link}")


if __name__ == "__main__":
    app()
