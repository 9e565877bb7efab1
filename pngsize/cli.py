import asyncio
import json
import sys

import click
import uvicorn
from pydantic import ValidationError

from . import logger
from .config import ServiceConfig
from .fetcher import DEFAULT_TIMEOUT, HttpFetcher
from .logger import error
from .resolver import Decoded, DimensionResolver
from .responses import outcome_body
from .server import create_app


def output_result(result, json_output: bool):
    if json_output:
        click.echo(json.dumps(result, ensure_ascii=False))
    else:
        click.echo(json.dumps(result, ensure_ascii=False, indent=2))


def build_config(**kwargs) -> ServiceConfig:
    """CLI 인자로 설정을 만들고, 잘못된 값은 click 사용법 오류로 보고합니다."""
    values = {key: value for key, value in kwargs.items() if value is not None}
    try:
        return ServiceConfig(**values)
    except ValidationError as e:
        raise click.BadParameter(str(e))


async def run_server(config: ServiceConfig) -> None:
    """uvicorn으로 HTTP 서버를 실행합니다."""
    app = create_app(config)

    print(f"Listening on http://{config.host}:{config.port}")
    error(f"pngsize 서버가 {config.host}:{config.port}에서 실행 중입니다")

    uvicorn_config = uvicorn.Config(app, host=config.host, port=config.port, log_level="info")
    server_instance = uvicorn.Server(uvicorn_config)
    await server_instance.serve()


@click.group()
def cli():
    """PNG 이미지 크기 조회 서비스."""


@cli.command()
@click.option("--host", "-H", default=None, envvar="PNGSIZE_HOST", help="바인딩할 호스트. 기본값: 127.0.0.1")
@click.option("--port", "-p", default=None, type=int, envvar="PNGSIZE_PORT", help="바인딩할 포트. 기본값: 7878")
@click.option("--timeout", "fetch_timeout", default=None, type=float, envvar="PNGSIZE_TIMEOUT",
              help="원격 이미지 요청 타임아웃 (초). 기본값: 5")
@click.option("--log-file", default=None, envvar="PNGSIZE_LOG_FILE", help="로그를 추가로 기록할 파일")
def serve(host, port, fetch_timeout, log_file):
    """HTTP 서버를 시작합니다."""
    config = build_config(host=host, port=port, fetch_timeout=fetch_timeout, log_file=log_file)
    try:
        logger.configure(config.log_file)
    except OSError as e:
        raise click.BadParameter(f"로그 파일을 열 수 없습니다: {e}", param_hint="--log-file")
    asyncio.run(run_server(config))


@cli.command()
@click.argument("url")
@click.option("--timeout", "fetch_timeout", default=DEFAULT_TIMEOUT, type=float, show_default=True,
              help="요청 타임아웃 (초)")
@click.option("--json", "json_output", is_flag=True, help="Return output in JSON format")
def probe(url, fetch_timeout, json_output):
    """URL 하나의 PNG 크기를 조회하고 응답 본문을 출력합니다."""
    config = build_config(fetch_timeout=fetch_timeout)
    resolver = DimensionResolver(
        HttpFetcher(timeout=config.fetch_timeout, max_reads=config.max_reads),
        header_size=config.header_bytes,
    )
    outcome = asyncio.run(resolver.resolve(url))
    _, body = outcome_body(outcome)
    output_result(body, json_output)
    if not isinstance(outcome, Decoded):
        sys.exit(1)


def main() -> None:
    """동기 진입점 함수"""
    cli()


if __name__ == "__main__":
    main()
