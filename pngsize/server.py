from typing import Optional

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from .config import ServiceConfig
from .fetcher import Fetcher, HttpFetcher
from .logger import trace
from .query import extract_url
from .resolver import DimensionResolver
from .responses import empty_response, missing_url_response, render_outcome


async def handle_service(request: Request) -> Response:
    """GET /?url=... 이미지 크기 조회"""
    image_url = extract_url(request)
    if image_url is None:
        trace("url 파라미터 없음")
        return missing_url_response()

    resolver: DimensionResolver = request.app.state.resolver
    outcome = await resolver.resolve(image_url)
    return render_outcome(outcome)


async def handle_favicon(request: Request) -> Response:
    """브라우저의 favicon 요청에 빈 응답을 반환합니다."""
    return empty_response(204)


async def handle_not_found(request: Request, exc: Exception) -> Response:
    """등록되지 않은 경로나 메서드는 모두 빈 404로 처리합니다."""
    trace(f"{request.method} {request.url.path} -> 404")
    return empty_response(404)


def only_method(method: str, handler):
    """Starlette가 GET 라우트에 자동으로 더하는 HEAD 등을 빈 404로 돌려보냅니다."""
    async def endpoint(request: Request) -> Response:
        if request.method != method:
            trace(f"{request.method} {request.url.path} -> 404")
            return empty_response(404)
        return await handler(request)

    return endpoint


# (method, path) -> handler
ROUTES = [
    ("GET", "/", handle_service),
    ("GET", "/favicon.ico", handle_favicon),
]


def create_app(config: ServiceConfig, fetcher: Optional[Fetcher] = None) -> Starlette:
    """서비스 애플리케이션을 생성합니다.

    Args:
        config: 시작 설정
        fetcher: 원격 바이트를 가져올 구현. 없으면 설정으로 HttpFetcher를 만듭니다.
    """
    if fetcher is None:
        fetcher = HttpFetcher(timeout=config.fetch_timeout, max_reads=config.max_reads)

    app = Starlette(
        debug=False,
        routes=[
            Route(path, only_method(method, handler), methods=[method])
            for method, path, handler in ROUTES
        ],
        exception_handlers={
            404: handle_not_found,
            405: handle_not_found,
        },
    )
    # /favicon.ico/ 같은 경로도 리다이렉트 없이 404로 처리합니다
    app.router.redirect_slashes = False
    app.state.config = config
    app.state.resolver = DimensionResolver(fetcher, header_size=config.header_bytes)
    return app
