import asyncio
from typing import Protocol

import aiohttp

from .logger import trace


DEFAULT_TIMEOUT = 5.0
DEFAULT_MAX_READS = 8


class FetchError(Exception):
    """원격 리소스를 가져오는 도중 발생한 전송 오류 (DNS, 연결, TLS, 스트림, 타임아웃)"""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class Fetcher(Protocol):
    """원격 리소스의 앞부분 바이트를 가져오는 인터페이스"""

    async def fetch_head(self, url: str, limit: int) -> bytes:
        """URL에 GET 요청을 보내고 응답 본문의 처음 최대 limit 바이트를 반환합니다.

        전송 실패 시 FetchError를 발생시킵니다.
        """
        ...


class HttpFetcher:
    """aiohttp 기반 Fetcher 구현

    응답 본문 전체를 받지 않고 limit 바이트가 모이거나 스트림이 끝날 때까지만 읽습니다.
    헤더가 여러 번의 네트워크 읽기로 나뉘어 도착해도 max_reads 범위 안에서 이어 붙입니다.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, max_reads: int = DEFAULT_MAX_READS):
        self.timeout = timeout
        self.max_reads = max_reads

    def _create_session(self) -> aiohttp.ClientSession:
        """요청마다 새 세션을 생성합니다."""
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        return aiohttp.ClientSession(timeout=timeout)

    async def fetch_head(self, url: str, limit: int) -> bytes:
        try:
            async with self._create_session() as session:
                # 상태 코드는 확인하지 않습니다. 본문 앞부분만으로 판단합니다
                async with session.get(url) as response:
                    trace(f"GET {url} -> {response.status}")
                    return await self._read_head(response.content, limit)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(url, str(e) or type(e).__name__) from e
        except ValueError as e:
            # 잘못된 URL
            raise FetchError(url, str(e)) from e

    async def _read_head(self, stream: aiohttp.StreamReader, limit: int) -> bytes:
        buffer = bytearray()
        for _ in range(self.max_reads):
            remaining = limit - len(buffer)
            if remaining <= 0:
                break
            chunk = await stream.read(remaining)
            if not chunk:
                break
            buffer.extend(chunk)
        return bytes(buffer[:limit])
