from dataclasses import dataclass
from typing import Union

from .fetcher import FetchError, Fetcher
from .logger import error, trace
from .png import HEADER_SIZE, PNG, PngDimensions, UnsupportedFormatError


@dataclass(frozen=True)
class Decoded:
    dimensions: PngDimensions


@dataclass(frozen=True)
class UnsupportedFormat:
    pass


@dataclass(frozen=True)
class TransportFailure:
    reason: str


FetchOutcome = Union[Decoded, UnsupportedFormat, TransportFailure]


class DimensionResolver:
    """URL의 앞부분 바이트를 가져와 PNG 크기를 판별합니다.

    요청 간에 공유되는 가변 상태가 없으므로 여러 요청에서 동시에 사용해도 안전합니다.
    """

    def __init__(self, fetcher: Fetcher, header_size: int = HEADER_SIZE):
        if header_size < HEADER_SIZE:
            raise ValueError(f"header_size는 최소 {HEADER_SIZE}바이트여야 합니다")
        self.fetcher = fetcher
        self.header_size = header_size

    async def resolve(self, url: str) -> FetchOutcome:
        """단 한 번 가져오기를 시도하고 결과를 분류합니다. 재시도는 없습니다."""
        try:
            head = await self.fetcher.fetch_head(url, self.header_size)
        except FetchError as e:
            error(f"이미지를 가져오지 못했습니다: {e}")
            return TransportFailure(reason=e.reason)

        try:
            dimensions = PNG(head).get_dimensions()
        except UnsupportedFormatError as e:
            trace(f"{url}: {e}")
            return UnsupportedFormat()

        trace(f"{url}: {dimensions.width}x{dimensions.height}")
        return Decoded(dimensions=dimensions)
