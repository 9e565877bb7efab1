import struct

from pngsize.fetcher import FetchError
from pngsize.png import PNG_SIGNATURE


def png_header(width, height, trailing=b""):
    return PNG_SIGNATURE + b"\x00\x00\x00\rIHDR" + struct.pack(">II", width, height) + trailing


class StubFetcher:
    """미리 정한 바이트(또는 예외)를 돌려주는 Fetcher"""

    def __init__(self, payload=b"", exc=None):
        self.payload = payload
        self.exc = exc
        self.calls = []

    async def fetch_head(self, url, limit):
        self.calls.append((url, limit))
        if self.exc:
            raise self.exc
        return self.payload[:limit]


def unreachable(url):
    return StubFetcher(exc=FetchError(url, "Cannot connect to host"))
