from dataclasses import dataclass
from typing import Dict
import struct


# PNG 스트림은 항상 이 8바이트로 시작합니다
PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"

# 시그니처(8) + IHDR 길이/타입(8) + 너비(4) + 높이(4)
HEADER_SIZE = 24


class UnsupportedFormatError(ValueError):
    """PNG가 아니거나 헤더가 잘린 바이트열"""
    pass


@dataclass(frozen=True)
class PngDimensions:
    """PNG 이미지의 크기 정보"""
    width: int
    height: int

    def to_dict(self) -> Dict[str, int]:
        return {"width": self.width, "height": self.height}


def is_png(buffer: bytes) -> bool:
    """버퍼가 PNG 시그니처로 시작하는지 확인합니다."""
    return buffer[:8] == PNG_SIGNATURE


class PNG:
    """PNG 헤더 처리 클래스"""
    
    def __init__(self, buffer: bytes):
        """
        Args:
            buffer: PNG 이미지의 앞부분 바이트 데이터 (최소 24바이트)
        """
        self.buffer = buffer
    
    def get_dimensions(self) -> PngDimensions:
        """PNG 이미지의 너비와 높이를 반환합니다.

        Raises:
            UnsupportedFormatError: 시그니처가 다르거나 24바이트 미만인 경우
        """
        if not is_png(self.buffer):
            raise UnsupportedFormatError("유효한 PNG 파일이 아닙니다")

        if len(self.buffer) < HEADER_SIZE:
            raise UnsupportedFormatError(
                f"PNG 헤더가 잘렸습니다 ({len(self.buffer)}/{HEADER_SIZE} 바이트)"
            )
        
        # IHDR 청크의 너비(16..20)와 높이(20..24), big-endian u32
        width, height = struct.unpack('>II', self.buffer[16:HEADER_SIZE])
        
        return PngDimensions(width=width, height=height)
