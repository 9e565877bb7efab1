from typing import Optional

from pydantic import BaseModel, Field

from .fetcher import DEFAULT_MAX_READS, DEFAULT_TIMEOUT
from .png import HEADER_SIZE


class ServiceConfig(BaseModel):
    """서비스 시작 설정. 시작 시 한 번 만들어 create_app에 전달합니다."""

    host: str = Field("127.0.0.1", description="바인딩할 호스트")
    port: int = Field(7878, ge=1, le=65535, description="바인딩할 포트")
    fetch_timeout: float = Field(
        DEFAULT_TIMEOUT, gt=0, description="원격 이미지 요청의 전체 타임아웃 (초)"
    )
    header_bytes: int = Field(
        HEADER_SIZE, ge=HEADER_SIZE, le=4096, description="원격 리소스에서 읽을 최대 바이트 수"
    )
    max_reads: int = Field(
        DEFAULT_MAX_READS, ge=1, description="헤더를 모으기 위한 최대 읽기 횟수"
    )
    log_file: Optional[str] = Field(None, description="로그를 추가로 기록할 파일 경로")
