import sys
from datetime import datetime
from typing import Optional


_log_file: Optional[str] = None


def configure(log_file: Optional[str]) -> None:
    """시작 시점에 로그 파일 경로를 지정합니다. None이면 stderr에만 기록합니다.

    Raises:
        OSError: 로그 파일을 쓰기용으로 열 수 없는 경우
    """
    global _log_file
    if log_file:
        # 요청 처리 중이 아니라 시작 시점에 실패하도록 미리 열어 봅니다
        with open(log_file, 'a', encoding='utf-8'):
            pass
    _log_file = log_file


def write_log(message: str, level: str = "INFO") -> None:
    """로그 메시지를 파일과 콘솔에 기록합니다."""
    if _log_file:
        timestamp = datetime.now().isoformat()
        log_message = f"[{timestamp}] {level} {message}"
        
        with open(_log_file, 'a', encoding='utf-8') as f:
            f.write(log_message + "\n")
    
    # stderr로 출력
    print(message, file=sys.stderr)


def trace(message: str) -> None:
    """추적 로그를 기록합니다."""
    write_log(message, "INFO")


def error(message: str) -> None:
    """오류 로그를 기록합니다."""
    write_log(message, "ERROR")
