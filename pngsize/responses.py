from typing import Any, Dict, Tuple

from starlette.responses import JSONResponse, Response

from .resolver import Decoded, FetchOutcome, TransportFailure, UnsupportedFormat


MISSING_URL_MESSAGE = (
    "No URL parameter set, please use function_path/?url=http://domain/path/to/image.png"
)
UNSUPPORTED_FORMAT_MESSAGE = "Currently only PNG format is supported"
TRANSPORT_FAILURE_MESSAGE = "Failed to fetch image"


def error_body(message: str) -> Dict[str, Any]:
    return {"error": {"message": message}}


def outcome_body(outcome: FetchOutcome) -> Tuple[int, Dict[str, Any]]:
    """FetchOutcome을 (상태 코드, JSON 본문)으로 변환합니다.

    - Decoded: 200 {"width": .., "height": ..}
    - UnsupportedFormat: 415
    - TransportFailure: 502
    """
    if isinstance(outcome, Decoded):
        return 200, outcome.dimensions.to_dict()
    if isinstance(outcome, UnsupportedFormat):
        return 415, error_body(UNSUPPORTED_FORMAT_MESSAGE)
    if isinstance(outcome, TransportFailure):
        return 502, error_body(f"{TRANSPORT_FAILURE_MESSAGE}: {outcome.reason}")
    raise TypeError(f"알 수 없는 결과 타입: {type(outcome).__name__}")


def render_outcome(outcome: FetchOutcome) -> JSONResponse:
    status_code, body = outcome_body(outcome)
    return JSONResponse(body, status_code=status_code)


def missing_url_response() -> JSONResponse:
    return JSONResponse(error_body(MISSING_URL_MESSAGE), status_code=400)


def empty_response(status_code: int) -> Response:
    return Response(status_code=status_code)
