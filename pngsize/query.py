from typing import Any, Optional


URL_PARAMETER = "url"


def extract_url(request: Any) -> Optional[str]:
    """요청의 쿼리 문자열에서 url 파라미터를 꺼냅니다.

    값이 없거나 빈 문자열이면 None을 반환합니다. `?url=`과 파라미터가 없는 경우는 구분하지 않습니다.
    """
    url = request.query_params.get(URL_PARAMETER)
    if not url:
        return None
    return url
