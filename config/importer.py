"""익스포트 임포트 설정"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ImportConfig:
    """임포트 파이프라인 설정"""

    MAX_SUBSTATS: int = 4
    """장비당 최대 부옵션 수"""

    MAX_ENHANCE: int = 15
    """최대 강화 단계"""

    MAX_DURATION_SECONDS: float = 60.0
    """임포트 1회 최대 처리 시간 (호스트 요청 제한과 동일)"""

    LOG_SAMPLE_SIZE: int = 5
    """DEBUG 로그로 남길 영웅/장비 샘플 수"""

    NULL_ID_TOKENS: tuple[str, ...] = ("", "null", "undefined", "none", "0")
    """ID 없음으로 취급할 문자열"""


IMPORT = ImportConfig()
