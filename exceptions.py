"""
GearBoard 커스텀 예외 클래스 정의

모든 예외는 GearBoardError를 상속받아 일관된 에러 처리를 제공합니다.
"""
from typing import Optional


class GearBoardError(Exception):
    """GearBoard 기본 예외 클래스"""

    def __init__(self, message: str = "알 수 없는 오류가 발생했습니다"):
        self.message = message
        super().__init__(self.message)


# =============================================================================
# 사용자 관련 예외
# =============================================================================


class UserNotFoundError(GearBoardError):
    """사용자를 찾을 수 없음"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"사용자를 찾을 수 없습니다: {user_id}")


# =============================================================================
# 임포트 관련 예외
# =============================================================================


class InvalidExportError(GearBoardError):
    """익스포트 파일 자체를 처리할 수 없음 (JSON 오류, items 누락 등)"""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"잘못된 익스포트 파일입니다: {reason}")


class ItemValidationError(GearBoardError):
    """개별 장비/영웅 레코드 검증 실패"""

    def __init__(self, item_id: Optional[str], reason: str):
        self.item_id = item_id
        self.reason = reason
        label = item_id if item_id is not None else "unknown"
        super().__init__(f"Item {label}: {reason}")


# =============================================================================
# 장비 관련 예외
# =============================================================================


class GearNotFoundError(GearBoardError):
    """장비를 찾을 수 없음"""

    def __init__(self, gear_id: int):
        self.gear_id = gear_id
        super().__init__(f"장비를 찾을 수 없습니다: {gear_id}")


# =============================================================================
# 설정/점수 관련 예외
# =============================================================================


class InvalidSettingsError(GearBoardError):
    """점수 설정 값이 올바르지 않음"""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"잘못된 설정입니다 ({field}): {reason}")


class RecalculationInProgressError(GearBoardError):
    """점수 재계산이 이미 진행 중"""

    def __init__(self):
        super().__init__("점수 재계산이 이미 진행 중입니다.")
