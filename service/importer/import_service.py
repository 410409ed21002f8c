"""
ImportService

Fribbels 익스포트를 사용자 데이터로 임포트합니다.

처리 순서:
1. 최상위 구조 검증 (items 누락 시 아무것도 쓰지 않고 실패)
2. 참조 데이터 / 사용자 설정 / 기존 영웅 이름 수를 동시에 조회
3. 영웅 업서트 (장비의 장착 영웅 연결에 필요하므로 장비보다 먼저)
4. 장비별 검증 → 매핑 → 점수 계산 → 장비 + 부옵션 트랜잭션 저장

레코드 단위 실패는 결과에 기록만 하고 나머지 처리를 계속합니다.
"""
import asyncio
import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from pydantic import ValidationError
from tortoise.exceptions import BaseORMException

from config.gear import GearRank, GearType, MainStatType
from config.importer import IMPORT
from config.scoring import DEFAULT_WEIGHTS, ScoringWeights
from exceptions import InvalidExportError, ItemValidationError, UserNotFoundError
from models import StatType
from models.repos import gear_repo, hero_repo, reference_repo, settings_repo, users_repo
from service.importer.schemas import (
    FribbelsExport,
    FribbelsHero,
    FribbelsItem,
    describe_validation_error,
)
from service.importer.validation import validate_gear_rules
from service.mapping.hero_metadata import extract_hero_metadata
from service.mapping.stat_mapping import (
    lookup_gear_rank,
    lookup_gear_type,
    lookup_main_stat_type,
    map_hero_class,
    map_hero_element,
    map_hero_rarity,
    map_stat_name,
)
from service.scoring.grade_service import GradeService
from service.scoring.recalculation_service import compute_score_fields
from service.scoring.score_service import GearSnapshot, ScoreSettings, SubstatSnapshot

logger = logging.getLogger(__name__)


# =============================================================================
# 결과 모델
# =============================================================================


@dataclass
class ItemOutcome:
    """레코드 1건의 처리 결과"""
    kind: str
    item_id: Optional[str]
    imported: bool
    reason: Optional[str] = None
    warnings: list[str] = field(default_factory=list)
    skipped: bool = False

    @property
    def label(self) -> str:
        return self.item_id if self.item_id is not None else "unknown"


@dataclass
class ImportResult:
    """임포트 결과 누적기"""
    success: bool = True
    message: str = ""
    count: int = 0
    gear_count: int = 0
    hero_count: int = 0
    duration_ms: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    outcomes: list[ItemOutcome] = field(default_factory=list)
    timed_out: bool = False

    def record(self, outcome: ItemOutcome) -> None:
        """레코드 결과 반영"""
        self.outcomes.append(outcome)
        for warning in outcome.warnings:
            self.warnings.append(f"{outcome.kind} {outcome.label}: {warning}")

        # 같은 익스포트 안의 중복 ID는 경고만 남기고 건너뜀
        if outcome.skipped:
            return
        if not outcome.imported:
            self.errors.append(f"Failed to import {outcome.kind} {outcome.label}: {outcome.reason}")
            return

        if outcome.kind == "hero":
            self.hero_count += 1
        else:
            self.gear_count += 1
            self.count += 1

    def finish(self, started_at: float) -> "ImportResult":
        self.duration_ms = int((time.monotonic() - started_at) * 1000)
        return self

    @classmethod
    def failure(cls, message: str, error: str, started_at: float) -> "ImportResult":
        return cls(success=False, message=message, errors=[error]).finish(started_at)

    def to_dict(self) -> dict:
        """웹 레이어 응답 형식 (camelCase)"""
        return {
            "success": self.success,
            "message": self.message,
            "count": self.count,
            "gearCount": self.gear_count,
            "heroCount": self.hero_count,
            "durationMs": self.duration_ms,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "timedOut": self.timed_out,
        }


def parse_export_bytes(raw: Union[bytes, str]) -> dict:
    """
    업로드 원본 → JSON 객체

    Raises:
        InvalidExportError: 디코딩 실패, JSON 오류, 최상위가 객체가 아님
    """
    try:
        text = raw.decode("utf-8-sig") if isinstance(raw, bytes) else raw
    except UnicodeDecodeError as e:
        raise InvalidExportError(f"file is not UTF-8 text ({e})") from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidExportError(f"malformed JSON ({e.msg} at line {e.lineno})") from e

    if not isinstance(payload, dict):
        raise InvalidExportError("top-level JSON value must be an object")
    return payload


# =============================================================================
# 임포트 서비스
# =============================================================================


@dataclass
class _ImportContext:
    """한 번의 임포트 동안 공유되는 조회 결과"""
    user_id: int
    stat_types: dict[str, StatType]
    score_settings: ScoreSettings
    name_counts: dict[str, int]
    weights: ScoringWeights
    deadline: float
    max_duration: float
    hero_links: dict[str, int] = field(default_factory=dict)
    seen_gear_ids: set[str] = field(default_factory=set)
    logged_heroes: int = 0
    logged_gears: int = 0


class ImportService:
    """익스포트 임포트 비즈니스 로직"""

    @staticmethod
    async def process_upload(
        user_id: int,
        raw: Union[bytes, str],
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        max_duration: float = IMPORT.MAX_DURATION_SECONDS,
    ) -> ImportResult:
        """
        업로드 원본 처리 (파싱 + 임포트)

        Args:
            user_id: 소유 사용자 ID
            raw: 업로드 파일 내용
            weights: 기본 가중치 테이블
            max_duration: 최대 처리 시간 (초)

        Returns:
            ImportResult
        """
        started_at = time.monotonic()
        try:
            payload = parse_export_bytes(raw)
        except InvalidExportError as e:
            logger.warning(f"Rejected upload for user {user_id}: {e.reason}")
            return ImportResult.failure("Invalid export file", e.message, started_at)
        return await ImportService.process_fribbels_export(user_id, payload, weights, max_duration)

    @staticmethod
    async def process_fribbels_export(
        user_id: int,
        payload: Any,
        weights: ScoringWeights = DEFAULT_WEIGHTS,
        max_duration: float = IMPORT.MAX_DURATION_SECONDS,
    ) -> ImportResult:
        """
        파싱된 익스포트 임포트

        Args:
            user_id: 소유 사용자 ID
            payload: JSON 객체 (items 필수, heroes 선택)
            weights: 기본 가중치 테이블
            max_duration: 최대 처리 시간 (초), 초과 시 남은 장비는 건너뜀

        Returns:
            ImportResult (일부 실패가 있어도 success=True)

        Raises:
            UserNotFoundError: 사용자가 없음
        """
        started_at = time.monotonic()

        # Guard: 최상위 구조
        try:
            export = FribbelsExport.model_validate(payload)
        except ValidationError as e:
            reason = describe_validation_error(e)
            logger.warning(f"Rejected export for user {user_id}: {reason}")
            return ImportResult.failure("Invalid export file", reason, started_at)

        if not await users_repo.find_user_by_id(user_id):
            raise UserNotFoundError(user_id)

        logger.info(
            f"Starting import for user {user_id} - "
            f"Items: {len(export.items)}, Heroes: {len(export.heroes)}"
        )

        result = ImportResult()
        try:
            heroes = ImportService._validate_heroes(export.heroes, result)
            stat_types, settings_row, name_counts = await asyncio.gather(
                reference_repo.get_stat_type_map(),
                settings_repo.get_settings(user_id),
                hero_repo.count_heroes_by_name(
                    user_id, exclude_ingame_ids=[hero.external_id for hero, _ in heroes]
                ),
            )
            context = _ImportContext(
                user_id=user_id,
                stat_types=stat_types,
                score_settings=ScoreSettings.from_model(settings_row),
                name_counts=name_counts,
                weights=weights,
                deadline=started_at + max_duration,
                max_duration=max_duration,
            )

            for index, (hero, raw) in enumerate(heroes):
                if ImportService._time_limit_reached(context, result, len(heroes) - index, "heroes"):
                    break
                result.record(await ImportService._import_hero(context, hero, raw))

            # 이번 파일에 없는 기존 영웅도 장착 대상이 될 수 있음
            existing_links = await hero_repo.get_hero_id_map(user_id)
            context.hero_links = {**existing_links, **context.hero_links}

            for index, raw in enumerate(export.items):
                if ImportService._time_limit_reached(context, result, len(export.items) - index, "items"):
                    break
                result.record(await ImportService._import_gear(context, raw))

        except BaseORMException as e:
            logger.error(f"Import failed for user {user_id}: {e}", exc_info=True)
            result.success = False
            result.message = "Internal server error"
            result.errors.append(str(e))
            return result.finish(started_at)

        result.message = (
            "Upload partially completed (time limit reached)"
            if result.timed_out else "Upload successful"
        )
        result.finish(started_at)
        logger.info(
            f"Import finished for user {user_id}: {result.gear_count} gears, "
            f"{result.hero_count} heroes, {len(result.errors)} errors, "
            f"{len(result.warnings)} warnings in {result.duration_ms}ms"
        )
        return result

    @staticmethod
    def _time_limit_reached(
        context: _ImportContext, result: ImportResult, remaining: int, kind: str
    ) -> bool:
        """제한 시간 초과 시 남은 레코드 수를 오류로 기록"""
        if time.monotonic() <= context.deadline:
            return False
        result.timed_out = True
        result.errors.append(
            f"Import stopped after {context.max_duration:g}s: {remaining} {kind} not processed"
        )
        logger.warning(
            f"Import time limit reached for user {context.user_id}, {remaining} {kind} skipped"
        )
        return True

    # =========================================================================
    # 영웅
    # =========================================================================

    @staticmethod
    def _validate_heroes(
        raw_heroes: list[Any],
        result: ImportResult,
    ) -> list[tuple[FribbelsHero, dict]]:
        """영웅 레코드 검증 (실패 레코드는 결과에 기록)"""
        valid = []
        seen_ids = set()
        for raw in raw_heroes:
            try:
                hero = FribbelsHero.model_validate(raw)
            except ValidationError as e:
                hero_id = raw.get("id", raw.get("ingameId")) if isinstance(raw, dict) else None
                result.record(ItemOutcome(
                    kind="hero",
                    item_id=None if hero_id is None else str(hero_id),
                    imported=False,
                    reason=describe_validation_error(e),
                ))
                continue

            if hero.external_id in seen_ids:
                result.record(ItemOutcome(
                    kind="hero",
                    item_id=hero.external_id,
                    imported=False,
                    skipped=True,
                    warnings=["duplicate id in export, skipped"],
                ))
                continue
            seen_ids.add(hero.external_id)
            valid.append((hero, raw))
        return valid

    @staticmethod
    async def _import_hero(context: _ImportContext, hero: FribbelsHero, raw: dict) -> ItemOutcome:
        outcome = ItemOutcome(kind="hero", item_id=hero.external_id, imported=False)

        # 명시된 값이 우선, 비어 있는 항목만 추정값으로 채움
        inferred = extract_hero_metadata(raw)
        element = map_hero_element(hero.element) or inferred.element
        rarity = map_hero_rarity(hero.rarity) or inferred.rarity
        hero_class = map_hero_class(hero.hero_class) or inferred.hero_class

        duplicate_count = context.name_counts.get(hero.name, 0) + 1
        context.name_counts[hero.name] = duplicate_count

        values = {
            "name": hero.name,
            "code": hero.code,
            "element": element,
            "rarity": rarity,
            "hero_class": hero_class,
            "duplicate_count": duplicate_count,
            **hero.stat_values(),
        }

        try:
            saved = await hero_repo.upsert_hero(context.user_id, hero.external_id, values)
        except BaseORMException as e:
            logger.error(f"Hero import error ({hero.external_id}): {e}")
            outcome.reason = str(e)
            return outcome

        for linked_id in hero.linked_ids:
            context.hero_links[linked_id] = saved.id

        context.logged_heroes += 1
        if context.logged_heroes <= IMPORT.LOG_SAMPLE_SIZE:
            logger.debug(
                f"Hero {saved.id}: {hero.name} "
                f"({element or 'Unknown'} {rarity or 'Unknown'} {hero_class or 'Unknown'})"
            )

        outcome.imported = True
        return outcome

    # =========================================================================
    # 장비
    # =========================================================================

    @staticmethod
    def _resolve_stat_type(context: _ImportContext, token: str) -> Optional[StatType]:
        stat_type = context.stat_types.get(token)
        if stat_type is None:
            stat_type = context.stat_types.get(map_stat_name(token))
        return stat_type

    @staticmethod
    def _parse_item(raw: Any) -> FribbelsItem:
        """
        장비 레코드 검증

        Raises:
            ItemValidationError: 필수 필드 누락, 범위 초과 등
        """
        try:
            return FribbelsItem.model_validate(raw)
        except ValidationError as e:
            item_id = None
            if isinstance(raw, dict):
                fallback = raw.get("id", raw.get("ingameId"))
                item_id = None if fallback is None else str(fallback)
            raise ItemValidationError(item_id, describe_validation_error(e)) from e

    @staticmethod
    async def _import_gear(context: _ImportContext, raw: Any) -> ItemOutcome:
        try:
            item = ImportService._parse_item(raw)
        except ItemValidationError as e:
            return ItemOutcome(kind="item", item_id=e.item_id, imported=False, reason=e.reason)

        if item.external_id in context.seen_gear_ids:
            return ItemOutcome(
                kind="item",
                item_id=item.external_id,
                imported=False,
                skipped=True,
                warnings=["duplicate id in export, skipped"],
            )

        outcome = ItemOutcome(kind="item", item_id=item.external_id, imported=False)

        # 알 수 없는 토큰은 기본값을 쓰되 경고로 남김
        gear_type = lookup_gear_type(item.gear_type)
        if gear_type is None:
            gear_type = GearType.WEAPON
            outcome.warnings.append(f"unknown gear type '{item.gear_type}', defaulted to WEAPON")
        rank = lookup_gear_rank(item.rank)
        if rank is None:
            rank = GearRank.COMMON
            outcome.warnings.append(f"unknown rank '{item.rank}', defaulted to COMMON")
        main_stat_type = lookup_main_stat_type(item.main_stat_type)
        if main_stat_type is None:
            main_stat_type = MainStatType.ATT
            outcome.warnings.append(
                f"unknown main stat '{item.main_stat_type}', defaulted to ATT"
            )

        resolved = []
        for substat in item.substats:
            stat_type = ImportService._resolve_stat_type(context, substat.type)
            if stat_type is None:
                outcome.warnings.append(f"unknown substat '{substat.type}' skipped")
                continue
            resolved.append((stat_type, substat))

        # Guard: 주옵션 허용 부위 / 주옵션-부옵션 중복
        violation = validate_gear_rules(
            gear_type, main_stat_type, [stat_type.stat_name for stat_type, _ in resolved]
        )
        if violation:
            outcome.reason = violation
            return outcome

        equipped_by_id = None
        if item.is_equipped:
            equipped_by_id = context.hero_links.get(item.ingame_equipped_id)
            if equipped_by_id is None:
                outcome.warnings.append(f"equipped hero {item.ingame_equipped_id} not found")

        snapshot = GearSnapshot(
            main_stat_type=main_stat_type,
            main_stat_value=item.main_stat_value,
            substats=tuple(
                SubstatSnapshot(stat_type.stat_name, substat.value, stat_type.stat_category)
                for stat_type, substat in resolved
            ),
        )
        score_fields = compute_score_fields(snapshot, context.score_settings, context.weights)

        values = {
            "code": item.code,
            "set_name": item.set_name,
            "gear_type": gear_type,
            "rank": rank,
            "level": item.level,
            "enhance": item.enhance,
            "main_stat_type": main_stat_type,
            "main_stat_value": item.main_stat_value,
            "equipped": item.is_equipped,
            "equipped_by_id": equipped_by_id,
            "ingame_equipped_id": item.ingame_equipped_id,
            **score_fields,
        }
        substat_rows = [
            {
                "stat_type_id": stat_type.id,
                "stat_value": substat.value,
                "rolls": substat.rolls,
                "grade": GradeService.get_substat_grade(
                    substat.value, stat_type.stat_name, item.enhance
                ),
            }
            for stat_type, substat in resolved
        ]

        try:
            gear = await gear_repo.replace_gear_with_substats(
                context.user_id, item.external_id, values, substat_rows
            )
        except BaseORMException as e:
            logger.error(f"Gear import error ({item.external_id}): {e}")
            outcome.reason = str(e)
            return outcome

        context.seen_gear_ids.add(item.external_id)

        context.logged_gears += 1
        if context.logged_gears <= IMPORT.LOG_SAMPLE_SIZE:
            logger.debug(
                f"Gear {gear.id}: fScore={score_fields['f_score']} ({score_fields['f_score_grade']}), "
                f"score={score_fields['score']} ({score_fields['score_grade']})"
            )

        outcome.imported = True
        return outcome
