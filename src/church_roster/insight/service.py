from __future__ import annotations

import json
import logging
from typing import Any, List

from ..core.constants import INSIGHT_EMPTY, INSIGHT_UNAVAILABLE
from ..students.model import StudentDraft
from .generator import TextGenerator

logger = logging.getLogger(__name__)

INSIGHT_PROMPT = """
당신은 초등부 교회 학교의 베테랑 부장 선생님입니다.
다음 출석 통계를 바탕으로 선생님들에게 도움이 될만한 짧고 따뜻한 격려의 말과
데이터에 기반한 간단한 분석 코멘트를 한국어로 작성해주세요.
대상은 3학년, 4학년 학생들입니다.

데이터:
- 전체 학생 수: {total}명
- 오늘/최근 평균 출석률: {rate:.1f}%
- 최근 추세: {trend}

말투는 정중하고 부드럽게, 300자 이내로 요약해주세요. 어린이들을 사랑하는 마음을 담아주세요.
"""

MOCK_STUDENTS_PROMPT = """
한국 교회 초등부(3학년, 4학년) 학생 5명의 가상 데이터를 JSON 배열 형식으로 생성해주세요.
각 객체는 다음 필드를 가져야 합니다:
- name (한국 이름)
- cellName (예: 3학년 1반, 3학년 2반, 4학년 1반, 4학년 2반 등. 3학년은 1~4반, 4학년은 1~4반까지 있음)
- grade (3학년, 4학년 중 하나)
- teacherName (한국 선생님 이름)

JSON만 출력하고 마크다운이나 다른 텍스트는 포함하지 마세요.
"""


def drafts_from_mock(items: Any) -> List[StudentDraft]:
    """Student-shaped objects to drafts. Entries without a name are skipped."""
    if not isinstance(items, list):
        raise ValueError("mock students must be a JSON array")
    drafts = []
    for item in items:
        if not isinstance(item, dict):
            continue
        name = str(item.get("name") or "").strip()
        if not name:
            continue
        drafts.append(
            StudentDraft(
                name=name,
                grade=str(item.get("grade") or ""),
                cell_name=str(item.get("cellName") or ""),
                teacher_name=str(item.get("teacherName") or ""),
            )
        )
    return drafts


class InsightService:
    """Calls to the hosted text generator. Failures never leave this class."""

    def __init__(self, generator: TextGenerator):
        self._generator = generator

    def dashboard_insight(self, stats) -> str:
        prompt = INSIGHT_PROMPT.format(
            total=stats.total_students,
            rate=stats.attendance_rate,
            trend=json.dumps([p.to_dict() for p in stats.recent_trend], ensure_ascii=False),
        )
        try:
            text = self._generator.generate(prompt)
        except Exception:
            logger.exception("Dashboard insight generation failed")
            return INSIGHT_UNAVAILABLE
        return text or INSIGHT_EMPTY

    def mock_students(self) -> List[StudentDraft]:
        try:
            text = self._generator.generate(MOCK_STUDENTS_PROMPT, json_output=True)
            return drafts_from_mock(json.loads(text or "[]"))
        except Exception:
            logger.exception("Mock student generation failed")
            return []
