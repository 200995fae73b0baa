from __future__ import annotations

import json

from church_roster.core.constants import INSIGHT_EMPTY, INSIGHT_UNAVAILABLE
from church_roster.dashboard.stats import DashboardStats, TrendPoint
from church_roster.insight.generator import UnavailableTextGenerator
from church_roster.insight.service import InsightService, drafts_from_mock


class FakeGenerator:
    def __init__(self, reply: str = ""):
        self.reply = reply
        self.calls = []

    def generate(self, prompt: str, *, json_output: bool = False) -> str:
        self.calls.append((prompt, json_output))
        return self.reply


STATS = DashboardStats(total_students=10, attendance_rate=80.0, recent_trend=[TrendPoint("01-07", 80.0, 8)])


def test_insight_prompt_carries_the_numbers():
    gen = FakeGenerator("선생님들 수고 많으셨습니다.")

    text = InsightService(gen).dashboard_insight(STATS)

    assert text == "선생님들 수고 많으셨습니다."
    prompt, json_output = gen.calls[0]
    assert "10명" in prompt
    assert "80.0%" in prompt
    assert '"01-07"' in prompt
    assert json_output is False


def test_insight_falls_back_when_generator_fails():
    assert InsightService(UnavailableTextGenerator()).dashboard_insight(STATS) == INSIGHT_UNAVAILABLE


def test_insight_falls_back_on_empty_reply():
    assert InsightService(FakeGenerator("")).dashboard_insight(STATS) == INSIGHT_EMPTY


def test_mock_students_are_parsed_from_json():
    reply = json.dumps(
        [
            {"name": "김하준", "grade": "3학년", "cellName": "3학년 1반", "teacherName": "박선생"},
            {"name": "", "grade": "4학년"},
            "not an object",
        ],
        ensure_ascii=False,
    )
    gen = FakeGenerator(reply)

    drafts = InsightService(gen).mock_students()

    assert [(d.name, d.cell_name, d.teacher_name) for d in drafts] == [("김하준", "3학년 1반", "박선생")]
    assert gen.calls[0][1] is True


def test_mock_students_empty_on_bad_reply():
    assert InsightService(FakeGenerator("sorry, no JSON")).mock_students() == []
    assert InsightService(FakeGenerator('{"name": "x"}')).mock_students() == []
    assert InsightService(UnavailableTextGenerator()).mock_students() == []


def test_drafts_from_mock_defaults_missing_fields():
    (draft,) = drafts_from_mock([{"name": " 이서윤 "}])

    assert (draft.name, draft.grade, draft.cell_name, draft.teacher_name) == ("이서윤", "", "", "")
