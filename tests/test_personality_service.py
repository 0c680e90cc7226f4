import pytest

from core.constants import PERSONALITY_QUESTIONS, get_question_by_index
from models.orm_personality import PersonalityEntity
from schemas.personality import PersonalityIn
from services.personality_service import (
    list_personality,
    map_personality_with_questions,
    replace_personality,
)

from payloads import personality_payload


def _answers(prefix="answer"):
    return PersonalityIn(answers=personality_payload(prefix))


def test_replace_then_read_in_index_order(db_session, brand):
    shuffled = personality_payload()
    shuffled = shuffled[4:] + shuffled[:4]
    replace_personality(db_session, brand.id, PersonalityIn(answers=shuffled))

    rows = list_personality(db_session, brand.id)
    assert [r.question_index for r in rows] == list(range(9))
    assert [r.answer for r in rows] == [f"answer {i}" for i in range(9)]


def test_replace_twice_keeps_nine_rows(db_session, brand):
    replace_personality(db_session, brand.id, _answers("first"))
    replace_personality(db_session, brand.id, _answers("second"))

    rows = list_personality(db_session, brand.id)
    assert len(rows) == 9
    assert all(r.answer.startswith("second") for r in rows)
    assert db_session.query(PersonalityEntity).count() == 9


def test_replace_rolls_back_when_insert_fails(db_session, brand, monkeypatch):
    replace_personality(db_session, brand.id, _answers("original"))

    def _fail(rows):
        raise RuntimeError("insert failed")

    monkeypatch.setattr(db_session, "add_all", _fail)
    with pytest.raises(RuntimeError):
        replace_personality(db_session, brand.id, _answers("new"))
    monkeypatch.undo()

    rows = list_personality(db_session, brand.id)
    assert len(rows) == 9
    assert all(r.answer.startswith("original") for r in rows)


def test_map_with_questions_marks_unanswered(db_session, brand):
    db_session.add(PersonalityEntity(brand_id=brand.id, question_index=2, answer="Calm"))
    db_session.commit()

    mapped = map_personality_with_questions(list_personality(db_session, brand.id))
    assert len(mapped) == 9
    assert mapped[2].answer == "Calm"
    assert mapped[2].is_answered is True
    assert mapped[2].question == PERSONALITY_QUESTIONS[2]
    assert [m.is_answered for m in mapped].count(True) == 1
    assert mapped[0].answer == ""


def test_get_question_by_index_bounds():
    assert get_question_by_index(0) == PERSONALITY_QUESTIONS[0]
    assert get_question_by_index(8) == PERSONALITY_QUESTIONS[8]
    assert get_question_by_index(-1) is None
    assert get_question_by_index(9) is None


def test_long_answer_round_trips(db_session, brand):
    payload = personality_payload()
    payload[4]["answer"] = "long " * 4_000
    replace_personality(db_session, brand.id, PersonalityIn(answers=payload))

    rows = list_personality(db_session, brand.id)
    assert rows[4].answer == ("long " * 4_000).strip()
