from sqlalchemy.exc import OperationalError

from models.orm_personality import PersonalityEntity
from models.orm_rule import RuleEntity
from services import actions

from payloads import adjectives_payload, personality_payload, rule_payload


def test_setup_brand_returns_brand(db_session):
    result = actions.setup_brand(db_session, "  Acme  ")
    assert result.success is True
    assert result.error is None
    assert result.brand.name == "Acme"


def test_setup_brand_twice_is_rejected(db_session, brand):
    result = actions.setup_brand(db_session, "Another")
    assert result.success is False
    assert result.error_code == "already_exists"
    assert "only have one brand" in result.error


def test_setup_brand_validation_message(db_session):
    result = actions.setup_brand(db_session, "")
    assert result.success is False
    assert result.error == "Brand name is required"
    assert result.error_code == "validation"


def test_mutations_without_brand(db_session):
    results = [
        actions.update_brand_name(db_session, "Acme"),
        actions.update_personality(db_session, personality_payload()),
        actions.update_adjectives(db_session, adjectives_payload()),
        actions.create_rule(db_session, rule_payload()),
        actions.toggle_rule(db_session, 1, False),
        actions.update_rule(db_session, 1, {"title": "New"}),
        actions.delete_rule(db_session, 1),
    ]
    for r in results:
        assert r.success is False
        assert r.error_code == "no_brand"
        assert r.error == "No brand found. Please set up your brand first."


def test_update_brand_name(db_session, brand):
    result = actions.update_brand_name(db_session, "Acme Corp")
    assert result.success is True
    assert result.brand.name == "Acme Corp"


def test_invalid_personality_leaves_storage_unchanged(db_session, brand):
    assert actions.update_personality(db_session, personality_payload("kept")).success

    result = actions.update_personality(db_session, personality_payload()[:5])
    assert result.success is False
    assert result.error == "Must have exactly 9 answers"

    rows = db_session.query(PersonalityEntity).all()
    assert len(rows) == 9
    assert all(r.answer.startswith("kept") for r in rows)


def test_rule_lifecycle(db_session, brand):
    created = actions.create_rule(db_session, rule_payload())
    assert created.success is True
    assert created.rule.is_active is True

    rule_id = created.rule.id
    updated = actions.update_rule(db_session, rule_id, {"dont_example": "It was decided that..."})
    assert updated.success is True
    assert updated.rule.dont_example == "It was decided that..."
    assert updated.rule.title == created.rule.title

    toggled = actions.toggle_rule(db_session, rule_id, False)
    assert toggled.rule.is_active is False

    deleted = actions.delete_rule(db_session, rule_id)
    assert deleted.success is True
    assert deleted.rule is None
    assert db_session.query(RuleEntity).count() == 0


def test_unknown_rule_not_found(db_session, brand):
    result = actions.toggle_rule(db_session, 42, True)
    assert result.success is False
    assert result.error == "Rule not found."
    assert result.error_code == "not_found"


def test_storage_fault_is_reported_generically(db_session, brand, monkeypatch):
    def _boom(*args, **kwargs):
        raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db_session, "commit", _boom)
    result = actions.create_rule(db_session, rule_payload())

    assert result.success is False
    assert result.error == "Failed to create rule. Please try again."
    assert result.error_code == "storage"
    assert "disk" not in result.error


def test_outage_during_brand_lookup_is_not_reported_as_missing_brand(db_session, monkeypatch):
    def _boom(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("connection refused"))

    monkeypatch.setattr(db_session, "query", _boom)
    result = actions.update_personality(db_session, personality_payload())

    assert result.success is False
    assert result.error_code == "storage"
    assert result.error == "Failed to update personality. Please try again."


def test_setup_brand_reports_existing_brand_before_validating(db_session, brand):
    result = actions.setup_brand(db_session, "   ")
    assert result.success is False
    assert result.error_code == "already_exists"


def test_session_usable_after_brand_lookup_outage(db_session, brand, monkeypatch):
    rollbacks = []
    real_rollback = db_session.rollback
    real_query = db_session.query

    def _spy():
        rollbacks.append(True)
        real_rollback()

    def _boom(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("server closed the connection"))

    monkeypatch.setattr(db_session, "rollback", _spy)
    monkeypatch.setattr(db_session, "query", _boom)
    failed = actions.update_personality(db_session, personality_payload())
    assert failed.error_code == "storage"
    assert rollbacks == [True]

    monkeypatch.setattr(db_session, "query", real_query)
    result = actions.update_personality(db_session, personality_payload())
    assert result.success is True
    assert db_session.query(PersonalityEntity).count() == 9
