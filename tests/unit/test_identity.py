"""Unit tests for actor identities."""

from dsa_survey.core.identity import ActorIdentity, ActorKind


def test_external_identity_is_user():
    identity = ActorIdentity.external("alice")

    assert identity.kind is ActorKind.USER
    assert identity.kind.collection == "users"
    assert str(identity) == "alice"


def test_generated_identities_are_unique_sessions():
    ids = {ActorIdentity.generated().actor_id for _ in range(1000)}

    assert len(ids) == 1000
    assert ActorIdentity.generated().kind.collection == "sessions"


def test_session_reference_keeps_id():
    assert ActorIdentity.session("abc") == ActorIdentity("abc", ActorKind.SESSION)
