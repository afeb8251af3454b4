import pytest

from statica import ContractViolation
from statica.models import ResponseDraft


def test_draft_defaults():
    draft = ResponseDraft()
    assert draft.status_code == 200
    assert draft.content_type is None
    assert not draft.queued
    assert not draft.finalized


def test_headers_are_case_insensitive():
    draft = ResponseDraft()
    draft.set_header("X-Thing", 1)
    assert draft.headers["x-thing"] == "1"


def test_explicit_content_type_is_kept():
    draft = ResponseDraft()
    draft.set_content_type("text/plain", explicit=True)
    draft.set_content_type("text/html")
    assert draft.content_type == "text/plain"

    draft.set_content_type("text/css", explicit=True)
    assert draft.content_type == "text/css"


def test_raw_headers_include_content_type():
    draft = ResponseDraft()
    draft.set_header("Location", "/test")
    draft.set_content_type("text/plain")
    assert draft.raw_headers() == [
        (b"location", b"/test"),
        (b"content-type", b"text/plain"),
    ]


def test_finalized_draft_rejects_mutation():
    draft = ResponseDraft()
    draft.finalized = True
    with pytest.raises(ContractViolation):
        draft.set_status(404)
    with pytest.raises(ContractViolation):
        draft.set_header("X-Late", "1")
    with pytest.raises(ContractViolation):
        draft.queue(b"late")


def test_locked_draft_rejects_mutation_but_stays_open():
    draft = ResponseDraft()
    draft.queue(b"body")
    draft.locked = True
    with pytest.raises(ContractViolation):
        draft.set_status(200)
    with pytest.raises(ContractViolation):
        draft.set_content_type("text/css", explicit=True)
    draft.ensure_open()
