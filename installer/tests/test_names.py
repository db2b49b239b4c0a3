import pytest

from mathac.core.names import normalize_name, reference_key, snapshot_key, strip_marker


@pytest.mark.parametrize("name", ["infinity", "\\infinity", "\\\\infinity"])
def test_normalize_name_yields_exactly_one_marker(name):
    assert normalize_name(name) == "\\infinity"


def test_normalize_name_is_idempotent():
    once = normalize_name("union")
    assert normalize_name(once) == once


def test_normalize_empty_name_is_only_the_marker():
    assert normalize_name("") == "\\"


def test_reference_key_strips_marker_and_backticks():
    assert reference_key("\\infty") == "infty"
    assert reference_key("`\\infty`") == "infty"
    assert reference_key("\\`cup`") == "cup"


def test_reference_key_keeps_negated_forms():
    assert reference_key("/\\le") == "/\\le"
    assert reference_key("/<") == "/<"


def test_snapshot_key_removes_single_marker():
    assert snapshot_key("\\alpha") == "alpha"
    assert snapshot_key("/<") == "/<"
    assert strip_marker("\\\\alpha") == "alpha"
