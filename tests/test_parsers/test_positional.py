import pytest

from argwright.exceptions import (
    MissingMandatoryArgumentError,
    RegistrationError,
    TypeCoercionError,
    UnexpectedTrailingPositionalError,
)
from argwright.parser import ArgumentRegistry
from argwright.parser.positional import assign_positionals


def make_registry() -> ArgumentRegistry:
    registry = ArgumentRegistry()
    registry.positional("source")
    registry.positional("target")
    registry.positional("mode", default="copy", indicator="mode_given")
    registry.positional("count", type=int, default=1)
    return registry


def test_positionals_assigned_in_declaration_order():
    result = make_registry().parse(["a.txt", "b.txt", "move", "3"])
    assert result.values == {
        "source": "a.txt",
        "target": "b.txt",
        "mode": "move",
        "count": 3,
    }
    assert result["mode_given"] is True


def test_optional_positionals_fall_back_to_defaults():
    result = make_registry().parse(["a.txt", "b.txt"])
    assert result["mode"] == "copy"
    assert result["count"] == 1
    assert result["mode_given"] is False


def test_missing_mandatory_positional_names_first_unfilled():
    with pytest.raises(MissingMandatoryArgumentError) as excinfo:
        make_registry().parse(["a.txt"])
    assert excinfo.value.spec == "target"


def test_positional_values_are_decoded():
    with pytest.raises(TypeCoercionError) as excinfo:
        make_registry().parse(["a", "b", "move", "many"])
    assert excinfo.value.spec == "count"
    assert excinfo.value.message.startswith("Invalid value for 'count':")


def test_trailing_rejected_by_default():
    with pytest.raises(UnexpectedTrailingPositionalError) as excinfo:
        make_registry().parse(["a", "b", "c", "4", "extra"])
    assert excinfo.value.token == "extra"
    assert excinfo.value.message == "Unexpected positional argument: extra"


def test_mandatory_after_optional_is_rejected():
    registry = ArgumentRegistry()
    registry.positional("first", default="x")
    with pytest.raises(RegistrationError):
        registry.positional("second")


def test_boolean_positional_is_rejected():
    registry = ArgumentRegistry()
    with pytest.raises(RegistrationError):
        registry.positional("flag", type=bool)


def test_assign_positionals_directly():
    registry = make_registry()
    consumed = []
    outcome = assign_positionals(
        registry.positionals,
        ["a", "b", "c", "4", "x", "y"],
        lambda spec, text: consumed.append((spec.canonical, text)),
        allow_trailing=True,
    )
    assert consumed == [("source", "a"), ("target", "b"), ("mode", "c"), ("count", "4")]
    assert [spec.canonical for spec in outcome.assigned] == [
        "source",
        "target",
        "mode",
        "count",
    ]
    assert outcome.unfilled == []
    assert outcome.trailing == ["x", "y"]


def test_assign_positionals_reports_unfilled():
    registry = make_registry()
    outcome = assign_positionals(registry.positionals, ["a", "b"], lambda *_: None)
    assert [spec.canonical for spec in outcome.unfilled] == ["mode", "count"]
    assert outcome.trailing == []
