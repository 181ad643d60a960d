"""Tests for the error taxonomy and its rendering contract."""

from __future__ import annotations

import pytest

from make_mcp.errors import ErrorKind, MakeError, MakeMCPError, MappingError, NormalizedError, ValidationError


class TestValidationError:
    def test_with_field(self):
        error = ValidationError("Field is required", "scenarioId")

        assert error.kind is ErrorKind.LOCAL_VALIDATION
        assert error.message == "Field is required"
        assert error.field == "scenarioId"
        assert error.sub_errors == ()
        assert str(error) == "ValidationError: Field is required (field: scenarioId)"

    def test_without_field(self):
        error = ValidationError("Invalid input")

        assert error.field is None
        assert str(error) == "ValidationError: Invalid input"

    def test_empty_field_adds_no_suffix(self):
        assert str(ValidationError("Invalid input", "")) == "ValidationError: Invalid input"

    def test_is_raisable(self):
        with pytest.raises(NormalizedError) as exc_info:
            raise ValidationError("blueprint is required", "blueprint")
        assert exc_info.value.render() == "ValidationError: blueprint is required (field: blueprint)"


class TestMakeError:
    def test_without_sub_errors(self):
        error = MakeError("Scenario not found.")

        assert error.kind is ErrorKind.REMOTE
        assert error.sub_errors == ()
        assert error.field is None
        assert str(error) == "MakeError: Scenario not found."

    def test_sub_errors_render_one_line_each(self):
        error = MakeError("Validation failed for 2 parameter(s).", ["a is missing", "b is missing"])
        assert str(error) == "MakeError: Validation failed for 2 parameter(s).\n - a is missing\n - b is missing"

    def test_sub_errors_are_copied(self):
        source = ["one"]
        error = MakeError("failed", source)
        source.append("two")
        assert error.sub_errors == ("one",)

    def test_repr(self):
        assert repr(MakeError("x", status_code=400)) == "MakeError(message='x', sub_errors=[], status_code=400)"


class TestImmutability:
    @pytest.mark.parametrize(
        ("error", "attribute"),
        [
            (MakeError("x"), "message"),
            (MakeError("x"), "sub_errors"),
            (MakeError("x"), "status_code"),
            (ValidationError("x", "f"), "field"),
            (MappingError("x", "p"), "path"),
        ],
    )
    def test_fields_are_read_only(self, error, attribute):
        with pytest.raises(AttributeError, match="read-only"):
            setattr(error, attribute, "changed")

    def test_traceback_still_attaches(self):
        try:
            raise MakeError("x")
        except MakeError as error:
            assert error.__traceback__ is not None


class TestAbstractBases:
    @pytest.mark.parametrize("cls", [MakeMCPError, NormalizedError])
    def test_bases_cannot_be_instantiated(self, cls):
        with pytest.raises(TypeError, match="abstract"):
            cls("x")

    def test_concrete_subclass_without_render_is_rejected(self):
        class Incomplete(NormalizedError):
            pass

        with pytest.raises(TypeError, match="Incomplete is abstract"):
            Incomplete("x")


class TestMappingError:
    def test_render_with_path(self):
        assert str(MappingError("bad node", "a.items")) == "MappingError: bad node (at: a.items)"

    def test_render_at_root(self):
        assert str(MappingError("bad node")) == "MappingError: bad node"

    def test_hierarchy(self):
        error = MappingError("bad node")
        assert isinstance(error, ValueError)
        assert isinstance(error, MakeMCPError)
        assert not isinstance(error, NormalizedError)


def test_rendering_needs_no_kind_inspection():
    errors: list[MakeMCPError] = [
        MakeError("remote", ["sub"]),
        ValidationError("local", "f"),
        MappingError("mapping", "p"),
    ]
    assert [str(e) for e in errors] == [
        "MakeError: remote\n - sub",
        "ValidationError: local (field: f)",
        "MappingError: mapping (at: p)",
    ]
