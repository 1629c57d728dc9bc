"""Tests for the name resolver: snake_case fragments ↔ namespaces."""

import pytest

from refactoring_catalog.errors import InvalidIdentifierFragment
from refactoring_catalog.naming import camel_case, namespace_for_path, snake_case


def test_nested_fragment():
    assert (
        camel_case("first_set_of_refactorings::change_function_declaration")
        == "FirstSetOfRefactorings::ChangeFunctionDeclaration"
    )


def test_single_segment():
    assert camel_case("split_phase") == "SplitPhase"


def test_no_underscores_only_first_letter():
    assert camel_case("refactorings") == "Refactorings"


def test_single_letter_runs_merge():
    assert camel_case("a::b_c::one") == "A::BC::One"


def test_digits_are_part_of_a_run():
    assert camel_case("step2_of_3") == "Step2Of3"


def test_custom_separator():
    assert camel_case("extract_function.in_a_class", separator=".") == "ExtractFunction.InAClass"


@pytest.mark.parametrize(
    "fragment",
    [
        "",
        "double__underscore",
        "_leading",
        "trailing_",
        "Upper",
        "camelCase",
        "dash-ed",
        "a::::b",
        "a::",
        "::a",
        "a.b",
        "spaced out",
    ],
)
def test_rejects_fragments_outside_alphabet(fragment):
    with pytest.raises(InvalidIdentifierFragment):
        camel_case(fragment)


@pytest.mark.parametrize(
    "fragment",
    [
        "split_phase",
        "first_set_of_refactorings::extract_variable::in_a_class",
        "a::b_c::one",
        "inline_function::simple_case",
        "step2_of_3",
    ],
)
def test_round_trip_is_idempotent(fragment):
    namespace = camel_case(fragment)
    assert camel_case(snake_case(namespace)) == namespace
    assert camel_case(snake_case(namespace)) == camel_case(snake_case(namespace))


def test_snake_case_inverse():
    assert snake_case("FirstSetOfRefactorings::SplitPhase") == "first_set_of_refactorings::split_phase"


def test_snake_case_rejects_lower_case_segment():
    with pytest.raises(InvalidIdentifierFragment):
        snake_case("FirstSet::split")


def test_namespace_keeps_directories_and_file_stem():
    assert (
        namespace_for_path("./first_set_of_refactorings/extract_variable/in_a_class.py")
        == "FirstSetOfRefactorings::ExtractVariable::InAClass"
    )


def test_namespace_for_abc_tree():
    assert namespace_for_path("./a/b_c/one.py") == "A::BC::One"


def test_namespace_without_root_marker_drops_first_segment():
    # Elements [1:-1]: without './' the first directory is the dropped element
    assert namespace_for_path("a/b_c/one.py") == "BC::One"


def test_namespace_rejects_bad_directory_names():
    with pytest.raises(InvalidIdentifierFragment):
        namespace_for_path("./My Examples/one.py")
