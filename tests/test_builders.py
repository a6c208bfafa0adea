import pytest

from fitprint.builders import ListBuilder, MapBuilder, SetBuilder, StructBuilder, TupleBuilder
from fitprint.doc import Group, Text
from fitprint.printer import render
from tests._shared_cases import number_list, numbers

TRUE = Text("true")
FRACTION = Text('"10/20"')


def _foo() -> StructBuilder:
    return StructBuilder("Foo").field("bar", TRUE).field("baz", FRACTION)


def test_struct_without_fields_is_just_the_name() -> None:
    doc = StructBuilder("Foo").finish()

    assert doc == Group(Text("Foo"), breakable=False)
    assert render(doc, 1) == "Foo"


def test_struct_single_and_multiple_fields() -> None:
    assert render(StructBuilder("Foo").field("bar", TRUE).finish(), 80) == "Foo { bar: true }"
    assert render(_foo().finish(), 80) == 'Foo { bar: true, baz: "10/20" }'


def test_struct_nested_breaks_outer_before_inner() -> None:
    bar = StructBuilder("Bar").field("foo", _foo().finish()).field("hello", Text('"world"')).finish()

    assert render(bar, 60) == 'Bar { foo: Foo { bar: true, baz: "10/20" }, hello: "world" }'
    assert render(bar, 59) == 'Bar {\n    foo: Foo { bar: true, baz: "10/20" },\n    hello: "world",\n}'
    assert render(bar, 30) == (
        "Bar {\n"
        "    foo: Foo {\n"
        "        bar: true,\n"
        '        baz: "10/20",\n'
        "    },\n"
        '    hello: "world",\n'
        "}"
    )


def test_struct_non_exhaustive() -> None:
    assert render(StructBuilder("Foo").finish_non_exhaustive(), 1) == "Foo { .. }"
    assert render(_foo().finish_non_exhaustive(), 80) == 'Foo { bar: true, baz: "10/20", .. }'
    assert render(_foo().finish_non_exhaustive(), 10) == 'Foo {\n    bar: true,\n    baz: "10/20",\n    ..\n}'


def test_tuple_layouts() -> None:
    assert render(TupleBuilder("Foo").finish(), 80) == "Foo"
    assert render(TupleBuilder("Foo").field(TRUE).field(FRACTION).finish(), 80) == 'Foo(true, "10/20")'
    assert render(TupleBuilder("Foo").field(TRUE).field(FRACTION).finish(), 5) == 'Foo(\n    true,\n    "10/20",\n)'


def test_unnamed_tuple_keeps_singleton_comma() -> None:
    assert render(TupleBuilder().finish(), 80) == "()"
    assert render(TupleBuilder().field(Text("1")).finish(), 80) == "(1,)"
    assert render(TupleBuilder().field(Text("1")).finish(), 2) == "(\n    1,\n)"
    assert render(TupleBuilder().fields(numbers(1, 2)).finish(), 80) == "(1, 2)"


def test_list_and_set_layouts() -> None:
    assert render(ListBuilder().elements(numbers(10, 11)).finish(), 80) == "[10, 11]"
    assert render(SetBuilder().elements(numbers(10, 11)).finish(), 80) == "{10, 11}"
    assert render(SetBuilder().elements(numbers(10, 11)).finish(), 4) == "{\n    10,\n    11,\n}"


@pytest.mark.parametrize("width", [1, 2, 80])
def test_empty_collections_never_break(width: int) -> None:
    assert render(ListBuilder().finish(), width) == "[]"
    assert render(SetBuilder().finish(), width) == "{}"
    assert render(MapBuilder().finish(), width) == "{}"


def test_map_layouts() -> None:
    doc = MapBuilder().entry(Text('"A"'), Text("10")).entry(Text('"B"'), Text("11")).finish()

    assert render(doc, 80) == '{"A": 10, "B": 11}'
    assert render(doc, 10) == '{\n    "A": 10,\n    "B": 11,\n}'


def test_map_value_breaks_relative_to_key() -> None:
    doc = MapBuilder().entries([(Text('"k"'), number_list(1, 2, 3))]).finish()

    assert render(doc, 8) == '{\n    "k": [\n        1,\n        2,\n        3,\n    ],\n}'


def test_builder_indent_is_configurable() -> None:
    doc = ListBuilder(indent=2).elements(numbers(1, 2)).finish()

    assert render(doc, 3) == "[\n  1,\n  2,\n]"


def test_broken_collections_end_with_trailing_separator() -> None:
    for count in range(1, 5):
        output = render(ListBuilder().elements(numbers(*range(count))).finish(), 1)
        assert output.endswith(",\n]")
        flat = render(ListBuilder().elements(numbers(*range(count))).finish(), 80)
        assert not flat.endswith(",]")


def test_map_key_then_value_matches_entry() -> None:
    split = MapBuilder().key(Text('"A"')).value(Text("10")).key(Text('"B"')).value(Text("11")).finish()
    whole = MapBuilder().entry(Text('"A"'), Text("10")).entry(Text('"B"'), Text("11")).finish()

    assert split == whole
    assert render(split, 80) == '{"A": 10, "B": 11}'


def test_map_rejects_key_without_value() -> None:
    builder = MapBuilder().key(Text("k"))

    with pytest.raises(RuntimeError, match=r"MapBuilder.key\(\) called while a key is waiting"):
        builder.key(Text("k2"))
    with pytest.raises(RuntimeError, match=r"MapBuilder.entry\(\) called while a key is waiting"):
        builder.entry(Text("k2"), TRUE)
    with pytest.raises(RuntimeError, match=r"MapBuilder.finish\(\) called while a key is waiting"):
        builder.finish()


def test_map_rejects_value_before_key() -> None:
    with pytest.raises(RuntimeError, match=r"MapBuilder.value\(\) called before key\(\)"):
        MapBuilder().value(TRUE)
    with pytest.raises(RuntimeError, match=r"value\(\) called before key\(\)"):
        MapBuilder().key(Text("k")).value(TRUE).value(TRUE)


def test_map_pending_key_survives_rejected_finish() -> None:
    builder = MapBuilder().key(Text("k"))
    with pytest.raises(RuntimeError):
        builder.finish()

    assert render(builder.value(TRUE).finish(), 80) == "{k: true}"


def test_map_split_calls_after_finish() -> None:
    builder = MapBuilder()
    builder.finish()

    with pytest.raises(RuntimeError, match=r"MapBuilder.key\(\) called after finish\(\)"):
        builder.key(TRUE)
    with pytest.raises(RuntimeError, match=r"MapBuilder.value\(\) called after finish\(\)"):
        builder.value(TRUE)


def test_map_key_must_be_a_document() -> None:
    with pytest.raises(TypeError, match=r"MapBuilder.key\(\) expects a finished Document, got str"):
        MapBuilder().key("k")


def test_builder_rejects_calls_after_finish() -> None:
    builder = StructBuilder("Foo").field("a", TRUE)
    builder.finish()

    with pytest.raises(RuntimeError, match=r"StructBuilder.field\(\) called after finish\(\)"):
        builder.field("b", TRUE)
    with pytest.raises(RuntimeError, match=r"StructBuilder.finish\(\) called after finish\(\)"):
        builder.finish()
    with pytest.raises(RuntimeError, match="finish_non_exhaustive"):
        builder.finish_non_exhaustive()


def test_every_builder_kind_rejects_reuse() -> None:
    finished = [
        TupleBuilder("T"),
        ListBuilder(),
        SetBuilder(),
        MapBuilder(),
    ]
    for builder in finished:
        builder.finish()

    with pytest.raises(RuntimeError, match="TupleBuilder"):
        finished[0].field(TRUE)
    with pytest.raises(RuntimeError, match="ListBuilder"):
        finished[1].element(TRUE)
    with pytest.raises(RuntimeError, match="SetBuilder"):
        finished[2].element(TRUE)
    with pytest.raises(RuntimeError, match="MapBuilder"):
        finished[3].entry(TRUE, TRUE)


def test_builder_rejects_unfinished_children() -> None:
    with pytest.raises(TypeError, match="expects a finished Document"):
        ListBuilder().element(ListBuilder())
    with pytest.raises(TypeError, match="got str"):
        MapBuilder().entry(Text("k"), "v")


def test_builder_rejects_negative_indent() -> None:
    with pytest.raises(ValueError, match="indent"):
        ListBuilder(indent=-1)
