import json
from pathlib import Path

import pytest

from schema_to_cs.context import ClassDef, Context, DescriptorKind, EnumDef, EnumMember, MemberValue, MemberValueKind, Property
from schema_to_cs.errors import MalformedEnumMemberError, SchemaLoadError


def load_context():
    with open(Path(__file__).parent / "test_data" / "player_context.json") as f:
        return Context.from_dict(json.load(f))


@pytest.mark.parametrize(
    "declared, kind, value, data_type, literal",
    [
        ("5", MemberValueKind.INTEGER, 5, "int", "5"),
        ("5.5", MemberValueKind.FLOAT, 5.5, "float", "5.5f"),
        ("red", MemberValueKind.TEXT, "red", "string", '"red"'),
        (" 7 ", MemberValueKind.INTEGER, 7, "int", "7"),
        ("-3", MemberValueKind.INTEGER, -3, "int", "-3"),
        ("1e3", MemberValueKind.INTEGER, 1000, "int", "1000"),
        ("2.0", MemberValueKind.INTEGER, 2, "int", "2"),
        ("0x10", MemberValueKind.INTEGER, 16, "int", "16"),
        ("Infinity", MemberValueKind.TEXT, "Infinity", "string", '"Infinity"'),
        ('say "hi"', MemberValueKind.TEXT, 'say "hi"', "string", '"say \\"hi\\""'),
        (12, MemberValueKind.INTEGER, 12, "int", "12"),
        (0.25, MemberValueKind.FLOAT, 0.25, "float", "0.25f"),
    ],
)
def test_member_value_classification(declared, kind, value, data_type, literal):
    member_value = MemberValue.from_declared(declared, 3)
    assert member_value.kind == kind
    assert member_value.value == value
    assert member_value.data_type == data_type
    assert member_value.literal == literal


@pytest.mark.parametrize("declared", [None, "", "  ", "\t"])
def test_member_without_value_is_positional(declared):
    member_value = MemberValue.from_declared(declared, 4)
    assert member_value.kind == MemberValueKind.POSITIONAL
    assert member_value.literal == "4"
    assert member_value.data_type == "int"


@pytest.mark.parametrize("declared", [True, ["1"], {"value": 1}, float("nan")])
def test_malformed_member_value(declared):
    with pytest.raises(MalformedEnumMemberError) as excinfo:
        MemberValue.from_declared(declared, 0, "ColorEnum", "Red")
    assert "ColorEnum.Red" in str(excinfo.value)


def test_enum_positions_and_suffix():
    enum = EnumDef(name="ColorEnum", members=[EnumMember("Red"), EnumMember("Blue", "5"), EnumMember("Green")])
    assert enum.is_enumeration is True
    assert [v.literal for v in enum.member_values()] == ["0", "5", "2"]
    assert all(m.value is None for m in enum.members)


def test_shared_member_takes_position_in_each_enum():
    blue = EnumMember("Blue")
    all_colors = EnumDef(name="AllEnum", members=[EnumMember("Red"), blue])
    only_blue = EnumDef(name="BlueEnum", members=[blue])
    assert all_colors.member_values()[1].literal == "1"
    assert only_blue.member_values()[0].literal == "0"


def test_member_appended_after_construction():
    enum = EnumDef(name="ColorEnum")
    enum.members.append(EnumMember("Red"))
    enum.members.append(EnumMember("Blue", "4"))
    assert [v.literal for v in enum.member_values()] == ["0", "4"]


def test_enum_without_suffix_is_struct():
    enum = EnumDef(name="Limits", members=[EnumMember("MAX", "10")])
    assert enum.is_enumeration is False


def test_explicit_enumeration_flag_wins_over_name():
    assert EnumDef(name="Colors", is_enumeration=True).is_enumeration is True
    assert EnumDef(name="ColorEnum", is_enumeration=False).is_enumeration is False


def test_explicit_member_value_is_kept():
    value = MemberValue(MemberValueKind.TEXT, "x")
    enum = EnumDef(name="Tags", members=[EnumMember("A", "1", value=value)])
    assert enum.members[0].value is value


def test_property_child_classification():
    assert Property(name="a", type="ref", child_type="Player").child_is_user_defined is True
    assert Property(name="b", type="array", child_type="string").child_is_user_defined is False
    assert Property(name="c", type="int32").child_is_user_defined is False
    assert Property(name="e", type="map", child_type="Player").is_container
    assert not Property(name="f", type="array").is_container


def test_from_dict():
    context = load_context()
    assert [c.name for c in context.classes] == ["Player", "State"]
    assert [i.name for i in context.interfaces] == ["JoinOptions"]
    assert [e.name for e in context.enums] == ["ColorEnum", "Limits", "OPERATION"]

    items = context.classes[0].properties[1]
    assert items.child_type == "string"
    assert items.index == 1

    legacy = context.classes[1].properties[3]
    assert legacy.deprecated is True

    color = context.classes[1].properties[2]
    assert color.enum_type == "ColorEnum"


def test_descriptor_order_and_kinds():
    kinds = [d.kind for d in load_context().descriptors()]
    assert kinds == [DescriptorKind.CLASS] * 2 + [DescriptorKind.INTERFACE] + [DescriptorKind.ENUM] * 3


def test_from_dict_snake_case_and_members_key():
    context = Context.from_dict(
        {
            "classes": [{"name": "Bag", "properties": [{"name": "items", "type": "array", "child_type": "item", "child_is_user_defined": True}]}],
            "enums": [{"name": "Flags", "isEnumeration": True, "members": [{"name": "A"}]}],
        }
    )
    bag = context.classes[0]
    assert bag.extends == "Schema"
    assert bag.properties[0].child_is_user_defined is True
    assert context.enums[0].is_enumeration is True


def test_class_defaults():
    assert ClassDef(name="Empty").extends == "Schema"


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"classes": [{"properties": []}]},
        {"classes": [{"name": "Player", "properties": [{"type": "int32"}]}]},
        {"enums": [{"name": "ColorEnum", "properties": [{"type": "1"}]}]},
        {"classes": {"name": "Player"}},
        {"interfaces": "JoinOptions"},
        {"enums": [{"name": "ColorEnum", "properties": 3}]},
        {"classes": [{"name": 5}]},
    ],
)
def test_from_dict_rejects_malformed_context(data):
    with pytest.raises(SchemaLoadError):
        Context.from_dict(data)


@pytest.mark.parametrize(
    "prop, key",
    [
        ({"name": "owner", "type": "ref", "childType": 5}, "childType"),
        ({"name": "owner", "type": 7}, "type"),
        ({"name": "owner", "type": "string", "enumType": ["ColorEnum"]}, "enumType"),
        ({"name": "owner", "type": "array", "child_type": {"name": "Item"}}, "childType"),
    ],
)
def test_from_dict_rejects_non_text_types(prop, key):
    with pytest.raises(SchemaLoadError) as excinfo:
        Context.from_dict({"classes": [{"name": "Item", "properties": [prop]}]})
    assert "Item.owner" in str(excinfo.value)
    assert key in str(excinfo.value)


def test_from_dict_treats_null_lists_as_empty():
    context = Context.from_dict({"classes": None, "interfaces": [{"name": "Ping", "properties": None}], "enums": None})
    assert context.classes == []
    assert context.interfaces[0].properties == []
    assert context.enums == []


if __name__ == "__main__":
    pytest.main([__file__])
