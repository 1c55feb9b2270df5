"""
Unit tests for property rendering.
"""

import unittest

from schema_to_cs.context import Property
from schema_to_cs.errors import SchemaTypeError
from schema_to_cs.properties import PropertyRenderer
from schema_to_cs.type_table import TypeResolver, TypeTable


class TestPropertyRenderer(unittest.TestCase):
    """Test schema field rendering"""

    def setUp(self):
        self.renderer = PropertyRenderer(TypeResolver(TypeTable(["ColorEnum"])))

    def test_primitive_field(self):
        prop = Property(name="hp", type="int32", index=0)
        self.assertEqual(
            self.renderer.render(prop, "Player"),
            '\t[Type(0, "int32")]\n\tpublic int hp = default;',
        )

    def test_array_of_primitive_field(self):
        prop = Property(name="items", type="array", child_type="string", index=1)
        self.assertEqual(
            self.renderer.render(prop, "Player"),
            '\t[Type(1, "array", typeof(ArraySchema<string>), "string")]\n\tpublic ArraySchema<string> items = new();',
        )

    def test_map_of_structure_field_omits_child_name(self):
        prop = Property(name="players", type="map", child_type="Player", index=0)
        self.assertEqual(
            self.renderer.render(prop, "State"),
            '\t[Type(0, "map", typeof(MapSchema<Player>))]\n\tpublic MapSchema<Player> players = new();',
        )

    def test_reference_field(self):
        prop = Property(name="leader", type="ref", child_type="Player", index=4)
        lines = self.renderer.render(prop, "State").split("\n")
        self.assertEqual(lines[0], '\t[Type(4, "ref", typeof(Player))]')
        self.assertEqual(lines[1], "\tpublic Player leader = new();")

    def test_enum_field(self):
        prop = Property(name="color", type="string", enum_type="ColorEnum", index=2)
        self.assertEqual(
            self.renderer.render(prop, "State"),
            '\t[Type(2, "string")]\n\tpublic ColorEnum color = default;',
        )

    def test_deprecated_field(self):
        prop = Property(name="legacy", type="string", index=3, deprecated=True)
        lines = self.renderer.render(prop, "State").split("\n")
        self.assertEqual(len(lines), 3)
        self.assertEqual(lines[0], "\t[System.Obsolete(\"field 'legacy' is deprecated.\", true)]")
        self.assertEqual(lines[1], '\t[Type(3, "string")]')
        self.assertEqual(lines[2], "\tpublic string legacy = default;")

    def test_indent_inside_namespace(self):
        prop = Property(name="hp", type="int32", index=0)
        rendered = self.renderer.render(prop, "Player", indent="\t")
        for line in rendered.split("\n"):
            self.assertTrue(line.startswith("\t\t"))

    def test_build_field_node(self):
        prop = Property(name="scores", type="map", child_type="number", index=7)
        node = self.renderer.build_field(prop, "Board")
        self.assertEqual(node.type_name, "MapSchema<float>")
        self.assertEqual(node.default_value, "new()")
        self.assertEqual(node.attributes[-1].arguments, ["7", '"map"', "typeof(MapSchema<float>)", '"number"'])

    def test_unknown_type_names_owner(self):
        prop = Property(name="when", type="date", index=0)
        with self.assertRaises(SchemaTypeError) as ctx:
            self.renderer.render(prop, "Player")
        self.assertIn("Player.when", str(ctx.exception))


class TestInterfaceFields(unittest.TestCase):
    """Test DTO field rendering"""

    def setUp(self):
        self.renderer = PropertyRenderer(TypeResolver(TypeTable()))

    def test_plain_field_has_no_initializer(self):
        prop = Property(name="token", type="string")
        self.assertEqual(self.renderer.render_interface_field(prop, "JoinOptions"), "\tpublic string token;")

    def test_container_is_flattened(self):
        prop = Property(name="scores", type="array", child_type="int32")
        self.assertEqual(self.renderer.render_interface_field(prop, "JoinOptions"), "\tpublic int[] scores;")

    def test_map_of_structure_is_flattened(self):
        prop = Property(name="friends", type="map", child_type="Friend")
        self.assertEqual(self.renderer.render_interface_field(prop, "Profile", indent="\t"), "\t\tpublic Friend[] friends;")


if __name__ == "__main__":
    unittest.main()
