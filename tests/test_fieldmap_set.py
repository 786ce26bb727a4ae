import unittest

from coerce_schema import (
    Const,
    Int,
    SchemaDefinitionError,
    SchemaError,
    String,
    any_value,
    field_map,
    field_map_set,
    one_of,
    strict_field_map,
)
from tests._util import A_PATH, Recorder


class FieldMapSetTests(unittest.TestCase):
    def setUp(self):
        self.schema_a = strict_field_map({"kind": Const("x"), "n": Int()})
        self.schema_b = strict_field_map({"kind": Const("y"), "s": String()}, {"s": "dflt"})
        self.checker = field_map_set("kind", [self.schema_a, self.schema_b])

    def test_selects_matching_variant(self):
        self.assertEqual(self.checker.coerce({"kind": "y", "s": "hi"}, A_PATH), {"kind": "y", "s": "hi"})
        self.assertEqual(self.checker.coerce({"kind": "x", "n": "4"}, A_PATH), {"kind": "x", "n": 4})

    def test_whole_map_validated_against_chosen_variant(self):
        with self.assertRaisesRegex(SchemaError, r"<path>\.s: expected string, got int\(1\)"):
            self.checker.coerce({"kind": "y", "s": 1}, A_PATH)
        # keys of the other variant are unknown to the chosen strict schema
        with self.assertRaisesRegex(SchemaError, "unknown key 'n'"):
            self.checker.coerce({"kind": "y", "n": 1}, A_PATH)

    def test_chosen_variant_defaults_apply(self):
        self.assertEqual(self.checker.coerce({"kind": "y"}, A_PATH), {"kind": "y", "s": "dflt"})

    def test_unsupported_selector(self):
        with self.assertRaises(SchemaError) as cm:
            self.checker.coerce({"kind": "z"}, A_PATH)
        self.assertEqual(str(cm.exception), "<path>.kind: expected supported selector, got str('z')")
        self.assertEqual(cm.exception.want, "supported selector")

    def test_missing_selector(self):
        with self.assertRaisesRegex(SchemaError, r"^<path>\.kind: expected supported selector, got nothing$"):
            self.checker.coerce({"n": 1}, A_PATH)

    def test_missing_selector_is_not_probed(self):
        rec = Recorder()
        checker = field_map_set("kind", [field_map({"kind": rec})])
        with self.assertRaises(SchemaError):
            checker.coerce({}, A_PATH)
        self.assertEqual(rec.calls, [])

    def test_non_mapping(self):
        with self.assertRaisesRegex(SchemaError, r"<path>: expected map, got list"):
            self.checker.coerce(["kind"], A_PATH)

    def test_first_matching_variant_wins(self):
        first = field_map({"kind": String(), "v": any_value()}, {"v": "first"})
        second = field_map({"kind": String(), "v": any_value()}, {"v": "second"})
        out = field_map_set("kind", [first, second]).coerce({"kind": "k"}, A_PATH)
        self.assertEqual(out["v"], "first")

    def test_only_selector_checker_is_probed(self):
        # variant a accepts the selector but rejects the rest; dispatch does not fall through
        with self.assertRaisesRegex(SchemaError, r"<path>\.n: expected int"):
            self.checker.coerce({"kind": "x", "n": "NaN-ish"}, A_PATH)

    def test_usable_inside_one_of(self):
        checker = one_of(self.checker, Const(None))
        self.assertIsNone(checker.coerce(None, A_PATH))


class FieldMapSetConstructionTests(unittest.TestCase):
    def test_variant_without_selector(self):
        with self.assertRaisesRegex(SchemaDefinitionError, "missing selector"):
            field_map_set("kind", [field_map({"n": Int()})])

    def test_non_field_map_variant(self):
        with self.assertRaisesRegex(SchemaDefinitionError, "non-field-map"):
            field_map_set("kind", [Int()])

    def test_definition_error_is_not_a_validation_error(self):
        self.assertFalse(issubclass(SchemaDefinitionError, SchemaError))
