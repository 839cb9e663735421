import os
import sys
import unittest


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import json_pointer


class TestPackageExports(unittest.TestCase):
    def test_all_names_resolve(self) -> None:
        for name in json_pointer.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(json_pointer, name))

    def test_round_trip_through_public_api(self) -> None:
        doc = {"foo": ["bar", "baz"]}
        pointer = json_pointer.parse_json_pointer("/foo/0")
        self.assertEqual(pointer.reference_tokens, ("foo", "0"))
        self.assertEqual(json_pointer.json_pointer_to_string(pointer), "/foo/0")
        self.assertEqual(json_pointer.get_value_at_json_pointer(doc, pointer), "bar")
        self.assertTrue(json_pointer.value_exists_at_json_pointer(doc, "#/foo/1"))

    def test_common_error_base(self) -> None:
        with self.assertRaises(json_pointer.JsonPointerError):
            json_pointer.parse_json_pointer("foo")
        with self.assertRaises(json_pointer.JsonPointerError):
            json_pointer.get_value_at_json_pointer({}, "/missing")


if __name__ == "__main__":
    unittest.main()
