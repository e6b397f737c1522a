import json
import unittest

from ollama_request.errors import DecodingError, DuplicateKeyError
from ollama_request.json_value import (
    JSONArray,
    JSONBool,
    JSONNull,
    JSONNumber,
    JSONObject,
    JSONString,
    JSONValue,
)


class JSONValueTests(unittest.TestCase):
    def test_literals(self) -> None:
        self.assertEqual(JSONValue.from_python(None), JSONNull())
        self.assertEqual(JSONValue.from_python("hi"), JSONString("hi"))
        self.assertEqual(JSONValue.from_python(3), JSONNumber(3))
        self.assertEqual(JSONValue.from_python(0.5), JSONNumber(0.5))

    def test_bool_is_not_a_number(self) -> None:
        value = JSONValue.from_python(True)
        self.assertEqual(value, JSONBool(True))
        self.assertNotEqual(value, JSONNumber(1))
        self.assertEqual(value.dumps(), "true")

    def test_object_keeps_insertion_order_and_nulls(self) -> None:
        value = JSONValue.from_python({"b": 1, "a": None, "c": [True, "x"]})
        self.assertIsInstance(value, JSONObject)
        self.assertEqual(value.keys(), ["b", "a", "c"])
        self.assertEqual(value["a"], JSONNull())
        self.assertEqual(value.dumps(), '{"b":1,"a":null,"c":[true,"x"]}')

    def test_object_rejects_duplicate_keys(self) -> None:
        with self.assertRaises(DuplicateKeyError):
            JSONObject((("a", JSONNull()), ("a", JSONBool(False))))

    def test_array_access(self) -> None:
        value = JSONValue.from_python((1, 2, 3))
        self.assertIsInstance(value, JSONArray)
        self.assertEqual(len(value), 3)
        self.assertEqual(value[1], JSONNumber(2))
        self.assertEqual([item.to_python() for item in value], [1, 2, 3])

    def test_values_are_hashable(self) -> None:
        a = JSONValue.from_python({"k": [1, {"x": None}]})
        b = JSONValue.from_python({"k": [1, {"x": None}]})
        self.assertEqual(hash(a), hash(b))

    def test_deeply_nested_round_trip(self) -> None:
        data = {
            "type": "object",
            "properties": {
                "a": {"items": [[{"deep": [1, 2.5, None, False, {"leaf": "ü"}]}]]},
            },
            "required": ["a"],
        }
        value = JSONValue.from_python(data)
        self.assertEqual(JSONValue.parse(value.dumps()), value)
        self.assertEqual(json.loads(value.dumps()), data)

    def test_object_equality_ignores_key_order(self) -> None:
        a = JSONValue.from_python({"a": 1, "b": [2]})
        b = JSONValue.from_python({"b": [2], "a": 1})
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, JSONValue.from_python({"a": 1, "b": [3]}))
        self.assertEqual(a.dumps(), '{"a":1,"b":[2]}')
        self.assertEqual(b.dumps(), '{"b":[2],"a":1}')

    def test_too_deep_nesting(self) -> None:
        data: list = []
        for _ in range(5000):
            data = [data]
        with self.assertRaises(DecodingError):
            JSONValue.from_python(data)
        with self.assertRaises(DecodingError):
            JSONValue.parse("[" * 5000 + "]" * 5000)

    def test_unsupported_type_reports_path(self) -> None:
        with self.assertRaises(DecodingError) as ctx:
            JSONValue.from_python({"a": [1, object()]})
        self.assertEqual(ctx.exception.path, "$.a[1]")

    def test_non_string_keys_rejected(self) -> None:
        with self.assertRaises(DecodingError):
            JSONValue.from_python({1: "x"})

    def test_non_finite_numbers_rejected(self) -> None:
        with self.assertRaises(DecodingError):
            JSONValue.from_python(float("inf"))
        with self.assertRaises(DecodingError):
            JSONValue.parse("[NaN]")

    def test_parse_errors(self) -> None:
        with self.assertRaises(DecodingError):
            JSONValue.parse("{")
        with self.assertRaises(DecodingError):
            JSONValue.parse('{"a": 1, "a": 2}')

    def test_parse_keeps_key_order(self) -> None:
        value = JSONValue.parse('{"z": 1, "a": {"y": [], "b": {}}}')
        self.assertEqual(value.keys(), ["z", "a"])
        self.assertEqual(value["a"], JSONObject((("y", JSONArray()), ("b", JSONObject()))))


if __name__ == "__main__":
    unittest.main()
