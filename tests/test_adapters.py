"""Tests for the object graph and JSON document adapters."""

import sys
import types
import unittest
from pathlib import Path
from types import SimpleNamespace

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from waldo.adapters import JsonGraphAdapter, ObjectGraphAdapter
from waldo.adapters.objects import is_dunder
from waldo.core.kinds import UNDEFINED


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x):
        self.x = x


class Labelled(Point):
    __slots__ = "label"


class Service:
    retries = 3

    def __init__(self):
        self.name = "svc"
        self._token = "secret"

    def start(self):
        pass


class TestObjectSlots(unittest.TestCase):
    """Test own-slot enumeration."""

    def setUp(self):
        self.adapter = ObjectGraphAdapter()

    def slots(self, container):
        return list(self.adapter.iter_slots(container))

    def test_mapping_in_insertion_order(self):
        self.assertEqual(self.slots({"b": 1, "a": 2}), [("b", 1), ("a", 2)])

    def test_sequences(self):
        self.assertEqual(self.slots(["x", "y"]), [(0, "x"), (1, "y")])
        self.assertEqual(self.slots(("x",)), [(0, "x")])

    def test_instance_attributes_only(self):
        names = [key for key, _ in self.slots(Service())]
        self.assertEqual(names, ["name", "_token"])

    def test_private_names_can_be_excluded(self):
        adapter = ObjectGraphAdapter(include_private=False)
        names = [key for key, _ in adapter.iter_slots(Service())]
        self.assertEqual(names, ["name"])

    def test_populated_slots(self):
        self.assertEqual(self.slots(Point(1)), [("x", 1)])

    def test_inherited_slot_declarations(self):
        point = Labelled(2)
        point.label = "p"
        self.assertEqual(sorted(self.slots(point)), [("label", "p"), ("x", 2)])

    def test_class_namespace_skips_dunders(self):
        names = [key for key, _ in self.slots(Service)]
        self.assertIn("retries", names)
        self.assertIn("start", names)
        self.assertNotIn("__init__", names)
        self.assertNotIn("__module__", names)

    def test_function_attributes(self):
        def handler():
            pass

        handler.route = "/home"
        self.assertEqual(self.slots(handler), [("route", "/home")])

    def test_module_namespace(self):
        module = types.ModuleType("fake")
        module.value = 1
        self.assertEqual(self.slots(module), [("value", 1)])


class TestObjectContainers(unittest.TestCase):
    """Test which values are descended into."""

    def setUp(self):
        self.adapter = ObjectGraphAdapter()

    def test_scalars_are_leaves(self):
        for value in (None, True, 1, 1.5, "s", b"b", UNDEFINED):
            self.assertFalse(self.adapter.is_container(value), value)

    def test_composites_are_containers(self):
        for value in ({}, [], (), SimpleNamespace(), Point(1), Service(), Service, lambda: None):
            self.assertTrue(self.adapter.is_container(value), value)

    def test_builtins_without_namespace(self):
        self.assertFalse(self.adapter.is_container(len))
        self.assertFalse(self.adapter.is_container(object()))

    def test_modules_not_followed_by_default(self):
        self.assertFalse(self.adapter.is_container(types))
        self.assertTrue(ObjectGraphAdapter(follow_modules=True).is_container(types))

    def test_is_dunder(self):
        self.assertTrue(is_dunder("__init__"))
        self.assertFalse(is_dunder("__private"))
        self.assertFalse(is_dunder("____"))
        self.assertFalse(is_dunder(0))


class TestJsonAdapter(unittest.TestCase):
    """Test JSON-only enumeration."""

    def setUp(self):
        self.adapter = JsonGraphAdapter()

    def test_objects_and_arrays(self):
        self.assertEqual(list(self.adapter.iter_slots({"a": 1})), [("a", 1)])
        self.assertEqual(list(self.adapter.iter_slots([True])), [(0, True)])

    def test_only_dicts_and_lists_are_containers(self):
        self.assertTrue(self.adapter.is_container({}))
        self.assertTrue(self.adapter.is_container([]))
        self.assertFalse(self.adapter.is_container(()))
        self.assertFalse(self.adapter.is_container(SimpleNamespace(a=1)))

    def test_leaf_has_no_slots(self):
        self.assertEqual(list(self.adapter.iter_slots("text")), [])

    def test_prototype_member(self):
        proto = {}
        ctor = {"prototype": proto}
        self.assertIs(self.adapter.prototype_of(ctor), proto)
        self.assertIsNone(self.adapter.prototype_of([1]))


if __name__ == "__main__":
    unittest.main()
