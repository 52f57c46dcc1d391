import unittest

from eitherpy import Either, Left, Right, AbstractInstantiationError, WrongVariantError


SAMPLES = [0, 1, -3.5, "", "Chuck", None, (1, 2), frozenset({"a"})]


class TestVariants(unittest.TestCase):
    def test_predicates_are_exclusive(self):
        for x in SAMPLES:
            with self.subTest(x=x):
                self.assertTrue(Right(x).is_right())
                self.assertFalse(Right(x).is_left())
                self.assertTrue(Left(x).is_left())
                self.assertFalse(Left(x).is_right())

    def test_abstract_base_cannot_be_built(self):
        with self.assertRaises(AbstractInstantiationError):
            Either()
        with self.assertRaises(AbstractInstantiationError) as cm:
            Either(5)
        self.assertEqual(cm.exception.name, "Either")
        self.assertIsInstance(cm.exception, TypeError)

    def test_variants_are_either(self):
        self.assertIsInstance(Left(1), Either)
        self.assertIsInstance(Right[str, int](1), Either)

    def test_equality_is_variant_aware(self):
        self.assertEqual(Left(1), Left(1))
        self.assertEqual(Right("a"), Right("a"))
        self.assertNotEqual(Left(1), Right(1))
        self.assertEqual(len({Left(1), Left(1), Right(1)}), 2)

    def test_immutable(self):
        r = Right(1)
        with self.assertRaises(AttributeError):
            r.value = 2  # type: ignore[misc]

    def test_str_and_repr(self):
        self.assertEqual(str(Right("Barry Bonds")), "Right(Barry Bonds)")
        self.assertEqual(str(Left(3)), "Left(3)")
        self.assertEqual(repr(Right("x")), "Right('x')")
        self.assertEqual(repr(Left(None)), "Left(None)")

    def test_unit_constructors(self):
        self.assertEqual(Left.unit(1), Left(1))
        self.assertEqual(Right.unit(1), Right(1))
        self.assertEqual(Either.unit(1), Right(1))
        self.assertEqual(list(map(Right.unit, [1, 2])), [Right(1), Right(2)])


class TestUnsafeAccessors(unittest.TestCase):
    def test_matching_variant_returns_value(self):
        self.assertEqual(Right(4).unsafe_get_right(), 4)
        self.assertEqual(Left("e").unsafe_get_left(), "e")

    def test_wrong_variant_raises(self):
        for x in SAMPLES:
            with self.subTest(x=x):
                with self.assertRaises(WrongVariantError):
                    Left(x).unsafe_get_right()
                with self.assertRaises(WrongVariantError):
                    Right(x).unsafe_get_left()

    def test_error_describes_call(self):
        l = Left("e")
        with self.assertRaises(WrongVariantError) as cm:
            l.unsafe_get_right()
        self.assertIs(cm.exception.instance, l)
        self.assertEqual(cm.exception.accessor, "unsafe_get_right")
        self.assertIn("Left", str(cm.exception))
        self.assertIsInstance(cm.exception, ValueError)


class TestTransformations(unittest.TestCase):
    def test_map(self):
        self.assertEqual(Right("Barry").map(lambda n: n + " Bonds"), Right("Barry Bonds"))
        for x in [1, 2, 10]:
            with self.subTest(x=x):
                self.assertEqual(Right(x).map(lambda v: v * 3), Right(x * 3))

    def test_map_on_left_returns_same_instance(self):
        l = Left[str, int]("e")
        self.assertIs(l.map(lambda x: x + 1), l)

    def test_flat_map(self):
        self.assertEqual(Right("Chuck").flat_map(lambda n: Right(n + " Norris")), Right("Chuck Norris"))
        self.assertEqual(Right(1).flat_map(lambda _: Left("stop")), Left("stop"))
        l = Left("e")
        self.assertIs(l.flat_map(lambda x: Right(x)), l)

    def test_map_left(self):
        self.assertEqual(Left("Chuck").map_left(lambda n: n + " Norris"), Left("Chuck Norris"))
        r = Right(1)
        self.assertIs(r.map_left(lambda e: e + "!"), r)

    def test_flat_map_left(self):
        self.assertEqual(Left("e").flat_map_left(lambda e: Right(len(e))), Right(1))
        self.assertEqual(Left("e").flat_map_left(lambda e: Left(e * 2)), Left("ee"))
        r = Right(1)
        self.assertIs(r.flat_map_left(lambda e: Right(0)), r)

    def test_left_passes_through_a_chain(self):
        calls = []
        l = Left("boom")
        out = l.map(calls.append).flat_map(calls.append).map(calls.append)
        self.assertIs(out, l)
        self.assertEqual(calls, [])

    def test_to_right_and_to_left_ignore_variant(self):
        self.assertEqual(Left(1).to_right(), Right(1))
        self.assertEqual(Right(1).to_right(), Right(1))
        self.assertEqual(Right(1).to_left(), Left(1))
        self.assertEqual(Left(1).to_left(), Left(1))

    def test_flip_is_an_involution(self):
        self.assertEqual(Left(1).flip(), Right(1))
        self.assertEqual(Right(1).flip(), Left(1))
        for x in SAMPLES:
            for e in (Left(x), Right(x)):
                with self.subTest(e=e):
                    self.assertEqual(e.flip().flip(), e)

    def test_get_or_else_receives_left_value(self):
        self.assertEqual(Right(5).get_or_else(lambda e: 0), 5)
        self.assertEqual(Left("abc").get_or_else(len), 3)
        for x in [1, 2, 3]:
            with self.subTest(x=x):
                self.assertEqual(Left(x).get_or_else(lambda v: v * 10), x * 10)

    def test_match_runs_one_handler(self):
        calls = []

        def on_left(v):
            calls.append(("left", v)); return 0

        def on_right(v):
            calls.append(("right", v)); return v + 5

        self.assertEqual(Right(3).match(left=on_left, right=on_right), 8)
        self.assertEqual(calls, [("right", 3)])
        calls.clear()
        self.assertEqual(Left("e").match(left=on_left, right=on_right), 0)
        self.assertEqual(calls, [("left", "e")])

    def test_to_json_erases_tag(self):
        for x in SAMPLES:
            with self.subTest(x=x):
                self.assertEqual(Left(x).to_json(), x)
                self.assertEqual(Right(x).to_json(), x)
