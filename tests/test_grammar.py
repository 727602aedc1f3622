# encoding: utf-8
from mo_signature import (
    EmptyType,
    ExpectedCloseParen,
    ExpectedOpenParen,
    InvalidTokenStart,
    UnterminatedArraySuffix,
)
from mo_signature.grammar import (
    Composite,
    Elementary,
    parse_argument_list,
    parse_composite_type,
    parse_composite_type_named,
    parse_elementary_type,
    parse_elementary_type_named,
    parse_type,
    parse_type_named,
)
from tests import SignatureTestCase


class TestElementaryType(SignatureTestCase):
    def test_simple(self):
        result, end = parse_elementary_type("uint256,bool")
        self.assertEqual(result, "uint256")
        self.assertEqual(end, 7)

    def test_array_suffixes(self):
        result, end = parse_elementary_type("uint256[3][])")
        self.assertEqual(result, "uint256[3][]")
        self.assertEqual(end, 12)

        result, end = parse_elementary_type("bytes[][][10]")
        self.assertEqual(result, "bytes[][][10]")

    def test_name_is_left_unconsumed(self):
        result, end = parse_elementary_type("address to)")
        self.assertEqual(result, "address")
        self.assertEqual(end, 7)

    def test_unterminated_suffix(self):
        with self.assertRaisesParseException(UnterminatedArraySuffix) as context:
            parse_elementary_type("uint256[3")
        self.assertEqual(context.exception.loc, 9)

        with self.assertRaisesParseException(UnterminatedArraySuffix):
            parse_elementary_type("uint256[x]")

    def test_named(self):
        node, end = parse_elementary_type_named("address to,uint256", 0, 0)
        self.assertEqual(node, Elementary("to", "address"))
        self.assertEqual(end, 10)

    def test_named_with_suffix(self):
        node, end = parse_elementary_type_named("address[2] owners)", 0, 3)
        self.assertEqual(node, Elementary("owners", "address[2]"))
        self.assertEqual(end, 17)

    def test_named_with_symbols(self):
        node, end = parse_elementary_type_named("uint256 _amount$)", 0, 0)
        self.assertEqual(node, Elementary("_amount$", "uint256"))

    def test_synthesized_name(self):
        node, end = parse_elementary_type_named("bool)", 0, 4)
        self.assertEqual(node, Elementary("name4", "bool"))
        self.assertEqual(end, 4)

    def test_dangling_space(self):
        with self.assertRaisesParseException(InvalidTokenStart):
            parse_elementary_type_named("bool )", 0, 0)


class TestCompositeType(SignatureTestCase):
    def test_tuple(self):
        result, end = parse_composite_type("(uint256,address)")
        self.assertEqual(result, ["uint256", "address"])
        self.assertEqual(end, 17)

    def test_tuple_array(self):
        result, end = parse_composite_type("(uint256,address)[],bool")
        self.assertEqual(result, ["uint256", "address", "[]"])
        self.assertEqual(end, 19)

    def test_nested(self):
        result, end = parse_composite_type("((bool,bytes)[],address)")
        self.assertEqual(result, [["bool", "bytes", "[]"], "address"])

    def test_names_are_discarded(self):
        result, end = parse_composite_type("(uint256 a,address b)")
        self.assertEqual(result, ["uint256", "address"])

    def test_sized_tuple_array_is_not_consumed(self):
        result, end = parse_composite_type("(uint256)[2]")
        self.assertEqual(result, ["uint256"])
        self.assertEqual(end, 9)

    def test_expected_open_paren(self):
        with self.assertRaisesParseException(ExpectedOpenParen):
            parse_composite_type("uint256)")

    def test_expected_close_paren(self):
        with self.assertRaisesParseException(ExpectedCloseParen) as context:
            parse_composite_type("(uint256,address")
        self.assertEqual(context.exception.loc, 16)

        with self.assertRaisesParseException(ExpectedCloseParen):
            parse_composite_type("(uint256,")

    def test_named_composite(self):
        node, end = parse_composite_type_named("(uint256,address)[] pairs)", 0, 0)
        self.assertEqual(
            node,
            Composite(
                "pairs",
                [Elementary("name0", "uint256"), Elementary("name1", "address")],
                True,
            ),
        )
        self.assertEqual(end, 25)

    def test_named_composite_synthesized(self):
        node, end = parse_composite_type_named("(bool)", 0, 2)
        self.assertEqual(node, Composite("name2", [Elementary("name0", "bool")], False))

    def test_named_composite_given_name(self):
        node, end = parse_composite_type_named("(bool) ignored", 0, 2, name="flags")
        self.assertEqual(node, Composite("flags", [Elementary("name0", "bool")], False))
        self.assertEqual(end, 6)


class TestDispatch(SignatureTestCase):
    def test_empty(self):
        with self.assertRaisesParseException(EmptyType):
            parse_type("")
        with self.assertRaisesParseException(EmptyType):
            parse_type_named("f(", 2, 0)

    def test_dispatch_elementary(self):
        result, end = parse_type("int8[]")
        self.assertEqual(result, "int8[]")
        self.assertEqual(end, 6)

    def test_dispatch_composite(self):
        result, end = parse_type("(int8,bool)")
        self.assertEqual(result, ["int8", "bool"])

    def test_plain_discards_name(self):
        result, end = parse_type("int8 x,bool")
        self.assertEqual(result, "int8")
        self.assertEqual(end, 6)

    def test_named_dispatch(self):
        node, end = parse_type_named("bytes data)", 0, 1)
        self.assertEqual(node, Elementary("data", "bytes"))

        node, end = parse_type_named("(bytes))", 0, 1)
        self.assertEqual(node, Composite("name1", [Elementary("name0", "bytes")]))
        self.assertEqual(end, 7)


    def test_name_before_tuple(self):
        node, end = parse_type_named("pairs (uint256,address)[])", 0, 0)
        self.assertEqual(
            node,
            Composite(
                "pairs",
                [Elementary("name0", "uint256"), Elementary("name1", "address")],
                True,
            ),
        )
        self.assertEqual(end, 25)

        result, end = parse_type("pairs (bool),x")
        self.assertEqual(result, ["bool"])
        self.assertEqual(end, 12)

    def test_name_before_elementary_is_a_type(self):
        node, end = parse_type_named("owner address,bool", 0, 0)
        self.assertEqual(node, Elementary("address", "owner"))


class TestArgumentList(SignatureTestCase):
    def test_positions(self):
        members, is_array, end = parse_argument_list("(uint256,bool b,address)")
        self.assertEqual(
            members,
            [
                Elementary("name0", "uint256"),
                Elementary("b", "bool"),
                Elementary("name2", "address"),
            ],
        )
        self.assertFalse(is_array)
        self.assertEqual(end, 24)

    def test_positions_reset_per_list(self):
        members, is_array, end = parse_argument_list("(bool,(bool,bool))")
        self.assertEqual(
            members,
            [
                Elementary("name0", "bool"),
                Composite(
                    "name1", [Elementary("name0", "bool"), Elementary("name1", "bool")]
                ),
            ],
        )

    def test_array_marker(self):
        members, is_array, end = parse_argument_list("(bool)[]")
        self.assertTrue(is_array)
        self.assertEqual(end, 8)

    def test_any_single_char_delimiter(self):
        members, is_array, end = parse_argument_list("(bool;address)")
        self.assertEqual([m.type for m in members], ["bool", "address"])

    def test_missing_parens(self):
        with self.assertRaisesParseException(ExpectedOpenParen):
            parse_argument_list("bool)")
        with self.assertRaisesParseException(ExpectedCloseParen):
            parse_argument_list("(bool")
        with self.assertRaisesParseException(ExpectedCloseParen):
            parse_argument_list("(")
