"""
Pytest configuration and shared fixtures for jsontree tests.

Provides immutable test data fixtures and common utilities for clean,
type-safe test organization.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import jsontree


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


@pytest.fixture(autouse=True)
def _reset_profile_stats() -> None:
    jsontree.clear_hot_path_stats()


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker documents that this grammar rejects.

    Some rejections come from the caller-side full-consumption check in
    `loads` (extra data after the value) rather than from the grammar.
    """
    fail_docs = {
        # https://json.org/JSON_checker/test/fail2.json
        2: '["Unclosed array"',
        # https://json.org/JSON_checker/test/fail3.json
        3: '{unquoted_key: "keys must be quoted"}',
        # https://json.org/JSON_checker/test/fail4.json
        4: '["extra comma",]',
        # https://json.org/JSON_checker/test/fail5.json
        5: '["double extra comma",,]',
        # https://json.org/JSON_checker/test/fail6.json
        6: '[   , "<-- missing value"]',
        # https://json.org/JSON_checker/test/fail7.json
        7: '["Comma after the close"],',
        # https://json.org/JSON_checker/test/fail8.json
        8: '["Extra close"]]',
        # https://json.org/JSON_checker/test/fail9.json
        9: '{"Extra comma": true,}',
        # https://json.org/JSON_checker/test/fail10.json
        10: '{"Extra value after close": true} "misplaced quoted value"',
        # https://json.org/JSON_checker/test/fail11.json
        11: '{"Illegal expression": 1 + 2}',
        # https://json.org/JSON_checker/test/fail12.json
        12: '{"Illegal invocation": alert()}',
        # https://json.org/JSON_checker/test/fail14.json
        14: '{"Numbers cannot be hex": 0x14}',
        # https://json.org/JSON_checker/test/fail16.json
        16: "[\\naked]",
        # https://json.org/JSON_checker/test/fail19.json
        19: '{"Missing colon" null}',
        # https://json.org/JSON_checker/test/fail20.json
        20: '{"Double colon":: null}',
        # https://json.org/JSON_checker/test/fail21.json
        21: '{"Comma instead of colon", null}',
        # https://json.org/JSON_checker/test/fail22.json
        22: '["Colon instead of comma": false]',
        # https://json.org/JSON_checker/test/fail23.json
        23: '["Bad value", truth]',
        # https://json.org/JSON_checker/test/fail24.json
        24: "['single quote']",
        # https://json.org/JSON_checker/test/fail29.json
        29: "[0e]",
        # https://json.org/JSON_checker/test/fail30.json
        30: "[0e+]",
        # https://json.org/JSON_checker/test/fail31.json
        31: "[0e+-1]",
        # https://json.org/JSON_checker/test/fail32.json
        32: '{"Comma instead if closing brace": true,',
        # https://json.org/JSON_checker/test/fail33.json
        33: '["mismatch"}',
    }

    return [
        JsonTestCase(
            description=f"fail{number}.json",
            input_data=doc,
            should_fail=True,
        )
        for number, doc in fail_docs.items()
    ]


@pytest.fixture
def json_lenient_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker failure documents this grammar deliberately accepts.

    The grammar has no leading-zero rule, passes unknown escapes through as
    the escaped character, allows raw control characters inside strings and
    accepts any value (not just containers) at the top level.
    """
    return [
        JsonTestCase(
            "fail1.json - string payload",
            '"A JSON payload should be an object or array, not a string."',
            expected_output=(
                "A JSON payload should be an object or array, not a string."
            ),
        ),
        JsonTestCase(
            "fail13.json - leading zero",
            '{"Numbers cannot have leading zeroes": 013}',
            expected_output={"Numbers cannot have leading zeroes": 13.0},
        ),
        JsonTestCase(
            "fail15.json - unknown escape",
            '["Illegal backslash escape: \\x15"]',
            expected_output=["Illegal backslash escape: x15"],
        ),
        JsonTestCase(
            "fail17.json - octal-looking escape",
            '["Illegal backslash escape: \\017"]',
            expected_output=["Illegal backslash escape: 017"],
        ),
        JsonTestCase(
            "fail18.json - nesting within the default depth limit",
            '[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            "fail25.json - raw tabs",
            '["\ttab\tcharacter\tin\tstring\t"]',
            expected_output=["\ttab\tcharacter\tin\tstring\t"],
        ),
        JsonTestCase(
            "fail26.json - escaped spaces",
            '["tab\\   character\\   in\\  string\\  "]',
            expected_output=["tab   character   in  string  "],
        ),
        JsonTestCase(
            "fail27.json - raw line break",
            '["line\nbreak"]',
            expected_output=["line\nbreak"],
        ),
        JsonTestCase(
            "fail28.json - escaped line break",
            '["line\\\nbreak"]',
            expected_output=["line\nbreak"],
        ),
        JsonTestCase(
            "raw control character",
            '["A\u001fZ control characters in string"]',
            expected_output=["A\u001fZ control characters in string"],
        ),
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully.

    These test cases validate valid JSON structures from JSON_checker.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]""",
            should_fail=False,
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
            should_fail=False,
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
            should_fail=False,
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic value test cases for fundamental parsing.

    Numbers are chosen to be exact in single precision.
    """
    return [
        JsonTestCase("null value", "null", False, None),
        JsonTestCase("true boolean", "true", False, True),
        JsonTestCase("false boolean", "false", False, False),
        JsonTestCase("integer", "42", False, 42.0),
        JsonTestCase("negative integer", "-17", False, -17.0),
        JsonTestCase("float", "3.25", False, 3.25),
        JsonTestCase("exponent", "1.5e3", False, 1500.0),
        JsonTestCase("empty string", '""', False, ""),
        JsonTestCase("simple string", '"hello"', False, "hello"),
        JsonTestCase("empty array", "[]", False, []),
        JsonTestCase("empty object", "{}", False, {}),
        JsonTestCase("simple array", "[1, 2, 3]", False, [1.0, 2.0, 3.0]),
        JsonTestCase(
            "simple object", '{"key": "value"}', False, {"key": "value"}
        ),
        JsonTestCase("bare word", "nothing", True),
        JsonTestCase("lone sign", "-", True),
    ]
