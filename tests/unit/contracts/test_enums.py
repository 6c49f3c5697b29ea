# tests/unit/contracts/test_enums.py
"""Tests for closed vocabularies.

The literal values are the wire format read from raw configuration, so
they are pinned exactly here.
"""

import pytest

from elastisink.contracts.enums import (
    BehaviorOnMalformedDocs,
    BehaviorOnNullValues,
    DocumentVersionType,
    Importance,
    SecurityProtocol,
    WriteMethod,
)


class TestLiteralSpellings:
    @pytest.mark.parametrize(
        ("enum_cls", "expected"),
        [
            (BehaviorOnNullValues, ["ignore", "delete", "fail"]),
            (BehaviorOnMalformedDocs, ["ignore", "warn", "fail"]),
            (WriteMethod, ["insert", "upsert"]),
            (SecurityProtocol, ["PLAINTEXT", "SSL"]),
            (
                DocumentVersionType,
                ["legacy", "unused", "message-offset", "message-timestamp", "combined-timestamp-offset"],
            ),
        ],
    )
    def test_values_in_documented_order(self, enum_cls: type, expected: list[str]) -> None:
        assert [member.value for member in enum_cls] == expected

    def test_str_enum_formats_as_literal(self) -> None:
        assert f"{WriteMethod.UPSERT}" == "upsert"
        assert str(SecurityProtocol.SSL) == "SSL"


class TestImportance:
    def test_sorts_high_first(self) -> None:
        assert sorted([Importance.LOW, Importance.HIGH, Importance.MEDIUM]) == [
            Importance.HIGH,
            Importance.MEDIUM,
            Importance.LOW,
        ]

    def test_str_is_lowercase_name(self) -> None:
        assert str(Importance.HIGH) == "high"
