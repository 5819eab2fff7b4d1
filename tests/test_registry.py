"""
Tests for the AI registry and the built-in GS1 table.
"""

import pytest

from gs1_128 import (
    AIData,
    AIRegistry,
    GS1128Parser,
    KindOfData,
    load_default_registry,
    load_registry,
    save_registry,
)


@pytest.fixture
def registry():
    return load_default_registry()


class TestDefaultRegistry:
    """Metadata derived from the embedded syntax table."""

    def test_gtin(self, registry):
        gtin = registry.get("01")
        assert gtin.kind_of_data is KindOfData.NUMERIC
        assert gtin.min_length == gtin.max_length == 14
        assert gtin.checksum
        assert gtin.title == "GTIN"

    def test_expiry_date(self, registry):
        expiry = registry.get("17")
        assert expiry.kind_of_data is KindOfData.DATE
        assert expiry.min_length == expiry.max_length == 6
        assert not expiry.checksum

    def test_batch_is_free_text(self, registry):
        batch = registry.get("10")
        assert batch.kind_of_data is KindOfData.ALPHANUMERIC
        assert (batch.min_length, batch.max_length) == (1, 20)

    def test_decimal_families_use_placeholder(self, registry):
        """310y is registered once, not as 3100-3109."""
        assert "310y" in registry
        assert "3102" not in registry
        assert registry.get("310y").has_decimal_placeholder
        assert registry.get("310y").max_length == 6

    def test_lookup_ignores_case(self, registry):
        assert registry.get("310Y") is registry.get("310y")

    def test_datetime_kinds(self, registry):
        assert registry.get("7003").kind_of_data is KindOfData.DATETIME
        prod_time = registry.get("8008")
        assert prod_time.kind_of_data is KindOfData.DATETIME
        assert (prod_time.min_length, prod_time.max_length) == (8, 12)

    def test_composite_with_leading_check_digit(self, registry):
        """GDTI: 13 digits with check digit, optional serial."""
        gdti = registry.get("253")
        assert gdti.kind_of_data is KindOfData.ALPHANUMERIC
        assert (gdti.min_length, gdti.max_length) == (13, 30)
        assert gdti.checksum

    def test_composite_with_trailing_fixed_parts_has_no_checksum(self, registry):
        """ITIP carries its check digit in the middle of the content."""
        itip = registry.get("8006")
        assert (itip.min_length, itip.max_length) == (18, 18)
        assert not itip.checksum

    def test_multi_date_component_is_numeric(self, registry):
        assert registry.get("7007").kind_of_data is KindOfData.NUMERIC

    def test_cached(self, registry):
        assert load_default_registry() is registry
        assert load_default_registry(force_reload=True) is not registry


class TestAIRegistry:
    """Tests for the registry container."""

    def test_later_duplicate_wins(self):
        first = AIData("90", KindOfData.ALPHANUMERIC, 1, 30)
        second = AIData("90", KindOfData.NUMERIC, 1, 10)
        registry = AIRegistry([first, second])
        assert len(registry) == 1
        assert registry.get("90") is second

    def test_records_in_order(self):
        records = [
            AIData("01", KindOfData.NUMERIC, 14, 14, True),
            AIData("17", KindOfData.DATE, 6, 6),
        ]
        registry = AIRegistry(records)
        assert registry.records() == records
        assert list(registry) == ["01", "17"]

    def test_missing(self):
        registry = AIRegistry()
        assert registry.get("01") is None
        assert registry.get(None) is None
        assert "01" not in registry

    def test_from_json_keyed_object(self):
        registry = AIRegistry.from_json(
            '{"01": {"ai": "01", "kind_of_data": "numeric", '
            '"min_length": 14, "max_length": 14, "checksum": true}}'
        )
        assert registry.get("01").checksum
        assert registry.get("01").kind_of_data is KindOfData.NUMERIC

    def test_save_and_load(self, tmp_path, registry):
        path = tmp_path / "registry.json"
        save_registry(registry, path)
        loaded = load_registry(path)
        assert loaded.records() == registry.records()


class TestParserRegistryAccess:
    """Registry supply interface on the parser."""

    def test_set_and_get_application_identifiers(self):
        records = [AIData("17", KindOfData.DATE, 6, 6)]
        parser = GS1128Parser()
        parser.set_application_identifiers(records)
        assert parser.get_application_identifiers() == records
        assert parser.application_identifiers == records

    def test_empty_registry_is_kept(self):
        parser = GS1128Parser(registry=AIRegistry())
        assert parser.get_application_identifiers() == []
