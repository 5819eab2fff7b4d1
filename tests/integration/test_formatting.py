"""
Integration tests for JSON output and the command line interface.
"""

import json

import pytest

from gs1_128 import (
    AIData,
    AIRegistry,
    KindOfData,
    format_result_json,
    parse_gs1_128,
    result_to_dict,
    save_registry,
)
from gs1_128.__main__ import build_input, main
from gs1_128.formatters.json_formatter import element_to_dict, format_date_ddmmyyyy


PHARMA_INPUT = "(01)06285096000842(17)290131(10)AB12~F1(21)XYZ"


class TestJsonOutput:
    """Tests for the JSON formatter."""

    def test_result_to_dict(self):
        result = parse_gs1_128(PHARMA_INPUT)
        output = result_to_dict(result)

        assert output['text'] == "~F101062850960008421729013110AB12~F121XYZ"
        assert output['label'] == "(01)06285096000842 (17)290131 (10)AB12 (21)XYZ"
        assert [e['ai'] for e in output['elements']] == ["01", "17", "10", "21"]

    def test_titles_and_dates(self):
        output = result_to_dict(parse_gs1_128(PHARMA_INPUT))
        gtin, expiry = output['elements'][0], output['elements'][1]

        assert gtin['title'] == "GTIN"
        assert expiry['date'] == "31/01/2029"
        assert 'date' not in gtin

    def test_decimal_value(self):
        output = result_to_dict(parse_gs1_128("(310y)0012.34"))
        element = output['elements'][0]
        assert element['ai'] == "3102"
        assert element['title'] == "NET WEIGHT (kg)"
        assert element['value'] == "0012.34"

    def test_without_elements(self):
        output = result_to_dict(parse_gs1_128("(10)ABC"), include_elements=False)
        assert set(output) == {'text', 'label'}

    def test_json_string_valid(self):
        """Test that output is valid JSON."""
        json_str = format_result_json(parse_gs1_128(PHARMA_INPUT))
        parsed = json.loads(json_str)
        assert parsed['elements'][3] == {'ai': '21', 'title': 'SERIAL', 'content': 'XYZ'}

    def test_unknown_element(self):
        registry = AIRegistry()
        entry = element_to_dict(None, "(99)ABC", registry)
        assert entry == {'ai': None, 'title': None, 'content': '(99)ABC'}

    def test_date_formatting(self):
        assert format_date_ddmmyyyy("290131") == "31/01/2029"
        assert format_date_ddmmyyyy("290200") == "XX/02/2029"
        assert format_date_ddmmyyyy("2902") == "2902"


class TestBuildInput:
    """Command line arguments to parser input."""

    def test_single_string(self):
        assert build_input(["(10)ABC"], None) == "(10)ABC"

    def test_strings_and_pairs(self):
        data = build_input(["(10)ABC"], [["17", "251231"]])
        assert data == ["(10)ABC", ("17", "251231")]


class TestCli:
    """Tests for the gs1_128 command."""

    def test_json_output(self, capsys):
        exit_code = main([PHARMA_INPUT, "--json"])
        output = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert output['text'] == "~F101062850960008421729013110AB12~F121XYZ"

    def test_pairs(self, capsys):
        exit_code = main(["--pair", "01", "0001234567890", "--pair", "17", "251231", "--json"])
        output = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert output['text'] == "~F1010001234567890517251231"

    def test_human_output(self, capsys):
        assert main(["(17)251231"]) == 0
        out = capsys.readouterr().out
        assert "Label: (17)251231" in out
        assert "Date: 31/12/2025" in out

    def test_lenient(self, capsys):
        main(["(01)00012345678905(17)251231", "--lenient", "--json"])
        output = json.loads(capsys.readouterr().out)
        assert output['text'] == "~F10100012345678905~F117251231"

    def test_label_override(self, capsys):
        main(["(10)ABC", "--label", "LOT ABC", "--json"])
        assert json.loads(capsys.readouterr().out)['label'] == "LOT ABC"

    def test_error_reported(self, capsys):
        exit_code = main(["(17)251331"])
        err = capsys.readouterr().err

        assert exit_code == 1
        assert "Error [INVALID_DATE]" in err

    def test_error_as_json(self, capsys):
        exit_code = main(["(01)00012345678904", "--json"])
        output = json.loads(capsys.readouterr().out)

        assert exit_code == 1
        assert output['error']['code'] == "CHECKSUM_MISMATCH"
        assert output['error']['ai'] == "01"

    def test_length_limit_flag(self, capsys):
        data = ["(10)" + "A" * 20, "(21)" + "B" * 20, "(17)251231"]
        assert main(data) == 1
        capsys.readouterr()
        assert main(data + ["--no-length-limit"]) == 0

    def test_registry_file(self, tmp_path, capsys):
        path = tmp_path / "registry.json"
        save_registry(AIRegistry([AIData("17", KindOfData.DATE, 6, 6)]), path)

        assert main(["(10)ABC", "--registry", str(path)]) == 1
        assert "UNKNOWN_IDENTIFIER" in capsys.readouterr().err

        assert main(["(10)ABC", "--registry", str(path), "--allow-unknown", "--json"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output['elements'][0]['ai'] is None

    def test_nothing_to_encode(self):
        with pytest.raises(SystemExit):
            main([])
