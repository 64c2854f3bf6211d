import pytest

from odo.models import CatalogEntry, ServiceEntry
from odo.parsers import (
    ComponentCatalogParser,
    ParserError,
    ServicePlansParser,
    VersionParser,
    get_parser,
    split_list,
    split_rows,
)

CATALOG = "\n".join(
    [
        "NAME            PROJECT                 TAGS",
        "nodejs          openshift               1.0",
        "python          openshift               1.0,2.0",
        "httpd           openshift               2.2,2.3,latest",
    ]
)

PLANS = "\n".join(
    [
        "NAME      PLANS",
        "svc1      default,free,paid",
        "svc2      default,free",
        "svc3      default",
    ]
)


def test_version_parser_reads_odo_banner():
    parser = VersionParser()
    assert parser.parse("odo v0.0.13 (65b5bed8) \n line two") == "0.0.13"


def test_version_parser_falls_back_on_unexpected_banner():
    parser = VersionParser()
    assert parser.parse("odounexpected v0.0.13 (65b5bed8) \n line two") == "0.0.0"


def test_version_parser_finds_banner_on_later_line():
    parser = VersionParser()
    assert parser.parse("Server: https://127.0.0.1:8443\nodo v1.2.3 (abcdef)\n") == "1.2.3"


def test_version_parser_without_program_matches_anywhere():
    parser = VersionParser(program=None)
    assert parser.parse("odounexpected v0.0.13 (65b5bed8)") == "0.0.13"
    assert parser.parse("no version here") == "0.0.0"


def test_version_parser_handles_empty_output():
    assert VersionParser().parse("") == "0.0.0"
    assert VersionParser().parse(None) == "0.0.0"


def test_catalog_parser_returns_entries_in_row_order():
    entries = ComponentCatalogParser().parse(CATALOG)
    assert [entry.name for entry in entries] == ["nodejs", "python", "httpd"]
    assert entries[2] == CatalogEntry(name="httpd", project="openshift", tags=["2.2", "2.3", "latest"])


def test_catalog_parser_skips_short_and_blank_rows():
    stdout = CATALOG + "\n\nbroken row\n"
    entries = ComponentCatalogParser().parse(stdout)
    assert [entry.name for entry in entries] == ["nodejs", "python", "httpd"]


def test_catalog_parser_header_only_returns_empty_list():
    assert ComponentCatalogParser().parse("NAME   PROJECT   TAGS\n") == []


def test_service_parser_returns_plans():
    entries = ServicePlansParser().parse(PLANS + "\n")
    assert entries == [
        ServiceEntry(name="svc1", plans=["default", "free", "paid"]),
        ServiceEntry(name="svc2", plans=["default", "free"]),
        ServiceEntry(name="svc3", plans=["default"]),
    ]


def test_split_helpers():
    assert split_rows("HEADER\n a b \n\nc\n", 2) == [["a", "b"]]
    assert split_list("a,,b,") == ["a", "b"]


def test_get_parser_lookup():
    assert isinstance(get_parser("version"), VersionParser)
    assert isinstance(get_parser("CATALOG_SERVICES"), ServicePlansParser)


def test_get_parser_unknown_name():
    with pytest.raises(ParserError):
        get_parser("yaml")


def test_catalog_parser_ignores_blank_lines_before_header():
    entries = ComponentCatalogParser().parse("\n\n   \n" + CATALOG)
    assert [entry.name for entry in entries] == ["nodejs", "python", "httpd"]
