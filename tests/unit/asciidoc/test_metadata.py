from adoc_kit.asciidoc.metadata import enrich_metadata
from adoc_kit.asciidoc.sections import Section

SECTION = Section(
    depth=2, title="REST", content="body", header_path="Getting Started > REST"
)


def test_single_part_has_no_section_part() -> None:
    metadata = enrich_metadata({"title": "Guide"}, SECTION, 0, 1)

    assert metadata == {
        "title": "Guide",
        "section_title": "REST",
        "section_level": 2,
        "section_path": "Getting Started > REST",
    }


def test_multi_part_is_one_based() -> None:
    first = enrich_metadata({}, SECTION, 0, 3)
    last = enrich_metadata({}, SECTION, 2, 3)

    assert first["section_part"] == "1/3"
    assert last["section_part"] == "3/3"


def test_base_order_is_preserved_before_section_fields() -> None:
    base = {"z": 1, "a": 2, "m": 3}

    metadata = enrich_metadata(base, SECTION, 1, 2)

    assert list(metadata) == [
        "z",
        "a",
        "m",
        "section_title",
        "section_level",
        "section_path",
        "section_part",
    ]


def test_existing_section_keys_are_overwritten() -> None:
    base = {"section_title": "stale", "section_part": "9/9", "repo_path": "x.adoc"}

    metadata = enrich_metadata(base, SECTION, 0, 1)

    assert metadata["section_title"] == "REST"
    assert metadata["repo_path"] == "x.adoc"
    # section_part only written for multi-part sections
    assert metadata["section_part"] == "9/9"


def test_base_is_not_modified() -> None:
    base = {"title": "Guide"}

    metadata = enrich_metadata(base, SECTION, 0, 2)

    assert base == {"title": "Guide"}
    assert metadata is not base
