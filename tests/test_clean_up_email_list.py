from __future__ import annotations

import logging
import time

import pytest

from emailsvalidator import (
    CleanUpOptions,
    ConfigurationError,
    EmailListProcessor,
    Rejection,
    clean_up_email_list,
    clean_up_email_list_batch,
    clean_up_single_address,
    is_email,
)

ONLY_EMAILS = CleanUpOptions(only_return_emails=True)
ONLY_NAMES = CleanUpOptions(only_return_names=True)
ADD_NAMES = CleanUpOptions(add_display_names=True)

TEST_SUITES = [
    (
        "Plain lists",
        None,
        {
            "me@gmail.com, some text, other@gmail.com": ["me@gmail.com", "other@gmail.com"],
            "aaaaaa.qsd@azeraezr.com, qqqqqqqqq@toto.Com": ["aaaaaa.qsd@azeraezr.com", "qqqqqqqqq@toto.com"],
            "a@b.com;c@d.com / e@f.com": ["a@b.com", "c@d.com", "e@f.com"],
            "a@b.com\nc@d.com\te@f.com": ["a@b.com", "c@d.com", "e@f.com"],
            "me@gmail.com; me@gmail.com": ["me@gmail.com", "me@gmail.com"],  # no dedupe
            "contact: me@gmail.com.": ["me@gmail.com"],
            "me@@gmail.com": ["me@gmail.com"],
            "me@@@gmail.com": ["me@gmail.com"],
        },
    ),
    (
        "Nothing to extract",
        None,
        {
            "": [],
            "no address at all": [],
            "@": [],
            "john@gmail": [],
            "john@gmail.c": [],
            ",,, ;;; //": [],
        },
    ),
    (
        "Diacritics",
        None,
        {
            "òthèrEmaìl@test.tóto": ["otheremail@test.toto"],
            "me@gmail.com, élève1@gmail.com": ["me@gmail.com", "eleve1@gmail.com"],
            "Hervé.Du Chène@gmail.com": ["herve.duchene@gmail.com"],
            "ÉLÈVE@ÉCOLE.FR": ["eleve@ecole.fr"],
        },
    ),
    (
        "Display names",
        None,
        {
            "toto Shinnigan <toto.shinnigan@gmail.COM>, otherEmail@test.toto": [
                '"toto Shinnigan" <toto.shinnigan@gmail.com>',
                "otheremail@test.toto",
            ],
            '"John Doe" <john.doe@gmail.com>': ['"John Doe" <john.doe@gmail.com>'],
            '"Doe, John" <john.doe@gmail.com>; "Smith, Jane" <jane@smith.org>': [
                '"Doe, John" <john.doe@gmail.com>',
                '"Smith, Jane" <jane@smith.org>',
            ],
            "<john@gmail.com>": ["john@gmail.com"],
            "rom.vialard@gmail.com": ["rom.vialard@gmail.com"],
        },
    ),
    (
        "Add display names",
        ADD_NAMES,
        {
            "rom.vialard@gmail.com": ['"Rom Vialard" <rom.vialard@gmail.com>'],
            "ROM.Vialard@gmail.com": ['"Rom Vialard" <rom.vialard@gmail.com>'],
            '"John" <john.doe@gmail.com>': ['"John" <john.doe@gmail.com>'],
            "Jane Doe <jdoe@x.org>": ['"Jane Doe" <jdoe@x.org>'],
            "0149@gmail.com": ["0149@gmail.com"],
        },
    ),
    (
        "Only names",
        ONLY_NAMES,
        {
            "rom.vialard@gmail.com": ["Rom Vialard"],
            "toto Shinnigan <toto.shinnigan@gmail.COM>": ["toto Shinnigan"],
            '"Jane Smith" <jane@smith.org>, john.doe0149@gmail.com': ["Jane Smith", "John Doe"],
            "0149@gmail.com": ["0149@gmail.com"],
        },
    ),
    (
        "Only emails",
        ONLY_EMAILS,
        {
            'toto Shinnigan <toto.shinnigan@gmail.COM>, "Jane" <jane@x.org>': [
                "toto.shinnigan@gmail.com",
                "jane@x.org",
            ],
            "me@gmail.com, some text, other@gmail.com": ["me@gmail.com", "other@gmail.com"],
        },
    ),
]


def _flatten_suites():
    """Yield (suite_name, options, input_text, expected_output) for parametrization."""
    for suite_name, options, cases in TEST_SUITES:
        for inp, expected in cases.items():
            yield suite_name, options, inp, expected


@pytest.mark.parametrize(
    "suite_name,options,inp,expected",
    list(_flatten_suites()),
    ids=lambda v: v if isinstance(v, str) else None,
)
def test_clean_up_email_list_cases(suite_name, options, inp, expected):
    out = clean_up_email_list(inp, options)
    assert out == expected, f"[{suite_name}] input={inp!r} out={out!r} expected={expected!r}"


@pytest.mark.parametrize("kwargs", [
    {"only_return_emails": True, "add_display_names": True},
    {"only_return_emails": True, "only_return_names": True},
])
def test_conflicting_options_fail_before_processing(kwargs):
    with pytest.raises(ConfigurationError):
        clean_up_email_list("me@gmail.com", CleanUpOptions(**kwargs))


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        CleanUpOptions(only_return_emails=True, add_display_names=True)


def test_only_return_names_implies_add_display_names():
    assert CleanUpOptions(only_return_names=True).add_display_names is True
    assert CleanUpOptions().add_display_names is False


def test_non_string_input_is_rejected():
    with pytest.raises(TypeError):
        clean_up_email_list(None)


def test_order_is_preserved():
    text = "z@z.com, a@a.com, m@m.com"
    assert clean_up_email_list(text) == ["z@z.com", "a@a.com", "m@m.com"]


@pytest.mark.parametrize("text", [
    "toto Shinnigan <toto.shinnigan@gmail.COM>, otherEmail@test.toto",
    '"Jane Smith" <jane@smith.org>; òthèrEmaìl@test.tóto',
    "aaaaaa.qsd@azeraezr.com, qqqqqqqqq@toto.Com",
])
def test_entries_are_stable_when_fed_back(text):
    for entry in clean_up_email_list(text, ADD_NAMES):
        address = clean_up_single_address(entry)
        assert clean_up_email_list(entry, ONLY_EMAILS) == [address]
        assert clean_up_single_address(address) == address
        assert is_email(address)


def test_extracted_addresses_are_folded_ascii_lowercase():
    text = "ÆSIR@ÉCOLE.FR, Jürgen.Müller@straße.de, òthèrEmaìl@test.tóto"
    for address in clean_up_email_list(text, ONLY_EMAILS):
        assert address.isascii()
        assert address == address.lower()


def test_clean_up_single_address():
    assert clean_up_single_address("Hervé.Du Chène@gmail.com") == "herve.duchene@gmail.com"
    assert clean_up_single_address("first@gmail.com, second@gmail.com") == "first@gmail.com"
    assert clean_up_single_address("nothing here") is None


def test_batch_returns_one_list_per_text():
    out = clean_up_email_list_batch(["a@b.com", "no address", "c@d.com, e@f.com"])
    assert out == [["a@b.com"], [], ["c@d.com", "e@f.com"]]


def test_garbage_is_recorded_and_logged(caplog):
    processor = EmailListProcessor(CleanUpOptions(log_garbage=True))

    with caplog.at_level(logging.INFO, logger="emailsvalidator"):
        out = processor.process("<>@x.com, john@gmail, jane@gmail.com")

    assert out == ["jane@gmail.com"]
    assert processor.rejected == [
        Rejection("invalid field", "<>@x.com"),
        Rejection("invalid email", "john@gmail"),
    ]
    messages = [r.getMessage() for r in caplog.records]
    assert any("invalid field" in m and "<>@x.com" in m for m in messages)
    assert any("invalid email" in m and "john@gmail" in m for m in messages)


def test_garbage_is_silent_by_default(caplog):
    processor = EmailListProcessor()

    with caplog.at_level(logging.INFO, logger="emailsvalidator"):
        out = processor.process("<>@x.com, john@gmail")

    assert out == []
    assert processor.rejected == []
    assert caplog.records == []

    filters = processor.get_pipeline_manager().get_filter_manager()
    assert filters.exclude_invalid_field_filter.excluded_count == 1
    assert filters.exclude_invalid_email_filter.excluded_count == 1


def test_processor_records_follow_last_text():
    processor = EmailListProcessor(ADD_NAMES)
    processor.process("a@b.com")
    processor.process("rom.vialard@gmail.com, c@d.com")

    assert [r.email for r in processor.records] == ["rom.vialard@gmail.com", "c@d.com"]
    assert [r.display_name for r in processor.records] == ["Rom Vialard", "C"]


@pytest.mark.perf
def test_perf_clean_up_email_list():
    sample = 'toto Shinnigan <toto.shinnigan@gmail.COM>, "Jane" <jane@x.org>; òthèrEmaìl@test.tóto, junk'
    processor = EmailListProcessor(ADD_NAMES)

    n = 50_000
    for _ in range(1_000):
        processor.process(sample)

    t0 = time.perf_counter()
    for _ in range(n):
        processor.process(sample)
    elapsed = time.perf_counter() - t0

    per_sec = n / elapsed if elapsed else float("inf")
    print(f"\nclean_up_email_list: {n:,} in {elapsed:.3f}s | {per_sec:,.0f}/s")
