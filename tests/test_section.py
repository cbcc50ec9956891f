from activity_tracker.models import LogInterval, SectionConfig
from activity_tracker.services.section import parse_section, stringify_section

INNER = (
    "\n- [x] A\n- [ ] B\n"
    "\n<!-- report -->\n| stale | report |\n"
    "\n<!-- log -->\n- 10:00; A\n"
)


def test_parse_zones():
    section = parse_section(INNER)
    assert [t.fullname for t in section.tasks] == ["A", "B"]
    assert section.log == [LogInterval(tasks=["A"], start="10:00")]
    assert section.raw_inner == INNER


def test_report_is_omitted_until_time_is_recorded():
    section = parse_section(INNER)
    assert stringify_section(section) == "- [x] A\n- [ ] B\n\n<!-- log -->\n- 10:00; A"


def test_zones_are_emitted_in_canonical_order():
    section = parse_section("- [x] A")
    section.log = [
        LogInterval(tasks=["A"], start="10:00", end="10:30"),
        LogInterval(tasks=["A"], start="10:30"),
    ]
    assert stringify_section(section) == (
        "- [x] A\n"
        "\n<!-- report -->\n"
        "| task | approx | exact |\n"
        "| -- | -- | -- |\n"
        "| A | 30 minutes | 00:30 |\n"
        "| | 30 minutes | 00:30 |\n"
        "\n<!-- log -->\n"
        "- 10:30; A\n"
        "- 10:00-10:30 (30 minutes); A"
    )


def test_section_without_log_is_only_tasks():
    assert stringify_section(parse_section("\n- [ ] A\n  - [ ] B\n")) == "- [ ] A\n\t- [ ] B"


def test_log_before_report_still_parses():
    section = parse_section("- [x] A\n<!-- log -->\n- 10:00; A\n<!-- report -->\n| t |")
    assert section.log == [LogInterval(tasks=["A"], start="10:00")]


def test_config_is_attached():
    config = SectionConfig(max_interval=25)
    section = parse_section("- [x] A", config=config, attributes="maxInterval=25")
    assert section.config is config
    assert section.attributes == "maxInterval=25"


def test_codec_is_idempotent():
    text = (
        "- [x] A\n    - [x] B\n"
        "<!-- log -->\n- 11:00; A; A->B\n- 10:00-10:00 (x); A\n- 09:00-10:00 (an hour); A"
    )
    once = stringify_section(parse_section(text))
    twice = stringify_section(parse_section(once))
    assert once == twice
    first, second = parse_section(once), parse_section(twice)
    assert first.tasks == second.tasks
    assert first.log == second.log
