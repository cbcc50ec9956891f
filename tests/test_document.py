from activity_tracker.models import FULL_DAY_MINUTES, SectionConfig, TrackerSettings
from activity_tracker.services.document import (
    find_abrupt_exits,
    find_sections,
    parse_attributes,
    replace_sections,
    strip_abrupt_exits,
    wrap_section,
)

MARKER = "activity tracker"

DOC = (
    "# Today\n\n"
    "<!-- activity tracker maxInterval=25 -->\n- [x] A\n<!-- /activity tracker -->\n"
    "\nnotes in between\n\n"
    "<!-- activity tracker -->\n- [ ] B\n<!-- /activity tracker -->\n"
    "footer\n"
)


def test_find_sections_does_not_cross_match(settings):
    sections = find_sections(DOC, settings)
    assert len(sections) == 2
    assert [t.label for t in sections[0].tasks] == ["A"]
    assert [t.label for t in sections[1].tasks] == ["B"]
    assert sections[0].config.max_interval == 25
    assert sections[1].config.max_interval == settings.max_interval
    assert sections[0].raw_outer.startswith("<!-- activity tracker maxInterval=25 -->")
    assert sections[0].raw_outer.endswith("<!-- /activity tracker -->")


def test_find_sections_uses_configured_marker():
    doc = "<!-- timelog -->\n- [x] A\n<!-- /timelog -->\n" + DOC
    sections = find_sections(doc, TrackerSettings(tracker_label="timelog"))
    assert len(sections) == 1
    assert sections[0].tasks[0].label == "A"


def test_no_sections(settings):
    assert find_sections("just a note\n- [x] A\n", settings) == []


def test_parse_attributes():
    config = parse_attributes(
        'maxInterval=30, minInterval=2 logIfNothingSelected=true logTextIfNothingSelected="on a break"',
        SectionConfig(),
    )
    assert config == SectionConfig(
        max_interval=30,
        min_interval=2,
        log_if_nothing_selected=True,
        log_text_if_nothing_selected="on a break",
    )


def test_malformed_attributes_are_skipped():
    defaults = SectionConfig(max_interval=60, min_interval=4)
    config = parse_attributes('maxInterval=abc minInterval=3 colour=red logIfNothingSelected="yes"', defaults)
    assert config.max_interval == 60
    assert config.min_interval == 3
    assert config.log_if_nothing_selected is False
    assert defaults.min_interval == 4


def test_max_interval_null_means_full_day():
    config = parse_attributes("maxInterval=null", SectionConfig(max_interval=25))
    assert config.max_interval == FULL_DAY_MINUTES


def test_wrong_types_are_skipped():
    config = parse_attributes('maxInterval=true minInterval="5" maxInterval=-3', SectionConfig(max_interval=25))
    assert config.max_interval == 25
    assert config.min_interval == SectionConfig().min_interval


def test_wrap_section():
    assert wrap_section("- [ ] A", MARKER, "maxInterval=25") == (
        "<!-- activity tracker maxInterval=25 -->\n- [ ] A\n<!-- /activity tracker -->"
    )
    assert wrap_section("- [ ] A", MARKER) == "<!-- activity tracker -->\n- [ ] A\n<!-- /activity tracker -->"


def test_replace_sections_touches_only_replaced_regions():
    new = wrap_section("- [x] B", MARKER)
    out = replace_sections(DOC, MARKER, [None, new])
    assert out == (
        "# Today\n\n"
        "<!-- activity tracker maxInterval=25 -->\n- [x] A\n<!-- /activity tracker -->\n"
        "\nnotes in between\n\n"
        "<!-- activity tracker -->\n- [x] B\n<!-- /activity tracker -->\n"
        "footer\n"
    )
    assert replace_sections(DOC, MARKER, [None, None]) == DOC


def test_abrupt_exit_markers():
    text = "a\n<!-- abrupt exit 14:20 -->\nb <!-- abrupt exit 9:05 --> c\n"
    marks = find_abrupt_exits(text)
    assert [m.time for m in marks] == ["14:20", "09:05"]
    assert marks[0].raw_outer == "<!-- abrupt exit 14:20 -->"
    assert strip_abrupt_exits(text) == "a\nb  c\n"


def test_abrupt_exit_with_bad_time_is_ignored():
    assert find_abrupt_exits("<!-- abrupt exit 31:00 -->") == []


def test_abrupt_exit_time_is_normalized():
    marks = find_abrupt_exits("<!-- abrupt exit 9:05 -->")
    assert [m.time for m in marks] == ["09:05"]
