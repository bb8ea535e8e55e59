from coursecrafter.schemas.schedule import Schedule
from coursecrafter.services.schedule_state import add_course, add_section, remove_section


def test_add_section_records_days_in_first_insertion_order(make_section):
    schedule = Schedule()

    add_section(make_section("a", days=["Wednesday", "Monday"], start=900, end=1015, credits=3), schedule)
    add_section(make_section("b", days=["Monday", "Friday"], start=1100, end=1215, credits=1), schedule)

    assert schedule.credit_total == 4
    assert [entry.day for entry in schedule.week_times] == ["Wednesday", "Monday", "Friday"]
    assert [(slot.start, slot.end) for slot in schedule.find_day("Monday").times] == [(900, 1015), (1100, 1215)]


def test_add_section_without_time_only_adds_credits(make_section):
    schedule = Schedule()

    add_section(make_section("tba", days=["Monday"], credits=2), schedule)
    add_section(None, schedule)

    assert schedule.credit_total == 2
    assert schedule.week_times == []


def test_remove_section_undoes_add_section(make_section):
    schedule = Schedule()
    add_section(make_section("a", days=["Monday"], start=900, end=1000), schedule)
    before = schedule.model_copy(deep=True)

    section = make_section("b", days=["Monday", "Tuesday"], start=1100, end=1200, credits=3)
    add_section(section, schedule)
    remove_section(section, schedule)

    assert schedule == before


def test_add_course_adds_every_selected_section(make_section, make_course):
    lecture = make_section("lec", days=["Tuesday", "Thursday"], start=1030, end=1145, credits=3)
    lab = make_section("lab", days=["Friday"], start=1300, end=1600, credits=1)
    course = make_course("chem", [lecture], [lab])
    course.main_group.selected_section = lecture
    course.secondary_groups[0].selected_section = lab

    schedule = add_course(course, Schedule())

    assert schedule.courses == [course]
    assert schedule.credit_total == 4
    assert [entry.day for entry in schedule.week_times] == ["Tuesday", "Thursday", "Friday"]
