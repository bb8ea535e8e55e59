import pytest
from fastapi.testclient import TestClient #gives a fake http client that can call the FastAPI routes without running a real server.

from coursecrafter.core.config import Settings, get_settings
from coursecrafter.main import app
from coursecrafter.schemas.catalog import Course, Section, SectionGroup, TimeSlot


def build_section(section_id, *, days=None, start=None, end=None, credits=4):
    time = TimeSlot(start=start, end=end) if start is not None else None
    return Section(id=section_id, class_no=section_id, credits=credits, days=days, time=time)


def build_course(course_id, *groups, title=None):
    # Each positional argument is one section group; the first becomes the main group.
    section_groups = [SectionGroup(all_sections=list(sections)) for sections in groups]
    main_group = section_groups[0] if section_groups else SectionGroup()
    return Course(
        id=course_id,
        title=title or course_id,
        main_group=main_group,
        secondary_groups=section_groups[1:],
    )


@pytest.fixture()
def make_section():
    return build_section


@pytest.fixture()
def make_course():
    return build_course


@pytest.fixture()
def client():
    app.dependency_overrides[get_settings] = lambda: Settings(schedule_random_seed=1234)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
