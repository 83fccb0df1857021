from __future__ import annotations

from models.course import Course


def format_course_line(course: Course) -> str:
    # one line per course in the list view: "CSCI200, Data Structures"
    return f"{course.number}, {course.title}"


def format_prerequisites(course: Course) -> str:
    if not course.prerequisites:
        return "Prerequisites: None"
    return "Prerequisites: " + ", ".join(course.prerequisites)


def format_course_detail(course: Course) -> str:
    return f"{format_course_line(course)}\n{format_prerequisites(course)}"
