from .course import Course  # noqa: F401
