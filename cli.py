from __future__ import annotations

import logging
from enum import IntEnum

import click
from flask import current_app
from flask.cli import AppGroup

from extensions import catalog
from models.course import Course
from services.catalog_errors import CatalogError
from services.catalog_manager import CatalogManager
from utils.course_format import format_course_detail, format_course_line

logger = logging.getLogger(__name__)

catalog_cli = AppGroup("catalog", help="Load and browse the course catalog.")


WELCOME_MESSAGE = "Welcome to the course catalog!"
GOODBYE_MESSAGE = "Goodbye!"
SELECT_OPTION = "Select an option"
INVALID_OPTION = "Invalid option. Please try again."
COURSES_LOADED = "Number of courses loaded:"
ERROR_LOADING = "Error loading catalog:"
EMPTY_CATALOG = "The course catalog is empty. Please load the courses first."
INVALID_COURSE_NUMBER = "Invalid course number."
AVAILABLE_COURSES = "Available courses:"
ENTER_COURSE_NUMBER = "What course do you want to know about?"
COURSE_NOT_FOUND = "Course not found."


class MenuOption(IntEnum):
    LOAD_DATA = 1
    PRINT_COURSE_LIST = 2
    PRINT_COURSE = 3
    EXIT = 9

    @property
    def label(self) -> str:
        labels = {
            MenuOption.LOAD_DATA: "Load data structure",
            MenuOption.PRINT_COURSE_LIST: "Print course list",
            MenuOption.PRINT_COURSE: "Print course",
            MenuOption.EXIT: "Exit",
        }
        return f"{self.value}. {labels[self]}"


def lookup_course(manager: CatalogManager, query: str) -> Course | None:
    # exact match first, then the upper-cased query ("csci200" -> "CSCI200")
    course = manager.find_by_number(query)
    if course is None and query.upper() != query:
        course = manager.find_by_number(query.upper())
    return course


class MenuController:
    def __init__(self, manager: CatalogManager, catalog_path: str) -> None:
        self.manager = manager
        self.catalog_path = catalog_path

    def display_menu(self) -> None:
        click.echo("")
        for option in MenuOption:
            click.echo(option.label)
        click.echo("")

    def handle_selection(self, raw: str) -> bool:
        """Run one menu choice. Returns False once the user asked to exit."""
        try:
            option = MenuOption(int(raw.strip()))
        except ValueError:
            click.echo(INVALID_OPTION)
            return True

        if option is MenuOption.LOAD_DATA:
            self.load()
        elif option is MenuOption.PRINT_COURSE_LIST:
            self.print_course_list()
        elif option is MenuOption.PRINT_COURSE:
            return self.print_course()
        else:
            click.echo(GOODBYE_MESSAGE)
            return False

        return True

    def load(self) -> None:
        try:
            count = self.manager.load_file(self.catalog_path)
        except CatalogError as e:
            logger.warning("Catalog load failed: %s", e)
            click.echo(f"{ERROR_LOADING} {e}")
            return

        logger.info("Loaded %d courses from %s", count, self.catalog_path)
        click.echo(f"{COURSES_LOADED} {count}")

    def print_course_list(self) -> None:
        if self.manager.is_empty():
            click.echo(EMPTY_CATALOG)
            return

        click.echo(AVAILABLE_COURSES)
        click.echo("")
        self.manager.for_each_in_order(lambda course: click.echo(format_course_line(course)))

    def print_course(self) -> bool:
        """Look up one course. Returns False if input ended at the prompt."""
        if self.manager.is_empty():
            click.echo(EMPTY_CATALOG)
            return True

        try:
            query = click.prompt(
                ENTER_COURSE_NUMBER, default="", show_default=False, prompt_suffix=" "
            ).strip()
        except click.Abort:
            return False

        if not query:
            click.echo(INVALID_COURSE_NUMBER)
            return True

        course = lookup_course(self.manager, query)
        if course is None:
            click.echo(COURSE_NOT_FOUND)
            return True

        click.echo(format_course_detail(course))
        return True


def _catalog_path(path: str | None) -> str:
    return path or current_app.config["CATALOG_PATH"]


def _load_or_fail(manager: CatalogManager, path: str) -> int:
    try:
        count = manager.load_file(path)
    except CatalogError as e:
        logger.warning("Catalog load failed: %s", e)
        raise click.ClickException(str(e)) from e

    logger.info("Loaded %d courses from %s", count, path)
    return count


file_option = click.option(
    "--file",
    "path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Catalog file to load (defaults to CATALOG_PATH).",
)


@catalog_cli.command("menu")
@file_option
def menu(path):
    """Interactive menu: load, list and look up courses."""
    controller = MenuController(catalog.manager, _catalog_path(path))

    click.echo(WELCOME_MESSAGE)
    running = True
    while running:
        controller.display_menu()
        try:
            raw = click.prompt(SELECT_OPTION, default="", show_default=False)
        except click.Abort:
            # end of input
            break
        running = controller.handle_selection(raw)


@catalog_cli.command("load")
@file_option
def load(path):
    """Load the catalog file and report how many courses it holds."""
    count = _load_or_fail(catalog.manager, _catalog_path(path))
    click.echo(f"{COURSES_LOADED} {count}")


@catalog_cli.command("list")
@file_option
def list_courses(path):
    """Print every course, sorted by course number."""
    manager = catalog.manager
    _load_or_fail(manager, _catalog_path(path))

    if manager.is_empty():
        click.echo(EMPTY_CATALOG)
        return

    manager.for_each_in_order(lambda course: click.echo(format_course_line(course)))


@catalog_cli.command("show")
@click.argument("number")
@file_option
def show(number, path):
    """Print one course and its prerequisites."""
    manager = catalog.manager
    _load_or_fail(manager, _catalog_path(path))

    course = lookup_course(manager, number.strip())
    if course is None:
        raise click.ClickException(COURSE_NOT_FOUND)

    click.echo(format_course_detail(course))
