import pytest

from app import create_app
from config import Config


SAMPLE_CATALOG = (
    "CS300,Algorithms,CS100,CS200\n"
    "CS100,Intro to CS\n"
    "\n"
    "MATH201,Discrete Mathematics\n"
    "CS200,Data Structures,CS100\n"
)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "CourseCatalog.csv"
    path.write_text(SAMPLE_CATALOG, encoding="utf-8")
    return path


@pytest.fixture
def app(tmp_path, catalog_file):
    class TestConfig(Config):
        TESTING = True
        CATALOG_DIR = str(tmp_path)
        CATALOG_PATH = str(catalog_file)

    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
