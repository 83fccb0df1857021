import os


# Absolute path to project root
# (a stable anchor for all file paths)
basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    # Course catalog text files live here. The default file is the one the
    # "load" menu option and POST /catalog/load read.
    CATALOG_DIR = os.path.join(basedir, "data_catalog")
    CATALOG_PATH = os.path.join(CATALOG_DIR, "CourseCatalog.csv")
    CATALOG_ENCODING = "utf-8"

    LOG_LEVEL = "INFO"
