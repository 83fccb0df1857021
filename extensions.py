from __future__ import annotations

from flask import Flask, current_app

from services.catalog_manager import CatalogManager


class CatalogExtension:
    """Gives each Flask app its own CatalogManager (app.extensions["catalog"])."""

    def __init__(self, app: Flask | None = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.extensions["catalog"] = CatalogManager(
            encoding=app.config.get("CATALOG_ENCODING", "utf-8"),
        )

    @property
    def manager(self) -> CatalogManager:
        return current_app.extensions["catalog"]


catalog = CatalogExtension()
