"""Reflex configuration for the search-select demo application."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("DATABRICKS_APP_PORT", os.getenv("APP_PORT", "8000")))

config = rx.Config(
    app_name="search_select",
    # Use the src directory structure
    app_module_import="search_select.app",
    frontend_port=APP_PORT,
)
