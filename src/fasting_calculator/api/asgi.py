"""ASGI entrypoint for the fasting calculator API."""

from fasting_calculator.api.app import create_app
from fasting_calculator.containers import build_container

app = create_app(build_container())
