"""Shared test fixtures."""

from __future__ import annotations

import pytest

from firstmillion.config.defaults import default_inputs
from firstmillion.config.schema import ProjectionInputs
from firstmillion.core.engine import ProjectionResult, project_inputs


@pytest.fixture
def inputs() -> ProjectionInputs:
    """R$ 500/month at 10% a year for 30 years, starting from zero."""
    return default_inputs()


@pytest.fixture
def thirty_year_result(inputs: ProjectionInputs) -> ProjectionResult:
    return project_inputs(inputs)
