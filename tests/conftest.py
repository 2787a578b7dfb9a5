from __future__ import annotations

import numpy as np
import pytest

from cubicseg import enable_degenerate_checks, hide_segment_messages


@pytest.fixture(autouse=True)
def reset_degenerate_checks():
    enable_degenerate_checks(False)
    yield
    enable_degenerate_checks(False)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240611)


@pytest.fixture
def segment_messages():
    yield
    hide_segment_messages()
