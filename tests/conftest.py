"""Test fixtures and utilities"""

import pytest


#################################################################
# Fixtures
#################################################################
@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "ndpoint.yaml"
