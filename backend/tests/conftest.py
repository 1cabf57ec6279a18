import pytest


@pytest.fixture
def sample_ligature_title():
    return "Encyclopædia of Œnology"


@pytest.fixture
def sample_page_expression():
    return "1-3, 5-6, p9"
