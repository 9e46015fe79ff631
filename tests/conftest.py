import pytest
from test_utils.textract_response_builder import TextractResponseBuilder


@pytest.fixture
def response_builder():
    """Provides an empty TextractResponseBuilder."""
    return TextractResponseBuilder()
