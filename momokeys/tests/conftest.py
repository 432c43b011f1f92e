import pytest
from rest_framework.test import APIClient

from .helpers import RecordingObserver


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def recording_observer():
    return RecordingObserver()
