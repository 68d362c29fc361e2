from unittest.mock import patch

import pytest

from core.exceptions import ProgressionNotFoundError

PROFILE_ROW = {"id": "user-1", "full_name": "Alex Runner", "email": "athlete@example.com", "current_week": 4}


@pytest.mark.asyncio
async def test_get_profile_success(profile_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        assert method == "get"
        assert url == "http://baas.test/rest/v1/profiles"
        assert kwargs["params"] == {"select": "*", "id": "eq.user-1", "limit": "1"}
        return 200, [PROFILE_ROW]

    with patch.object(profile_service, "_api_request", side_effect=mock_api_request):
        profile = await profile_service.get_profile("user-1")
        assert profile.full_name == "Alex Runner"
        assert profile.current_week == 4


@pytest.mark.asyncio
async def test_get_profile_not_found(profile_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        return 200, []

    with patch.object(profile_service, "_api_request", side_effect=mock_api_request):
        assert await profile_service.get_profile("missing") is None


@pytest.mark.asyncio
async def test_profile_without_week_defaults_to_first(profile_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        return 200, [{"id": "user-1", "current_week": None}]

    with patch.object(profile_service, "_api_request", side_effect=mock_api_request):
        profile = await profile_service.get_profile("user-1")
        assert profile.current_week == 1


@pytest.mark.asyncio
async def test_set_current_week(profile_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        assert method == "patch"
        assert data == {"current_week": 6}
        assert kwargs["params"] == {"id": "eq.user-1"}
        assert kwargs["headers"] == {"Prefer": "return=representation"}
        return 200, [PROFILE_ROW | {"current_week": 6}]

    with patch.object(profile_service, "_api_request", side_effect=mock_api_request):
        profile = await profile_service.set_current_week("user-1", 6)
        assert profile.current_week == 6


@pytest.mark.asyncio
@pytest.mark.parametrize("week", [0, 9])
async def test_set_current_week_rejects_unknown_week(profile_service, week):
    with patch.object(profile_service, "_api_request") as mock_request:
        with pytest.raises(ProgressionNotFoundError):
            await profile_service.set_current_week("user-1", week)
        mock_request.assert_not_called()


@pytest.mark.asyncio
async def test_set_current_week_without_profile(profile_service):
    async def mock_api_request(method, url, data=None, **kwargs):
        return 200, []

    with patch.object(profile_service, "_api_request", side_effect=mock_api_request):
        assert await profile_service.set_current_week("user-1", 2) is None
