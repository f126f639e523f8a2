import asyncio

import httpx
import pytest

from store_admin.client import ApiRequestError, ResourceForm, StoreAdminClient, SubmissionInProgress
from store_admin.core.auth import create_access_token
from store_admin.main import app

from conftest import OWNER_ID


@pytest.fixture
def anyio_backend():
    return "asyncio"


def make_client(user_id=OWNER_ID):
    token = create_access_token(user_id) if user_id else None
    return StoreAdminClient("http://testserver", token=token, transport=httpx.ASGITransport(app=app))


@pytest.mark.anyio
async def test_form_creates_then_edits(store):
    async with make_client() as api:
        form = ResourceForm(api, store.id, "billboards")

        created = await form.submit({"label": "Spring", "imageUrl": "https://img.example/spring.png"})
        assert form.record_id == created["id"]
        assert form.loading is False

        updated = await form.submit({"label": "Spring II", "imageUrl": "https://img.example/spring.png"})
        assert updated["id"] == created["id"]
        assert updated["label"] == "Spring II"

        listed = await api.list(store.id, "billboards")
        assert [item["id"] for item in listed] == [created["id"]]


@pytest.mark.anyio
async def test_failed_delete_carries_server_message(store, billboard, category):
    async with make_client() as api:
        form = ResourceForm(api, store.id, "billboards", record_id=billboard.id)

        with pytest.raises(ApiRequestError) as exc:
            await form.delete()

        assert exc.value.status_code == 409
        assert exc.value.message == "Make sure you removed all categories using this billboard first."
        assert form.loading is False
        assert form.record_id == billboard.id


@pytest.mark.anyio
async def test_unauthenticated_client_gets_401(store):
    async with make_client(user_id=None) as api:
        with pytest.raises(ApiRequestError) as exc:
            await api.create(store.id, "sizes", {"name": "Large", "value": "L"})
        assert exc.value.status_code == 401


@pytest.mark.anyio
async def test_duplicate_submission_is_rejected(store):
    release = asyncio.Event()

    class SlowClient:
        async def create(self, store_id, resource, values):
            await release.wait()
            return {"id": "new-id", **values}

    form = ResourceForm(SlowClient(), store.id, "sizes")
    first = asyncio.ensure_future(form.submit({"name": "Large", "value": "L"}))
    await asyncio.sleep(0)
    assert form.loading is True

    with pytest.raises(SubmissionInProgress):
        await form.submit({"name": "Large", "value": "L"})

    release.set()
    record = await first
    assert record["id"] == "new-id"
    assert form.loading is False


def test_unknown_resource_is_refused():
    with pytest.raises(ValueError):
        StoreAdminClient._path("store", "widgets")
