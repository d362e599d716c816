"""Tests for ObjectStorageWriter."""

import httpx
import pytest

from wiki_uploader.assets import AssetStateStore
from wiki_uploader.constants import AssetRole
from wiki_uploader.gateway.models import Grant
from wiki_uploader.storage import ObjectStorageWriter


@pytest.fixture
def store():
    return AssetStateStore()


def grant(n):
    return Grant(f"https://storage.test/uploads/{n}.bin?X-Amz-Signature=secret")


class TestWriteAll:
    """Tests for concurrent PUTs to presigned URLs."""

    @pytest.mark.asyncio
    async def test_puts_bytes_with_content_type(self, writer, backend, store):
        png = store.add(AssetRole.THUMBNAIL, b"png-bytes", "image/png")
        jpg = store.add(AssetRole.GALLERY, b"jpg-bytes", "image/jpeg")

        outcomes = await writer.write_all([(png, grant(1)), (jpg, grant(2))])

        assert all(o.success for o in outcomes)
        assert [o.asset for o in outcomes] == [png, jpg]
        assert backend.stored == {"/uploads/1.bin": b"png-bytes", "/uploads/2.bin": b"jpg-bytes"}
        types = {r.url.path: r.headers["content-type"] for r in backend.puts}
        assert types == {"/uploads/1.bin": "image/png", "/uploads/2.bin": "image/jpeg"}

    @pytest.mark.asyncio
    async def test_signature_is_sent(self, writer, backend, store):
        asset = store.add(AssetRole.THUMBNAIL, b"x", "image/png")
        await writer.write_all([(asset, grant(1))])
        assert backend.puts[0].url.params["X-Amz-Signature"] == "secret"

    @pytest.mark.asyncio
    async def test_failure_does_not_stop_other_writes(self, writer, backend, store):
        first = store.add(AssetRole.GALLERY, b"a", "image/png")
        second = store.add(AssetRole.GALLERY, b"b", "image/png")
        backend.failing_paths.add("/uploads/1.bin")

        outcomes = await writer.write_all([(first, grant(1)), (second, grant(2))])

        assert not outcomes[0].success
        assert outcomes[0].status == 503
        assert "503" in outcomes[0].error
        assert outcomes[1].success
        assert len(backend.puts) == 2

    @pytest.mark.asyncio
    async def test_transport_error_becomes_outcome(self, settings, store):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        writer = ObjectStorageWriter(settings, transport=httpx.MockTransport(handler))
        asset = store.add(AssetRole.THUMBNAIL, b"x", "image/png")

        [outcome] = await writer.write_all([(asset, grant(1))])

        assert not outcome.success
        assert outcome.status is None
        assert "ConnectError" in outcome.error

    @pytest.mark.asyncio
    async def test_uploaded_asset_is_not_written(self, writer, backend, store):
        asset = store.load_uploaded(AssetRole.THUMBNAIL, "thumb-key")
        [outcome] = await writer.write_all([(asset, grant(1))])

        assert not outcome.success
        assert backend.puts == []

    @pytest.mark.asyncio
    async def test_settled_callback_counts_every_write(self, writer, backend, store):
        assets = [store.add(AssetRole.GALLERY, b"%d" % i, "image/png") for i in range(3)]
        backend.failing_paths.add("/uploads/2.bin")
        calls = []

        async def on_settled(asset, finished, total):
            calls.append((finished, total))

        await writer.write_all([(a, grant(i)) for i, a in enumerate(assets, start=1)], on_settled=on_settled)

        assert sorted(calls) == [(1, 3), (2, 3), (3, 3)]

    @pytest.mark.asyncio
    async def test_empty_batch(self, writer, backend):
        assert await writer.write_all([]) == []
        assert backend.requests == []
