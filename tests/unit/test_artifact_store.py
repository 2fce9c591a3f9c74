"""Unit tests for ArtifactStore handle lifecycle."""

import pytest

from resumekit.contexts.rendering.artifact_store import ArtifactStore
from resumekit.contexts.rendering.compositor import BinaryArtifact
from resumekit.contexts.rendering.exceptions import ArtifactHandleError


def artifact(template_id="modern", content=b"%PDF-1.7 fake"):
    return BinaryArtifact(content=content, template_id=template_id, accent_color="#2563eb")


@pytest.fixture
def store(tmp_path):
    store = ArtifactStore(base_dir=tmp_path)
    yield store
    store.close()


class TestHandles:
    @pytest.mark.unit
    def test_create_writes_backing_file(self, store):
        handle = store.create(artifact())

        assert handle.path.read_bytes() == b"%PDF-1.7 fake"
        assert handle.path.suffix == ".pdf"
        assert handle.uri.startswith("file://")
        assert handle.size == len(b"%PDF-1.7 fake")
        assert store.is_live(handle)

    @pytest.mark.unit
    def test_ids_are_unique(self, store):
        first = store.create(artifact())
        second = store.create(artifact())
        assert first.handle_id != second.handle_id
        assert first.path != second.path
        assert store.live_count == 2

    @pytest.mark.unit
    def test_html_extension(self, store):
        html = BinaryArtifact(content=b"<html>", template_id="minimal", accent_color="#000000", media_type="text/html")
        assert store.create(html).path.suffix == ".html"

    @pytest.mark.unit
    def test_revoke_deletes_file(self, store):
        handle = store.create(artifact())
        store.revoke(handle)

        assert not handle.path.exists()
        assert not store.is_live(handle)
        assert store.revoked_count == 1

    @pytest.mark.unit
    def test_double_revoke_raises(self, store):
        handle = store.create(artifact())
        store.revoke(handle)
        with pytest.raises(ArtifactHandleError) as exc_info:
            store.revoke(handle)
        assert exc_info.value.handle_id == handle.handle_id
        assert store.revoked_count == 1

    @pytest.mark.unit
    def test_foreign_handle_raises(self, store, tmp_path):
        other = ArtifactStore(base_dir=tmp_path / "other")
        try:
            handle = other.create(artifact())
            with pytest.raises(ArtifactHandleError):
                store.revoke(handle)
            assert other.is_live(handle)
        finally:
            other.close()


class TestClose:
    @pytest.mark.unit
    def test_close_revokes_everything(self, tmp_path):
        store = ArtifactStore(base_dir=tmp_path)
        handles = [store.create(artifact()) for _ in range(3)]
        store.revoke(handles[0])

        store.close()

        assert store.live_count == 0
        assert store.created_count == store.revoked_count == 3
        assert not store.directory.exists()

    @pytest.mark.unit
    def test_close_twice(self, tmp_path):
        store = ArtifactStore(base_dir=tmp_path)
        store.create(artifact())
        store.close()
        store.close()
        assert store.revoked_count == 1
