import pytest
from google.api_core.exceptions import NotFound, ServiceUnavailable

from app.core.exceptions import ProviderError
from app.services import image_storage

pytestmark = pytest.mark.anyio


class FakeBlob:
    def __init__(self, bucket, name):
        self.bucket = bucket
        self.name = name
        self.public_url = f"https://storage.googleapis.com/demo-bucket/{name}"

    def upload_from_file(self, stream, content_type=None):
        if self.bucket.error:
            raise self.bucket.error
        self.bucket.objects[self.name] = (stream.read(), content_type)

    def make_public(self):
        pass

    def delete(self):
        if self.bucket.error:
            raise self.bucket.error
        if self.name not in self.bucket.objects:
            raise NotFound(self.name)
        del self.bucket.objects[self.name]


class FakeBucket:
    def __init__(self):
        self.objects = {}
        self.error = None

    def blob(self, name):
        return FakeBlob(self, name)


@pytest.fixture
def bucket(monkeypatch):
    fake = FakeBucket()
    monkeypatch.setattr(image_storage, "get_bucket", lambda: fake)
    return fake


async def test_upload_stores_under_clinic_prefix(bucket):
    image = await image_storage.upload_clinic_image("a", b"\x89PNG", "image/png")

    assert image.path.startswith("clinics/a/") and image.path.endswith(".png")
    assert image.url.endswith(image.path)
    assert bucket.objects[image.path] == (b"\x89PNG", "image/png")


async def test_upload_failure_is_provider_error(bucket):
    bucket.error = ServiceUnavailable("storage down")

    with pytest.raises(ProviderError):
        await image_storage.upload_clinic_image("a", b"\x89PNG", "image/png")


async def test_delete_removes_upload(bucket):
    image = await image_storage.upload_clinic_image("a", b"\xff\xd8", "image/jpeg")

    await image_storage.delete_clinic_image(image.path)

    assert bucket.objects == {}


async def test_delete_of_missing_object_is_quiet(bucket):
    await image_storage.delete_clinic_image("clinics/a/gone.png")
