import io
from pathlib import Path

import pytest
from botocore.exceptions import ClientError

from docs_hub.config import Settings, get_settings

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


def make_spec(title=None, version=None, description=None, paths=None) -> str:
    """YAML mínimo de un documento OpenAPI."""
    lines = ["openapi: 3.0.3", "info:"]
    if title is not None:
        lines.append(f'  title: "{title}"')
    if version is not None:
        lines.append(f'  version: "{version}"')
    if description is not None:
        lines.append(f'  description: "{description}"')
    if len(lines) == 2:
        lines.append("  x-empty: true")
    lines.append("paths:")
    for path in paths or ["/items"]:
        lines.append(f"  {path}:")
        lines.append("    get:")
        lines.append("      responses:")
        lines.append("        '200':")
        lines.append("          description: OK")
    return "\n".join(lines) + "\n"


class FakePaginator:
    def __init__(self, client):
        self.client = client

    def paginate(self, Bucket, Prefix="", Delimiter=None):
        if self.client.fail_list:
            raise ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "ListObjectsV2")
        contents, prefixes = [], []
        for key in sorted(self.client.objects):
            if not key.startswith(Prefix):
                continue
            rest = key[len(Prefix):]
            if Delimiter and Delimiter in rest:
                common = Prefix + rest.split(Delimiter, 1)[0] + Delimiter
                if common not in prefixes:
                    prefixes.append(common)
            else:
                contents.append({"Key": key, "Size": len(self.client.objects[key])})
        page = {"Contents": contents}
        if prefixes:
            page["CommonPrefixes"] = [{"Prefix": p} for p in prefixes]
        yield page


class FakeS3Client:
    """Doble en memoria de la parte del cliente boto3 que usa S3SpecStore."""

    def __init__(self, objects=None):
        self.objects = {k: v.encode("utf-8") if isinstance(v, str) else v for k, v in (objects or {}).items()}
        self.fail_list = False
        self.fail_get = False
        self.get_calls = []

    def get_paginator(self, name):
        assert name == "list_objects_v2"
        return FakePaginator(self)

    def get_object(self, Bucket, Key):
        self.get_calls.append(Key)
        if self.fail_get:
            raise ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "GetObject")
        if Key not in self.objects:
            raise ClientError({"Error": {"Code": "NoSuchKey", "Message": "missing"}}, "GetObject")
        return {"Body": io.BytesIO(self.objects[Key])}


@pytest.fixture
def fake_s3():
    return FakeS3Client()


@pytest.fixture
def settings():
    return Settings(public_dir=str(PUBLIC_DIR), port=3000)


@pytest.fixture
def clean_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def local_specs(tmp_path):
    """Crea `<tmp>/data/<carpeta>/<archivo>` a partir de un dict."""

    def _write(files):
        root = tmp_path / "data"
        root.mkdir(exist_ok=True)
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _write
