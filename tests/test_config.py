from docs_hub.config import get_settings

ENV_VARS = [
    "PORT", "HOST", "SPEC_SOURCE", "DATA_DIR", "S3_BUCKET_NAME", "S3_PREFIX",
    "AWS_REGION", "AWS_ENDPOINT_URL", "AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY",
    "PUBLIC_DIR", "LOG_LEVEL", "CORS_ORIGINS",
]


def test_defaults(monkeypatch, clean_settings_cache):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.port == 3000
    assert settings.spec_source == "s3"
    assert settings.s3_bucket_name == "ewa-documentation"
    assert settings.s3_prefix == ""
    assert settings.aws_region == "eu-west-1"
    assert settings.aws_endpoint_url is None
    assert settings.aws_access_key_id is None
    assert settings.cors_origins == ["*"]
    assert settings.templates_dir.endswith("templates")


def test_environment_overrides(monkeypatch, clean_settings_cache):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SPEC_SOURCE", " LOCAL ")
    monkeypatch.setenv("DATA_DIR", "/srv/specs")
    monkeypatch.setenv("S3_BUCKET_NAME", "my-docs")
    monkeypatch.setenv("AWS_ENDPOINT_URL", "http://localhost:9000")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

    settings = get_settings()

    assert settings.port == 8080
    assert settings.spec_source == "local"
    assert settings.data_dir == "/srv/specs"
    assert settings.s3_bucket_name == "my-docs"
    assert settings.aws_endpoint_url == "http://localhost:9000"
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_settings_are_cached(clean_settings_cache):
    assert get_settings() is get_settings()
