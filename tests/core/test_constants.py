from portfolio_images.core.utils.constants import (
    DEFAULT_MAX_UPLOAD_BYTES,
    format_file_size,
    get_max_upload_bytes,
)


class TestGetMaxUploadBytes:
    def test_default(self) -> None:
        assert get_max_upload_bytes() == DEFAULT_MAX_UPLOAD_BYTES == 5 * 1024 * 1024

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", str(10 * 1024 * 1024))
        assert get_max_upload_bytes() == 10 * 1024 * 1024


def test_format_file_size() -> None:
    assert format_file_size(512) == "512.0 B"
    assert format_file_size(5 * 1024 * 1024) == "5.0 MB"
