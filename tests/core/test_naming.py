import re

from portfolio_images.core.utils.naming import extension_for, generate_blob_name


class TestExtensionFor:
    def test_uses_file_name_suffix(self) -> None:
        assert extension_for("Sunset.JPG", "image/png") == ".jpg"

    def test_falls_back_to_mime_type(self) -> None:
        assert extension_for("image", "image/png") == ".png"

    def test_jpeg_maps_to_jpg(self) -> None:
        assert extension_for("blob", "image/jpeg") == ".jpg"

    def test_unknown_mime_type_has_no_extension(self) -> None:
        assert extension_for("blob", "image/x-unknown") == ""


class TestGenerateBlobName:
    def test_format(self) -> None:
        name = generate_blob_name("photo.png", "image/png")
        assert re.fullmatch(r"image-\d{13}-\d{9}\.png", name)

    def test_names_are_unique(self) -> None:
        names = {generate_blob_name("photo.png", "image/png") for _ in range(50)}
        assert len(names) == 50
