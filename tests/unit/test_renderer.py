import base64
import io
from unittest.mock import patch

import pytest
from PIL import Image

from promptpay_qr.exceptions import ImageGenerationFailed, QrGenerationFailed
from promptpay_qr.models.payload import RenderOptions
from promptpay_qr.renderer import QRRenderer

PAYLOAD = "00020101021129370016A000000677010111011300668123456785802TH53037646304" + "5D82"

pytestmark = pytest.mark.render


def test_png_has_requested_size():
    data = QRRenderer(RenderOptions(size=300)).to_png(PAYLOAD)
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    with Image.open(io.BytesIO(data)) as img:
        assert img.size == (300, 300)


def test_png_uses_configured_colors():
    options = RenderOptions(dark_color="#FF0000", light_color="#00FF00", quiet_zone=4)
    data = QRRenderer(options).to_png(PAYLOAD)
    with Image.open(io.BytesIO(data)) as img:
        rgb = img.convert("RGB")
        # Corner pixel is always inside the quiet zone
        assert rgb.getpixel((0, 0)) == (0, 255, 0)
        colors = {c for _, c in rgb.getcolors(maxcolors=1024)}
        assert (255, 0, 0) in colors


def test_svg_document():
    svg = QRRenderer(RenderOptions(dark_color="#112233", light_color="#FAFAFA")).to_svg(PAYLOAD)
    assert svg.lstrip().startswith("<svg")
    assert 'id="qr-path"' in svg
    assert 'fill="#112233"' in svg
    assert 'fill="#FAFAFA"' in svg


def test_base64_round_trip_to_png():
    uri = QRRenderer().to_base64_png(PAYLOAD)
    prefix = "data:image/png;base64,"
    assert uri.startswith(prefix)
    assert base64.b64decode(uri[len(prefix):])[:4] == b"\x89PNG"


def test_html_img_tag():
    tag = QRRenderer(RenderOptions(size=128)).to_html_img(PAYLOAD, alt='Pay "Shop"')
    assert tag.startswith('<img src="data:image/png;base64,')
    assert 'alt="Pay &quot;Shop&quot;"' in tag
    assert 'width="128" height="128"' in tag


def test_html_img_default_alt():
    assert 'alt="PromptPay QR Code"' in QRRenderer().to_html_img(PAYLOAD)


def test_empty_payload_rejected():
    with pytest.raises(QrGenerationFailed, match="empty"):
        QRRenderer().to_svg("")


def test_oversized_payload_rejected():
    with pytest.raises(QrGenerationFailed):
        QRRenderer(RenderOptions(error_correction="H")).to_png("9" * 8000)


def test_png_encoding_failure_is_wrapped():
    with patch.object(Image.Image, "save", side_effect=OSError("disk full")):
        with pytest.raises(ImageGenerationFailed, match="disk full"):
            QRRenderer().to_png(PAYLOAD)


def test_save_creates_parent_dirs(tmp_path):
    target = tmp_path / "a" / "b" / "qr.svg"
    path = QRRenderer().save_svg(PAYLOAD, target)
    assert path == target
    assert target.exists()


def test_save_failure_is_wrapped(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")
    with pytest.raises(ImageGenerationFailed):
        QRRenderer().save_png(PAYLOAD, blocker / "qr.png")
