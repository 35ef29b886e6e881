"""
------------------------------------------------------------------------------
Project:        PromptPayQR
File:           promptpay_qr/renderer.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Turns a finished payload string into a QR code image. Matrix
                generation is delegated to 'qrcode', raster output to Pillow.
                Supports SVG, PNG, Base64 data URIs and HTML <img> tags.
------------------------------------------------------------------------------
"""

import base64
import html
import io
from pathlib import Path
from typing import Optional, Union

import qrcode
from PIL import Image
from qrcode.exceptions import DataOverflowError
from qrcode.image.svg import SvgPathImage

from promptpay_qr.exceptions import ImageGenerationFailed, QrGenerationFailed
from promptpay_qr.logger import get_logger
from promptpay_qr.models.payload import RenderOptions

logger = get_logger("renderer")

_EC_LEVELS = {
    "L": qrcode.constants.ERROR_CORRECT_L,
    "M": qrcode.constants.ERROR_CORRECT_M,
    "Q": qrcode.constants.ERROR_CORRECT_Q,
    "H": qrcode.constants.ERROR_CORRECT_H,
}


def _svg_factory(dark_color: str, light_color: str) -> type:
    """Builds an SvgPathImage subclass painting with the given colors."""
    style = dict(SvgPathImage.QR_PATH_STYLE, fill=dark_color)
    return type(
        "PromptPaySvgImage",
        (SvgPathImage,),
        {"background": light_color, "QR_PATH_STYLE": style},
    )


class QRRenderer:
    """
    Renders PromptPay payloads as QR codes.
    The renderer never inspects the payload; it only encodes the string.
    """

    def __init__(self, options: Optional[RenderOptions] = None) -> None:
        self.options = options or RenderOptions()

    def _build_matrix(self, payload: str) -> qrcode.QRCode:
        if not payload:
            raise QrGenerationFailed("Payload cannot be empty")

        qr = qrcode.QRCode(
            version=None,
            error_correction=_EC_LEVELS[self.options.error_correction],
            box_size=10,
            border=self.options.quiet_zone,
        )
        try:
            qr.add_data(payload)
            qr.make(fit=True)
        except (DataOverflowError, ValueError) as e:
            logger.error(f"QR encoding failed for payload of {len(payload)} chars: {e}")
            raise QrGenerationFailed(f"Failed to create QR code: {e}") from e

        # Smallest whole box size that reaches the requested dimension
        total_modules = qr.modules_count + 2 * self.options.quiet_zone
        qr.box_size = max(1, -(-self.options.size // total_modules))
        return qr

    def to_svg(self, payload: str) -> str:
        """Returns a standalone SVG document as a string."""
        qr = self._build_matrix(payload)
        factory = _svg_factory(self.options.dark_color, self.options.light_color)
        img = qr.make_image(image_factory=factory)
        svg = img.to_string(encoding="unicode")
        logger.debug(f"Rendered SVG ({len(svg)} chars, {qr.modules_count} modules)")
        return svg

    def to_png(self, payload: str) -> bytes:
        """
        Returns PNG bytes scaled to exactly options.size x options.size pixels.
        """
        qr = self._build_matrix(payload)
        size = self.options.size
        try:
            img = qr.make_image(
                fill_color=self.options.dark_color,
                back_color=self.options.light_color,
            ).get_image()
            if img.size != (size, size):
                img = img.resize((size, size), Image.Resampling.NEAREST)
            buffer = io.BytesIO()
            img.save(buffer, format="PNG")
        except (OSError, ValueError) as e:
            logger.error(f"PNG encoding failed: {e}")
            raise ImageGenerationFailed(f"Failed to encode PNG: {e}") from e
        return buffer.getvalue()

    def to_base64_png(self, payload: str) -> str:
        """Returns the PNG as a 'data:image/png;base64,...' URI."""
        encoded = base64.b64encode(self.to_png(payload)).decode("ascii")
        return f"data:image/png;base64,{encoded}"

    def to_html_img(self, payload: str, alt: Optional[str] = None) -> str:
        """Returns an <img> tag embedding the PNG as a data URI."""
        src = self.to_base64_png(payload)
        alt_text = html.escape(alt or "PromptPay QR Code", quote=True)
        size = self.options.size
        return f'<img src="{src}" alt="{alt_text}" width="{size}" height="{size}" />'

    def save_png(self, payload: str, file_path: Union[str, Path]) -> Path:
        """Writes the PNG rendering to disk and returns the path."""
        return self._write(Path(file_path), self.to_png(payload))

    def save_svg(self, payload: str, file_path: Union[str, Path]) -> Path:
        """Writes the SVG rendering to disk and returns the path."""
        return self._write(Path(file_path), self.to_svg(payload).encode("utf-8"))

    def _write(self, path: Path, data: bytes) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            logger.error(f"Could not write {path}: {e}")
            raise ImageGenerationFailed(f"Failed to write {path}: {e}") from e
        logger.info(f"QR code saved to {path}")
        return path
