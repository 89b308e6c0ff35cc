import argparse
import importlib.util
import io
import tempfile
from contextlib import redirect_stdout
from pathlib import Path
from unittest import IsolatedAsyncioTestCase, mock

from models.schemas import ImagePayload

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "transform_photo.py"
_spec = importlib.util.spec_from_file_location("transform_photo", SCRIPT_PATH)
transform_photo = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(transform_photo)

FAKE_PNG: bytes = b"\x89PNG\r\n\x1a\nfake-image"


class TestTransformPhotoScript(IsolatedAsyncioTestCase):

    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.photo = Path(self.tmp.name) / "photo.png"
        self.photo.write_bytes(FAKE_PNG)
        self.out = Path(self.tmp.name) / "out"

    def make_args(self) -> argparse.Namespace:
        return argparse.Namespace(photo=str(self.photo), style="cutout",
                                  relay_url="http://relay.test/api/transform-image", out=str(self.out))

    @mock.patch.object(transform_photo, "RelayClient", autospec=True)
    async def test_saves_result(self, fakeclient: mock.MagicMock) -> None:
        fakeclient.return_value.transform.return_value = ImagePayload(data="b3V0cHV0", mime_type="image/png")

        with redirect_stdout(io.StringIO()):
            code = await transform_photo.run(self.make_args())

        self.assertEqual(code, 0)
        self.assertEqual((self.out / "2000s-flashback-paper-cutout.png").read_bytes(), b"output")

    @mock.patch.object(transform_photo, "RelayClient", autospec=True)
    async def test_undecodable_result_is_single_error(self, fakeclient: mock.MagicMock) -> None:
        fakeclient.return_value.transform.return_value = ImagePayload(data="@@not-base64@@", mime_type="image/png")

        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = await transform_photo.run(self.make_args())

        self.assertEqual(code, 1)
        self.assertTrue(stdout.getvalue().startswith("ERROR:"))
        self.assertEqual(len(stdout.getvalue().strip().splitlines()), 1)
        self.assertFalse((self.out / "2000s-flashback-paper-cutout.png").exists())

    async def test_invalid_photo(self) -> None:
        self.photo.unlink()
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = await transform_photo.run(self.make_args())
        self.assertEqual(code, 1)
        self.assertTrue(stdout.getvalue().startswith("ERROR:"))
