import json
from typing import Callable
from unittest import IsolatedAsyncioTestCase

import httpx

from clients.relay_client import GENERIC_SERVER_ERROR, NO_IMAGE_ERROR, RelayClient
from errors import TransformationError
from models.schemas import ImagePayload
from models.styles import TransformStyle

RELAY_URL = "http://relay.test/api/transform-image"
IMAGE = ImagePayload(data="aGVsbG8=", mime_type="image/jpeg")


def make_client(handler: Callable[[httpx.Request], httpx.Response]) -> RelayClient:
    return RelayClient(RELAY_URL, transport=httpx.MockTransport(handler))


class TestRelayClient(IsolatedAsyncioTestCase):

    async def test_success_sends_wire_payload(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"transformedBase64": "b3V0cHV0"})

        result = await make_client(handler).transform(IMAGE, TransformStyle.CUTOUT)

        self.assertEqual(result, ImagePayload(data="b3V0cHV0", mime_type="image/png"))
        self.assertEqual(len(seen), 1)
        self.assertEqual(seen[0].method, "POST")
        self.assertEqual(str(seen[0].url), RELAY_URL)
        self.assertEqual(json.loads(seen[0].content), {
            "base64ImageData": "aGVsbG8=",
            "mimeType": "image/jpeg",
            "style": "cutout",
        })

    async def test_plain_string_style_accepted(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            self.assertEqual(json.loads(request.content)["style"], "lofi")
            return httpx.Response(200, json={"transformedBase64": "eA=="})

        result = await make_client(handler).transform(IMAGE, "lofi")  # type: ignore[arg-type]
        self.assertEqual(result.data, "eA==")

    async def test_error_body_message_is_used(self) -> None:
        client = make_client(lambda r: httpx.Response(500, json={"error": "The AI model did not return an image."}))

        with self.assertRaises(TransformationError) as ctx:
            await client.transform(IMAGE, TransformStyle.LOFI)

        self.assertEqual(ctx.exception.message, "The AI model did not return an image.")
        self.assertEqual(ctx.exception.status_code, 500)

    async def test_unparsable_error_body(self) -> None:
        client = make_client(lambda r: httpx.Response(405, text="Method Not Allowed"))

        with self.assertRaises(TransformationError) as ctx:
            await client.transform(IMAGE, TransformStyle.LOFI)

        self.assertEqual(ctx.exception.message, GENERIC_SERVER_ERROR)
        self.assertEqual(ctx.exception.status_code, 405)

    async def test_error_body_without_message(self) -> None:
        client = make_client(lambda r: httpx.Response(502, json={"detail": "bad gateway"}))

        with self.assertRaises(TransformationError) as ctx:
            await client.transform(IMAGE, TransformStyle.LOFI)

        self.assertEqual(ctx.exception.message, "Server responded with status: 502")

    async def test_success_without_image(self) -> None:
        for body in ({}, {"transformedBase64": ""}, {"transformedBase64": 12345}, {"transformedBase64": ["x"]}, None):
            with self.subTest(body=body):
                if body is None:
                    client = make_client(lambda r: httpx.Response(200, text="ok"))
                else:
                    client = make_client(lambda r, b=body: httpx.Response(200, json=b))
                with self.assertRaises(TransformationError) as ctx:
                    await client.transform(IMAGE, TransformStyle.LOFI)
                self.assertEqual(ctx.exception.message, NO_IMAGE_ERROR)

    async def test_network_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(TransformationError) as ctx:
            await make_client(handler).transform(IMAGE, TransformStyle.LOFI)

        self.assertTrue(ctx.exception.message)
        self.assertIsNone(ctx.exception.status_code)

    async def test_never_retries(self) -> None:
        calls: list[int] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(1)
            return httpx.Response(500, json={"error": "boom"})

        with self.assertRaises(TransformationError):
            await make_client(handler).transform(IMAGE, TransformStyle.LOFI)
        self.assertEqual(len(calls), 1)
