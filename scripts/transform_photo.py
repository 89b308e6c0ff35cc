"""
Transform a local photo through a running relay and save the result.
Usage: python scripts/transform_photo.py photo.jpg --style cutout
       python scripts/transform_photo.py photo.png --relay-url https://example.com/api/transform-image --out results/
Relay URL defaults to RELAY_URL from .env (or http://localhost:8000/api/transform-image).
"""
import argparse
import asyncio
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from clients import RelayClient
from config import get_settings
from errors import EncodingError, TransformationError
from models import TransformStyle, download_filename
from models.styles import LOADING_MESSAGE_INTERVAL_SECONDS, next_loading_message
from services import decode_image, encode_file


async def _show_loading_messages() -> None:
    message = next_loading_message()
    while True:
        print(f"  {message}", file=sys.stderr)
        await asyncio.sleep(LOADING_MESSAGE_INTERVAL_SECONDS)
        message = next_loading_message(message)


async def run(args: argparse.Namespace) -> int:
    settings = get_settings()
    style = TransformStyle(args.style)
    try:
        image = encode_file(args.photo)
    except EncodingError as e:
        print("ERROR: invalid file:", e)
        return 1

    client = RelayClient(args.relay_url or settings.relay_url, timeout_seconds=settings.relay_timeout_seconds)
    print("Transforming...", file=sys.stderr)
    loader = asyncio.create_task(_show_loading_messages())
    try:
        result = await client.transform(image, style)
    except TransformationError as e:
        print("ERROR:", e.message)
        return 1
    finally:
        loader.cancel()

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_path = out_dir / download_filename(style)
    try:
        data = decode_image(result)
    except EncodingError as e:
        print("ERROR: invalid result image:", e)
        return 1
    out_path.write_bytes(data)
    print("Saved:", out_path)
    return 0


def main():
    p = argparse.ArgumentParser(description="Give a photo the early-2000s treatment")
    p.add_argument("photo", help="PNG, JPEG or WEBP photo")
    p.add_argument("--style", choices=[s.value for s in TransformStyle], default=TransformStyle.LOFI.value)
    p.add_argument("--relay-url", default=None, help="Relay endpoint (default: RELAY_URL setting)")
    p.add_argument("--out", default=".", help="Directory to write the result into")
    args = p.parse_args()
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
