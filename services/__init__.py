from .encoder import decode_image, encode_file, encode_image, parse_data_url
from .relay import RelayResponse, RelayService, parse_transform_request

__all__ = [
    "RelayResponse",
    "RelayService",
    "decode_image",
    "encode_file",
    "encode_image",
    "parse_data_url",
    "parse_transform_request",
]
